class CalnepError(Exception):
    """Base error."""

class RangeError(CalnepError, ValueError):
    """Raised when a year, month or day falls outside the supported calendar range."""

class TableIntegrityError(CalnepError):
    """Raised when the embedded month-length data violates its invariants."""
