from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarBounds:
    """
    Supported conversion range.

    The BS range is the span of the embedded month-length table; the AD range
    is the Gregorian years that overlap it. AD dates before the anchor day
    (1913-04-13) are rejected even though their year is in range.
    """
    bs_year_min: int = 1970
    bs_year_max: int = 2100
    ad_year_min: int = 1913
    ad_year_max: int = 2043

    def __post_init__(self) -> None:
        if self.bs_year_min > self.bs_year_max:
            raise ValueError("bs_year_min must be <= bs_year_max")
        if self.ad_year_min > self.ad_year_max:
            raise ValueError("ad_year_min must be <= ad_year_max")

    def bs_years(self) -> range:
        return range(self.bs_year_min, self.bs_year_max + 1)


DEFAULT_BOUNDS = CalendarBounds()

BS_YEAR_MIN = DEFAULT_BOUNDS.bs_year_min
BS_YEAR_MAX = DEFAULT_BOUNDS.bs_year_max
AD_YEAR_MIN = DEFAULT_BOUNDS.ad_year_min
AD_YEAR_MAX = DEFAULT_BOUNDS.ad_year_max
