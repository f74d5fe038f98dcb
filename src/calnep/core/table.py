"""
calnep.core.table
-----------------
Immutable view over the embedded Bikram Sambat month-length data.

BS month lengths are fixed each year from the panchang rather than by a rule,
so every conversion reads them from this table. The table is validated once
at import; a malformed row is a data bug and fails loudly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from .config import DEFAULT_BOUNDS, CalendarBounds
from .errors import RangeError, TableIntegrityError

MonthRow = Tuple[int, int, int, int, int, int, int, int, int, int, int, int]


class MonthLengthTable:
    def __init__(self, data: Mapping[int, Sequence[int]], bounds: CalendarBounds = DEFAULT_BOUNDS):
        rows: Dict[int, MonthRow] = {}
        for year, lengths in data.items():
            row = tuple(int(x) for x in lengths)
            if len(row) != 12:
                raise TableIntegrityError(f"BS {year}: expected 12 month lengths, got {len(row)}")
            if any(not (29 <= x <= 32) for x in row):
                raise TableIntegrityError(f"BS {year}: month length outside 29..32: {row}")
            if sum(row) not in (365, 366):
                raise TableIntegrityError(f"BS {year}: year length {sum(row)} is not 365 or 366")
            rows[int(year)] = row  # type: ignore[assignment]

        missing = [y for y in bounds.bs_years() if y not in rows]
        if missing:
            raise TableIntegrityError(f"Missing BS years in month-length table: {missing}")

        self._rows: Mapping[int, MonthRow] = MappingProxyType(rows)
        self.bounds = bounds

    # ---------------------------------------------------------
    # Lookup
    # ---------------------------------------------------------

    def __contains__(self, year: object) -> bool:
        return isinstance(year, int) and self.bounds.bs_year_min <= year <= self.bounds.bs_year_max

    def years(self) -> Iterator[int]:
        return iter(self.bounds.bs_years())

    def row(self, year: int) -> MonthRow:
        if year not in self:
            raise RangeError(
                f"BS year {year} is outside the supported range "
                f"{self.bounds.bs_year_min}..{self.bounds.bs_year_max}"
            )
        return self._rows[year]

    def length_of(self, year: int, month: int) -> int:
        """Days in BS ``month`` (1..12) of ``year``."""
        if not (1 <= month <= 12):
            raise RangeError(f"Invalid month {month}. Must be between 1 and 12.")
        return self.row(year)[month - 1]

    def year_length(self, year: int) -> int:
        return sum(self.row(year))

    # ---------------------------------------------------------
    # Offsets
    # ---------------------------------------------------------

    def days_before_month(self, year: int, month: int) -> int:
        """Sum of month lengths in ``year`` preceding ``month``."""
        if not (1 <= month <= 12):
            raise RangeError(f"Invalid month {month}. Must be between 1 and 12.")
        return sum(self.row(year)[: month - 1])

    def days_between_years(self, y0: int, y1: int) -> int:
        """Sum of full year lengths for years in [y0, y1). Negative if y1 < y0."""
        if y1 < y0:
            return -self.days_between_years(y1, y0)
        return sum(self.year_length(y) for y in range(y0, y1))


def _build() -> MonthLengthTable:
    from ..data.month_lengths import MONTH_LENGTHS
    return MonthLengthTable(MONTH_LENGTHS)


MONTH_LENGTH_TABLE = _build()
