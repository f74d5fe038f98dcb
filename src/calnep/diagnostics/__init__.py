"""Diagnostics package.

Command-line checks and reports over the conversion engines. Only
``year_lengths`` needs the optional ``diagnostics`` extra (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "year_lengths"]
