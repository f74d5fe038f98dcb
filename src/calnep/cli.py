from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import CalnepError
from .core.types import CalendarDate, Era

_DATE_RE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    s = _to_ascii(s)
    if not _DATE_RE.match(s):
        raise SystemExit(f"Expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _to_ascii(s: str) -> str:
    from .locale.numerals import to_ascii_digits
    return to_ascii_digits(s)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def format_date(d: CalendarDate, *, nepali: bool = False) -> str:
    from .locale.names import Language, NameFormat, ad_month_name, month_name, weekday_name
    from .locale.numerals import to_nepali_digits

    lang = Language.NEPALI if nepali else Language.ENGLISH
    names = month_name if d.era is Era.BS else ad_month_name
    era = "BS" if d.era is Era.BS else "AD"
    lines = [
        f"{era} {d.year:04d}-{d.month:02d}-{d.day:02d}",
        f"  {weekday_name(d.weekday, NameFormat.FULL, lang)}, {names(d.month, NameFormat.FULL, lang)} {d.day} {d.year}",
        f"  day_of_year={d.day_of_year} week_of_year={d.week_of_year} "
        f"week_of_month={d.week_of_month} weekday_in_month={d.weekday_in_month}",
        f"  days_in_month={d.days_in_month} first_weekday={d.first_weekday} last_weekday={d.last_weekday}",
    ]
    out = "\n".join(lines)
    return to_nepali_digits(out) if nepali else out


def cmd_to_bs(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep to-bs", description="Gregorian -> Bikram Sambat")
    p.add_argument("date", help="YYYY-MM-DD (AD)")
    p.add_argument("--nepali", action="store_true", help="Nepali names and Devanagari digits")
    args = p.parse_args(argv)

    print(format_date(calnep.convert_to_bs(*_parse_ymd(args.date)), nepali=args.nepali))
    return 0


def cmd_to_ad(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep to-ad", description="Bikram Sambat -> Gregorian")
    p.add_argument("date", help="YYYY-MM-DD (BS); Devanagari digits accepted")
    p.add_argument("--nepali", action="store_true", help="Nepali names and Devanagari digits")
    args = p.parse_args(argv)

    print(format_date(calnep.convert_to_ad(*_parse_ymd(args.date)), nepali=args.nepali))
    return 0


def cmd_today(argv: list[str]) -> int:
    import calnep

    p = argparse.ArgumentParser(prog="calnep today", description="Today's date in Bikram Sambat")
    p.add_argument("--nepali", action="store_true")
    args = p.parse_args(argv)

    print(format_date(calnep.today(), nepali=args.nepali))
    return 0


def _dispatch(argv: list[str]) -> int:
    # Shorthand: `calnep YYYY-MM-DD ...` converts AD -> BS
    if argv and _DATE_RE.match(_to_ascii(argv[0])):
        return cmd_to_bs(argv)

    p = argparse.ArgumentParser(prog="calnep", description="Bikram Sambat calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-bs", help="Gregorian -> Bikram Sambat")
    sub.add_parser("to-ad", help="Bikram Sambat -> Gregorian")
    sub.add_parser("today", help="Today's BS date")
    sub.add_parser("month", help="Print a BS month calendar")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-years", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.cmd == "to-bs":
        return cmd_to_bs(rest)

    if args.cmd == "to-ad":
        return cmd_to_ad(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "month":
        return _run_module_main("calnep.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calnep.diagnostics.round_trip",
            "new-years": "calnep.diagnostics.new_years_table",
            "year-lengths": "calnep.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return _dispatch(argv)
    except CalnepError as e:
        print(f"calnep: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
