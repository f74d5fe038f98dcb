from __future__ import annotations

import argparse
from datetime import timedelta

import calnep
from calnep.locale.names import Language, NameFormat


def dow_header(language: Language = Language.ENGLISH) -> str:
    names = [calnep.weekday_name(i, NameFormat.MEDIUM, language) for i in range(1, 8)]
    return " ".join(n.ljust(6) for n in names).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def render_grid(title: str, weeks: list[list[tuple[str, str]]], language: Language = Language.ENGLISH) -> str:
    header = dow_header(language)
    lines = [title, header, "-" * len(header)]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    lines.append("")
    return "\n".join(lines)


def month_weeks(year: int, month: int, *, nepali: bool = False) -> tuple[calnep.MonthSummary, list[list[tuple[str, str]]]]:
    """Sunday-first week rows for a BS month: BS day on top, AD mm-dd below."""
    s = calnep.month_summary(year, month)
    ad0 = calnep.convert_to_ad(s.year, s.month, 1).as_date()

    def digits(x: str) -> str:
        return calnep.to_nepali_digits(x) if nepali else x

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(s.leading_blanks):
        wk.append(cell("", ""))
    for i in range(s.days_in_month):
        ad = ad0 + timedelta(days=i)
        wk.append(cell(digits(f"{i + 1:2d}"), digits(f"{ad.month:02d}-{ad.day:02d}")))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return s, weeks


def bs_month_calendar(year: int, month: int, *, offset: int = 0, nepali: bool = False) -> str:
    s = calnep.month_summary(year, month, offset)
    s, weeks = month_weeks(s.year, s.month, nepali=nepali)
    language = Language.NEPALI if nepali else Language.ENGLISH
    name = calnep.month_name(s.month, NameFormat.FULL, language)
    ad0 = calnep.convert_to_ad(s.year, s.month, 1).as_date()
    ad1 = ad0 + timedelta(days=s.days_in_month - 1)
    y = calnep.to_nepali_digits(str(s.year)) if nepali else str(s.year)
    title = f"BS {y} {name}   ({ad0} .. {ad1})"
    return render_grid(title, weeks, language)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a BS month calendar with paired Gregorian labels.")
    p.add_argument("year", type=int, nargs="?", help="BS year (default: current BS year)")
    p.add_argument("month", type=int, nargs="?", help="BS month 1..12 (default: current BS month)")
    p.add_argument("--offset", type=int, default=0, help="Shift by this many months first.")
    p.add_argument("--nepali", action="store_true", help="Use Devanagari digits and Nepali names.")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        t = calnep.today()
        year, month = t.year, t.month
    else:
        year, month = args.year, args.month

    print(bs_month_calendar(year, month, offset=args.offset, nepali=args.nepali))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
