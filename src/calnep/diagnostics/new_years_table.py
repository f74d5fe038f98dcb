from __future__ import annotations

import argparse
from datetime import date

import calnep
from calnep.locale.names import NameFormat


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def new_year_row(year: int) -> tuple[int, date, str, int]:
    """(BS year, AD date of Baisakh 1, weekday name, BS year length)."""
    ad = calnep.convert_to_ad(year, 1, 1)
    length = sum(calnep.total_days_in_month(year, m) for m in range(1, 13))
    return year, ad.as_date(), calnep.weekday_name(ad.weekday, NameFormat.MEDIUM), length


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the Gregorian date of each BS new year (Baisakh 1).")
    p.add_argument("--from-year", type=int, default=2070)
    p.add_argument("--to-year", type=int, default=2090)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the AD column (default: iso).",
    )
    p.add_argument(
        "--list-day",
        type=int,
        default=0,
        help="After the table, list the years whose new year falls on this April day (0 = skip).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    headers = ["BS", "AD", "Day", "Days"]
    colw = [5, 10, 4, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[int] = []
    for Y in range(Y0, Y1 + 1):
        year, d, wd, n = new_year_row(Y)
        print("  ".join([str(year).ljust(colw[0]), fmt(d).ljust(colw[1]), wd.ljust(colw[2]), str(n).ljust(colw[3])]).rstrip())
        if args.list_day and d.month == 4 and d.day == args.list_day:
            hits.append(year)

    if args.list_day:
        print(f"\nNew years on April {args.list_day}:")
        print(", ".join(str(y) for y in hits) if hits else "(none)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
