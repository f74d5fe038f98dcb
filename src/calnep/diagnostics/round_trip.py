from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import calnep
from calnep.core.errors import CalnepError


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, span))


def ad_round_trip(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """AD -> BS -> AD on ``N`` random days. Returns the failure count."""
    rng = random.Random(seed)
    failures = 0
    for _ in range(N):
        d0 = random_date(rng, start, end)
        try:
            bs = calnep.from_date(d0)
            back = calnep.convert_to_ad(bs.year, bs.month, bs.day).as_date()
        except CalnepError as e:
            back = None
            err = str(e)
        else:
            err = ""
        if back != d0:
            failures += 1
            print("\nFAIL (AD -> BS -> AD)")
            print("d0:", d0)
            print("back:", back, err)
            if failures >= max_failures:
                return failures
    return failures


def bs_round_trip(N: int, seed: int, *, max_failures: int) -> int:
    """BS -> AD -> BS on ``N`` random BS days. Returns the failure count."""
    rng = random.Random(seed)
    failures = 0
    for _ in range(N):
        y = rng.randint(calnep.BS_YEAR_MIN, calnep.BS_YEAR_MAX)
        m = rng.randint(1, 12)
        d = rng.randint(1, calnep.total_days_in_month(y, m))
        ad = calnep.convert_to_ad(y, m, d)
        try:
            back = calnep.convert_to_bs(ad.year, ad.month, ad.day)
        except CalnepError:
            # AD years past the supported range cannot come back
            if ad.year > calnep.AD_YEAR_MAX:
                continue
            raise
        if back.ymd() != (y, m, d):
            failures += 1
            print("\nFAIL (BS -> AD -> BS)")
            print("bs:", (y, m, d))
            print("ad:", ad)
            print("back:", back)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests between BS and AD.")
    p.add_argument("--N", type=int, default=500, help="Trials per direction.")
    p.add_argument("--start", type=str, default="1913-04-13", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2043-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per direction.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    print("Testing AD -> BS -> AD ...")
    total_fail = ad_round_trip(args.N, start, end, args.seed, max_failures=args.max_failures)
    print("Testing BS -> AD -> BS ...")
    total_fail += bs_round_trip(args.N, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
