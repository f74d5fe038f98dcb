from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional, Tuple

import calnep


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calnep[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calnep[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """BS years, AD day-of-year of each Baisakh 1, and BS year lengths."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    doy = np.empty_like(years, dtype=float)
    length = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = calnep.convert_to_ad(int(Y), 1, 1).as_date()
        doy[i] = float(day_of_year(d))
        length[i] = float(sum(calnep.total_days_in_month(int(Y), m) for m in range(1, 13)))

    return years, doy, length


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of BS new-year days and BS year lengths.")
    p.add_argument("--from-year", type=int, default=calnep.BS_YEAR_MIN)
    p.add_argument("--to-year", type=int, default=calnep.BS_YEAR_MAX)
    p.add_argument("--outbase", default="bs_year_lengths", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    years, doy, length = build_series(np, args.from_year, args.to_year)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(9.2, 6.4), sharex=True, constrained_layout=True)
    for ax in (ax0, ax1):
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax0.scatter(years, doy, s=12, c="tab:blue", alpha=0.6)
    ax0.set_ylabel("AD day-of-year of Baisakh 1")
    ax0.set_title("Bikram Sambat new year and year length")

    long_years = length > 365
    ax1.scatter(years[~long_years], length[~long_years], s=12, c="0.45", label="365 days")
    ax1.scatter(years[long_years], length[long_years], s=12, c="tab:red", label="366 days")
    ax1.set_ylabel("BS year length (days)")
    ax1.set_xlabel("BS year")
    ax1.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=150)
    plt.close(fig)
    print(f"Saved: {outbase}.png")
    print(f"Mean year length: {float(np.mean(length)):.4f} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
