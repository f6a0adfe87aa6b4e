#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

from calsaka.engines import saka


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calsaka[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calsaka[diagnostics]"') from e


def chaitra_weekday(year: int) -> int:
    """Weekday of Chaitra 1, 0=Sunday..6=Saturday."""
    return saka.day_of_week(year, 1, 1)


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        if metric == "weekday":
            y[i] = float(chaitra_weekday(int(Y)))
        elif metric == "chaitra-length":
            y[i] = float(saka.days_in_month(int(Y), 1))
        else:
            raise ValueError("metric must be 'weekday' or 'chaitra-length'")

    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Saka New Year (Chaitra 1) weekday or Chaitra length by year.")
    p.add_argument("--start-year", type=int, default=1800, help="First Saka year")
    p.add_argument("--end-year", type=int, default=2100, help="Last Saka year")
    p.add_argument("--outbase", default="saka_new_year_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("weekday", "chaitra-length"),
        default="weekday",
        help="Y-axis metric (default: weekday of Chaitra 1).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    x, y = build_series(np, args.start_year, args.end_year, metric=args.metric)
    leap = np.array([saka.days_in_month(int(Y), 1) == 31 for Y in x])

    ax.scatter(x[~leap], y[~leap], s=12, marker="o", c="tab:blue", alpha=0.5, label="Chaitra 30 days")
    ax.scatter(x[leap], y[leap], s=18, marker="o", facecolors="none", edgecolors="tab:red",
               linewidths=1.0, alpha=0.7, label="Chaitra 31 days")

    ax.set_xlabel("Saka year")
    if args.metric == "weekday":
        ax.set_ylabel("Weekday of Chaitra 1")
        ax.set_yticks(range(7))
        ax.set_yticklabels(saka.DAYS)
    else:
        ax.set_ylabel("Days in Chaitra")
        ax.set_yticks([30, 31])
    ax.set_title("Saka New Year (Chaitra 1)")
    ax.legend(loc="upper right", frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
