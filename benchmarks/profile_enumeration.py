"""Profile the enumeration engines across (family, n, r) combinations.

Measures wall-clock time, arrangements visited per second and element
writes per arrangement for every ``for_each_*`` entry point, alongside
the equivalent :mod:`itertools` generator (``combinations`` /
``permutations``) as a baseline.  The minimal-swap engines rearrange
the sequence in place, whereas itertools materialises a fresh tuple per
arrangement.

Usage::

    python benchmarks/profile_enumeration.py          # full grid
    python benchmarks/profile_enumeration.py --quick  # reduced grid for smoke test

Outputs:
    benchmarks/results/enumeration_profile.csv
    docs/image/enumeration-profile/rate_by_family.png
    docs/image/enumeration-profile/time_vs_count.png
"""

from __future__ import annotations

import argparse
import itertools
import platform
import sys
import time
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

# Ensure the package is importable when running from the repo root.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
from minswap import (  # noqa: E402
    CountingVisitor,
    count_each_circular_permutation,
    count_each_combination,
    count_each_permutation,
    count_each_reversible_circular_permutation,
    count_each_reversible_permutation,
    for_each_circular_permutation,
    for_each_combination,
    for_each_permutation,
    for_each_reversible_circular_permutation,
    for_each_reversible_permutation,
)

# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

FAMILIES = {
    "combination": (for_each_combination, count_each_combination),
    "permutation": (for_each_permutation, count_each_permutation),
    "circular": (for_each_circular_permutation, count_each_circular_permutation),
    "reversible": (for_each_reversible_permutation, count_each_reversible_permutation),
    "reversible_circular": (
        for_each_reversible_circular_permutation,
        count_each_reversible_circular_permutation,
    ),
}

BASELINES = {
    "combination": itertools.combinations,
    "permutation": itertools.permutations,
}

GRID_FULL = [(10, 3), (10, 5), (12, 6), (20, 4), (25, 5), (9, 9), (10, 8)]
GRID_QUICK = [(8, 3), (10, 4), (7, 7)]

# Skip cells that would take too long in pure Python.
MAX_COUNT = 5_000_000

REPEATS = 3

RESULTS_DIR = Path(__file__).resolve().parent / "results"
IMAGE_DIR = Path(__file__).resolve().parents[1] / "docs" / "image" / "enumeration-profile"


# ------------------------------------------------------------------ #
# Benchmark helpers
# ------------------------------------------------------------------ #


def _time_engine(family: str, n: int, r: int) -> float:
    """Time one full traversal of ``family`` over ``range(n)`` choose r."""
    for_each, _ = FAMILIES[family]
    seq = list(range(n))
    t0 = time.perf_counter()
    for_each(seq, r, CountingVisitor())
    elapsed = time.perf_counter() - t0
    assert seq == list(range(n)), f"{family} did not restore the sequence"
    return elapsed


class _WriteCountingList(list):
    """List that counts element assignments made by the engines."""

    writes = 0

    def __setitem__(self, index, value):
        self.writes += 1
        super().__setitem__(index, value)


def _count_writes(family: str, n: int, r: int) -> int:
    """Return the number of element writes in one full traversal."""
    for_each, _ = FAMILIES[family]
    seq = _WriteCountingList(range(n))
    for_each(seq, r, CountingVisitor())
    return seq.writes


def _time_baseline(family: str, n: int, r: int) -> float | None:
    generator = BASELINES.get(family)
    if generator is None:
        return None
    t0 = time.perf_counter()
    for _ in generator(range(n), r):
        pass
    return time.perf_counter() - t0


def run_grid(grid: list[tuple[int, int]], repeats: int = REPEATS) -> pd.DataFrame:
    """Run every family over the grid and return a DataFrame of results."""
    rows: list[dict] = []
    cells = [(family, n, r) for family in FAMILIES for n, r in grid]
    total = len(cells)

    for done, (family, n, r) in enumerate(cells, start=1):
        _, count_each = FAMILIES[family]
        count = count_each(r, n - r)
        if count > MAX_COUNT:
            print(f"  [{done:3d}/{total}] {family:20s} n={n:3d} r={r:3d} skipped ({count:,})")
            continue

        times = [_time_engine(family, n, r) for _ in range(repeats)]
        median_time = float(np.median(times))
        writes = _count_writes(family, n, r)

        baseline_times = [_time_baseline(family, n, r) for _ in range(repeats)]
        baseline = (
            float(np.median(baseline_times)) if baseline_times[0] is not None else np.nan
        )

        row = {
            "family": family,
            "n": n,
            "r": r,
            "count": count,
            "median_time_s": median_time,
            "rate_per_s": count / median_time if median_time > 0 else np.nan,
            "writes_per_arrangement": writes / count,
            "itertools_time_s": baseline,
        }
        rows.append(row)
        print(
            f"  [{done:3d}/{total}] {family:20s} n={n:3d} r={r:3d} "
            f"count={count:>10,d} time={median_time:.4f}s "
            f"rate={row['rate_per_s']:,.0f}/s "
            f"writes/arr={row['writes_per_arrangement']:.2f}"
        )

    return pd.DataFrame(rows)


# ------------------------------------------------------------------ #
# Chart generation
# ------------------------------------------------------------------ #


def _make_rate_by_family(df: pd.DataFrame, image_dir: Path) -> None:
    """Bar chart of the median visiting rate per family."""
    rates = df.groupby("family")["rate_per_s"].median().reindex(list(FAMILIES))

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(rates.index, rates.values, color="#4C72B0")
    ax.set_ylabel("Arrangements per second (median)")
    ax.set_title("Visiting Rate by Family")
    ax.grid(True, alpha=0.3, axis="y")
    plt.setp(ax.get_xticklabels(), rotation=20, ha="right")
    fig.tight_layout()
    fig.savefig(image_dir / "rate_by_family.png", dpi=150)
    plt.close(fig)
    print(f"  Saved {image_dir / 'rate_by_family.png'}")


def _make_time_vs_count(df: pd.DataFrame, image_dir: Path) -> None:
    """Log-log scatter of traversal time against arrangement count."""
    fig, ax = plt.subplots(figsize=(10, 6))
    for family in FAMILIES:
        subset = df[df["family"] == family].sort_values("count")
        if subset.empty:
            continue
        ax.plot(subset["count"], subset["median_time_s"], marker="o", label=family)

    baseline = df.dropna(subset=["itertools_time_s"]).sort_values("count")
    if not baseline.empty:
        ax.scatter(
            baseline["count"],
            baseline["itertools_time_s"],
            marker="x",
            color="black",
            label="itertools",
            zorder=5,
        )

    ax.set_xlabel("Arrangements visited")
    ax.set_ylabel("Median time (s)")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_title("Traversal Time vs. Arrangement Count")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(image_dir / "time_vs_count.png", dpi=150)
    plt.close(fig)
    print(f"  Saved {image_dir / 'time_vs_count.png'}")


# ------------------------------------------------------------------ #
# Main
# ------------------------------------------------------------------ #


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the enumeration engines")
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Run a reduced grid for quick smoke testing",
    )
    args = parser.parse_args()

    grid = GRID_QUICK if args.quick else GRID_FULL

    print("=" * 60)
    print("Enumeration Profile")
    print("=" * 60)
    print(f"  Platform:    {platform.platform()}")
    print(f"  Python:      {platform.python_version()}")
    print(f"  NumPy:       {np.__version__}")
    print(f"  (n, r):      {grid}")
    print(f"  Repeats:     {REPEATS}")
    print()

    print("Running benchmarks...")
    df = run_grid(grid, repeats=REPEATS)

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    csv_path = RESULTS_DIR / "enumeration_profile.csv"
    df.to_csv(csv_path, index=False)
    print(f"\nSaved results to {csv_path}")

    IMAGE_DIR.mkdir(parents=True, exist_ok=True)
    print("\nGenerating charts...")
    _make_rate_by_family(df, IMAGE_DIR)
    _make_time_vs_count(df, IMAGE_DIR)

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    columns = [
        "family",
        "n",
        "r",
        "count",
        "median_time_s",
        "writes_per_arrangement",
        "itertools_time_s",
    ]
    print(df[columns].to_string(index=False))


if __name__ == "__main__":
    main()
