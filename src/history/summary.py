"""
Summary statistics for an enriched contest sequence.

The sequence is expected in the order produced by `transform`
(most recent contest first).
"""

from dataclasses import dataclass, field

import pandas as pd

from src.config import BASELINE_RATING, MAX_PROBLEMS_PER_CONTEST


@dataclass(frozen=True)
class Summary:
    """Headline numbers for the summary cards."""
    current_rating: float
    peak_rating: float
    total_contests: int
    solve_histogram: dict[int, int] = field(default_factory=dict)
    latest_change: float = 0.0


def solve_histogram(entries: pd.DataFrame, max_problems: int = MAX_PROBLEMS_PER_CONTEST) -> dict[int, int]:
    """
    Count contests by number of problems solved.

    Args:
        entries: Enriched entries
        max_problems: Highest solved-count bucket (inclusive)

    Returns:
        Dict with keys 0..max_problems; counts outside that range are dropped
    """
    histogram = {solved: 0 for solved in range(max_problems + 1)}
    if entries.empty:
        return histogram

    for solved, count in entries['problems_solved'].value_counts().items():
        solved = int(solved)
        if solved in histogram:
            histogram[solved] = int(count)

    return histogram


def summarize(entries: pd.DataFrame, baseline: float = BASELINE_RATING,
              max_problems: int = MAX_PROBLEMS_PER_CONTEST) -> Summary:
    """
    Compute current/peak rating, contest count and solve distribution.

    Empty entries produce a baseline-valued summary with an all-zero histogram.
    """
    histogram = solve_histogram(entries, max_problems)

    if entries.empty:
        return Summary(
            current_rating=float(baseline),
            peak_rating=float(baseline),
            total_contests=0,
            solve_histogram=histogram,
        )

    latest = entries.iloc[0]
    return Summary(
        current_rating=float(latest['rating']),
        peak_rating=float(entries['rating'].max()),
        total_contests=len(entries),
        solve_histogram=histogram,
        latest_change=float(latest['rating_change']),
    )
