"""
Contest History Pipeline

Turns the raw contest-participation records returned by the upstream
ranking service into the enriched sequence shown on the dashboard:

1. keep attended contests only
2. stable-sort oldest -> newest by contest start time
3. derive the rating held before each contest and the change it produced
4. reverse, so the most recent contest comes first

The pipeline is pure: the input list is never mutated and the same input
always yields the same frame.

Usage:
    from src.history.pipeline import transform
    entries = transform(records, baseline=1500)
"""

import sys
from pathlib import Path

# Enable both `python src/history/pipeline.py` and `python -m src.history.pipeline` execution.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from typing import Iterable, Mapping

import pandas as pd

from src.config import BASELINE_RATING
from src.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

# Columns of a flattened upstream record, in display-friendly snake_case
RECORD_COLUMNS = [
    'attended',
    'rating',
    'ranking',
    'problems_solved',
    'total_problems',
    'finish_time_seconds',
    'trend_direction',
    'contest_title',
    'contest_start_time',
]

# Columns of an enriched entry
ENTRY_COLUMNS = RECORD_COLUMNS + ['prev_rating', 'rating_change']


def records_to_frame(records: Iterable[Mapping]) -> pd.DataFrame:
    """
    Flatten raw upstream records into a DataFrame.

    No filtering or reordering happens here; row order follows the input.

    Args:
        records: Upstream ContestRecord dicts (camelCase keys, nested `contest`)

    Returns:
        DataFrame with RECORD_COLUMNS
    """
    rows = [
        {
            'attended': bool(r['attended']),
            'rating': float(r['rating']),
            'ranking': int(r['ranking']),
            'problems_solved': int(r['problemsSolved']),
            'total_problems': int(r['totalProblems']),
            'finish_time_seconds': int(r['finishTimeInSeconds']),
            'trend_direction': r['trendDirection'],
            'contest_title': r['contest']['title'],
            'contest_start_time': int(r['contest']['startTime']),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def empty_entries() -> pd.DataFrame:
    """Return a zero-row enriched frame with every entry column present."""
    return pd.DataFrame(columns=ENTRY_COLUMNS)


def transform(records: Iterable[Mapping], baseline: float = BASELINE_RATING) -> pd.DataFrame:
    """
    Build the enriched contest sequence, most recent contest first.

    Args:
        records: Raw upstream records, in any order
        baseline: Rating assumed before the first attended contest

    Returns:
        DataFrame with ENTRY_COLUMNS in descending chronological order.
        Row 0 is the most recent attended contest.
    """
    # Non-attended records are dropped before conversion, so their
    # placeholder fields never reach the frame.
    records = list(records)
    attended = [r for r in records if r['attended']]
    if not attended:
        logger.debug(f"No attended contests among {len(records)} records")
        return empty_entries()

    # Stable sort: upstream order is kept for contests sharing a start time
    ascending = (
        records_to_frame(attended)
        .sort_values('contest_start_time', kind='stable')
        .reset_index(drop=True)
    )

    prev_rating = ascending['rating'].shift(1, fill_value=float(baseline))
    ascending = ascending.assign(
        prev_rating=prev_rating,
        rating_change=ascending['rating'] - prev_rating,
    )

    return ascending.iloc[::-1].reset_index(drop=True)


def chronological(entries: pd.DataFrame) -> pd.DataFrame:
    """Return enriched entries oldest -> newest (the order used for derivation)."""
    return entries.iloc[::-1].reset_index(drop=True)
