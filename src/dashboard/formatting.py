"""
Display formatting for the contest history table and summary cards.
"""

from datetime import datetime, timezone

import pandas as pd

from src.config import MAX_PROBLEMS_PER_CONTEST
from src.utils import round_half_up

TABLE_COLUMNS = ["Contest", "Date", "Rank", "Solved", "Finish", "Rating Change"]


def format_contest_date(start_time: int) -> str:
    """Unix seconds -> '5 Jan 2025' (UTC)."""
    dt = datetime.fromtimestamp(int(start_time), tz=timezone.utc)
    return f"{dt.day} {dt:%b} {dt.year}"


def format_finish_time(seconds: int) -> str:
    """Seconds -> '{m}m {s}s'."""
    seconds = int(seconds)
    return f"{seconds // 60}m {seconds % 60}s"


def is_rating_gain(change: float) -> bool:
    return change >= 0


def format_signed(change: float) -> str:
    rounded = round_half_up(change)
    return f"+{rounded}" if is_rating_gain(change) else str(rounded)


def format_rating_change(prev_rating: float, rating: float, change: float) -> str:
    """'1500 → 1600 (+100)'"""
    return f"{round_half_up(prev_rating)} → {round_half_up(rating)} ({format_signed(change)})"


def histogram_label(solved: int, max_problems: int = MAX_PROBLEMS_PER_CONTEST) -> str:
    return f"{solved} / {max_problems} Solved"


def build_history_table(entries: pd.DataFrame) -> pd.DataFrame:
    """
    Build the display table for the enriched entries.

    Row order follows `entries` (most recent contest first).

    Args:
        entries: Enriched entries from the pipeline

    Returns:
        DataFrame with TABLE_COLUMNS, all values pre-formatted
    """
    if entries.empty:
        return pd.DataFrame(columns=TABLE_COLUMNS)

    rows = [
        {
            "Contest": row.contest_title,
            "Date": format_contest_date(row.contest_start_time),
            "Rank": int(row.ranking),
            "Solved": f"{int(row.problems_solved)} / {int(row.total_problems)}",
            "Finish": format_finish_time(row.finish_time_seconds),
            "Rating Change": format_rating_change(row.prev_rating, row.rating, row.rating_change),
        }
        for row in entries.itertuples(index=False)
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
