"""
Data Ingestion

Modules:
- leetcode_client: Fetch raw contest history from the ranking service
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "fetch_contest_history":
        from src.ingestion.leetcode_client import fetch_contest_history
        return fetch_contest_history
    if name == "FetchFailed":
        from src.ingestion.leetcode_client import FetchFailed
        return FetchFailed
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
