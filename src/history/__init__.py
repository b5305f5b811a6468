"""
Contest History

Modules:
- pipeline: Filter, order and enrich raw contest records
- summary: Current/peak rating, contest count and solve distribution
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "transform":
        from src.history.pipeline import transform
        return transform
    if name == "summarize":
        from src.history.summary import summarize
        return summarize
    if name == "Summary":
        from src.history.summary import Summary
        return Summary
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
