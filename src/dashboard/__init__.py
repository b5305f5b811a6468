"""
Dashboard Support

Modules:
- state: Request lifecycle (idle/loading/error/success) with last-request-wins
- formatting: Table and card formatting
- charts: Plotly figures
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "DashboardSession":
        from src.dashboard.state import DashboardSession
        return DashboardSession
    if name == "build_history_table":
        from src.dashboard.formatting import build_history_table
        return build_history_table
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
