"""
Plotly figures for the dashboard: rating trend and solve distribution.
"""

import pandas as pd
import plotly.graph_objects as go

from src.config import BASELINE_RATING, MAX_PROBLEMS_PER_CONTEST
from src.dashboard.formatting import histogram_label
from src.history.pipeline import chronological

# Static accent colors (theme-independent)
ACCENT_COLORS = {
    "primary": "#3B82F6",       # Blue - rating line, bars
    "success": "#10B981",       # Green - positive changes
    "danger": "#EF4444",        # Red - negative changes
    "peak": "#FACC15",          # Yellow - peak rating
}


def apply_plotly_style(fig):
    """Apply consistent styling to Plotly figures.

    Text colors are NOT explicitly set, allowing Streamlit to inject theme-aware
    colors automatically. Only structural elements (grids, backgrounds) use
    explicit neutral colors.
    """
    system_font = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'

    # Structural colors that work on both light and dark backgrounds
    grid_color = "rgba(128, 128, 128, 0.4)"
    line_color = "rgba(128, 128, 128, 0.3)"
    hover_bg = "rgba(50, 50, 50, 0.9)"

    label_size = 13
    body_size = 16

    axis_style = dict(
        gridcolor=grid_color,
        linecolor=line_color,
        tickfont=dict(family=system_font, size=label_size),
        title_font=dict(family=system_font, size=label_size),
        showgrid=True,
        zeroline=False,
    )

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(family=system_font, size=body_size),
        xaxis=axis_style,
        yaxis=axis_style,
        showlegend=False,
        hoverlabel=dict(
            bgcolor=hover_bg,
            bordercolor="rgba(0,0,0,0)",
            font=dict(color="#FFFFFF", family=system_font, size=14),
        ),
        dragmode=False,  # Disable pan/zoom to prevent scroll hijacking on mobile
        margin=dict(l=10, r=10, t=40, b=10),
    )

    return fig


def build_rating_trend_figure(entries: pd.DataFrame, baseline: float = BASELINE_RATING) -> go.Figure:
    """
    Line chart of rating after each contest, oldest -> newest.

    A dotted line marks the baseline rating. Empty entries give an empty figure.
    """
    fig = go.Figure()
    if entries.empty:
        return apply_plotly_style(fig)

    history = chronological(entries)
    dates = pd.to_datetime(history['contest_start_time'], unit='s')
    marker_colors = [
        ACCENT_COLORS["success"] if change >= 0 else ACCENT_COLORS["danger"]
        for change in history['rating_change']
    ]

    fig.add_trace(go.Scatter(
        x=dates,
        y=history['rating'],
        mode="lines+markers",
        line=dict(color=ACCENT_COLORS["primary"], width=3),
        marker=dict(size=8, color=marker_colors),
        customdata=history[['contest_title', 'rating_change']].to_numpy(),
        hovertemplate="%{customdata[0]}<br>Rating: %{y:.0f} (%{customdata[1]:+.0f})<extra></extra>",
    ))
    fig.add_hline(y=baseline, line_dash="dot", line_color="rgba(128, 128, 128, 0.6)")
    fig.update_layout(title="Rating Trend", yaxis_title="Rating")

    return apply_plotly_style(fig)


def build_solve_distribution_figure(histogram: dict[int, int],
                                    max_problems: int = MAX_PROBLEMS_PER_CONTEST) -> go.Figure:
    """Bar chart of contests per solved-count bucket (0..max_problems)."""
    buckets = list(range(max_problems + 1))
    fig = go.Figure(go.Bar(
        x=[histogram_label(n, max_problems) for n in buckets],
        y=[histogram.get(n, 0) for n in buckets],
        marker_color=ACCENT_COLORS["primary"],
        hovertemplate="%{x}: %{y} contests<extra></extra>",
    ))
    fig.update_layout(title="Performance Distribution", yaxis_title="Contests")

    return apply_plotly_style(fig)
