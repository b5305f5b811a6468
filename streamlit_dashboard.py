import streamlit as st

from src.config import BASELINE_RATING, MAX_PROBLEMS_PER_CONTEST
from src.dashboard.charts import (
    ACCENT_COLORS,
    build_rating_trend_figure,
    build_solve_distribution_figure,
)
from src.dashboard.formatting import build_history_table, format_signed, histogram_label
from src.dashboard.state import DashboardSession, Failed, Idle, Loaded, Loading
from src.ingestion.leetcode_client import fetch_contest_history
from src.utils import round_half_up

# --- Page Configuration ---
st.set_page_config(
    page_title="LeetCode Contest Analytics",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# --- Design System ---
CUSTOM_CSS = """
<style>
    .summary-grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(180px, 1fr));
        gap: 1.5rem;
        margin-bottom: 2rem;
    }
    .summary-card {
        background: var(--secondary-background-color);
        border: 1px solid rgba(128,128,128,0.3);
        border-radius: 16px;
        padding: 1.5rem;
        box-shadow: 0 4px 20px rgba(0,0,0,0.15);
    }
    .summary-label {
        font-size: 0.8rem;
        font-weight: 500;
        opacity: 0.7;
        margin-bottom: 0.5rem;
    }
    .summary-value {
        font-size: 1.9rem;
        font-weight: 700;
    }
    .summary-delta {
        font-size: 0.9rem;
        font-weight: 600;
        margin-left: 0.5rem;
    }
    .solve-grid {
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(110px, 1fr));
        gap: 1rem;
        text-align: center;
        margin-bottom: 2rem;
    }
    .solve-cell {
        background: var(--secondary-background-color);
        border-radius: 12px;
        padding: 1rem;
    }
    .solve-count {
        font-size: 1.5rem;
        font-weight: 700;
    }
    .solve-label {
        font-size: 0.8rem;
        opacity: 0.7;
    }
</style>
"""


def generate_summary_cards(summary):
    """
    Generate HTML cards for current rating, peak rating and total contests.
    The current-rating card shows the latest change in green/red.
    """
    change_color = ACCENT_COLORS["success"] if summary.latest_change >= 0 else ACCENT_COLORS["danger"]
    arrow = "▲" if summary.latest_change >= 0 else "▼"
    delta_html = ""
    if summary.total_contests:
        delta_html = (
            f'<span class="summary-delta" style="color:{change_color};">'
            f'{arrow} {format_signed(summary.latest_change)}</span>'
        )

    cards = [
        ("Current Rating", f"{round_half_up(summary.current_rating)}{delta_html}", None),
        ("Peak Rating", str(round_half_up(summary.peak_rating)), ACCENT_COLORS["peak"]),
        ("Total Contests", str(summary.total_contests), ACCENT_COLORS["primary"]),
    ]

    parts = []
    for label, value, color in cards:
        style = f' style="color:{color};"' if color else ""
        parts.append(
            f'<div class="summary-card"><div class="summary-label">{label}</div>'
            f'<div class="summary-value"{style}>{value}</div></div>'
        )
    return f'<div class="summary-grid">{"".join(parts)}</div>'


def generate_solve_cells(histogram, max_problems=MAX_PROBLEMS_PER_CONTEST):
    """Generate the solve-distribution cells (one per solved-count bucket)."""
    cells = [
        f'<div class="solve-cell"><div class="solve-count" style="color:{ACCENT_COLORS["primary"]};">'
        f'{histogram.get(n, 0)}</div><div class="solve-label">{histogram_label(n, max_problems)}</div></div>'
        for n in range(max_problems + 1)
    ]
    return f'<div class="solve-grid">{"".join(cells)}</div>'


def get_session():
    """Return this browser session's DashboardSession, creating it on first run."""
    if "dashboard_session" not in st.session_state:
        st.session_state.dashboard_session = DashboardSession(
            baseline=BASELINE_RATING,
            max_problems=MAX_PROBLEMS_PER_CONTEST,
        )
    return st.session_state.dashboard_session


def run_search(session, handle):
    """Resolve one submit against the ranking service, showing a spinner meanwhile."""
    with st.spinner("Fetching contest data..."):
        session.run(handle, fetch_contest_history)
    if not isinstance(session.state, Idle):
        st.query_params["handle"] = session.state.handle


def render_search_form(session):
    st.title("LeetCode Contest Analytics")
    st.caption("Enter your LeetCode username and get detailed contest performance insights.")

    with st.form("search_form", clear_on_submit=False):
        col_input, col_button = st.columns([4, 1])
        with col_input:
            handle = st.text_input(
                "Username",
                placeholder="Enter username...",
                label_visibility="collapsed",
                key="handle_input",
            )
        with col_button:
            submitted = st.form_submit_button("Get Analytics", use_container_width=True)

    if submitted:
        run_search(session, handle)
        st.rerun()


def render_error(session, state):
    st.error(state.message)
    if st.button("Try Again"):
        session.reset()
        st.query_params.clear()
        st.rerun()


def render_dashboard(session, state):
    if st.button("← Search another username"):
        session.reset()
        st.query_params.clear()
        st.session_state.handle_input = ""
        st.rerun()

    st.subheader(f"Contest history for {state.handle}")
    st.html(generate_summary_cards(state.summary))

    if state.entries.empty:
        st.info("No attended contests yet.")
        return

    st.plotly_chart(
        build_rating_trend_figure(state.entries, baseline=session.baseline),
        use_container_width=True,
        config={"displayModeBar": False},
    )

    st.markdown("#### Performance Distribution")
    st.html(generate_solve_cells(state.summary.solve_histogram, session.max_problems))
    st.plotly_chart(
        build_solve_distribution_figure(state.summary.solve_histogram, session.max_problems),
        use_container_width=True,
        config={"displayModeBar": False},
    )

    st.dataframe(
        build_history_table(state.entries),
        width='stretch',
        hide_index=True,
        column_config={
            "Contest": st.column_config.TextColumn("Contest"),
            "Rank": st.column_config.NumberColumn("Rank", format="%d"),
        },
    )


# --- Main App ---
def main():
    st.html(CUSTOM_CSS)
    session = get_session()

    # Deep link: ?handle=<name> loads that handle on first visit
    url_handle = st.query_params.get("handle", None)
    if url_handle and isinstance(session.state, Idle) and not st.session_state.get("deep_link_loaded"):
        st.session_state.deep_link_loaded = True
        run_search(session, url_handle)

    state = session.state
    if isinstance(state, Idle):
        render_search_form(session)
    elif isinstance(state, Loading):
        st.info("Fetching contest data...")
        if st.button("Cancel"):
            session.reset()
            st.query_params.clear()
            st.rerun()
    elif isinstance(state, Failed):
        render_error(session, state)
    elif isinstance(state, Loaded):
        render_dashboard(session, state)


if __name__ == "__main__":
    main()
