"""
Tests for the dashboard request lifecycle.
"""

import pytest

from src.config import FETCH_FAILED_MESSAGE, MAX_HANDLE_LENGTH
from src.dashboard.state import DashboardSession, Failed, Idle, Loaded, Loading
from src.ingestion.leetcode_client import FetchFailed, extract_records


class TestSubmit:
    """Tests for DashboardSession.submit."""

    def test_starts_idle(self):
        session = DashboardSession()
        assert isinstance(session.state, Idle)
        assert session.state.status == "idle"

    def test_submit_moves_to_loading(self):
        session = DashboardSession()
        request_id = session.submit("  alice  ")

        assert isinstance(session.state, Loading)
        assert session.state.handle == "alice"
        assert session.state.request_id == request_id

    def test_blank_handle_ignored(self):
        session = DashboardSession()
        assert session.submit("   ") is None
        assert session.submit(None) is None
        assert isinstance(session.state, Idle)

    def test_too_long_handle_fails_without_request(self):
        session = DashboardSession()
        assert session.submit("x" * (MAX_HANDLE_LENGTH + 1)) is None
        assert isinstance(session.state, Failed)

    def test_request_ids_increase(self):
        session = DashboardSession()
        first = session.submit("alice")
        second = session.submit("bob")
        assert second > first
        assert session.latest_request_id == second


class TestCompletion:
    """Tests for complete/fail and stale response handling."""

    def test_complete_loads_result(self, three_contests):
        session = DashboardSession(baseline=1500)
        request_id = session.submit("alice")

        assert session.complete(request_id, three_contests) is True
        state = session.state
        assert isinstance(state, Loaded)
        assert state.status == "success"
        assert state.handle == "alice"
        assert state.summary.current_rating == 1550
        assert state.entries['rating'].tolist() == [1550, 1600, 1500]

    def test_empty_history_is_success(self):
        session = DashboardSession(baseline=1500)
        request_id = session.submit("newcomer")
        session.complete(request_id, [])

        assert isinstance(session.state, Loaded)
        assert session.state.entries.empty
        assert session.state.summary.peak_rating == 1500

    def test_fail_sets_message(self):
        session = DashboardSession()
        request_id = session.submit("ghost")

        assert session.fail(request_id) is True
        assert isinstance(session.state, Failed)
        assert session.state.status == "error"
        assert session.state.message == FETCH_FAILED_MESSAGE

    def test_stale_response_discarded(self, record):
        session = DashboardSession()
        old = session.submit("alice")
        new = session.submit("bob")

        assert session.complete(old, [record(100, 1900)]) is False
        assert isinstance(session.state, Loading)
        assert session.state.handle == "bob"

        assert session.complete(new, [record(100, 1600)]) is True
        assert session.state.handle == "bob"
        assert session.state.summary.current_rating == 1600

    def test_stale_response_after_newer_completion(self, record):
        session = DashboardSession()
        old = session.submit("alice")
        new = session.submit("bob")
        session.complete(new, [record(100, 1600)])

        assert session.complete(old, [record(100, 1900)]) is False
        assert session.fail(old) is False
        assert session.state.summary.current_rating == 1600

    def test_failure_replaces_previous_result(self, three_contests):
        session = DashboardSession()
        session.complete(session.submit("alice"), three_contests)
        session.fail(session.submit("ghost"))

        assert isinstance(session.state, Failed)
        assert session.state.handle == "ghost"

    def test_duplicate_completion_ignored(self, three_contests):
        session = DashboardSession()
        request_id = session.submit("alice")
        session.complete(request_id, three_contests)
        assert session.fail(request_id) is False
        assert isinstance(session.state, Loaded)


class TestReset:
    """Tests for DashboardSession.reset."""

    def test_reset_returns_to_idle(self, three_contests):
        session = DashboardSession()
        session.complete(session.submit("alice"), three_contests)
        session.reset()
        assert isinstance(session.state, Idle)

    def test_reset_invalidates_in_flight(self, three_contests):
        session = DashboardSession()
        request_id = session.submit("alice")
        session.reset()

        assert session.complete(request_id, three_contests) is False
        assert isinstance(session.state, Idle)


class TestRun:
    """Tests for DashboardSession.run."""

    def test_success(self, three_contests):
        calls = []

        def fetch(handle):
            calls.append(handle)
            return three_contests

        session = DashboardSession()
        state = session.run(" alice ", fetch)

        assert calls == ["alice"]
        assert isinstance(state, Loaded)
        assert state.summary.total_contests == 3

    def test_fetch_failed(self):
        def fetch(handle):
            raise FetchFailed("boom")

        state = DashboardSession().run("ghost", fetch)
        assert isinstance(state, Failed)
        assert state.message == FETCH_FAILED_MESSAGE

    def test_mistyped_upstream_record_fails(self, record):
        def fetch(handle):
            payload = {"data": {"userContestRankingHistory": [record(100, "n/a")]}}
            return extract_records(payload)

        session = DashboardSession()
        state = session.run("alice", fetch)

        assert isinstance(state, Failed)
        assert state.message == FETCH_FAILED_MESSAGE
        assert not session.is_current(session.latest_request_id)

    def test_blank_input_skips_fetch(self):
        def fetch(handle):
            pytest.fail("fetch should not be called")

        state = DashboardSession().run("", fetch)
        assert isinstance(state, Idle)

    def test_custom_histogram_bound(self, record):
        session = DashboardSession(max_problems=3)
        state = session.run("alice", lambda handle: [record(100, 1500, solved=3)])
        assert state.summary.solve_histogram == {0: 0, 1: 0, 2: 0, 3: 1}
