"""
Dashboard request lifecycle.

The view is always in exactly one of four states:

    Idle ──submit──▶ Loading ──complete──▶ Loaded
      ▲                 │
      │                 └──────fail──────▶ Failed
      └────────────reset (from any state)───┘

A submit while another request is in flight supersedes it: each submit
draws a new request id, and completions carrying an older id are dropped.
"""

import sys
from pathlib import Path

# Enable both `python src/dashboard/state.py` and `python -m src.dashboard.state` execution.
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import itertools
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

import pandas as pd

from src.config import BASELINE_RATING, MAX_PROBLEMS_PER_CONTEST, FETCH_FAILED_MESSAGE
from src.history.pipeline import transform
from src.history.summary import Summary, summarize
from src.ingestion.leetcode_client import FetchFailed
from src.utils import setup_logging, normalize_handle, validate_handle

# --- Module Logger ---
logger = setup_logging(__name__)


@dataclass(frozen=True)
class Idle:
    """Nothing submitted yet, or the user went back to the search form."""
    status = "idle"


@dataclass(frozen=True)
class Loading:
    handle: str
    request_id: int
    status = "loading"


@dataclass(frozen=True)
class Failed:
    handle: str
    message: str
    status = "error"


@dataclass(frozen=True, eq=False)
class Loaded:
    handle: str
    summary: Summary
    entries: pd.DataFrame
    status = "success"


ViewState = Union[Idle, Loading, Failed, Loaded]


class DashboardSession:
    """
    Holds the current view state for one user session.

    The pipeline and aggregator run here, on the client side of the proxy
    boundary, so every completed request replaces the displayed result in full.
    """

    def __init__(self, baseline: float = BASELINE_RATING,
                 max_problems: int = MAX_PROBLEMS_PER_CONTEST):
        self.baseline = baseline
        self.max_problems = max_problems
        self.state: ViewState = Idle()
        self._request_ids = itertools.count(1)
        self._latest_request_id = 0

    @property
    def latest_request_id(self) -> int:
        return self._latest_request_id

    def submit(self, raw_handle: Optional[str]) -> Optional[int]:
        """
        Start a request for a handle.

        Blank input is ignored (returns None, state unchanged). An invalid
        handle moves straight to Failed without a request id.

        Returns:
            The new request id, or None if no request was started
        """
        handle = normalize_handle(raw_handle)
        if not handle:
            return None

        try:
            validate_handle(handle)
        except ValueError as e:
            self._latest_request_id = next(self._request_ids)
            self.state = Failed(handle=handle, message=str(e))
            return None

        request_id = next(self._request_ids)
        self._latest_request_id = request_id
        self.state = Loading(handle=handle, request_id=request_id)
        logger.info(f"Request {request_id} started for '{handle}'")
        return request_id

    def is_current(self, request_id: int) -> bool:
        """True if request_id is the latest request and its result is still pending."""
        return request_id == self._latest_request_id and isinstance(self.state, Loading)

    def complete(self, request_id: int, records: Iterable[dict]) -> bool:
        """
        Apply a successful upstream response.

        Returns:
            True if applied, False if the response was stale and discarded
        """
        if not self.is_current(request_id):
            logger.info(f"Discarding stale response for request {request_id}")
            return False

        entries = transform(records, baseline=self.baseline)
        summary = summarize(entries, baseline=self.baseline, max_problems=self.max_problems)
        self.state = Loaded(handle=self.state.handle, summary=summary, entries=entries)
        return True

    def fail(self, request_id: int, message: str = FETCH_FAILED_MESSAGE) -> bool:
        """
        Apply a failed upstream response; same staleness rule as complete().
        """
        if not self.is_current(request_id):
            logger.info(f"Discarding stale failure for request {request_id}")
            return False

        self.state = Failed(handle=self.state.handle, message=message)
        return True

    def reset(self) -> None:
        """Back to the search form; any in-flight request becomes stale."""
        self._latest_request_id = next(self._request_ids)
        self.state = Idle()

    def run(self, raw_handle: Optional[str], fetch: Callable[[str], list]) -> ViewState:
        """
        Submit a handle and resolve it with a blocking fetch.

        Args:
            raw_handle: User input
            fetch: Callable returning raw records for a handle, raising FetchFailed

        Returns:
            The resulting state
        """
        request_id = self.submit(raw_handle)
        if request_id is None:
            return self.state

        handle = self.state.handle
        try:
            records = fetch(handle)
        except FetchFailed as e:
            logger.warning(f"Request {request_id} for '{handle}' failed: {e}")
            self.fail(request_id)
        else:
            self.complete(request_id, records)
        return self.state
