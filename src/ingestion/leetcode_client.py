"""
LeetCode Contest History Client

Queries the contest-ranking GraphQL service for one handle, either directly
or through the proxy in api/leetcode.py, and returns the raw
contest-participation records.

Every failure (transport error, bad status, undecodable body, GraphQL
errors, unknown handle, malformed record) is reported as FetchFailed.

Usage:
    python -m src.ingestion.leetcode_client <handle>

    Programmatic usage:
        from src.ingestion.leetcode_client import fetch_contest_history
        records = fetch_contest_history("some_handle")
"""

import sys
from pathlib import Path

# Add project root to path for direct script execution
_project_root = str(Path(__file__).parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from typing import Any, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.config import (
    LEETCODE_GRAPHQL_URL,
    CONTEST_HISTORY_QUERY,
    CONTEST_PROXY_URL,
    REQUEST_TIMEOUT,
    MAX_RETRIES,
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_CODES,
)
from src.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

UPSTREAM_HEADERS = {
    "Content-Type": "application/json",
    "Referer": "https://leetcode.com",
    "Origin": "https://leetcode.com",
}

# Fields every attended record must carry (non-null)
REQUIRED_FIELDS = (
    "attended",
    "rating",
    "ranking",
    "problemsSolved",
    "totalProblems",
    "finishTimeInSeconds",
    "trendDirection",
    "contest",
)
REQUIRED_CONTEST_FIELDS = ("title", "startTime")

# Fields the pipeline converts with int()/float()
NUMERIC_FIELDS = ("rating", "ranking", "problemsSolved", "totalProblems", "finishTimeInSeconds")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class FetchFailed(Exception):
    """Contest history could not be retrieved for a handle"""
    pass


def build_session(max_retries: int = MAX_RETRIES) -> requests.Session:
    """
    Create a requests session with bounded retry on transient failures.

    The GraphQL query is a read, so POST is retried like GET would be.
    """
    session = requests.Session()
    retries = Retry(
        total=max_retries,
        backoff_factor=RETRY_BACKOFF_FACTOR,
        status_forcelist=list(RETRY_STATUS_CODES),
        allowed_methods=frozenset({"POST"}),
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def build_query_payload(handle: str) -> dict:
    """GraphQL request body for one handle's contest history."""
    return {
        "query": CONTEST_HISTORY_QUERY,
        "variables": {"username": handle},
    }


def _decode_json(response: requests.Response, source: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise FetchFailed(f"{source} returned a non-JSON body (HTTP {response.status_code})") from e


def query_upstream(handle: str, session: Optional[requests.Session] = None,
                   url: str = LEETCODE_GRAPHQL_URL, timeout: float = REQUEST_TIMEOUT) -> Any:
    """
    Send the contest-history query upstream and return the decoded body as-is.

    The body is returned whatever the HTTP status, since GraphQL reports
    unknown handles inside the payload. Only transport failures and
    undecodable bodies raise.

    Raises:
        FetchFailed: If the request fails or the body is not JSON
    """
    session = session or build_session()
    try:
        response = session.post(
            url,
            json=build_query_payload(handle),
            headers=UPSTREAM_HEADERS,
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise FetchFailed(f"Upstream request failed: {e}") from e

    logger.debug(f"Upstream answered HTTP {response.status_code} for '{handle}'")
    return _decode_json(response, "Upstream")


def query_proxy(handle: str, proxy_url: str, session: Optional[requests.Session] = None,
                timeout: float = REQUEST_TIMEOUT) -> Any:
    """
    Ask the proxy endpoint for a handle's history; returns the upstream body it relays.

    Raises:
        FetchFailed: If the proxy is unreachable or reports an error
    """
    session = session or build_session()
    try:
        response = session.post(proxy_url, json={"username": handle}, timeout=timeout)
    except requests.RequestException as e:
        raise FetchFailed(f"Proxy request failed: {e}") from e

    payload = _decode_json(response, "Proxy")
    if response.status_code != 200:
        detail = payload.get("error") if isinstance(payload, dict) else None
        raise FetchFailed(f"Proxy answered HTTP {response.status_code}: {detail or 'no detail'}")
    return payload


def validate_record(record: Any, index: int) -> None:
    """
    Check that one upstream record has the fields the pipeline reads.

    Non-attended records only need the `attended` flag, since they are
    dropped before any other field is used.

    Raises:
        FetchFailed: If a required field is missing, null or of the wrong type
    """
    if not isinstance(record, dict):
        raise FetchFailed(f"Record {index} is not an object")
    if record.get("attended") is None:
        raise FetchFailed(f"Record {index} is missing 'attended'")
    if not record["attended"]:
        return

    missing = [name for name in REQUIRED_FIELDS if record.get(name) is None]
    contest = record.get("contest")
    if isinstance(contest, dict):
        missing += [f"contest.{name}" for name in REQUIRED_CONTEST_FIELDS if contest.get(name) is None]
    elif "contest" not in missing:
        missing.append("contest")

    if missing:
        raise FetchFailed(f"Record {index} is missing fields: {', '.join(missing)}")

    mistyped = [name for name in NUMERIC_FIELDS if not _is_number(record[name])]
    if not isinstance(contest["title"], str):
        mistyped.append("contest.title")
    if not _is_number(contest["startTime"]):
        mistyped.append("contest.startTime")

    if mistyped:
        raise FetchFailed(f"Record {index} has mistyped fields: {', '.join(mistyped)}")


def extract_records(payload: Any) -> List[dict]:
    """
    Pull the contest records out of a GraphQL response body.

    Raises:
        FetchFailed: If the payload carries no data, reports errors without
            a history list, or contains a malformed record
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise FetchFailed("Response has no data")

    history = payload["data"].get("userContestRankingHistory")
    if not isinstance(history, list):
        errors = payload.get("errors") or []
        messages = [e.get("message", "") for e in errors if isinstance(e, dict)]
        raise FetchFailed(f"No contest history in response: {'; '.join(messages) or 'history is null'}")

    for index, record in enumerate(history):
        validate_record(record, index)

    return history


def fetch_contest_history(handle: str, session: Optional[requests.Session] = None,
                          proxy_url: Optional[str] = CONTEST_PROXY_URL) -> List[dict]:
    """
    Fetch the raw contest records for a handle.

    Args:
        handle: Account identifier, already validated
        session: Optional requests session (a retrying one is built otherwise)
        proxy_url: Proxy endpoint to go through; None queries upstream directly

    Returns:
        List of upstream ContestRecord dicts, in upstream order

    Raises:
        FetchFailed: On any failure to obtain well-formed records
    """
    if proxy_url:
        payload = query_proxy(handle, proxy_url, session=session)
    else:
        payload = query_upstream(handle, session=session)

    records = extract_records(payload)
    logger.info(f"Fetched {len(records)} contest records for '{handle}'")
    return records


def main():
    """CLI entry point: print a handle's attended contests."""
    if len(sys.argv) != 2:
        print("Usage: python -m src.ingestion.leetcode_client <handle>")
        sys.exit(2)

    from src.history.pipeline import transform

    try:
        records = fetch_contest_history(sys.argv[1])
    except FetchFailed as e:
        logger.error(f"Fetch failed: {e}")
        sys.exit(1)

    entries = transform(records)
    print(entries[['contest_title', 'rating', 'prev_rating', 'rating_change']].to_string(index=False))


if __name__ == "__main__":
    main()
