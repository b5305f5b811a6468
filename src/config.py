"""
Central configuration for the Contest History Dashboard.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

import os

# --- Upstream Configuration ---
LEETCODE_GRAPHQL_URL = "https://leetcode.com/graphql"
CONTEST_HISTORY_QUERY = """
query getContestHistory($username: String!) {
  userContestRankingHistory(username: $username) {
    attended
    rating
    ranking
    problemsSolved
    totalProblems
    finishTimeInSeconds
    trendDirection
    contest {
      title
      startTime
    }
  }
}
"""

# Optional proxy endpoint (api/leetcode.py). When unset, the upstream is queried directly.
CONTEST_PROXY_URL = os.environ.get("CONTEST_PROXY_URL") or None

# --- HTTP Configuration ---
REQUEST_TIMEOUT = 15  # Seconds per attempt
MAX_RETRIES = 3  # Retries on transient failures (connect errors, 429/5xx)
RETRY_BACKOFF_FACTOR = 0.5
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

# --- Rating Configuration ---
BASELINE_RATING = 1500  # Rating assumed before a user's first contest
MAX_PROBLEMS_PER_CONTEST = 4  # Upper bound of the solve histogram

# --- Input Validation ---
MAX_HANDLE_LENGTH = 64

# --- Messages ---
FETCH_FAILED_MESSAGE = "User not found or failed to fetch"
PROXY_ERROR_MESSAGE = "Failed to fetch contest history"
