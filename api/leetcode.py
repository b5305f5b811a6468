"""
Contest History Proxy

Accepts a handle, forwards the contest-history query upstream and relays
the upstream JSON body verbatim. No transformation happens here; the
pipeline runs on the dashboard side.

Usage:
    flask --app api.leetcode run
    OR
    python api/leetcode.py

    POST /api/leetcode  {"username": "<handle>"}
"""

import sys
from pathlib import Path

# Add project root to path for direct script execution
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from src.config import PROXY_ERROR_MESSAGE
from src.ingestion.leetcode_client import FetchFailed, build_session, query_upstream
from src.utils import setup_logging, normalize_handle, validate_handle

# --- Module Logger ---
logger = setup_logging(__name__)

app = Flask(__name__)


@app.route("/api/leetcode", methods=["POST"])
def leetcode_proxy():
    """Relay one contest-history query."""
    body = request.get_json(silent=True) or {}
    handle = normalize_handle(body.get("username") if isinstance(body, dict) else None)

    try:
        validate_handle(handle)
    except ValueError as e:
        logger.info(f"Rejected proxy request: {e}")
        return jsonify({"error": "username is required" if not handle else str(e)}), 400

    try:
        payload = query_upstream(handle, session=build_session())
    except FetchFailed as e:
        logger.warning(f"Proxy fetch failed for '{handle}': {e}")
        return jsonify({"error": PROXY_ERROR_MESSAGE}), 500

    return jsonify(payload), 200


if __name__ == "__main__":
    app.run(debug=False)
