"""
Shared fixtures for contest history tests.
"""

import pytest


def make_record(start_time, rating, attended=True, solved=2, title=None, ranking=1000,
                total=4, finish=3600, trend="UP"):
    """Build one upstream ContestRecord dict."""
    return {
        "attended": attended,
        "rating": rating,
        "ranking": ranking,
        "problemsSolved": solved,
        "totalProblems": total,
        "finishTimeInSeconds": finish,
        "trendDirection": trend,
        "contest": {
            "title": title or f"Weekly Contest {start_time}",
            "startTime": start_time,
        },
    }


@pytest.fixture
def record():
    return make_record


@pytest.fixture
def three_contests():
    """Three attended contests, deliberately out of chronological order."""
    return [
        make_record(300, 1550, solved=1),
        make_record(100, 1500, solved=3),
        make_record(200, 1600, solved=4),
    ]
