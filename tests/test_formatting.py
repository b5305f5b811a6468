"""
Tests for display formatting helpers.
"""

import pytest

from src.dashboard.formatting import (
    TABLE_COLUMNS,
    build_history_table,
    format_contest_date,
    format_finish_time,
    format_rating_change,
    format_signed,
    histogram_label,
)
from src.history.pipeline import transform
from src.utils import normalize_handle, round_half_up, validate_handle


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize("value, expected", [
        (2.5, 3),
        (-2.5, -2),
        (1549.4, 1549),
        (-0.4, 0),
        (0, 0),
    ])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected


class TestFormatters:
    """Tests for single-value formatters."""

    def test_contest_date(self):
        # 2025-01-05 00:00:00 UTC
        assert format_contest_date(1736035200) == "5 Jan 2025"

    def test_contest_date_two_digit_day(self):
        # 2024-11-17 02:30:00 UTC
        assert format_contest_date(1731810600) == "17 Nov 2024"

    def test_finish_time(self):
        assert format_finish_time(3725) == "62m 5s"

    def test_finish_time_zero(self):
        assert format_finish_time(0) == "0m 0s"

    def test_rating_gain(self):
        assert format_rating_change(1500, 1600, 100) == "1500 → 1600 (+100)"

    def test_rating_loss(self):
        assert format_rating_change(1600, 1550, -50) == "1600 → 1550 (-50)"

    def test_no_change_is_positive(self):
        assert format_signed(0) == "+0"

    def test_small_loss_rounds_to_zero(self):
        assert format_signed(-0.4) == "0"

    def test_histogram_label(self):
        assert histogram_label(3) == "3 / 4 Solved"
        assert histogram_label(2, max_problems=5) == "2 / 5 Solved"


class TestHandleValidation:
    """Tests for handle normalization and validation."""

    def test_normalize_strips(self):
        assert normalize_handle("  alice \n") == "alice"

    def test_normalize_none(self):
        assert normalize_handle(None) == ""

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            validate_handle("")

    def test_too_long_rejected(self):
        with pytest.raises(ValueError, match="too long"):
            validate_handle("a" * 10, max_length=5)


class TestBuildHistoryTable:
    """Tests for build_history_table."""

    def test_rows_follow_entries(self, record):
        raw = [
            record(1736035200, 1560, solved=3, title="Weekly Contest 431", ranking=812, finish=2710),
            record(1735430400, 1500, solved=2, title="Weekly Contest 430", ranking=2011, finish=4500),
        ]
        table = build_history_table(transform(raw))

        assert list(table.columns) == TABLE_COLUMNS
        assert table['Contest'].tolist() == ["Weekly Contest 431", "Weekly Contest 430"]
        first = table.iloc[0]
        assert first['Date'] == "5 Jan 2025"
        assert first['Rank'] == 812
        assert first['Solved'] == "3 / 4"
        assert first['Finish'] == "45m 10s"
        assert first['Rating Change'] == "1500 → 1560 (+60)"

    def test_empty(self):
        table = build_history_table(transform([]))
        assert table.empty
        assert list(table.columns) == TABLE_COLUMNS
