"""Tests for the pure utility modules (dates and numbers)."""

from __future__ import annotations

import inspect
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest
from freezegun import freeze_time

from custom_components.dailyquest.tracker import DailyQuestTracker
from custom_components.dailyquest.utils import dt_utils
from custom_components.dailyquest.utils.math_utils import (
    calculate_percentage,
    clamp,
    coerce_number,
)

PARIS = ZoneInfo("Europe/Paris")


class TestDateKeys:
    """Test local calendar day keys."""

    def test_date_key_converts_aware_datetimes(self) -> None:
        """Late UTC evening is already tomorrow in Paris."""
        moment = datetime(2026, 10, 19, 23, 30, tzinfo=UTC)
        assert dt_utils.date_key(moment, PARIS) == "2026-10-20"
        assert dt_utils.date_key(moment, ZoneInfo("UTC")) == "2026-10-19"

    def test_date_key_naive_and_date(self) -> None:
        """Naive datetimes are taken as local; dates are formatted as-is."""
        assert dt_utils.date_key(datetime(2026, 10, 19, 23, 30), PARIS) == "2026-10-19"
        assert dt_utils.date_key(date(2026, 1, 2)) == "2026-01-02"

    def test_default_timezone_is_used(self) -> None:
        """date_key without tz follows the configured default."""
        previous = dt_utils.get_default_timezone()
        try:
            dt_utils.set_default_timezone(PARIS)
            moment = datetime(2026, 10, 19, 23, 30, tzinfo=UTC)
            assert dt_utils.date_key(moment) == "2026-10-20"
        finally:
            dt_utils.set_default_timezone(previous)

    def test_parse_and_validate(self) -> None:
        """Only real calendar dates in YYYY-MM-DD form are keys."""
        assert dt_utils.parse_date_key("2026-10-19") == date(2026, 10, 19)
        assert dt_utils.parse_date_key("2026-02-30") is None
        assert dt_utils.parse_date_key(None) is None
        assert dt_utils.is_date_key("2026-10-19")
        assert not dt_utils.is_date_key("2026-1-9")
        assert not dt_utils.is_date_key(20261019)

    def test_shift_across_month_and_year(self) -> None:
        """Shifting follows the calendar."""
        assert dt_utils.shift_date_key("2026-10-31", 1) == "2026-11-01"
        assert dt_utils.shift_date_key("2026-01-01", -1) == "2025-12-31"

    def test_shift_invalid_key(self) -> None:
        """Malformed keys raise ValueError."""
        with pytest.raises(ValueError):
            dt_utils.shift_date_key("yesterday", 1)

    def test_recent_date_keys(self) -> None:
        """Keys run oldest first and end at the given day."""
        assert dt_utils.recent_date_keys("2026-10-19", 3) == [
            "2026-10-17",
            "2026-10-18",
            "2026-10-19",
        ]
        assert dt_utils.recent_date_keys("2026-10-19", 0) == []

    def test_now_is_aware_utc(self) -> None:
        """The clock helper returns an aware UTC datetime and drives the tracker."""
        with freeze_time("2026-10-19 23:30:00"):
            now = dt_utils.dt_now_utc()

        assert now == datetime(2026, 10, 19, 23, 30, tzinfo=UTC)
        assert now.tzinfo is UTC
        default_clock = inspect.signature(DailyQuestTracker).parameters["now_fn"]
        assert default_clock.default is dt_utils.dt_now_utc


class TestNumbers:
    """Test numeric helpers."""

    def test_clamp(self) -> None:
        """Values are held within bounds."""
        assert clamp(999, 0, 16) == 16
        assert clamp(-3, 0, 16) == 0
        assert clamp(5, 0, 16) == 5

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (8, 8),
            (2.5, 2.5),
            (10.0, 10),
            ("12", 12),
            (" 2.5 ", 2.5),
            ("abc", None),
            (True, None),
            (None, None),
            (float("nan"), None),
            (float("inf"), None),
            ([1], None),
        ],
    )
    def test_coerce_number(self, raw, expected) -> None:
        """Numeric input is accepted, everything else is None."""
        assert coerce_number(raw) == expected

    def test_coerce_number_integral_float_is_int(self) -> None:
        """Whole floats come back as ints."""
        assert isinstance(coerce_number(10.0), int)

    def test_calculate_percentage(self) -> None:
        """Percentages are rounded and capped at 100."""
        assert calculate_percentage(50, 100) == 50.0
        assert calculate_percentage(1, 3) == 33.33
        assert calculate_percentage(16, 8) == 100.0
        assert calculate_percentage(5, 0) == 0.0
