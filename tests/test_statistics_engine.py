"""Tests for StatisticsEngine - pure logic, no HA fixtures needed."""

from __future__ import annotations

from typing import Any

from custom_components.dailyquest import const
from custom_components.dailyquest.data_builders import build_day_record, build_mood
from custom_components.dailyquest.engines.statistics_engine import StatisticsEngine


def _history(*flags: tuple[str, bool]) -> dict[str, dict[str, Any]]:
    """History whose days carry only the sticky completed flag."""
    history: dict[str, dict[str, Any]] = {}
    for date_key, completed in flags:
        day = build_day_record(date_key)
        day[const.DATA_DAY_COMPLETED] = completed
        history[date_key] = day
    return history


class TestStreaks:
    """Test current and longest streaks."""

    def test_longest_streak_needs_consecutive_dates(self) -> None:
        """A gap in the calendar breaks the run."""
        history = _history(
            ("2026-10-10", True),
            ("2026-10-11", True),
            ("2026-10-12", True),
            ("2026-10-14", True),
            ("2026-10-15", True),
        )
        assert StatisticsEngine.longest_streak(history) == 3

    def test_longest_streak_broken_by_unfinished_day(self) -> None:
        """A recorded day without the flag ends the run."""
        history = _history(
            ("2026-10-10", True),
            ("2026-10-11", False),
            ("2026-10-12", True),
        )
        assert StatisticsEngine.longest_streak(history) == 1

    def test_current_streak_includes_perfect_today(self) -> None:
        """A perfect today extends the run."""
        history = _history(
            ("2026-10-17", True), ("2026-10-18", True), ("2026-10-19", True)
        )
        assert StatisticsEngine.current_streak(history, "2026-10-19") == 3

    def test_current_streak_keeps_yesterday_run(self) -> None:
        """An unfinished today does not reset the run ending yesterday."""
        history = _history(
            ("2026-10-17", True), ("2026-10-18", True), ("2026-10-19", False)
        )
        assert StatisticsEngine.current_streak(history, "2026-10-19") == 2

    def test_current_streak_without_today(self) -> None:
        """No today pointer means no streak."""
        history = _history(("2026-10-18", True))
        assert StatisticsEngine.current_streak(history, None) == 0


class TestStatistics:
    """Test the statistics bundle."""

    def test_empty_history(self) -> None:
        """Everything is zero without days."""
        stats = StatisticsEngine.compute_statistics({}, None)
        assert stats == {
            const.DATA_STATS_TOTAL_DAYS: 0,
            const.DATA_STATS_PERFECT_DAYS: 0,
            const.DATA_STATS_CURRENT_STREAK: 0,
            const.DATA_STATS_LONGEST_STREAK: 0,
            const.DATA_STATS_TOTAL_MISSIONS: 0,
        }

    def test_counts(self) -> None:
        """Totals come from the ledger."""
        history = _history(("2026-10-18", True), ("2026-10-19", False))
        history["2026-10-19"][const.DATA_DAY_MISSIONS] = {
            "a": {const.DATA_MISSION_COMPLETED: True},
            "b": {const.DATA_MISSION_COMPLETED: False},
        }
        stats = StatisticsEngine.compute_statistics(history, "2026-10-19")
        assert stats[const.DATA_STATS_TOTAL_DAYS] == 2
        assert stats[const.DATA_STATS_TOTAL_MISSIONS] == 1
        assert stats[const.DATA_STATS_CURRENT_STREAK] == 1
        assert stats[const.DATA_STATS_LONGEST_STREAK] == 1


class TestSummaries:
    """Test day status, week view and history rows."""

    def test_day_status(self) -> None:
        """Completed, partial and missed days."""
        assert StatisticsEngine.day_status(4, 4, 3, 3) == const.DAY_STATUS_COMPLETED
        assert StatisticsEngine.day_status(1, 4, 0, 3) == const.DAY_STATUS_PARTIAL
        assert StatisticsEngine.day_status(0, 4, 1, 3) == const.DAY_STATUS_PARTIAL
        assert StatisticsEngine.day_status(0, 4, 0, 3) == const.DAY_STATUS_MISSED

    def test_week_view_shape(self) -> None:
        """Seven days ending today, oldest first, absent days missed."""
        history = _history(("2026-10-19", False))
        history["2026-10-19"][const.DATA_DAY_GOALS]["water"] = 8
        week = StatisticsEngine.week_view(history, "2026-10-19")

        assert [entry["date"] for entry in week] == [
            "2026-10-13",
            "2026-10-14",
            "2026-10-15",
            "2026-10-16",
            "2026-10-17",
            "2026-10-18",
            "2026-10-19",
        ]
        today = week[-1]
        assert today["is_today"] is True
        assert today["weekday"] == "Mon"
        assert today["day_number"] == 19
        assert today["goals_completed"] == 1
        assert today["total_goals"] == 4
        assert today["total_missions"] == const.DEFAULT_MISSIONS_PER_DAY
        assert today["status"] == const.DAY_STATUS_PARTIAL
        assert week[0]["status"] == const.DAY_STATUS_MISSED
        assert not any(entry["is_today"] for entry in week[:-1])

    def test_week_view_custom_length(self) -> None:
        """days_back controls the number of entries."""
        assert len(StatisticsEngine.week_view({}, "2026-10-19", days_back=3)) == 3

    def test_history_rows_newest_first(self) -> None:
        """History rows run newest first and carry the mood."""
        history = _history(("2026-10-17", True), ("2026-10-19", False))
        history["2026-10-19"][const.DATA_DAY_MOOD] = build_mood("😊", "Good day")
        rows = StatisticsEngine.history_rows(history)
        assert [row["date"] for row in rows] == ["2026-10-19", "2026-10-17"]
        assert rows[0]["mood"] == {
            const.DATA_MOOD_EMOJI: "😊",
            const.DATA_MOOD_TEXT: "Good day",
        }
        assert rows[1]["completed"] is True
