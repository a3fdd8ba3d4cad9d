"""Statistics Engine - Derived reports over the day ledger.

This engine centralizes everything re-derivable from the history ledger:
- Totals (days tracked, perfect days, completed missions)
- Perfect-day streaks (current and longest)
- Week view summaries
- History table rows

Design Principles:
    - Stateless: operates on the ledger passed in, never mutates it
    - Full recomputation: statistics are a report, not incrementally maintained
    - Streaks follow the sticky ``completed`` flag; a missing date breaks a run
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .. import const
from ..catalog import DAILY_GOALS
from ..utils.dt_utils import parse_date_key, recent_date_keys, shift_date_key
from .gamification_engine import GamificationEngine

if TYPE_CHECKING:
    from ..catalog import GoalDefinition
    from ..type_defs import HistoryRowView, StatisticsData, WeekDayView


class StatisticsEngine:
    """Stateless engine for ledger statistics and summaries."""

    # ────────────────────────────────────────────────────────────────
    # Streaks
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def longest_streak(history: Mapping[str, Mapping[str, Any]]) -> int:
        """Longest run of consecutive calendar dates carrying the sticky flag."""
        longest = 0
        run = 0
        previous: str | None = None
        for date_key in sorted(history):
            if not history[date_key].get(const.DATA_DAY_COMPLETED):
                run = 0
                previous = date_key
                continue
            if (
                run
                and previous is not None
                and shift_date_key(previous, 1) == date_key
            ):
                run += 1
            else:
                run = 1
            longest = max(longest, run)
            previous = date_key
        return longest

    @staticmethod
    def current_streak(
        history: Mapping[str, Mapping[str, Any]], today_key: str | None
    ) -> int:
        """Run of perfect days ending today.

        When today is not (yet) perfect the run ending yesterday counts, so the
        streak does not drop to 0 in the morning.
        """
        if not today_key or parse_date_key(today_key) is None:
            return 0

        def _flag(key: str) -> bool:
            return bool((history.get(key) or {}).get(const.DATA_DAY_COMPLETED))

        cursor = today_key if _flag(today_key) else shift_date_key(today_key, -1)
        streak = 0
        while _flag(cursor):
            streak += 1
            cursor = shift_date_key(cursor, -1)
        return streak

    # ────────────────────────────────────────────────────────────────
    # Totals
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def compute_statistics(
        history: Mapping[str, Mapping[str, Any]],
        today_key: str | None,
        goals: Mapping[str, GoalDefinition] = DAILY_GOALS,
    ) -> StatisticsData:
        """Recompute every statistic from the ledger."""
        days = list(history.values())
        return {
            const.DATA_STATS_TOTAL_DAYS: len(history),
            const.DATA_STATS_PERFECT_DAYS: GamificationEngine.compute_metric(
                const.ACHIEVEMENT_METRIC_PERFECT_DAYS, days, goals=goals
            ),
            const.DATA_STATS_CURRENT_STREAK: StatisticsEngine.current_streak(
                history, today_key
            ),
            const.DATA_STATS_LONGEST_STREAK: StatisticsEngine.longest_streak(history),
            const.DATA_STATS_TOTAL_MISSIONS: GamificationEngine.compute_metric(
                const.ACHIEVEMENT_METRIC_MISSIONS_TOTAL, days, goals=goals
            ),
        }

    # ────────────────────────────────────────────────────────────────
    # Summaries
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def day_status(
        goals_completed: int,
        total_goals: int,
        missions_completed: int,
        total_missions: int,
    ) -> str:
        """Tri-state status: completed, partial or missed."""
        if goals_completed == total_goals and missions_completed == total_missions:
            return const.DAY_STATUS_COMPLETED
        if goals_completed > 0 or missions_completed > 0:
            return const.DAY_STATUS_PARTIAL
        return const.DAY_STATUS_MISSED

    @staticmethod
    def week_view(
        history: Mapping[str, Mapping[str, Any]],
        today_key: str,
        days_back: int = const.DEFAULT_WEEK_VIEW_DAYS,
        goals: Mapping[str, GoalDefinition] = DAILY_GOALS,
    ) -> list[WeekDayView]:
        """Per-day summaries for the ``days_back`` days ending today, oldest first.

        Days absent from the ledger read as empty. A day without missions
        reports the default mission count as its total.
        """
        summaries: list[WeekDayView] = []
        total_goals = len(goals)
        for date_key in recent_date_keys(today_key, max(days_back, 0)):
            day = history.get(date_key) or {}
            goals_completed = GamificationEngine.count_completed_goals(day, goals)
            missions_completed = GamificationEngine.count_completed_missions(day)
            total_missions = (
                len(day.get(const.DATA_DAY_MISSIONS) or {})
                or const.DEFAULT_MISSIONS_PER_DAY
            )
            parsed = parse_date_key(date_key)
            summaries.append(
                {
                    "date": date_key,
                    "weekday": parsed.strftime("%a") if parsed else "",
                    "day_number": parsed.day if parsed else 0,
                    "goals_completed": goals_completed,
                    "total_goals": total_goals,
                    "missions_completed": missions_completed,
                    "total_missions": total_missions,
                    "status": StatisticsEngine.day_status(
                        goals_completed,
                        total_goals,
                        missions_completed,
                        total_missions,
                    ),
                    "is_today": date_key == today_key,
                }
            )
        return summaries

    @staticmethod
    def history_rows(
        history: Mapping[str, Mapping[str, Any]],
        goals: Mapping[str, GoalDefinition] = DAILY_GOALS,
    ) -> list[HistoryRowView]:
        """All ledger days, newest first, with per-day counts and mood."""
        rows: list[HistoryRowView] = []
        for date_key in sorted(history, reverse=True):
            day = history[date_key]
            mood = day.get(const.DATA_DAY_MOOD) or {}
            rows.append(
                {
                    "date": date_key,
                    "goals_completed": GamificationEngine.count_completed_goals(
                        day, goals
                    ),
                    "total_goals": len(goals),
                    "missions_completed": GamificationEngine.count_completed_missions(
                        day
                    ),
                    "total_missions": len(day.get(const.DATA_DAY_MISSIONS) or {}),
                    "mood": {
                        const.DATA_MOOD_EMOJI: mood.get(const.DATA_MOOD_EMOJI),
                        const.DATA_MOOD_TEXT: mood.get(const.DATA_MOOD_TEXT, ""),
                    },
                    "completed": bool(day.get(const.DATA_DAY_COMPLETED)),
                }
            )
        return rows
