"""Gamification Engine - Pure logic for badge and achievement evaluation.

This engine provides stateless, pure Python functions for:
- Goal and day completion predicates
- Per-day badge derivation (goal, mission and combo badges)
- Achievement metrics over the whole ledger (metric registry)
- Monotonic achievement level unlocking

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data.

Badge awarding is idempotent: badge ids are derived from the item and the date
("water_2026-10-19", "perfect_day_2026-10-19") and an id already present in the
badge list is never created again. ``evaluate_badges`` returns only the badges
created by the call; the caller appends them.

Achievement unlocking is monotonic: a level index, once unlocked, stays
unlocked even if the metric later reads lower after data edits.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from .. import const
from ..catalog import COMBO_BADGES, DAILY_GOALS, GOAL_BADGES

if TYPE_CHECKING:
    from ..catalog import AchievementDefinition, GoalDefinition
    from ..type_defs import (
        AchievementEvaluation,
        AchievementProgressData,
        BadgeRecordData,
        DayRecordData,
    )

# Metric handler signature: (history, goal_id, goals) -> int
MetricHandler = Callable[
    [Iterable[Mapping[str, Any]], "str | None", Mapping[str, "GoalDefinition"]], int
]


class GamificationEngine:
    """Pure logic engine for badges and achievements.

    All methods are static - no instance state. Day records are read, never
    written; badge and progress records are returned as new objects.
    """

    # =========================================================================
    # COMPLETION PREDICATES
    # =========================================================================

    @staticmethod
    def is_goal_complete(goal: GoalDefinition, value: Any) -> bool:
        """Counter: ``value >= target``. Checkbox: ``value is True``."""
        if goal.kind == const.GOAL_KIND_CHECKBOX:
            return value is True
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return value >= goal.target

    @staticmethod
    def count_completed_goals(
        day: Mapping[str, Any], goals: Mapping[str, GoalDefinition] = DAILY_GOALS
    ) -> int:
        """Number of catalog goals complete in ``day``."""
        values = day.get(const.DATA_DAY_GOALS) or {}
        return sum(
            1
            for goal_id, goal in goals.items()
            if GamificationEngine.is_goal_complete(goal, values.get(goal_id))
        )

    @staticmethod
    def all_goals_complete(
        day: Mapping[str, Any], goals: Mapping[str, GoalDefinition] = DAILY_GOALS
    ) -> bool:
        """True when every catalog goal is complete in ``day``."""
        return GamificationEngine.count_completed_goals(day, goals) == len(goals)

    @staticmethod
    def count_completed_missions(day: Mapping[str, Any]) -> int:
        """Number of completed mission instances in ``day``."""
        missions = day.get(const.DATA_DAY_MISSIONS) or {}
        return sum(
            1
            for mission in missions.values()
            if mission.get(const.DATA_MISSION_COMPLETED) is True
        )

    @staticmethod
    def all_missions_complete(day: Mapping[str, Any]) -> bool:
        """True when every mission of ``day`` is complete.

        A day without missions counts as complete.
        """
        missions = day.get(const.DATA_DAY_MISSIONS) or {}
        return GamificationEngine.count_completed_missions(day) == len(missions)

    @staticmethod
    def is_perfect_day(
        day: Mapping[str, Any], goals: Mapping[str, GoalDefinition] = DAILY_GOALS
    ) -> bool:
        """Fresh perfect-day predicate (ignores the sticky ``completed`` flag)."""
        return GamificationEngine.all_goals_complete(
            day, goals
        ) and GamificationEngine.all_missions_complete(day)

    # =========================================================================
    # BADGES
    # =========================================================================

    @staticmethod
    def badge_id(item_id: str, date_key: str) -> str:
        """Deterministic badge id for an item on a date."""
        return f"{item_id}_{date_key}"

    @staticmethod
    def evaluate_badges(
        day: DayRecordData,
        badges: Iterable[Mapping[str, Any]],
        goals: Mapping[str, GoalDefinition] = DAILY_GOALS,
    ) -> list[BadgeRecordData]:
        """Return the badges ``day`` earns that are not yet in ``badges``.

        Order: goal badges (catalog order), mission badges (day order), then
        goal master, mission hero and perfect day combo badges.
        """
        date_key = day[const.DATA_DAY_DATE]
        existing = {badge.get(const.DATA_BADGE_ID) for badge in badges}
        new_badges: list[BadgeRecordData] = []

        def _award(badge: BadgeRecordData) -> None:
            if badge[const.DATA_BADGE_ID] in existing:
                return
            existing.add(badge[const.DATA_BADGE_ID])
            new_badges.append(badge)

        values = day.get(const.DATA_DAY_GOALS) or {}
        for goal_id, goal in goals.items():
            if not GamificationEngine.is_goal_complete(goal, values.get(goal_id)):
                continue
            meta = GOAL_BADGES.get(goal_id)
            _award(
                {
                    const.DATA_BADGE_ID: GamificationEngine.badge_id(goal_id, date_key),
                    const.DATA_BADGE_TYPE: const.BADGE_TYPE_GOAL,
                    const.DATA_BADGE_ICON: meta.icon if meta else goal.icon,
                    const.DATA_BADGE_NAME: meta.name if meta else goal.title,
                    const.DATA_BADGE_DATE: date_key,
                    const.DATA_BADGE_GOAL_ID: goal_id,
                }
            )

        for mission_id, mission in (day.get(const.DATA_DAY_MISSIONS) or {}).items():
            if mission.get(const.DATA_MISSION_COMPLETED) is not True:
                continue
            _award(
                {
                    const.DATA_BADGE_ID: GamificationEngine.badge_id(
                        mission_id, date_key
                    ),
                    const.DATA_BADGE_TYPE: const.BADGE_TYPE_MISSION,
                    const.DATA_BADGE_ICON: mission.get(const.DATA_MISSION_ICON, ""),
                    const.DATA_BADGE_NAME: mission.get(const.DATA_MISSION_TITLE, ""),
                    const.DATA_BADGE_DATE: date_key,
                    const.DATA_BADGE_MISSION_ID: mission_id,
                }
            )

        goals_done = GamificationEngine.all_goals_complete(day, goals)
        missions_done = GamificationEngine.all_missions_complete(day)
        combos = (
            (const.COMBO_BADGE_GOAL_MASTER, goals_done),
            (const.COMBO_BADGE_MISSION_HERO, missions_done),
            (const.COMBO_BADGE_PERFECT_DAY, goals_done and missions_done),
        )
        for combo_id, earned in combos:
            if not earned:
                continue
            meta = COMBO_BADGES[combo_id]
            _award(
                {
                    const.DATA_BADGE_ID: GamificationEngine.badge_id(
                        combo_id, date_key
                    ),
                    const.DATA_BADGE_TYPE: const.BADGE_TYPE_COMBO,
                    const.DATA_BADGE_ICON: meta.icon,
                    const.DATA_BADGE_NAME: meta.name,
                    const.DATA_BADGE_DATE: date_key,
                }
            )

        return new_badges

    @staticmethod
    def combo_key(badge: Mapping[str, Any]) -> str:
        """Combo id of a combo badge record ("Perfect Day" → "perfect_day").

        Falls back to the badge name for records imported without a clean id.
        """
        badge_id = str(badge.get(const.DATA_BADGE_ID, ""))
        for combo_id in COMBO_BADGES:
            if badge_id.startswith(f"{combo_id}_"):
                return combo_id
        return str(badge.get(const.DATA_BADGE_NAME, "")).lower().replace(" ", "_")

    # =========================================================================
    # ACHIEVEMENT METRICS (registry keyed by metric type)
    # =========================================================================

    @staticmethod
    def _metric_goal_total(
        history: Iterable[Mapping[str, Any]],
        goal_id: str | None,
        goals: Mapping[str, GoalDefinition],
    ) -> int:
        """Sum of a goal's values over all days; ``True`` counts 1."""
        total: float = 0
        for day in history:
            value = (day.get(const.DATA_DAY_GOALS) or {}).get(goal_id)
            if value is True:
                total += 1
            elif isinstance(value, (int, float)) and not isinstance(value, bool):
                total += value
        return int(total)

    @staticmethod
    def _metric_goal_days(
        history: Iterable[Mapping[str, Any]],
        goal_id: str | None,
        goals: Mapping[str, GoalDefinition],
    ) -> int:
        """Days on which the goal's completion predicate held."""
        goal = goals.get(goal_id) if goal_id else None
        if goal is None:
            return 0
        return sum(
            1
            for day in history
            if GamificationEngine.is_goal_complete(
                goal, (day.get(const.DATA_DAY_GOALS) or {}).get(goal_id)
            )
        )

    @staticmethod
    def _metric_missions_total(
        history: Iterable[Mapping[str, Any]],
        goal_id: str | None,
        goals: Mapping[str, GoalDefinition],
    ) -> int:
        """Completed mission instances over all days."""
        return sum(GamificationEngine.count_completed_missions(day) for day in history)

    @staticmethod
    def _metric_perfect_days(
        history: Iterable[Mapping[str, Any]],
        goal_id: str | None,
        goals: Mapping[str, GoalDefinition],
    ) -> int:
        """Days whose stored goals and missions are all complete."""
        return sum(
            1 for day in history if GamificationEngine.is_perfect_day(day, goals)
        )

    _METRIC_HANDLERS: dict[str, MetricHandler] = {}

    @classmethod
    def _register_metrics(cls) -> None:
        """Populate the metric registry once."""
        if cls._METRIC_HANDLERS:
            return
        cls._METRIC_HANDLERS = {
            const.ACHIEVEMENT_METRIC_GOAL_TOTAL: cls._metric_goal_total,
            const.ACHIEVEMENT_METRIC_GOAL_DAYS: cls._metric_goal_days,
            const.ACHIEVEMENT_METRIC_MISSIONS_TOTAL: cls._metric_missions_total,
            const.ACHIEVEMENT_METRIC_PERFECT_DAYS: cls._metric_perfect_days,
        }

    @classmethod
    def compute_metric(
        cls,
        metric: str,
        history: Iterable[Mapping[str, Any]],
        goal_id: str | None = None,
        goals: Mapping[str, GoalDefinition] = DAILY_GOALS,
    ) -> int:
        """Compute a metric over the ledger; unknown metric types read 0."""
        cls._register_metrics()
        handler = cls._METRIC_HANDLERS.get(metric)
        if handler is None:
            return 0
        return handler(history, goal_id, goals)

    # =========================================================================
    # ACHIEVEMENTS
    # =========================================================================

    @staticmethod
    def evaluate_achievement(
        definition: AchievementDefinition,
        metric_value: int,
        progress: Mapping[str, Any] | None = None,
    ) -> AchievementEvaluation:
        """Unlock every level whose threshold ``metric_value`` meets.

        ``current_count`` always takes the fresh metric. Unlocked levels are
        kept even when the metric is now below their threshold, and
        ``current_level`` never drops.
        """
        progress = progress or {}
        unlocked = {
            int(index)
            for index in progress.get(const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS, [])
        }
        current_level = int(progress.get(const.DATA_ACHIEVEMENT_CURRENT_LEVEL, 0))

        newly_unlocked: list[int] = []
        for index, level in enumerate(definition.levels):
            if metric_value >= level.threshold and index not in unlocked:
                unlocked.add(index)
                newly_unlocked.append(index)
                current_level = max(current_level, index + 1)

        new_progress: AchievementProgressData = {
            const.DATA_ACHIEVEMENT_CURRENT_LEVEL: current_level,
            const.DATA_ACHIEVEMENT_CURRENT_COUNT: metric_value,
            const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS: sorted(unlocked),
        }
        return {"progress": new_progress, "newly_unlocked": newly_unlocked}
