# File: tracker.py
"""Daily Quest tracker - owns the aggregate state and all of its mutations.

The tracker is the single entry point for reading and changing Daily Quest
state. It is synchronous and has NO Home Assistant dependencies: the clock is
an injected callable returning an aware datetime, and persistence is an
injected save callback receiving a snapshot of the whole document.

Every mutation runs the same pipeline, in order:

    ledger update (incl. sticky perfect-day flag)
      → badge derivation → achievement derivation → statistics
      → XP grants (only for first-time-today transitions)
      → save callback
      → result dict returned to the caller

XP is granted for a goal or mission only when its completion transition also
created the day's badge for it, so completing, un-completing and completing
again on the same day pays once. The perfect-day bonus follows the sticky
``completed`` flag of the day record.

Views never mutate state and always return copies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import copy
from datetime import datetime
import json
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from . import const
from .catalog import (
    ACHIEVEMENTS,
    COMBO_BADGES,
    DAILY_GOALS,
    DAILY_MISSIONS,
    GOAL_BADGES,
)
from .data_builders import (
    build_achievement_progress,
    build_day_record,
    build_default_state,
    build_mission_instance,
    build_mood,
    normalize_goal_value,
    normalize_storage_data,
)
from .engines import (
    GamificationEngine,
    MissionEngine,
    ProgressionEngine,
    StatisticsEngine,
)
from .utils.dt_utils import date_key, dt_now_utc, get_default_timezone
from .utils.math_utils import calculate_percentage, coerce_number

if TYPE_CHECKING:
    from .catalog import GoalDefinition, MissionDefinition
    from .type_defs import (
        AchievementView,
        BadgeLockView,
        BadgeRecordData,
        DateCheckResult,
        DayRecordData,
        GoalUpdateResult,
        HistoryRowView,
        LevelUpInfo,
        MissionToggleResult,
        MoodResult,
        ProgressionView,
        StatisticsData,
        StorageData,
        TodayView,
        WeekDayView,
        XPGrantResult,
    )

SaveCallback = Callable[["StorageData"], None]

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


def coerce_checkbox(raw: Any) -> bool:
    """Coerce checkbox input; strings like "on" or "true" count as checked."""
    if isinstance(raw, str):
        return raw.strip().lower() in _TRUE_STRINGS
    return bool(raw)


class DailyQuestTracker:
    """Stateful engine object for one Daily Quest instance."""

    def __init__(
        self,
        now_fn: Callable[[], datetime] = dt_now_utc,
        save_fn: SaveCallback | None = None,
        *,
        goals: Mapping[str, GoalDefinition] = DAILY_GOALS,
        mission_pool: Sequence[MissionDefinition] = DAILY_MISSIONS,
        missions_per_day: int = const.DEFAULT_MISSIONS_PER_DAY,
    ) -> None:
        """Initialize the tracker with an empty state.

        Args:
            now_fn: Clock returning an aware datetime; "today" is its local day.
            save_fn: Called with a snapshot of the document after each change.
            goals: Daily goal catalog.
            mission_pool: Mission catalog to draw daily missions from.
            missions_per_day: Missions selected per day.
        """
        self._now_fn = now_fn
        self._save_fn = save_fn
        self._goals = goals
        self._mission_pool = mission_pool
        self._missions_per_day = missions_per_day
        self._data: StorageData = build_default_state()

    # ----------------------------------------------------------------------------------
    # Properties
    # ----------------------------------------------------------------------------------

    @property
    def today_key(self) -> str | None:
        """Date key of the current day record (None before the first check)."""
        return self._data[const.DATA_TODAY]

    @property
    def data(self) -> StorageData:
        """Deep copy of the whole document."""
        return copy.deepcopy(self._data)

    # ----------------------------------------------------------------------------------
    # Lifecycle
    # ----------------------------------------------------------------------------------

    def on_app_start(self, stored: Mapping[str, Any] | None = None) -> StorageData:
        """Load persisted state (or start fresh) and run the first date check.

        A stored document that fails validation is logged and replaced by an
        empty state.
        """
        if stored is None:
            const.LOGGER.info("INFO: No stored Daily Quest data. Starting fresh")
            state = build_default_state()
        else:
            try:
                state = normalize_storage_data(stored, self._goals)
            except vol.Invalid as err:
                const.LOGGER.error(
                    "ERROR: Stored Daily Quest data is invalid (%s). Starting fresh",
                    err,
                )
                state = build_default_state()

        self._data = state
        self._recompute_achievements()
        self._ensure_today()
        self._recompute_statistics()
        self._save()
        const.LOGGER.debug(
            "DEBUG: Tracker started: %s days, %s badges, level %s",
            len(self._data[const.DATA_HISTORY]),
            len(self._data[const.DATA_BADGES]),
            self._data[const.DATA_PROGRESSION][const.DATA_PROGRESSION_CURRENT_LEVEL],
        )
        return self.data

    def ensure_today(self) -> DateCheckResult:
        """Date-rollover check; safe to call any number of times.

        Repoints ``today`` when the local calendar day changed, creates the day
        record if absent and selects missions only for a record without any.
        Existing progress is never reset.
        """
        result, changed = self._ensure_today()
        if changed:
            self._recompute_statistics()
            self._save()
        return result

    def reset(self) -> None:
        """Erase all data and start over with a fresh day."""
        const.LOGGER.warning("WARNING: Resetting all Daily Quest data")
        self._data = build_default_state()
        self._ensure_today()
        self._recompute_statistics()
        self._save()

    # ----------------------------------------------------------------------------------
    # Mutations
    # ----------------------------------------------------------------------------------

    def update_goal(self, goal_id: str, raw_value: Any) -> GoalUpdateResult:
        """Set today's value of a goal.

        Counter values are clamped to ``[0, 2 x target]``; non-numeric input
        leaves the goal untouched. Checkbox values are coerced to bool.
        """
        goal = self._goals.get(goal_id)
        if goal is None:
            const.LOGGER.warning("WARNING: update_goal: unknown goal '%s'", goal_id)
            return self._goal_result(goal_id, found=False)

        self.ensure_today()
        day = self._today_record()
        previous = day[const.DATA_DAY_GOALS].get(goal_id)

        if goal.is_counter:
            number = coerce_number(raw_value)
            if number is None:
                const.LOGGER.warning(
                    "WARNING: update_goal: ignoring non-numeric value %r for '%s'",
                    raw_value,
                    goal_id,
                )
                return self._goal_result(
                    goal_id,
                    value=previous,
                    completed=GamificationEngine.is_goal_complete(goal, previous),
                )
            new_value = normalize_goal_value(goal, number)
        else:
            new_value = coerce_checkbox(raw_value)

        was_completed = GamificationEngine.is_goal_complete(goal, previous)
        day[const.DATA_DAY_GOALS][goal_id] = new_value
        is_completed = GamificationEngine.is_goal_complete(goal, new_value)
        newly_completed = is_completed and not was_completed
        exceeded = goal.is_counter and new_value > goal.target

        perfect_day, new_badges = self._after_day_change(day)

        xp_results: list[XPGrantResult] = []
        goal_badge_id = GamificationEngine.badge_id(goal_id, day[const.DATA_DAY_DATE])
        if newly_completed and self._created(new_badges, goal_badge_id):
            amount = const.XP_REWARD_DAILY_GOAL
            reason = const.XP_REASON_GOAL_FMT.format(goal.title)
            if exceeded:
                amount += const.XP_REWARD_DAILY_GOAL_BONUS
                reason = const.XP_REASON_GOAL_EXCEEDED_FMT.format(goal.title)
            xp_results.append(self._grant_xp(amount, reason))
        if perfect_day:
            xp_results.append(
                self._grant_xp(const.XP_REWARD_PERFECT_DAY, const.XP_REASON_PERFECT_DAY)
            )

        self._save()
        const.LOGGER.debug(
            "DEBUG: Goal '%s' set to %s (completed=%s, newly=%s)",
            goal_id,
            new_value,
            is_completed,
            newly_completed,
        )
        return self._goal_result(
            goal_id,
            value=new_value,
            completed=is_completed,
            newly_completed=newly_completed,
            exceeded=exceeded,
            new_badges=new_badges,
            xp_results=xp_results,
            perfect_day=perfect_day,
        )

    def adjust_goal(self, goal_id: str, delta: Any) -> GoalUpdateResult:
        """Add ``delta`` to a counter goal; checkbox goals follow the sign."""
        goal = self._goals.get(goal_id)
        if goal is None:
            const.LOGGER.warning("WARNING: adjust_goal: unknown goal '%s'", goal_id)
            return self._goal_result(goal_id, found=False)

        self.ensure_today()
        current = self._today_record()[const.DATA_DAY_GOALS].get(goal_id)
        step = coerce_number(delta)
        if step is None:
            const.LOGGER.warning(
                "WARNING: adjust_goal: ignoring non-numeric delta %r for '%s'",
                delta,
                goal_id,
            )
            return self._goal_result(
                goal_id,
                value=current,
                completed=GamificationEngine.is_goal_complete(goal, current),
            )

        if goal.is_counter:
            return self.update_goal(goal_id, (coerce_number(current) or 0) + step)
        if step == 0:
            return self.update_goal(goal_id, current is True)
        return self.update_goal(goal_id, step > 0)

    def toggle_mission(self, mission_id: str) -> MissionToggleResult:
        """Flip completion of one of today's missions."""
        self.ensure_today()
        day = self._today_record()
        mission = day[const.DATA_DAY_MISSIONS].get(mission_id)
        if mission is None:
            const.LOGGER.warning(
                "WARNING: toggle_mission: '%s' is not one of today's missions",
                mission_id,
            )
            return self._mission_result(mission_id, found=False)

        was_completed = mission[const.DATA_MISSION_COMPLETED] is True
        mission[const.DATA_MISSION_COMPLETED] = not was_completed
        newly_completed = not was_completed

        perfect_day, new_badges = self._after_day_change(day)

        xp_results: list[XPGrantResult] = []
        mission_badge_id = GamificationEngine.badge_id(
            mission_id, day[const.DATA_DAY_DATE]
        )
        if newly_completed and self._created(new_badges, mission_badge_id):
            xp_results.append(
                self._grant_xp(
                    const.XP_REWARD_MISSION,
                    const.XP_REASON_MISSION_FMT.format(
                        mission[const.DATA_MISSION_TITLE] or mission_id
                    ),
                )
            )
        if perfect_day:
            xp_results.append(
                self._grant_xp(const.XP_REWARD_PERFECT_DAY, const.XP_REASON_PERFECT_DAY)
            )

        self._save()
        return self._mission_result(
            mission_id,
            completed=not was_completed,
            newly_completed=newly_completed,
            new_badges=new_badges,
            xp_results=xp_results,
            perfect_day=perfect_day,
        )

    def set_mood(self, emoji: str | None, text: str | None = "") -> MoodResult:
        """Overwrite today's mood."""
        self.ensure_today()
        day = self._today_record()
        day[const.DATA_DAY_MOOD] = build_mood(emoji, text)
        self._save()
        return {
            "date": day[const.DATA_DAY_DATE],
            "mood": copy.deepcopy(day[const.DATA_DAY_MOOD]),
        }

    def grant_xp(self, amount: Any, reason: str) -> XPGrantResult:
        """Grant XP outside the built-in triggers (positive integers only)."""
        result = self._grant_xp(amount, reason)
        if result["granted"]:
            self._save()
        return result

    # ----------------------------------------------------------------------------------
    # Views
    # ----------------------------------------------------------------------------------

    def get_today_view(self) -> TodayView:
        """Today's goals, missions, mood and completion flags."""
        day = self._today_record()
        goals_view = []
        for goal_id, goal in self._goals.items():
            value = day[const.DATA_DAY_GOALS].get(goal_id)
            if goal.is_counter:
                percentage = calculate_percentage(
                    coerce_number(value) or 0, goal.target
                )
            else:
                percentage = 100.0 if value is True else 0.0
            goals_view.append(
                {
                    "goal_id": goal_id,
                    "icon": goal.icon,
                    "title": goal.title,
                    "target": goal.target,
                    "unit": goal.unit,
                    "kind": goal.kind,
                    "value": value,
                    "completed": GamificationEngine.is_goal_complete(goal, value),
                    "percentage": percentage,
                }
            )
        missions = day[const.DATA_DAY_MISSIONS]
        return {
            "date": day[const.DATA_DAY_DATE],
            "goals": goals_view,
            "missions": [copy.deepcopy(mission) for mission in missions.values()],
            "mood": copy.deepcopy(day[const.DATA_DAY_MOOD]),
            "goals_completed": GamificationEngine.count_completed_goals(
                day, self._goals
            ),
            "total_goals": len(self._goals),
            "missions_completed": GamificationEngine.count_completed_missions(day),
            "total_missions": len(missions),
            "perfect_day": GamificationEngine.is_perfect_day(day, self._goals),
            "celebrated": day[const.DATA_DAY_COMPLETED],
        }

    def get_week_view(
        self, days_back: int = const.DEFAULT_WEEK_VIEW_DAYS
    ) -> list[WeekDayView]:
        """Summaries of the ``days_back`` days ending today, oldest first."""
        return StatisticsEngine.week_view(
            self._data[const.DATA_HISTORY],
            self._current_key(),
            days_back,
            self._goals,
        )

    def get_history_view(self) -> list[HistoryRowView]:
        """Every recorded day, newest first."""
        return StatisticsEngine.history_rows(
            self._data[const.DATA_HISTORY], self._goals
        )

    def get_achievements_view(self) -> list[AchievementView]:
        """Achievements with current level, reward and progress to the next one."""
        views: list[AchievementView] = []
        for definition in ACHIEVEMENTS:
            progress = self._data[const.DATA_ACHIEVEMENTS].get(
                definition.achievement_id
            ) or build_achievement_progress()
            current_level = progress[const.DATA_ACHIEVEMENT_CURRENT_LEVEL]
            count = progress[const.DATA_ACHIEVEMENT_CURRENT_COUNT]
            next_level = (
                definition.levels[current_level]
                if current_level < len(definition.levels)
                else None
            )
            current_level_data = (
                definition.levels[current_level - 1] if current_level > 0 else None
            )
            views.append(
                {
                    "achievement_id": definition.achievement_id,
                    "name": definition.name,
                    "icon": definition.icon,
                    "description": definition.description,
                    "goal_text": definition.goal_text,
                    "current_level": current_level,
                    "max_level": len(definition.levels),
                    "current_count": count,
                    "unlocked_levels": list(
                        progress[const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS]
                    ),
                    "current_reward": (
                        current_level_data.reward if current_level_data else None
                    ),
                    "next_threshold": next_level.threshold if next_level else None,
                    "next_reward": next_level.reward if next_level else None,
                    "progress": (
                        calculate_percentage(count, next_level.threshold)
                        if next_level
                        else 100.0
                    ),
                }
            )
        return views

    def get_progression_view(self) -> ProgressionView:
        """Level, title and XP progress toward the next level."""
        return ProgressionEngine.progression_view(self._data[const.DATA_PROGRESSION])

    def get_statistics(self) -> StatisticsData:
        """Copy of the derived statistics."""
        return copy.deepcopy(self._data[const.DATA_STATS])

    def get_todays_badges(self) -> list[BadgeRecordData]:
        """Badges earned today, in award order."""
        today = self._current_key()
        return [
            copy.deepcopy(badge)
            for badge in self._data[const.DATA_BADGES]
            if badge.get(const.DATA_BADGE_DATE) == today
        ]

    def get_all_badges_with_lock_state(self) -> list[BadgeLockView]:
        """Every catalog badge with ``earned`` and ``count`` over all time."""
        goal_counts: dict[str, int] = {}
        mission_counts: dict[str, int] = {}
        combo_counts: dict[str, int] = {}
        for badge in self._data[const.DATA_BADGES]:
            badge_type = badge.get(const.DATA_BADGE_TYPE)
            if badge_type == const.BADGE_TYPE_GOAL:
                key = badge.get(const.DATA_BADGE_GOAL_ID, "")
                goal_counts[key] = goal_counts.get(key, 0) + 1
            elif badge_type == const.BADGE_TYPE_MISSION:
                key = badge.get(const.DATA_BADGE_MISSION_ID, "")
                mission_counts[key] = mission_counts.get(key, 0) + 1
            elif badge_type == const.BADGE_TYPE_COMBO:
                key = GamificationEngine.combo_key(badge)
                combo_counts[key] = combo_counts.get(key, 0) + 1

        views: list[BadgeLockView] = []
        for goal_id, goal in self._goals.items():
            meta = GOAL_BADGES.get(goal_id)
            count = goal_counts.get(goal_id, 0)
            views.append(
                {
                    "id": goal_id,
                    "type": const.BADGE_TYPE_GOAL,
                    "icon": meta.icon if meta else goal.icon,
                    "name": meta.name if meta else goal.title,
                    "earned": count > 0,
                    "count": count,
                }
            )
        for mission in self._mission_pool:
            count = mission_counts.get(mission.mission_id, 0)
            views.append(
                {
                    "id": mission.mission_id,
                    "type": const.BADGE_TYPE_MISSION,
                    "icon": mission.icon,
                    "name": mission.title,
                    "earned": count > 0,
                    "count": count,
                }
            )
        for combo_id, meta in COMBO_BADGES.items():
            count = combo_counts.get(combo_id, 0)
            views.append(
                {
                    "id": combo_id,
                    "type": const.BADGE_TYPE_COMBO,
                    "icon": meta.icon,
                    "name": meta.name,
                    "earned": count > 0,
                    "count": count,
                }
            )
        return views

    # ----------------------------------------------------------------------------------
    # Import / Export
    # ----------------------------------------------------------------------------------

    def export_state(self) -> bytes:
        """Serialize the whole document as UTF-8 JSON."""
        document = self.data
        document[const.DATA_META][const.DATA_META_LAST_SAVED] = self._now_iso()
        return json.dumps(document, ensure_ascii=False, indent=2).encode("utf-8")

    def import_state(self, payload: bytes | str) -> bool:
        """Replace the whole state with an exported document.

        Returns False (state untouched) when the payload cannot be decoded,
        parsed or validated.
        """
        try:
            text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
            document = json.loads(text)
            state = normalize_storage_data(document, self._goals)
        except (UnicodeDecodeError, json.JSONDecodeError, vol.Invalid) as err:
            const.LOGGER.warning("WARNING: Rejected Daily Quest import: %s", err)
            return False

        self._data = state
        self._recompute_achievements()
        self._ensure_today()
        self._recompute_statistics()
        self._save()
        const.LOGGER.info(
            "INFO: Imported Daily Quest data: %s days, %s badges, %s XP",
            len(state[const.DATA_HISTORY]),
            len(state[const.DATA_BADGES]),
            state[const.DATA_PROGRESSION][const.DATA_PROGRESSION_TOTAL_XP],
        )
        return True

    # ----------------------------------------------------------------------------------
    # Internals
    # ----------------------------------------------------------------------------------

    def _now_iso(self) -> str:
        return self._now_fn().astimezone(get_default_timezone()).isoformat()

    def _current_key(self) -> str:
        today = self._data[const.DATA_TODAY]
        if today is None or today not in self._data[const.DATA_HISTORY]:
            self.ensure_today()
            today = self._data[const.DATA_TODAY]
        return today

    def _today_record(self) -> DayRecordData:
        return self._data[const.DATA_HISTORY][self._current_key()]

    def _ensure_today(self) -> tuple[DateCheckResult, bool]:
        """Date check without saving; returns (result, state changed)."""
        key = date_key(self._now_fn())
        history = self._data[const.DATA_HISTORY]
        date_changed = self._data[const.DATA_TODAY] != key
        changed = date_changed

        if date_changed:
            const.LOGGER.info(
                "INFO: Day rollover from %s to %s", self._data[const.DATA_TODAY], key
            )
            self._data[const.DATA_TODAY] = key

        if key not in history:
            history[key] = build_day_record(key, self._goals)
            changed = True

        day = history[key]
        if not day[const.DATA_DAY_MISSIONS]:
            selected = MissionEngine.select_missions(
                key, self._mission_pool, self._missions_per_day
            )
            if selected:
                day[const.DATA_DAY_MISSIONS] = {
                    mission.mission_id: build_mission_instance(mission)
                    for mission in selected
                }
                changed = True
                const.LOGGER.debug(
                    "DEBUG: Missions for %s: %s",
                    key,
                    ", ".join(day[const.DATA_DAY_MISSIONS]),
                )

        return {"date_changed": date_changed, "today": key}, changed

    def _after_day_change(
        self, day: DayRecordData
    ) -> tuple[bool, list[BadgeRecordData]]:
        """Sticky flag, badges, achievements, statistics after a day mutation.

        Returns (perfect day reached by this change, newly created badges).
        """
        perfect_day = False
        if not day[const.DATA_DAY_COMPLETED] and GamificationEngine.is_perfect_day(
            day, self._goals
        ):
            day[const.DATA_DAY_COMPLETED] = True
            perfect_day = True
            const.LOGGER.info(
                "INFO: Perfect day reached for %s", day[const.DATA_DAY_DATE]
            )

        new_badges = GamificationEngine.evaluate_badges(
            day, self._data[const.DATA_BADGES], self._goals
        )
        self._data[const.DATA_BADGES].extend(copy.deepcopy(new_badges))
        self._recompute_achievements()
        self._recompute_statistics()
        return perfect_day, new_badges

    @staticmethod
    def _created(new_badges: list[BadgeRecordData], badge_id: str) -> bool:
        return any(badge[const.DATA_BADGE_ID] == badge_id for badge in new_badges)

    def _recompute_achievements(self) -> None:
        days = list(self._data[const.DATA_HISTORY].values())
        achievements = self._data[const.DATA_ACHIEVEMENTS]
        for definition in ACHIEVEMENTS:
            metric = GamificationEngine.compute_metric(
                definition.metric, days, definition.goal_id, self._goals
            )
            evaluation = GamificationEngine.evaluate_achievement(
                definition, metric, achievements.get(definition.achievement_id)
            )
            achievements[definition.achievement_id] = evaluation["progress"]
            if evaluation["newly_unlocked"]:
                const.LOGGER.info(
                    "INFO: Achievement '%s' reached level %s",
                    definition.name,
                    evaluation["progress"][const.DATA_ACHIEVEMENT_CURRENT_LEVEL],
                )

    def _recompute_statistics(self) -> None:
        self._data[const.DATA_STATS] = StatisticsEngine.compute_statistics(
            self._data[const.DATA_HISTORY], self._data[const.DATA_TODAY], self._goals
        )

    def _grant_xp(self, amount: Any, reason: str) -> XPGrantResult:
        progression, result = ProgressionEngine.apply_xp(
            self._data[const.DATA_PROGRESSION], amount, reason, self._now_iso()
        )
        if not result["granted"]:
            const.LOGGER.warning("WARNING: Ignoring invalid XP amount %r", amount)
            return result
        self._data[const.DATA_PROGRESSION] = progression
        if result["level_up"]:
            const.LOGGER.info(
                "INFO: Level up! %s -> %s (%s)",
                result["level_up"]["old_level"],
                result["level_up"]["new_level"],
                result["level_up"]["title"],
            )
        return result

    def _save(self) -> None:
        self._data[const.DATA_META][const.DATA_META_LAST_SAVED] = self._now_iso()
        if self._save_fn is not None:
            self._save_fn(self.data)

    @staticmethod
    def _merge_level_up(xp_results: list[XPGrantResult]) -> LevelUpInfo | None:
        level_ups = [result["level_up"] for result in xp_results if result["level_up"]]
        if not level_ups:
            return None
        return {
            "old_level": level_ups[0]["old_level"],
            "new_level": level_ups[-1]["new_level"],
            "title": level_ups[-1]["title"],
        }

    def _goal_result(
        self,
        goal_id: str,
        *,
        found: bool = True,
        value: Any = None,
        completed: bool = False,
        newly_completed: bool = False,
        exceeded: bool = False,
        new_badges: list[BadgeRecordData] | None = None,
        xp_results: list[XPGrantResult] | None = None,
        perfect_day: bool = False,
    ) -> GoalUpdateResult:
        xp_results = xp_results or []
        return {
            "found": found,
            "goal_id": goal_id,
            "value": value,
            "completed": completed,
            "newly_completed": newly_completed,
            "exceeded": exceeded,
            "new_badges": copy.deepcopy(new_badges or []),
            "xp_awarded": sum(result["amount"] for result in xp_results),
            "level_up": self._merge_level_up(xp_results),
            "perfect_day": perfect_day,
        }

    def _mission_result(
        self,
        mission_id: str,
        *,
        found: bool = True,
        completed: bool = False,
        newly_completed: bool = False,
        new_badges: list[BadgeRecordData] | None = None,
        xp_results: list[XPGrantResult] | None = None,
        perfect_day: bool = False,
    ) -> MissionToggleResult:
        xp_results = xp_results or []
        return {
            "found": found,
            "mission_id": mission_id,
            "completed": completed,
            "newly_completed": newly_completed,
            "new_badges": copy.deepcopy(new_badges or []),
            "xp_awarded": sum(result["amount"] for result in xp_results),
            "level_up": self._merge_level_up(xp_results),
            "perfect_day": perfect_day,
        }
