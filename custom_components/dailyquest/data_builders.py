"""Record builders and document normalization.

This module is the SINGLE SOURCE OF TRUTH for:
- Record defaults (day records, moods, mission instances, progression, meta)
- The persisted/exported document schema (voluptuous)
- Normalization of loaded and imported documents

### Build Functions
Each record type has a ``build_<record>()`` function returning a complete dict
with ``const.DATA_*`` keys, ready for storage.

### Document Validation
``normalize_storage_data()`` validates a whole document against
``STORAGE_DATA_SCHEMA`` and returns a clean copy: goal values clamped per kind,
missing catalog goals filled in, duplicate badges dropped, progression level
re-derived. It raises ``vol.Invalid`` for anything it cannot repair. Documents
exported by the browser version of Daily Quest (camelCase keys, ``xp`` section) are
converted first by ``convert_legacy_document()``.

Consumers:
- tracker.py (state initialization, load, import)
- storage_manager.py (default structure)
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import voluptuous as vol

from . import const
from .catalog import ACHIEVEMENTS, DAILY_GOALS
from .engines.progression_engine import ProgressionEngine
from .utils.dt_utils import is_date_key
from .utils.math_utils import clamp, coerce_number

if TYPE_CHECKING:
    from .catalog import GoalDefinition, MissionDefinition
    from .type_defs import (
        AchievementProgressData,
        BadgeRecordData,
        DayMissionData,
        DayRecordData,
        MetaData,
        MoodData,
        ProgressionData,
        StatisticsData,
        StorageData,
    )

# ==============================================================================
# BUILD FUNCTIONS
# ==============================================================================


def build_mood(emoji: str | None = None, text: str | None = "") -> MoodData:
    """Build a mood record; ``None`` text becomes empty."""
    return {
        const.DATA_MOOD_EMOJI: emoji or None,
        const.DATA_MOOD_TEXT: text or "",
    }


def build_mission_instance(mission: MissionDefinition) -> DayMissionData:
    """Copy a catalog mission into a day, not yet completed."""
    return {
        const.DATA_MISSION_ID: mission.mission_id,
        const.DATA_MISSION_ICON: mission.icon,
        const.DATA_MISSION_TITLE: mission.title,
        const.DATA_MISSION_DESCRIPTION: mission.description,
        const.DATA_MISSION_COMPLETED: False,
    }


def build_default_goal_value(goal: GoalDefinition) -> int | bool:
    """Zero for counters, False for checkboxes."""
    return 0 if goal.is_counter else False


def build_day_record(
    date_key: str, goals: Mapping[str, GoalDefinition] = DAILY_GOALS
) -> DayRecordData:
    """Fresh day: goals zeroed, no missions, empty mood, not completed."""
    return {
        const.DATA_DAY_DATE: date_key,
        const.DATA_DAY_GOALS: {
            goal_id: build_default_goal_value(goal) for goal_id, goal in goals.items()
        },
        const.DATA_DAY_MISSIONS: {},
        const.DATA_DAY_MOOD: build_mood(),
        const.DATA_DAY_COMPLETED: False,
    }


def build_achievement_progress() -> AchievementProgressData:
    """Untouched achievement progress."""
    return {
        const.DATA_ACHIEVEMENT_CURRENT_LEVEL: 0,
        const.DATA_ACHIEVEMENT_CURRENT_COUNT: 0,
        const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS: [],
    }


def build_default_progression() -> ProgressionData:
    """Level 1, no XP."""
    return {
        const.DATA_PROGRESSION_TOTAL_XP: 0,
        const.DATA_PROGRESSION_CURRENT_LEVEL: 1,
        const.DATA_PROGRESSION_LEVEL_HISTORY: [],
        const.DATA_PROGRESSION_XP_HISTORY: [],
    }


def build_default_statistics() -> StatisticsData:
    """All statistics at zero."""
    return {
        const.DATA_STATS_TOTAL_DAYS: 0,
        const.DATA_STATS_PERFECT_DAYS: 0,
        const.DATA_STATS_CURRENT_STREAK: 0,
        const.DATA_STATS_LONGEST_STREAK: 0,
        const.DATA_STATS_TOTAL_MISSIONS: 0,
    }


def build_meta(last_saved: str | None = None) -> MetaData:
    """Document metadata at the current schema version."""
    return {
        const.DATA_META_SCHEMA_VERSION: const.SCHEMA_VERSION,
        const.DATA_META_LAST_SAVED: last_saved,
    }


def build_default_state() -> StorageData:
    """Empty aggregate state (no days yet; ``today`` set by the first date check)."""
    return {
        const.DATA_META: build_meta(),
        const.DATA_HISTORY: {},
        const.DATA_TODAY: None,
        const.DATA_BADGES: [],
        const.DATA_ACHIEVEMENTS: {
            achievement.achievement_id: build_achievement_progress()
            for achievement in ACHIEVEMENTS
        },
        const.DATA_PROGRESSION: build_default_progression(),
        const.DATA_STATS: build_default_statistics(),
    }


# ==============================================================================
# DOCUMENT SCHEMA
# ==============================================================================


def _date_key(value: Any) -> str:
    """Voluptuous validator for "YYYY-MM-DD" keys."""
    if not is_date_key(value):
        raise vol.Invalid(f"invalid date key: {value!r}")
    return value


def _non_negative_number(value: Any) -> int | float:
    """Voluptuous validator for counts stored as numbers."""
    number = coerce_number(value)
    if number is None or number < 0:
        raise vol.Invalid(f"expected a non-negative number, got {value!r}")
    return number


_OPTIONAL_TEXT = vol.Any(None, str)

MOOD_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_MOOD_EMOJI, default=None): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_MOOD_TEXT, default=""): _OPTIONAL_TEXT,
    },
    extra=vol.REMOVE_EXTRA,
)

MISSION_INSTANCE_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_MISSION_ID): str,
        vol.Optional(const.DATA_MISSION_ICON, default=""): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_MISSION_TITLE, default=""): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_MISSION_DESCRIPTION, default=""): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_MISSION_COMPLETED, default=False): bool,
    },
    extra=vol.REMOVE_EXTRA,
)

DAY_RECORD_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_DAY_DATE): str,
        vol.Optional(const.DATA_DAY_GOALS, default=dict): {
            str: vol.Any(None, bool, int, float, str)
        },
        vol.Optional(const.DATA_DAY_MISSIONS, default=dict): {
            str: MISSION_INSTANCE_SCHEMA
        },
        vol.Optional(const.DATA_DAY_MOOD, default=dict): vol.Any(
            None, MOOD_SCHEMA
        ),
        vol.Optional(const.DATA_DAY_COMPLETED, default=False): bool,
    },
    extra=vol.REMOVE_EXTRA,
)

BADGE_RECORD_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_BADGE_ID): vol.All(str, vol.Length(min=1)),
        vol.Required(const.DATA_BADGE_TYPE): vol.In(const.BADGE_TYPES),
        vol.Optional(const.DATA_BADGE_ICON, default=""): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_BADGE_NAME, default=""): _OPTIONAL_TEXT,
        vol.Required(const.DATA_BADGE_DATE): _date_key,
        vol.Optional(const.DATA_BADGE_GOAL_ID): str,
        vol.Optional(const.DATA_BADGE_MISSION_ID): str,
    },
    extra=vol.REMOVE_EXTRA,
)

ACHIEVEMENT_PROGRESS_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_ACHIEVEMENT_CURRENT_LEVEL, default=0): vol.All(
            int, vol.Range(min=0)
        ),
        vol.Optional(
            const.DATA_ACHIEVEMENT_CURRENT_COUNT, default=0
        ): _non_negative_number,
        vol.Optional(const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS, default=list): [
            vol.All(int, vol.Range(min=0))
        ],
    },
    extra=vol.REMOVE_EXTRA,
)

LEVEL_HISTORY_ENTRY_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_LEVEL_HISTORY_LEVEL): vol.All(int, vol.Range(min=1)),
        vol.Optional(const.DATA_LEVEL_HISTORY_DATE, default=""): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_LEVEL_HISTORY_TOTAL_XP, default=0): vol.All(
            int, vol.Range(min=0)
        ),
    },
    extra=vol.REMOVE_EXTRA,
)

XP_HISTORY_ENTRY_SCHEMA = vol.Schema(
    {
        vol.Required(const.DATA_XP_HISTORY_AMOUNT): vol.All(int, vol.Range(min=0)),
        vol.Optional(const.DATA_XP_HISTORY_REASON, default=""): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_XP_HISTORY_DATE, default=""): _OPTIONAL_TEXT,
        vol.Optional(const.DATA_XP_HISTORY_TOTAL_XP, default=0): vol.All(
            int, vol.Range(min=0)
        ),
    },
    extra=vol.REMOVE_EXTRA,
)

PROGRESSION_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_PROGRESSION_TOTAL_XP, default=0): vol.All(
            int, vol.Range(min=0)
        ),
        # Accepted but never trusted: the level is re-derived from total_xp
        vol.Optional(const.DATA_PROGRESSION_CURRENT_LEVEL): int,
        vol.Optional(const.DATA_PROGRESSION_LEVEL_HISTORY, default=list): [
            LEVEL_HISTORY_ENTRY_SCHEMA
        ],
        vol.Optional(const.DATA_PROGRESSION_XP_HISTORY, default=list): [
            XP_HISTORY_ENTRY_SCHEMA
        ],
    },
    extra=vol.REMOVE_EXTRA,
)

META_SCHEMA = vol.Schema(
    {
        vol.Optional(
            const.DATA_META_SCHEMA_VERSION, default=const.SCHEMA_VERSION
        ): vol.All(int, vol.Range(min=1, max=const.SCHEMA_VERSION)),
        vol.Optional(const.DATA_META_LAST_SAVED, default=None): _OPTIONAL_TEXT,
    },
    extra=vol.REMOVE_EXTRA,
)

STORAGE_DATA_SCHEMA = vol.Schema(
    {
        vol.Optional(const.DATA_META, default=dict): META_SCHEMA,
        vol.Required(const.DATA_HISTORY): vol.Schema(
            {_date_key: DAY_RECORD_SCHEMA}, extra=vol.PREVENT_EXTRA
        ),
        vol.Optional(const.DATA_TODAY, default=None): vol.Any(None, _date_key),
        vol.Optional(const.DATA_BADGES, default=list): [BADGE_RECORD_SCHEMA],
        vol.Optional(const.DATA_ACHIEVEMENTS, default=dict): {
            str: ACHIEVEMENT_PROGRESS_SCHEMA
        },
        vol.Optional(const.DATA_PROGRESSION, default=dict): PROGRESSION_SCHEMA,
        # Derived data; accepted for round trips and recomputed afterwards
        vol.Optional(const.DATA_STATS): dict,
    },
    extra=vol.REMOVE_EXTRA,
)


# ==============================================================================
# LEGACY (camelCase) DOCUMENTS
# ==============================================================================

LEGACY_KEY_DAILY = "daily"
LEGACY_KEY_XP = "xp"

_LEGACY_BADGE_KEYS = {
    "goalId": const.DATA_BADGE_GOAL_ID,
    "missionId": const.DATA_BADGE_MISSION_ID,
}
_LEGACY_ACHIEVEMENT_KEYS = {
    "currentLevel": const.DATA_ACHIEVEMENT_CURRENT_LEVEL,
    "currentCount": const.DATA_ACHIEVEMENT_CURRENT_COUNT,
    "unlockedLevels": const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS,
}


def is_legacy_document(document: Mapping[str, Any]) -> bool:
    """True for exports of the browser app (``daily``/``xp`` sections)."""
    return LEGACY_KEY_XP in document or LEGACY_KEY_DAILY in document


def _rename_keys(record: Any, mapping: Mapping[str, str]) -> Any:
    if not isinstance(record, Mapping):
        return record
    return {mapping.get(key, key): value for key, value in record.items()}


def _legacy_section(document: Mapping[str, Any], key: str, kind: type) -> Any:
    """Return ``document[key]`` (empty when missing) or reject a wrong type."""
    value = document.get(key)
    if value is None:
        return {} if kind is Mapping else []
    if not isinstance(value, kind):
        raise vol.Invalid(f"Legacy '{key}' must be a {kind.__name__}")
    return value


def convert_legacy_document(document: Mapping[str, Any]) -> dict[str, Any]:
    """Map a browser-app export onto the snake_case document shape.

    Day records already share their shape. The ``daily`` record joins the
    history if missing there and provides ``today``. ``xp`` becomes
    ``progression`` (level history ``xp`` is the running total).

    Raises:
        vol.Invalid: A section has the wrong container type.
    """
    history = copy.deepcopy(
        dict(_legacy_section(document, const.DATA_HISTORY, Mapping))
    )
    today: str | None = None
    daily = document.get(LEGACY_KEY_DAILY)
    if isinstance(daily, Mapping):
        daily_date = daily.get(const.DATA_DAY_DATE)
        if is_date_key(daily_date):
            today = daily_date
            history.setdefault(daily_date, copy.deepcopy(dict(daily)))

    progression: dict[str, Any] = {}
    if document.get(LEGACY_KEY_XP) is not None:
        xp = _legacy_section(document, LEGACY_KEY_XP, Mapping)
        progression = {
            const.DATA_PROGRESSION_TOTAL_XP: xp.get("totalXP", 0),
            const.DATA_PROGRESSION_LEVEL_HISTORY: [
                {
                    const.DATA_LEVEL_HISTORY_LEVEL: entry.get("level"),
                    const.DATA_LEVEL_HISTORY_DATE: entry.get("date", ""),
                    const.DATA_LEVEL_HISTORY_TOTAL_XP: entry.get("xp", 0),
                }
                for entry in _legacy_section(xp, "levelHistory", list)
                if isinstance(entry, Mapping)
            ],
            const.DATA_PROGRESSION_XP_HISTORY: [
                {
                    const.DATA_XP_HISTORY_AMOUNT: entry.get("amount"),
                    const.DATA_XP_HISTORY_REASON: entry.get("reason", ""),
                    const.DATA_XP_HISTORY_DATE: entry.get("date", ""),
                    const.DATA_XP_HISTORY_TOTAL_XP: entry.get("totalXP", 0),
                }
                for entry in _legacy_section(xp, "xpHistory", list)
                if isinstance(entry, Mapping)
            ],
        }

    achievements = _legacy_section(document, const.DATA_ACHIEVEMENTS, Mapping)
    return {
        const.DATA_HISTORY: history,
        const.DATA_TODAY: today,
        const.DATA_BADGES: [
            _rename_keys(badge, _LEGACY_BADGE_KEYS)
            for badge in _legacy_section(document, const.DATA_BADGES, list)
        ],
        const.DATA_ACHIEVEMENTS: {
            key: _rename_keys(value, _LEGACY_ACHIEVEMENT_KEYS)
            for key, value in achievements.items()
        },
        const.DATA_PROGRESSION: progression,
    }


# ==============================================================================
# NORMALIZATION
# ==============================================================================


def normalize_goal_value(goal: GoalDefinition, raw: Any) -> int | float | bool:
    """Counter: clamp to ``[0, 2 x target]`` (non-numeric → 0). Checkbox: bool."""
    if not goal.is_counter:
        return raw is True
    number = coerce_number(raw)
    if number is None:
        return 0
    return clamp(number, 0, goal.max_value)


def _normalize_day(
    date_key: str, day: Mapping[str, Any], goals: Mapping[str, GoalDefinition]
) -> DayRecordData:
    raw_goals = day.get(const.DATA_DAY_GOALS) or {}
    missions: dict[str, DayMissionData] = {}
    for mission_id, mission in (day.get(const.DATA_DAY_MISSIONS) or {}).items():
        missions[mission_id] = {
            const.DATA_MISSION_ID: mission_id,
            const.DATA_MISSION_ICON: mission.get(const.DATA_MISSION_ICON) or "",
            const.DATA_MISSION_TITLE: mission.get(const.DATA_MISSION_TITLE) or "",
            const.DATA_MISSION_DESCRIPTION: (
                mission.get(const.DATA_MISSION_DESCRIPTION) or ""
            ),
            const.DATA_MISSION_COMPLETED: mission.get(const.DATA_MISSION_COMPLETED)
            is True,
        }
    mood = day.get(const.DATA_DAY_MOOD) or {}
    return {
        const.DATA_DAY_DATE: date_key,
        const.DATA_DAY_GOALS: {
            goal_id: normalize_goal_value(goal, raw_goals.get(goal_id))
            for goal_id, goal in goals.items()
        },
        const.DATA_DAY_MISSIONS: missions,
        const.DATA_DAY_MOOD: build_mood(
            mood.get(const.DATA_MOOD_EMOJI), mood.get(const.DATA_MOOD_TEXT)
        ),
        const.DATA_DAY_COMPLETED: day.get(const.DATA_DAY_COMPLETED) is True,
    }


def _normalize_badges(badges: list[dict[str, Any]]) -> list[BadgeRecordData]:
    seen: set[str] = set()
    result: list[BadgeRecordData] = []
    for badge in badges:
        badge_id = badge[const.DATA_BADGE_ID]
        if badge_id in seen:
            continue
        seen.add(badge_id)
        record: dict[str, Any] = {
            key: value for key, value in badge.items() if value is not None
        }
        record.setdefault(const.DATA_BADGE_ICON, "")
        record.setdefault(const.DATA_BADGE_NAME, "")
        result.append(record)  # type: ignore[arg-type]
    return result


def _normalize_achievements(
    achievements: Mapping[str, Mapping[str, Any]],
) -> dict[str, AchievementProgressData]:
    result: dict[str, AchievementProgressData] = {}
    for achievement in ACHIEVEMENTS:
        progress = achievements.get(achievement.achievement_id)
        if progress is None:
            result[achievement.achievement_id] = build_achievement_progress()
            continue
        level_count = len(achievement.levels)
        unlocked = sorted(
            {
                index
                for index in progress[const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS]
                if index < level_count
            }
        )
        # The level sits just above the highest unlocked index.
        current_level = unlocked[-1] + 1 if unlocked else 0
        result[achievement.achievement_id] = {
            const.DATA_ACHIEVEMENT_CURRENT_LEVEL: current_level,
            const.DATA_ACHIEVEMENT_CURRENT_COUNT: int(
                progress[const.DATA_ACHIEVEMENT_CURRENT_COUNT]
            ),
            const.DATA_ACHIEVEMENT_UNLOCKED_LEVELS: unlocked,
        }
    return result


def normalize_storage_data(
    document: Any, goals: Mapping[str, GoalDefinition] = DAILY_GOALS
) -> StorageData:
    """Validate and clean a whole document.

    Returns a new StorageData; the input is never modified. Statistics are
    reset to zero here and recomputed by the tracker.

    Raises:
        vol.Invalid: The document cannot be represented as Daily Quest state.
    """
    if not isinstance(document, Mapping):
        raise vol.Invalid("expected a JSON object")
    if is_legacy_document(document):
        document = convert_legacy_document(document)

    validated = STORAGE_DATA_SCHEMA(copy.deepcopy(dict(document)))

    history = {
        date_key: _normalize_day(date_key, day, goals)
        for date_key, day in sorted(validated[const.DATA_HISTORY].items())
    }
    meta = validated[const.DATA_META]
    return {
        const.DATA_META: build_meta(meta[const.DATA_META_LAST_SAVED]),
        const.DATA_HISTORY: history,
        const.DATA_TODAY: validated[const.DATA_TODAY],
        const.DATA_BADGES: _normalize_badges(validated[const.DATA_BADGES]),
        const.DATA_ACHIEVEMENTS: _normalize_achievements(
            validated[const.DATA_ACHIEVEMENTS]
        ),
        const.DATA_PROGRESSION: ProgressionEngine.normalize(
            validated[const.DATA_PROGRESSION]
        ),
        const.DATA_STATS: build_default_statistics(),
    }
