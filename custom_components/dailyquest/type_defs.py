"""Type definitions for Daily Quest data structures.

ARCHITECTURE DECISION: HYBRID APPROACH (TypedDict + dict[str, Any])
===================================================================

1. **TypedDict for STATIC structures** (fixed keys known at design time):
   - Persisted records: DayRecordData, BadgeRecordData, ProgressionData, ...
   - Operation results: GoalUpdateResult, MissionToggleResult, XPGrantResult, ...

2. **dict[str, Any] for DYNAMIC structures** (keys determined at runtime):
   - Goal values per day: goals[goal_id]
   - Mission instances per day: missions[mission_id]
   - Ledger: history[date_key]

IMPORTANT: This file must NOT import from coordinator.py or any module that
imports Home Assistant. Only typing machinery is used here.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime validation of imported
documents lives in data_builders.py (voluptuous schema).
"""

from typing import Any, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

GoalId = str
MissionId = str
BadgeId = str
AchievementId = str
DateKey = str  # Local calendar day "2026-10-19"
ISODatetime = str  # ISO 8601 datetime string "2026-10-19T12:30:00+00:00"

GoalValue = int | float | bool


# =============================================================================
# Persisted Records
# =============================================================================


class MoodData(TypedDict):
    """Mood of a day; emoji None means no mood set."""

    emoji: str | None
    text: str


class DayMissionData(TypedDict):
    """A mission copied into a specific day plus its completion flag."""

    id: MissionId
    icon: str
    title: str
    description: str
    completed: bool


class DayRecordData(TypedDict):
    """One calendar day of the ledger."""

    date: DateKey
    goals: dict[GoalId, GoalValue]
    missions: dict[MissionId, DayMissionData]
    mood: MoodData
    completed: bool  # Sticky perfect-day flag, never reset once set


class BadgeRecordData(TypedDict, total=False):
    """An awarded badge.

    ``goal_id`` is present for goal badges and ``mission_id`` for mission badges.
    """

    id: BadgeId
    type: str
    icon: str
    name: str
    date: DateKey
    goal_id: GoalId
    mission_id: MissionId


class AchievementProgressData(TypedDict):
    """Per-achievement progress. ``unlocked_levels`` only grows."""

    current_level: int
    current_count: int
    unlocked_levels: list[int]


class LevelHistoryEntry(TypedDict):
    """Level-up event."""

    level: int
    date: ISODatetime
    total_xp: int


class XPHistoryEntry(TypedDict):
    """Individual XP grant."""

    amount: int
    reason: str
    date: ISODatetime
    total_xp: int


class ProgressionData(TypedDict):
    """XP and level state. ``current_level`` is always derived from ``total_xp``."""

    total_xp: int
    current_level: int
    level_history: list[LevelHistoryEntry]
    xp_history: list[XPHistoryEntry]


class StatisticsData(TypedDict):
    """Derived statistics, recomputed from the ledger."""

    total_days: int
    perfect_days: int
    current_streak: int
    longest_streak: int
    total_missions: int


class MetaData(TypedDict):
    """Document metadata."""

    schema_version: int
    last_saved: ISODatetime | None


class StorageData(TypedDict):
    """The whole aggregate state as persisted and exported."""

    meta: MetaData
    history: dict[DateKey, DayRecordData]
    today: DateKey | None
    badges: list[BadgeRecordData]
    achievements: dict[AchievementId, AchievementProgressData]
    progression: ProgressionData
    stats: StatisticsData


# =============================================================================
# Engine Results
# =============================================================================


class AchievementEvaluation(TypedDict):
    """Outcome of evaluating one achievement against its metric."""

    progress: AchievementProgressData
    newly_unlocked: list[int]


class LevelUpInfo(TypedDict):
    """Level-up transition reported to callers."""

    old_level: int
    new_level: int
    title: str


class XPGrantResult(TypedDict):
    """Outcome of a single XP grant."""

    granted: bool
    amount: int
    reason: str
    total_xp: int
    level_up: LevelUpInfo | None


class DateCheckResult(TypedDict):
    """Outcome of the date-rollover check."""

    date_changed: bool
    today: DateKey


class GoalUpdateResult(TypedDict):
    """Outcome of updating a goal."""

    found: bool
    goal_id: GoalId
    value: GoalValue | None
    completed: bool
    newly_completed: bool
    exceeded: bool
    new_badges: list[BadgeRecordData]
    xp_awarded: int
    level_up: LevelUpInfo | None
    perfect_day: bool


class MissionToggleResult(TypedDict):
    """Outcome of toggling a mission."""

    found: bool
    mission_id: MissionId
    completed: bool
    newly_completed: bool
    new_badges: list[BadgeRecordData]
    xp_awarded: int
    level_up: LevelUpInfo | None
    perfect_day: bool


class MoodResult(TypedDict):
    """Outcome of setting the mood."""

    date: DateKey
    mood: MoodData


# =============================================================================
# Views
# =============================================================================


class ProgressionView(TypedDict):
    """Level display data."""

    current_level: int
    title: str
    total_xp: int
    xp_in_level: int
    xp_for_level: int
    xp_to_next_level: int
    progress: float
    is_max_level: bool


class WeekDayView(TypedDict):
    """One day of the week view."""

    date: DateKey
    weekday: str
    day_number: int
    goals_completed: int
    total_goals: int
    missions_completed: int
    total_missions: int
    status: str
    is_today: bool


class HistoryRowView(TypedDict):
    """One row of the history table."""

    date: DateKey
    goals_completed: int
    total_goals: int
    missions_completed: int
    total_missions: int
    mood: MoodData
    completed: bool


# Views with nested catalog data stay dynamic
TodayView = dict[str, Any]
AchievementView = dict[str, Any]
BadgeLockView = dict[str, Any]
