# File: const.py
"""Constants for the Daily Quest integration.

This file centralizes storage keys, data keys, defaults, reward amounts, service
names and platform identifiers for consistency across the integration.
"""

import logging

from homeassistant.const import Platform

# ------------------------------------------------------------------------------------------------
# General / Integration Information
# ------------------------------------------------------------------------------------------------
# Integration Name
DAILYQUEST_TITLE = "Daily Quest"

# Integration Domain
DOMAIN = "dailyquest"

# Logger
LOGGER = logging.getLogger(__package__)

# Supported Platforms
PLATFORMS = [
    Platform.SENSOR,
]

# Coordinator
COORDINATOR = "coordinator"
COORDINATOR_SUFFIX = "_coordinator"

# Storage and Versioning
STORAGE_MANAGER = "storage_manager"
STORAGE_KEY = "dailyquest_data"
STORAGE_VERSION = 1
STORAGE_SAVE_DELAY = 1  # seconds; coalesces bursts of mutations into one write

# Persisted document schema version (bumped when the stored shape changes)
SCHEMA_VERSION = 1

# Update Interval (minutes) for the periodic date-rollover check
CONF_UPDATE_INTERVAL = "update_interval"
DEFAULT_UPDATE_INTERVAL = 5
MAX_UPDATE_INTERVAL = 60

# ------------------------------------------------------------------------------------------------
# Gameplay Defaults
# ------------------------------------------------------------------------------------------------
DEFAULT_MISSIONS_PER_DAY = 3
DEFAULT_WEEK_VIEW_DAYS = 7
DEFAULT_MAX_XP_HISTORY_ENTRIES = 50
GOAL_COUNTER_CAP_MULTIPLIER = 2

# XP rewards
XP_REWARD_DAILY_GOAL = 15
XP_REWARD_DAILY_GOAL_BONUS = 5
XP_REWARD_MISSION = 10
XP_REWARD_PERFECT_DAY = 25

# Goal kinds
GOAL_KIND_COUNTER = "counter"
GOAL_KIND_CHECKBOX = "checkbox"
GOAL_KINDS = [GOAL_KIND_COUNTER, GOAL_KIND_CHECKBOX]

# Badge types
BADGE_TYPE_GOAL = "goal"
BADGE_TYPE_MISSION = "mission"
BADGE_TYPE_COMBO = "combo"
BADGE_TYPES = [BADGE_TYPE_GOAL, BADGE_TYPE_MISSION, BADGE_TYPE_COMBO]

# Combo badge ids (also the badge id prefix)
COMBO_BADGE_GOAL_MASTER = "goal_master"
COMBO_BADGE_MISSION_HERO = "mission_hero"
COMBO_BADGE_PERFECT_DAY = "perfect_day"

# Achievement metric types
ACHIEVEMENT_METRIC_GOAL_TOTAL = "goal_total"
ACHIEVEMENT_METRIC_GOAL_DAYS = "goal_days"
ACHIEVEMENT_METRIC_MISSIONS_TOTAL = "missions_total"
ACHIEVEMENT_METRIC_PERFECT_DAYS = "perfect_days"

# Day status (week view)
DAY_STATUS_COMPLETED = "completed"
DAY_STATUS_PARTIAL = "partial"
DAY_STATUS_MISSED = "missed"

# Date key format (local calendar day)
DATE_KEY_FORMAT = "%Y-%m-%d"

# ------------------------------------------------------------------------------------------------
# Data Keys (persisted document)
# ------------------------------------------------------------------------------------------------
DATA_META = "meta"
DATA_META_SCHEMA_VERSION = "schema_version"
DATA_META_LAST_SAVED = "last_saved"

DATA_HISTORY = "history"
DATA_TODAY = "today"
DATA_BADGES = "badges"
DATA_ACHIEVEMENTS = "achievements"
DATA_PROGRESSION = "progression"
DATA_STATS = "stats"

# Day record
DATA_DAY_DATE = "date"
DATA_DAY_GOALS = "goals"
DATA_DAY_MISSIONS = "missions"
DATA_DAY_MOOD = "mood"
DATA_DAY_COMPLETED = "completed"

# Mood
DATA_MOOD_EMOJI = "emoji"
DATA_MOOD_TEXT = "text"

# Mission instance
DATA_MISSION_ID = "id"
DATA_MISSION_ICON = "icon"
DATA_MISSION_TITLE = "title"
DATA_MISSION_DESCRIPTION = "description"
DATA_MISSION_COMPLETED = "completed"

# Badge record
DATA_BADGE_ID = "id"
DATA_BADGE_TYPE = "type"
DATA_BADGE_ICON = "icon"
DATA_BADGE_NAME = "name"
DATA_BADGE_DATE = "date"
DATA_BADGE_GOAL_ID = "goal_id"
DATA_BADGE_MISSION_ID = "mission_id"

# Achievement progress
DATA_ACHIEVEMENT_CURRENT_LEVEL = "current_level"
DATA_ACHIEVEMENT_CURRENT_COUNT = "current_count"
DATA_ACHIEVEMENT_UNLOCKED_LEVELS = "unlocked_levels"

# Progression
DATA_PROGRESSION_TOTAL_XP = "total_xp"
DATA_PROGRESSION_CURRENT_LEVEL = "current_level"
DATA_PROGRESSION_LEVEL_HISTORY = "level_history"
DATA_PROGRESSION_XP_HISTORY = "xp_history"

# Level history / XP history entries
DATA_LEVEL_HISTORY_LEVEL = "level"
DATA_LEVEL_HISTORY_DATE = "date"
DATA_LEVEL_HISTORY_TOTAL_XP = "total_xp"
DATA_XP_HISTORY_AMOUNT = "amount"
DATA_XP_HISTORY_REASON = "reason"
DATA_XP_HISTORY_DATE = "date"
DATA_XP_HISTORY_TOTAL_XP = "total_xp"

# Statistics
DATA_STATS_TOTAL_DAYS = "total_days"
DATA_STATS_PERFECT_DAYS = "perfect_days"
DATA_STATS_CURRENT_STREAK = "current_streak"
DATA_STATS_LONGEST_STREAK = "longest_streak"
DATA_STATS_TOTAL_MISSIONS = "total_missions"

# ------------------------------------------------------------------------------------------------
# XP reasons
# ------------------------------------------------------------------------------------------------
XP_REASON_GOAL_FMT = "Completed {} goal"
XP_REASON_GOAL_EXCEEDED_FMT = "Completed {} goal (exceeded!)"
XP_REASON_MISSION_FMT = "Completed {} mission"
XP_REASON_PERFECT_DAY = "Perfect Day - All goals and missions completed!"

# ------------------------------------------------------------------------------------------------
# Services
# ------------------------------------------------------------------------------------------------
SERVICE_UPDATE_GOAL = "update_goal"
SERVICE_ADJUST_GOAL = "adjust_goal"
SERVICE_TOGGLE_MISSION = "toggle_mission"
SERVICE_SET_MOOD = "set_mood"
SERVICE_EXPORT_DATA = "export_data"
SERVICE_IMPORT_DATA = "import_data"
SERVICE_RESET_ALL_DATA = "reset_all_data"
SERVICE_REFRESH_TODAY = "refresh_today"
SERVICE_GET_HISTORY = "get_history"

# Service fields
FIELD_GOAL_ID = "goal_id"
FIELD_VALUE = "value"
FIELD_DELTA = "delta"
FIELD_MISSION_ID = "mission_id"
FIELD_EMOJI = "emoji"
FIELD_TEXT = "text"
FIELD_DATA = "data"
FIELD_HISTORY = "history"

# ------------------------------------------------------------------------------------------------
# Sensors
# ------------------------------------------------------------------------------------------------
SENSOR_UID_SUFFIX_LEVEL = "_level"
SENSOR_UID_SUFFIX_TODAY_PROGRESS = "_today_progress"
SENSOR_UID_SUFFIX_STREAK = "_streak"
SENSOR_UID_SUFFIX_BADGES = "_badges"

TRANS_KEY_SENSOR_LEVEL = "level"
TRANS_KEY_SENSOR_TODAY_PROGRESS = "today_progress"
TRANS_KEY_SENSOR_STREAK = "streak"
TRANS_KEY_SENSOR_BADGES = "badges"

DEFAULT_LEVEL_SENSOR_ICON = "mdi:star-circle"
DEFAULT_TODAY_PROGRESS_SENSOR_ICON = "mdi:checkbox-marked-circle-outline"
DEFAULT_STREAK_SENSOR_ICON = "mdi:fire"
DEFAULT_BADGES_SENSOR_ICON = "mdi:medal"

ATTR_BADGES_EARNED = "badges_earned"
ATTR_BADGES_TOTAL = "badges_total"

# Coordinator data keys
COORDINATOR_DATA_TODAY = "today"
COORDINATOR_DATA_PROGRESSION = "progression"
COORDINATOR_DATA_STATISTICS = "statistics"
COORDINATOR_DATA_TODAYS_BADGES = "todays_badges"
COORDINATOR_DATA_WEEK = "week"
COORDINATOR_DATA_ACHIEVEMENTS = "achievements"
COORDINATOR_DATA_ALL_BADGES = "all_badges"
COORDINATOR_DATA_HISTORY = "history"

# ------------------------------------------------------------------------------------------------
# Translation keys / messages
# ------------------------------------------------------------------------------------------------
TRANS_KEY_ERROR_SINGLE_INSTANCE = "single_instance_allowed"
CONFIG_FLOW_STEP_USER = "user"
OPTIONS_FLOW_STEP_INIT = "init"

ERROR_GOAL_NOT_FOUND_FMT = "Goal '{}' not found"
ERROR_MISSION_NOT_FOUND_FMT = "Mission '{}' is not one of today's missions"
ERROR_INVALID_GOAL_VALUE_FMT = "Invalid value '{}' for goal '{}'"
ERROR_IMPORT_FAILED = "Import failed: the document is not a valid Daily Quest export"
MSG_NO_ENTRY_FOUND = "No Daily Quest entry found"
