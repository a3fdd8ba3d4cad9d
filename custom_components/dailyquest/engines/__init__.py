"""Engine modules for Daily Quest.

Contains pure computation engines (no Home Assistant imports):
- mission_engine: Deterministic daily mission selection
- gamification_engine: Badges, achievement metrics and unlocking
- statistics_engine: Streaks, totals, week view and history summaries
- progression_engine: XP grants and level math
"""

# Use relative imports within package to avoid mypy module resolution issues
from .gamification_engine import GamificationEngine
from .mission_engine import MissionEngine
from .progression_engine import ProgressionEngine
from .statistics_engine import StatisticsEngine

__all__ = [
    "GamificationEngine",
    "MissionEngine",
    "ProgressionEngine",
    "StatisticsEngine",
]
