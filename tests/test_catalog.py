"""Tests for the static catalog and its structural validation."""

from __future__ import annotations

from dataclasses import replace

from custom_components.dailyquest import const
from custom_components.dailyquest.catalog import (
    ACHIEVEMENTS,
    COMBO_BADGES,
    DAILY_GOALS,
    DAILY_MISSIONS,
    GOAL_BADGES,
    MAX_LEVEL,
    XP_LEVELS,
    AchievementLevel,
    GoalDefinition,
    LevelDefinition,
    get_achievement,
    get_goal,
    get_level,
    get_mission,
    validate_catalog,
)


class TestCatalogContents:
    """Test the shipped catalog."""

    def test_shipped_catalog_is_valid(self) -> None:
        """The shipped catalog passes every structural check."""
        assert validate_catalog() == {}

    def test_goals(self) -> None:
        """Four goals with badge metadata; water caps at twice its target."""
        assert list(DAILY_GOALS) == ["water", "stretch", "duolingo", "reading"]
        assert set(GOAL_BADGES) == set(DAILY_GOALS)
        water = DAILY_GOALS["water"]
        assert water.is_counter
        assert water.max_value == 16
        assert not DAILY_GOALS["duolingo"].is_counter

    def test_missions_unique(self) -> None:
        """Mission ids are unique and never collide with goal ids."""
        ids = [mission.mission_id for mission in DAILY_MISSIONS]
        assert len(ids) == len(set(ids))
        assert len(ids) >= const.DEFAULT_MISSIONS_PER_DAY
        assert not set(ids) & set(DAILY_GOALS)

    def test_combo_badges(self) -> None:
        """Three combo badges."""
        assert set(COMBO_BADGES) == {
            const.COMBO_BADGE_GOAL_MASTER,
            const.COMBO_BADGE_MISSION_HERO,
            const.COMBO_BADGE_PERFECT_DAY,
        }

    def test_levels(self) -> None:
        """Fifty consecutive levels starting at 0 XP."""
        assert MAX_LEVEL == 50
        assert len(XP_LEVELS) == 50
        assert XP_LEVELS[0] == LevelDefinition(1, 0, "Rookie")

    def test_lookups(self) -> None:
        """Lookups return definitions or None."""
        assert get_goal("water") is DAILY_GOALS["water"]
        assert get_goal("nope") is None
        assert get_mission(DAILY_MISSIONS[0].mission_id) is DAILY_MISSIONS[0]
        assert get_mission("nope") is None
        assert get_achievement(ACHIEVEMENTS[0].achievement_id) is ACHIEVEMENTS[0]
        assert get_achievement("nope") is None
        assert get_level(2) == LevelDefinition(2, 100, "Apprentice")
        assert get_level(MAX_LEVEL + 1) is None


class TestValidateCatalog:
    """Test validation of broken catalogs."""

    def test_bad_goal(self) -> None:
        """Unknown kind, non-positive target and missing badge are reported."""
        goals = {
            "meditate": GoalDefinition(
                "meditate", "🧘", "Meditate", 0, "min", "timer"
            )
        }
        errors = validate_catalog(goals=goals)
        assert "goal_meditate_kind" in errors
        assert "goal_meditate_target" in errors
        assert "goal_meditate_badge" in errors

    def test_duplicate_mission(self) -> None:
        """Duplicate mission ids are reported."""
        missions = (DAILY_MISSIONS[0], DAILY_MISSIONS[0])
        errors = validate_catalog(missions=missions)
        assert f"mission_{DAILY_MISSIONS[0].mission_id}" in errors

    def test_thresholds_must_increase(self) -> None:
        """Achievement thresholds must be strictly increasing."""
        broken = replace(
            ACHIEVEMENTS[0],
            levels=(AchievementLevel(10, "A"), AchievementLevel(10, "B")),
        )
        errors = validate_catalog(achievements=(broken,))
        assert f"achievement_{broken.achievement_id}_thresholds" in errors

    def test_level_table_rules(self) -> None:
        """Level 1 starts at 0 XP and titles are required."""
        levels = (LevelDefinition(1, 10, "Rookie"), LevelDefinition(2, 5, ""))
        errors = validate_catalog(levels=levels)
        assert "levels_start" in errors
        assert "level_2_threshold" in errors
        assert "level_2_title" in errors
