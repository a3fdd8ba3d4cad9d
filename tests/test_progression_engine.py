"""Tests for ProgressionEngine - pure logic, no HA fixtures needed."""

from __future__ import annotations

from custom_components.dailyquest import const
from custom_components.dailyquest.catalog import MAX_LEVEL, XP_LEVELS
from custom_components.dailyquest.data_builders import build_default_progression
from custom_components.dailyquest.engines.progression_engine import ProgressionEngine

TIMESTAMP = "2026-10-19T12:00:00+00:00"


class TestLevels:
    """Test level lookups."""

    def test_level_for_xp(self) -> None:
        """Levels follow the threshold table."""
        assert ProgressionEngine.level_for_xp(0) == 1
        assert ProgressionEngine.level_for_xp(99) == 1
        assert ProgressionEngine.level_for_xp(100) == 2
        assert ProgressionEngine.level_for_xp(250) == 3
        assert ProgressionEngine.level_for_xp(10**9) == MAX_LEVEL

    def test_threshold_and_title(self) -> None:
        """Thresholds and titles come from the same table."""
        assert ProgressionEngine.threshold_for_level(2) == 100
        assert ProgressionEngine.title_for_level(1) == "Rookie"
        assert ProgressionEngine.threshold_for_level(MAX_LEVEL + 1) is None
        assert ProgressionEngine.title_for_level(0) == ""

    def test_valid_amounts(self) -> None:
        """Only positive integers are grantable."""
        assert ProgressionEngine.is_valid_amount(15)
        assert not ProgressionEngine.is_valid_amount(0)
        assert not ProgressionEngine.is_valid_amount(-5)
        assert not ProgressionEngine.is_valid_amount(2.5)
        assert not ProgressionEngine.is_valid_amount(True)
        assert not ProgressionEngine.is_valid_amount("10")


class TestApplyXP:
    """Test XP grants."""

    def test_grant_without_level_up(self) -> None:
        """A small grant adds XP and history only."""
        state, result = ProgressionEngine.apply_xp(
            build_default_progression(), 15, "Completed Drink Water goal", TIMESTAMP
        )
        assert result["granted"] is True
        assert result["total_xp"] == 15
        assert result["level_up"] is None
        assert state[const.DATA_PROGRESSION_TOTAL_XP] == 15
        assert state[const.DATA_PROGRESSION_LEVEL_HISTORY] == []
        assert state[const.DATA_PROGRESSION_XP_HISTORY] == [
            {
                const.DATA_XP_HISTORY_AMOUNT: 15,
                const.DATA_XP_HISTORY_REASON: "Completed Drink Water goal",
                const.DATA_XP_HISTORY_DATE: TIMESTAMP,
                const.DATA_XP_HISTORY_TOTAL_XP: 15,
            }
        ]

    def test_grant_with_multi_level_jump(self) -> None:
        """Crossing several thresholds reports one level-up to the highest."""
        state, result = ProgressionEngine.apply_xp(
            build_default_progression(), 360, "Bonus", TIMESTAMP
        )
        assert result["level_up"] == {
            "old_level": 1,
            "new_level": 4,
            "title": "Adventurer",
        }
        assert state[const.DATA_PROGRESSION_CURRENT_LEVEL] == 4
        assert state[const.DATA_PROGRESSION_LEVEL_HISTORY] == [
            {
                const.DATA_LEVEL_HISTORY_LEVEL: 4,
                const.DATA_LEVEL_HISTORY_DATE: TIMESTAMP,
                const.DATA_LEVEL_HISTORY_TOTAL_XP: 360,
            }
        ]

    def test_invalid_amount_changes_nothing(self) -> None:
        """Invalid amounts are reported and not applied."""
        original = build_default_progression()
        state, result = ProgressionEngine.apply_xp(original, -10, "Nope", TIMESTAMP)
        assert result["granted"] is False
        assert result["amount"] == 0
        assert state == original

    def test_input_not_mutated(self) -> None:
        """apply_xp works on a copy."""
        original = build_default_progression()
        ProgressionEngine.apply_xp(original, 15, "Goal", TIMESTAMP)
        assert original == build_default_progression()

    def test_xp_history_capped(self) -> None:
        """Only the newest entries are kept."""
        state = build_default_progression()
        for _ in range(const.DEFAULT_MAX_XP_HISTORY_ENTRIES + 5):
            state, _result = ProgressionEngine.apply_xp(state, 1, "Tick", TIMESTAMP)
        history = state[const.DATA_PROGRESSION_XP_HISTORY]
        assert len(history) == const.DEFAULT_MAX_XP_HISTORY_ENTRIES
        assert history[-1][const.DATA_XP_HISTORY_TOTAL_XP] == 55

    def test_normalize_rederives_level(self) -> None:
        """A stored level that disagrees with total_xp is corrected."""
        stored = build_default_progression()
        stored[const.DATA_PROGRESSION_TOTAL_XP] = 250
        stored[const.DATA_PROGRESSION_CURRENT_LEVEL] = 9
        assert (
            ProgressionEngine.normalize(stored)[const.DATA_PROGRESSION_CURRENT_LEVEL]
            == 3
        )


class TestProgressionView:
    """Test the level display view."""

    def test_mid_level(self) -> None:
        """Progress is measured within the current level."""
        view = ProgressionEngine.progression_view(
            {const.DATA_PROGRESSION_TOTAL_XP: 150}
        )
        assert view == {
            "current_level": 2,
            "title": "Apprentice",
            "total_xp": 150,
            "xp_in_level": 50,
            "xp_for_level": 100,
            "xp_to_next_level": 50,
            "progress": 50.0,
            "is_max_level": False,
        }

    def test_max_level(self) -> None:
        """The top level reports full progress and nothing left to earn."""
        view = ProgressionEngine.progression_view(
            {const.DATA_PROGRESSION_TOTAL_XP: XP_LEVELS[-1].threshold + 500}
        )
        assert view["current_level"] == MAX_LEVEL
        assert view["is_max_level"] is True
        assert view["xp_for_level"] == 0
        assert view["xp_to_next_level"] == 0
        assert view["progress"] == 100.0
