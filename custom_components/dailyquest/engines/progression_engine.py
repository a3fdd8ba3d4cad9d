"""Progression Engine - Pure logic for XP accumulation and level math.

This engine provides stateless, pure Python functions for:
- Level recomputation from total XP against the canonical level table
- XP grant application (level-up events, bounded XP history)
- Level display data (title, XP within level, progress percentage)

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data.

``current_level`` is never set independently: it is always
``max{level : total_xp >= threshold(level)}`` over ``catalog.XP_LEVELS``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from .. import const
from ..catalog import XP_LEVELS
from ..utils.math_utils import calculate_percentage

if TYPE_CHECKING:
    from ..catalog import LevelDefinition
    from ..type_defs import (
        ProgressionData,
        ProgressionView,
        XPGrantResult,
        XPHistoryEntry,
    )


class ProgressionEngine:
    """Pure logic engine for XP and levels.

    All methods are static - no instance state.
    """

    @staticmethod
    def is_valid_amount(amount: Any) -> bool:
        """Only positive integers (not bools) are grantable."""
        return isinstance(amount, int) and not isinstance(amount, bool) and amount > 0

    @staticmethod
    def level_for_xp(
        total_xp: int, levels: Sequence[LevelDefinition] = XP_LEVELS
    ) -> int:
        """Highest level whose threshold ``total_xp`` meets (at least 1)."""
        current = 1
        for level in levels:
            if total_xp >= level.threshold:
                current = max(current, level.level)
        return current

    @staticmethod
    def threshold_for_level(
        level: int, levels: Sequence[LevelDefinition] = XP_LEVELS
    ) -> int | None:
        """Threshold of ``level`` or None when the table has no such level."""
        for definition in levels:
            if definition.level == level:
                return definition.threshold
        return None

    @staticmethod
    def title_for_level(
        level: int, levels: Sequence[LevelDefinition] = XP_LEVELS
    ) -> str:
        """Display title of ``level``; empty when unknown."""
        for definition in levels:
            if definition.level == level:
                return definition.title
        return ""

    @staticmethod
    def prune_xp_history(
        xp_history: list[XPHistoryEntry],
        max_entries: int = const.DEFAULT_MAX_XP_HISTORY_ENTRIES,
    ) -> list[XPHistoryEntry]:
        """Trim XP history to the most recent ``max_entries`` (in place).

        Newest entries are at the END of the list (append order).
        """
        if len(xp_history) > max_entries:
            del xp_history[: len(xp_history) - max_entries]
        return xp_history

    @staticmethod
    def normalize(
        progression: Mapping[str, Any],
        levels: Sequence[LevelDefinition] = XP_LEVELS,
    ) -> ProgressionData:
        """Return a copy with ``current_level`` re-derived from ``total_xp``."""
        total_xp = int(progression.get(const.DATA_PROGRESSION_TOTAL_XP, 0) or 0)
        xp_history = list(
            copy.deepcopy(progression.get(const.DATA_PROGRESSION_XP_HISTORY) or [])
        )
        ProgressionEngine.prune_xp_history(xp_history)
        return {
            const.DATA_PROGRESSION_TOTAL_XP: max(total_xp, 0),
            const.DATA_PROGRESSION_CURRENT_LEVEL: ProgressionEngine.level_for_xp(
                max(total_xp, 0), levels
            ),
            const.DATA_PROGRESSION_LEVEL_HISTORY: list(
                copy.deepcopy(
                    progression.get(const.DATA_PROGRESSION_LEVEL_HISTORY) or []
                )
            ),
            const.DATA_PROGRESSION_XP_HISTORY: xp_history,
        }

    @staticmethod
    def apply_xp(
        progression: Mapping[str, Any],
        amount: Any,
        reason: str,
        timestamp: str,
        levels: Sequence[LevelDefinition] = XP_LEVELS,
    ) -> tuple[ProgressionData, XPGrantResult]:
        """Apply one XP grant and return (new progression, result).

        Invalid amounts leave a normalized copy unchanged and report
        ``granted=False``. A level rise appends a level-history event.
        """
        state = ProgressionEngine.normalize(progression, levels)
        total_before = state[const.DATA_PROGRESSION_TOTAL_XP]

        if not ProgressionEngine.is_valid_amount(amount):
            return state, {
                "granted": False,
                "amount": 0,
                "reason": reason,
                "total_xp": total_before,
                "level_up": None,
            }

        old_level = state[const.DATA_PROGRESSION_CURRENT_LEVEL]
        total_xp = total_before + amount
        new_level = ProgressionEngine.level_for_xp(total_xp, levels)
        state[const.DATA_PROGRESSION_TOTAL_XP] = total_xp
        state[const.DATA_PROGRESSION_CURRENT_LEVEL] = new_level

        level_up = None
        if new_level > old_level:
            state[const.DATA_PROGRESSION_LEVEL_HISTORY].append(
                {
                    const.DATA_LEVEL_HISTORY_LEVEL: new_level,
                    const.DATA_LEVEL_HISTORY_DATE: timestamp,
                    const.DATA_LEVEL_HISTORY_TOTAL_XP: total_xp,
                }
            )
            level_up = {
                "old_level": old_level,
                "new_level": new_level,
                "title": ProgressionEngine.title_for_level(new_level, levels),
            }

        state[const.DATA_PROGRESSION_XP_HISTORY].append(
            {
                const.DATA_XP_HISTORY_AMOUNT: amount,
                const.DATA_XP_HISTORY_REASON: reason,
                const.DATA_XP_HISTORY_DATE: timestamp,
                const.DATA_XP_HISTORY_TOTAL_XP: total_xp,
            }
        )
        ProgressionEngine.prune_xp_history(state[const.DATA_PROGRESSION_XP_HISTORY])

        return state, {
            "granted": True,
            "amount": amount,
            "reason": reason,
            "total_xp": total_xp,
            "level_up": level_up,
        }

    @staticmethod
    def progression_view(
        progression: Mapping[str, Any],
        levels: Sequence[LevelDefinition] = XP_LEVELS,
    ) -> ProgressionView:
        """Level display data.

        At the top level ``xp_for_level`` and ``xp_to_next_level`` are 0 and
        ``progress`` is 100.
        """
        total_xp = max(int(progression.get(const.DATA_PROGRESSION_TOTAL_XP, 0) or 0), 0)
        level = ProgressionEngine.level_for_xp(total_xp, levels)
        current_threshold = ProgressionEngine.threshold_for_level(level, levels) or 0
        next_threshold = ProgressionEngine.threshold_for_level(level + 1, levels)
        xp_in_level = total_xp - current_threshold

        if next_threshold is None:
            return {
                "current_level": level,
                "title": ProgressionEngine.title_for_level(level, levels),
                "total_xp": total_xp,
                "xp_in_level": xp_in_level,
                "xp_for_level": 0,
                "xp_to_next_level": 0,
                "progress": 100.0,
                "is_max_level": True,
            }

        xp_for_level = next_threshold - current_threshold
        return {
            "current_level": level,
            "title": ProgressionEngine.title_for_level(level, levels),
            "total_xp": total_xp,
            "xp_in_level": xp_in_level,
            "xp_for_level": xp_for_level,
            "xp_to_next_level": next_threshold - total_xp,
            "progress": calculate_percentage(xp_in_level, xp_for_level),
            "is_max_level": False,
        }
