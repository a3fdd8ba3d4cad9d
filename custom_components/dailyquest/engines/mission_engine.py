"""Mission Engine - Deterministic daily mission selection.

This engine provides stateless, pure Python functions for:
- Deriving an integer seed from a date key
- A seeded linear congruential "random" draw
- A Fisher-Yates shuffle driven by that draw
- Picking the day's missions from the pool

The same date always yields the same missions, across restarts, with no global
random state involved. The pool passed in is never reordered.

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeVar

from .. import const

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..catalog import MissionDefinition

T = TypeVar("T")

# LCG parameters (reproducibility matters, statistical quality does not)
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


class MissionEngine:
    """Pure logic engine for mission selection.

    All methods are static - no instance state.
    """

    @staticmethod
    def date_seed(date_key: str) -> int:
        """Turn "YYYY-MM-DD" into an integer seed ("2026-10-19" → 20261019).

        Any characters other than digits are dropped. A key without digits
        gives seed 0.
        """
        digits = "".join(ch for ch in date_key if ch.isdigit())
        return int(digits) if digits else 0

    @staticmethod
    def seeded_random(seed: int) -> float:
        """Return a float in [0, 1) that depends only on ``seed``."""
        return ((seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS) / LCG_MODULUS

    @staticmethod
    def shuffle_with_seed(pool: Sequence[T], seed: int) -> list[T]:
        """Return a shuffled copy of ``pool``.

        Fisher-Yates from the end: at step ``current_index`` (len down to 1) the
        swap partner is ``floor(seeded_random(seed + current_index) * current_index)``.
        """
        shuffled = list(pool)
        current_index = len(shuffled)
        while current_index != 0:
            random_index = math.floor(
                MissionEngine.seeded_random(seed + current_index) * current_index
            )
            current_index -= 1
            shuffled[current_index], shuffled[random_index] = (
                shuffled[random_index],
                shuffled[current_index],
            )
        return shuffled

    @staticmethod
    def select_missions(
        date_key: str,
        pool: Sequence[MissionDefinition],
        count: int = const.DEFAULT_MISSIONS_PER_DAY,
    ) -> list[MissionDefinition]:
        """Pick the day's missions.

        Returns the first ``count`` entries of the seeded shuffle, or the whole
        shuffled pool when it holds fewer than ``count`` missions.
        """
        if count <= 0:
            return []
        seed = MissionEngine.date_seed(date_key)
        return MissionEngine.shuffle_with_seed(pool, seed)[:count]
