"""Random baseline agent."""
import random
from typing import Optional

from .base import BaseAgent, DEFAULT_MOVE
from ..data.models import CombatantProfile, MoveDescriptor

class RandomAgent(BaseAgent):
    """Agent that selects uniformly at random from the move pool."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def choose_move(self, attacker: CombatantProfile, opponent: CombatantProfile) -> MoveDescriptor:
        """Choose a random move.

        Uses its own random source so the battle's damage and status rolls
        stay reproducible for a given battle seed.
        """
        if not attacker.moves:
            return DEFAULT_MOVE

        return self._rng.choice(attacker.moves)
