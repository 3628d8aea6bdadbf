"""Status ailments: infliction, move prevention and residual damage."""
import math
import random
from enum import Enum
from types import MappingProxyType
from typing import Optional

from ..config import EngineConfig
from ..data.models import MoveDescriptor

class Status(str, Enum):
    NONE = ""
    PARALYSIS = "paralysis"
    BURN = "burn"
    POISON = "poison"

    def __bool__(self) -> bool:
        return self is not Status.NONE

# move type -> ailment it may inflict
INFLICTED_BY_TYPE = MappingProxyType({
    "electric": Status.PARALYSIS,
    "fire": Status.BURN,
    "poison": Status.POISON,
})

class StatusEngine:
    """Applies the three ailments using an injected random source."""

    def __init__(self, rng: random.Random, config: Optional[EngineConfig] = None):
        self.rng = rng
        self.config = config or EngineConfig()

    def effective_speed(self, speed: int, status: Status) -> int:
        """Speed used for turn order; paralysis halves it."""
        if status is Status.PARALYSIS:
            return math.floor(speed * self.config.paralysis_speed_factor)
        return speed

    def is_fully_paralyzed(self, status: Status) -> bool:
        """Roll whether a paralyzed combatant loses its action this turn.

        No random draw is made for combatants that are not paralyzed.
        """
        if status is not Status.PARALYSIS:
            return False
        return self.rng.random() < self.config.paralysis_skip_chance

    def try_inflict(self, move: MoveDescriptor, target_status: Status) -> Status:
        """Roll for an ailment after a landed hit.

        Returns the newly inflicted status, or ``Status.NONE`` when the target
        already carries one, the roll fails, or the move type inflicts nothing.
        """
        if target_status:
            return Status.NONE
        if self.rng.random() >= self.config.affliction_chance:
            return Status.NONE
        return INFLICTED_BY_TYPE.get(move.effective_type, Status.NONE)

    def residual_damage(self, status: Status, max_hp: int) -> int:
        """HP lost to burn or poison after an action."""
        if status is Status.BURN:
            return math.floor(max_hp * self.config.burn_fraction)
        if status is Status.POISON:
            return math.floor(max_hp * self.config.poison_fraction)
        return 0

def residual_message(name: str, status: Status) -> str:
    if status is Status.BURN:
        return f"{name} is hurt by its burn!"
    return f"{name} is hurt by poison!"
