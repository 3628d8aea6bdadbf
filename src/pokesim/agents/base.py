"""Base agent classes."""
from abc import ABC, abstractmethod

from ..data.models import CombatantProfile, MoveCategory, MoveDescriptor

# Used whenever a combatant has no usable move
DEFAULT_MOVE = MoveDescriptor(
    name="tackle",
    power=40,
    type="normal",
    category=MoveCategory.PHYSICAL,
)

class BaseAgent(ABC):
    """Base class for move selection policies."""

    @abstractmethod
    def choose_move(self, attacker: CombatantProfile, opponent: CombatantProfile) -> MoveDescriptor:
        """Choose the move the attacker uses this turn.

        Args:
            attacker: Profile of the acting combatant
            opponent: Profile of the combatant being targeted

        Returns:
            Move from the attacker's pool, or DEFAULT_MOVE if the pool is empty
        """
        pass

    @property
    def name(self) -> str:
        return self.__class__.__name__
