"""Heuristic move selection."""
from typing import List, Tuple

from .base import BaseAgent, DEFAULT_MOVE
from ..data.models import CombatantProfile, MoveDescriptor
from ..engine.typechart import effectiveness

class MaxDamageAgent(BaseAgent):
    """Agent that selects the move with the best power x effectiveness score.

    The score ignores stats, STAB, accuracy and status, so the choice depends
    only on the two profiles and is the same every turn.
    """

    def choose_move(self, attacker: CombatantProfile, opponent: CombatantProfile) -> MoveDescriptor:
        """Choose the highest scoring move; ties go to the earlier pool slot."""
        if not attacker.moves:
            return DEFAULT_MOVE

        scored_moves: List[Tuple[float, MoveDescriptor]] = [
            (self.score_move(move, opponent), move) for move in attacker.moves
        ]
        # sort is stable, so equal scores keep pool order
        scored_moves.sort(reverse=True, key=lambda x: x[0])
        return scored_moves[0][1]

    def score_move(self, move: MoveDescriptor, opponent: CombatantProfile) -> float:
        """Score a move against the opponent's typing."""
        return move.effective_power * effectiveness(move.effective_type, opponent.types)


_default_agent = MaxDamageAgent()

def choose_move(attacker: CombatantProfile, opponent: CombatantProfile) -> MoveDescriptor:
    """Pick the attacker's move with the default heuristic."""
    return _default_agent.choose_move(attacker, opponent)
