"""Repeated-battle evaluation runner."""
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .metrics import SideMetrics, compute_side_metrics
from ..agents.base import BaseAgent
from ..config import EngineConfig
from ..data.models import CombatantProfile
from ..engine.battle import SIDE_A, SIDE_B, BattleSimulator

logger = logging.getLogger(__name__)

@dataclass
class MatchupResult:
    """Results of repeated battles between two combatants."""
    name_a: str
    name_b: str
    a_wins: int = 0
    b_wins: int = 0
    draws: int = 0
    total_battles: int = 0
    turn_counts: List[int] = field(default_factory=list)

    @property
    def a_winrate(self) -> float:
        if self.total_battles == 0:
            return 0.0
        return self.a_wins / self.total_battles

    @property
    def average_turns(self) -> float:
        if not self.turn_counts:
            return 0.0
        return sum(self.turn_counts) / len(self.turn_counts)

    def metrics(self) -> tuple[SideMetrics, SideMetrics]:
        return (
            compute_side_metrics(self.name_a, self.a_wins, self.b_wins, self.draws),
            compute_side_metrics(self.name_b, self.b_wins, self.a_wins, self.draws),
        )

    def to_dict(self) -> dict:
        return {
            "a": self.name_a,
            "b": self.name_b,
            "a_wins": self.a_wins,
            "b_wins": self.b_wins,
            "draws": self.draws,
            "total_battles": self.total_battles,
            "a_winrate": self.a_winrate,
            "average_turns": self.average_turns,
        }


class MatchupRunner:
    """Run many seeded battles between the same two profiles."""

    def __init__(
        self,
        agent: Optional[BaseAgent] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.agent = agent
        self.config = config or EngineConfig()

    def run_matchup(
        self,
        profile_a: CombatantProfile,
        profile_b: CombatantProfile,
        n_battles: int = 100,
        seed: Optional[int] = None,
        progress: Optional[Callable[[int], None]] = None,
    ) -> MatchupResult:
        """Run battles between two profiles.

        Args:
            profile_a: First combatant
            profile_b: Second combatant
            n_battles: Number of battles to run
            seed: Master seed; each battle gets its own derived seed
            progress: Called with the battle index after each battle

        Returns:
            MatchupResult with statistics
        """
        result = MatchupResult(name_a=profile_a.name, name_b=profile_b.name)
        seeds = random.Random(seed)

        logger.info(f"Running {n_battles} battles: {result.name_a} vs {result.name_b}")

        for i in range(n_battles):
            simulator = BattleSimulator(
                agent=self.agent,
                seed=seeds.getrandbits(32),
                config=self.config,
            )
            battle = simulator.run(profile_a, profile_b)

            # both sides may share a name
            if battle.winner_side == SIDE_A:
                result.a_wins += 1
            elif battle.winner_side == SIDE_B:
                result.b_wins += 1
            else:
                result.draws += 1
            result.total_battles += 1
            result.turn_counts.append(battle.turns)

            if progress is not None:
                progress(i)

        logger.info(f"Results: {result.a_wins}-{result.b_wins} ({result.draws} draws)")

        return result
