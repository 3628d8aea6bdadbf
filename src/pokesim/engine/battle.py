"""Turn orchestration: runs a battle between two profiles to a result."""
import random
import threading
import time
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .damage import roll_damage
from .status import Status, StatusEngine, residual_message
from .typechart import effectiveness_label
from ..agents.base import BaseAgent
from ..agents.heuristic_agent import MaxDamageAgent
from ..config import EngineConfig
from ..data.models import BattleResult, CombatantProfile, MoveDescriptor, Participant
from ..errors import BattleCancelled

logger = logging.getLogger(__name__)

DRAW = "draw"
SIDE_A = "a"
SIDE_B = "b"

@dataclass
class Side:
    """Mutable per-battle state of one combatant."""
    profile: CombatantProfile
    hp: int
    max_hp: int
    status: Status = Status.NONE

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def fainted(self) -> bool:
        return self.hp <= 0

    def take_damage(self, amount: int) -> None:
        self.hp = max(0, self.hp - amount)

    @classmethod
    def from_profile(cls, profile: CombatantProfile, config: EngineConfig) -> "Side":
        max_hp = 2 * profile.stats.get("hp", config.default_hp)
        return cls(profile=profile, hp=max_hp, max_hp=max_hp)

@dataclass
class BattleState:
    """State of one battle; the log only ever grows."""
    a: Side
    b: Side
    turn: int = 1
    log: List[str] = field(default_factory=list)

    @property
    def concluded(self) -> bool:
        return self.a.fainted or self.b.fainted

    def hp_summary(self) -> str:
        return (
            f"{self.a.name}: {self.a.hp}/{self.a.max_hp} HP | "
            f"{self.b.name}: {self.b.hp}/{self.b.max_hp} HP"
        )

    def winner_side(self) -> Optional[str]:
        """"a" or "b" for the winning side, None for a draw."""
        a, b = self.a, self.b
        if not a.fainted and b.fainted:
            return SIDE_A
        if not b.fainted and a.fainted:
            return SIDE_B
        if a.hp == b.hp:
            return None
        return SIDE_A if a.hp > b.hp else SIDE_B

    def winner(self) -> str:
        """Winner's name, or "draw"."""
        side = self.winner_side()
        if side is None:
            return DRAW
        return self.a.name if side == SIDE_A else self.b.name

class BattleSimulator:
    """Runs one-on-one battles.

    The simulator owns a single random source used for accuracy, damage and
    status rolls; seeding it (or injecting a stub) makes the log reproducible.
    """

    def __init__(
        self,
        agent: Optional[BaseAgent] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.agent = agent or MaxDamageAgent()
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.config = config or EngineConfig()
        self.status_engine = StatusEngine(self.rng, self.config)

    def run(
        self,
        profile_a: CombatantProfile,
        profile_b: CombatantProfile,
        deadline: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> BattleResult:
        """Simulate a battle to completion.

        Args:
            profile_a: First combatant; wins speed ties
            profile_b: Second combatant
            deadline: ``time.monotonic()`` value after which no new turn starts
            cancel_event: Event that, once set, stops the battle before the next turn

        Returns:
            BattleResult with the narration log and the winner

        Raises:
            BattleCancelled: deadline passed or cancel_event set between turns
        """
        state = self.start(profile_a, profile_b)
        logger.debug(f"Battle start: {state.a.name} ({state.a.max_hp} HP) vs {state.b.name} ({state.b.max_hp} HP)")

        while not state.concluded and state.turn <= self.config.max_turns:
            if cancel_event is not None and cancel_event.is_set():
                raise BattleCancelled(state.turn)
            if deadline is not None and time.monotonic() > deadline:
                raise BattleCancelled(state.turn, reason="timed out")
            self.play_turn(state)

        result = state.winner()
        logger.info(f"{state.a.name} vs {state.b.name}: {result} after {state.turn - 1} turns")

        return BattleResult(
            participants=(
                Participant(name=profile_a.name, types=list(profile_a.types)),
                Participant(name=profile_b.name, types=list(profile_b.types)),
            ),
            log=state.log,
            result=result,
            winner_side=state.winner_side(),
            turns=state.turn - 1,
            seed=self.seed,
        )

    def start(self, profile_a: CombatantProfile, profile_b: CombatantProfile) -> BattleState:
        return BattleState(
            a=Side.from_profile(profile_a, self.config),
            b=Side.from_profile(profile_b, self.config),
        )

    def turn_order(self, state: BattleState) -> Tuple[Tuple[Side, Side], Tuple[Side, Side]]:
        """(attacker, defender) pairs in acting order; speed ties go to side A."""
        a_speed = self.status_engine.effective_speed(state.a.profile.speed, state.a.status)
        b_speed = self.status_engine.effective_speed(state.b.profile.speed, state.b.status)
        if a_speed >= b_speed:
            return (state.a, state.b), (state.b, state.a)
        return (state.b, state.a), (state.a, state.b)

    def play_turn(self, state: BattleState) -> None:
        """Resolve one full turn and advance the turn counter."""
        state.log.append(f"-- Turn {state.turn} --")

        a_move = self.agent.choose_move(state.a.profile, state.b.profile)
        b_move = self.agent.choose_move(state.b.profile, state.a.profile)

        for attacker, defender in self.turn_order(state):
            if state.concluded:
                break
            move = a_move if attacker is state.a else b_move
            self._act(state, attacker, defender, move)
            if state.concluded:
                break
            self._apply_residual(state, defender)

        state.log.append(state.hp_summary())
        logger.debug(f"Turn {state.turn}: {state.hp_summary()}")
        state.turn += 1

    def _act(self, state: BattleState, attacker: Side, defender: Side, move: MoveDescriptor) -> None:
        if self.status_engine.is_fully_paralyzed(attacker.status):
            state.log.append(f"{attacker.name} is fully paralyzed and can't move!")
            return

        if not self._hits(move):
            state.log.append(f"{attacker.name} used {move.name}, but it missed!")
            return

        roll = roll_damage(attacker.profile, defender.profile, move, self.rng, self.config)
        defender.take_damage(roll.damage)
        note = effectiveness_label(roll.effectiveness)
        state.log.append(f"{attacker.name} used {move.name} and dealt {roll.damage} damage. {note}".strip())

        if defender.fainted:
            return

        inflicted = self.status_engine.try_inflict(move, defender.status)
        if inflicted:
            defender.status = inflicted
            state.log.append(f"{defender.name} is afflicted by {inflicted.value}!")

    def _hits(self, move: MoveDescriptor) -> bool:
        if move.never_misses:
            return True
        return self.rng.random() * 100 <= move.accuracy

    def _apply_residual(self, state: BattleState, target: Side) -> None:
        """Burn/poison damage on the side that was just targeted."""
        if not target.status or target.status is Status.PARALYSIS:
            return
        target.take_damage(self.status_engine.residual_damage(target.status, target.max_hp))
        state.log.append(residual_message(target.name, target.status))


def simulate(
    profile_a: CombatantProfile,
    profile_b: CombatantProfile,
    seed: Optional[int] = None,
) -> BattleResult:
    """Run a single battle with the default agent."""
    return BattleSimulator(seed=seed).run(profile_a, profile_b)
