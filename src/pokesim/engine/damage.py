"""Damage formula for a single hit."""
import math
import random
from dataclasses import dataclass
from typing import Optional

from ..config import EngineConfig
from ..data.models import CombatantProfile, MoveDescriptor
from .typechart import effectiveness

@dataclass(frozen=True)
class DamageRoll:
    """Breakdown of one damage computation."""
    damage: int
    base: int
    stab: float
    effectiveness: float
    rand: float

def roll_damage(
    attacker: CombatantProfile,
    defender: CombatantProfile,
    move: MoveDescriptor,
    rng: random.Random,
    config: Optional[EngineConfig] = None,
) -> DamageRoll:
    """Compute damage and keep the intermediate multipliers.

    Args:
        attacker: Profile of the side using the move
        defender: Profile of the side being hit
        move: Move being used
        rng: Random source for the damage roll
        config: Engine constants (level, defaults, STAB, roll range)

    Returns:
        DamageRoll whose ``damage`` is always at least 1
    """
    cfg = config or EngineConfig()

    if move.is_physical:
        atk_stat = attacker.stats.get("attack", cfg.default_stat)
        def_stat = defender.stats.get("defense", cfg.default_stat)
    else:
        atk_stat = attacker.stats.get("special-attack", cfg.default_stat)
        def_stat = defender.stats.get("special-defense", cfg.default_stat)
    def_stat = max(1, def_stat)

    power = move.effective_power
    base = math.floor((2 * cfg.level / 5 + 2) * power * (atk_stat / def_stat) / 50) + 2

    move_type = move.effective_type
    stab = cfg.stab_multiplier if move_type in attacker.types else 1.0
    eff = effectiveness(move_type, defender.types)
    rand = rng.uniform(cfg.rand_low, cfg.rand_high)

    # An immune hit still floors to 1 here
    damage = max(1, math.floor(base * stab * eff * rand))
    return DamageRoll(damage=damage, base=base, stab=stab, effectiveness=eff, rand=rand)

def calculate_damage(
    attacker: CombatantProfile,
    defender: CombatantProfile,
    move: MoveDescriptor,
    rng: random.Random,
    config: Optional[EngineConfig] = None,
) -> int:
    """Damage dealt by one hit of ``move``."""
    return roll_damage(attacker, defender, move, rng, config).damage
