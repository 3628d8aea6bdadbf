"""One-on-one Pokemon battle simulator."""
from pokesim.data.models import BattleResult, CombatantProfile, MoveDescriptor
from pokesim.engine.battle import BattleSimulator
from pokesim.service import BattleService, simulate_battle

__version__ = "0.1.0"

__all__ = [
    "BattleResult",
    "CombatantProfile",
    "MoveDescriptor",
    "BattleSimulator",
    "BattleService",
    "simulate_battle",
]
