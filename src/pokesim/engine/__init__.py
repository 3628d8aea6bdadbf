"""Battle simulation engine.

Import the battle loop from ``pokesim.engine.battle``; it depends on
``pokesim.agents``.
"""
from .typechart import ALL_TYPES, TYPE_CHART, effectiveness, effectiveness_label
from .damage import DamageRoll, calculate_damage, roll_damage
from .status import Status, StatusEngine

__all__ = [
    "ALL_TYPES",
    "TYPE_CHART",
    "effectiveness",
    "effectiveness_label",
    "DamageRoll",
    "calculate_damage",
    "roll_damage",
    "Status",
    "StatusEngine",
]
