"""Shared utilities."""

from pokesim.utils.battle_utils import summarize_battle, hp_checkpoints, format_profile

__all__ = ["summarize_battle", "hp_checkpoints", "format_profile"]
