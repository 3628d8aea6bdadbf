"""Agent implementations."""
from typing import Optional

from .base import BaseAgent, DEFAULT_MOVE
from .random_agent import RandomAgent
from .heuristic_agent import MaxDamageAgent, choose_move

__all__ = [
    "BaseAgent",
    "DEFAULT_MOVE",
    "RandomAgent",
    "MaxDamageAgent",
    "choose_move",
    "make_agent",
]

BASELINE_AGENTS = {
    "maxdamage": MaxDamageAgent,
    "random": RandomAgent,
}

def make_agent(name: str, seed: Optional[int] = None) -> BaseAgent:
    """Build a baseline agent by registry name; seeded agents get ``seed``."""
    if name == "random":
        return RandomAgent(seed=seed)
    return BASELINE_AGENTS[name]()
