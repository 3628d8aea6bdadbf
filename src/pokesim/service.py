"""Battle service: resolve two combatants and simulate their battle."""
import asyncio
import logging
import threading
import time
from typing import Optional

from .agents.base import BaseAgent
from .config import Config, config as default_config
from .data.models import BattleResult, CombatantProfile
from .data.provider import PokeAPIProvider, ProfileProvider
from .engine.battle import BattleSimulator

logger = logging.getLogger(__name__)

class BattleService:
    """Entry point used by transport layers and scripts.

    Provider failures (``ProfileNotFound``, ``ProviderUnavailable``) propagate
    to the caller and abort only the request that triggered them.
    """

    def __init__(
        self,
        provider: Optional[ProfileProvider] = None,
        agent: Optional[BaseAgent] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or default_config
        self.provider = provider or PokeAPIProvider(self.config.provider)
        self.agent = agent

    async def resolve_pair(self, name_a: str, name_b: str) -> tuple[CombatantProfile, CombatantProfile]:
        """Resolve both combatants concurrently."""
        profile_a, profile_b = await asyncio.gather(
            asyncio.to_thread(self.provider.resolve, name_a),
            asyncio.to_thread(self.provider.resolve, name_b),
        )
        return profile_a, profile_b

    async def simulate_battle_async(
        self,
        name_a: str,
        name_b: str,
        seed: Optional[int] = None,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> BattleResult:
        """Resolve both names, then run the battle.

        Args:
            name_a: First combatant (wins speed ties)
            name_b: Second combatant
            seed: Seed for the battle's random source; falls back to config
            timeout: Seconds the battle loop may run before it is cancelled
            cancel_event: Event checked between turns

        Returns:
            BattleResult
        """
        profile_a, profile_b = await self.resolve_pair(name_a, name_b)

        if seed is None:
            seed = self.config.seed
        simulator = BattleSimulator(agent=self.agent, seed=seed, config=self.config.engine)
        deadline = time.monotonic() + timeout if timeout is not None else None

        logger.info(f"Simulating {profile_a.name} vs {profile_b.name} (seed={seed})")
        return await asyncio.to_thread(
            simulator.run, profile_a, profile_b, deadline=deadline, cancel_event=cancel_event
        )

    def simulate_battle(self, name_a: str, name_b: str, **kwargs) -> BattleResult:
        """Blocking wrapper around ``simulate_battle_async``."""
        return asyncio.run(self.simulate_battle_async(name_a, name_b, **kwargs))


def simulate_battle(name_a: str, name_b: str, seed: Optional[int] = None) -> BattleResult:
    """Simulate a battle between two Pokemon fetched from PokeAPI."""
    return BattleService().simulate_battle(name_a, name_b, seed=seed)
