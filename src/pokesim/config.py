"""Global configuration for the pokesim project."""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EngineConfig:
    """Configuration for the battle engine."""

    level: int = 50
    max_turns: int = 100
    default_hp: int = 60
    default_stat: int = 50
    rand_low: float = 0.85
    rand_high: float = 1.0
    stab_multiplier: float = 1.5
    paralysis_speed_factor: float = 0.5
    paralysis_skip_chance: float = 0.25
    affliction_chance: float = 0.2
    burn_fraction: float = 0.0625
    poison_fraction: float = 0.125


@dataclass
class ProviderConfig:
    """Configuration for the PokeAPI profile provider."""

    base_url: str = field(
        default_factory=lambda: os.getenv("POKESIM_API_URL", "https://pokeapi.co/api/v2")
    )
    cache_ttl: float = field(
        default_factory=lambda: float(os.getenv("POKESIM_CACHE_TTL", "60"))
    )
    move_scan_limit: int = 30
    max_moves: int = 4
    timeout: float = 10.0
    requests_per_second: float = 0.0  # 0 disables rate limiting


@dataclass
class Config:
    """Global configuration container."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    provider: ProviderConfig = field(default_factory=ProviderConfig)

    # Environment variables
    seed: Optional[int] = field(
        default_factory=lambda: int(os.environ["POKESIM_SEED"]) if os.getenv("POKESIM_SEED") else None
    )


# Global config instance
config = Config()
