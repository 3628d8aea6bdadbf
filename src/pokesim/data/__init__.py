"""Combatant data: models, providers and caching."""
from .models import (
    MoveCategory,
    MoveDescriptor,
    CombatantProfile,
    Participant,
    BattleResult,
    PokemonData,
)
from .cache import TTLCache
from .provider import ProfileProvider, StaticProfileProvider, PokeAPIProvider
from .pokedex import PokedexLookup

__all__ = [
    "MoveCategory",
    "MoveDescriptor",
    "CombatantProfile",
    "Participant",
    "BattleResult",
    "PokemonData",
    "TTLCache",
    "ProfileProvider",
    "StaticProfileProvider",
    "PokeAPIProvider",
    "PokedexLookup",
]
