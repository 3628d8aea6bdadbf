"""Pokedex lookups: full species records and the index of known names."""
import logging
from typing import List, Optional, Union

from .models import PokemonData
from .provider import PokeAPIProvider

logger = logging.getLogger(__name__)

class PokedexLookup:
    """Read-only Pokedex built on the provider's cached fetch."""

    def __init__(self, provider: Optional[PokeAPIProvider] = None):
        self.provider = provider or PokeAPIProvider()

    @property
    def base_url(self) -> str:
        return self.provider.config.base_url.rstrip("/")

    def list_names(self, limit: int = 2000) -> List[str]:
        """Names of all Pokemon known to the API."""
        data = self.provider.fetch_json(f"{self.base_url}/pokemon?limit={limit}", "pokemon index")
        return [r["name"] for r in data.get("results", [])]

    def lookup(self, identifier: Union[str, int]) -> PokemonData:
        """Fetch a Pokemon's details together with its evolution chain.

        Args:
            identifier: Name (any case) or national dex number

        Returns:
            PokemonData record
        """
        key = self.provider.normalize(str(identifier))
        pokemon = self.provider.fetch_json(f"{self.base_url}/pokemon/{key}", key)
        species = self.provider.fetch_json(f"{self.base_url}/pokemon-species/{key}", key)

        chain: List[str] = []
        evo_url = (species.get("evolution_chain") or {}).get("url")
        if evo_url:
            evo = self.provider.fetch_json(evo_url, key)
            chain = evolution_chain(evo["chain"])
        else:
            logger.warning(f"No evolution chain listed for {key}")

        return PokemonData(
            id=pokemon["id"],
            name=pokemon["name"],
            types=[t["type"]["name"] for t in pokemon.get("types", [])],
            base_stats={
                s["stat"]["name"].replace("-", "_"): s["base_stat"]
                for s in pokemon.get("stats", [])
            },
            abilities=[a["ability"]["name"] for a in pokemon.get("abilities", [])],
            moves=[m["move"]["name"] for m in pokemon.get("moves", [])],
            height=pokemon.get("height"),
            weight=pokemon.get("weight"),
            evolution_chain=chain,
            sprites=pokemon.get("sprites") or {},
        )

def evolution_chain(node: dict) -> List[str]:
    """Flatten an evolution-chain tree into species names, depth first."""
    names = [node["species"]["name"]]
    for child in node.get("evolves_to", []):
        names.extend(evolution_chain(child))
    return names
