"""Profile providers: turn a Pokemon identifier into a CombatantProfile."""
import json
import threading
import time
import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import requests

from .cache import TTLCache
from .models import CombatantProfile, MoveCategory, MoveDescriptor
from ..config import ProviderConfig
from ..errors import ProfileNotFound, ProviderUnavailable

logger = logging.getLogger(__name__)

DAMAGE_CLASSES = {c.value for c in MoveCategory}

class ProfileProvider(ABC):
    """Source of combatant profiles."""

    @abstractmethod
    def resolve(self, identifier: str) -> CombatantProfile:
        """Resolve an identifier (case-insensitive) to a profile.

        Raises:
            ProfileNotFound: identifier is unknown to the provider
            ProviderUnavailable: the backing source failed
        """

    @staticmethod
    def normalize(identifier: str) -> str:
        return identifier.strip().lower()


class StaticProfileProvider(ProfileProvider):
    """Provider backed by an in-memory set of profiles."""

    def __init__(self, profiles: Iterable[CombatantProfile]):
        self._profiles: Dict[str, CombatantProfile] = {
            self.normalize(p.name): p for p in profiles
        }

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, identifier: str) -> bool:
        return self.normalize(identifier) in self._profiles

    def resolve(self, identifier: str) -> CombatantProfile:
        try:
            return self._profiles[self.normalize(identifier)]
        except KeyError:
            raise ProfileNotFound(identifier) from None

    @classmethod
    def from_json_file(cls, path: Path) -> "StaticProfileProvider":
        """Load profiles from a JSON file holding a list of profile objects."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Profile file not found: {path}")

        records = json.loads(path.read_text())
        profiles = [CombatantProfile.model_validate(r) for r in records]
        logger.info(f"Loaded {len(profiles)} profiles from {path}")
        return cls(profiles)


class PokeAPIProvider(ProfileProvider):
    """Provider that fetches profiles from PokeAPI.

    Every JSON document is cached by URL, so repeated battles involving the
    same Pokemon (or sharing moves) hit the network once per TTL window.
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        cache: Optional[TTLCache] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ProviderConfig()
        self.cache = cache if cache is not None else TTLCache(ttl=self.config.cache_ttl)
        self.session = session or requests.Session()
        self.last_request_time = 0.0
        self._rate_lock = threading.Lock()

    def _rate_limit(self) -> None:
        """Enforce rate limiting between requests."""
        if self.config.requests_per_second <= 0:
            return
        # move fetches call this from several worker threads
        with self._rate_lock:
            elapsed = time.time() - self.last_request_time
            sleep_time = (1.0 / self.config.requests_per_second) - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
            self.last_request_time = time.time()

    def fetch_json(self, url: str, identifier: str) -> dict:
        """GET a JSON document through the cache.

        Args:
            url: Absolute URL to fetch
            identifier: Name reported in errors

        Returns:
            Decoded JSON body
        """
        hit = self.cache.get(url)
        if hit is not None:
            return hit

        self._rate_limit()
        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise ProviderUnavailable(identifier, str(e)) from e

        if response.status_code == 404:
            raise ProfileNotFound(identifier)
        try:
            response.raise_for_status()
            data = response.json()
        except (requests.HTTPError, ValueError) as e:
            raise ProviderUnavailable(identifier, f"Request failed {response.status_code}: {url}") from e

        self.cache.set(url, data)
        return data

    def pokemon_url(self, identifier: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/pokemon/{self.normalize(identifier)}"

    def resolve(self, identifier: str) -> CombatantProfile:
        raw = self.fetch_json(self.pokemon_url(identifier), identifier)

        stats = {s["stat"]["name"]: s["base_stat"] for s in raw.get("stats", [])}
        types = [t["type"]["name"] for t in sorted(raw.get("types", []), key=lambda t: t.get("slot", 0))]
        moves = self._damaging_moves(raw.get("moves", []), identifier)

        profile = CombatantProfile(
            name=raw["name"],
            stats=stats,
            types=tuple(types),
            moves=tuple(moves),
            speed=stats.get("speed", 50),
        )
        logger.debug(f"Resolved {profile.name}: types={profile.types} moves={[m.name for m in profile.moves]}")
        return profile

    def _fetch_move(self, url: str, identifier: str) -> dict:
        try:
            return self.fetch_json(url, identifier)
        except ProfileNotFound as e:
            # A dangling move link is a provider fault, not an unknown Pokemon
            raise ProviderUnavailable(identifier, f"Move not found: {url}") from e

    def _damaging_moves(self, entries: List[dict], identifier: str) -> List[MoveDescriptor]:
        """Fetch the first scanned moves and keep damaging ones with power."""
        urls = [m["move"]["url"] for m in entries[: self.config.move_scan_limit]]
        if not urls:
            return []

        with ThreadPoolExecutor(max_workers=min(8, len(urls))) as pool:
            details = list(pool.map(lambda u: self._fetch_move(u, identifier), urls))

        moves = []
        for md in details:
            damage_class = (md.get("damage_class") or {}).get("name")
            if not md.get("power") or damage_class not in DAMAGE_CLASSES:
                continue
            moves.append(MoveDescriptor(
                name=md["name"],
                power=md["power"],
                type=(md.get("type") or {}).get("name"),
                accuracy=md.get("accuracy"),
                category=damage_class,
            ))
            if len(moves) == self.config.max_moves:
                break
        return moves
