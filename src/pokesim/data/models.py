"""Data models for combatant profiles and battle results."""
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Move power assumed when the provider omits it; used by both selector and damage
DEFAULT_POWER = 40
DEFAULT_TYPE = "normal"
DEFAULT_SPEED = 50

class MoveCategory(str, Enum):
    PHYSICAL = "physical"
    SPECIAL = "special"

class MoveDescriptor(BaseModel):
    """A damaging move as supplied by the data provider.

    Optional fields stay optional here; the documented defaults are applied
    through the ``effective_*`` accessors where the engine consumes them.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    power: Optional[int] = Field(default=None, gt=0)
    type: Optional[str] = None
    accuracy: Optional[int] = Field(default=None, ge=1, le=100)
    category: Optional[MoveCategory] = None

    @property
    def effective_power(self) -> int:
        return self.power if self.power is not None else DEFAULT_POWER

    @property
    def effective_type(self) -> str:
        return self.type or DEFAULT_TYPE

    @property
    def is_physical(self) -> bool:
        # Missing category is treated as physical
        return self.category != MoveCategory.SPECIAL

    @property
    def never_misses(self) -> bool:
        return self.accuracy is None

class CombatantProfile(BaseModel):
    """Resolved stats, types and moves for one combatant."""
    model_config = ConfigDict(frozen=True)

    name: str
    stats: Dict[str, int] = Field(default_factory=dict)
    types: Tuple[str, ...]
    moves: Tuple[MoveDescriptor, ...] = ()
    speed: int = DEFAULT_SPEED

    @model_validator(mode="before")
    @classmethod
    def _speed_from_stats(cls, data):
        if isinstance(data, dict) and data.get("speed") is None:
            data = dict(data)
            data["speed"] = (data.get("stats") or {}).get("speed", DEFAULT_SPEED)
        return data

    @field_validator("types")
    @classmethod
    def _check_types(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not 1 <= len(value) <= 2:
            raise ValueError("a combatant has one or two types")
        return tuple(t.lower() for t in value)

    @field_validator("moves")
    @classmethod
    def _check_moves(cls, value: Tuple[MoveDescriptor, ...]) -> Tuple[MoveDescriptor, ...]:
        if len(value) > 4:
            raise ValueError("a combatant knows at most 4 moves")
        return value

class Participant(BaseModel):
    name: str
    types: List[str]

class BattleResult(BaseModel):
    """Outcome of a single simulated battle."""
    participants: Tuple[Participant, Participant]
    log: List[str]
    result: str  # winner name or "draw"
    winner_side: Optional[str] = None  # "a", "b" or None for a draw
    turns: int = 0
    seed: Optional[int] = None

    @property
    def is_draw(self) -> bool:
        return self.result == "draw"

    def to_dict(self) -> dict:
        """Payload shape consumed by the transport layer."""
        return {
            "participants": [p.model_dump() for p in self.participants],
            "log": list(self.log),
            "result": self.result,
        }

    def to_json(self) -> str:
        return self.model_dump_json(include={"participants", "log", "result"})

class PokemonData(BaseModel):
    """Pokedex entry returned by the lookup resource."""
    id: int
    name: str
    types: List[str]
    base_stats: Dict[str, int]
    abilities: List[str] = []
    moves: List[str] = []
    height: Optional[int] = None
    weight: Optional[int] = None
    evolution_chain: List[str] = []
    sprites: Dict[str, Any] = {}
