"""Type effectiveness chart."""
from types import MappingProxyType
from typing import Mapping, Sequence

ALL_TYPES = (
    "normal", "fire", "water", "grass", "electric", "ice",
    "fighting", "poison", "ground", "flying", "psychic", "bug",
    "rock", "ghost", "dragon", "dark", "steel", "fairy",
)

# attacking type -> defending type -> multiplier; absent pairs are neutral
_CHART = {
    "fire": {"grass": 2, "ice": 2, "bug": 2, "steel": 2, "water": 0.5, "rock": 0.5, "fire": 0.5, "dragon": 0.5},
    "water": {"fire": 2, "rock": 2, "ground": 2, "water": 0.5, "grass": 0.5, "dragon": 0.5},
    "grass": {"water": 2, "ground": 2, "rock": 2, "fire": 0.5, "grass": 0.5, "poison": 0.5, "flying": 0.5,
              "bug": 0.5, "dragon": 0.5, "steel": 0.5},
    "electric": {"water": 2, "flying": 2, "electric": 0.5, "grass": 0.5, "dragon": 0.5, "ground": 0},
    "ice": {"grass": 2, "ground": 2, "flying": 2, "dragon": 2, "fire": 0.5, "water": 0.5, "ice": 0.5, "steel": 0.5},
    "fighting": {"normal": 2, "ice": 2, "rock": 2, "dark": 2, "steel": 2, "poison": 0.5, "flying": 0.5,
                 "psychic": 0.5, "bug": 0.5, "fairy": 0.5, "ghost": 0},
    "poison": {"grass": 2, "fairy": 2, "poison": 0.5, "ground": 0.5, "rock": 0.5, "ghost": 0.5, "steel": 0},
    "ground": {"fire": 2, "electric": 2, "poison": 2, "rock": 2, "steel": 2, "grass": 0.5, "bug": 0.5, "flying": 0},
    "flying": {"grass": 2, "fighting": 2, "bug": 2, "electric": 0.5, "rock": 0.5, "steel": 0.5},
    "psychic": {"fighting": 2, "poison": 2, "psychic": 0.5, "steel": 0.5, "dark": 0},
    "bug": {"grass": 2, "psychic": 2, "dark": 2, "fire": 0.5, "fighting": 0.5, "poison": 0.5, "flying": 0.5,
            "ghost": 0.5, "steel": 0.5, "fairy": 0.5},
    "rock": {"fire": 2, "ice": 2, "flying": 2, "bug": 2, "fighting": 0.5, "ground": 0.5, "steel": 0.5},
    "ghost": {"psychic": 2, "ghost": 2, "dark": 0.5, "normal": 0},
    "dragon": {"dragon": 2, "steel": 0.5, "fairy": 0},
    "dark": {"psychic": 2, "ghost": 2, "fighting": 0.5, "dark": 0.5, "fairy": 0.5},
    "steel": {"ice": 2, "rock": 2, "fairy": 2, "fire": 0.5, "water": 0.5, "electric": 0.5, "steel": 0.5},
    "fairy": {"fighting": 2, "dragon": 2, "dark": 2, "fire": 0.5, "poison": 0.5, "steel": 0.5},
    "normal": {"rock": 0.5, "steel": 0.5, "ghost": 0},
}

TYPE_CHART: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {atk: MappingProxyType(row) for atk, row in _CHART.items()}
)
del _CHART

_NEUTRAL: Mapping[str, float] = MappingProxyType({})

SUPER_EFFECTIVE = "It's super effective!"
NOT_VERY_EFFECTIVE = "It's not very effective..."
NO_EFFECT = "It doesn't affect the foe..."

def effectiveness(attack_type: str, defender_types: Sequence[str]) -> float:
    """Damage multiplier of an attacking type against one or two defending types."""
    row = TYPE_CHART.get(attack_type, _NEUTRAL)
    mult = 1.0
    for t in defender_types:
        mult *= row.get(t, 1)
    return mult

def effectiveness_label(eff: float) -> str:
    """Narration appended to a damage line."""
    if eff > 1:
        return SUPER_EFFECTIVE
    if eff == 0:
        return NO_EFFECT
    if eff < 1:
        return NOT_VERY_EFFECTIVE
    return ""
