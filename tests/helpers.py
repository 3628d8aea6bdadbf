"""Profile builders and random stubs shared by the test modules."""
import random

from pokesim.data.models import CombatantProfile, MoveDescriptor


class ConstantRandom(random.Random):
    """Random source whose ``random()`` always returns the same value.

    ``uniform(0.85, 1.0)`` then yields ``0.85 + 0.15 * value``; 0.5 gives 0.925.
    """

    def __init__(self, value: float = 0.5):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


TACKLE = MoveDescriptor(name="tackle", power=40, type="normal", accuracy=100, category="physical")
THUNDERSHOCK = MoveDescriptor(name="thunder-shock", power=40, type="electric", accuracy=100, category="special")
EMBER = MoveDescriptor(name="ember", power=40, type="fire", accuracy=100, category="special")
POISON_STING = MoveDescriptor(name="poison-sting", power=15, type="poison", accuracy=100, category="physical")
WATER_GUN = MoveDescriptor(name="water-gun", power=40, type="water", accuracy=100, category="special")


def make_profile(name, types=("normal",), moves=None, **stats):
    """Build a profile; stats default to a neutral 100 except hp (50)."""
    base = {
        "hp": 50,
        "attack": 100,
        "defense": 100,
        "special-attack": 100,
        "special-defense": 100,
        "speed": 100,
    }
    base.update({k.replace("_", "-"): v for k, v in stats.items()})
    if moves is None:
        moves = [TACKLE]
    return CombatantProfile(name=name, stats=base, types=tuple(types), moves=tuple(moves))
