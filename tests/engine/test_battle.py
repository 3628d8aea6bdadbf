"""Tests for the battle loop."""
import random
import re
import threading
import time

import pytest

from pokesim.agents.heuristic_agent import MaxDamageAgent
from pokesim.data.models import MoveDescriptor
from pokesim.engine.battle import DRAW, SIDE_B, BattleSimulator
from pokesim.engine.status import Status
from pokesim.engine.typechart import ALL_TYPES
from pokesim.errors import BattleCancelled
from pokesim.utils.battle_utils import hp_checkpoints

from helpers import ConstantRandom, EMBER, POISON_STING, TACKLE, THUNDERSHOCK, make_profile

WEAK_HIT = MoveDescriptor(name="pound", power=10, type="normal", category="physical")

def stall_profile(name, hp=255):
    """Profile that deals 2 damage per hit and has a large HP pool."""
    return make_profile(name, moves=[WEAK_HIT], hp=hp, attack=5, defense=250)

def action_lines(log):
    return [line for line in log if not line.startswith("-- Turn") and " HP | " not in line]

def test_golden_log_for_identical_profiles():
    a = make_profile("alpha")
    b = make_profile("beta")

    result = BattleSimulator(rng=ConstantRandom(0.5)).run(a, b)

    assert result.log == [
        "-- Turn 1 --",
        "alpha used tackle and dealt 26 damage.",
        "beta used tackle and dealt 26 damage.",
        "alpha: 74/100 HP | beta: 74/100 HP",
        "-- Turn 2 --",
        "alpha used tackle and dealt 26 damage.",
        "beta used tackle and dealt 26 damage.",
        "alpha: 48/100 HP | beta: 48/100 HP",
        "-- Turn 3 --",
        "alpha used tackle and dealt 26 damage.",
        "beta used tackle and dealt 26 damage.",
        "alpha: 22/100 HP | beta: 22/100 HP",
        "-- Turn 4 --",
        "alpha used tackle and dealt 26 damage.",
        "alpha: 22/100 HP | beta: 0/100 HP",
    ]
    assert result.result == "alpha"
    assert result.turns == 4

def test_golden_log_is_reproducible():
    a = make_profile("alpha")
    b = make_profile("beta")

    first = BattleSimulator(rng=ConstantRandom(0.5)).run(a, b)
    second = BattleSimulator(rng=ConstantRandom(0.5)).run(a, b)

    assert first.log == second.log

def test_same_seed_same_log(pikachu, squirtle):
    first = BattleSimulator(seed=42).run(pikachu, squirtle)
    second = BattleSimulator(seed=42).run(pikachu, squirtle)

    assert first.log == second.log
    assert first.result == second.result
    assert first.seed == 42

def test_one_hit_knockout_ends_turn_one(constant_rng):
    a = make_profile("alpha", hp=1, speed=100)
    b = make_profile("beta", hp=1, speed=50)

    result = BattleSimulator(rng=constant_rng).run(a, b)

    assert result.log == [
        "-- Turn 1 --",
        "alpha used tackle and dealt 26 damage.",
        "alpha: 2/2 HP | beta: 0/2 HP",
    ]
    assert result.result == "alpha"
    assert result.turns == 1

def test_faster_side_wins_one_hit_race(constant_rng):
    a = make_profile("alpha", hp=1, speed=50)
    b = make_profile("beta", hp=1, speed=100)

    result = BattleSimulator(rng=constant_rng).run(a, b)

    assert result.result == "beta"
    assert result.log[1].startswith("beta used")
    assert result.winner_side == SIDE_B

def test_mirror_match_reports_winning_side(constant_rng):
    slow = make_profile("pikachu", hp=1, speed=10)
    fast = make_profile("pikachu", hp=1, speed=100)

    result = BattleSimulator(rng=constant_rng).run(slow, fast)

    assert result.result == "pikachu"
    assert result.winner_side == SIDE_B

def test_faster_side_acts_first_every_turn():
    a = make_profile("alpha", speed=100, hp=200)
    b = make_profile("beta", speed=50, hp=200,
                     moves=[MoveDescriptor(name="slam", power=80, type="normal", accuracy=75, category="physical")])

    for seed in range(20):
        result = BattleSimulator(seed=seed).run(a, b)
        log = result.log
        for i, line in enumerate(log):
            if line.startswith("-- Turn"):
                assert log[i + 1].startswith("alpha ")

def test_speed_tie_goes_to_side_a():
    sim = BattleSimulator(rng=ConstantRandom())
    state = sim.start(make_profile("alpha", speed=70), make_profile("beta", speed=70))

    (first, _), (second, _) = sim.turn_order(state)

    assert first is state.a
    assert second is state.b

def test_paralysis_halves_speed_for_turn_order():
    sim = BattleSimulator(rng=ConstantRandom())
    state = sim.start(make_profile("alpha", speed=100), make_profile("beta", speed=60))
    state.a.status = Status.PARALYSIS

    (first, _), _ = sim.turn_order(state)
    assert first is state.b

    # 100 // 2 == 50 ties with 50 and side A keeps the tie
    state = sim.start(make_profile("alpha", speed=100), make_profile("beta", speed=50))
    state.a.status = Status.PARALYSIS
    (first, _), _ = sim.turn_order(state)
    assert first is state.a

def test_paralysis_inflicted_and_prevents_action():
    a = make_profile("alpha", types=("electric",), moves=[THUNDERSHOCK], speed=100)
    b = make_profile("beta", types=("water",), speed=50)

    result = BattleSimulator(rng=ConstantRandom(0.1)).run(a, b)

    assert result.log[:5] == [
        "-- Turn 1 --",
        "alpha used thunder-shock and dealt 49 damage. It's super effective!",
        "beta is afflicted by paralysis!",
        "beta is fully paralyzed and can't move!",
        "alpha: 100/100 HP | beta: 51/100 HP",
    ]
    # status is never inflicted twice
    assert sum("afflicted" in line for line in result.log) == 1
    assert result.result == "alpha"
    assert result.turns == 3

def test_burn_residual_follows_the_hit():
    a = make_profile("alpha", types=("fire",), moves=[EMBER], speed=100)
    b = make_profile("beta", speed=50)

    result = BattleSimulator(rng=ConstantRandom(0.1)).run(a, b)

    assert result.log[:6] == [
        "-- Turn 1 --",
        "alpha used ember and dealt 24 damage.",
        "beta is afflicted by burn!",
        "beta is hurt by its burn!",
        "beta used tackle and dealt 24 damage.",
        "alpha: 76/100 HP | beta: 70/100 HP",
    ]

def test_poison_residual():
    a = make_profile("alpha", types=("poison",), moves=[POISON_STING], speed=100)
    b = make_profile("beta", speed=50)

    result = BattleSimulator(rng=ConstantRandom(0.1)).run(a, b)

    assert result.log[1:4] == [
        "alpha used poison-sting and dealt 10 damage.",
        "beta is afflicted by poison!",
        "beta is hurt by poison!",
    ]
    assert result.log[5] == "alpha: 76/100 HP | beta: 78/100 HP"

def test_missed_move_is_logged():
    a = make_profile("alpha", moves=[MoveDescriptor(name="focus-blast", power=120, type="fighting",
                                                    accuracy=70, category="special")], speed=100)
    b = make_profile("beta", speed=50)

    # 0.8 * 100 = 80 > 70
    result = BattleSimulator(rng=ConstantRandom(0.8)).run(a, b)

    assert result.log[1] == "alpha used focus-blast, but it missed!"

def test_accuracy_100_never_misses():
    sim = BattleSimulator(seed=3)
    assert all(sim._hits(TACKLE) for _ in range(1000))

def test_accuracy_roughly_matches_declared_value():
    sim = BattleSimulator(seed=3)
    move = MoveDescriptor(name="hypnotic", power=40, accuracy=60)
    hits = sum(sim._hits(move) for _ in range(2000))
    assert 1050 < hits < 1350

def test_move_without_accuracy_never_misses():
    sim = BattleSimulator(rng=ConstantRandom(0.999))
    assert sim._hits(WEAK_HIT)

def test_empty_move_pool_uses_tackle(constant_rng):
    a = make_profile("alpha", moves=[], speed=100)
    b = make_profile("beta", moves=[], speed=50)

    result = BattleSimulator(rng=constant_rng).run(a, b)

    lines = action_lines(result.log)
    assert lines
    assert all(" used tackle " in line for line in lines)

def test_turn_limit_with_equal_hp_is_draw(constant_rng):
    result = BattleSimulator(rng=constant_rng).run(stall_profile("alpha"), stall_profile("beta"))

    assert result.turns == 100
    assert result.result == DRAW
    assert result.winner_side is None
    assert "-- Turn 100 --" in result.log
    assert "-- Turn 101 --" not in result.log
    assert result.log[-1] == "alpha: 310/510 HP | beta: 310/510 HP"

def test_turn_limit_with_unequal_hp_picks_higher(constant_rng):
    result = BattleSimulator(rng=constant_rng).run(stall_profile("alpha"), stall_profile("beta", hp=254))

    assert result.turns == 100
    assert result.result == "alpha"
    assert result.log[-1] == "alpha: 310/510 HP | beta: 308/508 HP"

def random_profile(rng, name):
    moves = [
        MoveDescriptor(
            name=f"move-{i}",
            power=rng.choice([None, rng.randint(10, 150)]),
            type=rng.choice([None, "electric", "fire", "poison", *ALL_TYPES]),
            accuracy=rng.choice([None, 100, rng.randint(30, 100)]),
            category=rng.choice([None, "physical", "special"]),
        )
        for i in range(rng.randint(0, 4))
    ]
    return make_profile(
        name,
        types=rng.sample(ALL_TYPES, rng.randint(1, 2)),
        moves=moves,
        hp=rng.randint(1, 255),
        attack=rng.randint(5, 200),
        defense=rng.randint(5, 250),
        special_attack=rng.randint(5, 200),
        special_defense=rng.randint(5, 250),
        speed=rng.randint(5, 200),
    )

DAMAGE_OR_RESIDUAL = re.compile(r"(used .+ and dealt \d+ damage|is hurt by)")

@pytest.mark.parametrize("seed", range(40))
def test_random_battles_respect_invariants(seed):
    rng = random.Random(seed)
    a = random_profile(rng, "alpha")
    b = random_profile(rng, "beta")

    result = BattleSimulator(seed=seed).run(a, b)

    assert result.result in ("alpha", "beta", DRAW)
    assert 1 <= result.turns <= 100

    checkpoints = hp_checkpoints(result)
    assert len(checkpoints) == result.turns
    for checkpoint in checkpoints:
        for hp, max_hp in checkpoint.values():
            assert 0 <= hp <= max_hp

    # turn counter increments by one per summary
    turns = [int(line.split()[2]) for line in result.log if line.startswith("-- Turn")]
    assert turns == list(range(1, result.turns + 1))

    final = checkpoints[-1]
    if any(hp == 0 for hp, _ in final.values()):
        # the knockout is the last thing that happens before the summary
        assert DAMAGE_OR_RESIDUAL.search(result.log[-2])
        # nobody faints before the final turn
        for checkpoint in checkpoints[:-1]:
            assert all(hp > 0 for hp, _ in checkpoint.values())

def test_result_payload(pikachu, squirtle):
    result = BattleSimulator(seed=1).run(pikachu, squirtle)
    payload = result.to_dict()

    assert set(payload) == {"participants", "log", "result"}
    assert payload["participants"] == [
        {"name": "pikachu", "types": ["electric"]},
        {"name": "squirtle", "types": ["water"]},
    ]
    assert payload["result"] in ("pikachu", "squirtle", "draw")

def test_custom_agent_is_used(constant_rng):
    class LastMoveAgent(MaxDamageAgent):
        def choose_move(self, attacker, opponent):
            return attacker.moves[-1] if attacker.moves else super().choose_move(attacker, opponent)

    a = make_profile("alpha", moves=[TACKLE, WEAK_HIT], speed=100)
    b = make_profile("beta", speed=50)

    result = BattleSimulator(agent=LastMoveAgent(), rng=constant_rng).run(a, b)

    assert result.log[1].startswith("alpha used pound")

def test_cancel_event_stops_before_first_turn(constant_rng):
    event = threading.Event()
    event.set()

    with pytest.raises(BattleCancelled) as exc_info:
        BattleSimulator(rng=constant_rng).run(make_profile("a"), make_profile("b"), cancel_event=event)

    assert exc_info.value.turn == 1

def test_expired_deadline_times_out(constant_rng):
    with pytest.raises(BattleCancelled) as exc_info:
        BattleSimulator(rng=constant_rng).run(
            make_profile("a"), make_profile("b"), deadline=time.monotonic() - 1
        )

    assert exc_info.value.reason == "timed out"

def test_cancellation_waits_for_turn_to_finish(constant_rng):
    event = threading.Event()

    class CancellingAgent(MaxDamageAgent):
        calls = 0

        def choose_move(self, attacker, opponent):
            self.calls += 1
            # set during turn 2's move selection
            if self.calls == 3:
                event.set()
            return super().choose_move(attacker, opponent)

    sim = BattleSimulator(agent=CancellingAgent(), rng=constant_rng)
    with pytest.raises(BattleCancelled) as exc_info:
        sim.run(stall_profile("alpha"), stall_profile("beta"), cancel_event=event)

    assert exc_info.value.turn == 3
