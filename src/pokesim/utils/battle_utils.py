"""Utilities for inspecting battle results."""
import re
from typing import List

from ..data.models import BattleResult, CombatantProfile

HP_LINE = re.compile(r"^(?P<a>.+): (?P<a_hp>\d+)/(?P<a_max>\d+) HP \| (?P<b>.+): (?P<b_hp>\d+)/(?P<b_max>\d+) HP$")
TURN_LINE = re.compile(r"^-- Turn (?P<turn>\d+) --$")

def summarize_battle(result: BattleResult) -> dict:
    """Create a summary of a finished battle."""
    final_hp = hp_checkpoints(result)[-1] if result.log else None
    return {
        "participants": [p.name for p in result.participants],
        "result": result.result,
        "turns": sum(1 for line in result.log if TURN_LINE.match(line)),
        "misses": sum(1 for line in result.log if line.endswith("but it missed!")),
        "paralyzed_turns": sum(1 for line in result.log if "fully paralyzed" in line),
        "afflictions": [line for line in result.log if "is afflicted by" in line],
        "final_hp": final_hp,
    }

def hp_checkpoints(result: BattleResult) -> List[dict]:
    """HP values from every end-of-turn summary line, in order."""
    checkpoints = []
    for line in result.log:
        match = HP_LINE.match(line)
        if match:
            checkpoints.append({
                match["a"]: (int(match["a_hp"]), int(match["a_max"])),
                match["b"]: (int(match["b_hp"]), int(match["b_max"])),
            })
    return checkpoints

def format_profile(profile: CombatantProfile) -> str:
    """Format a profile for logging."""
    moves = ", ".join(
        f"{m.name} ({m.effective_type}, {m.effective_power})" for m in profile.moves
    ) or "no moves"
    return f"{profile.name} [{'/'.join(profile.types)}] spe={profile.speed} :: {moves}"
