"""Evaluation metrics."""
import math
from dataclasses import dataclass
from typing import Dict

Z_SCORES: Dict[float, float] = {
    0.90: 1.645,
    0.95: 1.96,
    0.99: 2.576,
}

def compute_confidence_interval(
    wins: int,
    total: int,
    confidence: float = 0.95,
) -> tuple[float, float]:
    """Compute confidence interval for winrate.

    Uses Wilson score interval.
    """
    if total == 0:
        return (0.0, 1.0)

    z = Z_SCORES.get(confidence, 1.96)
    p = wins / total
    n = total

    denominator = 1 + z**2 / n
    center = (p + z**2 / (2 * n)) / denominator
    spread = z * math.sqrt((p * (1 - p) + z**2 / (4 * n)) / n) / denominator

    return (max(0, center - spread), min(1, center + spread))

@dataclass
class SideMetrics:
    """Win statistics for one side of a matchup."""
    name: str
    wins: int
    losses: int
    draws: int
    winrate: float
    winrate_ci_low: float
    winrate_ci_high: float

def compute_side_metrics(name: str, wins: int, losses: int, draws: int) -> SideMetrics:
    total = wins + losses + draws
    ci_low, ci_high = compute_confidence_interval(wins, total)
    return SideMetrics(
        name=name,
        wins=wins,
        losses=losses,
        draws=draws,
        winrate=wins / total if total > 0 else 0.0,
        winrate_ci_low=ci_low,
        winrate_ci_high=ci_high,
    )
