"""Matchup evaluation."""
from .metrics import SideMetrics, compute_confidence_interval, compute_side_metrics
from .runner import MatchupResult, MatchupRunner

__all__ = [
    "SideMetrics",
    "compute_confidence_interval",
    "compute_side_metrics",
    "MatchupResult",
    "MatchupRunner",
]
