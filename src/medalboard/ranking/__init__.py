"""Weighted medal ranking."""

from .engine import TIEBREAK_EPSILONS, RankedStanding, points, rank, score

__all__ = ["TIEBREAK_EPSILONS", "RankedStanding", "points", "rank", "score"]
