"""Formatting helpers for counts, weights and per-capita ratios."""

from __future__ import annotations

import math
from typing import Optional

from medalboard.config.ranking import RankingConfig
from medalboard.ranking import RankedStanding


NOT_APPLICABLE = "N/A"

_TIERS = (
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_count(value: float) -> str:
    """Compact ``value`` to ``K``/``M``/``B``.

    The tier is picked from the unrounded value, so ``999_999`` renders as
    ``"1000K"`` rather than being promoted to ``"1M"``.
    """

    for unit, suffix in _TIERS:
        if value >= unit:
            return f"{_round_half_away(value / unit)}{suffix}"
    return str(_round_half_away(value))


def format_weight_label(weight: int) -> str:
    if weight == 0:
        return "Tiebreaker"
    if weight == 1:
        return "1 point"
    return f"{weight} points"


def format_population_ratio(population: Optional[int], weighted_total: int) -> Optional[str]:
    """``population / weighted_total`` compacted, or ``None`` if not applicable."""

    if population is None or weighted_total == 0:
        return None
    return format_count(population / weighted_total)


def format_points_cell(standing: RankedStanding, config: RankingConfig) -> str:
    if not config.normalize_by_population:
        return str(standing.points)
    ratio = format_population_ratio(standing.population, standing.points)
    if ratio is None:
        return NOT_APPLICABLE
    return f"1 in {ratio}"
