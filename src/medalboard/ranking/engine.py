"""Order countries by a user-weighted medal score."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from medalboard.config.population import POPULATION, lookup_population
from medalboard.config.ranking import RankingConfig
from medalboard.models import CountryStanding


logger = logging.getLogger(__name__)

# Gold > silver > bronze when weighted totals tie; too small to move points.
TIEBREAK_EPSILONS = (1e-5, 1e-8, 1e-11)


@dataclass(frozen=True)
class RankedStanding:
    position: int
    country: CountryStanding
    score: Optional[float]
    points: int
    population: Optional[int]


def _factor(weight: int, epsilon: float) -> float:
    if weight == 0:
        return 0.0
    return weight + epsilon


def points(country: CountryStanding, config: RankingConfig) -> int:
    """Integer weighted total shown to users. Never used for ordering."""

    return country.gold * config.gold + country.silver * config.silver + country.bronze * config.bronze


def score(
    country: CountryStanding,
    config: RankingConfig,
    population: Optional[int] = None,
) -> Optional[float]:
    """Ranking key for ``country``, or ``None`` when it cannot be computed.

    In population mode a missing or zero population makes the score
    unavailable instead of defaulting the divisor.
    """

    eps_gold, eps_silver, eps_bronze = TIEBREAK_EPSILONS
    weighted = (
        country.gold * _factor(config.gold, eps_gold)
        + country.silver * _factor(config.silver, eps_silver)
        + country.bronze * _factor(config.bronze, eps_bronze)
    )
    if not config.normalize_by_population:
        return weighted
    if not population:
        return None
    return weighted / population


def rank(
    countries: Sequence[CountryStanding],
    config: RankingConfig,
    *,
    populations: Mapping[str, int] = POPULATION,
) -> List[RankedStanding]:
    """Return every country ordered by descending score.

    The sort is stable. Countries without a score keep their input order
    after all scored countries.
    """

    entries = []
    for country in countries:
        population = lookup_population(country.code, populations)
        entries.append((country, score(country, config, population), population))

    scored = [entry for entry in entries if entry[1] is not None]
    unavailable = [entry for entry in entries if entry[1] is None]
    scored.sort(key=lambda entry: entry[1], reverse=True)

    if unavailable:
        logger.debug(
            "No population for %s; ranked last",
            ", ".join(entry[0].code for entry in unavailable),
        )
    logger.debug("Ranked %s countries with %s", len(entries), config)

    return [
        RankedStanding(
            position=index,
            country=country,
            score=value,
            points=points(country, config),
            population=population,
        )
        for index, (country, value, population) in enumerate(scored + unavailable, start=1)
    ]
