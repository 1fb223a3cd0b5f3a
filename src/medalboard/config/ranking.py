"""User-controlled ranking configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


WEIGHT_MIN = 0
WEIGHT_MAX = 10
MEDALS: Tuple[str, ...] = ("gold", "silver", "bronze")


class ConfigError(ValueError):
    """Raised when a ranking configuration holds an unusable weight."""


def validate_weight(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} weight must be an integer, got {value!r}")
    if not WEIGHT_MIN <= value <= WEIGHT_MAX:
        raise ConfigError(f"{name} weight must be between {WEIGHT_MIN} and {WEIGHT_MAX}, got {value}")
    return value


@dataclass(frozen=True)
class RankingConfig:
    gold: int = 3
    silver: int = 2
    bronze: int = 1
    normalize_by_population: bool = False

    def __post_init__(self) -> None:
        for medal in MEDALS:
            validate_weight(medal, getattr(self, medal))
        if not isinstance(self.normalize_by_population, bool):
            raise ConfigError("normalize_by_population must be a bool")

    def weight(self, medal: str) -> int:
        if medal not in MEDALS:
            raise KeyError(f"Unknown medal {medal!r}")
        return getattr(self, medal)

    def with_changes(self, **changes: object) -> "RankingConfig":
        """Return a new validated config; the receiver is left untouched."""

        return replace(self, **changes)


DEFAULT_CONFIG = RankingConfig()
