"""Runtime settings resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_FEED_URL_ENV = "MEDALBOARD_FEED_URL"
_FEED_TIMEOUT_ENV = "MEDALBOARD_FEED_TIMEOUT"

DEFAULT_FEED_URL = (
    "https://api-gracenote.nbcolympics.com/svc/games_v2.svc/json/"
    "GetMedalTable_Season?competitionSetId=1&season=2024&languageCode=2"
)
_FEED_TIMEOUT_DEFAULT = 10.0


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


@dataclass(frozen=True)
class Settings:
    feed_url: str = DEFAULT_FEED_URL
    feed_timeout: float = _FEED_TIMEOUT_DEFAULT


def load_settings() -> Settings:
    return Settings(
        feed_url=os.getenv(_FEED_URL_ENV) or DEFAULT_FEED_URL,
        feed_timeout=_env_float(_FEED_TIMEOUT_ENV, _FEED_TIMEOUT_DEFAULT, clamp_min=0.1),
    )
