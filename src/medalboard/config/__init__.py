"""Configuration helpers: ranking weights, query codec, population data."""

from .population import POPULATION, lookup_population
from .query import (
    apply_to_url,
    decode_config,
    encode_config,
    from_query_string,
    is_canonical,
    to_query_string,
)
from .ranking import DEFAULT_CONFIG, WEIGHT_MAX, WEIGHT_MIN, ConfigError, RankingConfig
from .session import RankingSession
from .settings import Settings, load_settings

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG",
    "POPULATION",
    "RankingConfig",
    "RankingSession",
    "Settings",
    "WEIGHT_MAX",
    "WEIGHT_MIN",
    "apply_to_url",
    "decode_config",
    "encode_config",
    "from_query_string",
    "is_canonical",
    "load_settings",
    "lookup_population",
    "to_query_string",
]
