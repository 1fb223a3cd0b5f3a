"""Map ranking configurations to and from URL query parameters.

Weights equal to their default are left out of the query and the
``population`` flag only appears when normalization is enabled, so the
default configuration encodes to an empty query string.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import Dict, Mapping, Optional

from .ranking import DEFAULT_CONFIG, MEDALS, ConfigError, RankingConfig, validate_weight


logger = logging.getLogger(__name__)

POPULATION_PARAM = "population"
RANKING_PARAMS = (*MEDALS, POPULATION_PARAM)


def encode_config(config: RankingConfig, defaults: RankingConfig = DEFAULT_CONFIG) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for medal in MEDALS:
        value = config.weight(medal)
        if value != defaults.weight(medal):
            params[medal] = str(value)
    if config.normalize_by_population:
        params[POPULATION_PARAM] = "true"
    return params


def _decode_weight(medal: str, raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        if not (raw.isascii() and raw.isdigit()):
            raise ConfigError(f"{medal} weight must be a decimal integer, got {raw!r}")
        return validate_weight(medal, int(raw))
    except ConfigError:
        logger.warning("Invalid %s weight %r in query; using default %d", medal, raw, default)
        return default


def decode_config(params: Mapping[str, str], defaults: RankingConfig = DEFAULT_CONFIG) -> RankingConfig:
    """Build a config from query parameters, falling back to defaults.

    Malformed or out-of-range weights are discarded in favour of the default
    rather than leaking into scoring.
    """

    weights = {
        medal: _decode_weight(medal, params.get(medal), defaults.weight(medal))
        for medal in MEDALS
    }
    return RankingConfig(**weights, normalize_by_population=POPULATION_PARAM in params)


def to_query_string(config: RankingConfig, defaults: RankingConfig = DEFAULT_CONFIG) -> str:
    return urllib.parse.urlencode(encode_config(config, defaults))


def from_query_string(query: str, defaults: RankingConfig = DEFAULT_CONFIG) -> RankingConfig:
    pairs = urllib.parse.parse_qsl(query.lstrip("?"), keep_blank_values=True)
    return decode_config(dict(pairs), defaults)


def is_canonical(params: Mapping[str, str], defaults: RankingConfig = DEFAULT_CONFIG) -> bool:
    """True when ``params`` already holds exactly the encoded ranking parameters."""

    present = {key: params[key] for key in RANKING_PARAMS if key in params}
    return present == encode_config(decode_config(params, defaults), defaults)


def apply_to_url(url: str, config: RankingConfig, defaults: RankingConfig = DEFAULT_CONFIG) -> str:
    """Rewrite the ranking parameters of ``url``, keeping unrelated ones."""

    parts = urllib.parse.urlsplit(url)
    kept = [
        (key, value)
        for key, value in urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
        if key not in RANKING_PARAMS
    ]
    kept.extend(encode_config(config, defaults).items())
    return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(kept)))
