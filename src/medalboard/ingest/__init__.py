"""Input adapters that validate raw medal-table feeds."""

from .feed import (
    SchemaError,
    fetch_medal_table,
    load_feed_json,
    validate_feed,
)

__all__ = [
    "SchemaError",
    "fetch_medal_table",
    "load_feed_json",
    "validate_feed",
]
