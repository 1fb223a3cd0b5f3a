"""Helpers to load the upstream medal table and emit canonical models."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from medalboard.models import MedalTable


logger = logging.getLogger(__name__)

ROOT_PATH = "<root>"


class SchemaError(ValueError):
    """Raised when a feed payload does not match the medal-table shape."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def _format_loc(loc: Sequence[Any]) -> str:
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)


def validate_feed(raw: Any) -> MedalTable:
    """Validate a decoded JSON payload, all or nothing.

    Count fields must be JSON numbers; ``"3"`` is rejected rather than
    coerced. The first offending field path is reported on failure.
    """

    try:
        table = MedalTable.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise SchemaError(_format_loc(first["loc"]), first["msg"]) from exc
    logger.debug("Validated medal table with %s countries", len(table.countries))
    return table


def load_feed_json(path: Path) -> MedalTable:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SchemaError(ROOT_PATH, f"feed is not valid UTF-8: {exc}") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(ROOT_PATH, f"invalid JSON: {exc}") from exc
    return validate_feed(raw)


def fetch_medal_table(
    url: str,
    *,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> MedalTable:
    """GET the feed once and validate it. Transport errors propagate."""

    if client is None:
        with httpx.Client(timeout=timeout) as own_client:
            return fetch_medal_table(url, timeout=timeout, client=own_client)

    logger.info("Fetching medal table from %s", url)
    response = client.get(url)
    response.raise_for_status()
    try:
        raw = response.json()
    except ValueError as exc:
        raise SchemaError(ROOT_PATH, f"invalid JSON: {exc}") from exc
    return validate_feed(raw)
