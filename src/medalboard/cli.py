"""Command-line interface for rendering weighted medal standings."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path
from typing import Sequence

import httpx

from medalboard.config import (
    DEFAULT_CONFIG,
    ConfigError,
    RankingConfig,
    from_query_string,
    load_settings,
    to_query_string,
)
from medalboard.display import format_points_cell, format_weight_label
from medalboard.ingest import SchemaError, fetch_medal_table, load_feed_json
from medalboard.models import MedalTable
from medalboard.ranking import RankedStanding, rank


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build your own Olympic medal standings")
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Medal table JSON file or http(s) URL (defaults to MEDALBOARD_FEED_URL)",
    )
    parser.add_argument("--gold", type=int, default=None, help="Points per gold medal (0-10)")
    parser.add_argument("--silver", type=int, default=None, help="Points per silver medal (0-10)")
    parser.add_argument("--bronze", type=int, default=None, help="Points per bronze medal (0-10)")
    parser.add_argument(
        "--population",
        action="store_true",
        help="Divide weighted totals by national population",
    )
    parser.add_argument(
        "--query",
        default="",
        help="Shared query string to start from (e.g. 'gold=5&population')",
    )
    parser.add_argument("--limit", type=int, default=None, help="Only print the top N rows")
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV output path")
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> RankingConfig:
    config = from_query_string(args.query, DEFAULT_CONFIG)
    changes: dict[str, object] = {
        medal: getattr(args, medal)
        for medal in ("gold", "silver", "bronze")
        if getattr(args, medal) is not None
    }
    if args.population:
        changes["normalize_by_population"] = True
    try:
        return config.with_changes(**changes)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc


def _load_table(source: str | None) -> MedalTable:
    settings = load_settings()
    target = source or settings.feed_url
    try:
        if target.startswith(("http://", "https://")):
            return fetch_medal_table(target, timeout=settings.feed_timeout)
        return load_feed_json(Path(target))
    except SchemaError as exc:
        raise SystemExit(f"Invalid medal feed at {exc.path}: {exc.message}") from exc
    except OSError as exc:
        raise SystemExit(f"Could not read medal feed: {exc}") from exc
    except httpx.HTTPError as exc:
        raise SystemExit(f"Could not fetch medal feed: {exc}") from exc


def _write_csv(path: Path, standings: Sequence[RankedStanding]) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["position", "country", "code", "gold", "silver", "bronze", "total", "points"])
        for standing in standings:
            country = standing.country
            writer.writerow([
                standing.position,
                country.name,
                country.code,
                country.gold,
                country.silver,
                country.bronze,
                country.total,
                standing.points,
            ])


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    config = _resolve_config(args)
    table = _load_table(args.source)
    standings = rank(table.countries, config)

    print(
        "Gold: {} | Silver: {} | Bronze: {}{}".format(
            format_weight_label(config.gold),
            format_weight_label(config.silver),
            format_weight_label(config.bronze),
            " | per capita" if config.normalize_by_population else "",
        )
    )
    print(f"{table.info.events_finished} of {table.info.events_total} events finished (as of {table.info.as_of})")

    shown = standings if args.limit is None else standings[: max(0, args.limit)]
    for standing in shown:
        country = standing.country
        print(
            f"{standing.position:>3}  {country.name:<32} "
            f"{country.gold:>3} {country.silver:>3} {country.bronze:>3} {country.total:>4}  "
            f"{format_points_cell(standing, config):>10}"
        )

    query = to_query_string(config, DEFAULT_CONFIG)
    print(f"Share: ?{query}" if query else "Share: (default weights)")

    if args.output:
        _write_csv(args.output, standings)
        print(f"Wrote {len(standings)} rows to {args.output}")


if __name__ == "__main__":
    main()
