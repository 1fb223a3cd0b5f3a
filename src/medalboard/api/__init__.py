"""REST API and HTML page for weighted medal standings."""

from __future__ import annotations

import logging
from html import escape
from typing import Callable, Mapping

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from medalboard.api.schemas import (
    FeedInfoResponse,
    RankingConfigResponse,
    StandingResponse,
    StandingsResponse,
)
from medalboard.config import (
    DEFAULT_CONFIG,
    WEIGHT_MAX,
    WEIGHT_MIN,
    RankingConfig,
    Settings,
    decode_config,
    is_canonical,
    load_settings,
    to_query_string,
)
from medalboard.config.population import POPULATION
from medalboard.display import format_points_cell, format_weight_label
from medalboard.ingest import SchemaError, fetch_medal_table
from medalboard.models import MedalTable
from medalboard.ranking import RankedStanding, rank


logger = logging.getLogger("uvicorn.error")

FeedLoader = Callable[[], MedalTable]

MEDAL_LABELS: list[tuple[str, str]] = [
    ("gold", "Gold"),
    ("silver", "Silver"),
    ("bronze", "Bronze"),
]


def _config_response(config: RankingConfig) -> RankingConfigResponse:
    return RankingConfigResponse(
        gold=config.gold,
        silver=config.silver,
        bronze=config.bronze,
        normalize_by_population=config.normalize_by_population,
        gold_label=format_weight_label(config.gold),
        silver_label=format_weight_label(config.silver),
        bronze_label=format_weight_label(config.bronze),
    )


def _standing_response(standing: RankedStanding, config: RankingConfig) -> StandingResponse:
    country = standing.country
    return StandingResponse(
        position=standing.position,
        country_id=country.country_id,
        name=country.name,
        code=country.code,
        flag_url=country.flag_url,
        gold=country.gold,
        silver=country.silver,
        bronze=country.bronze,
        total=country.total,
        points=standing.points,
        score=standing.score,
        population=standing.population,
        points_text=format_points_cell(standing, config),
    )


def _render_standings_page(
    table: MedalTable,
    standings: list[RankedStanding],
    config: RankingConfig,
) -> str:
    weight_inputs = "".join(
        f"""
        <label class=\"weight weight-{medal}\">
            <span>{label}</span>
            <strong>{escape(format_weight_label(config.weight(medal)))}</strong>
            <input type=\"range\" name=\"{medal}\" min=\"{WEIGHT_MIN}\" max=\"{WEIGHT_MAX}\" step=\"1\" value=\"{config.weight(medal)}\">
        </label>
        """
        for medal, label in MEDAL_LABELS
    )
    checked = " checked" if config.normalize_by_population else ""
    points_header = "Per capita" if config.normalize_by_population else "Points"
    rows_html = "".join(
        f"""
        <tr>
            <td class=\"rank\">{standing.position}</td>
            <td class=\"team\"><img src=\"{escape(standing.country.flag_url)}\" width=\"60\" height=\"40\" alt=\"{escape(standing.country.name)} flag\"> {escape(standing.country.name)}</td>
            <td>{standing.country.gold}</td>
            <td>{standing.country.silver}</td>
            <td>{standing.country.bronze}</td>
            <td>{standing.country.total}</td>
            <td class=\"points\">{escape(format_points_cell(standing, config))}</td>
        </tr>
        """
        for standing in standings
    )
    info = table.info
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>Build your own medal standings</title>
    <meta name=\"description\" content=\"Construct your own Olympic medal standings by assigning different weights to gold, silver, and bronze medals.\">
</head>
<body>
    <header>
        <h1>Build your own Olympic medal standings</h1>
        <form method=\"get\" action=\"/ui\">
            {weight_inputs}
            <label class=\"toggle\"><input type=\"checkbox\" name=\"population\" value=\"true\"{checked}> Divide by population</label>
            <button type=\"submit\">Update</button>
        </form>
        <p>{info.events_finished} of {info.events_total} events finished</p>
        <p class=\"hint\">as of {escape(info.as_of)}</p>
    </header>
    <main>
        <table>
            <thead>
                <tr><th>Rank</th><th>Team</th><th>Gold</th><th>Silver</th><th>Bronze</th><th>All</th><th>{points_header}</th></tr>
            </thead>
            <tbody>{rows_html}</tbody>
        </table>
    </main>
</body>
</html>
"""


def create_app(
    feed_loader: FeedLoader | None = None,
    settings: Settings | None = None,
    *,
    populations: Mapping[str, int] = POPULATION,
    defaults: RankingConfig = DEFAULT_CONFIG,
) -> FastAPI:
    app = FastAPI(title="medalboard")
    settings = settings or load_settings()

    if feed_loader is None:
        def feed_loader() -> MedalTable:
            return fetch_medal_table(settings.feed_url, timeout=settings.feed_timeout)

    app.state.settings = settings
    app.state.feed_loader = feed_loader

    def load_table() -> MedalTable:
        try:
            return app.state.feed_loader()
        except SchemaError as exc:
            logger.warning("Medal feed failed validation at %s: %s", exc.path, exc.message)
            raise HTTPException(status_code=502, detail=f"Invalid medal feed at {exc.path}: {exc.message}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Medal feed request failed: %s", exc)
            raise HTTPException(status_code=502, detail="Medal feed unavailable") from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/standings", response_model=StandingsResponse)
    def standings(request: Request) -> StandingsResponse:
        config = decode_config(request.query_params, defaults)
        table = load_table()
        ranked = rank(table.countries, config, populations=populations)
        info = table.info
        return StandingsResponse(
            info=FeedInfoResponse(
                as_of=info.as_of,
                events_total=info.events_total,
                events_finished=info.events_finished,
                events_scheduled=info.events_scheduled,
                medals_gold=info.medals_gold,
                medals_silver=info.medals_silver,
                medals_bronze=info.medals_bronze,
                medals_total=info.medals_total,
                sport=info.sport,
            ),
            config=_config_response(config),
            query=to_query_string(config, defaults),
            standings=[_standing_response(standing, config) for standing in ranked],
        )

    @app.get("/ui", response_class=HTMLResponse)
    def ui_index(request: Request):
        params = request.query_params
        config = decode_config(params, defaults)
        if not is_canonical(params, defaults):
            query = to_query_string(config, defaults)
            target = f"/ui?{query}" if query else "/ui"
            return RedirectResponse(target, status_code=303)
        table = load_table()
        ranked = rank(table.countries, config, populations=populations)
        return HTMLResponse(_render_standings_page(table, ranked, config))

    return app
