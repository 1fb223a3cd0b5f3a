from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class FeedInfoResponse(BaseModel):
    as_of: str
    events_total: int
    events_finished: int
    events_scheduled: int
    medals_gold: int
    medals_silver: int
    medals_bronze: int
    medals_total: int
    sport: str | None = None


class RankingConfigResponse(BaseModel):
    gold: int = Field(ge=0, le=10)
    silver: int = Field(ge=0, le=10)
    bronze: int = Field(ge=0, le=10)
    normalize_by_population: bool
    gold_label: str
    silver_label: str
    bronze_label: str


class StandingResponse(BaseModel):
    position: int
    country_id: int
    name: str
    code: str
    flag_url: str
    gold: int
    silver: int
    bronze: int
    total: int
    points: int
    score: float | None
    population: int | None
    points_text: str


class StandingsResponse(BaseModel):
    info: FeedInfoResponse
    config: RankingConfigResponse
    query: str
    standings: List[StandingResponse]
