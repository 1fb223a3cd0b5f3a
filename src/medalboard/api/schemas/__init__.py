"""Pydantic models for API I/O."""

from .standings import (
    FeedInfoResponse,
    RankingConfigResponse,
    StandingResponse,
    StandingsResponse,
)

__all__ = [
    "FeedInfoResponse",
    "RankingConfigResponse",
    "StandingResponse",
    "StandingsResponse",
]
