"""Typed view of the upstream medal-table feed."""

from __future__ import annotations

from typing import Annotated, Optional, Tuple

from pydantic import BaseModel, Field, StrictInt, StrictStr
from pydantic.config import ConfigDict


FLAG_URL_TEMPLATE = "https://images.sports.gracenote.com/images/lib/basic/geo/country/flag/SVG/{geo_id}.svg"

Count = Annotated[StrictInt, Field(ge=0)]


class MedalTableInfo(BaseModel):
    """Feed-level metadata (as-of stamp and aggregate counts)."""

    as_of: StrictStr = Field(..., alias="c_AsOfDate")
    events_total: Count = Field(..., alias="n_EventsTotal")
    events_finished: Count = Field(..., alias="n_EventsFinished")
    events_scheduled: Count = Field(..., alias="n_EventsScheduled")
    medals_gold: Count = Field(..., alias="n_MedalsGold")
    medals_silver: Count = Field(..., alias="n_MedalsSilver")
    medals_bronze: Count = Field(..., alias="n_MedalsBronze")
    medals_total: Count = Field(..., alias="n_MedalsTotal")
    sport_id: StrictInt = Field(..., alias="n_SportID")
    sport: Optional[StrictStr] = Field(..., alias="c_Sport")
    sport_short: Optional[StrictStr] = Field(..., alias="c_SportShort")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class CountryStanding(BaseModel):
    """Medal counts for one national Olympic committee.

    ``total`` and the rank fields are carried as reported upstream; nothing
    here recomputes or cross-checks them.
    """

    country_id: StrictInt = Field(..., alias="n_NOCID")
    geo_id: StrictInt = Field(..., alias="n_NOCGeoID")
    name: StrictStr = Field(..., alias="c_NOC")
    code: StrictStr = Field(..., alias="c_NOCShort")
    gold: Count = Field(..., alias="n_Gold")
    silver: Count = Field(..., alias="n_Silver")
    bronze: Count = Field(..., alias="n_Bronze")
    total: Count = Field(..., alias="n_Total")
    rank_gold: StrictInt = Field(..., alias="n_RankGold")
    rank_sort_gold: StrictInt = Field(..., alias="n_RankSortGold")
    rank_total: StrictInt = Field(..., alias="n_RankTotal")
    rank_sort_total: StrictInt = Field(..., alias="n_RankSortTotal")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def flag_url(self) -> str:
        return FLAG_URL_TEMPLATE.format(geo_id=self.geo_id)


class MedalTable(BaseModel):
    info: MedalTableInfo = Field(..., alias="MedalTableInfo")
    countries: Tuple[CountryStanding, ...] = Field(..., alias="MedalTableNOC")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
