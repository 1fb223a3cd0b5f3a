"""Builders for medal-table payloads shaped like the upstream feed."""

from __future__ import annotations

from typing import Any


def info_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "c_AsOfDate": "2024-08-11T20:00:00Z",
        "n_EventsTotal": 329,
        "n_EventsFinished": 329,
        "n_EventsScheduled": 0,
        "n_MedalsGold": 4,
        "n_MedalsSilver": 3,
        "n_MedalsBronze": 3,
        "n_MedalsTotal": 10,
        "n_SportID": 0,
        "c_Sport": None,
        "c_SportShort": None,
    }
    payload.update(overrides)
    return payload


def country_payload(
    noc_id: int,
    name: str,
    code: str,
    gold: int = 0,
    silver: int = 0,
    bronze: int = 0,
    **overrides: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "n_NOCID": noc_id,
        "n_NOCGeoID": noc_id + 1000,
        "c_NOC": name,
        "c_NOCShort": code,
        "n_Gold": gold,
        "n_Silver": silver,
        "n_Bronze": bronze,
        "n_Total": gold + silver + bronze,
        "n_RankGold": 1,
        "n_RankSortGold": 1,
        "n_RankTotal": 1,
        "n_RankSortTotal": 1,
    }
    payload.update(overrides)
    return payload


def feed_payload(*countries: dict[str, Any], **info_overrides: Any) -> dict[str, Any]:
    return {
        "MedalTableInfo": info_payload(**info_overrides),
        "MedalTableNOC": list(countries),
    }
