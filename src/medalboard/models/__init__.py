"""Canonical medal-table models."""

from .medals import CountryStanding, MedalTable, MedalTableInfo

__all__ = ["CountryStanding", "MedalTable", "MedalTableInfo"]
