import pytest
from pydantic import ValidationError

from medalboard.models import CountryStanding
from tests.feeds import country_payload


def test_country_standing_is_frozen():
    country = CountryStanding.model_validate(country_payload(1, "Norway", "NOR", gold=2))

    assert country.code == "NOR"
    assert country.gold == 2

    with pytest.raises((TypeError, ValidationError)):
        country.gold = 5  # type: ignore[misc]


def test_country_standing_populates_by_name():
    country = CountryStanding(
        country_id=1,
        geo_id=7,
        name="Norway",
        code="NOR",
        gold=1,
        silver=0,
        bronze=0,
        total=1,
        rank_gold=1,
        rank_sort_gold=1,
        rank_total=1,
        rank_sort_total=1,
    )
    assert country.flag_url.endswith("/7.svg")
