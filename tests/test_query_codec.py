import pytest

from medalboard.config import (
    DEFAULT_CONFIG,
    RankingConfig,
    apply_to_url,
    decode_config,
    encode_config,
    from_query_string,
    is_canonical,
    to_query_string,
)


def test_defaults_encode_to_nothing():
    assert encode_config(RankingConfig(gold=3, silver=2, bronze=1)) == {}
    assert to_query_string(DEFAULT_CONFIG) == ""


def test_encode_emits_changed_weights_and_flag():
    config = RankingConfig(gold=5, silver=2, bronze=0, normalize_by_population=True)

    assert encode_config(config) == {"gold": "5", "bronze": "0", "population": "true"}


def test_round_trip():
    config = RankingConfig(gold=5, silver=2, bronze=1, normalize_by_population=True)
    assert decode_config(encode_config(config, DEFAULT_CONFIG), DEFAULT_CONFIG) == config


@pytest.mark.parametrize("gold", [0, 1, 10])
def test_round_trip_with_custom_defaults(gold):
    defaults = RankingConfig(gold=1, silver=1, bronze=1)
    config = RankingConfig(gold=gold, silver=7, bronze=1)
    assert decode_config(encode_config(config, defaults), defaults) == config


def test_decode_missing_params_uses_defaults():
    assert decode_config({}) == DEFAULT_CONFIG


def test_decode_population_is_presence_only():
    assert decode_config({"population": ""}).normalize_by_population is True
    assert decode_config({"population": "false"}).normalize_by_population is True


def test_decode_malformed_weight_falls_back_to_default(caplog):
    with caplog.at_level("WARNING"):
        config = decode_config({"gold": "abc", "silver": "2.5", "bronze": "4"})

    assert config == RankingConfig(gold=3, silver=2, bronze=4)
    assert "Invalid gold weight" in caplog.text


def test_decode_out_of_range_weight_falls_back_to_default():
    config = decode_config({"gold": "11", "silver": "-1"})
    assert config == DEFAULT_CONFIG


def test_from_query_string_keeps_blank_flag():
    config = from_query_string("?gold=7&population")
    assert config == RankingConfig(gold=7, normalize_by_population=True)


def test_is_canonical():
    assert is_canonical({})
    assert is_canonical({"gold": "5", "population": "true"})
    assert not is_canonical({"gold": "3"})
    assert not is_canonical({"population": "on"})
    assert not is_canonical({"gold": "nope"})


def test_apply_to_url_preserves_other_params():
    url = "https://medals.example/ui?lang=fr&gold=9&population=true"
    config = RankingConfig(silver=4)

    assert apply_to_url(url, config) == "https://medals.example/ui?lang=fr&silver=4"


def test_apply_to_url_defaults_clear_query():
    assert apply_to_url("https://medals.example/?bronze=2", DEFAULT_CONFIG) == "https://medals.example/"


@pytest.mark.parametrize("raw", ["+5", "1_0", " 5", "٥", "5.0", ""])
def test_decode_non_canonical_weight_falls_back_to_default(raw):
    assert decode_config({"gold": raw}).gold == 3
