"""
Test the DeckstringConfig class.
"""
from pathlib import Path

import pytest

from hs_deckstring.config import DEFAULT_TRAILER, DeckstringConfig, default_config

from tests.helpers import get_sample_data_path


def test_default_config():
    config = default_config()
    assert config.version == 0
    assert config.trailer == DEFAULT_TRAILER
    assert config.slot_limit == 2
    assert config.card_limit == 30


def test_from_yaml_file():
    config = DeckstringConfig.from_yaml(get_sample_data_path("sample_config.yaml"))
    assert config.version == 1
    assert config.trailer == "# Shared from the test suite"
    assert config.slot_limit == 1
    assert config.card_limit == 40


def test_from_yaml_file_given_as_str():
    config = DeckstringConfig.from_yaml(str(get_sample_data_path("sample_config.yaml")))
    assert config.version == 1


def test_from_yaml_string_keeps_defaults():
    config = DeckstringConfig.from_yaml("limits:\n  card_limit: 40\n")
    assert config.card_limit == 40
    assert config.slot_limit == 2
    assert config.version == 0


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DeckstringConfig.from_yaml(Path(tmp_path) / "missing.yaml")


def test_from_dict_invalid():
    with pytest.raises(ValueError):
        DeckstringConfig.from_dict({"limits": {"slot_limit": 0}})
    with pytest.raises(ValueError):
        DeckstringConfig.from_dict({"codec": {"version": -1}})


def test_to_yaml_round_trip(tmp_path):
    config = DeckstringConfig.from_dict({"codec": {"version": 1}, "limits": {"card_limit": None}})
    yaml_str = config.to_yaml()
    assert "version: 1" in yaml_str
    assert DeckstringConfig.from_yaml(yaml_str) == config

    path = tmp_path / "config.yaml"
    assert config.to_yaml(path) is None
    assert DeckstringConfig.from_yaml(path).card_limit is None
