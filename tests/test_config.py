"""Tests for configuration loading."""

import json

import pytest
from pydantic import ValidationError

from privateroom.config.loader import load_config, save_config
from privateroom.config.schema import Config, RoomsConfig


class TestConfig:
    """Test Config defaults, aliases and persistence."""

    def test_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.json")
        assert config.telegram.token == ""
        assert config.telegram.poll_interval == 3.0
        assert config.rooms.default_capacity == 10
        assert config.rooms.default_private is True

    def test_camel_case_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "telegram": {"token": "abc", "pollInterval": 1.5, "allowFrom": ["42"]},
            "rooms": {"defaultName": "Lounge", "maxCapacity": 50},
        }))

        config = load_config(path)

        assert config.telegram.token == "abc"
        assert config.telegram.poll_interval == 1.5
        assert config.telegram.allow_from == ["42"]
        assert config.rooms.default_name == "Lounge"
        assert config.rooms.max_capacity == 50

    def test_malformed_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert load_config(path).telegram.token == ""

    def test_invalid_values_fall_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"rooms": {"defaultCapacity": 0}}))
        assert load_config(path).rooms.default_capacity == 10

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PRIVATEROOM_TELEGRAM__TOKEN", "from-env")
        assert load_config(tmp_path / "missing.json").telegram.token == "from-env"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = Config()
        config.telegram.token = "secret"
        config.rooms.default_capacity = 3

        save_config(config, path)

        assert oct(path.stat().st_mode & 0o777) == "0o600"
        data = json.loads(path.read_text())
        assert data["rooms"]["defaultCapacity"] == 3
        reloaded = load_config(path)
        assert reloaded.telegram.token == "secret"
        assert reloaded.rooms.default_capacity == 3


class TestRoomsConfig:
    """Test room default validation."""

    def test_default_capacity_above_maximum_rejected(self):
        with pytest.raises(ValidationError):
            RoomsConfig(default_capacity=10, max_capacity=5)

    def test_default_capacity_within_maximum(self):
        config = RoomsConfig(defaultCapacity=5, maxCapacity=5)
        assert config.default_capacity == config.max_capacity == 5

    def test_file_with_inconsistent_rooms_falls_back(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"rooms": {"maxCapacity": 5}}))
        config = load_config(path)
        assert config.rooms.max_capacity is None
        assert config.rooms.default_capacity == 10
