"""Tests for configuration loading."""

import json

import pytest

from streaming_catalog.config import CatalogConfig, load_config, save_config
from streaming_catalog.exceptions import ConfigurationError, StreamingCatalogError


class TestCatalogConfig:
    """Test CatalogConfig defaults and validation."""

    def test_defaults(self):
        config = CatalogConfig.default()
        assert config.log_level == "WARNING"
        assert config.max_events_in_memory == 1000
        assert config.seed_sample_data is True

    def test_log_level_normalised(self):
        assert CatalogConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError, match="Invalid log_level"):
            CatalogConfig(log_level="chatty")

    def test_invalid_event_capacity(self):
        with pytest.raises(ConfigurationError):
            CatalogConfig(max_events_in_memory=0)

    def test_from_dict_ignores_unknown_keys(self):
        config = CatalogConfig.from_dict({"log_level": "INFO", "colour": "blue"})
        assert config.log_level == "INFO"


class TestConfigFiles:
    """Test JSON load and save."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "catalog.json"
        save_config(CatalogConfig(log_level="INFO", seed_sample_data=False), path)
        loaded = load_config(path)
        assert loaded == CatalogConfig(log_level="INFO", seed_sample_data=False)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(StreamingCatalogError):
            load_config(tmp_path / "absent.json")

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_config(path)
