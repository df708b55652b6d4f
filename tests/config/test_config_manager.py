"""
Tests for ConfigManager hierarchical loading.
"""

import json

import pytest
import yaml

from cardfilter.core.config import AppConfig, ConfigManager
from cardfilter.core.exceptions import ConfigurationError, ErrorCode


class TestConfigManager:
    """Test configuration sources and their precedence."""

    def write_yaml(self, path, data):
        path.write_text(yaml.safe_dump(data), encoding='utf-8')
        return path

    def test_defaults(self):
        """Test loading with no file, environment or CLI arguments."""
        manager = ConfigManager()
        config = manager.load_config()

        assert isinstance(config, AppConfig)
        assert len(config.cards) == 5
        assert config.filters.max_cost is None
        assert manager.config is config

    def test_yaml_file(self, tmp_path):
        config_file = self.write_yaml(tmp_path / "custom.yaml", {
            'cards': [{'id': 10, 'name': 'Alpha', 'cost': 5, 'version': 2, 'leader_id': 7}],
            'filters': {'max_cost': 50, 'versions': [2]},
        })

        config = ConfigManager(config_file).load_config()

        assert [card.name for card in config.cards] == ['Alpha']
        assert config.filters.versions == [2]

    def test_json_file(self, tmp_path):
        config_file = tmp_path / "custom.json"
        config_file.write_text(json.dumps({'filters': {'min_cost': 5}}), encoding='utf-8')

        config = ConfigManager(str(config_file)).load_config()
        assert config.filters.min_cost == 5.0

    def test_default_search_path(self, tmp_path):
        """Test cardfilter.yaml in the working directory is picked up."""
        self.write_yaml(tmp_path / "cardfilter.yaml", {'filters': {'max_cost': 25}})
        config = ConfigManager().load_config()
        assert config.filters.max_cost == 25.0

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        config_file = self.write_yaml(tmp_path / "custom.yaml", {'filters': {'max_cost': 10, 'min_cost': 1}})
        monkeypatch.setenv("CARDFILTER_MAX_COST", "50")
        monkeypatch.setenv("CARDFILTER_VERSIONS", "1,3")
        monkeypatch.setenv("CARDFILTER_VERBOSE", "yes")

        config = ConfigManager(config_file).load_config()

        assert config.filters.max_cost == 50.0
        assert config.filters.min_cost == 1.0
        assert config.filters.versions == [1, 3]
        assert config.verbose is True

    def test_cli_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("CARDFILTER_MAX_COST", "50")
        monkeypatch.setenv("CARDFILTER_LEADERS", "0")

        config = ConfigManager().load_config(cli_args={
            'max_cost': 20,
            'versions': [2],
            'leaders': [],
            'debug': None,
        })

        assert config.filters.max_cost == 20.0
        assert config.filters.versions == [2]
        assert config.filters.leaders == [0]
        assert config.debug is False

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("CARDFILTER_MAX_COST", "expensive")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager().load_config()
        assert exc_info.value.error_code == ErrorCode.CONFIG_INVALID_VALUE
        assert "CARDFILTER_MAX_COST" in exc_info.value.message

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(tmp_path / "missing.yaml").load_config()
        assert exc_info.value.error_code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert exc_info.value.context.operation == "load_config_file"
        assert exc_info.value.context.file_path == str(tmp_path / "missing.yaml")
        assert exc_info.value.suggestions

    def test_malformed_yaml(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("filters: [unclosed", encoding='utf-8')
        with pytest.raises(ConfigurationError, match="Failed to load config file") as exc_info:
            ConfigManager(config_file).load_config()
        assert exc_info.value.context.file_path == str(config_file)

    def test_top_level_must_be_mapping(self, tmp_path):
        config_file = self.write_yaml(tmp_path / "list.yaml", [1, 2, 3])
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigManager(config_file).load_config()

    def test_schema_violation(self, tmp_path):
        config_file = self.write_yaml(tmp_path / "bad.yaml", {'filters': {'max_score': 10}})
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(config_file).load_config()
        assert exc_info.value.error_code == ErrorCode.CONFIG_SCHEMA_VALIDATION


class TestValidateConfig:
    """Test advisory configuration warnings."""

    def setup_method(self):
        self.manager = ConfigManager()

    def test_clean_config(self):
        assert self.manager.validate_config(AppConfig()) == []

    def test_nothing_loaded(self):
        assert self.manager.validate_config() == ["No configuration loaded"]

    def test_inverted_bounds_warning(self):
        warnings = self.manager.validate_config(AppConfig(filters={'min_cost': 60, 'max_cost': 50}))
        assert len(warnings) == 1
        assert "not below max_cost" in warnings[0]

    def test_empty_lists_warning(self):
        warnings = self.manager.validate_config(AppConfig(filters={'versions': [], 'leaders': []}))
        assert warnings == [
            "versions is empty; no card will match",
            "leaders is empty; no card will match",
        ]

    def test_duplicate_ids_and_no_cards(self):
        duplicate = AppConfig(cards=[
            {'id': 1, 'name': 'A', 'cost': 1, 'version': 1},
            {'id': 1, 'name': 'B', 'cost': 2, 'version': 1},
        ])
        assert self.manager.validate_config(duplicate) == ["Duplicate card ids in configuration"]
        assert self.manager.validate_config(AppConfig(cards=[])) == ["No cards configured"]

    def test_generate_schema(self):
        schema = self.manager.generate_schema()
        assert 'filters' in schema['properties']
