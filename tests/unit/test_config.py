"""
Unit tests for the agentsmith configuration system.
"""

import pytest
import yaml

from agentsmith.config import (
    Config,
    ConfigurationError,
    apply_env_overrides,
    deep_merge,
    load_config,
    load_yaml_file,
    set_nested_value,
)
from agentsmith.storage.paths import (
    PROJECT_CONFIG_FILENAME,
    find_project_config,
    get_agentsmith_home,
    get_global_config_path,
)


# =============================================================================
# Schema Tests
# =============================================================================


class TestConfigSchema:
    """Tests for the Config Pydantic schema."""

    def test_default_config_is_valid(self):
        """Test that the default Config() is valid."""
        config = Config()
        assert config.registry.filename == "skills-registry.jsonl"
        assert config.registry.default_limit == 10
        assert config.hooks.enabled is True
        assert config.hooks.timeout == 120
        assert config.license.enforce is True
        assert config.logging.level == "WARNING"

    def test_config_with_invalid_values(self):
        """Test that out-of-range values are rejected."""
        with pytest.raises(Exception):  # Pydantic ValidationError
            Config.model_validate({"registry": {"default_limit": 0}})

        with pytest.raises(Exception):
            Config.model_validate({"logging": {"level": "LOUD"}})


# =============================================================================
# Merger Tests
# =============================================================================


class TestDeepMerge:
    """Tests for deep_merge and set_nested_value."""

    def test_nested_merge(self):
        """Test that nested dicts merge recursively."""
        result = deep_merge({"hooks": {"timeout": 120, "enabled": True}}, {"hooks": {"timeout": 30}})
        assert result == {"hooks": {"timeout": 30, "enabled": True}}

    def test_none_removes_key(self):
        """Test that None deletes the key."""
        assert deep_merge({"a": 1, "b": 2}, {"a": None}) == {"b": 2}

    def test_lists_replace(self):
        """Test that lists are replaced, not merged."""
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}

    def test_base_is_not_modified(self):
        """Test that the base dictionary is left untouched."""
        base = {"a": 1}
        deep_merge(base, {"a": 2})
        assert base == {"a": 1}

    def test_set_nested_value(self):
        """Test creating intermediate dictionaries."""
        assert set_nested_value({}, "registry.filename", "x.jsonl") == {"registry": {"filename": "x.jsonl"}}


# =============================================================================
# Loader Tests
# =============================================================================


class TestLoadYamlFile:
    """Tests for load_yaml_file."""

    def test_missing_file(self, temp_dir):
        """Test that a missing file is an empty mapping."""
        assert load_yaml_file(temp_dir / "missing.yaml") == {}

    def test_empty_file(self, temp_dir):
        """Test that an empty file is an empty mapping."""
        path = temp_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_file(path) == {}

    def test_invalid_yaml(self, temp_dir):
        """Test that broken YAML raises ConfigurationError."""
        path = temp_dir / "bad.yaml"
        path.write_text("registry: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_file(path)

    def test_non_mapping(self, temp_dir):
        """Test that a top-level list is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_yaml_file(path)


class TestEnvOverrides:
    """Tests for apply_env_overrides."""

    def test_typed_values(self):
        """Test that values are parsed to bool, int, float and str."""
        config = apply_env_overrides(
            {},
            environ={
                "AGENTSMITH_HOOKS_ENABLED": "false",
                "AGENTSMITH_HOOKS_TIMEOUT": "30",
                "AGENTSMITH_REGISTRY_DEFAULT_LIMIT": "5",
                "AGENTSMITH_REGISTRY_FILENAME": "index.jsonl",
                "AGENTSMITH_EXTRA_RATIO": "0.5",
            },
        )
        assert config == {
            "hooks": {"enabled": False, "timeout": 30},
            "registry": {"default_limit": 5, "filename": "index.jsonl"},
            "extra": {"ratio": 0.5},
        }

    def test_ignores_unrelated_and_reserved(self):
        """Test that other variables and AGENTSMITH_HOME are ignored."""
        config = apply_env_overrides(
            {},
            environ={"HOME": "/root", "AGENTSMITH_HOME": "/tmp/x", "AGENTSMITH_DEBUG": "1"},
        )
        assert config == {}


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, temp_dir):
        """Test loading without any config files."""
        config = load_config(project_path=temp_dir)
        assert config == Config()

    def test_global_then_project_then_explicit(self, temp_dir, isolated_environment):
        """Test that later sources override earlier ones."""
        get_global_config_path().write_text(
            yaml.dump({"hooks": {"timeout": 10}, "registry": {"default_limit": 20}}),
            encoding="utf-8",
        )
        project = temp_dir / "project"
        project.mkdir()
        (project / PROJECT_CONFIG_FILENAME).write_text(yaml.dump({"hooks": {"timeout": 20}}), encoding="utf-8")
        explicit = temp_dir / "explicit.yaml"
        explicit.write_text(yaml.dump({"license": {"enforce": False}}), encoding="utf-8")

        config = load_config(config_path=explicit, project_path=project)

        assert config.hooks.timeout == 20
        assert config.registry.default_limit == 20
        assert config.license.enforce is False

    def test_env_overrides_files(self, temp_dir, monkeypatch):
        """Test that environment variables win over config files."""
        (temp_dir / PROJECT_CONFIG_FILENAME).write_text(yaml.dump({"hooks": {"timeout": 20}}), encoding="utf-8")
        monkeypatch.setenv("AGENTSMITH_HOOKS_TIMEOUT", "45")

        assert load_config(project_path=temp_dir).hooks.timeout == 45
        assert load_config(project_path=temp_dir, skip_env=True).hooks.timeout == 20

    def test_skip_project(self, temp_dir):
        """Test that project config can be skipped."""
        (temp_dir / PROJECT_CONFIG_FILENAME).write_text(yaml.dump({"hooks": {"timeout": 20}}), encoding="utf-8")
        assert load_config(project_path=temp_dir, skip_project=True).hooks.timeout == 120

    def test_missing_explicit_file(self, temp_dir):
        """Test that a missing --config file is an error."""
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config(config_path=temp_dir / "nope.yaml", project_path=temp_dir)

    def test_invalid_values(self, temp_dir, monkeypatch):
        """Test that validation failures become ConfigurationError."""
        monkeypatch.setenv("AGENTSMITH_HOOKS_TIMEOUT", "0")
        with pytest.raises(ConfigurationError, match="validation failed"):
            load_config(project_path=temp_dir)


# =============================================================================
# Path Tests
# =============================================================================


class TestPaths:
    """Tests for storage path helpers."""

    def test_home_from_env(self, isolated_environment):
        """Test that AGENTSMITH_HOME is honoured."""
        assert get_agentsmith_home() == isolated_environment.resolve()
        assert get_global_config_path() == isolated_environment.resolve() / "config.yaml"

    def test_find_project_config_walks_up(self, temp_dir):
        """Test that the project config is found in a parent directory."""
        (temp_dir / PROJECT_CONFIG_FILENAME).write_text("{}", encoding="utf-8")
        nested = temp_dir / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_config(nested) == (temp_dir / PROJECT_CONFIG_FILENAME).resolve()
