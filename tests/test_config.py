"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from civjobs.config import (
    AppConfig,
    ConfigurationError,
    DataConfig,
    LLMConfig,
    load_config,
    load_environment_config,
)


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run with an empty working directory so no stray config.yaml is found."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_config(directory: Path, text: str, name: str = "config.yaml") -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_defaults_without_config_file(self, in_tmp_dir):
        app_config, env_config = load_config()

        assert app_config.data.root == Path("data")
        assert app_config.logging.level == "INFO"
        assert app_config.logging.format == "key-value"
        assert app_config.llm.model == "gpt-3.5-turbo"
        assert app_config.cache.capacity == 100
        assert env_config.openai_api_key is None
        assert env_config.environment == "local"

    def test_load_values(self, in_tmp_dir):
        path = write_config(
            in_tmp_dir,
            """
data:
  root: /srv/civjobs
  gold_dir: /srv/published
logging:
  level: DEBUG
  format: json
llm:
  model: gpt-4o-mini
  temperature: 0.2
  max_jobs_in_prompt: 10
cache:
  enabled: false
""",
            name="custom.yaml",
        )
        app_config, _ = load_config(path)

        assert app_config.data.bronze_path == Path("/srv/civjobs/bronze")
        assert app_config.data.gold_path == Path("/srv/published")
        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"
        assert app_config.llm.model == "gpt-4o-mini"
        assert app_config.llm.max_jobs_in_prompt == 10
        assert app_config.cache.enabled is False

    def test_default_location_in_config_dir(self, in_tmp_dir):
        write_config(in_tmp_dir / "config", "logging:\n  level: ERROR\n")

        app_config, _ = load_config()
        assert app_config.logging.level == "ERROR"

    def test_empty_file_uses_defaults(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "")
        app_config, _ = load_config(path)
        assert app_config == AppConfig()

    def test_config_file_not_found(self, in_tmp_dir):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(Path("nonexistent.yaml"))

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "data: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            load_config(path)

    def test_non_mapping(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "- data\n- logging\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping, got list"):
            load_config(path)

    def test_unknown_section(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "scheduler:\n  interval: 15m\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert "Unknown field: scheduler" in exc_info.value.errors

    def test_invalid_enum_value(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "logging:\n  level: LOUD\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert any("logging -> level" in error for error in exc_info.value.errors)
        assert "Suggestions:" in str(exc_info.value)

    def test_out_of_range_value(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "llm:\n  timeout_seconds: 1\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert any(error.startswith("llm -> timeout_seconds") for error in exc_info.value.errors)


class TestConfigurationWarnings:
    def test_high_temperature(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "llm:\n  temperature: 1.5\n")

        with pytest.warns(UserWarning, match="High llm.temperature"):
            load_config(path)

    def test_shared_layer_directories(self, in_tmp_dir):
        path = write_config(in_tmp_dir, "data:\n  bronze_dir: data/in\n  silver_dir: data/in/\n")

        with pytest.warns(UserWarning, match="share a directory"):
            load_config(path)


class TestEnvironment:
    def test_data_dir_overrides_config(self, in_tmp_dir, monkeypatch):
        write_config(in_tmp_dir, "data:\n  root: from-config\n")
        monkeypatch.setenv("CIVJOBS_DATA_DIR", str(in_tmp_dir / "from-env"))

        app_config, env_config = load_config()

        assert app_config.data.root == in_tmp_dir / "from-env"
        assert env_config.data_dir == in_tmp_dir / "from-env"

    def test_data_dir_must_be_a_directory(self, in_tmp_dir, monkeypatch):
        (in_tmp_dir / "file.txt").write_text("x", encoding="utf-8")
        monkeypatch.setenv("CIVJOBS_DATA_DIR", str(in_tmp_dir / "file.txt"))

        with pytest.raises(ConfigurationError, match="Environment variable validation failed"):
            load_environment_config()

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert load_environment_config().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert "Invalid LOG_LEVEL: 'LOUD'" in exc_info.value.errors[0]

    def test_api_key_and_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        env_config = load_environment_config()

        assert env_config.openai_api_key == "sk-test"
        assert env_config.environment == "staging"

    def test_blank_variables_are_unset(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "")
        assert load_environment_config().openai_api_key is None


class TestModels:
    def test_layer_paths_default_under_root(self):
        config = DataConfig(root=Path("/data"))

        assert config.bronze_path == Path("/data/bronze")
        assert config.silver_path == Path("/data/silver")
        assert config.gold_path == Path("/data/gold")

    def test_explicit_layer_overrides_only_that_layer(self):
        config = DataConfig(root=Path("/data"), silver_dir=Path("/tmp/silver"))

        assert config.silver_path == Path("/tmp/silver")
        assert config.gold_path == Path("/data/gold")

    @pytest.mark.parametrize("model", ["", "   "])
    def test_blank_model_rejected(self, model):
        with pytest.raises(ValidationError):
            LLMConfig(model=model)

    def test_model_name_stripped(self):
        assert LLMConfig(model=" gpt-4o ").model == "gpt-4o"
