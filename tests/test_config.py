"""Tests for configuration functionality."""

from datetime import datetime
from pathlib import Path

import pytest

from gitcommitlint.config import DEFAULT_FOOTER_KEYS, Config


def test_default_config(config):
    """Test default configuration values."""
    assert config.max_subject_length == 50
    assert config.max_body_line_length == 72
    assert config.past_tense_words == ["added", "fixed", "updated", "changed", "removed"]
    assert config.footer_keys == DEFAULT_FOOTER_KEYS
    assert config.strip_comments is True
    assert config.strict is False
    assert config.always_log is False
    assert config.log_file is None


def test_config_load_nonexistent(tmp_path, config):
    """Test loading configuration when file doesn't exist."""
    loaded = Config.load(tmp_path)
    assert loaded.max_subject_length == 50  # Should use defaults


def test_config_load_and_save(tmp_path, config):
    """Test saving and loading configuration."""
    # Create a config with non-default values
    custom = Config(
        max_subject_length=60,
        max_body_line_length=100,
        past_tense_words=["added"],
        footer_keys=["Closes", "See also"],
        strip_comments=False,
        strict=True,
        log_file="custom.log",
    )

    custom.save(tmp_path)
    loaded = Config.load(tmp_path)

    assert loaded.max_subject_length == 60
    assert loaded.max_body_line_length == 100
    assert loaded.past_tense_words == ["added"]
    assert loaded.footer_keys == ["Closes", "See also"]
    assert loaded.strip_comments is False
    assert loaded.strict is True
    assert loaded.log_file == "custom.log"


def test_config_load_section_table(config, config_file, tmp_path):
    config_file("[gitcommitlint]\nmax_subject_length = 72\nstrict = true\n")

    loaded = Config.load(tmp_path)

    assert loaded.max_subject_length == 72
    assert loaded.strict is True


def test_config_load_invalid(config, config_file, tmp_path):
    """Test loading invalid configuration file."""
    config_file("invalid [ toml")

    # Should get default config
    loaded = Config.load(tmp_path)
    assert loaded.max_subject_length == 50


def test_config_load_invalid_value(config, config_file, tmp_path):
    config_file("max_subject_length = -3\n")

    loaded = Config.load(tmp_path)
    assert loaded.max_subject_length == 50


def test_config_load_rejects_unsafe_log_file(config, config_file, tmp_path):
    config_file('log_file = "../outside.log"\n')

    loaded = Config.load(tmp_path)
    assert loaded.log_file is None


def test_get_log_file_disabled(config):
    """Test get_log_file when logging is disabled."""
    assert config.get_log_file() is None


def test_get_log_file_custom(config):
    """Test get_log_file with custom log file."""
    custom = Config(always_log=False, log_file="custom.log")
    assert custom.get_log_file() == Path("custom.log")


def test_get_log_file_unsafe(config):
    custom = Config(log_file="/etc/passwd")
    assert custom.get_log_file() is None


def test_get_log_file_always(config):
    """Test get_log_file with always_log enabled."""
    log_file = Config(always_log=True).get_log_file()

    assert log_file is not None
    assert log_file.parent == Path(".")
    assert log_file.name.startswith("gcl_log-")
    assert log_file.suffix == ".log"

    # Verify timestamp format
    timestamp_str = log_file.stem.split("-", 1)[1]
    try:
        datetime.strptime(timestamp_str, "%Y-%m-%d_%H-%M-%S")
    except ValueError:
        pytest.fail("Invalid timestamp format in log filename")


def test_environment_variables(config, monkeypatch):
    monkeypatch.setenv("GIT_COMMIT_LINT_MAX_SUBJECT_LENGTH", "60")
    monkeypatch.setenv("GIT_COMMIT_LINT_PAST_TENSE_WORDS", "added, tweaked ,")
    monkeypatch.setenv("GIT_COMMIT_LINT_STRICT", "yes")
    monkeypatch.setenv("GIT_COMMIT_LINT_STRIP_COMMENTS", "off")

    env_config = Config()

    assert env_config.max_subject_length == 60
    assert env_config.past_tense_words == ["added", "tweaked"]
    assert env_config.strict is True
    assert env_config.strip_comments is False


def test_explicit_values_override_environment(config, monkeypatch):
    monkeypatch.setenv("GIT_COMMIT_LINT_MAX_SUBJECT_LENGTH", "60")
    assert Config(max_subject_length=40).max_subject_length == 40


@pytest.mark.parametrize("value", ["abc", "0", "-5", "²"])
def test_bad_integer_environment_variable_keeps_default(config, monkeypatch, value):
    monkeypatch.setenv("GIT_COMMIT_LINT_MAX_SUBJECT_LENGTH", value)
    monkeypatch.setenv("GIT_COMMIT_LINT_MAX_BODY_LINE_LENGTH", "100")

    env_config = Config()

    assert env_config.max_subject_length == 50
    assert env_config.max_body_line_length == 100


def test_bad_environment_falls_back_with_config_file(config, config_file, monkeypatch, tmp_path):
    config_file("max_subject_length = -3\n")
    monkeypatch.setenv("GIT_COMMIT_LINT_MAX_SUBJECT_LENGTH", "abc")

    loaded = Config.load(tmp_path)

    assert loaded.max_subject_length == 50
