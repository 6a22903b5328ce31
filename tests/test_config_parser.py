"""
Test configuration parser module
"""

import json
import logging
import os

import pytest
from jsonschema import ValidationError
from lambdadepot.config_parser import (
    ENV_LOG_LEVEL, ENV_LOG_PATH, apply_env_overrides, configure_from_file,
    extract_logging_options, load_config, parse_config, validate_config
)


@pytest.fixture
def clean_env(monkeypatch):
    """Make sure no override variables leak in from the environment."""
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_LOG_PATH, raising=False)


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "missing.env")


def write_config(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
    return str(path)


def test_parse_config(tmp_path):
    """Test parsing a well-formed file"""
    path = write_config(tmp_path, {"logging": {"log_level": "debug"}})
    result = parse_config(path)
    assert result.is_success()
    assert result.get_value() == {"logging": {"log_level": "debug"}}


def test_parse_config_failures(tmp_path):
    """Test missing and malformed files become failures"""
    missing = parse_config(str(tmp_path / "nope.json"))
    assert isinstance(missing.get_error(), FileNotFoundError)

    malformed = parse_config(write_config(tmp_path, "{not json"))
    assert isinstance(malformed.get_error(), json.JSONDecodeError)


def test_validate_config_applies_defaults():
    """Test defaults are filled in on a copy"""
    raw = {}
    config = validate_config(raw).get_value()
    assert config["logging"] == {"log_level": "info", "log_path": None, "log_captured_failures": False}
    assert raw == {}


def test_validate_config_rejects_bad_values():
    """Test schema violations are carried as failures"""
    result = validate_config({"logging": {"log_level": "verbose"}})
    assert result.is_failure()
    assert isinstance(result.get_error(), ValidationError)

    assert validate_config({"logging": {"unknown": True}}).is_failure()


def test_apply_env_overrides(clean_env, monkeypatch, missing_env_file):
    """Test environment variables override file settings"""
    monkeypatch.setenv(ENV_LOG_LEVEL, "DEBUG")
    monkeypatch.setenv(ENV_LOG_PATH, "/tmp/logs")

    config = {"logging": {"log_level": "info", "log_path": None}}
    overridden = apply_env_overrides(config, missing_env_file)

    assert overridden["logging"]["log_level"] == "debug"
    assert overridden["logging"]["log_path"] == "/tmp/logs"
    assert config["logging"]["log_level"] == "info"


def test_apply_env_overrides_from_dotenv(clean_env, tmp_path):
    """Test variables are picked up from a dotenv file"""
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_LOG_LEVEL}=warning\n", encoding="utf-8")

    try:
        overridden = apply_env_overrides({}, str(env_file))
    finally:
        os.environ.pop(ENV_LOG_LEVEL, None)

    assert overridden["logging"]["log_level"] == "warning"


def test_load_config(clean_env, tmp_path, missing_env_file):
    """Test the full load chain"""
    path = write_config(tmp_path, {"logging": {"log_level": "error"}})
    config = load_config(path, missing_env_file).get_value()
    assert config["logging"]["log_level"] == "error"
    assert config["logging"]["log_captured_failures"] is False

    assert load_config(None, missing_env_file).get_value()["logging"]["log_level"] == "info"
    assert load_config(str(tmp_path / "nope.json"), missing_env_file).is_failure()
    assert load_config(write_config(tmp_path, "null"), missing_env_file).is_failure()


def test_extract_logging_options():
    """Test option extraction"""
    assert extract_logging_options({"logging": {"log_level": "info"}}) == {"log_level": "info"}
    assert extract_logging_options({}) == {}


def test_configure_from_file(clean_env, tmp_path, missing_env_file):
    """Test logging is initialized from the configuration"""
    log_dir = tmp_path / "logs"
    path = write_config(tmp_path, {"logging": {
        "log_level": "warning",
        "log_path": str(log_dir),
        "log_captured_failures": True
    }})

    config = configure_from_file(path, missing_env_file)

    assert config["logging"]["log_level"] == "warning"
    assert logging.getLogger("lambdadepot").level == logging.WARNING
    assert logging.getLogger("lambdadepot.functions").level == logging.DEBUG
    assert any(log_dir.iterdir())

    logging.getLogger("lambdadepot.functions").setLevel(logging.NOTSET)
    logging.getLogger("lambdadepot").setLevel(logging.NOTSET)
    for handler in list(logging.getLogger("lambdadepot").handlers):
        logging.getLogger("lambdadepot").removeHandler(handler)
        handler.close()


def test_configure_from_file_invalid(clean_env, tmp_path, missing_env_file):
    """Test invalid configuration raises with the cause chained"""
    path = write_config(tmp_path, {"logging": {"log_level": "loud"}})
    with pytest.raises(ValueError) as info:
        configure_from_file(path, missing_env_file)
    assert isinstance(info.value.__cause__, ValidationError)


def test_load_config_is_timed(clean_env, caplog, missing_env_file):
    """Test loading logs its execution time"""
    with caplog.at_level(logging.INFO, logger="lambdadepot.config_parser"):
        load_config(None, missing_env_file)

    assert any("Performance - load_config" in record.getMessage() for record in caplog.records)
