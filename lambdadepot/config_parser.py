"""
Configuration Parser for lambdadepot.

This module handles parsing, validation and environment overrides of the
optional JSON configuration used to set up lambdadepot's logging. Every step
reports its outcome as a Result, so a bad file surfaces as a failure carrying
the original exception instead of raising midway.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from jsonschema import ValidationError, validate

from .functions import Function1
from .logging_utils import initialize_logger, timer
from .result import Result

# Set up logging
logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "LAMBDADEPOT_LOG_LEVEL"
ENV_LOG_PATH = "LAMBDADEPOT_LOG_PATH"

# Configuration schema for validation
CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "logging": {
            "type": "object",
            "properties": {
                "log_level": {"type": "string", "enum": ["debug", "info", "warning", "error"]},
                "log_path": {"type": ["string", "null"]},
                "log_captured_failures": {"type": "boolean"}
            },
            "additionalProperties": False
        }
    }
}


def _read_json(input_path: str) -> Dict[str, Any]:
    with open(input_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def parse_config(input_path: str) -> Result:
    """
    Parse a JSON configuration file.

    Args:
        input_path (str): Path to the JSON configuration file.

    Returns:
        Result: Success with the parsed dictionary, or a failure carrying
                FileNotFoundError / json.JSONDecodeError.
    """
    result = Function1(_read_json).lift().apply(input_path)
    result.if_success_or_failure(
        lambda config: logger.info("Successfully parsed configuration file: %s", input_path),
        lambda e: logger.error("Could not parse configuration file %s: %s", input_path, e)
    )
    return result


def _validated(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    validate(instance=config_dict, schema=CONFIG_SCHEMA)

    config = copy.deepcopy(config_dict)
    config.setdefault("logging", {})
    config["logging"].setdefault("log_level", "info")
    config["logging"].setdefault("log_path", None)
    config["logging"].setdefault("log_captured_failures", False)
    return config


def validate_config(config_dict: Dict[str, Any]) -> Result:
    """
    Validate a configuration dictionary and provide defaults for missing values.

    Args:
        config_dict (dict): Raw configuration dictionary from parsed JSON.

    Returns:
        Result: Success with a validated copy with defaults applied, or a
                failure carrying the jsonschema ValidationError.
    """
    return (Function1(_validated).lift().apply(config_dict)
            .peek_if_success(lambda config: logger.info("Configuration validated and defaults applied"))
            .peek_if_failure(lambda e: logger.error("Configuration validation error: %s", e.message),
                             when=ValidationError))


def apply_env_overrides(config_dict: Dict[str, Any], env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Apply environment overrides on top of a validated configuration.

    Variables are read from the process environment after loading ``env_file``
    (or a ``.env`` file found by python-dotenv) without overriding variables
    that are already set.

    Args:
        config_dict (dict): Validated configuration dictionary.
        env_file (str, optional): Path of a dotenv file.

    Returns:
        dict: A copy of the configuration with overrides applied.
    """
    load_dotenv(dotenv_path=env_file)

    config = copy.deepcopy(config_dict)
    logging_options = config.setdefault("logging", {})

    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        logging_options["log_level"] = log_level.lower()
        logger.debug("Log level overridden from %s", ENV_LOG_LEVEL)

    log_path = os.environ.get(ENV_LOG_PATH)
    if log_path:
        logging_options["log_path"] = log_path
        logger.debug("Log path overridden from %s", ENV_LOG_PATH)

    return config


@timer("load_config", logger)
def load_config(input_path: Optional[str] = None, env_file: Optional[str] = None) -> Result:
    """
    Load configuration from parsing to validation and environment overrides.

    Args:
        input_path (str, optional): Path to the configuration file. If None,
                                    defaults plus environment overrides are used.
        env_file (str, optional): Path of a dotenv file.

    Returns:
        Result: Success with the final configuration, or the first failure.
    """
    raw = parse_config(input_path) if input_path else Result.success({})
    return (raw.if_empty_resume_get(lambda: Result.failure(ValueError(f"Configuration file is null: {input_path}")))
            .flat_map(validate_config)
            .map(lambda config: apply_env_overrides(config, env_file)))


def extract_logging_options(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract logging-related options from configuration.

    Args:
        config_dict (dict): Validated configuration dictionary.

    Returns:
        dict: Logging options, empty if the section is missing.
    """
    if "logging" not in config_dict:
        logger.warning("No logging options found in configuration")
        return {}

    logging_options = config_dict["logging"].copy()
    logger.debug("Extracted logging options: %s", logging_options)
    return logging_options


def configure_from_file(input_path: Optional[str] = None, env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration and initialize logging from it.

    Args:
        input_path (str, optional): Path to the configuration file.
        env_file (str, optional): Path of a dotenv file.

    Returns:
        dict: The loaded configuration.

    Raises:
        ValueError: If the configuration cannot be loaded; the underlying
                    error is chained as the cause.
    """
    result = load_config(input_path, env_file)
    if result.is_failure():
        error = result.get_error()
        raise ValueError(f"Invalid configuration: {error}") from error

    config = result.get_value()
    options = extract_logging_options(config)
    initialize_logger(options.get("log_path"), options.get("log_level", "info"))
    if options.get("log_captured_failures"):
        logging.getLogger("lambdadepot.functions").setLevel(logging.DEBUG)
    return config
