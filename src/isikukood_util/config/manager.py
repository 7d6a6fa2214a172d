"""Loading of the isikukood configuration.

A JSON file (config/config.json unless --config says otherwise) is read, or the
built-in defaults are used when it is missing. ISIKUKOOD_* variables from the
environment or a .env file are laid over it, and pydantic validates the result.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from isikukood_util.codec.checksum import ChecksumStrategy
from isikukood_util.codec.generator import YearGuard
from isikukood_util.codec.sequence import FixedSequenceAllocator
from isikukood_util.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from isikukood_util.config.schema import Config, GeneratorConfig
from isikukood_util.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "ISIKUKOOD_"


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string (case-insensitive)."""
    return value.lower() in ("true", "1", "yes", "on")


# Variable suffix -> (config section, field, converter)
ENV_OVERRIDES: dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "GENERATOR_SEQUENCE": ("generator", "sequence", str),
    "GENERATOR_CHECKSUM_STRATEGY": ("generator", "checksum_strategy", str),
    "GENERATOR_STRICT_YEAR_RANGE": ("generator", "strict_year_range", _parse_bool),
    "LOG_LEVEL": ("logging", "level", str),
    "LOG_FILE": ("logging", "log_file", str),
    "REDACT_PII": ("logging", "redact_pii", _parse_bool),
    "BATCH_CODE_COLUMN": ("batch", "code_column", str),
    "OP_LOG_GENERATE_LEVEL": ("operation_logging", "generate_log_level", str),
    "OP_LOG_PARSE_LEVEL": ("operation_logging", "parse_log_level", str),
    "OP_LOG_BATCH_LEVEL": ("operation_logging", "batch_log_level", str),
}


def load_config(config_path: Optional[Path] = None) -> Config:
    """Build the validated Config.

    Precedence, highest first: CLI flags (applied by the caller), ISIKUKOOD_*
    variables, the JSON file, the schema defaults.

    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If configuration is invalid or malformed

    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> config.generator.checksum_strategy
        'single_stage'
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)

    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Read the JSON config file, or a fresh copy of DEFAULT_CONFIG if it is absent.

    Raises:
        ConfigurationError: If JSON is malformed or unreadable
    """
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
            logger.info(f"Loaded configuration from {config_path}")
            return config_dict
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check file permissions and path"
            ) from e

    logger.info(f"Config file not found: {config_path}. Using default configuration.")
    return json.loads(json.dumps(DEFAULT_CONFIG))


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Overlay ISIKUKOOD_* environment variables onto the loaded config dict.

    Only variables that are set and non-empty override; the rest of the dict is
    left as the file (or the defaults) gave it.
    """
    for suffix, (section, key, convert) in ENV_OVERRIDES.items():
        raw = os.getenv(f"{ENV_PREFIX}{suffix}")
        if raw:
            config_dict.setdefault(section, {})[key] = convert(raw)
            logger.debug(f"Override: {section}.{key} from {ENV_PREFIX}{suffix}")

    return config_dict


def generation_options(config: GeneratorConfig) -> dict[str, Any]:
    """Translate generator configuration into generate_personal_code keywords.

    Args:
        config: Generator configuration

    Returns:
        Keyword arguments for generate_personal_code (allocator, strategy, year_guard)

    Example:
        >>> options = generation_options(GeneratorConfig(strict_year_range=True))
        >>> options["year_guard"]
        <YearGuard.STRICT: 'strict'>
    """
    return {
        "allocator": FixedSequenceAllocator(config.sequence),
        "strategy": ChecksumStrategy(config.checksum_strategy),
        "year_guard": YearGuard.STRICT if config.strict_year_range else YearGuard.LEGACY,
    }
