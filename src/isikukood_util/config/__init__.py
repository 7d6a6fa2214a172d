"""Config module.

This module provides configuration management functionality.
"""

from isikukood_util.config.manager import (
    generation_options,
    load_config,
)
from isikukood_util.config.schema import (
    BatchConfig,
    Config,
    GeneratorConfig,
    LoggingConfig,
    OperationLoggingConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "generation_options",
    # Configuration models
    "Config",
    "GeneratorConfig",
    "LoggingConfig",
    "OperationLoggingConfig",
    "BatchConfig",
]
