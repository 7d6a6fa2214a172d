"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "generator": {
        # No sequence registry is available, every code gets 001
        "sequence": "001",
        # Generation has always used the single W1 pass
        "checksum_strategy": "single_stage",
        # Keep the historical (vacuous) year guard
        "strict_year_range": False,
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/isikukood.log",
        # Personal codes are PII; redaction is opt-in
        "redact_pii": False,
    },
    "operation_logging": {
        "generate_log_level": "INFO",
        "parse_log_level": "INFO",
        "batch_log_level": "INFO",
    },
    "batch": {
        "code_column": "code",
        "max_report_issues": 20,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
