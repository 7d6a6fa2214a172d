"""Logging Audit module.

This module provides logging configuration and audit trail functionality.
"""

from .audit import log_audit_event
from .formatters import PIIRedactingFormatter
from .logger import (
    configure_logging,
    configure_operation_logging,
    get_operation_logger,
    suppress_console_logging,
)

__all__ = [
    "configure_logging",
    "configure_operation_logging",
    "get_operation_logger",
    "log_audit_event",
    "PIIRedactingFormatter",
    "suppress_console_logging",
]
