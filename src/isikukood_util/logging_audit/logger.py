"""Logging setup for the isikukood CLI.

The root logger gets two handlers: a console handler at the requested level
and a rotating file handler that records everything from DEBUG up. Both use
PIIRedactingFormatter, so ``--redact-pii`` covers the terminal and the log file
alike. Codec modules never configure logging themselves; they only log through
the operation loggers returned by get_operation_logger.
"""

import logging
import os
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from .formatters import PIIRedactingFormatter

if TYPE_CHECKING:
    from ..config.schema import OperationLoggingConfig

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = Path("logs") / "isikukood.log"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

_logging_configured = False

# One logger per CLI operation so each can be tuned from config
OPERATION_LOGGERS = {
    "generate": "isikukood_util.generate",
    "parse": "isikukood_util.parse",
    "batch": "isikukood_util.batch",
}

logger = logging.getLogger(__name__)


def _numeric_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return numeric_level


def _is_console(handler: logging.Handler) -> bool:
    # FileHandler subclasses StreamHandler; only file handlers carry baseFilename
    return isinstance(handler, logging.StreamHandler) and not hasattr(handler, "baseFilename")


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    redact_pii: bool = False,
) -> None:
    """Install the console and rotating file handlers on the root logger.

    Calling it again replaces the handlers from the previous call, so the CLI
    can reconfigure after reading the config file.

    Args:
        level: Console level name. The file always receives DEBUG and above.
        log_file: Log file path. Falls back to ISIKUKOOD_LOG_FILE, then to
            logs/isikukood.log.
        redact_pii: Mask personal codes and dd.mm.yyyy dates in every handler

    Raises:
        ValueError: If level is not a logging level name
        RuntimeError: If the log directory cannot be created
    """
    global _logging_configured

    console_level = _numeric_level(level)

    if log_file is None:
        env_log_file = os.environ.get("ISIKUKOOD_LOG_FILE")
        log_file = Path(env_log_file) if env_log_file else DEFAULT_LOG_FILE

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(
            f"Failed to create log directory: {log_file.parent}. "
            f"Ensure write permissions are available. Error: {e}"
        ) from e

    root_logger = logging.getLogger()
    if _logging_configured:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        PIIRedactingFormatter(fmt=DEFAULT_LOG_FORMAT, redact_pii=redact_pii)
    )
    root_logger.addHandler(console_handler)

    try:
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        root_logger.warning(f"Cannot open log file {log_file}: {e}. Logging to console only.")
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            PIIRedactingFormatter(fmt=DEFAULT_LOG_FORMAT, redact_pii=redact_pii)
        )
        root_logger.addHandler(file_handler)

    _logging_configured = True


def get_operation_logger(operation: str) -> logging.Logger:
    """Return the logger for generate, parse or batch.

    Raises:
        ValueError: If operation is not one of those names
    """
    if operation not in OPERATION_LOGGERS:
        raise ValueError(
            f"Unknown operation: {operation}. "
            f"Must be one of: {', '.join(OPERATION_LOGGERS)}"
        )
    return logging.getLogger(OPERATION_LOGGERS[operation])


def configure_operation_logging(config: "OperationLoggingConfig") -> None:
    """Apply the per-operation levels from the ``operation_logging`` config section.

    Raises:
        ValueError: If any level is not a logging level name
    """
    for operation, logger_name in OPERATION_LOGGERS.items():
        level = getattr(config, f"{operation}_log_level")
        logging.getLogger(logger_name).setLevel(_numeric_level(level))
        logger.debug("Set %s logger level to %s", logger_name, level.upper())


@contextmanager
def suppress_console_logging() -> Iterator[None]:
    """Silence the console handler while a command prints JSON.

    File handlers keep logging.
    """
    silenced: list[tuple[logging.Handler, int]] = []
    for handler in logging.getLogger().handlers:
        if _is_console(handler):
            silenced.append((handler, handler.level))
            handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for handler, level in silenced:
            handler.setLevel(level)
