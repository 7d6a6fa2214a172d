"""Audit trail functionality for the isikukood utility.

This module provides structured audit logging for tracking code generation,
parsing and batch decoding.
"""

import logging
import time
import uuid
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Key fields written first, in this order
AUDIT_FIELD_ORDER = [
    "status",
    "code",
    "input_file",
    "record_count",
    "duration",
    "error_count",
    "error_kind",
    "error_message",
    "correlation_id",
]


def log_audit_event(event_type: str, details: Dict[str, Any]) -> None:
    """Log an audit trail event.

    Creates a structured audit log entry with standard fields. Audit events are
    logged at INFO level for successful operations and ERROR level for failures.

    Args:
        event_type: Type of operation (e.g., "CODE_GENERATED", "CODE_PARSED",
                    "BATCH_DECODED")
        details: Dictionary with event details. Common fields include:
                 - code: Personal code involved (redacted when PII redaction is on)
                 - input_file: Path to input file (if applicable)
                 - record_count: Number of records processed
                 - status: "success" or "failure"
                 - duration: Operation duration in seconds
                 - error_kind: Error kind (if status is failure)

    Example:
        >>> log_audit_event("CODE_PARSED", {
        ...     "code": "37605030299",
        ...     "status": "success",
        ... })
    """
    details = dict(details)
    details.setdefault("timestamp", time.time())
    details.setdefault("correlation_id", str(uuid.uuid4()))

    message_parts = [f"AUDIT [{event_type}]"]

    for field in AUDIT_FIELD_ORDER:
        if field in details:
            value = details[field]
            if field == "duration" and isinstance(value, (int, float)):
                message_parts.append(f"{field}={value:.2f}s")
            else:
                message_parts.append(f"{field}={value}")

    for key, value in details.items():
        if key not in AUDIT_FIELD_ORDER and key != "timestamp":
            message_parts.append(f"{key}={value}")

    audit_message = " | ".join(message_parts)

    if details.get("status") == "failure":
        logger.error(audit_message)
    else:
        logger.info(audit_message)
