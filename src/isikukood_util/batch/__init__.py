"""Batch module.

This module provides CSV batch decoding of personal codes.
"""

from isikukood_util.batch.decoder import (
    BatchResult,
    DecodingIssue,
    IssueSeverity,
    decode_codes,
    decode_codes_csv,
    export_invalid_rows,
)

__all__ = [
    "BatchResult",
    "DecodingIssue",
    "IssueSeverity",
    "decode_codes",
    "decode_codes_csv",
    "export_invalid_rows",
]
