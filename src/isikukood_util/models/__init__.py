"""Models module.

This module provides data models and dataclasses for the application.
"""

from isikukood_util.models.identification import (
    ChecksumValidation,
    Gender,
    GenderCenturyInfo,
    HospitalInfo,
    ParsedIdentification,
)

__all__ = [
    "ChecksumValidation",
    "Gender",
    "GenderCenturyInfo",
    "HospitalInfo",
    "ParsedIdentification",
]
