"""Codec module.

This module provides generation, parsing and checksum validation of Estonian
personal identification codes.
"""

from isikukood_util.codec.checksum import (
    ChecksumStrategy,
    calculate_checksum,
    validate_checksum,
)
from isikukood_util.codec.gender import determine_gender, encode_gender_digit
from isikukood_util.codec.generator import (
    GENERATION_FAILED_MESSAGE,
    YearGuard,
    generate_personal_code,
)
from isikukood_util.codec.hospital import (
    HOSPITAL_RANGES,
    determine_hospital,
    determine_hospital_or_birth_sequence,
)
from isikukood_util.codec.parser import parse_identification
from isikukood_util.codec.sequence import FixedSequenceAllocator, SequenceAllocator

__all__ = [
    # Core operations
    "generate_personal_code",
    "parse_identification",
    # Checksum
    "ChecksumStrategy",
    "calculate_checksum",
    "validate_checksum",
    # Resolvers
    "determine_gender",
    "encode_gender_digit",
    "determine_hospital",
    "determine_hospital_or_birth_sequence",
    "HOSPITAL_RANGES",
    # Generation options
    "FixedSequenceAllocator",
    "SequenceAllocator",
    "YearGuard",
    "GENERATION_FAILED_MESSAGE",
]
