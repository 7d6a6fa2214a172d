"""Personal identification code data models.

This module defines the records produced by the personal code codec. Every
record is immutable and created fresh per call.
"""

from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional


class Gender(Enum):
    """Sex encoded in the leading digit of a personal code."""

    MALE = "Male"
    FEMALE = "Female"

    @classmethod
    def from_keyword(cls, keyword: str) -> "Gender":
        """Resolve a case-insensitive MALE/FEMALE keyword.

        Raises:
            ValueError: If keyword is not MALE or FEMALE
        """
        try:
            return cls[keyword.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Invalid gender: {keyword}. Must be MALE or FEMALE"
            ) from None


@dataclass(frozen=True)
class GenderCenturyInfo:
    """Sex and century base decoded from the leading digit.

    Attributes:
        gender: Male or Female
        century: Century base year (1800, 1900, 2000 or 2100)
    """

    gender: Gender
    century: int


@dataclass(frozen=True)
class HospitalInfo:
    """Maternity hospital and local birth order decoded from the sequence.

    Attributes:
        birth_order: Decimal birth order (local order pre-2013, flat ordinal after)
        name: Hospital or region name, only for births before 2013
    """

    birth_order: str
    name: Optional[str] = None


@dataclass(frozen=True)
class ChecksumValidation:
    """Result of independently recomputing the control digit.

    Attributes:
        is_valid: Whether the calculated checksum matches the provided one
        calculated_checksum: Checksum computed from the first 10 digits
        provided_checksum: The 11th digit of the code
        calculation_steps: Human-readable trace of the calculation
    """

    is_valid: bool
    calculated_checksum: int
    provided_checksum: int
    calculation_steps: str


@dataclass(frozen=True)
class ParsedIdentification:
    """Every field decoded from an 11-digit personal code.

    The embedded date is not checked for calendar correctness; ``birth_date``
    returns None when month/day do not form a real date.

    Attributes:
        month_of_birth: Month field (digits 4-5)
        day_of_birth: Day field (digits 6-7)
        birth_sequence: Raw sequence field (digits 8-10)
        control_number: Provided control digit (digit 11)
        gender_info: Sex and century decoded from digit 1
        full_year: Century base plus the two-digit year field
        hospital_or_birth_sequence: Hospital and birth order
        checksum_validation: Independent checksum verification
    """

    month_of_birth: int
    day_of_birth: int
    birth_sequence: int
    control_number: int
    gender_info: GenderCenturyInfo
    full_year: int
    hospital_or_birth_sequence: HospitalInfo
    checksum_validation: ChecksumValidation

    @property
    def birth_date(self) -> Optional[date]:
        try:
            return date(self.full_year, self.month_of_birth, self.day_of_birth)
        except ValueError:
            return None

    def to_dict(self) -> dict[str, Any]:
        """Export the record as a JSON-serialisable dictionary."""
        data = asdict(self)
        data["gender_info"]["gender"] = self.gender_info.gender.value
        return data
