"""Personal code generation.

Composes a gender and birth date into an 11-digit personal code:

    <gender digit><yy><mm><dd><sequence><control digit>
"""

from datetime import date
from enum import Enum
from typing import Optional

from isikukood_util.codec.checksum import ChecksumStrategy, calculate_checksum
from isikukood_util.codec.gender import MAX_YEAR, MIN_YEAR, encode_gender_digit
from isikukood_util.codec.sequence import FixedSequenceAllocator, SequenceAllocator
from isikukood_util.models.identification import Gender
from isikukood_util.utils.exceptions import InvalidYearRangeError

# Returned instead of a code when the legacy year guard trips
GENERATION_FAILED_MESSAGE = "I am not able to generate you an id"


class YearGuard(Enum):
    """Boundary check applied to the birth year before generation.

    LEGACY keeps the historical condition ``year < 1800 and year > 2199``,
    which no single year satisfies, so it never returns the failure message.
    Out-of-range years still fail with InvalidYearRangeError when the gender
    digit is encoded. STRICT checks ``year < 1800 or year > 2199`` up front.
    """

    LEGACY = "legacy"
    STRICT = "strict"


def generate_personal_code(
    gender: Gender,
    birth_date: date,
    allocator: Optional[SequenceAllocator] = None,
    strategy: ChecksumStrategy = ChecksumStrategy.SINGLE_STAGE_MODULO_11,
    year_guard: YearGuard = YearGuard.LEGACY,
) -> str:
    """Generate an 11-digit personal code for a gender and birth date.

    Args:
        gender: Sex of the person
        birth_date: Date of birth, year 1800-2199
        allocator: Source of the three-digit sequence. Defaults to a
                   FixedSequenceAllocator returning "001".
        strategy: Control digit procedure. Defaults to the single-stage rule
                  historically used for generation.
        year_guard: Year boundary check to apply

    Returns:
        The 11-digit code, or GENERATION_FAILED_MESSAGE if the legacy guard trips

    Raises:
        InvalidYearRangeError: If the year is outside 1800-2199

    Example:
        >>> generate_personal_code(Gender.MALE, date(1976, 5, 3))
        '37605030015'
    """
    year = birth_date.year

    if year_guard is YearGuard.LEGACY:
        if year < MIN_YEAR and year > MAX_YEAR:
            return GENERATION_FAILED_MESSAGE
    elif year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYearRangeError(year)

    digit = encode_gender_digit(gender, year)
    if allocator is None:
        allocator = FixedSequenceAllocator()
    sequence = allocator.allocate(gender, year, birth_date.month, birth_date.day)

    body = f"{digit}{year % 100:02d}{birth_date.month:02d}{birth_date.day:02d}{sequence}"
    return body + str(calculate_checksum(body, strategy))
