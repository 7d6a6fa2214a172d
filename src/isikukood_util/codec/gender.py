"""Century/gender digit mapping.

The leading digit of a personal code jointly encodes sex and the century of
birth: odd digits are male, even digits female, and each pair covers one
century starting at 1800.
"""

from types import MappingProxyType
from typing import Mapping

from isikukood_util.models.identification import Gender, GenderCenturyInfo
from isikukood_util.utils.exceptions import InvalidGenderDigitError, InvalidYearRangeError

GENDER_DIGITS: Mapping[int, GenderCenturyInfo] = MappingProxyType({
    1: GenderCenturyInfo(Gender.MALE, 1800),
    2: GenderCenturyInfo(Gender.FEMALE, 1800),
    3: GenderCenturyInfo(Gender.MALE, 1900),
    4: GenderCenturyInfo(Gender.FEMALE, 1900),
    5: GenderCenturyInfo(Gender.MALE, 2000),
    6: GenderCenturyInfo(Gender.FEMALE, 2000),
    7: GenderCenturyInfo(Gender.MALE, 2100),
    8: GenderCenturyInfo(Gender.FEMALE, 2100),
})

MIN_YEAR = 1800
MAX_YEAR = 2199


def determine_gender(gender_digit: int) -> GenderCenturyInfo:
    """Decode sex and century base from the leading digit.

    Args:
        gender_digit: First digit of the personal code

    Returns:
        GenderCenturyInfo for digits 1-8

    Raises:
        InvalidGenderDigitError: For any digit outside 1-8

    Example:
        >>> determine_gender(3)
        GenderCenturyInfo(gender=<Gender.MALE: 'Male'>, century=1900)
    """
    try:
        return GENDER_DIGITS[gender_digit]
    except KeyError:
        raise InvalidGenderDigitError(gender_digit) from None


def encode_gender_digit(gender: Gender, year: int) -> int:
    """Encode sex and birth year into the leading digit.

    Raises:
        InvalidYearRangeError: If year is outside 1800-2199
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearRangeError(year)
    century_index = (year - MIN_YEAR) // 100
    return 2 * century_index + (1 if gender is Gender.MALE else 2)
