"""Syntactic validation of raw caller input.

Callers (CLI commands, batch decoder) run these checks before handing input to
the codec, so the codec only ever sees well-formed codes, gender values and
dates.
"""

import re
from datetime import date

from isikukood_util.codec.checksum import CODE_LENGTH
from isikukood_util.models.identification import Gender
from isikukood_util.utils.exceptions import ValidationError

BIRTH_DATE_PATTERN = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$")
CODE_PATTERN = re.compile(r"^[0-9]{11}$")


def validate_code_syntax(code: str) -> str:
    """Check that a personal code is exactly 11 ASCII digits.

    Surrounding whitespace is stripped before checking.

    Args:
        code: Raw personal code input

    Returns:
        The stripped code

    Raises:
        ValidationError: If the length or charset is wrong
    """
    code = code.strip()
    if len(code) != CODE_LENGTH:
        raise ValidationError(f"ID must be exactly {CODE_LENGTH} characters")
    if not CODE_PATTERN.match(code):
        raise ValidationError(f"ID must only contain {CODE_LENGTH} digits")
    return code


def parse_gender(value: str) -> Gender:
    """Parse a MALE/FEMALE keyword (case-insensitive).

    Raises:
        ValidationError: If the keyword is not recognised
    """
    try:
        return Gender.from_keyword(value)
    except ValueError:
        raise ValidationError("Invalid gender. Must be MALE or FEMALE") from None


def parse_birth_date(value: str) -> date:
    """Parse a birth date in dd.mm.yyyy format.

    Args:
        value: Date string such as "03.05.1976"

    Returns:
        Parsed date

    Raises:
        ValidationError: If the format is wrong or the date does not exist
    """
    match = BIRTH_DATE_PATTERN.match(value.strip())
    if not match:
        raise ValidationError("Invalid birth date format. Must be dd.mm.yyyy")

    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValidationError(f"Invalid birth date: {value}") from e
