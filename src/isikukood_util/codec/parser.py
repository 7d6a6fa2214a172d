"""Personal code parsing.

Splits an 11-digit code into its fixed-width fields and resolves each one:

    position  0     1-2   3-4   5-6   7-9       10
              g     yy    mm    dd    sequence  control

Month and day are returned as found; calendar correctness is not checked.
"""

from isikukood_util.codec.checksum import CODE_LENGTH, validate_checksum
from isikukood_util.codec.gender import determine_gender
from isikukood_util.codec.hospital import determine_hospital_or_birth_sequence
from isikukood_util.models.identification import ParsedIdentification
from isikukood_util.utils.exceptions import ValidationError


def parse_identification(code: str) -> ParsedIdentification:
    """Decode every field of an 11-digit personal code.

    The checksum is recomputed independently with the two-stage rule; a
    mismatch is reported in ``checksum_validation`` rather than raised.

    Args:
        code: 11-digit personal code, already syntax-checked by the caller

    Returns:
        ParsedIdentification record

    Raises:
        InvalidGenderDigitError: If the leading digit is outside 1-8
        InvalidSequenceNumberError: If a pre-2013 sequence matches no hospital
        ValidationError: If code is not 11 ASCII digits

    Example:
        >>> parsed = parse_identification("37605030299")
        >>> parsed.full_year, parsed.hospital_or_birth_sequence.birth_order
        (1976, '9')
    """
    if len(code) != CODE_LENGTH or not (code.isascii() and code.isdigit()):
        raise ValidationError(f"ID must only contain {CODE_LENGTH} digits")

    gender_info = determine_gender(int(code[0]))
    year_of_birth = int(code[1:3])
    full_year = gender_info.century + year_of_birth
    birth_sequence = int(code[7:10])

    return ParsedIdentification(
        month_of_birth=int(code[3:5]),
        day_of_birth=int(code[5:7]),
        birth_sequence=birth_sequence,
        control_number=int(code[10]),
        gender_info=gender_info,
        full_year=full_year,
        hospital_or_birth_sequence=determine_hospital_or_birth_sequence(
            birth_sequence, full_year
        ),
        checksum_validation=validate_checksum(code),
    )
