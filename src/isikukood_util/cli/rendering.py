"""Human-readable rendering of decoded personal codes."""

from isikukood_util.codec.hospital import CENTRAL_ISSUE_YEAR
from isikukood_util.models.identification import ParsedIdentification


def describe_birth(parsed: ParsedIdentification) -> str:
    """Build the narrative sentence about birth date, hospital and birth order.

    Example:
        >>> from isikukood_util.codec import parse_identification
        >>> describe_birth(parse_identification("37605030299"))
        'The person was born on 03.05.1976. They were born in Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn) and was the 9 Male born'
    """
    gender = parsed.gender_info.gender.value
    born_on = (
        f"The person was born on {parsed.day_of_birth:02d}."
        f"{parsed.month_of_birth:02d}.{parsed.full_year}."
    )
    if parsed.full_year < CENTRAL_ISSUE_YEAR:
        hospital = parsed.hospital_or_birth_sequence
        return (
            f"{born_on} They were born in {hospital.name} and was the "
            f"{hospital.birth_order} {gender} born"
        )
    return f"{born_on} They were the {parsed.birth_sequence} {gender} born"


def render_identification_report(code: str, parsed: ParsedIdentification) -> str:
    """Render the full plain-text report for a decoded code.

    Args:
        code: The personal code as supplied
        parsed: Decoded record

    Returns:
        Multi-line report with checksum trace and birth narrative
    """
    checksum = parsed.checksum_validation
    lines = [
        f"Your government ID {code} Details:",
        "",
        "Checksum Validation:",
        f"- Valid: {'Yes' if checksum.is_valid else 'No'}",
        f"- Calculation: {checksum.calculation_steps}",
        f"- Expected Checksum: {checksum.calculated_checksum}",
        f"- Provided Checksum: {checksum.provided_checksum}",
        "",
        f"- {describe_birth(parsed)}",
    ]
    return "\n".join(lines)
