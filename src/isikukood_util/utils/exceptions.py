"""Custom exception classes for the isikukood utility.

All exceptions inherit from IsikukoodError to allow catching all custom exceptions.
Codec failures carry a stable ``kind`` string so callers can map them to
client-facing responses without inspecting message text.
"""

from dataclasses import dataclass
from typing import Optional


class IsikukoodError(Exception):
    """Base exception for all isikukood utility custom exceptions."""

    kind: str = "IsikukoodError"


class ValidationError(IsikukoodError):
    """Raised when caller-side syntactic validation fails.

    Examples:
        - Code is not exactly 11 characters
        - Code contains non-digit characters
        - Gender keyword is not MALE or FEMALE
        - Birth date is not in dd.mm.yyyy format
    """

    kind = "ValidationError"


class ConfigurationError(IsikukoodError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Configuration value out of range
    """

    kind = "ConfigurationError"


class CodecError(IsikukoodError):
    """Base exception for failures inside the personal code codec.

    Codec errors are pure logic failures. They are never retryable.
    """

    kind = "CodecError"


class InvalidGenderDigitError(CodecError):
    """Raised when the leading digit of a code is outside 1-8.

    Attributes:
        digit: The offending leading digit
    """

    kind = "InvalidGenderDigit"

    def __init__(self, digit: int) -> None:
        super().__init__(f"Invalid gender digit: {digit}. Must be between 1 and 8")
        self.digit = digit


class InvalidSequenceNumberError(CodecError):
    """Raised when a pre-2013 birth sequence falls outside every hospital range.

    Attributes:
        sequence: The offending sequence number
    """

    kind = "InvalidSequenceNumber"

    def __init__(self, sequence: int) -> None:
        super().__init__(f"Invalid birth sequence number: {sequence:03d}")
        self.sequence = sequence


class InvalidYearRangeError(CodecError):
    """Raised when a code is requested for a year outside 1800-2199.

    Attributes:
        year: The offending birth year
    """

    kind = "InvalidYearRange"

    def __init__(self, year: int) -> None:
        super().__init__(
            f"Birth year {year} is outside the supported range 1800-2199"
        )
        self.year = year


@dataclass
class ErrorInfo:
    """Structured error information for actionable error reporting.

    Attributes:
        kind: Stable error kind (e.g., "InvalidGenderDigit")
        error_type: Exception class name
        message: User-friendly error message
        remediation: Actionable guidance for resolving the error
        code: Optional personal code the error relates to

    Example:
        >>> info = create_error_info(InvalidGenderDigitError(9), code="97605030299")
        >>> info.kind
        'InvalidGenderDigit'
    """

    kind: str
    error_type: str
    message: str
    remediation: str
    code: Optional[str] = None


def create_error_info(exception: Exception, code: Optional[str] = None) -> ErrorInfo:
    """Create structured error information from exception.

    Args:
        exception: Exception that occurred
        code: Optional personal code being processed when the error occurred

    Returns:
        ErrorInfo with kind and remediation guidance
    """
    kind = getattr(exception, "kind", type(exception).__name__)
    return ErrorInfo(
        kind=kind,
        error_type=type(exception).__name__,
        message=str(exception),
        remediation=_generate_remediation(exception),
        code=code,
    )


def _generate_remediation(exception: Exception) -> str:
    """Generate actionable remediation message for an error.

    Args:
        exception: Exception that occurred

    Returns:
        Actionable remediation message
    """
    if isinstance(exception, InvalidGenderDigitError):
        return (
            "The first digit encodes sex and century of birth and must be 1-8. "
            "Check that the code was copied correctly."
        )

    if isinstance(exception, InvalidSequenceNumberError):
        return (
            "Codes issued before 2013 use sequence numbers 001-700 (020 is unused). "
            "Check digits 8-10 of the code."
        )

    if isinstance(exception, InvalidYearRangeError):
        return "Personal codes can only be generated for birth years 1800-2199."

    if isinstance(exception, ValidationError):
        return (
            "Codes must be exactly 11 digits. Gender must be MALE or FEMALE and "
            "birth dates must use dd.mm.yyyy format."
        )

    if isinstance(exception, ConfigurationError):
        return (
            "Configuration error. Check config.json for missing or invalid values. "
            "Use examples/config.example.json as template."
        )

    return "Review the error message and check the log file for complete details."
