"""Modulo-11 control digit calculation for personal codes.

Two procedures are kept side by side:

- TWO_STAGE_MODULO_11: the issuing authority's rule. Weights W1 are applied
  first; when the remainder is 10 the sum is recomputed with weights W2, and a
  second remainder of 10 collapses to 0. Used whenever an existing code is
  validated.
- SINGLE_STAGE_MODULO_11: only the W1 pass, with a remainder of 10 collapsing
  straight to 0. Historically used when minting codes. For bodies whose W1
  remainder is 10 it yields a different digit than the two-stage rule, so the
  two are never merged implicitly.
"""

from enum import Enum

from isikukood_util.models.identification import ChecksumValidation
from isikukood_util.utils.exceptions import ValidationError

WEIGHT_1: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
WEIGHT_2: tuple[int, ...] = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

BODY_LENGTH = 10
CODE_LENGTH = 11


class ChecksumStrategy(Enum):
    """Named control digit procedures."""

    TWO_STAGE_MODULO_11 = "two_stage"
    SINGLE_STAGE_MODULO_11 = "single_stage"


def _digits(value: str, length: int) -> list[int]:
    prefix = value[:length]
    if len(prefix) < length or not (prefix.isascii() and prefix.isdigit()):
        raise ValidationError(
            f"Expected at least {length} ASCII digits, got: {value!r}"
        )
    return [int(ch) for ch in prefix]


def _weighted_sum(digits: list[int], weights: tuple[int, ...]) -> int:
    return sum(d * w for d, w in zip(digits, weights))


def calculate_checksum(
    body: str,
    strategy: ChecksumStrategy = ChecksumStrategy.TWO_STAGE_MODULO_11,
) -> int:
    """Calculate the control digit for a 10-digit body.

    Args:
        body: First 10 digits of a personal code. Extra characters are ignored.
        strategy: Which modulo-11 procedure to apply

    Returns:
        Control digit 0-9

    Raises:
        ValidationError: If body does not start with 10 digits

    Example:
        >>> calculate_checksum("3760503029")
        9
        >>> calculate_checksum("3760516001", ChecksumStrategy.SINGLE_STAGE_MODULO_11)
        0
        >>> calculate_checksum("3760516001", ChecksumStrategy.TWO_STAGE_MODULO_11)
        2
    """
    digits = _digits(body, BODY_LENGTH)

    remainder = _weighted_sum(digits, WEIGHT_1) % 11
    if remainder < 10:
        return remainder

    if strategy is ChecksumStrategy.SINGLE_STAGE_MODULO_11:
        return 0

    remainder = _weighted_sum(digits, WEIGHT_2) % 11
    return remainder if remainder < 10 else 0


def _describe_pass(digits: list[int], weights: tuple[int, ...]) -> tuple[int, str]:
    total = _weighted_sum(digits, weights)
    terms = " + ".join(f"{w}×{d}" for d, w in zip(digits, weights))
    remainder = total % 11
    return remainder, f"{terms} = {total}.\n{total} ÷ 11 = {total // 11} remainder {remainder}.\n"


def validate_checksum(code: str) -> ChecksumValidation:
    """Recompute the control digit of a code with the two-stage rule.

    The returned trace narrates each weighted product, the sum and the modulo
    step. The second pass is only narrated when the first remainder is 10.

    Args:
        code: 11-digit personal code

    Returns:
        ChecksumValidation with the calculated and provided digits

    Raises:
        ValidationError: If code does not start with 11 digits
    """
    digits = _digits(code, CODE_LENGTH)
    provided = digits[10]
    body = digits[:BODY_LENGTH]

    remainder1, steps1 = _describe_pass(body, WEIGHT_1)
    steps = "First calculation with weight 1:\n" + steps1

    if remainder1 < 10:
        steps += f"Therefore, checksum should be {remainder1}."
        return ChecksumValidation(
            is_valid=remainder1 == provided,
            calculated_checksum=remainder1,
            provided_checksum=provided,
            calculation_steps=steps,
        )

    remainder2, steps2 = _describe_pass(body, WEIGHT_2)
    steps += "Since remainder is 10, trying second calculation with weight 2:\n" + steps2

    if remainder2 < 10:
        calculated = remainder2
        steps += f"Therefore, final checksum should be {remainder2}."
    else:
        calculated = 0
        steps += "Since remainder is again 10, final checksum should be 0."

    return ChecksumValidation(
        is_valid=calculated == provided,
        calculated_checksum=calculated,
        provided_checksum=provided,
        calculation_steps=steps,
    )
