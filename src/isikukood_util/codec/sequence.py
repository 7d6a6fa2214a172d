"""Birth sequence allocation for generated codes.

Generated codes need a three-digit sequence. No registry of issued codes is
available, so the only allocator hands out a fixed value. Identical gender and
birth date inputs therefore always produce identical codes.
"""

from typing import Protocol

from isikukood_util.models.identification import Gender

# Sequence used by every generated code
DEFAULT_SEQUENCE = "001"


class SequenceAllocator(Protocol):
    """Supplies the three-digit birth sequence for a new code."""

    def allocate(self, gender: Gender, year: int, month: int, day: int) -> str:
        ...


class FixedSequenceAllocator:
    """Allocator that always returns the same sequence.

    Attributes:
        sequence: Three-digit sequence returned by every allocation

    Example:
        >>> FixedSequenceAllocator().allocate(Gender.MALE, 1976, 5, 3)
        '001'
    """

    def __init__(self, sequence: str = DEFAULT_SEQUENCE) -> None:
        if len(sequence) != 3 or not (sequence.isascii() and sequence.isdigit()):
            raise ValueError(
                f"Invalid sequence: {sequence!r}. Must be exactly 3 digits"
            )
        self.sequence = sequence

    def allocate(self, gender: Gender, year: int, month: int, day: int) -> str:
        return self.sequence
