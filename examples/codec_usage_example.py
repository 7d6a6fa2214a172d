"""Programmatic use of the personal code codec.

This module demonstrates generating, decoding and validating personal codes
from Python code, and how the two checksum strategies differ.
"""

import logging
from datetime import date
from pathlib import Path

from isikukood_util.batch import decode_codes_csv
from isikukood_util.codec import (
    ChecksumStrategy,
    FixedSequenceAllocator,
    generate_personal_code,
    parse_identification,
)
from isikukood_util.models import Gender
from isikukood_util.utils.exceptions import CodecError, create_error_info

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def example_1_generate_and_parse():
    """Example 1: Generate a code and decode it again."""
    print("=" * 80)
    print("EXAMPLE 1: Generate and Parse")
    print("=" * 80)

    code = generate_personal_code(Gender.MALE, date(1976, 5, 3))
    parsed = parse_identification(code)

    print(f"Generated: {code}")
    print(f"  Gender:   {parsed.gender_info.gender.value}")
    print(f"  Born:     {parsed.birth_date}")
    print(f"  Hospital: {parsed.hospital_or_birth_sequence.name}")
    print(f"  Order:    {parsed.hospital_or_birth_sequence.birth_order}")
    print()


def example_2_checksum_strategies():
    """Example 2: Single-stage vs two-stage control digits.

    For bodies whose first weighted remainder is 10 the generator's default
    rule produces a code the validator rejects.
    """
    print("=" * 80)
    print("EXAMPLE 2: Checksum Strategies")
    print("=" * 80)

    for strategy in ChecksumStrategy:
        code = generate_personal_code(Gender.MALE, date(1976, 5, 16), strategy=strategy)
        valid = parse_identification(code).checksum_validation.is_valid
        print(f"  {strategy.value:<13} {code}  valid={valid}")
    print()


def example_3_custom_sequence():
    """Example 3: Choose the birth sequence with an allocator."""
    print("=" * 80)
    print("EXAMPLE 3: Custom Sequence")
    print("=" * 80)

    allocator = FixedSequenceAllocator("029")
    code = generate_personal_code(Gender.MALE, date(1976, 5, 3), allocator=allocator)
    print(parse_identification(code).checksum_validation.calculation_steps)
    print()


def example_4_error_handling():
    """Example 4: Map codec failures to error kinds."""
    print("=" * 80)
    print("EXAMPLE 4: Error Handling")
    print("=" * 80)

    for code in ("97605030299", "37605030209"):
        try:
            parse_identification(code)
        except CodecError as e:
            info = create_error_info(e, code=code)
            print(f"  {code}: [{info.kind}] {info.message}")
            print(f"    → {info.remediation}")
    print()


def example_5_batch():
    """Example 5: Decode a CSV file."""
    print("=" * 80)
    print("EXAMPLE 5: Batch Decoding")
    print("=" * 80)

    df, result = decode_codes_csv(Path("examples/codes_sample.csv"))
    print(result.format_report())
    columns = ["code", "decoded_gender", "decoded_birth_date", "decoded_checksum_valid"]
    print(df[columns].to_string(index=False))


if __name__ == "__main__":
    example_1_generate_and_parse()
    example_2_checksum_strategies()
    example_3_custom_sequence()
    example_4_error_handling()
    example_5_batch()
