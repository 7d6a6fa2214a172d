"""CSV batch decoding of personal codes.

Reads a CSV file with a column of personal codes, runs the caller-side syntax
checks and the codec on every row, and collects all issues before reporting so
a whole file can be fixed in one pass.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from isikukood_util.codec.parser import parse_identification
from isikukood_util.codec.validator import validate_code_syntax
from isikukood_util.logging_audit import get_operation_logger
from isikukood_util.utils.exceptions import (
    CodecError,
    ValidationError,
    create_error_info,
)

logger = get_operation_logger("batch")

# Columns appended to the decoded DataFrame, prefixed so input columns survive
DECODED_COLUMNS = [
    "decoded_gender",
    "decoded_birth_date",
    "decoded_full_year",
    "decoded_hospital",
    "decoded_birth_order",
    "decoded_checksum_valid",
    "decoded_calculated_checksum",
]


class IssueSeverity(Enum):
    """Severity level for decoding issues."""

    ERROR = "error"
    WARNING = "warning"


@dataclass
class DecodingIssue:
    """Individual decoding issue with context and suggested fix.

    Attributes:
        row_number: 1-indexed row number (including header) for user readability
        code: The personal code as found in the file
        kind: Error kind (e.g., "InvalidGenderDigit", "ChecksumMismatch")
        severity: ERROR or WARNING level
        message: Description of what's wrong
        suggestion: Actionable guidance on how to fix the issue
    """

    row_number: int
    code: str
    kind: str
    severity: IssueSeverity
    message: str
    suggestion: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "row_number": self.row_number,
            "code": self.code,
            "kind": self.kind,
            "severity": self.severity.value,
            "message": self.message,
            "suggestion": self.suggestion,
        }


@dataclass
class BatchResult:
    """Batch decoding results with statistics and issues.

    Attributes:
        total_rows: Total number of data rows processed
        valid_rows: Number of rows with no errors (warnings OK)
        error_rows: Number of rows with at least one error
        warning_rows: Number of rows with at least one warning
        duplicate_codes: Codes that appear on more than one row
        all_errors: List of all error-level issues
        all_warnings: List of all warning-level issues
    """

    total_rows: int
    valid_rows: int
    error_rows: int
    warning_rows: int
    duplicate_codes: list[str] = field(default_factory=list)
    all_errors: list[DecodingIssue] = field(default_factory=list)
    all_warnings: list[DecodingIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.all_errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.all_warnings) > 0

    def format_report(self, max_issues: int = 20) -> str:
        """Format batch results as human-readable report.

        Args:
            max_issues: Maximum issues listed per section

        Returns:
            Multi-line string with summary and detailed issues
        """
        lines = []
        lines.append("=" * 60)
        lines.append("PERSONAL CODE BATCH REPORT")
        lines.append("=" * 60)
        lines.append("")

        lines.append("SUMMARY:")
        lines.append(f"  Total rows: {self.total_rows}")
        lines.append(f"  Valid rows: {self.valid_rows}")
        lines.append(f"  Rows with errors: {self.error_rows}")
        lines.append(f"  Rows with warnings: {self.warning_rows}")
        lines.append("")

        if self.duplicate_codes:
            lines.append(
                f"DUPLICATE CODES: {len(self.duplicate_codes)} "
                f"({', '.join(self.duplicate_codes[:5])}"
                f"{'...' if len(self.duplicate_codes) > 5 else ''})"
            )
            lines.append("")

        for title, issues in (("ERRORS", self.all_errors), ("WARNINGS", self.all_warnings)):
            if not issues:
                continue
            lines.append(f"{title} ({len(issues)}):")
            for issue in issues[:max_issues]:
                lines.append(
                    f"  Row {issue.row_number} [{issue.kind}] {issue.code}: {issue.message}"
                )
                lines.append(f"    → {issue.suggestion}")
            if len(issues) > max_issues:
                lines.append(f"  ... and {len(issues) - max_issues} more {title.lower()}")
            lines.append("")

        lines.append("=" * 60)
        if not self.has_errors and not self.has_warnings:
            lines.append("RESULT: ✓ All codes decoded")
        elif not self.has_errors:
            lines.append("RESULT: ✓ All codes decoded with warnings")
        else:
            lines.append("RESULT: ✗ Some codes could not be decoded or failed checksum")
        lines.append("=" * 60)

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Export batch results as structured dictionary for JSON serialization."""
        return {
            "total_rows": self.total_rows,
            "valid_rows": self.valid_rows,
            "error_rows": self.error_rows,
            "warning_rows": self.warning_rows,
            "duplicate_codes": self.duplicate_codes,
            "errors": [e.to_dict() for e in self.all_errors],
            "warnings": [w.to_dict() for w in self.all_warnings],
        }


def decode_codes_csv(
    file_path: Path, code_column: str = "code"
) -> tuple[pd.DataFrame, BatchResult]:
    """Decode every personal code in a CSV file.

    Args:
        file_path: Path to CSV file
        code_column: Name of the column holding personal codes

    Returns:
        Tuple of (DataFrame, BatchResult):
        - The input rows with DECODED_COLUMNS appended. Columns stay empty for
          rows that could not be decoded.
        - BatchResult with every issue found

    Raises:
        FileNotFoundError: If CSV file does not exist
        ValidationError: If the file cannot be read, has no data rows, lacks the
            code column or already holds a decoded column
    """
    logger.info(f"Loading CSV from {file_path}")

    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    try:
        df = pd.read_csv(file_path, encoding="utf-8", dtype=str, keep_default_na=False)
    except Exception as e:
        raise ValidationError(
            f"Failed to read CSV file {file_path}. Ensure file is valid CSV with "
            f"UTF-8 encoding. Error: {e}"
        ) from e

    if code_column not in df.columns:
        raise ValidationError(
            f"Missing required column: {code_column}. "
            f"Found columns: {', '.join(df.columns)}"
        )

    if df.empty:
        raise ValidationError(f"CSV file {file_path} has no data rows - no codes to decode")

    result = decode_codes(df, code_column)
    return df, result


def decode_codes(df: pd.DataFrame, code_column: str = "code") -> BatchResult:
    """Decode the personal codes of a DataFrame in place.

    Appends DECODED_COLUMNS to *df* and collects all issues (not fail-fast).
    Row numbers in issues count data rows from 2 (the header is row 1),
    whatever the DataFrame index is.

    Args:
        df: DataFrame containing a column of personal codes
        code_column: Name of the column holding personal codes

    Returns:
        BatchResult containing all errors, warnings, and statistics

    Raises:
        ValueError: If DataFrame is empty
        ValidationError: If df already has a column named like a decoded one
    """
    if df.empty:
        raise ValueError("DataFrame is empty - no codes to decode")

    clashing = [c for c in DECODED_COLUMNS if c in df.columns]
    if clashing:
        raise ValidationError(
            f"Input already has decoded column(s): {', '.join(clashing)}. "
            f"Rename them before decoding"
        )

    errors: list[DecodingIssue] = []
    warnings: list[DecodingIssue] = []

    decoded: dict[str, list[Any]] = {column: [None] * len(df) for column in DECODED_COLUMNS}

    for pos, raw_code in enumerate(df[code_column]):
        row_num = pos + 2  # +2 for 1-indexed + header row
        raw_code = str(raw_code)

        try:
            code = validate_code_syntax(raw_code)
            parsed = parse_identification(code)
        except (ValidationError, CodecError) as e:
            info = create_error_info(e, code=raw_code)
            errors.append(
                DecodingIssue(
                    row_number=row_num,
                    code=raw_code,
                    kind=info.kind,
                    severity=IssueSeverity.ERROR,
                    message=info.message,
                    suggestion=info.remediation,
                )
            )
            continue

        checksum = parsed.checksum_validation
        birth_date = parsed.birth_date
        decoded["decoded_gender"][pos] = parsed.gender_info.gender.value
        decoded["decoded_birth_date"][pos] = birth_date.isoformat() if birth_date else None
        decoded["decoded_full_year"][pos] = parsed.full_year
        decoded["decoded_hospital"][pos] = parsed.hospital_or_birth_sequence.name
        decoded["decoded_birth_order"][pos] = parsed.hospital_or_birth_sequence.birth_order
        decoded["decoded_checksum_valid"][pos] = checksum.is_valid
        decoded["decoded_calculated_checksum"][pos] = checksum.calculated_checksum

        if not checksum.is_valid:
            errors.append(
                DecodingIssue(
                    row_number=row_num,
                    code=code,
                    kind="ChecksumMismatch",
                    severity=IssueSeverity.ERROR,
                    message=(
                        f"Checksum mismatch: expected {checksum.calculated_checksum}, "
                        f"found {checksum.provided_checksum}"
                    ),
                    suggestion="Check the code for mistyped digits",
                )
            )

        if birth_date is None:
            warnings.append(
                DecodingIssue(
                    row_number=row_num,
                    code=code,
                    kind="InvalidBirthDate",
                    severity=IssueSeverity.WARNING,
                    message=(
                        f"Embedded date {parsed.day_of_birth:02d}."
                        f"{parsed.month_of_birth:02d}.{parsed.full_year} is not a calendar date"
                    ),
                    suggestion="Verify digits 4-7 of the code",
                )
            )

    for column, values in decoded.items():
        df[column] = pd.Series(values, index=df.index, dtype="object")

    codes = df[code_column].astype(str).str.strip()
    non_blank = codes[codes != ""]
    duplicate_codes = non_blank[non_blank.duplicated(keep=False)].unique().tolist()
    for dup_code in duplicate_codes:
        for pos in (codes == dup_code).to_numpy().nonzero()[0]:
            warnings.append(
                DecodingIssue(
                    row_number=int(pos) + 2,
                    code=dup_code,
                    kind="DuplicateCode",
                    severity=IssueSeverity.WARNING,
                    message=f"Duplicate code found: {dup_code}",
                    suggestion="Verify this is intentional",
                )
            )

    error_rows = len({e.row_number for e in errors})
    warning_rows = len({w.row_number for w in warnings})

    result = BatchResult(
        total_rows=len(df),
        valid_rows=len(df) - error_rows,
        error_rows=error_rows,
        warning_rows=warning_rows,
        duplicate_codes=duplicate_codes,
        all_errors=errors,
        all_warnings=warnings,
    )

    logger.info(
        f"Batch decoding complete: {len(df)} rows, {len(errors)} errors, "
        f"{len(warnings)} warnings"
    )
    return result


def export_invalid_rows(
    df: pd.DataFrame, result: BatchResult, output_path: Path
) -> None:
    """Export rows with decoding errors to separate CSV file.

    Args:
        df: Decoded DataFrame
        result: BatchResult containing error information
        output_path: Path where error CSV should be written

    Raises:
        ValueError: If no errors exist in BatchResult
        FileNotFoundError: If output_path parent directory doesn't exist
    """
    logger.info(f"Exporting invalid rows to {output_path}")

    if not result.has_errors:
        raise ValueError("No decoding errors to export")

    if not output_path.parent.exists():
        raise FileNotFoundError(
            f"Output directory does not exist: {output_path.parent}"
        )

    error_row_numbers = sorted({e.row_number for e in result.all_errors})
    error_df = df.iloc[[r - 2 for r in error_row_numbers]].copy()
    error_df["error_description"] = [
        "; ".join(
            f"{e.kind}: {e.message}" for e in result.all_errors if e.row_number == row_num
        )
        for row_num in error_row_numbers
    ]

    error_df.to_csv(output_path, index=False, encoding="utf-8")
    logger.info(f"Exported {len(error_df)} invalid rows to {output_path}")


def summarize_genders(df: pd.DataFrame) -> Optional[pd.Series]:
    """Count decoded rows per gender, or None when nothing was decoded."""
    decoded = df["decoded_gender"].dropna()
    if decoded.empty:
        return None
    return decoded.value_counts()
