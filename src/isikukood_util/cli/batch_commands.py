"""CSV batch CLI command for decoding many personal codes at once."""

import json as json_lib
import logging
import sys
import time
from contextlib import nullcontext
from pathlib import Path
from typing import Optional

import click

from isikukood_util.batch.decoder import (
    decode_codes_csv,
    export_invalid_rows,
    summarize_genders,
)
from isikukood_util.config import Config
from isikukood_util.logging_audit import log_audit_event, suppress_console_logging
from isikukood_util.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


@click.command("batch")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--code-column",
    default=None,
    help="CSV column holding personal codes (default from config: code)",
)
@click.option(
    "--export-errors",
    type=click.Path(path_type=Path),
    help="Export rows that failed to decode to a CSV file",
)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def batch_command(
    ctx: click.Context,
    file: Path,
    code_column: Optional[str],
    export_errors: Optional[Path],
    json_output: bool,
) -> None:
    """Decode every personal code in a CSV file.

    Checks syntax, decodes each code and verifies its checksum, collecting all
    problems before reporting. Exits with code 0 when every code decodes with
    a valid checksum (warnings are OK), code 1 otherwise.

    Examples:

        # Decode codes from the "code" column
        isikukood batch codes.csv

        # Use a different column and export failing rows
        isikukood batch people.csv --code-column isikukood --export-errors bad.csv

        # JSON output for automation
        isikukood batch codes.csv --json
    """
    obj = ctx.find_object(dict) or {}
    batch_config = (obj.get("config") or Config()).batch
    column = code_column or batch_config.code_column

    start = time.time()
    quiet = suppress_console_logging() if json_output else nullcontext()
    with quiet:
        _run_batch(file, column, export_errors, json_output, batch_config.max_report_issues, start)


def _run_batch(
    file: Path,
    column: str,
    export_errors: Optional[Path],
    json_output: bool,
    max_report_issues: int,
    start: float,
) -> None:
    try:
        logger.info(f"Decoding personal codes from {file}")
        df, result = decode_codes_csv(file, code_column=column)

        if json_output:
            click.echo(json_lib.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        else:
            report = result.format_report(max_issues=max_report_issues)
            if result.has_errors:
                click.secho(report, fg="red", err=True)
            elif result.has_warnings:
                click.secho(report, fg="yellow")
            else:
                click.secho(report, fg="green")

            genders = summarize_genders(df)
            if genders is not None:
                click.echo("\nDecoded by gender:")
                for gender, count in genders.items():
                    click.echo(f"  {gender}: {count}")

        log_audit_event(
            "BATCH_DECODED",
            {
                "status": "failure" if result.has_errors else "success",
                "input_file": str(file),
                "record_count": result.total_rows,
                "error_count": len(result.all_errors),
                "duration": time.time() - start,
            },
        )

        if result.has_errors:
            if export_errors:
                export_invalid_rows(df, result, export_errors)
                if not json_output:
                    click.echo(f"\nInvalid rows exported to: {export_errors}")
            sys.exit(1)

        sys.exit(0)

    except ValidationError as e:
        click.secho(f"Validation Error: {e}", fg="red", err=True)
        logger.error(f"Validation error: {e}")
        sys.exit(1)
    except FileNotFoundError as e:
        click.secho(f"File not found: {e}", fg="red", err=True)
        logger.error(f"File not found: {e}")
        sys.exit(1)
