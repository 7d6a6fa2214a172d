"""Personal code CLI commands.

This module provides the generate, parse and validate commands. Each command
performs the syntactic checks on raw input before calling the codec, and maps
codec errors to exit code 1.
"""

import json as json_lib
import sys
from contextlib import nullcontext
from typing import NoReturn, Optional

import click

from isikukood_util.cli.rendering import render_identification_report
from isikukood_util.codec.generator import GENERATION_FAILED_MESSAGE, generate_personal_code
from isikukood_util.codec.parser import parse_identification
from isikukood_util.codec.validator import (
    parse_birth_date,
    parse_gender,
    validate_code_syntax,
)
from isikukood_util.config import Config, generation_options
from isikukood_util.logging_audit import (
    get_operation_logger,
    log_audit_event,
    suppress_console_logging,
)
from isikukood_util.utils.exceptions import IsikukoodError, create_error_info

generate_logger = get_operation_logger("generate")
parse_logger = get_operation_logger("parse")


def _config(ctx: click.Context) -> Config:
    obj = ctx.find_object(dict) or {}
    return obj.get("config") or Config()


def _fail(error: IsikukoodError, event_type: str, code: Optional[str] = None) -> NoReturn:
    info = create_error_info(error, code=code)
    click.secho(f"Error [{info.kind}]: {info.message}", fg="red", err=True)
    click.echo(f"  → {info.remediation}", err=True)
    details = {"status": "failure", "error_kind": info.kind, "error_message": info.message}
    if code is not None:
        details["code"] = code
    log_audit_event(event_type, details)
    sys.exit(1)


@click.command("generate")
@click.option(
    "--gender",
    required=True,
    help="Sex of the person: MALE or FEMALE",
)
@click.option(
    "--birth-date",
    required=True,
    help="Date of birth in dd.mm.yyyy format",
)
@click.option(
    "--strict-year-range",
    is_flag=True,
    help="Reject birth years outside 1800-2199 before generating",
)
@click.option(
    "--two-stage-checksum",
    is_flag=True,
    help="Compute the control digit with the two-stage rule used for validation",
)
@click.pass_context
def generate_command(
    ctx: click.Context,
    gender: str,
    birth_date: str,
    strict_year_range: bool,
    two_stage_checksum: bool,
) -> None:
    """Generate a personal code for a gender and birth date.

    Generated codes always use birth sequence 001 (configurable), so the same
    gender and birth date always yield the same code.

    Examples:

        # Generate a code for a man born on 3 May 1976
        isikukood generate --gender MALE --birth-date 03.05.1976

        # Use the two-stage checksum rule
        isikukood generate --gender FEMALE --birth-date 01.01.2000 --two-stage-checksum
    """
    generator_config = _config(ctx).generator
    updates = {}
    if strict_year_range:
        updates["strict_year_range"] = True
    if two_stage_checksum:
        updates["checksum_strategy"] = "two_stage"
    options = generation_options(generator_config.model_copy(update=updates))

    try:
        parsed_gender = parse_gender(gender)
        parsed_date = parse_birth_date(birth_date)
        code = generate_personal_code(parsed_gender, parsed_date, **options)
    except IsikukoodError as e:
        generate_logger.error(f"Generation failed: {e}")
        _fail(e, "CODE_GENERATED")

    if code == GENERATION_FAILED_MESSAGE:
        click.secho(code, fg="red", err=True)
        log_audit_event("CODE_GENERATED", {"status": "failure", "error_message": code})
        sys.exit(1)

    generate_logger.debug(
        f"Generated code with strategy={options['strategy'].value} "
        f"year_guard={options['year_guard'].value}"
    )
    log_audit_event("CODE_GENERATED", {"status": "success", "code": code})
    click.echo(f"Generated personal code: {code}")


@click.command("parse")
@click.argument("code")
@click.option("--json", "json_output", is_flag=True, help="Output result as JSON")
def parse_command(code: str, json_output: bool) -> None:
    """Decode a personal code and explain its checksum.

    Examples:

        isikukood parse 37605030299

        isikukood parse 37605030299 --json
    """
    quiet = suppress_console_logging() if json_output else nullcontext()
    with quiet:
        try:
            code = validate_code_syntax(code)
            parsed = parse_identification(code)
        except IsikukoodError as e:
            parse_logger.error(f"Parsing failed: {e}")
            _fail(e, "CODE_PARSED", code)

        log_audit_event(
            "CODE_PARSED",
            {
                "status": "success",
                "code": code,
                "checksum_valid": parsed.checksum_validation.is_valid,
            },
        )

        if json_output:
            output = {"code": code, **parsed.to_dict()}
            click.echo(json_lib.dumps(output, indent=2, ensure_ascii=False))
        else:
            click.echo(render_identification_report(code, parsed))


@click.command("validate")
@click.argument("code")
def validate_command(code: str) -> None:
    """Check the control digit of a personal code.

    Exits with code 0 when the checksum is valid, 1 otherwise.

    Example:

        isikukood validate 37605030299
    """
    try:
        code = validate_code_syntax(code)
        parsed = parse_identification(code)
    except IsikukoodError as e:
        parse_logger.error(f"Validation failed: {e}")
        _fail(e, "CODE_VALIDATED", code)

    checksum = parsed.checksum_validation
    click.echo(checksum.calculation_steps)
    click.echo()

    if checksum.is_valid:
        click.secho(f"✓ {code} has a valid checksum", fg="green")
        log_audit_event("CODE_VALIDATED", {"status": "success", "code": code})
        sys.exit(0)

    click.secho(
        f"✗ {code} has an invalid checksum: expected "
        f"{checksum.calculated_checksum}, found {checksum.provided_checksum}",
        fg="red",
    )
    log_audit_event(
        "CODE_VALIDATED",
        {"status": "failure", "code": code, "error_kind": "ChecksumMismatch"},
    )
    sys.exit(1)
