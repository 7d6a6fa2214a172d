"""Main CLI entry point for the isikukood utility.

This module provides the main Click command group for the isikukood CLI.
"""

from pathlib import Path
from typing import Optional

import click

from isikukood_util import __version__
from isikukood_util.cli.batch_commands import batch_command
from isikukood_util.cli.id_commands import generate_command, parse_command, validate_command
from isikukood_util.config import load_config
from isikukood_util.logging_audit import (
    configure_logging,
    configure_operation_logging,
)
from isikukood_util.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="isikukood")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Redact personal codes and birth dates from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """Isikukood Utility - Estonian personal identification code tool.

    Generates, decodes and validates 11-digit personal codes, including the
    modulo-11 checksum trace and the maternity hospital encoded in codes
    issued before 2013.

    Common usage:

        # Decode a personal code
        isikukood parse 37605030299

        # Generate a code
        isikukood generate --gender MALE --birth-date 03.05.1976

        # Decode a CSV file of codes
        isikukood batch codes.csv

    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["verbose"] = verbose
    ctx.obj["redact_pii"] = redact_pii
    ctx.obj["log_file"] = log_file

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_pii_setting = redact_pii if redact_pii else config_obj.logging.redact_pii

    configure_logging(
        level=log_level, log_file=log_file_path, redact_pii=redact_pii_setting
    )
    if not verbose:
        configure_operation_logging(config_obj.operation_logging)


cli.add_command(generate_command)
cli.add_command(parse_command)
cli.add_command(validate_command)
cli.add_command(batch_command)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.

    Example:
        isikukood config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)

        click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
        click.echo(f"\nConfiguration file: {config_file}")
        click.echo("\nGenerator:")
        click.echo(f"  Sequence:           {config_obj.generator.sequence}")
        click.echo(f"  Checksum strategy:  {config_obj.generator.checksum_strategy}")
        click.echo(f"  Strict year range:  {config_obj.generator.strict_year_range}")

        click.echo("\nBatch:")
        click.echo(f"  Code column:        {config_obj.batch.code_column}")

        click.echo("\nLogging:")
        click.echo(f"  Level:       {config_obj.logging.level}")
        click.echo(f"  Log file:    {config_obj.logging.log_file}")
        click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")

    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)


cli.add_command(config)


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"isikukood version {__version__}")


if __name__ == "__main__":
    cli()
