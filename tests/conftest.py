"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest

import isikukood_util.logging_audit.logger as logger_module
from isikukood_util.logging_audit import PIIRedactingFormatter


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """
    Run every test in a scratch directory with clean logging state.

    Removes ISIKUKOOD_* environment variables, changes into tmp_path so that
    default config and log paths never touch the working tree, and removes
    the handlers installed by configure_logging afterwards.
    """
    for name in [key for key in os.environ if key.startswith("ISIKUKOOD_")]:
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    saved_level = root_logger.level
    monkeypatch.setattr(logger_module, "_logging_configured", False)

    yield

    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, PIIRedactingFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)
    for logger_name in logger_module.OPERATION_LOGGERS.values():
        logging.getLogger(logger_name).setLevel(logging.NOTSET)


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def src_dir(project_root: Path) -> Path:
    """
    Return the src directory path.

    Args:
        project_root: Project root directory fixture.

    Returns:
        Path: Absolute path to the src directory.
    """
    return project_root / "src"


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Create a temporary configuration file for testing.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Yields:
        Path: Path to the temporary configuration file.
    """
    config_file = tmp_path / "test_config.json"
    config_file.write_text(
        '{"generator": {"sequence": "002", "checksum_strategy": "two_stage"}, '
        '"logging": {"level": "WARNING", "log_file": "logs/test.log"}}'
    )
    yield config_file


@pytest.fixture
def sample_codes_csv(tmp_path: Path) -> Path:
    """
    Create a CSV file with a mix of valid and broken personal codes.

    Rows (row numbers include the header):
        2: 37605030299 valid, Tallinn hospital
        3: 60001010018 valid, Kuressaare hospital
        4: 51507200014 valid, centrally issued sequence
        5: 37605160010 wrong control digit (expected 2)
        6: 97605030299 invalid gender digit
        7: 1234 too short

    Returns:
        Path: Path to the CSV file.
    """
    csv_file = tmp_path / "codes.csv"
    csv_file.write_text(
        "name,code\n"
        "Mart,37605030299\n"
        "Liis,60001010018\n"
        "Karl,51507200014\n"
        "Jaan,37605160010\n"
        "Kati,97605030299\n"
        "Peep,1234\n",
        encoding="utf-8",
    )
    return csv_file


@pytest.fixture
def valid_codes_csv(tmp_path: Path) -> Path:
    """
    Create a CSV file where every code decodes with a valid checksum.

    Returns:
        Path: Path to the CSV file.
    """
    csv_file = tmp_path / "valid_codes.csv"
    csv_file.write_text(
        "code\n37605030299\n60001010018\n51507200014\n",
        encoding="utf-8",
    )
    return csv_file
