"""Integration tests for end-to-end CLI workflows.

Each test drives the real command group through CliRunner with a config file
on disk, exercising config loading, logging and the codec together.
"""

import json
import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from isikukood_util.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _generated_code(output: str) -> str:
    match = re.search(r"Generated personal code: (\d{11})", output)
    assert match, output
    return match.group(1)


class TestGenerateThenDecode:
    """Generate a code and feed it back through parse and validate."""

    def test_two_stage_generation_validates(self, runner: CliRunner):
        """Test codes generated with the two-stage rule always validate."""
        # Act
        generated = runner.invoke(
            cli,
            ["generate", "--gender", "MALE", "--birth-date", "16.05.1976", "--two-stage-checksum"],
        )
        code = _generated_code(generated.output)
        validated = runner.invoke(cli, ["validate", code])

        # Assert
        assert code == "37605160012"
        assert validated.exit_code == 0

    def test_single_stage_generation_can_fail_validation(self, runner: CliRunner):
        """Test the default generator and the validator disagree on some bodies."""
        # Act
        generated = runner.invoke(
            cli, ["generate", "--gender", "MALE", "--birth-date", "16.05.1976"]
        )
        code = _generated_code(generated.output)
        validated = runner.invoke(cli, ["validate", code])

        # Assert
        assert code == "37605160010"
        assert validated.exit_code == 1
        assert "expected 2, found 0" in validated.output

    def test_generated_code_parses_to_inputs(self, runner: CliRunner):
        """Test parse --json recovers gender and birth date."""
        # Act
        generated = runner.invoke(
            cli, ["generate", "--gender", "FEMALE", "--birth-date", "31.12.1850"]
        )
        code = _generated_code(generated.output)
        parsed = runner.invoke(cli, ["parse", code, "--json"])

        # Assert
        data = json.loads(parsed.output)
        assert code == "25012310018"
        assert data["gender_info"] == {"gender": "Female", "century": 1800}
        assert (data["full_year"], data["month_of_birth"], data["day_of_birth"]) == (1850, 12, 31)
        assert data["hospital_or_birth_sequence"]["name"] == "Kuressaare haigla"


class TestConfigDrivenWorkflow:
    """Config file and environment settings flowing into commands."""

    def test_config_file_strategy(self, runner: CliRunner, tmp_path: Path):
        """Test checksum strategy from the config file."""
        # Arrange
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"generator": {"checksum_strategy": "two_stage"}}))

        # Act
        result = runner.invoke(
            cli,
            ["--config", str(config_file), "generate", "--gender", "MALE", "--birth-date", "16.05.1976"],
        )

        # Assert
        assert _generated_code(result.output) == "37605160012"

    def test_default_config_location(self, runner: CliRunner):
        """Test ./config/config.json is picked up automatically."""
        # Arrange - working directory is tmp_path
        Path("config").mkdir()
        Path("config/config.json").write_text(json.dumps({"generator": {"sequence": "029"}}))

        # Act
        result = runner.invoke(
            cli, ["generate", "--gender", "MALE", "--birth-date", "03.05.1976"]
        )

        # Assert
        assert _generated_code(result.output) == "37605030299"

    def test_environment_override(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch):
        """Test ISIKUKOOD_GENERATOR_STRICT_YEAR_RANGE enables the strict guard."""
        # Arrange
        monkeypatch.setenv("ISIKUKOOD_GENERATOR_STRICT_YEAR_RANGE", "true")

        # Act
        result = runner.invoke(
            cli, ["generate", "--gender", "MALE", "--birth-date", "01.01.2200"]
        )

        # Assert
        assert result.exit_code == 1
        assert "InvalidYearRange" in result.output

    def test_logs_written_to_configured_file(self, runner: CliRunner, tmp_path: Path):
        """Test audit events reach the log file named in config."""
        # Arrange
        log_file = tmp_path / "audit" / "run.log"
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"log_file": str(log_file)}}))

        # Act
        runner.invoke(cli, ["--config", str(config_file), "validate", "37605030299"])
        runner.invoke(cli, ["--config", str(config_file), "parse", "97605030299"])

        # Assert
        content = log_file.read_text(encoding="utf-8")
        assert "AUDIT [CODE_VALIDATED] | status=success" in content
        assert "AUDIT [CODE_PARSED] | status=failure" in content
        assert "error_kind=InvalidGenderDigit" in content
