"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _validate_level(v: str) -> str:
    v_upper = v.upper()
    if v_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {v}. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )
    return v_upper


class GeneratorConfig(BaseModel):
    """Configuration for personal code generation.

    Attributes:
        sequence: Three-digit birth sequence used by every generated code
        checksum_strategy: Control digit procedure (single_stage or two_stage)
        strict_year_range: Reject birth years outside 1800-2199 up front

    Example:
        >>> GeneratorConfig(checksum_strategy="two_stage").checksum_strategy
        'two_stage'
    """

    sequence: str = Field(
        default="001",
        description="Three-digit birth sequence for generated codes"
    )
    checksum_strategy: str = Field(
        default="single_stage",
        description="Checksum strategy for generation: single_stage or two_stage"
    )
    strict_year_range: bool = Field(
        default=False,
        description="Apply the strict 1800-2199 year boundary"
    )

    @field_validator("sequence")
    @classmethod
    def validate_sequence(cls, v: str) -> str:
        """Validate sequence is exactly three digits.

        Raises:
            ValueError: If sequence is not three ASCII digits
        """
        if len(v) != 3 or not (v.isascii() and v.isdigit()):
            raise ValueError(f"Invalid sequence: {v}. Must be exactly 3 digits")
        return v

    @field_validator("checksum_strategy")
    @classmethod
    def validate_checksum_strategy(cls, v: str) -> str:
        """Validate checksum strategy name.

        Raises:
            ValueError: If strategy is not single_stage or two_stage
        """
        valid_strategies = ["single_stage", "two_stage"]
        v_lower = v.lower()
        if v_lower not in valid_strategies:
            raise ValueError(
                f"Invalid checksum_strategy: {v}. "
                f"Must be one of: {', '.join(valid_strategies)}"
            )
        return v_lower


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact personal codes from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/isikukood.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact personal codes from logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level and normalise to uppercase."""
        return _validate_level(v)


class OperationLoggingConfig(BaseModel):
    """Per-operation logging configuration.

    Attributes:
        generate_log_level: Log level for code generation
        parse_log_level: Log level for code parsing
        batch_log_level: Log level for CSV batch decoding
    """

    generate_log_level: str = Field(
        default="INFO",
        description="Log level for code generation"
    )
    parse_log_level: str = Field(
        default="INFO",
        description="Log level for code parsing"
    )
    batch_log_level: str = Field(
        default="INFO",
        description="Log level for CSV batch decoding"
    )

    @field_validator("generate_log_level", "parse_log_level", "batch_log_level")
    @classmethod
    def validate_operation_log_level(cls, v: str) -> str:
        """Validate operation-specific log level."""
        return _validate_level(v)


class BatchConfig(BaseModel):
    """CSV batch decoding configuration.

    Attributes:
        code_column: Name of the CSV column holding personal codes
        max_report_issues: Maximum issues listed per section of the text report
    """

    code_column: str = Field(
        default="code",
        min_length=1,
        description="CSV column holding personal codes"
    )
    max_report_issues: int = Field(
        default=20,
        ge=1,
        description="Maximum issues listed per report section"
    )


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        generator: Code generation configuration
        logging: Logging configuration
        operation_logging: Per-operation logging configuration
        batch: CSV batch decoding configuration

    Example:
        >>> config = Config(generator=GeneratorConfig(strict_year_range=True))
        >>> config.generator.strict_year_range
        True
        >>> config.batch.code_column
        'code'
    """

    generator: GeneratorConfig = GeneratorConfig()
    logging: LoggingConfig = LoggingConfig()
    operation_logging: OperationLoggingConfig = OperationLoggingConfig()
    batch: BatchConfig = BatchConfig()
