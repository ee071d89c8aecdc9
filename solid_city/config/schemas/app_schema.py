"""Main application configuration schema."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging_schema import LoggingConfig

OUTPUT_FORMATS = ["text", "json", "yaml"]


class ConsoleConfig(BaseModel):
    """Example output configuration."""
    model_config = ConfigDict(extra="forbid")

    default_format: str = Field("text", description="Default output format for `run`")

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate default output format."""
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    console: ConsoleConfig = Field(default_factory=lambda: ConsoleConfig())
    environment: str = Field("development", description="Environment")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v
