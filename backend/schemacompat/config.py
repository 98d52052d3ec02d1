"""Configuration management for schemacompat.

Rule enforcement levels and logging options come from Pydantic Settings,
supporting both a YAML config file and ``SCHEMACOMPAT_`` environment
variables (nested sections use ``__``, e.g.
``SCHEMACOMPAT_ENUM__ADDITION_ENFORCEMENT=Strict``).
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings
import yaml

from .core.logging import configure_logging
from .validations.types import (
    EnumAdditionEnforcement,
    EnumRemovalEnforcement,
    RequiredNewEnforcement,
)


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be loaded."""

    pass


class EnumValidationConfig(BaseModel):
    """Enforcement levels of the Enum rule."""

    addition_enforcement: EnumAdditionEnforcement = Field(
        default=EnumAdditionEnforcement.IF_PREVIOUSLY_CONSTRAINED,
        description="How newly allowed enum values are treated",
    )
    removal_enforcement: EnumRemovalEnforcement = Field(
        default=EnumRemovalEnforcement.STRICT,
        description="How removed enum values are treated",
    )


class RequiredValidationConfig(BaseModel):
    """Enforcement level of the Required rule."""

    new_enforcement: RequiredNewEnforcement = Field(
        default=RequiredNewEnforcement.STRICT,
        description="How newly required sub-fields are treated",
    )


class CompatibilitySettings(BaseSettings):
    """Settings for the compatibility rules and their logging."""

    # Environment
    environment: Literal["development", "testing", "production"] = Field(
        default="development", description="Application environment"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Enable JSON formatted logs")

    # Rule configuration
    enum: EnumValidationConfig = Field(default_factory=EnumValidationConfig)
    required: RequiredValidationConfig = Field(
        default_factory=RequiredValidationConfig
    )

    class Config:
        """Pydantic configuration."""

        env_prefix = "SCHEMACOMPAT_"
        env_nested_delimiter = "__"
        case_sensitive = False


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must deserialize to a mapping")
    return data


def load_settings(config_path: Path | None = None) -> CompatibilitySettings:
    """Load and validate settings.

    Values from the config file take precedence over environment variables.

    Args:
        config_path: Optional YAML file with settings

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    raw = _load_yaml(config_path) if config_path is not None else {}
    try:
        return CompatibilitySettings(**raw)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def configure_logging_from(settings: CompatibilitySettings) -> None:
    """Apply the logging options of ``settings`` to structlog."""
    configure_logging(
        environment=settings.environment,
        log_level=settings.log_level,
        json_logs=settings.json_logs,
    )
