"""Configuration system for direnum.

Configuration is read from a YAML file, ``${VARIABLE}`` references are
resolved from the environment, and the result is validated with Pydantic.
Every section has defaults, so an empty file is a valid configuration.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Final, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Matches ${VARIABLE_NAME} where VARIABLE_NAME holds uppercase letters, digits and underscores
ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Z0-9_]+)\}")

BackendName = Literal["auto", "stat", "scandir"]


class ListingConfig(BaseModel):
    """Configuration for directory listing.

    Selects the native listing backend and how the command-line listing
    presents entries. The iterator itself never filters beyond pseudo-entries.
    """

    model_config = ConfigDict(extra="forbid")

    backend: Annotated[
        BackendName,
        Field(
            description="Listing backend: 'auto' picks the native one for this platform",
        ),
    ] = "auto"
    show_hidden: Annotated[
        bool,
        Field(
            description="Show entries whose name starts with a dot in command-line listings",
        ),
    ] = True


class ApplicationConfig(BaseModel):
    """Logging settings for the command-line tool."""

    model_config = ConfigDict(extra="forbid")

    log_level: Annotated[
        str,
        Field(
            description="Root log level for the command-line tool",
            pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        ),
    ] = "WARNING"
    syslog_enabled: Annotated[
        bool,
        Field(
            description="Also send log records to the local syslog socket",
        ),
    ] = False


class MainConfig(BaseModel):
    """Top-level configuration container.

    Sections:
    - listing: Backend selection and listing presentation
    - application: Logging settings
    """

    model_config = ConfigDict(extra="forbid")

    listing: Annotated[
        ListingConfig,
        Field(
            default_factory=ListingConfig,
            description="Directory listing configuration",
        ),
    ]
    application: Annotated[
        ApplicationConfig,
        Field(
            default_factory=ApplicationConfig,
            description="Logging configuration",
        ),
    ]


class EnvironmentVariableError(Exception):
    """A ${NAME} reference names an environment variable that is not set."""


class ConfigurationError(Exception):
    """The configuration file could not be loaded or holds invalid settings.

    Messages are shown to the user as they are and name the file at fault.
    """


def resolve_env_var(value: str) -> str:
    """Substitute ``${NAME}`` references in one string.

    Args:
        value: Raw string from the configuration file

    Returns:
        The string with each reference replaced by the variable's value

    Raises:
        EnvironmentVariableError: If a referenced variable is unset

    Examples:
        >>> os.environ["LISTING_BACKEND"] = "stat"
        >>> resolve_env_var("${LISTING_BACKEND}")
        'stat'
    """

    def lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        try:
            return os.environ[name]
        except KeyError:
            raise EnvironmentVariableError(f"Environment variable '{name}' is referenced but not set") from None

    return ENV_VAR_PATTERN.sub(lookup, value)


def resolve_env_vars_in_dict(data: Mapping[str, object]) -> dict[str, object]:
    """Substitute environment references throughout a mapping.

    Nested mappings and lists are walked; values other than strings pass
    through untouched.

    Raises:
        EnvironmentVariableError: If a referenced variable is unset
    """
    return {key: _resolve_value(value) for key, value in data.items()}


def _resolve_value(value: object) -> object:
    if isinstance(value, str):
        return resolve_env_var(value)
    if isinstance(value, dict):
        return resolve_env_vars_in_dict(value)  # pyright: ignore[reportUnknownArgumentType]  # YAML boundary
    if isinstance(value, list):
        return [_resolve_value(item) for item in value]  # pyright: ignore[reportUnknownVariableType]  # YAML boundary
    return value


def _read_yaml(config_path: Path) -> dict[str, object]:
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigurationError(f"No configuration file at {config_path}; create it or drop --config") from None
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e

    try:
        data: object = yaml.safe_load(text)  # pyright: ignore[reportAny]  # YAML boundary
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}:\n{e}") from e

    # An empty document means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Top level of {config_path} must be a mapping of sections, not {type(data).__name__}"
        )
    return data  # pyright: ignore[reportUnknownVariableType]  # YAML boundary


def _describe_validation_error(config_path: Path, error: ValidationError) -> str:
    lines = [f"Invalid settings in {config_path}:"]
    for detail in error.errors():
        location = " → ".join(str(part) for part in detail["loc"])
        lines.append(f"  {location}: {detail['msg']}")
    return "\n".join(lines)


def load_main_config(config_path: Path) -> MainConfig:
    """Read, resolve and validate a YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If the file is missing or unreadable, is not a
            YAML mapping, references an unset environment variable, or
            holds invalid settings
    """
    raw_data = _read_yaml(config_path)

    try:
        resolved_data = resolve_env_vars_in_dict(raw_data)
    except EnvironmentVariableError as e:
        raise ConfigurationError(f"{config_path}: {e}") from e

    try:
        return MainConfig.model_validate(resolved_data)
    except ValidationError as e:
        raise ConfigurationError(_describe_validation_error(config_path, e)) from e
