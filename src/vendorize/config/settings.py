"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with VENDORIZE_ prefix
3. Field defaults

Nested values use double underscore delimiter:
  VENDORIZE_FEATURES__APPEARANCE=false
"""

import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import vendorize.constants as constants

UnknownPropertyPolicy: _typing.TypeAlias = _typing.Literal["passthrough", "silent", "error"]

LogLevel: _typing.TypeAlias = _typing.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(_pydantic_settings.BaseSettings):
    """
    Vendorize configuration settings.

    All settings can be overridden via environment variables with the
    VENDORIZE_ prefix, e.g. VENDORIZE_UNKNOWN_PROPERTY=error.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="VENDORIZE_",
        env_nested_delimiter="__",  # VENDORIZE_FEATURES__FLEX
        extra="ignore",
    )

    namespace: str | None = None
    """Config path prepended to every store path (None = no namespace)."""

    path_delimiter: str = _pydantic.Field(
        default=constants.DEFAULT_PATH_DELIMITER,
        min_length=1,
    )
    """Separator between segments of config path strings."""

    unknown_property: UnknownPropertyPolicy = "passthrough"
    """What the driver does with a property no rule handles."""

    seed_path: _pathlib.Path | None = None
    """Replacement seed file (None = bundled seed.yaml)."""

    log_level: LogLevel = "WARNING"
    """Root log level applied by the CLI."""

    features: dict[str, bool] = _pydantic.Field(default_factory=dict)
    """Feature toggle overrides, written to the overrides tier."""

    @_pydantic.field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: _typing.Any) -> _typing.Any:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @_pydantic.field_validator("namespace")
    @classmethod
    def _empty_namespace_is_none(cls, value: str | None) -> str | None:
        """Treat an empty namespace as no namespace."""
        return value or None
