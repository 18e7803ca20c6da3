"""Compiler configuration loading and validation."""

import logging
from pathlib import Path

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .consts import DEFAULT_MAX_ITEMS, DEFAULT_MIN_ITEMS, ENV_PREFIX
from .enums import UnsupportedTypePolicy
from .errors import ConfigException
from .utils import describe_validation_error

logger = logging.getLogger(__name__)


class CompilerConfig(BaseSettings):
    """Schema compiler configuration."""

    unsupported_type: UnsupportedTypePolicy = Field(default=UnsupportedTypePolicy.WARN)
    min_items: int = Field(default=DEFAULT_MIN_ITEMS, ge=0)
    max_items: int = Field(default=DEFAULT_MAX_ITEMS, ge=1)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @model_validator(mode="after")
    def validate_item_bounds(self) -> "CompilerConfig":
        if self.max_items < self.min_items:
            raise ValueError(
                f"max_items ({self.max_items}) must not be lower than "
                f"min_items ({self.min_items})"
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load(cls, config_path: str | None = None) -> "CompilerConfig":
        """Load configuration from the environment, and from TOML when a path is given."""
        if config_path:
            return cls.load_from_file(config_path)

        try:
            return cls()
        except ValidationError as e:
            raise ConfigException(
                describe_validation_error(e, "Configuration validation failed:")
            ) from e

    @classmethod
    def load_from_file(cls, config_path: str) -> "CompilerConfig":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter="__",
            )

        try:
            config = _Config()
        except ValidationError as e:
            raise ConfigException(
                describe_validation_error(e, "Configuration validation failed:")
            ) from e
        except ValueError as e:
            # tomllib.TOMLDecodeError
            raise ConfigException(f"Invalid configuration file {config_path}: {e}") from e

        logger.debug(f"Loaded configuration from {config_path}")
        return config
