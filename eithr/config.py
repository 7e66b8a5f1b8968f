"""
Library configuration.

eithr has very little behaviour worth configuring: how much of a held value
ends up in error messages and whether misuse of the partial extractors is
logged. Values come from ``EITHR_*`` environment variables on first use and
can be overridden in-process with ``configure``.
"""

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

MIN_REPR_LIMIT = 8
DEFAULT_REPR_LIMIT = 80

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUE_TOKENS = ("true", "1", "yes", "on")
_FALSE_TOKENS = ("false", "0", "no", "off")


def parse_bool_env(key: str, default: bool = False) -> bool:
    """Parse boolean environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    token = value.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    logger.warning("Ignoring non-boolean %s=%r, using %s", key, value, default)
    return default


def parse_int_env(key: str, default: int) -> int:
    """Parse integer environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", key, value, default)
        return default


class EithrConfig(BaseModel):
    """Validated library settings."""

    repr_limit: int = Field(
        default=DEFAULT_REPR_LIMIT,
        ge=MIN_REPR_LIMIT,
        description="Maximum length of a value repr embedded in error messages",
    )
    log_wrong_variant: bool = Field(
        default=True,
        description="Log WrongVariantError before it is raised",
    )
    wrong_variant_log_level: str = Field(
        default="DEBUG",
        description="Log level used for WrongVariantError",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("wrong_variant_log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and validate the log level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def wrong_variant_log_levelno(self) -> int:
        return logging.getLevelNamesMapping()[self.wrong_variant_log_level]

    @classmethod
    def from_env(cls) -> "EithrConfig":
        """
        Build a config from ``EITHR_*`` environment variables.

        Never fails: values that cannot be used are logged and replaced by
        their defaults.
        """
        repr_limit = parse_int_env("EITHR_REPR_LIMIT", DEFAULT_REPR_LIMIT)
        if repr_limit < MIN_REPR_LIMIT:
            logger.warning(
                "Ignoring EITHR_REPR_LIMIT=%d below minimum %d, using %d",
                repr_limit,
                MIN_REPR_LIMIT,
                DEFAULT_REPR_LIMIT,
            )
            repr_limit = DEFAULT_REPR_LIMIT

        log_level = os.environ.get("EITHR_WRONG_VARIANT_LOG_LEVEL", "DEBUG")
        if log_level.strip().upper() not in _LOG_LEVELS:
            logger.warning(
                "Ignoring unknown EITHR_WRONG_VARIANT_LOG_LEVEL=%r, using DEBUG",
                log_level,
            )
            log_level = "DEBUG"

        return cls(
            repr_limit=repr_limit,
            log_wrong_variant=parse_bool_env("EITHR_LOG_WRONG_VARIANT", True),
            wrong_variant_log_level=log_level,
        )


_config: EithrConfig | None = None


def get_config() -> EithrConfig:
    """Return the active config, loading it from the environment if unset."""
    global _config
    if _config is None:
        _config = EithrConfig.from_env()
    return _config


def configure(**overrides: object) -> EithrConfig:
    """Validate ``overrides`` on top of the active config and install it."""
    global _config
    merged = get_config().model_dump() | overrides
    _config = EithrConfig.model_validate(merged)
    logger.debug("eithr configured: %s", _config.model_dump())
    return _config


def reset_config() -> None:
    """Forget the active config so the next ``get_config`` re-reads the environment."""
    global _config
    _config = None


__all__ = [
    "EithrConfig",
    "configure",
    "get_config",
    "parse_bool_env",
    "parse_int_env",
    "reset_config",
]
