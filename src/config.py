"""Settings read from the environment."""

from dataclasses import dataclass
import logging
import os

from errors import ValidationError


class ConfigError(ValidationError):
    """Raised when an environment setting cannot be used."""


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name}={raw!r} is not a boolean")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    long_month_names: bool = False
    in_on: bool = True
    indent_width: int = 4

    @property
    def indent_string(self) -> str:
        return " " * self.indent_width

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from PROFILES_* environment variables.

        PROFILES_LOG_LEVEL, PROFILES_LONG_MONTHS, PROFILES_IN_ON and
        PROFILES_INDENT override the defaults.
        """
        log_level = os.environ.get("PROFILES_LOG_LEVEL", cls.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"PROFILES_LOG_LEVEL={log_level!r} is not a logging level")

        raw_indent = os.environ.get("PROFILES_INDENT", str(cls.indent_width))
        try:
            indent_width = int(raw_indent)
        except ValueError:
            raise ConfigError(f"PROFILES_INDENT={raw_indent!r} is not an integer") from None
        if indent_width < 0:
            raise ConfigError(f"PROFILES_INDENT must not be negative (got {indent_width})")

        return cls(
            log_level=log_level,
            long_month_names=_env_bool("PROFILES_LONG_MONTHS", cls.long_month_names),
            in_on=_env_bool("PROFILES_IN_ON", cls.in_on),
            indent_width=indent_width,
        )
