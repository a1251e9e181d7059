"""Configuration management for the UI tree debugger."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

BASE_DIR = Path(__file__).resolve().parents[1]

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

DEFAULT_INDENT_WIDTH = 4
DEFAULT_RENDER_INDENT = 3
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer") from exc


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name, "").strip()
    return Path(value) if value else None


class DebugConfig(BaseModel):
    """Debugger configuration settings."""

    # Dump format
    indent_width: int = Field(default_factory=lambda: _env_int("UIDEBUG_INDENT_WIDTH", DEFAULT_INDENT_WIDTH))

    # Report layout
    render_indent: int = Field(default_factory=lambda: _env_int("UIDEBUG_RENDER_INDENT", DEFAULT_RENDER_INDENT))

    # Logging
    debug_mode: bool = Field(default_factory=lambda: os.getenv("UIDEBUG_DEBUG_MODE", "false").lower() == "true")
    log_level: str = Field(default_factory=lambda: os.getenv("UIDEBUG_LOG_LEVEL", DEFAULT_LOG_LEVEL))
    log_file: Optional[Path] = Field(default_factory=lambda: _env_path("UIDEBUG_LOG_FILE"))

    config_source: str = "environment"

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def __init__(self, **data):
        super().__init__(**data)

        self.log_level = (self.log_level or DEFAULT_LOG_LEVEL).strip().upper()
        if self.debug_mode:
            self.log_level = "DEBUG"

    @classmethod
    def defaults(cls) -> "DebugConfig":
        """Built-in settings, ignoring the environment."""
        return cls(
            indent_width=DEFAULT_INDENT_WIDTH,
            render_indent=DEFAULT_RENDER_INDENT,
            debug_mode=False,
            log_level=DEFAULT_LOG_LEVEL,
            log_file=None,
            config_source="defaults",
        )

    def validate_config(self) -> bool:
        """Validate configuration."""
        if self.indent_width <= 0:
            raise ValueError("UIDEBUG_INDENT_WIDTH must be greater than 0")
        if self.render_indent < 0:
            raise ValueError("UIDEBUG_RENDER_INDENT must not be negative")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"UIDEBUG_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return True


def load_config(dotenv_path: Optional[os.PathLike] = None) -> DebugConfig:
    """
    Load and validate configuration from the environment.

    Args:
        dotenv_path: Optional .env file; the project and working directory
            .env files are used when omitted.

    Returns:
        A validated configuration.

    Raises:
        ValueError: If a setting is malformed or out of range.
    """
    if dotenv_path is None:
        load_dotenv(BASE_DIR / ".env", override=False)
        load_dotenv(override=False)
    else:
        load_dotenv(dotenv_path=Path(dotenv_path), override=False)

    config_obj = DebugConfig()
    config_obj.validate_config()
    if dotenv_path is not None:
        config_obj.config_source = str(dotenv_path)
    return config_obj


def load_default_config() -> DebugConfig:
    """Load the environment configuration, falling back to built-in defaults when it is invalid."""
    try:
        return load_config()
    except ValueError as exc:
        logger.warning("Ignoring invalid UIDEBUG_* settings, using defaults: %s", exc)
        return DebugConfig.defaults()


# Global configuration instance
config = load_default_config()
