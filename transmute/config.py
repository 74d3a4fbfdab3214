# -*- coding: utf-8 -*-
"""Location: ./transmute/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Transmute Configuration.
This module defines configuration settings for transmute using Pydantic.
It loads configuration from environment variables with sensible defaults.

Environment variables:
- TRANSMUTE_LOG_LEVEL: Logging level (default: "ERROR")
- TRANSMUTE_LOG_FORMAT: "json" or "text" (default: "text")
- TRANSMUTE_LOG_TO_FILE: Also write logs to a file (default: False)
- TRANSMUTE_LOG_FILE: Log file name (default: "transmute.log")
- TRANSMUTE_LOG_FOLDER: Folder for the log file (default: current directory)
- TRANSMUTE_LOG_ROTATION_ENABLED: Rotate the log file (default: False)
- TRANSMUTE_DEFAULT_HASH: Hash used when none is named (default: "keccak-256")
- TRANSMUTE_CONVERT_TARGETS: Encodings listed when converting without targets
- TRANSMUTE_JSON_INDENT: Pretty-print JSON output (default: True)

Examples:
    >>> from transmute.config import Settings
    >>> s = Settings(log_level="debug")
    >>> s.log_level
    'DEBUG'
    >>> s.log_path is None
    True
    >>> Settings(log_to_file=True, log_folder="/tmp").log_path.as_posix()
    '/tmp/transmute.log'
"""

# Standard
from functools import lru_cache
import logging
from pathlib import Path
import sys
from typing import Annotated, Any, List, Literal, Optional

# Third-Party
import orjson
from pydantic import Field, field_validator, PositiveInt
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Transmute configuration settings.

    Examples:
        >>> s = Settings()
        >>> s.default_hash
        'keccak-256'
        >>> "hex" in s.convert_targets
        True
    """

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="ERROR")
    log_format: Literal["json", "text"] = "text"  # json or text
    log_to_file: bool = False  # Enable file logging (default: stderr only)
    log_filemode: str = "a+"  # append or overwrite
    log_file: str = "transmute.log"  # Only used if log_to_file=True
    log_folder: Optional[str] = None  # Only used if log_to_file=True

    # Log Rotation (optional - only used if log_to_file=True)
    log_rotation_enabled: bool = False
    log_max_size_mb: PositiveInt = 1
    log_backup_count: int = 5

    # Conversion defaults
    default_hash: str = Field(default="keccak-256", description="Hash algorithm used when none is given")
    convert_targets: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["int", "hex", "bin", "base58", "base64", "utf8", "bytes"],
        description="Output encodings listed by convert when none are requested",
    )
    json_indent: bool = Field(default=True, description="Pretty-print JSON output")

    model_config = SettingsConfigDict(env_prefix="TRANSMUTE_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level value.

        Args:
            v (str): The log level string provided via configuration or environment.

        Returns:
            str: The validated and normalized (uppercase) log level.

        Raises:
            ValueError: If the provided value is not one of
                {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}.

        Examples:
            >>> Settings.validate_log_level("warning")
            'WARNING'
            >>> try:
            ...     Settings.validate_log_level("loud")
            ... except ValueError as e:
            ...     print(e)
            Invalid log_level: loud
        """
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_up = v.upper()
        if v_up not in allowed:
            raise ValueError(f"Invalid log_level: {v}")
        return v_up

    @field_validator("convert_targets", mode="before")
    @classmethod
    def split_convert_targets(cls, v: Any) -> Any:
        """Accept a comma-separated string or a JSON array as well as a list.

        Args:
            v: Raw value from the environment or constructor.

        Returns:
            Any: A list of encoding names, or the value unchanged.

        Examples:
            >>> Settings.split_convert_targets("hex, int")
            ['hex', 'int']
            >>> Settings.split_convert_targets(["bin"])
            ['bin']
        """
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return orjson.loads(v)
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @property
    def log_path(self) -> Optional[Path]:
        """Resolved log file path, or None when file logging is off.

        Returns:
            Optional[Path]: Path of the log file.
        """
        if not self.log_to_file:
            return None
        folder = Path(self.log_folder) if self.log_folder else Path.cwd()
        return folder / self.log_file


@lru_cache()
def get_settings(**kwargs: Any) -> Settings:
    """Get cached settings instance.

    Args:
        **kwargs: Keyword arguments to pass to the Settings setup.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, Settings)
        True
        >>> settings is get_settings()
        True
    """
    cfg = Settings(**kwargs)
    logger.debug(f"Loaded settings: log_level={cfg.log_level}, log_format={cfg.log_format}")
    return cfg


def generate_settings_schema() -> dict[str, Any]:
    """Return the JSON Schema describing the Settings model.

    Returns:
        dict: A dictionary representing the JSON Schema of the Settings model.
    """
    return Settings.model_json_schema(mode="validation")


# Lazy "instance" of settings
class LazySettingsWrapper:
    """Lazily initialize settings singleton on getattr"""

    def __getattr__(self, key: str) -> Any:
        """Get the real settings object and forward to it

        Args:
            key: The key to fetch from settings

        Returns:
            Any: The value of the attribute on the settings
        """
        return getattr(get_settings(), key)


settings = LazySettingsWrapper()


if __name__ == "__main__":
    if "--schema" in sys.argv:
        schema = generate_settings_schema()
        print(orjson.dumps(schema, option=orjson.OPT_INDENT_2).decode())
        sys.exit(0)
