# -*- coding: utf-8 -*-
"""Location: ./transmute/services/logging_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Logging Service.
Configures the ``transmute`` logger hierarchy from ``Settings``: a stderr
handler always, plus an optional (rotating) file handler. Records are
rendered either as plain text or as one JSON object per line.

Examples:
    >>> from transmute.services.logging_service import LoggingService
    >>> service = LoggingService()
    >>> service.get_logger("transmute.example").name
    'transmute.example'
"""

# Standard
import logging
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

# Third-Party
import orjson

# First-Party
from transmute.config import get_settings, Settings

ROOT_LOGGER_NAME = "transmute"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render log records as compact JSON lines.

    Examples:
        >>> record = logging.LogRecord("transmute", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        >>> import orjson
        >>> payload = orjson.loads(JsonFormatter().format(record))
        >>> payload["message"], payload["level"], payload["logger"]
        ('hello world', 'INFO', 'transmute')
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a record.

        Args:
            record: The log record.

        Returns:
            str: The JSON document for the record.
        """
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload).decode()


class LoggingService:
    """Owns the handlers attached to the ``transmute`` logger."""

    def __init__(self, settings: Optional[Settings] = None):
        """Create the service.

        Args:
            settings: Settings to read; the cached settings when omitted.
        """
        self._settings = settings
        self._handlers: List[logging.Handler] = []
        self._initialized = False

    @property
    def settings(self) -> Settings:
        """Settings in use.

        Returns:
            Settings: Explicit settings or the cached instance.
        """
        return self._settings or get_settings()

    def _formatter(self) -> logging.Formatter:
        if self.settings.log_format == "json":
            return JsonFormatter()
        return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    def _file_handler(self) -> Optional[logging.Handler]:
        path = self.settings.log_path
        if path is None:
            return None
        path.parent.mkdir(parents=True, exist_ok=True)
        if self.settings.log_rotation_enabled:
            return RotatingFileHandler(
                path,
                mode=self.settings.log_filemode,
                maxBytes=self.settings.log_max_size_mb * 1024 * 1024,
                backupCount=self.settings.log_backup_count,
                encoding="utf-8",
            )
        return logging.FileHandler(path, mode=self.settings.log_filemode, encoding="utf-8")

    def initialize(self) -> None:
        """Attach handlers and set the configured level. Safe to call twice.

        Examples:
            >>> from transmute.config import Settings
            >>> service = LoggingService(Settings(log_level="info"))
            >>> service.initialize()
            >>> logging.getLogger("transmute").level == logging.INFO
            True
            >>> service.shutdown()
        """
        if self._initialized:
            return
        root = logging.getLogger(ROOT_LOGGER_NAME)
        formatter = self._formatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        self._handlers.append(stream_handler)

        file_handler = self._file_handler()
        if file_handler is not None:
            file_handler.setFormatter(formatter)
            self._handlers.append(file_handler)

        for handler in self._handlers:
            root.addHandler(handler)
        root.setLevel(self.settings.log_level)
        root.propagate = False
        self._initialized = True
        root.debug(f"Logging initialized: level={self.settings.log_level}, format={self.settings.log_format}, file={self.settings.log_path}")

    def set_level(self, level: str) -> None:
        """Change the level of the ``transmute`` logger.

        Args:
            level: Level name, case-insensitive.

        Examples:
            >>> service = LoggingService()
            >>> service.set_level("warning")
            >>> logging.getLogger("transmute").level == logging.WARNING
            True
        """
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(Settings.validate_log_level(level))

    def shutdown(self) -> None:
        """Detach and close the handlers installed by ``initialize``."""
        root = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in self._handlers:
            root.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        root.propagate = True
        self._initialized = False

    def get_logger(self, name: str) -> logging.Logger:
        """Return a named logger.

        Args:
            name: Logger name, usually ``__name__``.

        Returns:
            logging.Logger: The logger.
        """
        return logging.getLogger(name)
