# -*- coding: utf-8 -*-
"""Logging Service Implementation.

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

This module configures logging for the Marp MCP server. It supports RFC 5424
severity levels, runtime level changes requested by MCP clients, text or JSON
formatting and an optional rotating log file.

Console output goes to stderr because stdout carries the stdio MCP protocol.
"""

# Standard
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import Dict, List, Optional

# Third-Party
from pythonjsonlogger.json import JsonFormatter

# First-Party
from marpmcp.config import settings
from marpmcp.models import LogLevel

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# RFC 5424 levels without a stdlib counterpart fold onto the closest one
LEVEL_MAP: Dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ALERT: logging.CRITICAL,
    LogLevel.EMERGENCY: logging.CRITICAL,
}


def _build_formatter(log_format: str) -> logging.Formatter:
    """Create the formatter for the configured log format.

    Args:
        log_format: ``text`` or ``json``

    Returns:
        logging.Formatter: The formatter

    Examples:
        >>> type(_build_formatter('text')).__name__
        'Formatter'
        >>> type(_build_formatter('json')).__name__
        'JsonFormatter'
    """
    if log_format == "json":
        return JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    return logging.Formatter(LOG_FORMAT)


def to_stdlib_level(level: LogLevel) -> int:
    """Map an RFC 5424 level to a stdlib logging level.

    Args:
        level: RFC 5424 level

    Returns:
        int: stdlib logging level

    Examples:
        >>> to_stdlib_level(LogLevel.NOTICE) == logging.INFO
        True
        >>> to_stdlib_level(LogLevel.EMERGENCY) == logging.CRITICAL
        True
    """
    return LEVEL_MAP[LogLevel(level)]


class LoggingService:
    """Marp MCP logging service.

    Implements:
    - RFC 5424 severity levels
    - Log level management
    - stderr and optional rotating file handlers
    - Logger name tracking
    """

    def __init__(self):
        """Initialize logging service."""
        self._level = LogLevel(settings.log_level.lower())
        self._loggers: Dict[str, logging.Logger] = {}
        self._handlers: List[logging.Handler] = []

    @property
    def level(self) -> LogLevel:
        """Current minimum level.

        Returns:
            LogLevel: The level
        """
        return self._level

    async def initialize(self) -> None:
        """Attach handlers to the root logger and apply the configured level.

        Examples:
            >>> import asyncio
            >>> service = LoggingService()
            >>> asyncio.run(service.initialize())
            >>> asyncio.run(service.shutdown())
        """
        root = logging.getLogger()
        formatter = _build_formatter(settings.log_format)

        # Replace the bootstrap console handler installed by marpmcp.config
        for existing in list(root.handlers):
            if type(existing) is logging.StreamHandler:  # pylint: disable=unidiomatic-typecheck
                root.removeHandler(existing)

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        self._handlers.append(stream_handler)

        file_handler = self._build_file_handler(formatter)
        if file_handler:
            self._handlers.append(file_handler)

        for handler in self._handlers:
            root.addHandler(handler)
        root.setLevel(to_stdlib_level(self._level))
        self._loggers[""] = root

        if file_handler:
            logging.info(f"File logging enabled: {settings.log_path}")
        logging.info("Logging service initialized")

    async def shutdown(self) -> None:
        """Detach and close the handlers added by initialize."""
        root = logging.getLogger()
        for handler in self._handlers:
            root.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        logging.info("Logging service shutdown")

    def _build_file_handler(self, formatter: logging.Formatter) -> Optional[logging.Handler]:
        """Create the file handler when file logging is enabled.

        Args:
            formatter: Formatter to attach

        Returns:
            Optional[logging.Handler]: Rotating or plain file handler, or None when disabled
        """
        path = settings.log_path
        if path is None:
            return None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if settings.log_rotation_enabled:
                handler: logging.Handler = RotatingFileHandler(
                    path,
                    mode=settings.log_filemode,
                    maxBytes=settings.log_max_size_mb * 1024 * 1024,
                    backupCount=settings.log_backup_count,
                )
            else:
                handler = logging.FileHandler(path, mode=settings.log_filemode)
        except OSError as e:
            logging.warning(f"Failed to initialize file logging: {e}")
            return None
        handler.setFormatter(formatter)
        return handler

    def get_logger(self, name: str) -> logging.Logger:
        """Get or create logger instance.

        Args:
            name: Logger name

        Returns:
            Logger instance

        Examples:
            >>> service = LoggingService()
            >>> service.get_logger('marpmcp.test') is service.get_logger('marpmcp.test')
            True
        """
        if name not in self._loggers:
            logger = logging.getLogger(name)
            logger.setLevel(to_stdlib_level(self._level))
            self._loggers[name] = logger

        return self._loggers[name]

    async def set_level(self, level: LogLevel) -> None:
        """Set minimum log level.

        This updates the level for all registered loggers.

        Args:
            level: New log level
        """
        self._level = LogLevel(level)

        log_level = to_stdlib_level(self._level)
        for logger in self._loggers.values():
            logger.setLevel(log_level)

        self.get_logger("marpmcp").info(f"Log level set to {self._level.value}")
