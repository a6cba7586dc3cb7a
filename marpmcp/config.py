# -*- coding: utf-8 -*-
"""Location: ./marpmcp/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti, Manav Gupta

Marp MCP Configuration.
This module defines configuration settings for the Marp MCP server using Pydantic.
It loads configuration from environment variables (prefixed with ``MARP_MCP_``)
or a ``.env`` file, with sensible defaults.

Environment variables:
- MARP_MCP_APP_NAME: Server name advertised to MCP clients (default: "marp-mcp")
- MARP_MCP_LOG_LEVEL: Logging level (default: "INFO")
- MARP_MCP_LOG_FORMAT: Log record format, "text" or "json" (default: "text")
- MARP_MCP_LOG_TO_FILE: Also write logs to a file (default: False)
- MARP_MCP_LOG_FILE / MARP_MCP_LOG_FOLDER: Log file location (only used if LOG_TO_FILE)
- MARP_MCP_DEFAULT_FRONTMATTER: Frontmatter body synthesized for files without one (default: "marp: true")
- MARP_MCP_FILE_ENCODING: Encoding used to read and write decks (default: "utf-8")
- MARP_MCP_LAYOUT_THEME: Theme name reported by list_layouts (default: "academic")
- MARP_MCP_JSON_INDENT: Indentation of JSON tool results (default: 2)
- MARP_MCP_PREVIEW_LENGTH: Max characters of a slide preview in list_slides (default: 60)

Examples:
    >>> from marpmcp.config import Settings
    >>> s = Settings(log_level='debug')
    >>> s.log_level
    'DEBUG'
    >>> s.frontmatter_block
    '---\\nmarp: true\\n---'
    >>> try:
    ...     Settings(log_format='xml')
    ... except ValueError:
    ...     print('error')
    error
"""

# Standard
from functools import lru_cache
import logging
from pathlib import Path
from typing import ClassVar, Optional, Set

# Third-Party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Only configure basic logging if no handlers exist yet
# This prevents conflicts with LoggingService while ensuring config logging works
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Marp MCP configuration settings.

    Examples:
        >>> from marpmcp.config import Settings
        >>> s = Settings()
        >>> s.app_name
        'marp-mcp'
        >>> s.json_indent
        2
        >>> s.file_encoding
        'utf-8'
        >>> Settings(default_frontmatter='marp: true\\ntheme: academic').frontmatter_block
        '---\\nmarp: true\\ntheme: academic\\n---'
    """

    model_config = SettingsConfigDict(env_prefix="MARP_MCP_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Basic Settings
    app_name: str = "marp-mcp"

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # json or text
    log_to_file: bool = False  # Enable file logging (default: stderr only)
    log_filemode: str = "a+"  # append or overwrite
    log_file: Optional[str] = None  # Only used if log_to_file=True
    log_folder: Optional[str] = None  # Only used if log_to_file=True

    # Log Rotation (optional - only used if log_to_file=True)
    log_rotation_enabled: bool = False
    log_max_size_mb: int = 1
    log_backup_count: int = 5

    valid_log_levels: ClassVar[Set[str]] = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    valid_log_formats: ClassVar[Set[str]] = {"text", "json"}

    # Deck handling
    default_frontmatter: str = Field(default="marp: true", description="Frontmatter body synthesized for decks without one")
    file_encoding: str = Field(default="utf-8", description="Encoding used to read and write deck files")
    layout_theme: str = Field(default="academic", description="Theme name reported alongside the layout catalog")

    # Tool output
    json_indent: int = Field(default=2, ge=0, description="Indentation of JSON tool results")
    preview_length: int = Field(default=60, ge=1, description="Maximum characters of a slide preview")

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        """Normalize and validate the configured log level.

        Args:
            v: Raw log level value

        Returns:
            str: Upper-cased log level name

        Raises:
            ValueError: If the level is not a standard logging level name

        Examples:
            >>> Settings._validate_log_level('warning')
            'WARNING'
            >>> try:
            ...     Settings._validate_log_level('loud')
            ... except ValueError as e:
            ...     print('error')
            error
        """
        level = str(v).strip().upper()
        if level not in cls.valid_log_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {sorted(cls.valid_log_levels)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def _validate_log_format(cls, v: str) -> str:
        """Validate the log record format.

        Args:
            v: Raw log format value

        Returns:
            str: Lower-cased log format

        Raises:
            ValueError: If the format is neither ``text`` nor ``json``

        Examples:
            >>> Settings._validate_log_format('JSON')
            'json'
        """
        fmt = str(v).strip().lower()
        if fmt not in cls.valid_log_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {sorted(cls.valid_log_formats)}")
        return fmt

    @property
    def frontmatter_block(self) -> str:
        """Return the delimited frontmatter block used when a deck has none.

        Returns:
            str: The default frontmatter wrapped in ``---`` delimiter lines
        """
        return f"---\n{self.default_frontmatter.strip()}\n---"

    @property
    def log_path(self) -> Optional[Path]:
        """Return the resolved log file path, if file logging is configured.

        Returns:
            Optional[Path]: Log file path or None when file logging is disabled

        Examples:
            >>> Settings().log_path is None
            True
            >>> str(Settings(log_to_file=True, log_file='marp.log', log_folder='logs').log_path)
            'logs/marp.log'
        """
        if not self.log_to_file or not self.log_file:
            return None
        if self.log_folder:
            return Path(self.log_folder) / self.log_file
        return Path(self.log_file)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, Settings)
        True
        >>> # Second call returns the same cached instance
        >>> settings2 = get_settings()
        >>> settings is settings2
        True
    """
    # Instantiate a fresh Pydantic Settings object,
    # loading from env vars or .env exactly once.
    return Settings()


# Create settings instance
settings = get_settings()
