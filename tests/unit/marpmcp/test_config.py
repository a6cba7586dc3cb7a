# -*- coding: utf-8 -*-
"""Test the configuration module.

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Author: Mihai Criveti
"""

# Standard
from pathlib import Path

# Third-Party
from pydantic import ValidationError
import pytest

# First-Party
from marpmcp.config import get_settings, Settings


def test_defaults(test_settings):
    assert test_settings.app_name == "marp-mcp"
    assert test_settings.log_level == "INFO"
    assert test_settings.log_format == "text"
    assert test_settings.default_frontmatter == "marp: true"
    assert test_settings.layout_theme == "academic"
    assert test_settings.json_indent == 2
    assert test_settings.preview_length == 60
    assert test_settings.log_path is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MARP_MCP_LOG_LEVEL", "debug")
    monkeypatch.setenv("MARP_MCP_JSON_INDENT", "4")
    monkeypatch.setenv("MARP_MCP_DEFAULT_FRONTMATTER", "marp: true\ntheme: gaia")

    s = Settings(_env_file=None)

    assert s.log_level == "DEBUG"
    assert s.json_indent == 4
    assert s.frontmatter_block == "---\nmarp: true\ntheme: gaia\n---"


@pytest.mark.parametrize("field,value", [("log_level", "loud"), ("log_format", "xml"), ("json_indent", -1), ("preview_length", 0)])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_log_path_with_and_without_folder(tmp_path: Path):
    assert Settings(_env_file=None, log_to_file=True, log_file="marp.log").log_path == Path("marp.log")
    assert Settings(_env_file=None, log_to_file=True, log_file="marp.log", log_folder=str(tmp_path)).log_path == tmp_path / "marp.log"
    assert Settings(_env_file=None, log_to_file=False, log_file="marp.log").log_path is None


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
