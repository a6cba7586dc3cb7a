# -*- coding: utf-8 -*-
"""

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

"""

# Standard
from pathlib import Path

# Third-Party
import pytest

# First-Party
from marpmcp.config import Settings
from marpmcp.services.document_service import DocumentService
from marpmcp.services.slide_service import SlideService

FRONTMATTER = "---\nmarp: true\ntheme: academic\n---"


def write_deck(path: Path, *slides: str, frontmatter: str = FRONTMATTER) -> Path:
    """Write a deck made of the given slide bodies."""
    content = frontmatter
    if slides:
        content += "\n\n" + "\n\n---\n\n".join(slides)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def test_settings():
    """Settings with defaults, isolated from the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def document_service():
    """A document service using the default frontmatter."""
    return DocumentService(encoding="utf-8", default_frontmatter="marp: true")


@pytest.fixture
def slide_service(document_service):
    """A slide service backed by the default document service."""
    return SlideService(document_service=document_service)


@pytest.fixture
def empty_deck(tmp_path):
    """A deck with frontmatter and no slides."""
    return write_deck(tmp_path / "empty.md")


@pytest.fixture
def deck(tmp_path):
    """A deck with three slides, none of which carries an identifier."""
    return write_deck(tmp_path / "deck.md", "# One", "# Two", "# Three")


@pytest.fixture
def deck_with_ids(tmp_path):
    """A deck with three slides; the second one has no identifier."""
    return write_deck(
        tmp_path / "ids.md",
        "<!-- slide-id: aaaaaaaa-0000-4000-8000-000000000001 -->\n\n# One",
        "# Two",
        "<!-- slide-id: aaaaaaaa-0000-4000-8000-000000000003 -->\n\n# Three",
    )


@pytest.fixture
def make_deck(tmp_path):
    """Factory writing ``name`` under tmp_path with the given slide bodies."""

    def _make(*slides: str, name: str = "custom.md", frontmatter: str = FRONTMATTER) -> Path:
        return write_deck(tmp_path / name, *slides, frontmatter=frontmatter)

    return _make
