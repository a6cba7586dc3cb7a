# -*- coding: utf-8 -*-
"""Location: ./marpmcp/services/document_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Document Service Implementation.
This module converts Marp deck files to and from the Document model:
- Detecting the leading ``---`` frontmatter block, or synthesizing a default one
- Splitting the body into slides on line-isolated ``---`` separators
- Re-serializing with normalized separators, dropping empty slides
- Reading and writing deck files

Frontmatter is kept separate from the slide list: slide number N is list
index N-1 and there is no reserved slot. A ``---`` line inside a slide's own
content is indistinguishable from a slide boundary and is treated as one.

Examples:
    >>> service = DocumentService(default_frontmatter='marp: true')
    >>> doc = service.parse('---\\nmarp: true\\n---\\n\\n# A\\n\\n---\\n\\n# B\\n')
    >>> doc.slides
    ['# A\\n', '\\n# B']
    >>> DocumentService.serialize(doc.frontmatter, doc.slides)
    '---\\nmarp: true\\n---\\n\\n# A\\n\\n---\\n\\n# B'
"""

# Standard
import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

# First-Party
from marpmcp.config import settings
from marpmcp.models import Document

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"
SLIDE_SEPARATOR = "---"
SERIALIZED_SLIDE_SEPARATOR = "\n\n---\n\n"


class DocumentError(Exception):
    """Base class for deck file errors."""


class DocumentReadError(DocumentError):
    """Raised when a deck file is missing or cannot be read."""


class DocumentWriteError(DocumentError):
    """Raised when a deck file cannot be written."""


def split_slides(body: str) -> List[str]:
    """Split a deck body into slides.

    Every interior line that is exactly ``---`` ends a slide, so back-to-back
    separators yield an empty slide. A ``---`` on the first or last line of the
    body has no line on one side and stays content.

    Args:
        body: Deck text after the frontmatter, trimmed

    Returns:
        List[str]: Untrimmed slide bodies; empty for an empty body

    Examples:
        >>> split_slides('# A\\n---\\n---\\n# B')
        ['# A', '', '# B']
        >>> split_slides('---\\n# A\\n---')
        ['---\\n# A\\n---']
        >>> split_slides('')
        []
    """
    if not body:
        return []
    lines = body.split("\n")
    slides: List[str] = []
    current: List[str] = [lines[0]]
    for index in range(1, len(lines)):
        if lines[index] == SLIDE_SEPARATOR and index < len(lines) - 1:
            slides.append("\n".join(current))
            current = []
        else:
            current.append(lines[index])
    slides.append("\n".join(current))
    return slides


class DocumentService:
    """Parses, serializes, loads and saves Marp decks.

    The service holds no per-deck state; every load re-reads the file.
    """

    def __init__(self, encoding: Optional[str] = None, default_frontmatter: Optional[str] = None):
        """Initialize document service.

        Args:
            encoding: File encoding, defaults to ``settings.file_encoding``
            default_frontmatter: Frontmatter body used for decks without one,
                defaults to ``settings.default_frontmatter``
        """
        self.encoding = encoding or settings.file_encoding
        if default_frontmatter is None:
            self.default_frontmatter = settings.frontmatter_block
        else:
            self.default_frontmatter = f"{FRONTMATTER_DELIMITER}\n{default_frontmatter.strip()}\n{FRONTMATTER_DELIMITER}"

    def parse(self, raw: str) -> Document:
        """Split raw deck text into frontmatter and slides.

        If the first line is not ``---``, or no closing ``---`` line follows it,
        the default frontmatter is used and the whole input becomes the body.
        Windows line endings are normalized first.

        Args:
            raw: Full file contents

        Returns:
            Document: Frontmatter (delimiters included) and the untrimmed slide bodies

        Examples:
            >>> service = DocumentService(default_frontmatter='marp: true')
            >>> service.parse('# Only a slide').frontmatter
            '---\\nmarp: true\\n---'
            >>> service.parse('# Only a slide').slides
            ['# Only a slide']
            >>> service.parse('---\\ntheme: x\\nno closing line').slides
            ['---\\ntheme: x\\nno closing line']
            >>> service.parse('---\\nmarp: true\\n---\\n').slides
            []
            >>> service.parse('').slides
            []
        """
        text = raw.replace("\r\n", "\n")
        lines = text.split("\n")

        frontmatter = self.default_frontmatter
        body = text.strip()
        if lines[0].strip() == FRONTMATTER_DELIMITER:
            closing = next((i for i in range(1, len(lines)) if lines[i].strip() == FRONTMATTER_DELIMITER), None)
            if closing is not None:
                frontmatter = "\n".join(lines[: closing + 1])
                body = "\n".join(lines[closing + 1 :]).strip()

        return Document(frontmatter=frontmatter, slides=split_slides(body))

    @staticmethod
    def serialize(frontmatter: str, slides: Sequence[str]) -> str:
        """Join frontmatter and slides into deck text.

        Slides are trimmed and empty ones dropped; survivors are separated by a
        blank-line-delimited ``---``.

        Args:
            frontmatter: Delimited frontmatter block
            slides: Slide bodies

        Returns:
            str: Deck text; just the frontmatter when no slide survives

        Examples:
            >>> DocumentService.serialize('---\\nmarp: true\\n---', ['  # A  ', '   ', '# B'])
            '---\\nmarp: true\\n---\\n\\n# A\\n\\n---\\n\\n# B'
            >>> DocumentService.serialize('---\\nmarp: true\\n---', ['', '\\n'])
            '---\\nmarp: true\\n---'
        """
        kept = [slide.strip() for slide in slides if slide.strip()]
        if not kept:
            return frontmatter
        return frontmatter + "\n\n" + SERIALIZED_SLIDE_SEPARATOR.join(kept)

    async def load(self, file_path: Union[str, Path]) -> Document:
        """Read and parse a deck file.

        Args:
            file_path: Path of the deck

        Returns:
            Document: The parsed deck

        Raises:
            DocumentReadError: If the file is missing, unreadable or not decodable
        """
        try:
            raw = await asyncio.to_thread(Path(file_path).read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read deck {file_path}: {e}")
            raise DocumentReadError(f"Could not read file at {file_path}") from e
        document = self.parse(raw)
        logger.debug(f"Loaded {file_path} with {document.slide_count} slides")
        return document

    async def save(self, file_path: Union[str, Path], document: Document) -> str:
        """Serialize and write a deck file.

        Args:
            file_path: Path of the deck
            document: Deck to write

        Returns:
            str: The text that was written

        Raises:
            DocumentWriteError: If the file cannot be written
        """
        content = self.serialize(document.frontmatter, document.slides)
        try:
            await asyncio.to_thread(Path(file_path).write_text, content, encoding=self.encoding)
        except OSError as e:
            logger.error(f"Could not write deck {file_path}: {e}")
            raise DocumentWriteError(f"Could not write file at {file_path}: {e}") from e
        logger.debug(f"Saved {file_path}")
        return content
