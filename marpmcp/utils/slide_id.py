# -*- coding: utf-8 -*-
"""Location: ./marpmcp/utils/slide_id.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Slide identity utilities.
Each slide can carry a stable identifier embedded as a markdown comment,
``<!-- slide-id: <uuid4> -->``, followed by a blank line and the slide content.
Identifiers survive reordering and are unique within a deck.

Note that extraction matches the first identity comment anywhere in a slide
body, not only at the top.

Examples:
    >>> body, slide_id = ensure_slide_id('# Hello')
    >>> extract_slide_id(body) == slide_id
    True
    >>> ensure_slide_id(body) == (body, slide_id)
    True
"""

# Standard
import re
from typing import Dict, List, Optional, Sequence, Tuple
import uuid

SLIDE_ID_PATTERN = re.compile(r"<!--\s*slide-id:\s*([a-f0-9-]+)\s*-->", re.IGNORECASE)
LEADING_SLIDE_ID_PATTERN = re.compile(r"\A\s*<!--\s*slide-id:\s*[a-f0-9-]+\s*-->[ \t]*\n*", re.IGNORECASE)


def generate_slide_id() -> str:
    """Generate a new slide identifier.

    Returns:
        str: A random UUID v4 string

    Examples:
        >>> len(generate_slide_id())
        36
        >>> generate_slide_id() != generate_slide_id()
        True
    """
    return str(uuid.uuid4())


def extract_slide_id(slide: str) -> Optional[str]:
    """Extract the identifier of a slide.

    Args:
        slide: Slide body

    Returns:
        Optional[str]: The first embedded identifier, or None

    Examples:
        >>> extract_slide_id('<!-- slide-id: 0a1b-2c -->\\n\\n# A')
        '0a1b-2c'
        >>> extract_slide_id('<!--SLIDE-ID:ff-->')
        'ff'
        >>> extract_slide_id('# No id') is None
        True
    """
    match = SLIDE_ID_PATTERN.search(slide)
    return match.group(1) if match else None


def stamp_slide_id(slide: str, slide_id: str) -> str:
    """Prepend an identity comment to a slide body.

    Args:
        slide: Slide body without an identity comment
        slide_id: Identifier to embed

    Returns:
        str: ``<!-- slide-id: ... -->``, a blank line, then the trimmed body

    Examples:
        >>> stamp_slide_id('  # A  ', 'abc')
        '<!-- slide-id: abc -->\\n\\n# A'
    """
    return f"<!-- slide-id: {slide_id} -->\n\n{slide.strip()}"


def strip_slide_id(slide: str) -> str:
    """Remove a leading identity comment from a slide body.

    Args:
        slide: Slide body

    Returns:
        str: The body without its leading identity comment and the blank lines after it

    Examples:
        >>> strip_slide_id('<!-- slide-id: abc -->\\n\\n# A')
        '# A'
        >>> strip_slide_id('# A')
        '# A'
    """
    return LEADING_SLIDE_ID_PATTERN.sub("", slide, count=1)


def ensure_slide_id(slide: str) -> Tuple[str, str]:
    """Make sure a slide carries an identifier.

    Args:
        slide: Slide body

    Returns:
        Tuple[str, str]: The (possibly updated) body and its identifier. Slides that
        already have an identifier are returned unchanged.
    """
    existing = extract_slide_id(slide)
    if existing:
        return slide, existing
    new_id = generate_slide_id()
    return stamp_slide_id(slide, new_id), new_id


def ensure_all_slide_ids(slides: Sequence[str]) -> Tuple[List[str], Dict[str, int]]:
    """Make sure every slide carries an identifier.

    The returned map reflects positions at the time of the call only; positions
    shift on every later insert or delete.

    Args:
        slides: Slide bodies in deck order

    Returns:
        Tuple[List[str], Dict[str, int]]: Updated slide bodies and a map of identifier to list index

    Examples:
        >>> updated, id_to_index = ensure_all_slide_ids(['<!-- slide-id: aa -->\\n\\n# A', '# B'])
        >>> updated[0]
        '<!-- slide-id: aa -->\\n\\n# A'
        >>> id_to_index['aa'], len(id_to_index)
        (0, 2)
    """
    updated: List[str] = []
    id_to_index: Dict[str, int] = {}
    for index, slide in enumerate(slides):
        body, slide_id = ensure_slide_id(slide)
        updated.append(body)
        id_to_index[slide_id] = index
    return updated, id_to_index


def find_slide_index_by_id(slides: Sequence[str], slide_id: str) -> Optional[int]:
    """Find the position of a slide by identifier, ignoring case.

    Args:
        slides: Slide bodies in deck order
        slide_id: Identifier to look for

    Returns:
        Optional[int]: List index of the first matching slide, or None

    Examples:
        >>> find_slide_index_by_id(['# A', '<!-- slide-id: bb -->\\n\\n# B'], 'bb')
        1
        >>> find_slide_index_by_id(['<!-- slide-id: BB -->'], 'bb')
        0
        >>> find_slide_index_by_id(['# A'], 'bb') is None
        True
    """
    wanted = slide_id.lower()
    for index, slide in enumerate(slides):
        found = extract_slide_id(slide)
        if found and found.lower() == wanted:
            return index
    return None
