# -*- coding: utf-8 -*-
"""Location: ./marpmcp/utils/slide_address.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Slide addressing.
A slide can be addressed by its 1-based position (frontmatter is never counted)
or by its embedded identifier. Both strategies implement the same
``resolve(slides) -> index | None`` interface; which one is used depends only
on the type of target the caller supplies.

Examples:
    >>> slides = ['# A', '<!-- slide-id: 9f-01 -->\\n\\n# B']
    >>> parse_slide_address(2).resolve(slides)
    1
    >>> parse_slide_address('9f-01').resolve(slides)
    1
    >>> parse_slide_address(3).resolve(slides) is None
    True
"""

# Standard
from abc import ABC, abstractmethod
import re
from typing import Optional, Sequence, Union

# First-Party
from marpmcp.utils.slide_id import find_slide_index_by_id

SLIDE_ID_FORMAT = re.compile(r"^[a-f0-9-]+$", re.IGNORECASE)
SLIDE_NUMBER_FORMAT = re.compile(r"^\d+$")


class SlideAddress(ABC):
    """A way of pointing at one slide of a deck."""

    @abstractmethod
    def resolve(self, slides: Sequence[str]) -> Optional[int]:
        """Resolve the address to a list index.

        Args:
            slides: Slide bodies in deck order

        Returns:
            Optional[int]: The list index, or None if the address matches no slide
        """

    @abstractmethod
    def not_found_message(self, slide_count: int) -> str:
        """Explain why the address did not resolve.

        Args:
            slide_count: Number of slides in the deck

        Returns:
            str: Human readable error message
        """


class SlideNumberAddress(SlideAddress):
    """Address a slide by its 1-based position.

    Examples:
        >>> SlideNumberAddress(1).resolve(['# A'])
        0
        >>> SlideNumberAddress(0).resolve(['# A']) is None
        True
        >>> SlideNumberAddress(5).not_found_message(2)
        'Invalid slide number 5. Must be between 1 and 2'
        >>> SlideNumberAddress(1).not_found_message(0)
        'Invalid slide number 1. The presentation has no slides'
    """

    def __init__(self, number: int):
        """Initialize the address.

        Args:
            number: 1-based slide number
        """
        self.number = number

    def resolve(self, slides: Sequence[str]) -> Optional[int]:
        """Resolve the slide number to a list index.

        Args:
            slides: Slide bodies in deck order

        Returns:
            Optional[int]: ``number - 1`` when in range, else None
        """
        if 1 <= self.number <= len(slides):
            return self.number - 1
        return None

    def not_found_message(self, slide_count: int) -> str:
        """Explain an out-of-range slide number.

        Args:
            slide_count: Number of slides in the deck

        Returns:
            str: Human readable error message
        """
        if slide_count == 0:
            return f"Invalid slide number {self.number}. The presentation has no slides"
        return f"Invalid slide number {self.number}. Must be between 1 and {slide_count}"

    def __str__(self) -> str:
        return f"slide {self.number}"


class SlideIdAddress(SlideAddress):
    """Address a slide by its embedded identifier.

    Examples:
        >>> str(SlideIdAddress('ab-12'))
        'slide ab-12'
        >>> SlideIdAddress('ab-12').not_found_message(3)
        'Slide with ID "ab-12" not found'
    """

    def __init__(self, slide_id: str):
        """Initialize the address.

        Args:
            slide_id: Slide identifier
        """
        self.slide_id = slide_id

    def resolve(self, slides: Sequence[str]) -> Optional[int]:
        """Resolve the identifier to a list index.

        Args:
            slides: Slide bodies in deck order

        Returns:
            Optional[int]: Index of the first slide carrying the identifier, or None
        """
        return find_slide_index_by_id(slides, self.slide_id)

    def not_found_message(self, slide_count: int) -> str:
        """Explain an unknown identifier.

        Args:
            slide_count: Number of slides in the deck (unused)

        Returns:
            str: Human readable error message
        """
        return f'Slide with ID "{self.slide_id}" not found'

    def __str__(self) -> str:
        return f"slide {self.slide_id}"


def parse_slide_address(target: Union[int, str]) -> SlideAddress:
    """Build the address strategy matching a caller supplied target.

    Integers and all-digit strings are slide numbers; other hex-and-dash strings
    are slide identifiers, matched without regard to case. An all-digit
    identifier therefore cannot be used as a target; generated identifiers are
    UUIDs and always contain dashes.

    Args:
        target: Slide number or slide identifier

    Returns:
        SlideAddress: The address strategy

    Raises:
        ValueError: If the target is neither a slide number nor a well formed identifier

    Examples:
        >>> type(parse_slide_address('3')).__name__
        'SlideNumberAddress'
        >>> type(parse_slide_address('1b4e28ba-2fa1-11d2-883f-0016d3cca427')).__name__
        'SlideIdAddress'
        >>> try:
        ...     parse_slide_address('slide one')
        ... except ValueError as e:
        ...     print(e)
        Invalid slide target "slide one": expected a slide number or a slide ID
        >>> try:
        ...     parse_slide_address(True)
        ... except ValueError as e:
        ...     print(e)
        Invalid slide target "True": expected a slide number or a slide ID
    """
    if isinstance(target, bool):
        raise ValueError(f'Invalid slide target "{target}": expected a slide number or a slide ID')
    if isinstance(target, int):
        return SlideNumberAddress(target)
    if isinstance(target, str):
        value = target.strip()
        if SLIDE_NUMBER_FORMAT.match(value):
            return SlideNumberAddress(int(value))
        if SLIDE_ID_FORMAT.match(value):
            return SlideIdAddress(value)
    raise ValueError(f'Invalid slide target "{target}": expected a slide number or a slide ID')
