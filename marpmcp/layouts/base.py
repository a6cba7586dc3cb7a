# -*- coding: utf-8 -*-
"""Location: ./marpmcp/layouts/base.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Shared building blocks for layout definitions: parameter spec factories and
the markdown fragments several templates have in common.
"""

# Standard
from typing import Any, Iterable, Mapping, Optional, Union

# First-Party
from marpmcp.models import ParamKind, ParamSpec


def string_param(description: str, required: bool = False, max_length: Optional[int] = None) -> ParamSpec:
    """Declare a string parameter.

    Args:
        description: Help text
        required: Whether the parameter must be supplied
        max_length: Optional maximum length in characters

    Returns:
        ParamSpec: The parameter schema

    Examples:
        >>> string_param('Heading', required=True, max_length=40).max_length
        40
    """
    return ParamSpec(kind=ParamKind.STRING, description=description, required=required, max_length=max_length)


def array_param(description: str, required: bool = False, max_items: Optional[int] = None, max_length: Optional[int] = None) -> ParamSpec:
    """Declare an array parameter.

    Args:
        description: Help text
        required: Whether the parameter must be supplied
        max_items: Optional maximum number of items
        max_length: Optional maximum length of each string item

    Returns:
        ParamSpec: The parameter schema
    """
    return ParamSpec(kind=ParamKind.ARRAY, description=description, required=required, max_items=max_items, max_length=max_length)


def number_param(description: str, required: bool = False) -> ParamSpec:
    """Declare a numeric parameter.

    Args:
        description: Help text
        required: Whether the parameter must be supplied

    Returns:
        ParamSpec: The parameter schema
    """
    return ParamSpec(kind=ParamKind.NUMBER, description=description, required=required)


def format_number(value: Union[int, float]) -> str:
    """Format a number the way it should appear inside a Marp image directive.

    Args:
        value: Integer or float

    Returns:
        str: Integral floats lose their trailing ``.0``

    Examples:
        >>> format_number(330)
        '330'
        >>> format_number(330.0)
        '330'
        >>> format_number(12.5)
        '12.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def heading(params: Mapping[str, Any], level: int = 2, key: str = "heading") -> str:
    """Render an optional heading line followed by a blank line.

    Args:
        params: Layout parameters
        level: Markdown heading level
        key: Parameter holding the heading text

    Returns:
        str: ``"## text\\n\\n"`` or an empty string

    Examples:
        >>> heading({'heading': 'Intro'})
        '## Intro\\n\\n'
        >>> heading({}, level=1)
        ''
    """
    text = params.get(key)
    if not text:
        return ""
    return f"{'#' * level} {text}\n\n"


def citation_list(citations: Optional[Iterable[str]]) -> str:
    """Render a list of citations as footer blockquotes.

    Args:
        citations: Citation strings, may be None or empty

    Returns:
        str: One ``> citation`` line per entry after a blank line, or an empty string

    Examples:
        >>> citation_list(['Doe 2020', 'Roe 2021'])
        '\\n\\n> Doe 2020\\n> Roe 2021\\n'
        >>> citation_list([])
        ''
    """
    if not citations:
        return ""
    return "\n\n" + "".join(f"> {citation}\n" for citation in citations)


def citation_line(citation: Optional[str], separator: str = "\n\n") -> str:
    """Render a single citation as a footer blockquote.

    Args:
        citation: Citation text, may be None or empty
        separator: Text placed before the blockquote

    Returns:
        str: ``separator + "> citation"`` or an empty string

    Examples:
        >>> citation_line('Doe 2020')
        '\\n\\n> Doe 2020'
        >>> citation_line(None)
        ''
    """
    if not citation:
        return ""
    return f"{separator}> {citation}"


def bullet_list(items: Iterable[Any], prefix: str = "") -> str:
    """Render items as a markdown bullet list, one line per item.

    Args:
        items: List entries
        prefix: Text placed before each ``- `` marker (e.g. blockquote nesting)

    Returns:
        str: The bullet lines, each terminated by a newline

    Examples:
        >>> bullet_list(['a', 'b'])
        '- a\\n- b\\n'
        >>> bullet_list(['x'], prefix='> > ')
        '> > - x\\n'
    """
    return "".join(f"{prefix}- {item}\n" for item in items)
