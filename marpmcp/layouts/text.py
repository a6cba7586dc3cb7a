# -*- coding: utf-8 -*-
"""Location: ./marpmcp/layouts/text.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Text layouts: free-form content, bullet lists and quotes.

Examples:
    >>> print(LIST_LAYOUT.render({'heading': 'H', 'list': ['a', 'b']}))
    ## H
    <BLANKLINE>
    - a
    - b
    <BLANKLINE>
"""

# Standard
from typing import Any, Mapping

# First-Party
from marpmcp.layouts.base import array_param, bullet_list, citation_line, citation_list, heading, string_param
from marpmcp.models import LayoutDescriptor


def render_content(params: Mapping[str, Any]) -> str:
    """Render a standard content slide.

    Args:
        params: ``content``, optional ``heading`` and ``citations``

    Returns:
        str: Slide markdown
    """
    return heading(params) + params["content"] + citation_list(params.get("citations"))


def render_list(params: Mapping[str, Any]) -> str:
    """Render a bullet point slide.

    Args:
        params: ``heading``, ``list`` and optional single-line ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> render_list({'heading': 'H', 'list': ['a'], 'citations': 'Doe 2020'})
        '## H\\n\\n- a\\n\\n> Doe 2020'
    """
    return heading(params) + bullet_list(params["list"]) + citation_line(params.get("citations"), separator="\n")


def render_quote(params: Mapping[str, Any]) -> str:
    """Render a quote slide with the citation in the footer.

    Args:
        params: ``quote``, optional ``heading``, ``content`` and ``citation``

    Returns:
        str: Slide markdown
    """
    slide = heading(params, level=1)
    if params.get("content"):
        slide += f"{params['content']}\n\n"
    slide += f"> {params['quote']}"
    if params.get("citation"):
        slide += f" — {params['citation']}"
    return slide


CONTENT_LAYOUT = LayoutDescriptor(
    name="content",
    description="Standard content slide with optional h2 heading",
    params={
        "heading": string_param("Slide heading (max 80 chars, displays as h2)", max_length=80),
        "content": string_param("Content (markdown supported, keep concise - max 800 chars recommended)", required=True, max_length=1500),
        "citations": array_param("Citations/references (array of strings)"),
    },
    template=render_content,
)

LIST_LAYOUT = LayoutDescriptor(
    name="list",
    description="List slide with bullet points (max 8 items)",
    params={
        "heading": string_param("Slide heading (max 40 chars, ~22 chars for Japanese)", required=True, max_length=40),
        "list": array_param("List items (max 8 items, each max 50 chars, ~30 chars for Japanese)", required=True, max_items=8, max_length=50),
        "citations": string_param("Citation (max 50 chars, ~30 chars for Japanese, no line break)", max_length=50),
    },
    template=render_list,
)

QUOTE_LAYOUT = LayoutDescriptor(
    name="quote",
    description="Quote slide with citation in footer",
    params={
        "heading": string_param("Slide heading", max_length=80),
        "content": string_param("Main content before quote"),
        "quote": string_param("Quote text", required=True, max_length=300),
        "citation": string_param("Citation/source", max_length=100),
    },
    template=render_quote,
)
