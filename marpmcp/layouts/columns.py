# -*- coding: utf-8 -*-
"""Location: ./marpmcp/layouts/columns.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Column layouts built from the theme's double blockquote syntax.
"""

# Standard
from typing import Any, Mapping

# First-Party
from marpmcp.layouts.base import array_param, bullet_list, citation_line, citation_list, heading, string_param
from marpmcp.models import LayoutDescriptor


def render_two_column(params: Mapping[str, Any]) -> str:
    """Render two headed bullet columns.

    Args:
        params: ``heading``, ``column1Heading``, ``column1List``, ``column2Heading``,
            ``column2List`` and optional single-line ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> lines = render_two_column({'heading': 'Pros/Cons', 'column1Heading': 'Pros', 'column1List': ['fast'],
        ...                            'column2Heading': 'Cons', 'column2List': ['new']}).splitlines()
        >>> lines[2:7]
        ['> > ### Pros', '> > ', '> > - fast', '>', '> > ### Cons']
    """
    slide = heading(params)
    slide += f"> > ### {params['column1Heading']}\n> > \n"
    slide += bullet_list(params["column1List"], prefix="> > ")
    slide += ">\n"
    slide += f"> > ### {params['column2Heading']}\n> > \n"
    slide += bullet_list(params["column2List"], prefix="> > ")
    return slide + citation_line(params.get("citations"))


def render_multi_column(params: Mapping[str, Any]) -> str:
    """Render free-form markdown columns.

    Args:
        params: ``columns``, optional ``heading`` and ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> render_multi_column({'columns': ['A\\nB', 'C']})
        '> > A\\n> > B\\n>\\n> > C'
    """
    blocks = ["\n".join(f"> > {line}" for line in column.strip().split("\n")) for column in params["columns"]]
    return heading(params, level=1) + "\n>\n".join(blocks) + citation_list(params.get("citations"))


TWO_COLUMN_LAYOUT = LayoutDescriptor(
    name="two-column",
    description="Two-column layout for comparing or discussing two topics (different from list)",
    params={
        "heading": string_param("Slide heading (max 40 chars, ~22 chars for Japanese)", required=True, max_length=40),
        "column1Heading": string_param("Column 1 heading (max 17 chars, ~10 chars for Japanese)", required=True, max_length=17),
        "column1List": array_param("Column 1 list items (max 6 items, each max 23 chars, ~14 chars for Japanese)", required=True, max_items=6, max_length=23),
        "column2Heading": string_param("Column 2 heading (max 17 chars, ~10 chars for Japanese)", required=True, max_length=17),
        "column2List": array_param("Column 2 list items (max 6 items, each max 23 chars, ~14 chars for Japanese)", required=True, max_items=6, max_length=23),
        "citations": string_param("Citation (max 50 chars, ~30 chars for Japanese, no line break)", max_length=50),
    },
    template=render_two_column,
)

MULTI_COLUMN_LAYOUT = LayoutDescriptor(
    name="multi-column",
    description="Multi-column layout (2-3 columns) using double blockquote",
    params={
        "heading": string_param("Slide heading", max_length=80),
        "columns": array_param("Array of column contents (markdown supported)", required=True),
        "citations": array_param("Citations/references (array of strings)"),
    },
    template=render_multi_column,
)
