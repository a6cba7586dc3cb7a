# -*- coding: utf-8 -*-
"""Location: ./marpmcp/layouts/titles.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Title-style layouts: section breaks, the presentation title slide and lead slides.

Examples:
    >>> print(SECTION_LAYOUT.render({'title': 'Results', 'subtitle': 'Phase 1'}))
    # Results
    ## Phase 1
    <BLANKLINE>
    <!-- _class: section -->
"""

# Standard
from typing import Any, Mapping

# First-Party
from marpmcp.layouts.base import array_param, citation_list, string_param
from marpmcp.models import LayoutDescriptor


def render_section(params: Mapping[str, Any]) -> str:
    """Render a centered section break slide.

    Args:
        params: ``title`` and optional ``subtitle``

    Returns:
        str: Slide markdown
    """
    slide = f"# {params['title']}\n"
    if params.get("subtitle"):
        slide += f"## {params['subtitle']}\n"
    slide += "\n<!-- _class: section -->"
    return slide


def render_title(params: Mapping[str, Any]) -> str:
    """Render the presentation title slide.

    Args:
        params: ``heading``, optional ``content`` and ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> render_title({'heading': 'New'})
        '# New\\n\\n<!-- _class: lead -->'
    """
    slide = f"# {params['heading']}\n"
    if params.get("content"):
        slide += f"\n{params['content']}\n"
    slide += "\n<!-- _class: lead -->"
    slide += citation_list(params.get("citations"))
    return slide


def render_lead(params: Mapping[str, Any]) -> str:
    """Render a lead slide with left-aligned headings.

    Args:
        params: ``heading`` and optional ``content``

    Returns:
        str: Slide markdown
    """
    slide = f"# {params['heading']}\n"
    if params.get("content"):
        slide += f"\n{params['content']}\n"
    slide += "\n<!-- _class: lead -->"
    return slide


SECTION_LAYOUT = LayoutDescriptor(
    name="section",
    description="Section break slide with centered title and subtitle",
    class_name="section",
    params={
        "title": string_param("Section title (max 30 chars, ~18 chars for Japanese)", required=True, max_length=30),
        "subtitle": string_param("Section subtitle (max 40 chars, ~22 chars for Japanese)", max_length=40),
    },
    template=render_section,
)

TITLE_LAYOUT = LayoutDescriptor(
    name="title",
    description="Title slide with heading and content (left-aligned, maroon color)",
    class_name="lead",
    params={
        "heading": string_param("Main heading (max 80 chars for optimal display)", required=True, max_length=80),
        "content": string_param("Content like author info (markdown supported, keep concise)", max_length=500),
        "citations": array_param("Citations/references (array of strings)"),
    },
    template=render_title,
)

LEAD_LAYOUT = LayoutDescriptor(
    name="lead",
    description="Lead slide with left-aligned maroon headings",
    class_name="lead",
    params={
        "heading": string_param("Main heading", required=True, max_length=80),
        "content": string_param("Content (markdown supported)"),
    },
    template=render_lead,
)
