# -*- coding: utf-8 -*-
"""Location: ./marpmcp/layouts/table.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Table layout with size and alignment classes.
"""

# Standard
from typing import Any, List, Mapping, Optional

# First-Party
from marpmcp.layouts.base import array_param, citation_list, heading, string_param
from marpmcp.models import LayoutDescriptor

TABLE_SIZES = ("tiny", "small", "large")


def table_classes(table_class: Optional[str]) -> List[str]:
    """Translate table options into theme class names.

    Unknown options are ignored.

    Args:
        table_class: Space separated options among ``center``, ``100``, ``tiny``, ``small``, ``large``

    Returns:
        List[str]: Theme classes in option order

    Examples:
        >>> table_classes('center small bogus')
        ['table-center', 'table-small']
        >>> table_classes('100')
        ['table-100']
        >>> table_classes(None)
        []
    """
    classes: List[str] = []
    for option in (table_class or "").split():
        if option == "center":
            classes.append("table-center")
        elif option == "100":
            classes.append("table-100")
        elif option in TABLE_SIZES:
            classes.append(f"table-{option}")
    return classes


def render_table(params: Mapping[str, Any]) -> str:
    """Render a table slide.

    Args:
        params: ``tableMarkdown``, optional ``heading``, ``tableClass`` and ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> render_table({'tableMarkdown': '| a |\\n|---|', 'tableClass': 'center'})
        '| a |\\n|---|\\n\\n<!-- _class: table-center -->'
    """
    slide = heading(params, level=1) + params["tableMarkdown"]
    classes = table_classes(params.get("tableClass"))
    if classes:
        slide += f"\n\n<!-- _class: {' '.join(classes)} -->"
    return slide + citation_list(params.get("citations"))


TABLE_LAYOUT = LayoutDescriptor(
    name="table",
    description="Table slide with customizable size and alignment",
    params={
        "heading": string_param("Slide heading", max_length=80),
        "tableMarkdown": string_param("Table in markdown format", required=True),
        "tableClass": string_param("Table class: center, 100, tiny, small, large (can combine with spaces)"),
        "citations": array_param("Citations/references (array of strings)"),
    },
    template=render_table,
)
