# -*- coding: utf-8 -*-
"""Location: ./marpmcp/layouts/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Layout Registry.
A read-only, insertion-ordered table mapping layout names to descriptors. The
table is built once at import time from an explicit list; lookups of unknown
names return None rather than raising so callers can report the valid names.

Examples:
    >>> get_layout('list').name
    'list'
    >>> get_layout('nope') is None
    True
    >>> list_layout_names()[:3]
    ['section', 'title', 'lead']
    >>> [info['name'] for info in list_layouts()] == list_layout_names()
    True
"""

# Standard
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

# First-Party
from marpmcp.layouts.columns import MULTI_COLUMN_LAYOUT, TWO_COLUMN_LAYOUT
from marpmcp.layouts.images import FIGURE_LAYOUT, IMAGE_CENTER_LAYOUT, IMAGE_LAYOUT, IMAGE_RIGHT_LAYOUT
from marpmcp.layouts.table import TABLE_LAYOUT
from marpmcp.layouts.text import CONTENT_LAYOUT, LIST_LAYOUT, QUOTE_LAYOUT
from marpmcp.layouts.titles import LEAD_LAYOUT, SECTION_LAYOUT, TITLE_LAYOUT
from marpmcp.models import LayoutDescriptor

_REGISTERED = (
    SECTION_LAYOUT,
    TITLE_LAYOUT,
    LEAD_LAYOUT,
    CONTENT_LAYOUT,
    LIST_LAYOUT,
    QUOTE_LAYOUT,
    TABLE_LAYOUT,
    TWO_COLUMN_LAYOUT,
    MULTI_COLUMN_LAYOUT,
    IMAGE_LAYOUT,
    IMAGE_CENTER_LAYOUT,
    IMAGE_RIGHT_LAYOUT,
    FIGURE_LAYOUT,
)

LAYOUTS: Mapping[str, LayoutDescriptor] = MappingProxyType({layout.name: layout for layout in _REGISTERED})


def get_layout(name: str) -> Optional[LayoutDescriptor]:
    """Look up a layout by name.

    Args:
        name: Layout name

    Returns:
        Optional[LayoutDescriptor]: The descriptor, or None if no layout has that name
    """
    return LAYOUTS.get(name)


def list_layout_names() -> List[str]:
    """Return all layout names in registration order.

    Returns:
        List[str]: Layout names
    """
    return list(LAYOUTS)


def list_layouts() -> List[Dict[str, Any]]:
    """Describe every registered layout.

    Returns:
        List[Dict[str, Any]]: One ``{name, description, className, params}`` entry per layout
    """
    return [layout.describe() for layout in LAYOUTS.values()]


__all__ = ["LAYOUTS", "get_layout", "list_layout_names", "list_layouts"]
