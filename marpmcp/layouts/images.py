# -*- coding: utf-8 -*-
"""Location: ./marpmcp/layouts/images.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Image layouts using Marp image directives: a sized centered image, a fixed-height
centered image with caption, a bullet list beside a right-hand background image,
and a background figure with overlaid content.
"""

# Standard
from typing import Any, Mapping

# First-Party
from marpmcp.layouts.base import array_param, bullet_list, citation_line, citation_list, format_number, heading, number_param, string_param
from marpmcp.models import LayoutDescriptor

IMAGE_PATH_HELP = "Image file path (local paths supported, e.g., ./attachments/image.png)"


def render_image(params: Mapping[str, Any]) -> str:
    """Render a centered image with optional size hints.

    Args:
        params: ``imagePath``, optional ``heading``, ``height``, ``width`` and ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> render_image({'imagePath': './a.png', 'height': 330, 'width': '80%'})
        '![center h:330 w:80%](./a.png)'
    """
    directive = "![center"
    if params.get("height"):
        directive += f" h:{format_number(params['height'])}"
    if params.get("width"):
        directive += f" w:{params['width']}"
    directive += f"]({params['imagePath']})"
    return heading(params) + directive + citation_list(params.get("citations"))


def render_image_center(params: Mapping[str, Any]) -> str:
    """Render a fixed-height centered image with an optional caption.

    Args:
        params: ``heading``, ``imagePath``, optional ``description`` and ``citations``

    Returns:
        str: Slide markdown
    """
    slide = heading(params) + f"![center h:350]({params['imagePath']})"
    if params.get("description"):
        slide += f"\n\n{params['description']}"
    return slide + citation_line(params.get("citations"))


def render_image_right(params: Mapping[str, Any]) -> str:
    """Render a bullet list with a background image on the right half.

    Args:
        params: ``heading``, ``list``, ``imagePath`` and optional ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> render_image_right({'heading': 'H', 'list': ['a'], 'imagePath': 'x.png'})
        '## H\\n\\n- a\\n\\n![bg right:50% contain](x.png)'
    """
    slide = heading(params) + bullet_list(params["list"])
    slide += f"\n![bg right:50% contain]({params['imagePath']})"
    return slide + citation_line(params.get("citations"))


def render_figure(params: Mapping[str, Any]) -> str:
    """Render a background image with overlaid content.

    Args:
        params: ``imagePath``, optional ``heading``, ``content``, ``imagePosition``,
            ``imageSize`` and ``citations``

    Returns:
        str: Slide markdown

    Examples:
        >>> render_figure({'imagePath': 'f.png'})
        '![bg right contain](f.png)'
    """
    slide = heading(params)
    if params.get("content"):
        slide += f"{params['content']}\n\n"
    position = params.get("imagePosition") or "right"
    size = params.get("imageSize") or "contain"
    slide += f"![bg {position} {size}]({params['imagePath']})"
    return slide + citation_list(params.get("citations"))


IMAGE_LAYOUT = LayoutDescriptor(
    name="image",
    description="Slide with centered image",
    params={
        "heading": string_param("Slide heading (max 50 chars, displays as h2)", max_length=50),
        "imagePath": string_param(IMAGE_PATH_HELP, required=True),
        "height": number_param("Image height in pixels (e.g., 330)"),
        "width": string_param("Image width (e.g., '80%', '500px')"),
        "citations": array_param("Citations/references (array of strings)"),
    },
    template=render_image,
)

IMAGE_CENTER_LAYOUT = LayoutDescriptor(
    name="image-center",
    description="Slide with centered image (fixed h:350)",
    params={
        "heading": string_param("Slide heading (max 40 chars, ~22 chars for Japanese)", required=True, max_length=40),
        "imagePath": string_param(IMAGE_PATH_HELP, required=True),
        "description": string_param("Image description below image (max 55 chars, ~33 chars for Japanese)", max_length=55),
        "citations": string_param("Citation (max 50 chars, ~30 chars for Japanese, no line break)", max_length=50),
    },
    template=render_image_center,
)

IMAGE_RIGHT_LAYOUT = LayoutDescriptor(
    name="image-right",
    description="Slide with image on right and content list (allows more explanation than image-center)",
    params={
        "heading": string_param("Slide heading (max 17 chars, ~10 chars for Japanese)", required=True, max_length=17),
        "list": array_param("List items (max 8 items, each max 23 chars, ~14 chars for Japanese)", required=True, max_items=8, max_length=23),
        "imagePath": string_param(IMAGE_PATH_HELP, required=True),
        "citations": string_param("Citation (max 50 chars, ~30 chars for Japanese, no line break)", max_length=50),
    },
    template=render_image_right,
)

FIGURE_LAYOUT = LayoutDescriptor(
    name="figure",
    description="Slide with background image and content overlay",
    params={
        "heading": string_param("Slide heading (max 50 chars, displays as h2)", max_length=50),
        "content": string_param("Content text (max 300 chars recommended, markdown supported)", max_length=500),
        "imagePath": string_param(IMAGE_PATH_HELP, required=True),
        "imagePosition": string_param("Image position: 'right' or 'left' (default: 'right')"),
        "imageSize": string_param("Image size: 'cover' or 'contain' (default: 'contain')"),
        "citations": array_param("Citations/references (array of strings)"),
    },
    template=render_figure,
)
