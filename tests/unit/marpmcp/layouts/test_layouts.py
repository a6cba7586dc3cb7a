# -*- coding: utf-8 -*-
"""Tests for the layout registry and layout templates.

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti
"""

# Third-Party
import pytest

# First-Party
from marpmcp.layouts import get_layout, LAYOUTS, list_layout_names, list_layouts

EXPECTED_ORDER = [
    "section",
    "title",
    "lead",
    "content",
    "list",
    "quote",
    "table",
    "two-column",
    "multi-column",
    "image",
    "image-center",
    "image-right",
    "figure",
]


# --------------------------------------------------------------------------- #
#                                 registry                                    #
# --------------------------------------------------------------------------- #
def test_layout_names_in_registration_order():
    assert list_layout_names() == EXPECTED_ORDER


def test_get_layout_unknown_returns_none():
    assert get_layout("hero") is None
    assert get_layout("") is None


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        LAYOUTS["hero"] = LAYOUTS["list"]  # type: ignore[index]


def test_list_layouts_describes_params():
    described = {layout["name"]: layout for layout in list_layouts()}

    list_info = described["list"]
    assert list_info["description"].startswith("List slide")
    params = {p["name"]: p for p in list_info["params"]}
    assert params["heading"] == {
        "name": "heading",
        "type": "string",
        "description": params["heading"]["description"],
        "required": True,
        "maxLength": 40,
    }
    assert params["list"]["maxItems"] == 8
    assert params["list"]["maxLength"] == 50
    assert "maxItems" not in params["citations"]

    assert described["section"]["className"] == "section"
    assert described["title"]["className"] == "lead"
    assert described["content"]["className"] is None


def test_every_layout_renders_required_params():
    samples = {"string": "Sample", "array": ["one", "two"], "number": 200}
    for name in EXPECTED_ORDER:
        layout = get_layout(name)
        params = {param: samples[spec.kind.value] for param, spec in layout.params.items() if spec.required}
        rendered = layout.render(params)
        assert isinstance(rendered, str) and rendered.strip(), name


# --------------------------------------------------------------------------- #
#                                 templates                                   #
# --------------------------------------------------------------------------- #
def test_section_with_subtitle():
    assert get_layout("section").render({"title": "Results", "subtitle": "2024"}) == "# Results\n## 2024\n\n<!-- _class: section -->"


def test_title_with_content_and_citations():
    rendered = get_layout("title").render({"heading": "Talk", "content": "Jane Doe", "citations": ["Doe 2020"]})
    assert rendered == "# Talk\n\nJane Doe\n\n<!-- _class: lead -->\n\n> Doe 2020\n"


def test_list_with_citation():
    rendered = get_layout("list").render({"heading": "Agenda", "list": ["a", "b"], "citations": "Doe 2020"})
    assert rendered == "## Agenda\n\n- a\n- b\n\n> Doe 2020"


def test_content_without_heading():
    assert get_layout("content").render({"content": "Body"}) == "Body"


def test_quote_with_citation():
    rendered = get_layout("quote").render({"heading": "Wisdom", "quote": "Less is more", "citation": "Mies"})
    assert rendered == "# Wisdom\n\n> Less is more — Mies"


def test_table_with_heading_and_classes():
    rendered = get_layout("table").render({"heading": "Data", "tableMarkdown": "| a |\n|---|", "tableClass": "small center"})
    assert rendered == "# Data\n\n| a |\n|---|\n\n<!-- _class: table-small table-center -->"


def test_two_column_structure():
    rendered = get_layout("two-column").render(
        {"heading": "Compare", "column1Heading": "A", "column1List": ["x"], "column2Heading": "B", "column2List": ["y", "z"], "citations": "Ref"}
    )
    assert rendered.startswith("## Compare\n\n> > ### A\n")
    assert "> > - x\n>\n> > ### B\n" in rendered
    assert rendered.endswith("> > - z\n\n\n> Ref")


def test_multi_column_with_heading():
    rendered = get_layout("multi-column").render({"heading": "Three", "columns": ["a", "b", "c"]})
    assert rendered == "# Three\n\n> > a\n>\n> > b\n>\n> > c"


def test_image_height_float_is_formatted():
    rendered = get_layout("image").render({"imagePath": "p.png", "height": 330.0})
    assert rendered == "![center h:330](p.png)"


def test_image_center_with_description():
    rendered = get_layout("image-center").render({"heading": "Chart", "imagePath": "c.png", "description": "Growth", "citations": "Src"})
    assert rendered == "## Chart\n\n![center h:350](c.png)\n\nGrowth\n\n> Src"


def test_figure_options():
    rendered = get_layout("figure").render({"heading": "Fig", "content": "Text", "imagePath": "f.png", "imagePosition": "left", "imageSize": "cover"})
    assert rendered == "## Fig\n\nText\n\n![bg left cover](f.png)"
