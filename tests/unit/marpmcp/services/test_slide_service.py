# -*- coding: utf-8 -*-
"""

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

"""

# Third-Party
import pytest

# First-Party
from marpmcp.models import LayoutDescriptor, ParamKind, ParamSpec
from marpmcp.schemas import ManageSlideRequest
from marpmcp.services.document_service import DocumentReadError
from marpmcp.services.slide_service import (
    MissingParameterError,
    ParameterLengthError,
    ParameterTypeError,
    SlideNotFoundError,
    SlideRenderError,
    SlideRequestError,
    UnknownLayoutError,
)
from marpmcp.utils.slide_id import extract_slide_id

ID_ONE = "aaaaaaaa-0000-4000-8000-000000000001"
ID_THREE = "aaaaaaaa-0000-4000-8000-000000000003"

LIST_PARAMS = {"heading": "Agenda", "list": ["Intro", "Method"]}


def request(path, **kwargs) -> ManageSlideRequest:
    return ManageSlideRequest(filePath=str(path), **kwargs)


async def slides_of(service, path):
    return (await service.document_service.load(path)).slides


# --------------------------------------------------------------------------- #
#                                  insert                                     #
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_insert_at_end_appends_and_stamps_id(slide_service, deck):
    result = await slide_service.manage_slide(request(deck, layoutType="list", params=LIST_PARAMS))

    assert result["success"] is True
    assert result["layoutType"] == "list"
    assert result["slideNumber"] == 4
    assert result["totalSlides"] == 4
    assert result["file"] == str(deck)

    slides = await slides_of(slide_service, deck)
    assert len(slides) == 4
    assert extract_slide_id(slides[3]) == result["slideId"]
    assert "## Agenda" in slides[3]
    assert "- Intro\n- Method" in slides[3]


@pytest.mark.asyncio
async def test_insert_at_start(slide_service, deck):
    result = await slide_service.manage_slide(request(deck, layoutType="section", position="start", params={"title": "Opening"}))

    slides = await slides_of(slide_service, deck)
    assert result["slideNumber"] == 1
    assert "# Opening" in slides[0]
    assert slides[1].strip() == "# One"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "position,target,expected_number",
    [
        ("after", 1, 2),
        ("after", 3, 4),
        ("before", 1, 1),
        ("before", "3", 3),
    ],
)
async def test_insert_relative_to_slide_number(slide_service, deck, position, target, expected_number):
    result = await slide_service.manage_slide(request(deck, layoutType="section", position=position, target=target, params={"title": "New"}))

    slides = await slides_of(slide_service, deck)
    assert result["slideNumber"] == expected_number
    assert "# New" in slides[expected_number - 1]
    assert len(slides) == 4


@pytest.mark.asyncio
async def test_insert_into_empty_deck(slide_service, empty_deck):
    result = await slide_service.manage_slide(request(empty_deck, layoutType="section", params={"title": "First"}))

    assert result["slideNumber"] == 1
    assert result["totalSlides"] == 1
    assert empty_deck.read_text(encoding="utf-8").startswith("---\nmarp: true\ntheme: academic\n---\n\n<!-- slide-id: ")


@pytest.mark.asyncio
async def test_insert_after_slide_id_from_generated_ids(slide_service, deck):
    generated = await slide_service.generate_slide_ids(str(deck))
    second_id = generated["slides"][1]["slideId"]

    result = await slide_service.manage_slide(request(deck, layoutType="list", position="after", slideId=second_id, params=LIST_PARAMS))

    assert result["slideNumber"] == 3
    slides = await slides_of(slide_service, deck)
    assert extract_slide_id(slides[1]) == second_id
    assert extract_slide_id(slides[2]) == result["slideId"]
    assert result["slideId"] != second_id


@pytest.mark.asyncio
async def test_insert_ignores_target_for_end_position(slide_service, deck):
    result = await slide_service.manage_slide(request(deck, layoutType="section", target=1, params={"title": "Tail"}))
    assert result["slideNumber"] == 4


@pytest.mark.asyncio
async def test_insert_mints_unique_ids(slide_service, empty_deck):
    first = await slide_service.manage_slide(request(empty_deck, layoutType="section", params={"title": "A"}))
    second = await slide_service.manage_slide(request(empty_deck, layoutType="section", params={"title": "B"}))
    assert first["slideId"] != second["slideId"]


# --------------------------------------------------------------------------- #
#                                  replace                                    #
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_replace_preserves_existing_id(slide_service, deck_with_ids):
    result = await slide_service.manage_slide(request(deck_with_ids, mode="replace", target=ID_THREE, layoutType="list", params=LIST_PARAMS))

    assert result["slideId"] == ID_THREE
    assert result["slideNumber"] == 3
    assert result["totalSlides"] == 3

    slides = await slides_of(slide_service, deck_with_ids)
    assert extract_slide_id(slides[2]) == ID_THREE
    assert "# Three" not in slides[2]
    assert "## Agenda" in slides[2]
    assert deck_with_ids.read_text(encoding="utf-8").count(ID_THREE) == 1


@pytest.mark.asyncio
async def test_replace_by_uppercase_id_keeps_stored_id(slide_service, deck_with_ids):
    result = await slide_service.manage_slide(request(deck_with_ids, mode="replace", target=ID_THREE.upper(), layoutType="list", params=LIST_PARAMS))

    assert result["slideId"] == ID_THREE
    assert result["slideNumber"] == 3


@pytest.mark.asyncio
async def test_replace_by_number_mints_id_when_missing(slide_service, deck_with_ids):
    result = await slide_service.manage_slide(request(deck_with_ids, mode="replace", slideNumber=2, layoutType="section", params={"title": "Two"}))

    slides = await slides_of(slide_service, deck_with_ids)
    assert result["slideId"] not in (ID_ONE, ID_THREE)
    assert extract_slide_id(slides[1]) == result["slideId"]
    assert extract_slide_id(slides[0]) == ID_ONE


@pytest.mark.asyncio
async def test_replace_requires_target(slide_service, tmp_path):
    # Shape checks run before the file is read
    with pytest.raises(SlideRequestError) as excinfo:
        await slide_service.manage_slide(request(tmp_path / "missing.md", mode="replace", layoutType="section", params={"title": "x"}))
    assert 'mode "replace"' in str(excinfo.value)


@pytest.mark.asyncio
async def test_replace_unknown_id(slide_service, deck_with_ids):
    before = deck_with_ids.read_text(encoding="utf-8")
    with pytest.raises(SlideNotFoundError) as excinfo:
        await slide_service.manage_slide(request(deck_with_ids, mode="replace", target="deadbeef", layoutType="section", params={"title": "x"}))
    assert str(excinfo.value) == 'Slide with ID "deadbeef" not found'
    assert deck_with_ids.read_text(encoding="utf-8") == before


# --------------------------------------------------------------------------- #
#                                  delete                                     #
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_delete_by_number(slide_service, deck):
    result = await slide_service.manage_slide(request(deck, mode="delete", target=2))

    assert result == {"success": True, "operation": "Deleted slide 2", "totalSlides": 2, "file": str(deck)}
    slides = await slides_of(slide_service, deck)
    assert [s.strip() for s in slides] == ["# One", "# Three"]


@pytest.mark.asyncio
async def test_delete_by_id_reports_id(slide_service, deck_with_ids):
    result = await slide_service.manage_slide(request(deck_with_ids, mode="delete", slideId=ID_ONE))

    assert result["slideId"] == ID_ONE
    assert result["totalSlides"] == 2
    assert ID_ONE not in deck_with_ids.read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_delete_only_slide_leaves_frontmatter(slide_service, make_deck):
    path = make_deck("# Lonely")

    result = await slide_service.manage_slide(request(path, mode="delete", target=1))

    assert result["totalSlides"] == 0
    assert path.read_text(encoding="utf-8") == "---\nmarp: true\ntheme: academic\n---"


@pytest.mark.asyncio
async def test_delete_out_of_range(slide_service, deck):
    with pytest.raises(SlideNotFoundError) as excinfo:
        await slide_service.manage_slide(request(deck, mode="delete", target=5))
    assert str(excinfo.value) == "Invalid slide number 5. Must be between 1 and 3"


@pytest.mark.asyncio
async def test_delete_zero_is_invalid(slide_service, deck):
    with pytest.raises(SlideNotFoundError):
        await slide_service.manage_slide(request(deck, mode="delete", target=0))


@pytest.mark.asyncio
async def test_delete_from_empty_deck(slide_service, empty_deck):
    with pytest.raises(SlideNotFoundError) as excinfo:
        await slide_service.manage_slide(request(empty_deck, mode="delete", target=1))
    assert "has no slides" in str(excinfo.value)


@pytest.mark.asyncio
async def test_delete_malformed_target(slide_service, deck):
    with pytest.raises(SlideRequestError) as excinfo:
        await slide_service.manage_slide(request(deck, mode="delete", target="slide two"))
    assert "expected a slide number or a slide ID" in str(excinfo.value)


# --------------------------------------------------------------------------- #
#                                validation                                   #
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_missing_file_is_reported_first(slide_service, tmp_path):
    path = tmp_path / "nope.md"
    with pytest.raises(DocumentReadError) as excinfo:
        await slide_service.manage_slide(request(path, layoutType="no-such-layout", params={}))
    assert str(excinfo.value) == f"Could not read file at {path}"


@pytest.mark.asyncio
async def test_layout_type_required_for_insert(slide_service, deck):
    with pytest.raises(SlideRequestError) as excinfo:
        await slide_service.manage_slide(request(deck, params=LIST_PARAMS))
    assert str(excinfo.value) == "layoutType is required for insert/replace modes"


@pytest.mark.asyncio
async def test_unknown_layout_lists_available(slide_service, deck):
    with pytest.raises(UnknownLayoutError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="hero", params={}))
    message = str(excinfo.value)
    assert message.startswith('Unknown layout type "hero". Available layouts: ')
    assert "two-column" in message


@pytest.mark.asyncio
async def test_missing_params_lists_all_and_leaves_file(slide_service, deck):
    before = deck.read_text(encoding="utf-8")
    with pytest.raises(MissingParameterError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="list", params={"heading": "", "list": []}))
    assert str(excinfo.value) == "Missing required parameters: heading, list"
    assert deck.read_text(encoding="utf-8") == before


@pytest.mark.asyncio
async def test_type_mismatch(slide_service, deck):
    with pytest.raises(ParameterTypeError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="list", params={"heading": "H", "list": "not a list"}))
    assert str(excinfo.value) == 'Parameter "list" must be an array'


@pytest.mark.asyncio
async def test_number_param_rejects_bool(slide_service, deck):
    with pytest.raises(ParameterTypeError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="image", params={"heading": "H", "imagePath": "a.png", "height": True}))
    assert "must be a number" in str(excinfo.value)


@pytest.mark.asyncio
async def test_max_length_boundary(slide_service, deck):
    ok = await slide_service.manage_slide(request(deck, layoutType="list", params={"heading": "x" * 40, "list": ["a"]}))
    assert ok["success"] is True

    with pytest.raises(ParameterLengthError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="list", params={"heading": "x" * 41, "list": ["a"]}))
    assert str(excinfo.value) == 'Parameter "heading" exceeds maximum length of 40 characters (current: 41)'


@pytest.mark.asyncio
async def test_array_item_limits(slide_service, deck):
    with pytest.raises(ParameterLengthError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="list", params={"heading": "H", "list": [str(i) for i in range(9)]}))
    assert "maximum of 8 items (current: 9)" in str(excinfo.value)

    with pytest.raises(ParameterLengthError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="list", params={"heading": "H", "list": ["ok", "y" * 51]}))
    assert str(excinfo.value).startswith('Item 2 of parameter "list"')


@pytest.mark.asyncio
async def test_render_fault_is_wrapped(slide_service, deck, monkeypatch):
    def explode(params):
        raise KeyError("boom")

    broken = LayoutDescriptor(name="broken", description="Always fails", params={"text": ParamSpec(kind=ParamKind.STRING, description="Text")}, template=explode)
    monkeypatch.setattr("marpmcp.services.slide_service.get_layout", lambda name: broken)
    before = deck.read_text(encoding="utf-8")

    with pytest.raises(SlideRenderError) as excinfo:
        await slide_service.manage_slide(request(deck, layoutType="broken", params={}))
    assert str(excinfo.value).startswith("Error generating slide: ")
    assert deck.read_text(encoding="utf-8") == before


# --------------------------------------------------------------------------- #
#                          ids, listing, preview                              #
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_generate_slide_ids_adds_missing_only(slide_service, deck_with_ids):
    result = await slide_service.generate_slide_ids(str(deck_with_ids))

    assert result["message"] == "Generated slide IDs successfully"
    assert result["idsGenerated"] == 1
    assert result["totalSlides"] == 3
    assert [entry["position"] for entry in result["slides"]] == [1, 2, 3]
    assert result["slides"][0]["slideId"] == ID_ONE
    assert result["slides"][2]["slideId"] == ID_THREE

    slides = await slides_of(slide_service, deck_with_ids)
    assert extract_slide_id(slides[1]) == result["slides"][1]["slideId"]


@pytest.mark.asyncio
async def test_generate_slide_ids_is_idempotent(slide_service, deck):
    await slide_service.generate_slide_ids(str(deck))
    content = deck.read_text(encoding="utf-8")

    result = await slide_service.generate_slide_ids(str(deck))

    assert result["message"] == "All slides already have IDs"
    assert result["idsGenerated"] == 0
    assert deck.read_text(encoding="utf-8") == content


@pytest.mark.asyncio
async def test_generate_slide_ids_skips_blank_slides(slide_service, make_deck):
    path = make_deck("# A", "", "# B")

    result = await slide_service.generate_slide_ids(str(path))

    assert result["idsGenerated"] == 2
    assert result["totalSlides"] == 2
    slides = await slides_of(slide_service, path)
    assert len(slides) == 2
    assert all(extract_slide_id(slide) for slide in slides)
    assert path.read_text(encoding="utf-8").count("slide-id:") == 2


@pytest.mark.asyncio
async def test_generate_slide_ids_on_empty_deck(slide_service, empty_deck):
    result = await slide_service.generate_slide_ids(str(empty_deck))
    assert result == {"success": True, "message": "No slides found in file", "file": str(empty_deck)}


@pytest.mark.asyncio
async def test_list_slides(slide_service, deck_with_ids):
    result = await slide_service.list_slides(str(deck_with_ids))

    assert result["totalSlides"] == 3
    assert result["slides"][0] == {"position": 1, "slideId": ID_ONE, "preview": "# One"}
    assert result["slides"][1] == {"position": 2, "slideId": None, "preview": "# Two"}


@pytest.mark.asyncio
async def test_generate_slide_does_not_touch_files(slide_service):
    result = await slide_service.generate_slide("list", LIST_PARAMS)
    assert result == {"success": True, "layoutType": "list", "markdown": "## Agenda\n\n- Intro\n- Method\n"}


@pytest.mark.asyncio
async def test_generate_slide_validates(slide_service):
    with pytest.raises(MissingParameterError):
        await slide_service.generate_slide("section", {})


@pytest.mark.asyncio
async def test_list_layouts(slide_service):
    result = await slide_service.list_layouts()
    names = [layout["name"] for layout in result["layouts"]]
    assert result["theme"] == "academic"
    assert names[:3] == ["section", "title", "lead"]
    assert "figure" in names
