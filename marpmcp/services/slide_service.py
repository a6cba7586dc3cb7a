# -*- coding: utf-8 -*-
"""Slide Service Implementation.

Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

This module implements slide editing for Marp decks. It handles:
- Layout lookup and parameter validation
- Rendering slides from layouts
- Inserting, replacing and deleting slides addressed by number or identifier
- Assigning identifiers to every slide of a deck
- Listing slides with short previews

Every call re-reads the deck and writes it back at most once. A request that
fails validation never touches the file.
"""

# Standard
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

# First-Party
from marpmcp.config import settings
from marpmcp.layouts import get_layout, list_layout_names, list_layouts
from marpmcp.models import Document, InsertPosition, LayoutDescriptor, ParamKind, SlideMode
from marpmcp.schemas import ManageSlideRequest
from marpmcp.services.document_service import DocumentService
from marpmcp.utils.slide_address import parse_slide_address, SlideAddress
from marpmcp.utils.slide_id import ensure_all_slide_ids, extract_slide_id, find_slide_index_by_id, generate_slide_id, stamp_slide_id, strip_slide_id

logger = logging.getLogger(__name__)


class SlideError(Exception):
    """Base class for slide service errors."""


class SlideRequestError(SlideError):
    """Raised when a request is malformed (missing layout type or target, bad target)."""


class UnknownLayoutError(SlideError):
    """Raised when the requested layout is not registered."""

    def __init__(self, layout_type: str):
        """Initialize the error.

        Args:
            layout_type: The requested layout name

        Examples:
            >>> str(UnknownLayoutError('nope')).startswith('Unknown layout type "nope". Available layouts: section, title')
            True
        """
        self.layout_type = layout_type
        super().__init__(f'Unknown layout type "{layout_type}". Available layouts: {", ".join(list_layout_names())}')


class SlideParameterError(SlideError):
    """Base class for layout parameter errors."""


class MissingParameterError(SlideParameterError):
    """Raised when required layout parameters are absent or empty."""

    def __init__(self, missing: List[str]):
        """Initialize the error.

        Args:
            missing: Names of every missing parameter

        Examples:
            >>> str(MissingParameterError(['heading', 'list']))
            'Missing required parameters: heading, list'
        """
        self.missing = missing
        super().__init__(f"Missing required parameters: {', '.join(missing)}")


class ParameterTypeError(SlideParameterError):
    """Raised when a parameter value has the wrong shape."""


class ParameterLengthError(SlideParameterError):
    """Raised when a parameter exceeds its length or item limit."""


class SlideNotFoundError(SlideError):
    """Raised when a slide number is out of range or an identifier is unknown."""


class SlideRenderError(SlideError):
    """Raised when a layout template fails to render."""


_KIND_NAMES = {ParamKind.STRING: "a string", ParamKind.ARRAY: "an array", ParamKind.NUMBER: "a number"}


def _is_empty(value: Any) -> bool:
    """Tell whether a value counts as not supplied.

    Args:
        value: Parameter value

    Returns:
        bool: True for None, empty strings and empty lists

    Examples:
        >>> [_is_empty(v) for v in (None, '', [], 'x', 0)]
        [True, True, True, False, False]
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    return False


def validate_params(layout: LayoutDescriptor, params: Mapping[str, Any]) -> None:
    """Check parameters against a layout schema.

    Checks run in a fixed order and the first failing stage wins: missing
    required parameters (all reported together), then value shapes, then
    lengths and item counts. Parameters the layout does not declare are ignored.

    Args:
        layout: Layout to validate against
        params: Supplied parameter values

    Raises:
        MissingParameterError: If required parameters are absent or empty
        ParameterTypeError: If a value has the wrong shape
        ParameterLengthError: If a value exceeds a declared limit

    Examples:
        >>> from marpmcp.layouts import get_layout
        >>> validate_params(get_layout('list'), {'heading': 'Agenda', 'list': ['a', 'b']})
        >>> try:
        ...     validate_params(get_layout('list'), {'heading': 'x' * 41, 'list': ['a']})
        ... except ParameterLengthError as e:
        ...     print(e)
        Parameter "heading" exceeds maximum length of 40 characters (current: 41)
    """
    missing = [name for name, spec in layout.params.items() if spec.required and _is_empty(params.get(name))]
    if missing:
        raise MissingParameterError(missing)

    declared = [(name, layout.params[name], value) for name, value in params.items() if name in layout.params]

    for name, spec, value in declared:
        if value is not None and not spec.accepts(value):
            raise ParameterTypeError(f'Parameter "{name}" must be {_KIND_NAMES[spec.kind]}')

    for name, spec, value in declared:
        if isinstance(value, str) and spec.max_length is not None and len(value) > spec.max_length:
            raise ParameterLengthError(f'Parameter "{name}" exceeds maximum length of {spec.max_length} characters (current: {len(value)})')
        if isinstance(value, (list, tuple)):
            if spec.max_items is not None and len(value) > spec.max_items:
                raise ParameterLengthError(f'Parameter "{name}" exceeds maximum of {spec.max_items} items (current: {len(value)})')
            if spec.max_length is not None:
                for position, item in enumerate(value, start=1):
                    if isinstance(item, str) and len(item) > spec.max_length:
                        raise ParameterLengthError(f'Item {position} of parameter "{name}" exceeds maximum length of {spec.max_length} characters (current: {len(item)})')


def render_slide(layout: LayoutDescriptor, params: Mapping[str, Any]) -> str:
    """Render a validated slide.

    Args:
        layout: Layout to render
        params: Validated parameter values

    Returns:
        str: Markdown slide body

    Raises:
        SlideRenderError: If the template fails
    """
    try:
        return layout.render(params)
    except Exception as e:
        logger.exception(f"Layout {layout.name} failed to render")
        raise SlideRenderError(f"Error generating slide: {e}") from e


def slide_preview(slide: str, length: int) -> str:
    """Return the first meaningful line of a slide.

    Comment lines (identity comments, Marp directives) and blank lines are skipped.

    Args:
        slide: Slide body
        length: Max characters of the preview

    Returns:
        str: The preview, ending in ``...`` when truncated

    Examples:
        >>> slide_preview('<!-- slide-id: ab -->\\n\\n## Agenda\\n\\n- a', 60)
        '## Agenda'
        >>> slide_preview('A rather long first line', 10)
        'A rathe...'
        >>> slide_preview('<!-- _class: lead -->', 10)
        ''
    """
    for line in slide.splitlines():
        text = line.strip()
        if not text or text.startswith("<!--"):
            continue
        if len(text) > length:
            return text[: max(length - 3, 0)] + "..."
        return text
    return ""


class SlideService:
    """Marp slide service.

    Stateless editor over deck files. Handles:
    - Layout discovery and slide previews without touching files
    - Insert, replace and delete by slide number or slide identifier
    - Identifier assignment and slide listing
    """

    def __init__(self, document_service: Optional[DocumentService] = None):
        """Initialize slide service.

        Args:
            document_service: Deck reader/writer, a default one is created if omitted
        """
        self.document_service = document_service or DocumentService()

    async def list_layouts(self) -> Dict[str, Any]:
        """Describe every registered layout.

        Returns:
            Dict[str, Any]: ``{"theme": ..., "layouts": [...]}``

        Examples:
            >>> import asyncio
            >>> result = asyncio.run(SlideService().list_layouts())
            >>> result['theme'], result['layouts'][0]['name']
            ('academic', 'section')
        """
        return {"theme": settings.layout_theme, "layouts": list_layouts()}

    async def generate_slide(self, layout_type: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Validate and render a slide without writing it anywhere.

        Args:
            layout_type: Layout name
            params: Layout parameters

        Returns:
            Dict[str, Any]: ``success``, ``layoutType`` and the rendered ``markdown``

        Raises:
            UnknownLayoutError: If the layout is not registered

        Examples:
            >>> import asyncio
            >>> result = asyncio.run(SlideService().generate_slide('section', {'title': 'Intro'}))
            >>> result['markdown']
            '# Intro\\n\\n<!-- _class: section -->'
        """
        layout = self._get_layout(layout_type)
        values = dict(params or {})
        validate_params(layout, values)
        return {"success": True, "layoutType": layout.name, "markdown": render_slide(layout, values)}

    async def manage_slide(self, request: ManageSlideRequest) -> Dict[str, Any]:
        """Insert, replace or delete a slide.

        Args:
            request: Validated tool arguments

        Returns:
            Dict[str, Any]: Success envelope describing the edit

        Raises:
            SlideRequestError: If the layout type or target is missing or malformed
            UnknownLayoutError: If the layout is not registered
            SlideParameterError: If layout parameters fail validation
            SlideNotFoundError: If the target does not match a slide
            SlideRenderError: If the layout fails to render
            DocumentError: If the deck cannot be read or written
        """
        mode = SlideMode(request.mode)
        position = InsertPosition(request.position)
        address = self._parse_request(request, mode, position)

        document = await self.document_service.load(request.file_path)

        if mode == SlideMode.DELETE:
            return await self._delete(request.file_path, document, address)

        layout = self._get_layout(request.layout_type)
        params = dict(request.params or {})
        try:
            validate_params(layout, params)
        except SlideParameterError as e:
            logger.warning(f"Rejected {mode.value} with layout {layout.name}: {e}")
            raise

        index = None
        if mode == SlideMode.REPLACE or position in (InsertPosition.BEFORE, InsertPosition.AFTER):
            index = self._resolve(document, address)
        body = render_slide(layout, params)

        if mode == SlideMode.REPLACE:
            slide_id = extract_slide_id(document.slides[index]) or generate_slide_id()
            document.slides[index] = stamp_slide_id(strip_slide_id(body), slide_id)
            operation = f"Replaced slide {index + 1}"
        else:
            slide_id = generate_slide_id()
            insert_at = self._insert_index(document, position, index)
            document.slides.insert(insert_at, stamp_slide_id(body, slide_id))
            operation = f"Inserted slide at position {insert_at + 1}"

        saved = await self._save(request.file_path, document)
        logger.info(f"{operation} in {request.file_path} using layout {layout.name}")

        slide_index = find_slide_index_by_id(saved.slides, slide_id)
        return {
            "success": True,
            "operation": operation,
            "layoutType": layout.name,
            "slideId": slide_id,
            "slideNumber": slide_index + 1 if slide_index is not None else None,
            "totalSlides": saved.slide_count,
            "file": request.file_path,
        }

    async def generate_slide_ids(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Give every slide of a deck an identifier.

        The file is only written when at least one identifier was added.

        Args:
            file_path: Path of the deck

        Returns:
            Dict[str, Any]: Success envelope with a ``message`` and, when slides exist,
            ``idsGenerated`` and the ``slides`` summary

        Raises:
            DocumentError: If the deck cannot be read or written
        """
        document = await self.document_service.load(file_path)
        # Blank slides are dropped on save and never get an identifier
        slides = [slide for slide in document.slides if slide.strip()]
        if not slides:
            return {"success": True, "message": "No slides found in file", "file": str(file_path)}

        updated, _ = ensure_all_slide_ids(slides)
        generated = sum(1 for before, after in zip(slides, updated) if before != after)
        summary = [{"position": index + 1, "slideId": extract_slide_id(slide)} for index, slide in enumerate(updated)]

        if not generated:
            return {
                "success": True,
                "message": "All slides already have IDs",
                "totalSlides": len(updated),
                "idsGenerated": 0,
                "slides": summary,
                "file": str(file_path),
            }

        document.slides = updated
        await self.document_service.save(file_path, document)
        logger.info(f"Generated {generated} slide IDs in {file_path}")
        return {
            "success": True,
            "message": "Generated slide IDs successfully",
            "totalSlides": len(updated),
            "idsGenerated": generated,
            "slides": summary,
            "file": str(file_path),
        }

    async def list_slides(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """List the slides of a deck without modifying it.

        Args:
            file_path: Path of the deck

        Returns:
            Dict[str, Any]: ``totalSlides`` and ``slides`` entries of position, slideId and preview

        Raises:
            DocumentReadError: If the deck cannot be read
        """
        document = await self.document_service.load(file_path)
        slides = [
            {"position": index + 1, "slideId": extract_slide_id(slide), "preview": slide_preview(slide, settings.preview_length)}
            for index, slide in enumerate(document.slides)
        ]
        return {"success": True, "totalSlides": document.slide_count, "slides": slides, "file": str(file_path)}

    @staticmethod
    def _get_layout(layout_type: Optional[str]) -> LayoutDescriptor:
        """Look up a layout or fail with the list of valid names.

        Args:
            layout_type: Layout name

        Returns:
            LayoutDescriptor: The layout

        Raises:
            UnknownLayoutError: If no layout has that name
        """
        layout = get_layout(layout_type) if layout_type else None
        if layout is None:
            raise UnknownLayoutError(layout_type or "")
        return layout

    @staticmethod
    def _parse_request(request: ManageSlideRequest, mode: SlideMode, position: InsertPosition) -> Optional[SlideAddress]:
        """Check the shape of a manage_slide request before any file access.

        Args:
            request: Tool arguments
            mode: Requested mode
            position: Requested insert position

        Returns:
            Optional[SlideAddress]: The parsed target, if any

        Raises:
            SlideRequestError: If a required field is missing or the target is malformed
        """
        if mode != SlideMode.DELETE and not request.layout_type:
            raise SlideRequestError("layoutType is required for insert/replace modes")

        needs_target = mode in (SlideMode.REPLACE, SlideMode.DELETE) or (mode == SlideMode.INSERT and position in (InsertPosition.BEFORE, InsertPosition.AFTER))
        target = request.target
        if isinstance(target, str) and not target.strip():
            target = None
        if target is None:
            if needs_target:
                reason = f'mode "{mode.value}"' if mode != SlideMode.INSERT else f'position "{position.value}"'
                raise SlideRequestError(f"target (slide number or slide ID) is required for {reason}")
            return None

        try:
            return parse_slide_address(target)
        except ValueError as e:
            raise SlideRequestError(str(e)) from e

    @staticmethod
    def _resolve(document: Document, address: SlideAddress) -> int:
        """Resolve an address against the deck.

        Args:
            document: Parsed deck
            address: Slide address

        Returns:
            int: List index of the addressed slide

        Raises:
            SlideNotFoundError: If no slide matches
        """
        index = address.resolve(document.slides)
        if index is None:
            raise SlideNotFoundError(address.not_found_message(document.slide_count))
        return index

    @staticmethod
    def _insert_index(document: Document, position: InsertPosition, target_index: Optional[int]) -> int:
        """Compute where a new slide goes.

        Args:
            document: Parsed deck
            position: Requested insert position
            target_index: Resolved target for before/after

        Returns:
            int: List index for the new slide
        """
        if position == InsertPosition.START:
            return 0
        if position == InsertPosition.BEFORE:
            return target_index
        if position == InsertPosition.AFTER:
            return target_index + 1
        return document.slide_count

    async def _delete(self, file_path: str, document: Document, address: SlideAddress) -> Dict[str, Any]:
        """Remove the addressed slide and save the deck.

        Args:
            file_path: Path of the deck
            document: Parsed deck
            address: Slide to remove

        Returns:
            Dict[str, Any]: Success envelope
        """
        index = self._resolve(document, address)
        removed = document.slides.pop(index)
        saved = await self._save(file_path, document)
        logger.info(f"Deleted slide {index + 1} from {file_path}")

        result: Dict[str, Any] = {"success": True, "operation": f"Deleted slide {index + 1}"}
        slide_id = extract_slide_id(removed)
        if slide_id:
            result["slideId"] = slide_id
        result["totalSlides"] = saved.slide_count
        result["file"] = file_path
        return result

    async def _save(self, file_path: str, document: Document) -> Document:
        """Write the deck and return it as it now reads from disk.

        Empty slides are dropped on save, so counts and positions are taken
        from the normalized text.

        Args:
            file_path: Path of the deck
            document: Deck to write

        Returns:
            Document: The normalized deck
        """
        content = await self.document_service.save(file_path, document)
        return self.document_service.parse(content)
