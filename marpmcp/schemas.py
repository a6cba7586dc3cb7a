# -*- coding: utf-8 -*-
"""Location: ./marpmcp/schemas.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Marp MCP Schema Definitions.
This module provides Pydantic models for the arguments of every MCP tool the
server exposes. Field names are snake_case in Python and camelCase on the wire
(``filePath``, ``layoutType``, ...), and the JSON schemas advertised by
``list_tools`` are generated from these models.
"""

# Standard
from typing import Any, Dict, Optional, Union

# Third-Party
from pydantic import BaseModel, ConfigDict, Field, model_validator

# First-Party
from marpmcp.models import InsertPosition, SlideMode


def to_camel_case(s: str) -> str:
    """
    Convert a string from snake_case to camelCase.

    Args:
        s (str): The string to be converted, which is assumed to be in snake_case.

    Returns:
        str: The string converted to camelCase.

    Examples:
        >>> to_camel_case("file_path")
        'filePath'
        >>> to_camel_case("alreadyCamel")
        'alreadyCamel'
        >>> to_camel_case("mode")
        'mode'
    """
    return "".join(word.capitalize() if i else word for i, word in enumerate(s.split("_")))


class BaseModelWithConfigDict(BaseModel):
    """Base model with common configuration.

    Provides:
    - Automatic conversion from snake_case to camelCase for input and output
    - Population by Python field name as well as by alias
    - Enum values instead of enum members after validation
    """

    model_config = ConfigDict(
        alias_generator=to_camel_case,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )


class ListLayoutsRequest(BaseModelWithConfigDict):
    """Arguments of the list_layouts tool (none)."""


class FileRequest(BaseModelWithConfigDict):
    """Arguments of tools that only need a deck path (generate_slide_ids, list_slides)."""

    file_path: str = Field(..., min_length=1, description="Absolute path to the Marp markdown file")


class GenerateSlideRequest(BaseModelWithConfigDict):
    """Arguments of the generate_slide preview tool."""

    layout_type: str = Field(..., description="Layout type to use (see list_layouts)")
    params: Dict[str, Any] = Field(default_factory=dict, description="Parameters for the layout template")


class ManageSlideRequest(BaseModelWithConfigDict):
    """Arguments of the manage_slide tool.

    ``slideNumber`` and ``slideId`` are accepted as explicit alternatives to
    ``target``; at most one of the three may be given.

    Examples:
        >>> req = ManageSlideRequest(filePath='/d.md', layoutType='list', params={'heading': 'H', 'list': ['a']})
        >>> req.mode, req.position, req.target
        ('insert', 'end', None)
        >>> ManageSlideRequest(filePath='/d.md', mode='delete', slideNumber=2).target
        2
        >>> ManageSlideRequest(filePath='/d.md', mode='delete', slideId='ab-12').target
        'ab-12'
        >>> try:
        ...     ManageSlideRequest(filePath='/d.md', mode='delete', target=1, slideNumber=2)
        ... except ValueError:
        ...     print('error')
        error
    """

    file_path: str = Field(..., min_length=1, description="Absolute path to the Marp markdown file")
    mode: SlideMode = Field(default=SlideMode.INSERT, validate_default=True, description="Operation mode: insert (default), replace, or delete")
    position: InsertPosition = Field(default=InsertPosition.END, validate_default=True, description="Position for insertion: end (default), start, after, before")
    layout_type: Optional[str] = Field(default=None, description="Layout type to use (see list_layouts). Not required for delete mode.")
    params: Optional[Dict[str, Any]] = Field(default=None, description="Parameters for the layout template. Not required for delete mode.")
    target: Optional[Union[int, str]] = Field(
        default=None,
        description="Slide to act on: a 1-based slide number (frontmatter is not counted) or a slide ID. Required for replace, delete, and the before/after positions.",
    )
    slide_number: Optional[int] = Field(default=None, description="Alternative to target: 1-based slide number")
    slide_id: Optional[str] = Field(default=None, description="Alternative to target: slide ID")

    @model_validator(mode="after")
    def _merge_target_aliases(self) -> "ManageSlideRequest":
        """Fold ``slide_number`` / ``slide_id`` into ``target``.

        Returns:
            ManageSlideRequest: The validated request

        Raises:
            ValueError: If more than one way of addressing a slide was given
        """
        given = [value for value in (self.target, self.slide_number, self.slide_id) if value is not None]
        if len(given) > 1:
            raise ValueError("Specify only one of target, slideNumber or slideId")
        if given:
            self.target = given[0]
        return self
