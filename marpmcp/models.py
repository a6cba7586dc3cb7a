# -*- coding: utf-8 -*-
"""Location: ./marpmcp/models.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Marp MCP Domain Models.
This module defines the core types shared by the layout registry, the document
model and the slide editor:
  - Log severity levels
  - Layout parameter schema (kinds, limits)
  - Layout descriptors (schema + pure template)
  - Parsed deck documents (frontmatter + ordered slide bodies)
"""

# Standard
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

# Third-Party
from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """Standard syslog severity levels as defined in RFC 5424.

    Attributes:
        DEBUG (str): Debug level.
        INFO (str): Informational level.
        NOTICE (str): Notice level.
        WARNING (str): Warning level.
        ERROR (str): Error level.
        CRITICAL (str): Critical level.
        ALERT (str): Alert level.
        EMERGENCY (str): Emergency level.
    """

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"


class SlideMode(str, Enum):
    """Kind of edit requested by manage_slide.

    Attributes:
        INSERT (str): Add a new slide.
        REPLACE (str): Overwrite an existing slide, keeping its identifier.
        DELETE (str): Remove an existing slide.
    """

    INSERT = "insert"
    REPLACE = "replace"
    DELETE = "delete"


class InsertPosition(str, Enum):
    """Where an inserted slide goes.

    Attributes:
        START (str): Before the first slide.
        END (str): After the last slide.
        BEFORE (str): Immediately before the target slide.
        AFTER (str): Immediately after the target slide.
    """

    START = "start"
    END = "end"
    BEFORE = "before"
    AFTER = "after"


class ParamKind(str, Enum):
    """Declared shape of a layout parameter.

    Attributes:
        STRING (str): A text value.
        ARRAY (str): A list of values.
        NUMBER (str): An integer or float (booleans excluded).
    """

    STRING = "string"
    ARRAY = "array"
    NUMBER = "number"


class ParamSpec(BaseModel):
    """Schema of a single layout parameter.

    Attributes:
        kind: Declared value shape
        description: Human readable help text shown by list_layouts
        required: Whether the parameter must be supplied
        max_length: Max characters of a string value, or of each string item of an array
        max_items: Max number of items of an array value

    Examples:
        >>> spec = ParamSpec(kind=ParamKind.STRING, description='Heading', required=True, max_length=40)
        >>> spec.accepts('Hello')
        True
        >>> spec.accepts(['Hello'])
        False
        >>> ParamSpec(kind=ParamKind.NUMBER, description='Height').accepts(True)
        False
        >>> ParamSpec(kind=ParamKind.NUMBER, description='Height').accepts(330)
        True
    """

    model_config = ConfigDict(frozen=True)

    kind: ParamKind
    description: str
    required: bool = False
    max_length: Optional[int] = Field(default=None, ge=1)
    max_items: Optional[int] = Field(default=None, ge=1)

    def accepts(self, value: Any) -> bool:
        """Check whether a value has the declared kind.

        Args:
            value: Supplied parameter value

        Returns:
            bool: True if the value's shape matches ``kind``
        """
        if self.kind == ParamKind.STRING:
            return isinstance(value, str)
        if self.kind == ParamKind.ARRAY:
            return isinstance(value, (list, tuple))
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def describe(self, name: str) -> Dict[str, Any]:
        """Return the public description of this parameter.

        Args:
            name: Parameter name

        Returns:
            Dict[str, Any]: Camel-cased schema entry; limits are only included when declared

        Examples:
            >>> ParamSpec(kind=ParamKind.ARRAY, description='Items', required=True, max_items=8).describe('list')
            {'name': 'list', 'type': 'array', 'description': 'Items', 'required': True, 'maxItems': 8}
        """
        info: Dict[str, Any] = {"name": name, "type": self.kind.value, "description": self.description, "required": self.required}
        if self.max_length is not None:
            info["maxLength"] = self.max_length
        if self.max_items is not None:
            info["maxItems"] = self.max_items
        return info


class LayoutDescriptor(BaseModel):
    """A named slide layout: a parameter schema plus a pure markdown template.

    Templates must be side-effect free and total over any parameter mapping
    that satisfies ``params``.

    Examples:
        >>> layout = LayoutDescriptor(
        ...     name='plain',
        ...     description='Plain text',
        ...     params={'text': ParamSpec(kind=ParamKind.STRING, description='Body', required=True)},
        ...     template=lambda p: p['text'],
        ... )
        >>> layout.render({'text': 'Hi'})
        'Hi'
        >>> layout.describe()['params'][0]['name']
        'text'
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    class_name: Optional[str] = None
    params: Dict[str, ParamSpec] = Field(default_factory=dict)
    template: Callable[[Mapping[str, Any]], str]

    def render(self, params: Mapping[str, Any]) -> str:
        """Render the slide body for a validated parameter mapping.

        Args:
            params: Parameter values

        Returns:
            str: Markdown slide body
        """
        return self.template(params)

    def describe(self) -> Dict[str, Any]:
        """Return the public description of this layout.

        Returns:
            Dict[str, Any]: name, description, className and parameter schema
        """
        return {
            "name": self.name,
            "description": self.description,
            "className": self.class_name,
            "params": [spec.describe(param_name) for param_name, spec in self.params.items()],
        }


class Document(BaseModel):
    """A parsed Marp deck.

    Attributes:
        frontmatter: The ``---`` delimited block, delimiters included
        slides: Ordered slide bodies; slide number N lives at index N-1

    Examples:
        >>> doc = Document(frontmatter='---\\nmarp: true\\n---', slides=['# A', '# B'])
        >>> doc.slide_count
        2
    """

    frontmatter: str
    slides: List[str] = Field(default_factory=list)

    @property
    def slide_count(self) -> int:
        """Number of slides in the deck.

        Returns:
            int: Slide count
        """
        return len(self.slides)
