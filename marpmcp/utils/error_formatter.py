# -*- coding: utf-8 -*-
"""Location: ./marpmcp/utils/error_formatter.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Centralized formatting of tool argument validation errors and slide errors
into the plain text results returned to MCP clients.
"""

# Standard
import logging
from typing import Any, Dict

# Third-Party
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ErrorFormatter:
    """
    Transform technical errors into user-friendly messages.

    Examples:
        >>> from pydantic import BaseModel
        >>> class Args(BaseModel):
        ...     filePath: str
        >>> try:
        ...     Args()
        ... except ValidationError as e:
        ...     print(ErrorFormatter.validation_error_text(e))
        Error: Invalid arguments: filePath is required
        >>> ErrorFormatter.error_text(ValueError('Slide 3 not found'))
        'Error: Slide 3 not found'
    """

    @staticmethod
    def format_validation_error(error: ValidationError) -> Dict[str, Any]:
        """
        Convert Pydantic errors to user-friendly format.

        Args:
            error (ValidationError): The Pydantic validation error.

        Returns:
            Dict[str, Any]: A dictionary with formatted error details.
        """
        errors = []

        for err in error.errors():
            loc = [str(part) for part in err.get("loc", ()) if part != "__root__"]
            field = ".".join(loc) or "arguments"
            msg = err.get("msg", "Invalid value")

            # Map technical messages to user-friendly ones
            user_message = ErrorFormatter._get_user_message(field, msg)
            errors.append({"field": field, "message": user_message})

        # Log the full error for debugging
        logger.debug(f"Validation error: {error}")

        return {"message": "Validation failed", "details": errors, "success": False}

    @staticmethod
    def _get_user_message(field: str, technical_msg: str) -> str:
        """
        Map technical validation messages to user-friendly ones.

        Args:
            field (str): The field name.
            technical_msg (str): The technical validation message.

        Returns:
            str: User-friendly error message.

        Examples:
            >>> ErrorFormatter._get_user_message('mode', "Input should be 'insert', 'replace' or 'delete'")
            "mode: Input should be 'insert', 'replace' or 'delete'"
            >>> ErrorFormatter._get_user_message('filePath', 'Field required')
            'filePath is required'
        """
        mappings = {
            "Field required": f"{field} is required",
            "Input should be a valid string": f"{field} must be a string",
            "Input should be a valid dictionary": f"{field} must be an object",
        }

        for pattern, friendly_msg in mappings.items():
            if pattern in technical_msg:
                return friendly_msg

        # Value errors raised by our own validators carry a usable message
        return f"{field}: {technical_msg.removeprefix('Value error, ')}"

    @staticmethod
    def validation_error_text(error: ValidationError) -> str:
        """
        Render a validation error as a single tool result line.

        Args:
            error (ValidationError): The Pydantic validation error.

        Returns:
            str: ``Error: Invalid arguments: ...`` listing every failing field.
        """
        details = ErrorFormatter.format_validation_error(error)["details"]
        return "Error: Invalid arguments: " + "; ".join(detail["message"] for detail in details)

    @staticmethod
    def error_text(error: Exception) -> str:
        """
        Render an expected, user-facing error as a tool result line.

        Args:
            error (Exception): The error raised by a service.

        Returns:
            str: ``Error: <message>``
        """
        return f"Error: {error}"
