# -*- coding: utf-8 -*-
"""Location: ./marpmcp/services/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Services Package.
Exposes core Marp MCP services:
- Deck parsing and persistence
- Slide editing
- Logging
"""

from marpmcp.services.document_service import DocumentError, DocumentReadError, DocumentService, DocumentWriteError
from marpmcp.services.logging_service import LoggingService
from marpmcp.services.slide_service import SlideError, SlideService

__all__ = [
    "DocumentService",
    "DocumentError",
    "DocumentReadError",
    "DocumentWriteError",
    "SlideService",
    "SlideError",
    "LoggingService",
]
