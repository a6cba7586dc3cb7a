# -*- coding: utf-8 -*-
"""Location: ./marpmcp/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Marp MCP - a Model Context Protocol server for authoring Marp markdown slide decks.
"""

__author__ = "Mihai Criveti"
__copyright__ = "Copyright 2025"
__license__ = "Apache 2.0"
__version__ = "0.3.0"
__description__ = "MCP server that inserts, replaces and deletes layout-based slides in Marp presentations"
__url__ = "https://github.com/IBM/mcp-context-forge"
__packages__ = ["marpmcp"]

# Export main components for easier imports
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "layouts",
    "server",
]
