# -*- coding: utf-8 -*-
"""Location: ./marpmcp/utils/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: Mihai Criveti

Utility helpers for slide identity, slide addressing and error formatting.
"""
