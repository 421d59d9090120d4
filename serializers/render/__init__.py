# Copyright (c) 2026 Serializers contributors
# SPDX-License-Identifier: MIT

"""
Rendering of value trees to JSON text.

Rendering never changes the value tree; it only picks the text layout.
"""

from serializers.render.base import DEFAULT_CONFIG, OutputFormat, RenderConfig
from serializers.render.text import render

__all__ = [
    "render",
    "OutputFormat",
    "RenderConfig",
    "DEFAULT_CONFIG",
]
