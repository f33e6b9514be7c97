# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Delivery runtime for okshade.

Serialization of PaletteReport data for the layer that renders it:

1. Context Block -- JSON, Markdown, or XML
2. CSS -- Custom properties for design tokens

The delivery layer never modifies generated values.
"""

from okshade.runtime.serializers import (
    BlockFormat,
    to_context_block,
    to_css_variables,
)

__all__ = [
    "to_context_block",
    "to_css_variables",
    "BlockFormat",
]
