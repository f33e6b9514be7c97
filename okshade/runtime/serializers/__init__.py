# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Serializers for PaletteReport delivery.

Each serializer formats a PaletteReport for a specific consumer.
All serializers preserve the generated values exactly.
"""

from okshade.runtime.serializers.block import to_context_block, BlockFormat
from okshade.runtime.serializers.css import to_css_variables

__all__ = [
    "BlockFormat",
    "to_context_block",
    "to_css_variables",
]
