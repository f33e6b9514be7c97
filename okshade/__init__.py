# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
okshade -- Perceptually uniform palette generation.

Turns a hue angle and a harmony rule into an accessible color system:
an 11-stop OKLCH shade scale, companion harmony swatches, and a WCAG
contrast verdict for every color.

Quick start::

    from okshade import generate_palette

    p = generate_palette(hue=250, harmony="triadic")
    p.to_css()        # CSS custom properties
    p.to_markdown()   # Human-readable tables
    p.to_json()       # Compact JSON
"""

from __future__ import annotations

__version__ = "1.0.0"

from okshade.generate import generate_palette
from okshade.schema import (
    ColorSample,
    ContrastReport,
    HarmonyMode,
    HarmonySet,
    PaletteReport,
    PaletteRequest,
    ShadeScale,
    TextColor,
)

__all__ = [
    # Core API
    "generate_palette",
    "PaletteRequest",
    "PaletteReport",
    # Types (commonly needed)
    "HarmonyMode",
    "ShadeScale",
    "HarmonySet",
    "ColorSample",
    "ContrastReport",
    "TextColor",
    # Version
    "__version__",
]
