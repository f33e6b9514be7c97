# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Palette schema for okshade.

All types are immutable frozen dataclasses. Every record is created fresh
for a request and carries no identity beyond it.
"""

from okshade.schema.palette import (
    # Constants
    AA_THRESHOLD,
    BASE_SHADE_INDEX,
    HARMONY_OFFSETS,
    LIGHTNESS_STOPS,
    PEAK_CHROMA,
    SHADE_NAMES,
    # Enumerations
    HarmonyMode,
    TextColor,
    # Color types
    ColorSample,
    ContrastReport,
    # Shade scale
    ShadeScale,
    ShadeSwatch,
    # Harmony
    HarmonySet,
    HarmonySwatch,
    # Request / report
    PaletteReport,
    PaletteRequest,
)

__all__ = [
    "AA_THRESHOLD",
    "BASE_SHADE_INDEX",
    "HARMONY_OFFSETS",
    "LIGHTNESS_STOPS",
    "PEAK_CHROMA",
    "SHADE_NAMES",
    "HarmonyMode",
    "TextColor",
    "ColorSample",
    "ContrastReport",
    "ShadeScale",
    "ShadeSwatch",
    "HarmonySet",
    "HarmonySwatch",
    "PaletteReport",
    "PaletteRequest",
]
