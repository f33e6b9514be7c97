# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Shade scale generation.

Produces the 11-stop 50 … 950 scale for one hue. Labels are fixed; dark
mode only mirrors which lightness stop each label receives.
"""

from __future__ import annotations

from okshade.schema.palette import (
    LIGHTNESS_STOPS,
    SHADE_NAMES,
    ColorSample,
    ShadeScale,
    ShadeSwatch,
)
from okshade.generate.chroma import chroma_for
from okshade.generate.colorspace import normalize_hue, oklch_to_hex, relative_luminance
from okshade.generate.contrast import evaluate


def lightness_for(index: int, dark_mode: bool = False) -> float:
    """
    Lightness stop for a shade index (0 = shade 50, 10 = shade 950).

    In dark mode shade 50 receives the stop shade 950 would otherwise get,
    and so on index for index.
    """
    if not 0 <= index < len(LIGHTNESS_STOPS):
        raise IndexError(f"Shade index must be 0-{len(LIGHTNESS_STOPS) - 1}, got {index}")
    if dark_mode:
        return LIGHTNESS_STOPS[len(LIGHTNESS_STOPS) - 1 - index]
    return LIGHTNESS_STOPS[index]


def make_sample(L: float, hue: float) -> ColorSample:
    """Build an annotated sample at lightness L, chroma from the curve."""
    C = chroma_for(L)
    H = normalize_hue(hue)
    lum = relative_luminance(L, C, H)
    return ColorSample(
        L=L,
        C=C,
        H=H,
        hex=oklch_to_hex(L, C, H),
        relative_luminance=lum,
        contrast=evaluate(lum),
    )


def build_shade_scale(hue: float, dark_mode: bool = False) -> ShadeScale:
    """
    Build the shade scale for a hue.

    Args:
        hue: Hue in degrees, any real (normalized to [0, 360))
        dark_mode: Mirror the lightness assignment

    Returns:
        ShadeScale with one swatch per shade name, 50 first
    """
    swatches = tuple(
        ShadeSwatch(shade=shade, sample=make_sample(lightness_for(i, dark_mode), hue))
        for i, shade in enumerate(SHADE_NAMES)
    )
    return ShadeScale(hue=normalize_hue(hue), dark_mode=dark_mode, swatches=swatches)
