# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Lightness → chroma curve.

A parabola that peaks at mid-lightness (L=0.6) and fades toward black
and white, keeping generated shades plausible and mostly in gamut.
"""

from __future__ import annotations

import numpy as np

from okshade.schema.palette import PEAK_CHROMA

# Apex of the parabola and its half-width (chroma reaches 0 at APEX ± WIDTH)
CHROMA_APEX_L = 0.6
CHROMA_HALF_WIDTH = 0.5


def chroma_for(L: float) -> float:
    """
    Chroma for a lightness value.

    PEAK_CHROMA * (1 - ((L - 0.6) / 0.5)^2), clamped to [0, PEAK_CHROMA].
    Exactly PEAK_CHROMA at L=0.6; zero at and below L=0.1.
    """
    raw = PEAK_CHROMA * (1.0 - ((L - CHROMA_APEX_L) / CHROMA_HALF_WIDTH) ** 2)
    return float(np.clip(raw, 0.0, PEAK_CHROMA))
