# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Palette generation entry point.

Composes the shade scale and harmony set for one request. Pure and
stateless: identical requests produce identical reports, and nothing is
cached between calls.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from okshade.schema.palette import HarmonyMode, PaletteReport, PaletteRequest
from okshade.generate.harmony import build_harmony
from okshade.generate.shades import build_shade_scale

logger = logging.getLogger(__name__)


def generate_palette(
    request: Optional[PaletteRequest] = None,
    *,
    hue: float = 250.0,
    harmony: Union[HarmonyMode, str] = HarmonyMode.MONOCHROMATIC,
    dark_mode: bool = False,
) -> PaletteReport:
    """
    Generate a full accessible color system.

    Args:
        request: Prepared inputs. If omitted, one is built from the keyword
            arguments (which are ignored when a request is given).
        hue: Base hue in degrees, any finite real
        harmony: Harmony mode (member or string value)
        dark_mode: Mirror the shade scale's lightness assignment

    Returns:
        PaletteReport with the shade scale and harmony set

    Raises:
        ValueError: If the hue is not finite or the harmony mode is unknown.

    Example::

        report = generate_palette(hue=250, harmony="triadic")
        report.scale.by_shade(500).sample.hex
        report.to_css()
    """
    if request is None:
        request = PaletteRequest(hue=hue, harmony=harmony, dark_mode=dark_mode)

    logger.debug(
        f"Generating palette: hue={request.hue:.1f} "
        f"harmony={request.harmony.value} dark_mode={request.dark_mode}"
    )

    scale = build_shade_scale(request.hue, request.dark_mode)
    harmony_set = build_harmony(request.hue, request.harmony)

    logger.debug(
        f"Generated {len(scale)} shades and {len(harmony_set)} harmony swatches "
        f"(base {scale.base.sample.hex})"
    )

    return PaletteReport(request=request, scale=scale, harmony=harmony_set)
