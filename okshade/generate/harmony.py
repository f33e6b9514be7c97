# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""Harmony generation: companion hues at the shade-500 appearance."""

from __future__ import annotations

from typing import Union

from okshade.schema.palette import (
    BASE_SHADE_INDEX,
    HarmonyMode,
    HarmonySet,
    HarmonySwatch,
)
from okshade.generate.colorspace import normalize_hue
from okshade.generate.shades import lightness_for, make_sample


def harmony_label(offset: int) -> str:
    """'Base' for the unmodified hue, otherwise the signed offset ('+30°', '-30°')."""
    if offset == 0:
        return "Base"
    return f"{offset:+d}°"


def build_harmony(hue: float, mode: Union[HarmonyMode, str]) -> HarmonySet:
    """
    Build the harmony set for a base hue.

    Every swatch uses the (un-inverted) shade-500 lightness and its chroma,
    so the offset-0 swatch is identical to shade 500 of the light scale.
    """
    mode = HarmonyMode.from_value(mode)
    L = lightness_for(BASE_SHADE_INDEX)
    swatches = tuple(
        HarmonySwatch(
            offset=offset,
            label=harmony_label(offset),
            sample=make_sample(L, normalize_hue(hue + offset)),
        )
        for offset in mode.offsets
    )
    return HarmonySet(mode=mode, base_hue=normalize_hue(hue), swatches=swatches)
