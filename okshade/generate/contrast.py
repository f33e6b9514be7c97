# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
WCAG contrast evaluation.

Given a background's relative luminance, decides whether pure white or
pure black text reads better on it and whether that best contrast meets
AA for normal-size text.
"""

from __future__ import annotations

from okshade.schema.palette import AA_THRESHOLD, ContrastReport, TextColor

WHITE_LUMINANCE = 1.0
BLACK_LUMINANCE = 0.0


def contrast_ratio(lum_a: float, lum_b: float) -> float:
    """
    WCAG contrast ratio between two relative luminances.

    (lighter + 0.05) / (darker + 0.05). Symmetric in its arguments; the
    0.05 offset keeps the denominator positive.
    """
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def _text_ratios(bg_lum: float) -> tuple[float, float]:
    """(white-text ratio, black-text ratio) against a background."""
    return (
        contrast_ratio(WHITE_LUMINANCE, bg_lum),
        contrast_ratio(bg_lum, BLACK_LUMINANCE),
    )


def best_text_color(bg_lum: float) -> TextColor:
    """White or black, whichever contrasts more. Ties go to white."""
    white, black = _text_ratios(bg_lum)
    return TextColor.WHITE if white >= black else TextColor.BLACK


def best_contrast(bg_lum: float) -> float:
    """The larger of the white-text and black-text ratios."""
    return max(_text_ratios(bg_lum))


def passes_aa(ratio: float) -> bool:
    """WCAG AA for normal-size text: ratio >= 4.5."""
    return ratio >= AA_THRESHOLD


def evaluate(bg_lum: float) -> ContrastReport:
    """Full verdict for one swatch background."""
    ratio = best_contrast(bg_lum)
    return ContrastReport(
        ratio=ratio,
        text_color=best_text_color(bg_lum),
        passes_aa=passes_aa(ratio),
    )
