# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Forward chain (generation):
    OKLCH → OKLab → LMS′ → LMS (cubed) → Linear RGB → clamp → sRGB → hex

Relative luminance branches off after the clamp and never sees the gamma
step. Each stage is a separate function so the order stays explicit:
clamping before cubing, or measuring luminance on gamma-encoded values,
produces plausible-looking but wrong colors.

Reverse chain (seeding a hue from an existing color):
    hex → sRGB → Linear RGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- WCAG 2.x relative luminance

All conversions are pure NumPy over arrays of shape (..., 3).
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Matrices
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# OKLab to LMS′ (cube-root space)
_LAB_TO_LMS_PRIME = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB
_LMS_TO_LINEAR_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)

# Linear sRGB to LMS (cone responses)
_LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS′ to OKLab
_LMS_PRIME_TO_LAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Rec. 709 coefficients used by WCAG
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


# =============================================================================
# Hue
# =============================================================================


def normalize_hue(hue):
    """
    Wrap any real hue into [0, 360).

    Works on scalars and arrays. NaN stays NaN.
    """
    wrapped = np.mod(np.asarray(hue, dtype=np.float64), 360.0)
    # np.mod(-1e-20, 360) rounds to 360.0
    wrapped = np.where(wrapped >= 360.0, 0.0, wrapped)
    if wrapped.ndim == 0:
        return float(wrapped)
    return wrapped


# =============================================================================
# OKLCH → Linear RGB (one function per stage)
# =============================================================================


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees, any real (wrapped into [0, 360) first)

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(normalize_hue(lch[..., 2]))

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


def oklab_to_lms_prime(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLab → LMS′, the pre-cube cone responses."""
    lab = np.asarray(lab, dtype=np.float64)
    return np.einsum('...j,ij->...i', lab, _LAB_TO_LMS_PRIME)


def cube(lms_prime: NDArray[np.float64]) -> NDArray[np.float64]:
    """LMS′ → LMS. Sign is preserved, so no clamping is needed before this."""
    lms_prime = np.asarray(lms_prime, dtype=np.float64)
    return lms_prime ** 3


def lms_to_linear_rgb(lms: NDArray[np.float64]) -> NDArray[np.float64]:
    """LMS → linear sRGB. Unclamped; out-of-gamut colors leave [0, 1]."""
    lms = np.asarray(lms, dtype=np.float64)
    return np.einsum('...j,ij->...i', lms, _LMS_TO_LINEAR_RGB)


def clamp_unit(values: NDArray[np.float64]) -> NDArray[np.float64]:
    """Clip to [0, 1]. NaN passes through unchanged."""
    return np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)


def oklch_to_linear_rgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to raw linear RGB.

    Full chain: OKLCH → OKLab → LMS′ → LMS → Linear RGB

    No clamping at this stage; callers decide whether they need raw or
    clamped values.
    """
    lab = oklch_to_oklab(lch)
    lms_prime = oklab_to_lms_prime(lab)
    lms = cube(lms_prime)
    return lms_to_linear_rgb(lms)


# =============================================================================
# Linear RGB ↔ sRGB
# =============================================================================


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Gamma-encode linear RGB values in [0, 1].

    sRGB transfer function:
    - For values <= 0.0031308: value * 12.92
    - Otherwise: 1.055 * value ^ (1/2.4) - 0.055

    Expects clamped input; clamp first with clamp_unit.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Negative values only reach here unclamped; keep power() away from them
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return srgb


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    Inverse of linear_to_srgb:
    - For values <= 0.04045: value / 12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )
    return linear


# =============================================================================
# Hex
# =============================================================================


def srgb_to_hex(srgb: NDArray[np.float64]) -> str:
    """
    Format one gamma-encoded sRGB triple [0, 1] as "#RRGGBB".

    Each channel is rounded to the nearest of 256 levels.

    Raises:
        ValueError: If any channel is not finite (no hex encoding exists).
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    if not np.all(np.isfinite(srgb)):
        raise ValueError(f"Cannot hex-encode non-finite sRGB values: {srgb.tolist()}")
    r, g, b = (np.clip(srgb, 0.0, 1.0) * 255).round().astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_srgb(hex_color: str) -> NDArray[np.float64]:
    """
    Parse "#RRGGBB" (or "RRGGBB") into sRGB values [0, 1].

    Raises:
        ValueError: If the string is not a 6-digit hex color.
    """
    m = _HEX_RE.match(hex_color.strip()) if isinstance(hex_color, str) else None
    if not m:
        raise ValueError(f"Color must be a #RRGGBB hex string: {hex_color!r}")
    digits = m.group(1)
    rgb = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
    return np.array(rgb, dtype=np.float64) / 255.0


def oklch_to_hex(L: float, C: float, H: float) -> str:
    """
    Convert OKLCH values to hex color string.

    Full chain: OKLCH → Linear RGB → clamp → sRGB → hex

    Out-of-gamut colors degrade to the nearest in-gamut channel values.

    Args:
        L: Lightness [0, 1]
        C: Chroma [0, ~0.4]
        H: Hue in degrees, any real

    Returns:
        Hex color string like "#3941C8"

    Raises:
        ValueError: If any input is NaN or infinite.
    """
    lch = np.array([L, C, H], dtype=np.float64)
    linear = clamp_unit(oklch_to_linear_rgb(lch))
    return srgb_to_hex(linear_to_srgb(linear))


# =============================================================================
# Relative Luminance
# =============================================================================


def relative_luminance(L: float, C: float, H: float) -> float:
    """
    WCAG relative luminance of an OKLCH color.

    Computed on clamped linear-light channels, never on gamma-encoded
    values. NaN inputs produce NaN.

    Returns:
        Luminance in [0, 1] (0 = black, 1 = white)
    """
    lch = np.array([L, C, H], dtype=np.float64)
    linear = clamp_unit(oklch_to_linear_rgb(lch))
    return float(linear @ _LUMINANCE_WEIGHTS)


# =============================================================================
# Reverse: Linear RGB → OKLCH
# =============================================================================


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _LINEAR_RGB_TO_LMS)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _LMS_PRIME_TO_LAB)


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = normalize_hue(np.degrees(np.arctan2(b, a)))

    return np.stack([L, C, np.asarray(H, dtype=np.float64)], axis=-1)


def hex_to_oklch(hex_color: str) -> tuple[float, float, float | None]:
    """
    Convert hex color string to OKLCH values.

    Args:
        hex_color: Hex string like "#3941C8" or "3941C8"

    Returns:
        Tuple of (L, C, H) where H is None for achromatic colors
    """
    linear = srgb_to_linear(hex_to_srgb(hex_color))
    lch = oklab_to_oklch(linear_rgb_to_oklab(linear))

    L, C, H = float(lch[0]), float(lch[1]), float(lch[2])

    # Mark as achromatic if chroma is very low
    if C < 0.01:
        H = None

    return L, C, H

