# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Palette schema -- canonical types for generated color systems.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same request → same palette, byte for byte
- Disposable: Nothing is cached; every request builds fresh records
- Serializable: JSON-ready for handing to a rendering layer

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, capped at PEAK_CHROMA for generated shades
- H (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈250=blue, ≈330=pink/red)
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Model Constants
# =============================================================================

SHADE_NAMES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Non-linear lightness curve, one stop per shade name (light → dark)
LIGHTNESS_STOPS = (0.97, 0.93, 0.87, 0.78, 0.69, 0.60, 0.51, 0.43, 0.36, 0.29, 0.25)

PEAK_CHROMA = 0.15

# WCAG AA, normal-size body text
AA_THRESHOLD = 4.5

# Index of shade 500, the base appearance for harmony swatches
BASE_SHADE_INDEX = 5

_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


# =============================================================================
# Enumerations
# =============================================================================


class HarmonyMode(Enum):
    """
    Rule for picking companion hues relative to a base hue.

    The offset table is closed: adding a mode means adding a member here
    and an entry in HARMONY_OFFSETS.
    """
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"

    @property
    def offsets(self) -> tuple[int, ...]:
        """Hue offsets in degrees; the first is always 0 (the base hue)."""
        return HARMONY_OFFSETS[self]

    @property
    def label(self) -> str:
        """Display label, e.g. "Triadic"."""
        return self.value.capitalize()

    @classmethod
    def from_value(cls, value: Union[HarmonyMode, str]) -> HarmonyMode:
        """Coerce a member or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown harmony mode {value!r}; expected one of: {valid}"
            ) from None


HARMONY_OFFSETS: dict[HarmonyMode, tuple[int, ...]] = {
    HarmonyMode.MONOCHROMATIC: (0,),
    HarmonyMode.ANALOGOUS: (0, 30, -30),
    HarmonyMode.COMPLEMENTARY: (0, 180),
    HarmonyMode.TRIADIC: (0, 120, 240),
}


class TextColor(Enum):
    """Text color placed on top of a swatch."""
    WHITE = "white"
    BLACK = "black"

    @property
    def hex(self) -> str:
        return "#FFFFFF" if self is TextColor.WHITE else "#000000"


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastReport:
    """
    Accessibility verdict for one swatch.

    Attributes:
        ratio: Best WCAG contrast ratio achievable with white or black text (>= 1)
        text_color: Which of white/black text achieves that ratio
        passes_aa: True if ratio meets the AA threshold (4.5)
    """
    ratio: float
    text_color: TextColor
    passes_aa: bool

    def __post_init__(self) -> None:
        """Validate ratio and verdict agree."""
        if not self.ratio >= 1.0:
            raise ValueError(f"Contrast ratio must be >= 1, got {self.ratio}")
        if self.passes_aa != (self.ratio >= AA_THRESHOLD):
            raise ValueError(
                f"passes_aa={self.passes_aa} disagrees with ratio {self.ratio:.3f}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ratio": self.ratio,
            "text_color": self.text_color.value,
            "passes_aa": self.passes_aa,
        }


@dataclass(frozen=True, slots=True)
class ColorSample:
    """
    A single generated color.

    The hex is always an in-gamut encoding: linear channels are clamped to
    [0, 1] before gamma encoding.

    Attributes:
        L: Lightness [0, 1]
        C: Chroma (>= 0)
        H: Hue in degrees [0, 360)
        hex: sRGB hex string like "#3941C8"
        relative_luminance: WCAG relative luminance [0, 1], from linear light
        contrast: Text color and AA verdict against this color
    """
    L: float
    C: float
    H: float
    hex: str
    relative_luminance: float
    contrast: ContrastReport

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        if not 0.0 <= self.L <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.L}")
        if not self.C >= 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.C}")
        if not 0.0 <= self.H < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.H}")
        if not _HEX_RE.match(self.hex):
            raise ValueError(f"Invalid hex color: {self.hex!r}")
        # weights sum to 1.0 only up to float rounding
        if not -1e-9 <= self.relative_luminance <= 1.0 + 1e-9:
            raise ValueError(
                f"Relative luminance must be 0-1, got {self.relative_luminance}"
            )

    @property
    def css(self) -> str:
        """CSS Color 4 notation, e.g. "oklch(0.600 0.150 250.0)"."""
        return f"oklch({self.L:.3f} {self.C:.3f} {self.H:.1f})"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "L": self.L,
            "C": self.C,
            "H": self.H,
            "hex": self.hex,
            "relative_luminance": self.relative_luminance,
            "contrast": self.contrast.to_dict(),
        }


# =============================================================================
# Shade Scale
# =============================================================================


@dataclass(frozen=True, slots=True)
class ShadeSwatch:
    """A color bound to a shade name (50 … 950)."""
    shade: int
    sample: ColorSample

    def __post_init__(self) -> None:
        if self.shade not in SHADE_NAMES:
            raise ValueError(f"Unknown shade name: {self.shade}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"shade": self.shade, **self.sample.to_dict()}


@dataclass(frozen=True, slots=True)
class ShadeScale:
    """
    Ordered 11-stop scale for one hue.

    Labels are always 50 → 950 in order. With dark_mode off, 50 is the
    lightest; with dark_mode on, the lightness assignment is mirrored
    index-for-index while labels stay put.

    Attributes:
        hue: Normalized hue shared by every swatch
        dark_mode: Whether the lightness assignment is inverted
        swatches: One ShadeSwatch per shade name
    """
    hue: float
    dark_mode: bool
    swatches: tuple[ShadeSwatch, ...]

    def __post_init__(self) -> None:
        """Validate scale structure."""
        labels = tuple(s.shade for s in self.swatches)
        if labels != SHADE_NAMES:
            raise ValueError(
                f"Shade scale must list shades {SHADE_NAMES} in order, got {labels}"
            )

    def __len__(self) -> int:
        return len(self.swatches)

    def __iter__(self):
        return iter(self.swatches)

    def __getitem__(self, index: int) -> ShadeSwatch:
        return self.swatches[index]

    def by_shade(self, shade: int) -> ShadeSwatch:
        """Look up a swatch by its shade name (e.g. 500)."""
        for swatch in self.swatches:
            if swatch.shade == shade:
                return swatch
        raise KeyError(f"No shade named {shade}")

    @property
    def base(self) -> ShadeSwatch:
        """The shade-500 swatch."""
        return self.swatches[BASE_SHADE_INDEX]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hue": self.hue,
            "dark_mode": self.dark_mode,
            "swatches": [s.to_dict() for s in self.swatches],
        }


# =============================================================================
# Harmony
# =============================================================================


@dataclass(frozen=True, slots=True)
class HarmonySwatch:
    """
    A companion hue at a fixed offset from the base.

    Attributes:
        offset: Signed hue offset in degrees (0 for the base)
        label: "Base" for offset 0, otherwise the signed offset ("+30°", "-30°")
        sample: The generated color
    """
    offset: int
    label: str
    sample: ColorSample

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"offset": self.offset, "label": self.label, **self.sample.to_dict()}


@dataclass(frozen=True, slots=True)
class HarmonySet:
    """
    Same-lightness swatches at the offsets dictated by a harmony mode.

    All swatches share the shade-500 lightness/chroma pair.
    """
    mode: HarmonyMode
    base_hue: float
    swatches: tuple[HarmonySwatch, ...]

    def __post_init__(self) -> None:
        """Validate offsets match the mode's table."""
        offsets = tuple(s.offset for s in self.swatches)
        if offsets != self.mode.offsets:
            raise ValueError(
                f"{self.mode.label} harmony expects offsets {self.mode.offsets}, "
                f"got {offsets}"
            )

    def __len__(self) -> int:
        return len(self.swatches)

    def __iter__(self):
        return iter(self.swatches)

    def __getitem__(self, index: int) -> HarmonySwatch:
        return self.swatches[index]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "mode": self.mode.value,
            "base_hue": self.base_hue,
            "swatches": [s.to_dict() for s in self.swatches],
        }


# =============================================================================
# Request / Report
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaletteRequest:
    """
    Inputs for one palette generation.

    Any finite hue is accepted and normalized into [0, 360). NaN and
    infinities are rejected here, at the boundary, so they never reach
    the conversion math.

    Attributes:
        hue: Base hue in degrees
        harmony: Harmony mode (member or its string value)
        dark_mode: Invert the lightness assignment of the shade scale
    """
    hue: float = 250.0
    harmony: HarmonyMode = HarmonyMode.MONOCHROMATIC
    dark_mode: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize inputs."""
        try:
            hue = float(self.hue)
        except (TypeError, ValueError):
            raise ValueError(f"Hue must be a real number, got {self.hue!r}") from None
        if not math.isfinite(hue):
            raise ValueError(f"Hue must be finite, got {self.hue!r}")
        hue = hue % 360.0
        if hue >= 360.0:
            # tiny negative inputs round up to 360.0
            hue = 0.0
        # frozen: assign through object.__setattr__
        object.__setattr__(self, "hue", hue)
        object.__setattr__(self, "harmony", HarmonyMode.from_value(self.harmony))
        object.__setattr__(self, "dark_mode", bool(self.dark_mode))

    @classmethod
    def from_hex(
        cls,
        hex_color: str,
        harmony: Union[HarmonyMode, str] = HarmonyMode.MONOCHROMATIC,
        dark_mode: bool = False,
    ) -> PaletteRequest:
        """
        Seed a request from an existing color's hue.

        Achromatic colors (grays) carry no hue; they fall back to 0°.
        """
        from okshade.generate.colorspace import hex_to_oklch
        _, _, H = hex_to_oklch(hex_color)
        return cls(hue=H if H is not None else 0.0, harmony=harmony, dark_mode=dark_mode)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hue": self.hue,
            "harmony": self.harmony.value,
            "dark_mode": self.dark_mode,
        }


@dataclass(frozen=True, slots=True)
class PaletteReport:
    """
    Complete generated color system for one request.

    Attributes:
        request: The normalized inputs that produced this report
        scale: The 11-stop shade scale
        harmony: Companion hues (a single base swatch when monochromatic)
    """
    request: PaletteRequest
    scale: ShadeScale
    harmony: HarmonySet

    @property
    def oklch(self) -> str:
        """CSS notation of the base (shade-500) color."""
        return self.scale.base.sample.css

    @property
    def show_harmony(self) -> bool:
        """Monochromatic sets carry nothing beyond the base shade."""
        return self.harmony.mode is not HarmonyMode.MONOCHROMATIC

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        result = {
            "request": self.request.to_dict(),
            "scale": self.scale.to_dict(),
            "oklch": self.oklch,
        }
        if self.show_harmony:
            result["harmony"] = self.harmony.to_dict()
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_css(self, prefix: str = "color") -> str:
        """Serialize as CSS custom properties on :root."""
        # Import here to avoid circular imports
        from okshade.runtime.serializers.css import to_css_variables
        return to_css_variables(self, prefix=prefix)

    def to_markdown(self) -> str:
        """Serialize as a markdown table block."""
        # Import here to avoid circular imports
        from okshade.runtime.serializers.block import to_context_block, BlockFormat
        return to_context_block(self, format=BlockFormat.MARKDOWN)
