# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
CSS custom property serializer.

Emits design tokens for the shade scale (and harmony hues, when the mode
adds any) as a single rule block.
"""

from __future__ import annotations

from okshade.schema import PaletteReport


def to_css_variables(
    report: PaletteReport,
    *,
    prefix: str = "color",
    selector: str = ":root",
    use_oklch: bool = False,
    include_text: bool = False,
) -> str:
    """Serialize a PaletteReport as CSS custom properties.

    Args:
        report: The PaletteReport to serialize.
        prefix: Variable name prefix (``--{prefix}-500``).
        selector: Selector the rule block is attached to.
        use_oklch: Emit ``oklch()`` values instead of hex.
        include_text: Also emit ``--{prefix}-{shade}-text`` with the
            recommended text color.

    Returns:
        CSS rule block string.

    Example::

        :root {
          --color-50: #D3FAFF;
          ...
          --color-950: ...;
          --color-harmony-1: ...;
        }
    """
    if not prefix:
        raise ValueError("CSS variable prefix cannot be empty")

    lines = [f"{selector} {{"]

    for swatch in report.scale:
        s = swatch.sample
        value = s.css if use_oklch else s.hex
        lines.append(f"  --{prefix}-{swatch.shade}: {value};")
        if include_text:
            lines.append(
                f"  --{prefix}-{swatch.shade}-text: {s.contrast.text_color.hex};"
            )

    if report.show_harmony:
        # Index 1 is the base; companions follow in offset-table order
        for i, swatch in enumerate(report.harmony, start=1):
            s = swatch.sample
            value = s.css if use_oklch else s.hex
            lines.append(f"  --{prefix}-harmony-{i}: {value};")

    lines.append("}")
    return "\n".join(lines)
