# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a PaletteReport as a structured block (JSON, Markdown, or XML)
for a rendering layer or a document.
"""

from __future__ import annotations

import json
from enum import Enum

from okshade.schema import PaletteReport


class BlockFormat(Enum):
    """Block format options."""

    JSON = "json"
    MARKDOWN = "markdown"
    XML = "xml"


def to_context_block(
    report: PaletteReport,
    *,
    format: BlockFormat = BlockFormat.JSON,
    tag_name: str = "palette",
) -> str:
    """Serialize a PaletteReport as a block.

    Args:
        report: The PaletteReport to serialize.
        format: Block format (JSON, MARKDOWN, or XML).
        tag_name: Wrapper key / tag name for the block.

    Returns:
        Formatted block string.

    Example (XML)::

        <palette hue="250.0" harmony="triadic" dark_mode="false">
          <shade name="50" hex="#D3FAFF" L="0.970" C="0.068" ratio="18.85" text="black" aa="pass"/>
          ...
          <harmony mode="triadic">
            <swatch label="Base" H="250.0" hex="..." text="white"/>
            ...
          </harmony>
        </palette>
    """
    if format == BlockFormat.JSON:
        return _to_json(report, tag_name)
    elif format == BlockFormat.XML:
        return _to_xml(report, tag_name)
    else:
        return _to_markdown(report, tag_name)


def _to_json(report: PaletteReport, tag_name: str) -> str:
    """Generate JSON block with wrapper."""
    return json.dumps({tag_name: report.to_dict()}, indent=2)


def _to_xml(report: PaletteReport, tag_name: str) -> str:
    """Generate XML block."""
    req = report.request
    lines = [
        f'<{tag_name} hue="{req.hue:.1f}" harmony="{req.harmony.value}" '
        f'dark_mode="{str(req.dark_mode).lower()}">'
    ]

    for swatch in report.scale:
        s = swatch.sample
        verdict = "pass" if s.contrast.passes_aa else "fail"
        lines.append(
            f'  <shade name="{swatch.shade}" hex="{s.hex}" '
            f'L="{s.L:.3f}" C="{s.C:.3f}" ratio="{s.contrast.ratio:.2f}" '
            f'text="{s.contrast.text_color.value}" aa="{verdict}"/>'
        )

    if report.show_harmony:
        lines.append(f'  <harmony mode="{report.harmony.mode.value}">')
        for swatch in report.harmony:
            s = swatch.sample
            lines.append(
                f'    <swatch label="{swatch.label}" H="{s.H:.1f}" hex="{s.hex}" '
                f'text="{s.contrast.text_color.value}"/>'
            )
        lines.append("  </harmony>")

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _to_markdown(report: PaletteReport, tag_name: str) -> str:
    """Generate markdown tables."""
    req = report.request
    title = "Shade Scale (inverted)" if req.dark_mode else "Shade Scale"
    lines = [
        f"<!-- {tag_name} -->",
        f"**{title}** ({report.oklch})",
        "",
        "| Shade | Hex | Contrast | AA | Text |",
        "|---|---|---|---|---|",
    ]
    for swatch in report.scale:
        c = swatch.sample.contrast
        verdict = "AA" if c.passes_aa else "Fail"
        lines.append(
            f"| {swatch.shade} | `{swatch.sample.hex}` | {c.ratio:.1f}:1 "
            f"| {verdict} | {c.text_color.value} |"
        )

    if report.show_harmony:
        lines.extend([
            "",
            f"**{report.harmony.mode.label} Harmony**",
            "",
            "| Offset | Hue | Hex | Text |",
            "|---|---|---|---|",
        ])
        for swatch in report.harmony:
            s = swatch.sample
            lines.append(
                f"| {swatch.label} | {s.H:g}° | `{s.hex}` "
                f"| {s.contrast.text_color.value} |"
            )

    lines.append(f"<!-- /{tag_name} -->")
    return "\n".join(lines)
