# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""
Generation core for okshade.

Pure numeric pipeline from (hue, harmony, dark mode) to an annotated
color system. No I/O, no shared state.
"""

from okshade.generate.pipeline import generate_palette

__all__ = ["generate_palette"]
