# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""Tests for harmony generation."""

import pytest

from okshade.generate.harmony import build_harmony, harmony_label
from okshade.generate.shades import build_shade_scale
from okshade.schema import HarmonyMode, HarmonySet


class TestHarmonyLabel:

    def test_base(self):
        assert harmony_label(0) == "Base"

    def test_positive(self):
        assert harmony_label(30) == "+30°"

    def test_negative(self):
        assert harmony_label(-30) == "-30°"


class TestBuildHarmony:

    def test_triadic_blue(self):
        harmony = build_harmony(250.0, HarmonyMode.TRIADIC)
        assert isinstance(harmony, HarmonySet)
        assert [s.sample.H for s in harmony] == [250.0, 10.0, 130.0]
        assert [s.label for s in harmony] == ["Base", "+120°", "+240°"]

    def test_shares_shade_500_appearance(self):
        base = build_shade_scale(250.0).by_shade(500).sample
        for swatch in build_harmony(250.0, HarmonyMode.TRIADIC):
            assert swatch.sample.L == base.L == 0.60
            assert swatch.sample.C == base.C == 0.15

    def test_analogous_wraps_negative_offset(self):
        harmony = build_harmony(10.0, HarmonyMode.ANALOGOUS)
        assert [s.offset for s in harmony] == [0, 30, -30]
        assert [s.sample.H for s in harmony] == [10.0, 40.0, 340.0]

    def test_complementary(self):
        harmony = build_harmony(250.0, HarmonyMode.COMPLEMENTARY)
        assert [s.sample.H for s in harmony] == [250.0, 70.0]

    def test_monochromatic_is_base_only(self):
        harmony = build_harmony(250.0, HarmonyMode.MONOCHROMATIC)
        assert len(harmony) == 1
        assert harmony[0].label == "Base"

    @pytest.mark.parametrize("mode", list(HarmonyMode))
    @pytest.mark.parametrize("hue", [0.0, 45.0, 250.0, 359.0])
    def test_base_matches_light_shade_500(self, mode, hue):
        harmony = build_harmony(hue, mode)
        assert harmony[0].offset == 0
        assert harmony[0].sample.hex == build_shade_scale(hue, False)[5].sample.hex

    def test_string_mode(self):
        assert build_harmony(0.0, "Triadic").mode is HarmonyMode.TRIADIC

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="harmony mode"):
            build_harmony(0.0, "pentadic")

    def test_base_hue_normalized(self):
        assert build_harmony(370.0, HarmonyMode.ANALOGOUS).base_hue == 10.0
