# Copyright (c) 2026 okshade
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (OKLCH → OKLab → LMS → linear RGB → sRGB)."""

import math
import re

import numpy as np
import pytest

from okshade.generate.colorspace import (
    normalize_hue,
    oklch_to_oklab,
    oklab_to_lms_prime,
    cube,
    lms_to_linear_rgb,
    clamp_unit,
    oklch_to_linear_rgb,
    linear_to_srgb,
    srgb_to_linear,
    srgb_to_hex,
    hex_to_srgb,
    oklch_to_hex,
    relative_luminance,
    linear_rgb_to_oklab,
    oklab_to_oklch,
    hex_to_oklch,
)
from okshade.generate.chroma import chroma_for

_HEX = re.compile(r"^#[0-9A-F]{6}$")


class TestNormalizeHue:

    def test_in_range_unchanged(self):
        assert normalize_hue(250.0) == 250.0

    def test_full_turn_wraps_to_zero(self):
        assert normalize_hue(360.0) == 0.0

    def test_negative_wraps(self):
        assert normalize_hue(-30.0) == 330.0

    def test_large_wraps(self):
        assert normalize_hue(730.0) == pytest.approx(10.0)

    def test_tiny_negative_stays_below_360(self):
        assert normalize_hue(-1e-20) == 0.0

    def test_array(self):
        out = normalize_hue(np.array([-90.0, 0.0, 450.0]))
        np.testing.assert_allclose(out, [270.0, 0.0, 90.0])

    def test_nan_propagates(self):
        assert math.isnan(normalize_hue(float("nan")))


class TestStages:
    """Each forward stage in isolation."""

    def test_oklab_hue_zero_is_positive_a(self):
        lab = oklch_to_oklab(np.array([0.5, 0.1, 0.0]))
        np.testing.assert_allclose(lab, [0.5, 0.1, 0.0], atol=1e-12)

    def test_oklab_hue_ninety_is_positive_b(self):
        lab = oklch_to_oklab(np.array([0.5, 0.1, 90.0]))
        np.testing.assert_allclose(lab, [0.5, 0.0, 0.1], atol=1e-12)

    def test_oklab_keeps_lightness(self):
        lab = oklch_to_oklab(np.array([0.73, 0.12, 200.0]))
        assert lab[0] == 0.73

    def test_lms_prime_of_gray_is_lightness(self):
        lms_prime = oklab_to_lms_prime(np.array([0.4, 0.0, 0.0]))
        np.testing.assert_allclose(lms_prime, [0.4, 0.4, 0.4], atol=1e-12)

    def test_lms_prime_coefficients(self):
        lms_prime = oklab_to_lms_prime(np.array([0.5, 0.1, -0.2]))
        expected = [
            0.5 + 0.3963377774 * 0.1 + 0.2158037573 * -0.2,
            0.5 - 0.1055613458 * 0.1 - 0.0638541728 * -0.2,
            0.5 - 0.0894841775 * 0.1 - 1.2914855480 * -0.2,
        ]
        np.testing.assert_allclose(lms_prime, expected, atol=1e-12)

    def test_cube_preserves_sign(self):
        np.testing.assert_allclose(cube(np.array([-0.5, 0.0, 2.0])), [-0.125, 0.0, 8.0])

    def test_white_lms_maps_to_white_rgb(self):
        rgb = lms_to_linear_rgb(np.array([1.0, 1.0, 1.0]))
        np.testing.assert_allclose(rgb, [1.0, 1.0, 1.0], atol=1e-8)

    def test_clamp_unit(self):
        np.testing.assert_allclose(clamp_unit(np.array([-0.2, 0.5, 1.3])), [0.0, 0.5, 1.0])

    def test_linear_rgb_unclamped_out_of_gamut(self):
        """Very saturated red leaves [0, 1] before clamping."""
        raw = oklch_to_linear_rgb(np.array([0.6, 0.35, 30.0]))
        assert np.any((raw < 0.0) | (raw > 1.0))

    def test_batch_shape(self):
        lch = np.array([[0.5, 0.1, 0.0], [0.7, 0.05, 120.0], [0.3, 0.1, 250.0]])
        assert oklch_to_linear_rgb(lch).shape == (3, 3)


class TestGamma:

    def test_linear_segment(self):
        val = 0.002
        assert float(linear_to_srgb(np.array([val]))[0]) == pytest.approx(12.92 * val)

    def test_power_segment(self):
        val = 0.5
        expected = 1.055 * val ** (1 / 2.4) - 0.055
        assert float(linear_to_srgb(np.array([val]))[0]) == pytest.approx(expected)

    def test_endpoints(self):
        np.testing.assert_allclose(linear_to_srgb(np.array([0.0, 1.0])), [0.0, 1.0], atol=1e-12)

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)


class TestHex:

    def test_format(self):
        assert srgb_to_hex(np.array([1.0, 0.0, 0.5])) == "#FF0080"

    def test_white(self):
        assert oklch_to_hex(1.0, 0.0, 0.0) == "#FFFFFF"

    def test_black(self):
        assert oklch_to_hex(0.0, 0.0, 0.0) == "#000000"

    def test_out_of_gamut_still_valid_hex(self):
        assert _HEX.match(oklch_to_hex(0.6, 0.35, 30.0))

    def test_hue_wraparound(self):
        for L in (0.25, 0.6, 0.97):
            C = chroma_for(L)
            assert oklch_to_hex(L, C, 0.0) == oklch_to_hex(L, C, 360.0)

    def test_negative_hue(self):
        assert oklch_to_hex(0.6, 0.15, -110.0) == oklch_to_hex(0.6, 0.15, 250.0)

    def test_nan_rejected(self):
        with pytest.raises(ValueError, match="non-finite"):
            oklch_to_hex(float("nan"), 0.1, 200.0)

    def test_light_blue_stop_is_near_white(self):
        hex_val = oklch_to_hex(0.97, chroma_for(0.97), 250.0)
        r, g, b = (int(hex_val[i:i + 2], 16) for i in (1, 3, 5))
        assert min(r, g, b) >= 0xC0

    def test_parse_hex(self):
        np.testing.assert_allclose(hex_to_srgb("#FF0000"), [1.0, 0.0, 0.0])
        np.testing.assert_allclose(hex_to_srgb("00ff00"), [0.0, 1.0, 0.0])

    @pytest.mark.parametrize("bad", ["#FFF", "#GGGGGG", "", "#1234567"])
    def test_parse_hex_invalid(self, bad):
        with pytest.raises(ValueError, match="hex"):
            hex_to_srgb(bad)


class TestRelativeLuminance:

    def test_white_is_one(self):
        assert relative_luminance(1.0, 0.0, 0.0) == pytest.approx(1.0, abs=1e-6)

    def test_black_is_zero(self):
        assert relative_luminance(0.0, 0.0, 0.0) == pytest.approx(0.0, abs=1e-12)

    def test_uses_linear_light(self):
        """Luminance is weighted over clamped linear values, not gamma-encoded ones."""
        L, C, H = 0.6, 0.15, 250.0
        linear = clamp_unit(oklch_to_linear_rgb(np.array([L, C, H])))
        weights = np.array([0.2126, 0.7152, 0.0722])
        expected = float(linear @ weights)
        gamma_based = float(linear_to_srgb(linear) @ weights)
        assert relative_luminance(L, C, H) == pytest.approx(expected, abs=1e-12)
        assert relative_luminance(L, C, H) != pytest.approx(gamma_based, abs=1e-3)

    def test_out_of_gamut_stays_in_range(self):
        lum = relative_luminance(0.6, 0.35, 30.0)
        assert 0.0 <= lum <= 1.0

    def test_nan_propagates(self):
        assert math.isnan(relative_luminance(0.5, 0.1, float("nan")))


class TestReverse:

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)

    def test_hue_range(self):
        lch = oklab_to_oklch(np.array([0.5, -0.1, -0.1]))
        assert 0.0 <= lch[2] < 360.0

    def test_generated_hex_recovers_oklch(self):
        L, C, H = hex_to_oklch(oklch_to_hex(0.6, 0.1, 250.0))
        assert L == pytest.approx(0.6, abs=0.01)
        assert C == pytest.approx(0.1, abs=0.01)
        assert H == pytest.approx(250.0, abs=2.0)

    def test_gray_is_achromatic(self):
        L, C, H = hex_to_oklch("#808080")
        assert H is None
