"""Tests for named colors and color math."""

import re

import pytest

from restyle.templates.palette import (
    INK,
    NAMED_COLORS,
    WHITE,
    alpha,
    contrast_ratio,
    darken,
    lighten,
    mix,
    parse_hex,
    readable_on,
    shift_toward_contrast,
    to_hex,
)

_HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


class TestNamedColors:
    def test_all_lowercase_six_digit_hex(self):
        for name, value in NAMED_COLORS.items():
            assert _HEX_RE.match(value), name

    def test_keys_are_hyphenated_lowercase(self):
        for name in NAMED_COLORS:
            assert name == name.lower()
            assert " " not in name

    def test_hunter_green(self):
        assert NAMED_COLORS["hunter-green"] == "#355e3b"


class TestHex:
    def test_parse_long(self):
        assert parse_hex("#355e3b") == (0x35, 0x5E, 0x3B)

    def test_parse_short(self):
        assert parse_hex("#fff") == (255, 255, 255)

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Invalid hex color"):
            parse_hex("#12")

    def test_to_hex_clamps(self):
        assert to_hex((300, -5, 0)) == "#ff0000"


class TestMixing:
    def test_mix_endpoints(self):
        assert mix("#000000", "#ffffff", 0) == "#000000"
        assert mix("#000000", "#ffffff", 1) == "#ffffff"

    def test_mix_midpoint(self):
        assert mix("#000000", "#ffffff", 0.5) == "#808080"

    def test_lighten_and_darken(self):
        assert lighten("#000000", 1.0) == WHITE
        assert darken("#ffffff", 1.0) == "#000000"

    def test_alpha(self):
        assert alpha("#ff0000", 0.5) == "rgba(255, 0, 0, 0.50)"


class TestContrast:
    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_same_color(self):
        assert contrast_ratio("#355e3b", "#355e3b") == pytest.approx(1.0)

    def test_readable_on(self):
        assert readable_on("#ffffff") == INK
        assert readable_on("#000000") == WHITE
        assert readable_on("#39ff14") == INK

    def test_shift_toward_contrast_reaches_minimum(self):
        shifted = shift_toward_contrast("#ffffff", "#ffffff", 4.5)
        assert contrast_ratio(shifted, "#ffffff") >= 4.5

    def test_shift_leaves_readable_colors_alone(self):
        assert shift_toward_contrast("#111111", "#ffffff", 4.5) == "#111111"
