"""Tests for hex → RGB decoding and the RGB value type."""

from __future__ import annotations

import pytest

from contrastkit.color.base import RGB, ColorContrastError, InvalidColorFormat
from contrastkit.color.hex_decoder import hex_to_rgb
from contrastkit.color.tests.conftest import BLACK, WHITE


class TestHexToRgb:
    def test_pure_white(self) -> None:
        assert hex_to_rgb(WHITE) == RGB(255, 255, 255)

    def test_pure_black(self) -> None:
        assert hex_to_rgb(BLACK) == RGB(0, 0, 0)

    def test_channels_are_big_endian(self) -> None:
        assert hex_to_rgb("#123456") == RGB(r=0x12, g=0x34, b=0x56)

    def test_hash_prefix_is_optional(self) -> None:
        assert hex_to_rgb("cccccc") == hex_to_rgb("#cccccc")

    def test_case_insensitive(self) -> None:
        assert hex_to_rgb("#abcdef") == hex_to_rgb("#ABCDEF")

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-color",
            "zzzzzz",
            "#12345",
            "#1234567",
            "#fff",
            "",
            "#",
            "##123456",
            "0x1234",
            " 123456",
            "+12345",
            "12_456",
            "#FFFFFFFF",
        ],
    )
    def test_malformed_strings_rejected(self, value: str) -> None:
        with pytest.raises(InvalidColorFormat) as exc_info:
            hex_to_rgb(value)
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [None, 0xFFFFFF, b"#FFFFFF"])
    def test_non_strings_rejected(self, value: object) -> None:
        with pytest.raises(InvalidColorFormat, match="expected a string"):
            hex_to_rgb(value)  # type: ignore[arg-type]

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            hex_to_rgb("nope")
        with pytest.raises(ColorContrastError):
            hex_to_rgb("nope")


class TestRGB:
    def test_is_immutable(self) -> None:
        rgb = RGB(1, 2, 3)
        with pytest.raises(AttributeError):
            rgb.r = 4  # type: ignore[misc]

    def test_channels(self) -> None:
        assert RGB(1, 2, 3).channels() == (1, 2, 3)

    def test_to_hex_is_upper_case_with_hash(self) -> None:
        assert hex_to_rgb("#0a0b0c").to_hex() == "#0A0B0C"

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_out_of_range_channel_rejected(self, channels: tuple[int, int, int]) -> None:
        with pytest.raises(InvalidColorFormat, match="out of range"):
            RGB(*channels)

    def test_channel_error_reports_channel_value(self) -> None:
        with pytest.raises(InvalidColorFormat) as exc_info:
            RGB(0, 300, 0)
        assert exc_info.value.value == 300
        assert str(exc_info.value) == (
            "Invalid RGB channel 'g' 300: out of range [0, 255]"
        )
        assert "hex color" not in str(exc_info.value)

    @pytest.mark.parametrize("channels", [(0.5, 0, 0), (0, "1", 0), (0, 0, True)])
    def test_non_int_channel_rejected(self, channels: tuple) -> None:
        with pytest.raises(InvalidColorFormat, match="must be an int"):
            RGB(*channels)
