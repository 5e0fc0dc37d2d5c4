"""Tests for the fixed-layout block decoders."""

import numpy as np
import pytest

from gif_builder import color_table, graphics_control, header, image_block, screen_descriptor
from gifkit.core.cursor import ByteCursor
from gifkit.core.decoders import (
    color_table_byte_length,
    decode_color_table,
    decode_global_color_table,
    decode_graphics_control_extension,
    decode_header,
    decode_image_descriptor,
    decode_logical_screen_descriptor,
)
from gifkit.core.records import Color, ColorTable
from gifkit.exceptions import OutOfBoundsError


class TestHeaderDecoder:
    """Tests for decode_header."""

    def test_decode_header(self) -> None:
        """Test signature and version extraction."""
        block = decode_header(ByteCursor(header() + screen_descriptor()))

        assert block.signature == "GIF"
        assert block.version == "89a"
        assert block.is_gif is True

    def test_foreign_signature_is_returned(self) -> None:
        """Test that a non-GIF signature is data, not an error."""
        block = decode_header(ByteCursor(b"PNG87a"))

        assert block.signature == "PNG"
        assert block.version == "87a"
        assert block.is_gif is False

    def test_short_buffer(self) -> None:
        """Test that fewer than 6 bytes fail."""
        with pytest.raises(OutOfBoundsError):
            decode_header(ByteCursor(b"GIF89"))


class TestLogicalScreenDescriptorDecoder:
    """Tests for decode_logical_screen_descriptor."""

    def test_decode_fields(self) -> None:
        """Test every field of the descriptor."""
        data = header() + screen_descriptor(
            width=320,
            height=0x1234,
            global_table=True,
            color_resolution=6,
            sort=True,
            table_exponent=3,
            background=9,
            aspect=49,
        )
        lsd = decode_logical_screen_descriptor(ByteCursor(data))

        assert lsd.width == 320
        assert lsd.height == 0x1234
        assert lsd.global_color_table_flag is True
        assert lsd.color_resolution == 6
        assert lsd.color_resolution_value == 128
        assert lsd.sort_flag is True
        assert lsd.global_color_table_size_exponent == 3
        assert lsd.global_color_table_length == 16
        assert lsd.background_color_index == 9
        assert lsd.pixel_aspect_ratio == 49

    @pytest.mark.parametrize("resolution", range(8))
    def test_color_resolution_value(self, resolution: int) -> None:
        """Test that the derived value is 2 ** (resolution + 1)."""
        data = header() + screen_descriptor(color_resolution=resolution)
        lsd = decode_logical_screen_descriptor(ByteCursor(data))

        assert lsd.color_resolution_value == 2 ** (resolution + 1)
        assert lsd.color_resolution_value in {2, 4, 8, 16, 32, 64, 128, 256}

    def test_truncated_descriptor(self) -> None:
        """Test that a partial descriptor fails rather than zero-filling."""
        data = header() + screen_descriptor()[:4]

        with pytest.raises(OutOfBoundsError):
            decode_logical_screen_descriptor(ByteCursor(data))


class TestColorTableDecoder:
    """Tests for color table decoding."""

    def test_decode_color_table(self) -> None:
        """Test order and values of decoded entries."""
        table = decode_color_table(color_table([(1, 2, 255), (16, 32, 48), (0, 0, 0)]))

        assert len(table) == 3
        assert table[0].rgb.r == 1
        assert table[1].rgb.g == 32
        assert table.hex_values() == ["#0102ff", "#102030", "#000000"]

    def test_hex_zero_padding(self) -> None:
        """Test that every channel renders as two hex digits."""
        assert Color.from_rgb(1, 2, 255).hex == "#0102ff"
        assert Color.from_rgb(0, 0, 0).hex == "#000000"
        assert Color.from_rgb(171, 205, 239).hex == "#abcdef"

    def test_length_is_raw_length_over_three(self) -> None:
        """Test entry count against raw byte length."""
        raw = bytes(range(24))
        assert len(raw) % 3 == 0
        assert len(decode_color_table(raw)) == len(raw) // 3

    def test_partial_trailing_entry_dropped(self) -> None:
        """Test that a trailing partial triple is ignored."""
        assert len(decode_color_table(bytes(range(14)))) == 4

    def test_lab_follows_rgb(self) -> None:
        """Test that the CIELAB value is derived from the RGB value."""
        white = Color.from_rgb(255, 255, 255)
        assert white.lab.l == pytest.approx(100.0, abs=0.5)

    def test_arrays(self) -> None:
        """Test numpy exports."""
        table = decode_color_table(color_table([(0, 0, 0), (255, 255, 255)]))

        rgb = table.to_rgb_array()
        assert rgb.dtype == np.uint8
        np.testing.assert_array_equal(rgb, [[0, 0, 0], [255, 255, 255]])

        lab = table.to_lab_array()
        assert lab.shape == (2, 3)
        assert lab[1, 0] == pytest.approx(100.0, abs=0.5)

    def test_empty_table_arrays(self) -> None:
        """Test numpy exports of an empty table."""
        table = ColorTable()
        assert table.to_rgb_array().shape == (0, 3)
        assert table.to_lab_array().shape == (0, 3)

    @pytest.mark.parametrize("exponent,expected", [(0, 6), (1, 12), (7, 768)])
    def test_color_table_byte_length(self, exponent: int, expected: int) -> None:
        """Test table sizing from the packed exponent."""
        assert color_table_byte_length(exponent) == expected

    def test_global_table_sized_from_exponent(self) -> None:
        """Test that the global table uses the size exponent, not color resolution."""
        colors = [(i, i, i) for i in range(4)]
        data = (
            header()
            + screen_descriptor(global_table=True, color_resolution=7, table_exponent=1)
            + color_table(colors)
        )
        cursor = ByteCursor(data)
        table = decode_global_color_table(cursor, decode_logical_screen_descriptor(cursor))

        assert len(table) == 4
        assert [c.rgb.r for c in table] == [0, 1, 2, 3]

    def test_global_table_absent(self) -> None:
        """Test that a clear flag yields an empty table."""
        cursor = ByteCursor(header() + screen_descriptor(global_table=False, table_exponent=7))
        table = decode_global_color_table(cursor, decode_logical_screen_descriptor(cursor))
        assert len(table) == 0

    def test_global_table_truncated(self) -> None:
        """Test that a table running past the buffer fails."""
        data = header() + screen_descriptor(global_table=True, table_exponent=1) + b"\x00" * 9
        cursor = ByteCursor(data)

        with pytest.raises(OutOfBoundsError):
            decode_global_color_table(cursor, decode_logical_screen_descriptor(cursor))


class TestGraphicsControlExtensionDecoder:
    """Tests for decode_graphics_control_extension."""

    def test_decode_fields(self) -> None:
        """Test every field of the extension."""
        data = b"\xff\xff" + graphics_control(
            disposal=2, user_input=True, transparent=True, delay=0x0105, index=7
        )
        gce = decode_graphics_control_extension(ByteCursor(data), 2)

        assert gce.disposal_method == 2
        assert gce.disposal_method_name == "restore to background"
        assert gce.user_input_flag is True
        assert gce.transparent_color_flag is True
        assert gce.delay_time == 0x0105
        assert gce.delay_seconds == pytest.approx(2.61)
        assert gce.transparent_color_index == 7

    def test_flags_clear(self) -> None:
        """Test a block with no flags set."""
        gce = decode_graphics_control_extension(ByteCursor(graphics_control(delay=10)), 0)

        assert gce.disposal_method == 0
        assert gce.user_input_flag is False
        assert gce.transparent_color_flag is False
        assert gce.delay_time == 10

    def test_truncated(self) -> None:
        """Test that a short block fails."""
        with pytest.raises(OutOfBoundsError):
            decode_graphics_control_extension(ByteCursor(graphics_control()[:5]), 0)


class TestImageDescriptorDecoder:
    """Tests for decode_image_descriptor."""

    def test_decode_fields(self) -> None:
        """Test every field of the descriptor."""
        block = image_block(
            [b"\x00"],
            left=3,
            top=0x0201,
            width=640,
            height=480,
            interlace=True,
            local_table=[(0, 0, 0)] * 8,
            table_exponent=2,
        )
        descriptor = decode_image_descriptor(ByteCursor(block), 0)

        assert descriptor.left == 3
        assert descriptor.top == 0x0201
        assert descriptor.width == 640
        assert descriptor.height == 480
        assert descriptor.local_color_table_flag is True
        assert descriptor.interlace_flag is True
        assert descriptor.sort_flag is False
        assert descriptor.local_color_table_size_exponent == 2
        assert descriptor.local_color_table_length == 8

    def test_truncated(self) -> None:
        """Test that a short descriptor fails."""
        with pytest.raises(OutOfBoundsError):
            decode_image_descriptor(ByteCursor(image_block([])[:9]), 0)
