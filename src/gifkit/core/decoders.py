"""Fixed-layout block decoders.

Each decoder reads through a :class:`ByteCursor` at absolute offsets and
returns an immutable record. None of them validate content; they only
extract fields.
"""

import logging

from gifkit import constants
from gifkit.core.cursor import ByteCursor, BytesLike
from gifkit.core.records import (
    Color,
    ColorTable,
    GraphicsControlExtension,
    HeaderBlock,
    ImageDescriptor,
    LogicalScreenDescriptor,
)

logger = logging.getLogger(__name__)


def decode_header(cursor: ByteCursor) -> HeaderBlock:
    """Decode the signature and version from bytes [0, 6)."""
    raw = cursor.read_fixed(0, constants.HEADER_SIZE)
    return HeaderBlock(
        signature=bytes(raw[: constants.SIGNATURE_LENGTH]).decode("latin-1"),
        version=bytes(raw[constants.SIGNATURE_LENGTH :]).decode("latin-1"),
    )


def decode_logical_screen_descriptor(cursor: ByteCursor) -> LogicalScreenDescriptor:
    """Decode the 7-byte logical screen descriptor at offset 6."""
    base = constants.SCREEN_DESCRIPTOR_OFFSET
    cursor.read_fixed(base, constants.SCREEN_DESCRIPTOR_SIZE)
    packed = cursor.read_u8(base + 4)
    return LogicalScreenDescriptor(
        width=cursor.read_u16_le(base),
        height=cursor.read_u16_le(base + 2),
        global_color_table_flag=cursor.read_flag(packed, constants.GLOBAL_COLOR_TABLE_FLAG),
        color_resolution=cursor.read_bit_field(packed, constants.COLOR_RESOLUTION),
        sort_flag=cursor.read_flag(packed, constants.SCREEN_SORT_FLAG),
        global_color_table_size_exponent=cursor.read_bit_field(
            packed, constants.GLOBAL_COLOR_TABLE_SIZE
        ),
        background_color_index=cursor.read_u8(base + 5),
        pixel_aspect_ratio=cursor.read_u8(base + 6),
    )


def color_table_byte_length(size_exponent: int) -> int:
    """Byte length of a color table with ``2 ** (size_exponent + 1)`` entries."""
    return constants.COLOR_ENTRY_SIZE * 2 ** (size_exponent + 1)


def decode_color_table(data: BytesLike) -> ColorTable:
    """Decode consecutive RGB triples.

    A trailing partial triple is ignored.
    """
    view = memoryview(data).cast("B")
    usable = len(view) - len(view) % constants.COLOR_ENTRY_SIZE
    colors = tuple(
        Color.from_rgb(view[i], view[i + 1], view[i + 2])
        for i in range(0, usable, constants.COLOR_ENTRY_SIZE)
    )
    return ColorTable(colors)


def decode_global_color_table(
    cursor: ByteCursor, screen_descriptor: LogicalScreenDescriptor
) -> ColorTable:
    """Decode the global color table following the screen descriptor.

    Returns an empty table when the descriptor's flag is clear.
    """
    if not screen_descriptor.global_color_table_flag:
        return ColorTable()
    length = color_table_byte_length(screen_descriptor.global_color_table_size_exponent)
    raw = cursor.read_fixed(constants.GLOBAL_COLOR_TABLE_OFFSET, length)
    logger.debug("Global color table: %d entries", length // constants.COLOR_ENTRY_SIZE)
    return decode_color_table(raw)


def decode_graphics_control_extension(
    cursor: ByteCursor, block_start: int
) -> GraphicsControlExtension:
    """Decode a graphics control extension whose introducer is at ``block_start``.

    The introducer, label and block size bytes are not checked.
    """
    cursor.read_fixed(block_start, constants.GRAPHICS_CONTROL_SIZE)
    packed = cursor.read_u8(block_start + 3)
    return GraphicsControlExtension(
        disposal_method=cursor.read_bit_field(packed, constants.DISPOSAL_METHOD),
        user_input_flag=cursor.read_flag(packed, constants.USER_INPUT_FLAG),
        transparent_color_flag=cursor.read_flag(packed, constants.TRANSPARENT_COLOR_FLAG),
        delay_time=cursor.read_u16_le(block_start + 4),
        transparent_color_index=cursor.read_u8(block_start + 6),
    )


def decode_image_descriptor(cursor: ByteCursor, offset: int) -> ImageDescriptor:
    """Decode the 10-byte image descriptor that begins with a separator.

    Args:
        cursor: Cursor over the whole file
        offset: Offset of the ``0x2C`` separator byte

    Returns:
        The decoded descriptor
    """
    cursor.read_fixed(offset, constants.IMAGE_DESCRIPTOR_SIZE)
    packed = cursor.read_u8(offset + 9)
    return ImageDescriptor(
        left=cursor.read_u16_le(offset + 1),
        top=cursor.read_u16_le(offset + 3),
        width=cursor.read_u16_le(offset + 5),
        height=cursor.read_u16_le(offset + 7),
        local_color_table_flag=cursor.read_flag(packed, constants.LOCAL_COLOR_TABLE_FLAG),
        interlace_flag=cursor.read_flag(packed, constants.INTERLACE_FLAG),
        sort_flag=cursor.read_flag(packed, constants.IMAGE_SORT_FLAG),
        local_color_table_size_exponent=cursor.read_bit_field(
            packed, constants.LOCAL_COLOR_TABLE_SIZE
        ),
    )
