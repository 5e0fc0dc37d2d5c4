"""Image block scanning as an explicit finite-state loop."""

import logging
from enum import Enum, auto
from typing import Optional, cast

from gifkit import constants
from gifkit.core.cursor import ByteCursor
from gifkit.core.decoders import (
    color_table_byte_length,
    decode_color_table,
    decode_graphics_control_extension,
    decode_image_descriptor,
)
from gifkit.core.records import ColorTable, GraphicsControlExtension, Image, ImageDescriptor

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """States of the image block scanner."""

    SEEKING_DESCRIPTOR = auto()
    HAVE_DESCRIPTOR = auto()
    READING_LOCAL_TABLE = auto()
    READING_DATA_SUBBLOCKS = auto()
    DONE = auto()


class ImageBlockScanner:
    """Find every image block after ``start_offset`` and reassemble its data.

    In the default mode only the image separator byte is recognized, so a
    stray ``0x2C`` inside extension data is read as an image descriptor.
    With ``per_frame_extensions`` the scanner also walks extension blocks,
    stops at the trailer, and attaches each graphics control extension to
    the image that follows it.
    """

    def __init__(
        self,
        cursor: ByteCursor,
        start_offset: int,
        per_frame_extensions: bool = False,
    ) -> None:
        self._cursor = cursor
        self._start_offset = start_offset
        self._per_frame_extensions = per_frame_extensions

    def scan(self) -> tuple[Image, ...]:
        """Run the scan to completion.

        Returns:
            Images in file order

        Raises:
            OutOfBoundsError: If any block runs past the end of the buffer.
        """
        cursor = self._cursor
        images: list[Image] = []
        state = ScanState.SEEKING_DESCRIPTOR
        offset = self._start_offset

        descriptor: Optional[ImageDescriptor] = None
        local_table: Optional[ColorTable] = None
        local_table_length = 0
        code_size = 0
        data = bytearray()
        pending_extension: Optional[GraphicsControlExtension] = None

        while state is not ScanState.DONE:
            if state is ScanState.SEEKING_DESCRIPTOR:
                if offset >= cursor.size:
                    state = ScanState.DONE
                    continue
                byte = cursor.read_u8(offset)
                if byte == constants.IMAGE_SEPARATOR:
                    state = ScanState.HAVE_DESCRIPTOR
                elif self._per_frame_extensions and byte == constants.EXTENSION_INTRODUCER:
                    offset, extension = skip_extension(cursor, offset)
                    if extension is not None:
                        pending_extension = extension
                elif self._per_frame_extensions and byte == constants.TRAILER:
                    state = ScanState.DONE
                else:
                    offset += 1

            elif state is ScanState.HAVE_DESCRIPTOR:
                descriptor = decode_image_descriptor(cursor, offset)
                logger.debug(
                    "Image descriptor at offset %d: %dx%d+%d+%d",
                    offset,
                    descriptor.width,
                    descriptor.height,
                    descriptor.left,
                    descriptor.top,
                )
                offset += constants.IMAGE_DESCRIPTOR_SIZE
                if descriptor.local_color_table_flag:
                    local_table_length = color_table_byte_length(
                        descriptor.local_color_table_size_exponent
                    )
                    state = ScanState.READING_LOCAL_TABLE
                else:
                    local_table = None
                    code_size = cursor.read_u8(offset)
                    offset += 1
                    state = ScanState.READING_DATA_SUBBLOCKS

            elif state is ScanState.READING_LOCAL_TABLE:
                local_table = decode_color_table(cursor.read_fixed(offset, local_table_length))
                offset += local_table_length
                code_size = cursor.read_u8(offset)
                offset += 1
                state = ScanState.READING_DATA_SUBBLOCKS

            elif state is ScanState.READING_DATA_SUBBLOCKS:
                block_size = cursor.read_u8(offset)
                offset += 1
                if block_size == constants.BLOCK_TERMINATOR:
                    images.append(
                        Image(
                            descriptor=cast(ImageDescriptor, descriptor),
                            local_color_table=local_table,
                            lzw_minimum_code_size=code_size,
                            encoded_data=bytes(data),
                            graphics_control_extension=pending_extension,
                        )
                    )
                    logger.debug("Image %d: %d encoded byte(s)", len(images) - 1, len(data))
                    descriptor = None
                    local_table = None
                    pending_extension = None
                    data = bytearray()
                    state = ScanState.SEEKING_DESCRIPTOR
                else:
                    data += cursor.read_fixed(offset, block_size)
                    offset += block_size

        return tuple(images)


def skip_extension(
    cursor: ByteCursor, offset: int
) -> tuple[int, Optional[GraphicsControlExtension]]:
    """Walk past the extension block introduced at ``offset``.

    Returns:
        Offset after the block terminator, and the decoded extension if
        the block is a graphics control extension
    """
    label = cursor.read_u8(offset + 1)
    extension = None
    if label == constants.GRAPHICS_CONTROL_LABEL:
        extension = decode_graphics_control_extension(cursor, offset)
        logger.debug("Graphics control extension at offset %d", offset)

    offset += 2
    while True:
        block_size = cursor.read_u8(offset)
        offset += 1
        if block_size == constants.BLOCK_TERMINATOR:
            return offset, extension
        cursor.read_fixed(offset, block_size)
        offset += block_size
