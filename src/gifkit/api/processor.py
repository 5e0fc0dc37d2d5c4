"""Public Python API for gifkit."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from gifkit import constants
from gifkit.core.config import DecodeConfig
from gifkit.core.cursor import ByteCursor, BytesLike
from gifkit.core.decoders import (
    color_table_byte_length,
    decode_global_color_table,
    decode_graphics_control_extension,
    decode_header,
    decode_logical_screen_descriptor,
)
from gifkit.core.records import (
    ColorTable,
    GifRecordSet,
    GraphicsControlExtension,
    HeaderBlock,
    Image,
    LogicalScreenDescriptor,
)
from gifkit.core.scanner import ImageBlockScanner, skip_extension
from gifkit.exceptions import DecodeError, DecodeStage, InvalidSignatureError, NotYetDecodedError
from gifkit.io.file_utils import FileUtils

logger = logging.getLogger("gifkit.api.processor")


@contextmanager
def _stage(stage: DecodeStage) -> Iterator[None]:
    try:
        yield
    except DecodeError as e:
        if e.stage is None:
            e.stage = stage
        raise


def _blocks_offset(screen_descriptor: LogicalScreenDescriptor) -> int:
    """Offset of the first block after the global color table."""
    if not screen_descriptor.global_color_table_flag:
        return constants.GLOBAL_COLOR_TABLE_OFFSET
    return constants.GLOBAL_COLOR_TABLE_OFFSET + color_table_byte_length(
        screen_descriptor.global_color_table_size_exponent
    )


def _fixed_graphics_control(
    cursor: ByteCursor, block_start: int
) -> Optional[GraphicsControlExtension]:
    if block_start + 2 > cursor.size:
        return None
    introducer = cursor.read_fixed(block_start, 2)
    if (introducer[0], introducer[1]) != (
        constants.EXTENSION_INTRODUCER,
        constants.GRAPHICS_CONTROL_LABEL,
    ):
        return None
    return decode_graphics_control_extension(cursor, block_start)


def _first_graphics_control(
    cursor: ByteCursor, offset: int
) -> Optional[GraphicsControlExtension]:
    """Find the first graphics control extension in the run of extensions at ``offset``.

    Extensions with any other label are walked past by their sub-blocks.
    The search stops at the first byte that is not an extension introducer.
    """
    while (
        offset + 2 <= cursor.size
        and cursor.read_u8(offset) == constants.EXTENSION_INTRODUCER
    ):
        if cursor.read_u8(offset + 1) == constants.GRAPHICS_CONTROL_LABEL:
            return decode_graphics_control_extension(cursor, offset)
        offset, _ = skip_extension(cursor, offset)
    return None


def decode(data: BytesLike, config: Optional[DecodeConfig] = None) -> GifRecordSet:
    """Decode the structure of a GIF file held in memory.

    Args:
        data: Complete file content
        config: Decode options (defaults to DecodeConfig())

    Returns:
        The decoded record set

    Raises:
        DecodeError: If any stage fails; ``stage`` names the failing stage.
            No partial result is produced.

    Example:
        >>> records = decode(Path("anim.gif").read_bytes())
        >>> records.screen_descriptor.width, records.frame_count
        (320, 12)
    """
    config = config or DecodeConfig()
    cursor = ByteCursor(data)

    with _stage(DecodeStage.HEADER):
        header = decode_header(cursor)
        if config.validate_signature and not header.is_gif:
            raise InvalidSignatureError(f"Unexpected signature {header.signature!r}")
        if header.is_gif and header.version not in constants.SUPPORTED_VERSIONS:
            logger.warning("Unknown GIF version %r", header.version)

    with _stage(DecodeStage.SCREEN_DESCRIPTOR):
        screen_descriptor = decode_logical_screen_descriptor(cursor)

    with _stage(DecodeStage.GLOBAL_COLOR_TABLE):
        global_color_table = decode_global_color_table(cursor, screen_descriptor)

    blocks_offset = _blocks_offset(screen_descriptor)

    with _stage(DecodeStage.GRAPHICS_CONTROL_EXTENSION):
        if config.graphics_control_offset is None:
            graphics_control = _first_graphics_control(cursor, blocks_offset)
        else:
            graphics_control = _fixed_graphics_control(cursor, config.graphics_control_offset)

    with _stage(DecodeStage.IMAGES):
        scan_start = config.scan_start_offset
        if scan_start is None:
            scan_start = blocks_offset
        images = ImageBlockScanner(
            cursor, scan_start, per_frame_extensions=config.per_frame_extensions
        ).scan()

    logger.debug(
        "Decoded %s%s %dx%d with %d image(s)",
        header.signature,
        header.version,
        screen_descriptor.width,
        screen_descriptor.height,
        len(images),
    )
    return GifRecordSet(
        header=header,
        screen_descriptor=screen_descriptor,
        global_color_table=global_color_table,
        graphics_control_extension=graphics_control,
        images=images,
    )


@dataclass(frozen=True)
class DecodeOk:
    """Successful decode."""

    records: GifRecordSet


@dataclass(frozen=True)
class DecodeFailure:
    """Failed decode; ``error`` carries the failing stage."""

    error: DecodeError


DecodeResult = Union[DecodeOk, DecodeFailure]


def try_decode(data: BytesLike, config: Optional[DecodeConfig] = None) -> DecodeResult:
    """Decode without raising; return DecodeOk or DecodeFailure."""
    try:
        return DecodeOk(decode(data, config))
    except DecodeError as e:
        return DecodeFailure(e)


class GifParser:
    """Object facade over :func:`decode`.

    ``GifParser(data)`` decodes immediately. A parser created without data
    raises NotYetDecodedError from its accessors until :meth:`parse` runs.
    """

    def __init__(
        self, data: Optional[BytesLike] = None, config: Optional[DecodeConfig] = None
    ) -> None:
        """Initialize the parser and decode ``data`` when given."""
        self._config = config or DecodeConfig()
        self._bin_value: Optional[bytes] = None
        self._records: Optional[GifRecordSet] = None
        if data is not None:
            self.parse(data)

    @classmethod
    def from_path(
        cls, path: Union[str, Path], config: Optional[DecodeConfig] = None
    ) -> "GifParser":
        """Load and decode a file.

        Raises:
            GifReadError: If the file cannot be read.
            DecodeError: If the content cannot be decoded.
        """
        if not FileUtils.is_gif_file(Path(path)):
            logger.debug("%s does not have a .gif extension", path)
        parser = cls(config=config)
        parser.parse(FileUtils.read_bytes(path))
        return parser

    def parse(self, data: BytesLike) -> GifRecordSet:
        """Decode ``data`` and keep the result.

        On failure the parser keeps whatever it held before.
        """
        raw = bytes(data)
        records = decode(raw, self._config)
        self._bin_value = raw
        self._records = records
        return records

    @property
    def records(self) -> GifRecordSet:
        if self._records is None:
            raise NotYetDecodedError("No GIF has been decoded by this parser")
        return self._records

    def get_bin_value(self) -> bytes:
        if self._bin_value is None:
            raise NotYetDecodedError("No GIF has been decoded by this parser")
        return self._bin_value

    def get_header_block(self) -> HeaderBlock:
        return self.records.header

    def get_logical_screen_descriptor(self) -> LogicalScreenDescriptor:
        return self.records.screen_descriptor

    def get_global_color_table(self) -> ColorTable:
        return self.records.global_color_table

    def get_graphics_control_extension(self) -> Optional[GraphicsControlExtension]:
        return self.records.graphics_control_extension

    def get_images(self) -> tuple[Image, ...]:
        return self.records.images
