"""CLI interface for gifkit."""

import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Optional

import click

from gifkit import __version__, constants
from gifkit.api.processor import GifParser
from gifkit.core.config import DecodeConfigBuilder
from gifkit.core.records import ColorTable, GifRecordSet
from gifkit.exceptions import GifKitError
from gifkit.logging_utils import setup_logging

logger = logging.getLogger("gifkit.cli.main")


def _table_summary(table: Optional[ColorTable], include_palette: bool) -> Any:
    if table is None:
        return None
    summary: dict[str, Any] = {"entries": len(table)}
    if include_palette:
        summary["colors"] = table.hex_values()
    return summary


def _records_to_dict(records: GifRecordSet, include_palette: bool) -> dict[str, Any]:
    screen = records.screen_descriptor
    gce = records.graphics_control_extension
    return {
        "header": asdict(records.header),
        "logical_screen_descriptor": {
            **asdict(screen),
            "color_resolution_value": screen.color_resolution_value,
        },
        "global_color_table": _table_summary(records.global_color_table, include_palette),
        "graphics_control_extension": asdict(gce) if gce is not None else None,
        "images": [
            {
                "descriptor": asdict(image.descriptor),
                "local_color_table": _table_summary(image.local_color_table, include_palette),
                "lzw_minimum_code_size": image.lzw_minimum_code_size,
                "encoded_bytes": len(image.encoded_data),
                "graphics_control_extension": (
                    asdict(image.graphics_control_extension)
                    if image.graphics_control_extension is not None
                    else None
                ),
            }
            for image in records.images
        ],
    }


def _echo_records(path: str, records: GifRecordSet, include_palette: bool) -> None:
    header = records.header
    screen = records.screen_descriptor
    click.echo(f"{path}: {header.signature}{header.version}")
    click.echo(
        f"  screen: {screen.width}x{screen.height}, "
        f"color resolution {screen.color_resolution_value}, "
        f"background {screen.background_color_index}, "
        f"aspect {screen.pixel_aspect_ratio}"
    )
    click.echo(f"  global color table: {len(records.global_color_table)} entries")
    if include_palette:
        click.echo(f"    {' '.join(records.global_color_table.hex_values())}")

    gce = records.graphics_control_extension
    if gce is not None:
        click.echo(
            f"  graphics control: delay {gce.delay_time}cs, "
            f"disposal {gce.disposal_method} ({gce.disposal_method_name}), "
            f"transparent {gce.transparent_color_index if gce.transparent_color_flag else '-'}"
        )

    click.echo(f"  images: {records.frame_count}")
    for index, image in enumerate(records.images):
        d = image.descriptor
        local = image.local_color_table
        click.echo(
            f"    [{index}] {d.width}x{d.height}+{d.left}+{d.top}"
            f"{' interlaced' if d.interlace_flag else ''}"
            f", local table {len(local) if local is not None else '-'}"
            f", {len(image.encoded_data)} encoded byte(s)"
        )
        if include_palette and local is not None:
            click.echo(f"        {' '.join(local.hex_values())}")


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """gifkit - GIF structure inspection."""
    setup_logging(level=logging.DEBUG if verbose else None)


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON output.")
@click.option("--palette", is_flag=True, default=False, help="Include palette colors.")
@click.option(
    "--per-frame-extensions",
    is_flag=True,
    default=False,
    help="Attach each graphics control extension to the image that follows it.",
)
def inspect(
    files: tuple[str, ...],
    as_json: bool,
    palette: bool,
    per_frame_extensions: bool,
) -> None:
    """Print the block structure of one or more GIF files.

    Examples:

    \b
        gifkit inspect anim.gif
        gifkit inspect --json --palette anim.gif
    """
    config = DecodeConfigBuilder().with_per_frame_extensions(per_frame_extensions).build()
    failed = False
    results: dict[str, Any] = {}

    for path in files:
        try:
            records = GifParser.from_path(path, config=config).records
        except GifKitError as e:
            logger.debug("Decoding %s failed", path, exc_info=True)
            click.echo(f"Error: {path}: {e}", err=True)
            failed = True
            continue

        if as_json:
            results[path] = _records_to_dict(records, palette)
        else:
            _echo_records(path, records, palette)

    if as_json and results:
        click.echo(json.dumps(results, indent=2))
    if failed:
        sys.exit(1)


@main.command()
@click.argument("file", type=click.Path(dir_okay=False))
@click.option(
    "--image",
    "image_index",
    type=int,
    default=None,
    help="Print the local color table of this image instead of the global table.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(constants.PALETTE_FORMATS, case_sensitive=False),
    default="hex",
    show_default=True,
    help="Color notation.",
)
def palette(file: str, image_index: Optional[int], output_format: str) -> None:
    """Print a color table, one entry per line."""
    try:
        records = GifParser.from_path(file).records
    except GifKitError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    table: Optional[ColorTable] = records.global_color_table
    if image_index is not None:
        if not 0 <= image_index < records.frame_count:
            click.echo(
                f"Error: image index {image_index} out of range (0-{records.frame_count - 1})",
                err=True,
            )
            sys.exit(1)
        table = records.images[image_index].local_color_table
        if table is None:
            click.echo(f"Error: image {image_index} has no local color table", err=True)
            sys.exit(1)

    output_format = output_format.lower()
    for index, color in enumerate(table):
        if output_format == "rgb":
            value = f"{color.rgb.r} {color.rgb.g} {color.rgb.b}"
        elif output_format == "lab":
            value = f"{color.lab.l:.4f} {color.lab.a:.4f} {color.lab.b:.4f}"
        else:
            value = color.hex
        click.echo(f"{index}\t{value}")


if __name__ == "__main__":
    main()
