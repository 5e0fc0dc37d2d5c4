"""Example: Using the Python API programmatically."""

import sys

from gifkit import GifParser, decode, try_decode
from gifkit.api.processor import DecodeFailure
from gifkit.core.config import DecodeConfigBuilder
from gifkit.io.file_utils import FileUtils

path = sys.argv[1] if len(sys.argv) > 1 else "anim.gif"

# Method 1: Object facade
parser = GifParser.from_path(path)
print("[HEADER BLOCK]", parser.get_header_block())
print("[LOGICAL SCREEN DESCRIPTOR]", parser.get_logical_screen_descriptor())
print("[GLOBAL COLOR TABLE]", parser.get_global_color_table().hex_values())

# Method 2: Pure function with per-frame extensions
config = DecodeConfigBuilder().with_per_frame_extensions().build()
records = decode(FileUtils.read_bytes(path), config)
for index, image in enumerate(records.images):
    gce = image.graphics_control_extension
    delay = f"{gce.delay_seconds:.2f}s" if gce is not None else "-"
    print(f"frame {index}: {len(image.encoded_data)} encoded bytes, delay {delay}")

# Method 3: Result value instead of exceptions
result = try_decode(b"GIF89a")
if isinstance(result, DecodeFailure):
    print(f"decode failed in stage {result.error.stage}: {result.error}")
