"""puredpx - 16-bit RGBA DPX image decoder"""

__version__ = "0.1.0"

# Main DPX class and entry points
from .dpx import DPX, decode, load_image, is_dpx, LOAD_PROC, EXTENSIONS, MAGICS

# Pipeline stages
from .headers import DPX_HEADER, DPX_MAGIC, PIXEL_DATA_OFFSET, read_header
from .geometry import MAX_IMAGE_SIZE, validate
from .rows import be16_to_native, stream_rows

# Output surfaces
from .sinks import ImageSink, ImageBuffer, DPXImage, Layer

# Errors
from .errors import (
    DPXError,
    DecodeError,
    OpenFailedError,
    InvalidSignatureError,
    TruncatedError,
    DimensionsError,
    DimensionsTooLargeError,
    InvalidDimensionsError,
    OutOfMemoryError,
)

# CLI entry point
from .cli import main

__all__ = [
    '__version__',
    'DPX',
    'decode',
    'load_image',
    'is_dpx',
    'LOAD_PROC',
    'EXTENSIONS',
    'MAGICS',
    'DPX_HEADER',
    'DPX_MAGIC',
    'PIXEL_DATA_OFFSET',
    'read_header',
    'MAX_IMAGE_SIZE',
    'validate',
    'be16_to_native',
    'stream_rows',
    'ImageSink',
    'ImageBuffer',
    'DPXImage',
    'Layer',
    'DPXError',
    'DecodeError',
    'OpenFailedError',
    'InvalidSignatureError',
    'TruncatedError',
    'DimensionsError',
    'DimensionsTooLargeError',
    'InvalidDimensionsError',
    'OutOfMemoryError',
    'main',
]
