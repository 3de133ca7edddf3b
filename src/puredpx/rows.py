"""Row-by-row pixel streaming"""
import sys
from typing import BinaryIO
import numpy as np
from numba import jit

from .errors import OutOfMemoryError, TruncatedError
from .geometry import CHANNELS
from .sinks import ImageSink


@jit(nopython=True, cache=True)
def _swap_pairs_jit(raw):
    """JIT-compiled in-place swap of each byte pair in a uint8 array"""
    for i in range(0, raw.shape[0] - 1, 2):
        b = raw[i]
        raw[i] = raw[i + 1]
        raw[i + 1] = b


def be16_to_native(samples: np.ndarray) -> np.ndarray:
    """
    Convert big-endian uint16 samples to host byte order in place

    Args:
        samples: Contiguous uint16 array whose bytes were read from a big-endian source

    Returns:
        The same array, now holding native values
    """
    if sys.byteorder == 'little':
        _swap_pairs_jit(samples.view(np.uint8))
    return samples


def allocate_row(width: int) -> np.ndarray:
    """
    Allocate the reusable row buffer of width * 4 uint16 samples

    Raises:
        OutOfMemoryError: If the allocation fails
    """
    try:
        return np.empty(width * CHANNELS, dtype=np.uint16)
    except MemoryError:
        raise OutOfMemoryError(width * CHANNELS * 2) from None


def _readinto_exact(source: BinaryIO, view: memoryview) -> int:
    """Fill `view` from the stream, returning the number of bytes read"""
    total = 0
    while total < len(view):
        n = source.readinto(view[total:])
        if not n:
            break
        total += n
    return total


def stream_rows(source: BinaryIO, width: int, height: int, row_size: int, sink: ImageSink) -> None:
    """
    Read `height` rows of big-endian RGBA16 samples into a sink

    Rows are read, converted and written strictly top to bottom. The sink
    is not finished; that is left to the caller.

    Args:
        source: Stream positioned at the first pixel row
        width: Image width in pixels
        height: Number of rows
        row_size: Bytes per row, as returned by geometry.validate()
        sink: Receiver for the converted rows

    Raises:
        OutOfMemoryError: If the row buffer cannot be allocated
        TruncatedError: If the stream ends before the last row is complete
    """
    row = allocate_row(width)
    view = memoryview(row).cast('B')
    if len(view) != row_size:
        raise ValueError(f"Row size {row_size} does not match width {width}")

    for y in range(height):
        received = _readinto_exact(source, view)
        if received < row_size:
            raise TruncatedError('pixel data', row_size, received, row=y)

        be16_to_native(row)
        sink.write_row(y, row)
