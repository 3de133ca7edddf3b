"""Main DPX file handler"""
import os
from typing import BinaryIO, Optional, Union

from .errors import OpenFailedError
from .geometry import MAX_IMAGE_SIZE, validate
from .headers import DPX_HEADER, DPX_MAGIC, read_header
from .rows import stream_rows
from .sinks import DPXImage, ImageBuffer

# Registration details for hosts that dispatch loaders by extension or magic
LOAD_PROC = 'file-dpx-load'
EXTENSIONS = ('dpx',)
MAGICS = ('0,string,SDPX',)

PathLike = Union[str, os.PathLike]

DESCRIPTORS = {
    50: 'RGB',
    51: 'RGBA',
    52: 'ABGR',
}


def is_dpx(prefix: bytes) -> bool:
    """Check whether the leading bytes of a file carry the DPX magic number"""
    return prefix[:4] == DPX_MAGIC


def _seek_pixels(source: BinaryIO, header: DPX_HEADER) -> None:
    if source.tell() != header.pixel_data_offset:
        source.seek(header.pixel_data_offset)


def decode(source: BinaryIO, max_dimension: int = MAX_IMAGE_SIZE) -> DPXImage:
    """
    Decode a 16-bit big-endian RGBA DPX stream

    Args:
        source: Seekable binary stream positioned at the start of the file
        max_dimension: Largest accepted width or height

    Returns:
        DPXImage with a single 'Background' layer of uint16 RGBA pixels

    Raises:
        DecodeError: On the first failure; no partial image is returned
    """
    header = read_header(source)
    row_size = validate(header.width, header.height, max_dimension)

    sink = ImageBuffer(header.width, header.height)
    _seek_pixels(source, header)
    stream_rows(source, header.width, header.height, row_size, sink)

    return sink.finish()


def _open(path: PathLike) -> BinaryIO:
    try:
        return open(path, 'rb')
    except OSError as e:
        raise OpenFailedError(os.fspath(path), e.errno, e.strerror) from e


def load_image(path: PathLike, max_dimension: int = MAX_IMAGE_SIZE) -> DPXImage:
    """Open a DPX file by path and decode it"""
    with _open(path) as f:
        return decode(f, max_dimension)


class DPX:
    """DPX file opened for inspection; pixels are decoded on demand"""
    def __init__(self) -> None:
        self.header: DPX_HEADER = DPX_HEADER()
        self.path: Optional[str] = None
        self._source: Optional[BinaryIO] = None

    def __str__(self) -> str:
        """Return debug string representation of DPX file"""
        header = self.header
        lines = ["DPX File Information:"]
        lines.append(f"  Magic: {header.magic}")
        if header.version:
            lines.append(f"  Version: {header.version}")
        lines.append(f"  Dimensions: {header.width}x{header.height}")
        lines.append(f"  Image Data Offset: {header.pixel_data_offset}")

        if header.file_size:
            lines.append(f"  File Size: {header.file_size} bytes")
        if header.filename:
            lines.append(f"  Filename: {header.filename}")
        if header.timestamp:
            lines.append(f"  Timestamp: {header.timestamp}")
        if header.creator:
            lines.append(f"  Creator: {header.creator}")

        lines.append(f"  Orientation: {header.orientation}")
        lines.append(f"  Image Elements: {header.element_count}")
        descriptor = DESCRIPTORS.get(header.descriptor, 'Other')
        lines.append(f"  Descriptor: {descriptor} ({header.descriptor})")
        lines.append(f"  Bit Depth: {header.bit_depth}")

        return "\n".join(lines)

    @classmethod
    def from_stream(cls, source: BinaryIO) -> 'DPX':
        """Read the header of a DPX stream; the stream is kept for to_image()"""
        dpx = cls()
        dpx.header = read_header(source)
        dpx.header.read_info(source)
        dpx._source = source
        return dpx

    @classmethod
    def from_file(cls, path: PathLike) -> 'DPX':
        """Read the header of a DPX file; the file is reopened by to_image()"""
        with _open(path) as f:
            dpx = cls.from_stream(f)
        dpx.path = os.fspath(path)
        dpx._source = None
        return dpx

    def get_width(self) -> int:
        return self.header.width

    def get_height(self) -> int:
        return self.header.height

    def to_image(self, max_dimension: int = MAX_IMAGE_SIZE) -> DPXImage:
        """
        Decode the pixel data

        Args:
            max_dimension: Largest accepted width or height

        Returns:
            Decoded DPXImage
        """
        if self._source is not None:
            self._source.seek(0)
            return decode(self._source, max_dimension)
        if self.path is None:
            raise ValueError("DPX has no source to decode from")
        return load_image(self.path, max_dimension)
