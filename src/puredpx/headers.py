"""DPX header structures"""
import struct
from typing import BinaryIO

from .errors import InvalidSignatureError, TruncatedError

# Big-endian magic number; the little-endian 'XPDS' variant is not supported
DPX_MAGIC = b'SDPX'

# Image information header: pixels per line and lines per element
DIMENSIONS_OFFSET = 772

# First byte after the dimension fields
PIXEL_DATA_OFFSET = DIMENSIONS_OFFSET + 8

# Generic and image header fields shown by DPX.__str__
# (name, offset, struct format)
INFO_FIELDS = (
    ('version', 8, '8s'),
    ('file_size', 16, '>I'),
    ('filename', 36, '100s'),
    ('timestamp', 136, '24s'),
    ('creator', 160, '100s'),
    ('orientation', 768, '>H'),
    ('element_count', 770, '>H'),
    ('descriptor', 800, 'B'),
    ('bit_depth', 803, 'B'),
)


def read_exact(source: BinaryIO, size: int) -> bytes:
    """
    Read exactly `size` bytes, looping over short reads.

    Returns fewer bytes only when the stream ends first.
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)


class DPX_HEADER:
    """DPX header fields needed to locate and size the pixel data"""
    def __init__(self) -> None:
        self.magic: bytes = DPX_MAGIC  # Magic number (always "SDPX")
        self.data_offset: int = 0  # Offset to image data, 0 if unset
        self.width: int = 0  # Pixels per line
        self.height: int = 0  # Lines per image element

        # Informational only, filled by read_info()
        self.version: str = ''
        self.file_size: int = 0
        self.filename: str = ''
        self.timestamp: str = ''
        self.creator: str = ''
        self.orientation: int = 0
        self.element_count: int = 0
        self.descriptor: int = 0
        self.bit_depth: int = 0

    @property
    def pixel_data_offset(self) -> int:
        """Stream position of the first pixel row"""
        if self.data_offset >= PIXEL_DATA_OFFSET:
            return self.data_offset
        return PIXEL_DATA_OFFSET

    @classmethod
    def from_stream(cls, source: BinaryIO) -> 'DPX_HEADER':
        """
        Read the magic number and image dimensions from a DPX stream

        Args:
            source: Seekable binary stream positioned at the start of the file

        Returns:
            DPX_HEADER with width and height in native byte order

        Raises:
            TruncatedError: If the stream ends before the dimension fields
            InvalidSignatureError: If the magic number is not 'SDPX'
        """
        header = cls()

        magic = read_exact(source, 4)
        if len(magic) < 4:
            raise TruncatedError('header', 4, len(magic))
        if magic != DPX_MAGIC:
            raise InvalidSignatureError(magic)
        header.magic = magic

        offset = read_exact(source, 4)
        if len(offset) < 4:
            raise TruncatedError('header', 4, len(offset))
        header.data_offset = struct.unpack('>I', offset)[0]

        try:
            source.seek(DIMENSIONS_OFFSET)
        except (OSError, ValueError) as e:
            raise TruncatedError('image dimensions', 8, 0) from e

        dimensions = read_exact(source, 8)
        if len(dimensions) < 8:
            raise TruncatedError('image dimensions', 8, len(dimensions))
        header.width, header.height = struct.unpack('>2I', dimensions)

        return header

    def read_info(self, source: BinaryIO) -> None:
        """
        Fill the informational fields from the first bytes of the stream.

        Fields past the end of the stream keep their defaults. The stream
        position is left undefined; callers seek before reading pixels.
        """
        source.seek(0)
        end = max(offset + struct.calcsize(fmt) for _, offset, fmt in INFO_FIELDS)
        data = read_exact(source, end)

        for name, offset, fmt in INFO_FIELDS:
            if offset + struct.calcsize(fmt) > len(data):
                continue
            value = struct.unpack_from(fmt, data, offset)[0]
            if isinstance(value, bytes):
                value = value.split(b'\x00', 1)[0].decode('ascii', errors='replace')
            setattr(self, name, value)


def read_header(source: BinaryIO) -> DPX_HEADER:
    """Read and validate the DPX header, leaving the cursor after the dimensions"""
    return DPX_HEADER.from_stream(source)
