"""Exception classes for DPX decoding"""
from typing import Optional


class DPXError(Exception):
    """Base exception for all puredpx errors"""
    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class DecodeError(DPXError):
    """Raised when a DPX stream cannot be decoded into an image"""
    pass


class OpenFailedError(DecodeError):
    """The underlying file could not be opened"""
    def __init__(self, path: str, errno: Optional[int], strerror: Optional[str]):
        self.path = path
        self.errno = errno
        self.strerror = strerror
        super().__init__(f"Could not open '{path}' for reading: {strerror}")


class InvalidSignatureError(DecodeError):
    """The first 4 bytes are not the DPX magic number"""
    def __init__(self, magic: bytes):
        self.magic = magic
        super().__init__(f"Invalid DPX magic number: {magic!r}")


class TruncatedError(DecodeError):
    """Fewer bytes were available than the header or pixel data requires"""
    def __init__(self, what: str, expected: int, received: int, row: Optional[int] = None):
        self.what = what
        self.expected = expected
        self.received = received
        self.row = row
        if row is not None:
            message = (f"Premature end of DPX pixel data at row {row}: "
                       f"expected {expected} bytes, got {received}")
        else:
            message = f"Failed to read DPX {what}: expected {expected} bytes, got {received}"
        super().__init__(message)


class DimensionsError(DecodeError):
    """Image geometry that cannot be decoded"""
    def __init__(self, width: int, height: int, message: str):
        self.width = width
        self.height = height
        super().__init__(message)


class DimensionsTooLargeError(DimensionsError):
    """Width or height exceeds the maximum, or the row size overflows"""
    def __init__(self, width: int, height: int):
        super().__init__(width, height, f"Image dimensions too large: width {width} x height {height}")


class InvalidDimensionsError(DimensionsError):
    """Width or height is zero"""
    def __init__(self, width: int, height: int):
        super().__init__(width, height, f"Invalid image dimensions: width {width} x height {height}")


class OutOfMemoryError(DecodeError):
    """A pixel buffer could not be allocated"""
    def __init__(self, nbytes: int):
        self.nbytes = nbytes
        super().__init__(f"There was not enough memory to allocate {nbytes} bytes")
