"""Image geometry validation"""
import sys

from .errors import DimensionsTooLargeError, InvalidDimensionsError

# Largest width or height accepted by default
MAX_IMAGE_SIZE = 524288

CHANNELS = 4  # R, G, B, A
BYTES_PER_SAMPLE = 2  # uint16


def checked_mul(*factors: int) -> int:
    """
    Multiply factors, failing if the product exceeds the platform size type

    Raises:
        OverflowError: If the product is larger than sys.maxsize
    """
    product = 1
    for factor in factors:
        product *= factor
        if product > sys.maxsize:
            raise OverflowError(f"{' * '.join(str(f) for f in factors)} overflows size type")
    return product


def validate(width: int, height: int, max_dim: int = MAX_IMAGE_SIZE) -> int:
    """
    Check image dimensions and compute the size of one pixel row

    Args:
        width: Pixels per line
        height: Number of lines
        max_dim: Largest accepted width or height

    Returns:
        Row size in bytes (width * 4 channels * 2 bytes)

    Raises:
        DimensionsTooLargeError: If a dimension exceeds max_dim or the row size overflows
        InvalidDimensionsError: If a dimension is zero
    """
    if width > max_dim or height > max_dim:
        raise DimensionsTooLargeError(width, height)
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)

    try:
        return checked_mul(width, CHANNELS, BYTES_PER_SAMPLE)
    except OverflowError:
        raise DimensionsTooLargeError(width, height) from None
