import sys

import pytest

from puredpx.errors import DimensionsTooLargeError, InvalidDimensionsError
from puredpx.geometry import MAX_IMAGE_SIZE, checked_mul, validate


def test_row_size():
    assert validate(2, 1) == 16
    assert validate(1920, 1080) == 1920 * 8
    assert validate(MAX_IMAGE_SIZE, MAX_IMAGE_SIZE) == MAX_IMAGE_SIZE * 8


@pytest.mark.parametrize('width,height', [
    (MAX_IMAGE_SIZE + 1, 1),
    (1, MAX_IMAGE_SIZE + 1),
    (0xFFFFFFFF, 0xFFFFFFFF),
])
def test_too_large(width, height):
    with pytest.raises(DimensionsTooLargeError) as excinfo:
        validate(width, height)
    assert excinfo.value.width == width
    assert excinfo.value.height == height


def test_custom_ceiling():
    assert validate(100, 100, max_dim=100) == 800
    with pytest.raises(DimensionsTooLargeError):
        validate(101, 100, max_dim=100)


@pytest.mark.parametrize('width,height', [(0, 1), (1, 0), (0, 0)])
def test_zero_dimensions(width, height):
    with pytest.raises(InvalidDimensionsError):
        validate(width, height)


def test_row_size_overflow():
    width = sys.maxsize // 8 + 1
    with pytest.raises(DimensionsTooLargeError):
        validate(width, 1, max_dim=sys.maxsize)


def test_checked_mul():
    assert checked_mul(3, 4, 2) == 24
    with pytest.raises(OverflowError):
        checked_mul(sys.maxsize, 2)
