import numpy as np
import pytest

from puredpx.errors import DecodeError
from puredpx.sinks import ImageBuffer


def test_finish_returns_background_layer():
    buffer = ImageBuffer(2, 1)
    buffer.write_row(0, np.array([0, 0, 0, 65535, 65535, 0, 0, 65535], dtype=np.uint16))
    image = buffer.finish()

    assert buffer.complete
    assert (image.width, image.height, image.channels) == (2, 1, 4)
    assert image.precision == 'u16-non-linear'
    assert [layer.name for layer in image.layers] == ['Background']
    assert image.pixels.shape == (1, 2, 4)
    assert image.pixels.dtype == np.uint16


def test_finish_with_missing_rows():
    buffer = ImageBuffer(1, 2)
    buffer.write_row(0, np.zeros(4, dtype=np.uint16))

    with pytest.raises(DecodeError):
        buffer.finish()
    assert not buffer.complete


def test_write_row_copies_samples():
    buffer = ImageBuffer(1, 1)
    samples = np.array([1, 2, 3, 4], dtype=np.uint16)
    buffer.write_row(0, samples)
    samples[:] = 0

    assert buffer.pixels[0, 0].tolist() == [1, 2, 3, 4]


def test_write_row_out_of_range():
    with pytest.raises(IndexError):
        ImageBuffer(1, 1).write_row(1, np.zeros(4, dtype=np.uint16))
