"""In-memory RGBA16 image surface"""
from dataclasses import dataclass, field
from typing import List
import numpy as np

from .base import ImageSink
from ..errors import DecodeError, OutOfMemoryError
from ..geometry import CHANNELS

BACKGROUND_LAYER = 'Background'
PRECISION = 'u16-non-linear'  # Babl "R'G'B'A u16"


@dataclass
class Layer:
    """A named pixel plane of shape (height, width, 4)"""
    name: str
    pixels: np.ndarray


@dataclass
class DPXImage:
    """Decoded DPX image"""
    width: int
    height: int
    layers: List[Layer] = field(default_factory=list)
    channels: int = CHANNELS
    color_model: str = 'RGB'
    precision: str = PRECISION

    @property
    def pixels(self) -> np.ndarray:
        """Pixels of the background layer as uint16 RGBA"""
        return self.layers[0].pixels


class ImageBuffer(ImageSink):
    """numpy-backed surface holding a single background layer"""

    def __init__(self, width: int, height: int):
        """
        Allocate the surface

        Args:
            width: Image width in pixels
            height: Image height in pixels

        Raises:
            OutOfMemoryError: If the pixel array cannot be allocated
        """
        self.width = width
        self.height = height
        try:
            self.pixels = np.zeros((height, width, CHANNELS), dtype=np.uint16)
        except MemoryError:
            raise OutOfMemoryError(width * height * CHANNELS * 2) from None
        self._written = np.zeros(height, dtype=bool)
        self.complete = False

    def write_row(self, y: int, samples: np.ndarray) -> None:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of range for height {self.height}")
        self.pixels[y] = samples.reshape(self.width, CHANNELS)
        self._written[y] = True

    def rows_written(self) -> int:
        return int(self._written.sum())

    def finish(self) -> DPXImage:
        """
        Publish the surface as a DPXImage

        Raises:
            DecodeError: If any row has not been written
        """
        missing = self.height - self.rows_written()
        if missing:
            raise DecodeError(f"Cannot finish image: {missing} of {self.height} rows missing")
        self.complete = True
        return DPXImage(
            width=self.width,
            height=self.height,
            layers=[Layer(BACKGROUND_LAYER, self.pixels)],
        )
