"""Base class for decoded row output"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from .buffer import DPXImage


class ImageSink(ABC):
    """Base class for surfaces that receive decoded pixel rows"""
    @abstractmethod
    def write_row(self, y: int, samples: np.ndarray) -> None:
        """
        Store one decoded row

        Args:
            y: Row index, counted from the top of the image
            samples: uint16 array of width * 4 samples (RGBA) in native byte order.
                The array is reused for the next row, so implementations must copy it.
        """
        pass

    @abstractmethod
    def finish(self) -> 'DPXImage':
        """Mark the surface complete and return the finished image"""
        pass
