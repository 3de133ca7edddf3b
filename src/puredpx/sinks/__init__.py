"""Image sink implementations"""
from .base import ImageSink
from .buffer import ImageBuffer, DPXImage, Layer

__all__ = [
    'ImageSink',
    'ImageBuffer',
    'DPXImage',
    'Layer',
]
