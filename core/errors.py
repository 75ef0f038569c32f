# FILE: core/errors.py
"""
Exception types raised by the ray tracer
"""


class RayTracerError(Exception):
    """Base class for all ray tracer errors"""


class NonInvertibleMatrixError(RayTracerError, ValueError):
    """Raised when the inverse of a singular matrix is requested"""


class DimensionMismatchError(RayTracerError, ValueError):
    """Raised when matrix/tuple sizes are incompatible"""


class PixelOutOfBoundsError(RayTracerError, IndexError):
    """Raised when a canvas coordinate falls outside the pixel buffer"""


class UnsupportedImageFormatError(RayTracerError, ValueError):
    """Raised when asked to save a canvas in an unknown file format"""


class ImageFileError(RayTracerError, IOError):
    """Raised when an image file could not be written or read"""
