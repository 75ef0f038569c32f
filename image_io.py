"""
Writing canvases to disk as PPM text or PNG
"""
import logging
import os
import tempfile
from datetime import datetime
from typing import Optional

import cv2
import numpy as np

from core.canvas import Canvas
from core.errors import ImageFileError, UnsupportedImageFormatError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ('ppm', 'png')


def timestamped_path(name: str, extension: str, directory: Optional[str] = None) -> str:
    """Build <directory>/<name>_<date>.<extension> so repeated runs never collide"""
    directory = directory if directory else tempfile.gettempdir()
    stamp = datetime.now().strftime("%Y-%m-%d_%H_%M_%S")
    return os.path.join(directory, f"{name}_{stamp}.{extension}")


def write_ppm(canvas: Canvas, path: str) -> str:
    try:
        with open(path, 'w', encoding='ascii') as f:
            f.write(canvas.to_ppm())
    except OSError as e:
        raise ImageFileError(f"Could not write {path}: {e}") from e
    logger.info(f"File written to disk in {path}")
    return path


def write_png(canvas: Canvas, path: str) -> str:
    # OpenCV expects BGR channel order
    image_bgr = cv2.cvtColor(canvas.to_rgb8(), cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(path, image_bgr):
        raise ImageFileError(f"OpenCV could not write {path}")
    logger.info(f"File written to disk in {path}")
    return path


def read_png(path: str) -> np.ndarray:
    """Load a PNG back as an RGB uint8 array"""
    image_bgr = cv2.imread(path, cv2.IMREAD_COLOR)
    if image_bgr is None:
        raise ImageFileError(f"OpenCV could not read {path}")
    return cv2.cvtColor(image_bgr, cv2.COLOR_BGR2RGB)


def save_canvas(canvas: Canvas, path: str) -> str:
    """Save using the format implied by the file suffix"""
    extension = os.path.splitext(path)[1].lower().lstrip('.')
    if extension == 'ppm':
        return write_ppm(canvas, path)
    elif extension == 'png':
        return write_png(canvas, path)
    else:
        raise UnsupportedImageFormatError(
            f"Unknown image format: {extension!r} (expected one of {', '.join(SUPPORTED_FORMATS)})"
        )
