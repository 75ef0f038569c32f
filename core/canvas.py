# FILE: core/canvas.py
"""
Pixel buffer the renderer writes colors into
"""
import numpy as np

from .errors import PixelOutOfBoundsError
from .tuples import BLACK, Tuple4, color

PPM_MAX_LINE = 70


class Canvas:
    """Row-major color buffer, origin at the top-left, y grows downward"""

    def __init__(self, width: int, height: int, fill: Tuple4 = BLACK):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)
        self.pixels[:, :] = (fill.red, fill.green, fill.blue)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelOutOfBoundsError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas"
            )

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, c: Tuple4):
        self._check_bounds(x, y)
        self.pixels[y, x] = c.to_array()[:3]

    def pixel_at(self, x: int, y: int) -> Tuple4:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return color(r, g, b)

    def to_rgb8(self) -> np.ndarray:
        """Clamp each channel to [0, 1] and scale to 0..255, halves round up"""
        return np.floor(np.clip(self.pixels, 0.0, 1.0) * 255 + 0.5).astype(np.uint8)

    def to_ppm(self) -> str:
        """Plain (P3) pixmap text, lines wrapped at 70 characters"""
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for row in self.to_rgb8():
            line = ""
            for value in row.reshape(-1):
                token = str(int(value))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > PPM_MAX_LINE:
                    lines.append(line)
                    line = token
                else:
                    line = f"{line} {token}"
            lines.append(line)
        return "\n".join(lines) + "\n"
