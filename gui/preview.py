# FILE: gui/preview.py
"""
Live preview window that fills in scanlines as they finish rendering
"""
import logging
from typing import List

import matplotlib.pyplot as plt
import numpy as np

from config import DISPLAY_SETTINGS
from scene import Pixel
from utils import FrameRateLimiter

logger = logging.getLogger(__name__)


class LivePreview:
    """Matplotlib window showing the canvas while it is being rendered"""

    def __init__(self, width: int, height: int,
                 title: str = DISPLAY_SETTINGS['window_title'],
                 target_fps: int = DISPLAY_SETTINGS['target_fps']):
        self.width = width
        self.height = height
        self.frame = np.zeros((height, width, 3), dtype=np.float32)
        self.limiter = FrameRateLimiter(target_fps)
        self.rows_shown = 0

        self.fig = plt.figure(figsize=(6, 6 * height / width))
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(title)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.axis('off')
        self.image = self.ax.imshow(self.frame, interpolation='nearest')
        self.info_text = self.ax.text(4, 12, 'Rendering...', color='white', fontsize=9)

    def show(self):
        plt.show(block=False)
        self.refresh()

    @property
    def is_open(self) -> bool:
        return plt.fignum_exists(self.fig.number)

    def apply_rows(self, batches: List[List[Pixel]]):
        """Copy finished pixels into the displayed frame and redraw when due"""
        for pixels in batches:
            for px in pixels:
                self.frame[px.y, px.x] = np.clip(px.color.to_array()[:3], 0, 1)
            self.rows_shown += 1

        if self.limiter.should_update():
            self.refresh()
        elif self.is_open:
            self.fig.canvas.flush_events()

    def refresh(self):
        self.image.set_data(self.frame)
        self.info_text.set_text(f"Rows: {self.rows_shown}/{self.height}")
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def finish(self):
        self.limiter.update()
        self.refresh()
        self.info_text.set_text("Rendering Complete!")
        self.fig.canvas.draw_idle()

    def wait(self):
        """Keep the window open until the user closes it"""
        logger.info("Close the preview window to exit")
        try:
            while self.is_open:
                plt.pause(DISPLAY_SETTINGS['update_interval'] * 10)
        except KeyboardInterrupt:
            logger.info("Preview closed by user")
        finally:
            plt.close(self.fig)
