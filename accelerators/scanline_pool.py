# FILE: accelerators/scanline_pool.py
"""
Thread pool renderer: one task per scanline, a single writer owns the canvas
"""
import logging
import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from queue import Empty, Queue
from typing import Callable, List, Optional

from core.canvas import Canvas
from scene import Pixel, Scene

logger = logging.getLogger(__name__)

RowsCallback = Callable[[List[List[Pixel]]], None]


class ScanlineRenderer:
    """Fans scanlines out to worker threads and writes finished rows in the calling thread"""

    def __init__(self, scene: Scene, workers: Optional[int] = None, poll_interval: float = 0.05):
        self.scene = scene
        self.workers = workers or os.cpu_count() or 1
        self.poll_interval = poll_interval
        self.rows_done = 0
        self._stop_event = threading.Event()
        self._futures: List[Future] = []

        logger.info(f"ScanlineRenderer initialized: {scene.width}x{scene.height}, workers: {self.workers}")

    def stop(self):
        """Stop dispatching rows; rows already running still finish"""
        self._stop_event.set()
        for future in self._futures:
            future.cancel()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def _render_row(self, y: int) -> List[Pixel]:
        if self._stop_event.is_set():
            return []
        pixels = self.scene.render_row(y)
        logger.debug(f"Row {y} of {self.scene.height}: {len(pixels)} hits")
        return pixels

    def render(self, canvas: Optional[Canvas] = None,
               on_rows: Optional[RowsCallback] = None) -> Canvas:
        """
        Render the scene into a canvas.

        Args:
            canvas: Target buffer, a new black canvas when omitted
            on_rows: Called in this thread with every batch of finished rows,
                and with an empty list whenever no row arrived within
                poll_interval so a preview can keep its event loop alive

        Returns:
            The canvas that was written
        """
        canvas = canvas if canvas is not None else Canvas(self.scene.width, self.scene.height)
        self._stop_event.clear()
        self.rows_done = 0
        finished: Queue = Queue()

        start_time = time.time()
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="scanline") as pool:
            self._futures = []
            for y in range(self.scene.height):
                future = pool.submit(self._render_row, y)
                future.add_done_callback(finished.put)
                self._futures.append(future)

            remaining = len(self._futures)
            while remaining:
                try:
                    done = [finished.get(timeout=self.poll_interval)]
                except Empty:
                    if on_rows:
                        on_rows([])
                    continue
                while True:
                    try:
                        done.append(finished.get_nowait())
                    except Empty:
                        break
                remaining -= len(done)

                batches = []
                for future in done:
                    if future.cancelled():
                        continue
                    pixels = future.result()
                    for px in pixels:
                        canvas.write_pixel(px.x, px.y, px.color)
                    batches.append(pixels)
                    self.rows_done += 1
                if on_rows and batches:
                    on_rows(batches)

        render_time = time.time() - start_time
        logger.info(f"Rendered {self.rows_done}/{self.scene.height} rows in {render_time:.3f}s")
        return canvas

    def render_serial(self, canvas: Optional[Canvas] = None) -> Canvas:
        """Render every row in the calling thread"""
        canvas = canvas if canvas is not None else Canvas(self.scene.width, self.scene.height)
        start_time = time.time()
        for y in range(self.scene.height):
            for px in self._render_row(y):
                canvas.write_pixel(px.x, px.y, px.color)
        logger.info(f"Rendered {self.scene.height} rows serially in {time.time() - start_time:.3f}s")
        return canvas
