"""Tests for the live preview window (headless backend)."""
import matplotlib.pyplot as plt
import pytest

from core.tuples import color
from gui.preview import LivePreview
from scene import Pixel
from utils import FrameRateLimiter


@pytest.fixture
def preview():
    p = LivePreview(6, 4, title="test")
    yield p
    plt.close(p.fig)


def test_apply_rows_updates_frame(preview) -> None:
    preview.apply_rows([[Pixel(1, 2, color(0.5, 2.0, -1.0))], []])
    assert preview.rows_shown == 2
    assert preview.frame[2, 1].tolist() == [0.5, 1.0, 0.0]


def test_refresh_pushes_frame_to_image(preview) -> None:
    preview.apply_rows([[Pixel(0, 0, color(1, 0, 0))]])
    preview.refresh()
    shown = preview.image.get_array()
    assert shown[0, 0].tolist() == [1.0, 0.0, 0.0]
    assert preview.info_text.get_text() == "Rows: 1/4"


def test_finish_marks_completion(preview) -> None:
    preview.finish()
    assert preview.info_text.get_text() == "Rendering Complete!"
    assert preview.is_open


def test_frame_rate_limiter_throttles() -> None:
    limiter = FrameRateLimiter(target_fps=1)
    assert limiter.should_update()
    assert not limiter.should_update()
    limiter.update()
    assert not limiter.should_update()
