"""
Shared fixtures for Frame Editor tests.

Provides reusable frames, scale factors and a fake coordinate container.
"""
import sys
import os
import pytest

# Run Qt headless when no display is available
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

from PyQt5.QtCore import QPoint

from models.transform import BoundingBox, ScaleFactors
from models.frame import Frame, FrameCollection


class FakeContainer:
    """Stands in for a widget: global -> local is a fixed offset."""

    def __init__(self, offset_x=0, offset_y=0):
        self.offset_x = offset_x
        self.offset_y = offset_y

    def mapFromGlobal(self, point):
        return QPoint(point.x() - self.offset_x, point.y() - self.offset_y)


@pytest.fixture
def container():
    """Container whose top-left sits at global (100, 50)"""
    return FakeContainer(100, 50)


@pytest.fixture
def unit_scale():
    return ScaleFactors(1.0, 1.0)


@pytest.fixture
def double_scale():
    """Display shows the image at 2x"""
    return ScaleFactors(2.0, 2.0)


@pytest.fixture
def square_frame():
    """Unrotated 100x100 frame at (100, 100)"""
    return Frame('square', BoundingBox(100, 100, 100, 100))


@pytest.fixture
def wide_frame():
    """Unrotated 200x100 frame at (300, 200)"""
    return Frame('wide', BoundingBox(300, 200, 200, 100))


@pytest.fixture
def frames(square_frame, wide_frame):
    return FrameCollection([square_frame, wide_frame])
