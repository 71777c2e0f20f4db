"""
Tests for pointer and display coordinate helpers.
"""
import pytest
from PyQt5.QtCore import QPoint, QPointF
from PyQt5.QtGui import QPolygonF

from models.transform import Vec2, BoundingBox, ScaleFactors
from models.frame import Frame
from utils.rotated_rect import axis_aligned_bounding_box
from utils.coordinate_transforms import (
    pointer_position_relative_to, bounding_box_center_in_display,
    frame_display_corners, corners_to_polygon,
)


class TestPointerPosition:

    def test_maps_through_container(self, container):
        assert pointer_position_relative_to(container, QPoint(130, 70)) == Vec2(30, 20)

    def test_accepts_qpointf_and_tuples(self, container):
        assert pointer_position_relative_to(container, QPointF(130.4, 70.6)) == Vec2(30, 21)
        assert pointer_position_relative_to(container, (110, 60)) == Vec2(10, 10)
        assert pointer_position_relative_to(container, Vec2(110, 60)) == Vec2(10, 10)

    def test_no_container_gives_origin(self):
        assert pointer_position_relative_to(None, QPoint(130, 70)) == Vec2(0, 0)

    def test_real_widget(self, qtbot):
        from PyQt5.QtWidgets import QWidget
        widget = QWidget()
        qtbot.addWidget(widget)
        global_pos = widget.mapToGlobal(QPoint(12, 34))
        assert pointer_position_relative_to(widget, global_pos) == Vec2(12, 34)


class TestDisplayGeometry:

    def test_center_in_display(self):
        box = BoundingBox(100, 100, 100, 50)
        assert bounding_box_center_in_display(box, ScaleFactors(2.0, 0.5)) == Vec2(300, 62.5)

    def test_frame_corners_use_true_dimensions(self):
        box = axis_aligned_bounding_box(Vec2(200, 200), 100, 40, 30)
        frame = Frame('f', box, rotation=30.0)
        corners = frame_display_corners(frame, ScaleFactors(1.0, 1.0))
        assert len(corners) == 4
        assert (corners[1] - corners[0]).length() == pytest.approx(100, abs=1e-6)
        assert (corners[2] - corners[1]).length() == pytest.approx(40, abs=1e-6)

    def test_frame_corners_scaled(self):
        frame = Frame('f', BoundingBox(10, 10, 20, 20))
        corners = frame_display_corners(frame, ScaleFactors(2.0, 2.0))
        assert corners[0] == Vec2(20, 20)
        assert corners[2] == Vec2(60, 60)


class TestPolygon:

    def test_polygon_from_corners(self):
        polygon = corners_to_polygon([Vec2(0, 0), Vec2(10, 0), Vec2(10, 5), Vec2(0, 5)])
        assert isinstance(polygon, QPolygonF)
        assert polygon.count() == 4
        assert polygon.boundingRect().width() == pytest.approx(10)
        assert polygon.boundingRect().height() == pytest.approx(5)

    def test_empty(self):
        assert corners_to_polygon([]).isEmpty()
