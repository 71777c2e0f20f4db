"""
Tests for edge/direction mapping.
"""
import math
import pytest

from models.transform import Vec2
from utils.edge_mapping import opposite_edge, rotated_edge_normals, resize_edge_for_drag_direction

UP = Vec2(0, -1)
RIGHT = Vec2(1, 0)
DOWN = Vec2(0, 1)
LEFT = Vec2(-1, 0)


class TestOppositeEdge:

    @pytest.mark.parametrize("edge, expected", [
        ('top', 'bottom'),
        ('right', 'left'),
        ('bottom', 'top'),
        ('left', 'right'),
    ])
    def test_opposites(self, edge, expected):
        assert opposite_edge(edge) == expected

    @pytest.mark.parametrize("edge", ['top', 'right', 'bottom', 'left'])
    def test_involution(self, edge):
        assert opposite_edge(opposite_edge(edge)) == edge

    def test_unknown_edge_raises(self):
        with pytest.raises(ValueError):
            opposite_edge('center')


class TestRotatedEdgeNormals:

    def test_unrotated_normals(self):
        normals = rotated_edge_normals(0)
        assert normals['top'] == Vec2(0, -1)
        assert normals['right'] == Vec2(1, 0)

    def test_normals_stay_unit_length(self):
        for normal in rotated_edge_normals(33).values():
            assert normal.length() == pytest.approx(1.0)

    def test_negative_rotation_matches_positive_equivalent(self):
        a = rotated_edge_normals(-90)
        b = rotated_edge_normals(270)
        for edge in a:
            assert a[edge].x == pytest.approx(b[edge].x, abs=1e-12)
            assert a[edge].y == pytest.approx(b[edge].y, abs=1e-12)


class TestResizeEdgeForDragDirection:

    @pytest.mark.parametrize("direction, expected", [
        (UP, 'top'), (RIGHT, 'right'), (DOWN, 'bottom'), (LEFT, 'left'),
    ])
    def test_unrotated(self, direction, expected):
        assert resize_edge_for_drag_direction(0, direction) == expected

    @pytest.mark.parametrize("direction, expected", [
        (UP, 'left'), (RIGHT, 'top'), (DOWN, 'right'), (LEFT, 'bottom'),
    ])
    def test_quarter_turn(self, direction, expected):
        assert resize_edge_for_drag_direction(90, direction) == expected

    @pytest.mark.parametrize("direction, expected", [
        (UP, 'bottom'), (RIGHT, 'left'), (DOWN, 'top'), (LEFT, 'right'),
    ])
    def test_half_turn(self, direction, expected):
        assert resize_edge_for_drag_direction(180, direction) == expected

    @pytest.mark.parametrize("direction, expected", [
        (UP, 'right'), (RIGHT, 'bottom'), (DOWN, 'left'), (LEFT, 'top'),
    ])
    def test_negative_quarter_turn(self, direction, expected):
        assert resize_edge_for_drag_direction(-90, direction) == expected

    def test_tie_goes_to_first_edge_in_order(self):
        # Up-right is equally aligned with top and right
        diagonal = Vec2(1 / math.sqrt(2), -1 / math.sqrt(2))
        assert resize_edge_for_drag_direction(0, diagonal) == 'top'

    def test_slightly_rotated_frame(self):
        # A 20° frame still resizes its right edge when dragged right
        assert resize_edge_for_drag_direction(20, RIGHT) == 'right'
