"""
Tests for the geometry value types, Frame and FrameCollection.
"""
import uuid
import pytest
from dataclasses import FrozenInstanceError

from models import Vec2, BoundingBox, Frame, FrameCollection, create_detected_frame


# ══════════════════════════════════════════════════════════════════════════
# Value types
# ══════════════════════════════════════════════════════════════════════════

class TestVec2:

    def test_unpacking(self):
        x, y = Vec2(3, 4)
        assert (x, y) == (3, 4)

    def test_arithmetic(self):
        assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
        assert Vec2(5, 5) - Vec2(2, 7) == Vec2(3, -2)

    def test_length(self):
        assert Vec2(3, 4).length() == pytest.approx(5.0)

    def test_immutable(self):
        with pytest.raises(FrozenInstanceError):
            Vec2(1, 2).x = 5


class TestBoundingBox:

    def test_center(self):
        assert BoundingBox(10, 20, 100, 50).center == Vec2(60, 45)

    def test_right_and_bottom(self):
        box = BoundingBox(10, 20, 100, 50)
        assert box.right == 110
        assert box.bottom == 70


# ══════════════════════════════════════════════════════════════════════════
# Frame
# ══════════════════════════════════════════════════════════════════════════

class TestFrame:

    def test_defaults(self):
        frame = Frame('a', BoundingBox(0, 0, 10, 10))
        assert frame.rotation == 0.0
        assert frame.area == 0.0

    def test_with_rotation_returns_new_frame(self):
        frame = Frame('a', BoundingBox(0, 0, 10, 10))
        rotated = frame.with_rotation(30.0)
        assert rotated.rotation == 30.0
        assert frame.rotation == 0.0
        assert rotated.bounding_box is frame.bounding_box

    def test_with_bounding_box(self):
        frame = Frame('a', BoundingBox(0, 0, 10, 10), rotation=12.0)
        moved = frame.with_bounding_box(BoundingBox(5, 5, 20, 20))
        assert moved.bounding_box == BoundingBox(5, 5, 20, 20)
        assert moved.rotation == 12.0
        assert moved.id == 'a'


class TestCreateDetectedFrame:

    def test_large_detection_becomes_frame(self):
        frame = create_detected_frame(BoundingBox(10, 10, 100, 60))
        assert frame is not None
        assert frame.rotation == 0.0
        assert frame.area == 6000
        uuid.UUID(frame.id)

    def test_ids_are_unique(self):
        box = BoundingBox(10, 10, 100, 60)
        assert create_detected_frame(box).id != create_detected_frame(box).id

    def test_explicit_id(self):
        frame = create_detected_frame(BoundingBox(0, 0, 100, 100), frame_id='frame-1')
        assert frame.id == 'frame-1'

    def test_small_area_rejected(self):
        # 40x40 = 1600 < 2500
        assert create_detected_frame(BoundingBox(0, 0, 40, 40)) is None

    def test_thin_detection_rejected(self):
        # Large area but one side under 30
        assert create_detected_frame(BoundingBox(0, 0, 500, 20)) is None

    def test_custom_thresholds(self):
        box = BoundingBox(0, 0, 40, 40)
        assert create_detected_frame(box, min_area=1000, min_dimension=10) is not None


# ══════════════════════════════════════════════════════════════════════════
# FrameCollection
# ══════════════════════════════════════════════════════════════════════════

class TestFrameCollection:

    def test_initial_frames(self, frames):
        assert len(frames) == 2
        assert frames.ids == ['square', 'wide']
        assert 'square' in frames

    def test_iteration_order(self, frames):
        assert [frame.id for frame in frames] == ['square', 'wide']

    def test_get_missing_returns_none(self, frames):
        assert frames.get('nope') is None

    def test_add_replaces_same_id(self, frames):
        frames.add(Frame('square', BoundingBox(0, 0, 50, 50)))
        assert len(frames) == 2
        assert frames.get('square').bounding_box.width == 50

    def test_update_rotation(self, frames):
        updated = frames.update_rotation('square', 45.0)
        assert updated.rotation == 45.0
        assert frames.get('square').rotation == 45.0

    def test_update_bounding_box(self, frames):
        frames.update_bounding_box('wide', BoundingBox(1, 2, 3, 4))
        assert frames.get('wide').bounding_box == BoundingBox(1, 2, 3, 4)

    def test_unknown_id_raises(self, frames):
        with pytest.raises(KeyError):
            frames.update_rotation('nope', 1.0)
        with pytest.raises(KeyError):
            frames.update_bounding_box('nope', BoundingBox(0, 0, 1, 1))
        with pytest.raises(KeyError):
            frames.remove('nope')

    def test_remove_and_clear(self, frames):
        removed = frames.remove('square')
        assert removed.id == 'square'
        assert frames.ids == ['wide']
        frames.clear()
        assert len(frames) == 0

    def test_iterating_while_removing(self, frames):
        for frame in frames:
            frames.remove(frame.id)
        assert len(frames) == 0
