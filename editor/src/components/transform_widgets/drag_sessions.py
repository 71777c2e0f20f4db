"""Rotation and resize drag sessions for frames.

A session is created idle, becomes active on start() and goes back to idle
on end(). While active it turns raw pointer samples into a new rotation or
bounding box; it never touches the frame itself. Whoever owns the session
applies the values and decides what to redraw.
"""

import logging
import math

from models.transform import Vec2
from utils.coordinate_transforms import pointer_position_relative_to, bounding_box_center_in_display
from utils.transform_math import angle_between_points, normalize_angle
from utils.edge_mapping import resize_edge_for_drag_direction
from services.frame_resize import calculate_resized_bounding_box
from constants import FRAME_EDGES, MIN_FRAME_WIDTH, MIN_FRAME_HEIGHT, EDGE_MAPPING_MIN_DRAG
from .drag_context import RotationDragState, ResizeDragState

logger = logging.getLogger(__name__)


class RotationDragSession:
    """Rotate a frame around its center by dragging a handle.

    The new rotation is the start rotation plus the angle swept by the
    pointer around the frame center, normalized to (-180, 180].
    """

    def __init__(self):
        self._state = None

    @property
    def is_active(self):
        return self._state is not None

    @property
    def frame_id(self):
        return self._state.frame_id if self._state else None

    def start(self, frame, pointer_pos, container, scale_factors):
        """Begin rotating a frame

        Args:
            frame: Frame being rotated
            pointer_pos: Raw (global) pointer position
            container: Coordinate reference with mapFromGlobal(QPoint)
            scale_factors: Display units per image unit

        Returns:
            True if the session is now active, False without a container
        """
        if container is None:
            logger.debug("Rotation drag for %s ignored: no container", frame.id)
            return False

        center = bounding_box_center_in_display(frame.bounding_box, scale_factors)
        pointer = pointer_position_relative_to(container, pointer_pos)

        self._state = RotationDragState(
            frame_id=frame.id,
            center=center,
            start_angle=angle_between_points(center, pointer),
            start_rotation=frame.rotation,
            container=container,
            scale_factors=scale_factors,
        )
        return True

    def update(self, pointer_pos):
        """New frame rotation for a pointer sample, or None when idle"""
        state = self._state
        if state is None:
            return None

        pointer = pointer_position_relative_to(state.container, pointer_pos)
        current_angle = angle_between_points(state.center, pointer)
        return normalize_angle(state.start_rotation + current_angle - state.start_angle)

    def end(self):
        self._state = None


class ResizeDragSession:
    """Resize a frame by dragging one of its edge handles.

    Every update resizes the session-start bounding box by the cumulative
    pointer delta, so replaying a sample gives the same box. For rotated
    frames the effective edge follows the drag direction once the pointer
    has moved far enough.
    """

    def __init__(self, image_width=math.inf, image_height=math.inf,
                 min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT,
                 edge_mapping_threshold=EDGE_MAPPING_MIN_DRAG):
        self.image_width = image_width
        self.image_height = image_height
        self.min_width = min_width
        self.min_height = min_height
        self.edge_mapping_threshold = edge_mapping_threshold
        self._state = None

    @property
    def is_active(self):
        return self._state is not None

    @property
    def frame_id(self):
        return self._state.frame_id if self._state else None

    @property
    def current_edge(self):
        return self._state.current_edge if self._state else None

    @property
    def edge_mapping_active(self):
        return self._state.edge_mapping_active if self._state else False

    def start(self, frame, edge, pointer_pos, container, scale_factors):
        """Begin resizing a frame from one of its edges

        Args:
            frame: Frame being resized
            edge: Edge handle that was grabbed
            pointer_pos: Raw (global) pointer position
            container: Coordinate reference with mapFromGlobal(QPoint)
            scale_factors: Display units per image unit

        Returns:
            True if the session is now active, False without a container

        Raises:
            ValueError: If edge is not one of top/right/bottom/left
        """
        if edge not in FRAME_EDGES:
            raise ValueError(f"Unknown frame edge: {edge!r}")
        if container is None:
            logger.debug("Resize drag for %s ignored: no container", frame.id)
            return False

        self._state = ResizeDragState(
            frame_id=frame.id,
            initial_edge=edge,
            current_edge=edge,
            start_bounding_box=frame.bounding_box,
            start_pointer=pointer_position_relative_to(container, pointer_pos),
            rotation=frame.rotation,
            container=container,
            scale_factors=scale_factors,
        )
        return True

    def update(self, pointer_pos):
        """New bounding box for a pointer sample, or None when idle"""
        state = self._state
        if state is None:
            return None

        pointer = pointer_position_relative_to(state.container, pointer_pos)
        delta = pointer - state.start_pointer

        distance = delta.length()
        if state.rotation != 0 and math.isfinite(state.rotation) and distance > self.edge_mapping_threshold:
            direction = Vec2(delta.x / distance, delta.y / distance)
            mapped_edge = resize_edge_for_drag_direction(state.rotation, direction)
            if mapped_edge != state.current_edge:
                logger.debug("Resize edge for %s remapped %s -> %s",
                             state.frame_id, state.current_edge, mapped_edge)
                state.current_edge = mapped_edge
                state.edge_mapping_active = True

        return calculate_resized_bounding_box(
            state.start_bounding_box,
            state.current_edge,
            delta,
            state.scale_factors,
            state.rotation,
            self.image_width,
            self.image_height,
            self.min_width,
            self.min_height,
        )

    def end(self):
        self._state = None
