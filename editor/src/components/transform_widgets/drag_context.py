"""Drag state dataclasses for frame rotation and resize sessions.

One object per active gesture instead of loose attributes on the owner.
"""

from dataclasses import dataclass

from models.transform import BoundingBox, ScaleFactors, Vec2


@dataclass
class RotationDragState:
    """State captured when a rotation drag starts."""
    frame_id: str
    center: Vec2  # Frame center in display coordinates
    start_angle: float  # Degrees, center -> pointer at drag start
    start_rotation: float
    container: object  # Anything with mapFromGlobal(QPoint)
    scale_factors: ScaleFactors


@dataclass
class ResizeDragState:
    """State captured when a resize drag starts.

    start_bounding_box and start_pointer never change during the drag;
    every update works from them with the cumulative pointer delta.
    """
    frame_id: str
    initial_edge: str  # The handle that was grabbed
    current_edge: str  # Edge being resized, may be remapped by drag direction
    start_bounding_box: BoundingBox
    start_pointer: Vec2  # Container-local display coordinates
    rotation: float
    container: object
    scale_factors: ScaleFactors
    edge_mapping_active: bool = False
