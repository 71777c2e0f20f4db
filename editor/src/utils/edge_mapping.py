"""Edge/direction mapping for resizing rotated frames.

Edges are logical (rotation-relative): the 'right' edge of a frame rotated
by 90° faces down on screen.
"""

import math

from models.transform import Vec2
from utils.transform_math import degrees_to_radians, rotate_point
from constants import FRAME_EDGES, EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT

# Outward unit normals of an unrotated frame (y-down)
EDGE_NORMALS = {
    EDGE_TOP: Vec2(0.0, -1.0),
    EDGE_RIGHT: Vec2(1.0, 0.0),
    EDGE_BOTTOM: Vec2(0.0, 1.0),
    EDGE_LEFT: Vec2(-1.0, 0.0),
}

OPPOSITE_EDGES = {
    EDGE_TOP: EDGE_BOTTOM,
    EDGE_RIGHT: EDGE_LEFT,
    EDGE_BOTTOM: EDGE_TOP,
    EDGE_LEFT: EDGE_RIGHT,
}


def opposite_edge(edge):
    """Get the opposite edge for a given edge

    Raises:
        ValueError: If edge is not one of top/right/bottom/left
    """
    try:
        return OPPOSITE_EDGES[edge]
    except KeyError:
        raise ValueError(f"Unknown frame edge: {edge!r}") from None


def rotated_edge_normals(rotation_deg):
    """Outward normals of each edge after rotating the frame, keyed by edge"""
    normalized = math.fmod(math.fmod(rotation_deg, 360.0) + 360.0, 360.0)
    angle_rad = degrees_to_radians(normalized)
    return {edge: rotate_point(EDGE_NORMALS[edge], angle_rad) for edge in FRAME_EDGES}


def resize_edge_for_drag_direction(rotation_deg, drag_direction):
    """Determine which logical edge a drag direction most affects

    Args:
        rotation_deg: Frame rotation in degrees
        drag_direction: Normalized drag direction Vec2 (display or image space)

    Returns:
        Edge whose outward normal best aligns with the drag. Ties go to the
        first edge in top, right, bottom, left order.
    """
    normals = rotated_edge_normals(rotation_deg)

    best_edge = FRAME_EDGES[0]
    best_dot = -math.inf
    for edge in FRAME_EDGES:
        normal = normals[edge]
        dot = drag_direction.x * normal.x + drag_direction.y * normal.y
        if dot > best_dot:
            best_dot = dot
            best_edge = edge
    return best_edge
