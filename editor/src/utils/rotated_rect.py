"""
Frame Editor - Rotated Rectangle Geometry

Corner, edge and bounding box calculations for rotated frames, plus the
inverse problem: recovering a frame's true (unrotated) width/height from its
axis-aligned bounding box and rotation.

IMPORTANT: a frame's bounding box width/height are NOT the frame's own
dimensions once it is rotated. Anything rotation-aware must work on the
dimensions returned by recover_unrotated_dimensions().
"""

import math

import numpy as np

from models.transform import Vec2, BoundingBox, FrameDimensions
from utils.transform_math import degrees_to_radians, rotate_point
from constants import (
    EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT,
    ZERO_ROTATION_EPSILON, SINGULAR_ANGLE_TOLERANCE, ROUND_TRIP_TOLERANCE,
    ROTATION_HANDLE_OFFSET,
)

# Corner indices bounding each logical edge (corner order TL, TR, BR, BL)
EDGE_CORNER_INDICES = {
    EDGE_TOP: (0, 1),
    EDGE_RIGHT: (1, 2),
    EDGE_BOTTOM: (2, 3),
    EDGE_LEFT: (3, 0),
}


def _rotated_corner_array(center, width, height, rotation_deg):
    """4x2 array of rotated corners, rows ordered TL, TR, BR, BL."""
    half_w = width / 2
    half_h = height / 2
    local = np.array([
        [-half_w, -half_h],
        [half_w, -half_h],
        [half_w, half_h],
        [-half_w, half_h],
    ], dtype=float)

    rad = degrees_to_radians(rotation_deg)
    cos_r = math.cos(rad)
    sin_r = math.sin(rad)
    rotation = np.array([[cos_r, -sin_r], [sin_r, cos_r]])

    return local @ rotation.T + np.array([center.x, center.y], dtype=float)


def rotated_corners(center, width, height, rotation_deg):
    """Calculate the four corner points of a rotated frame

    Args:
        center: Vec2 center of the frame
        width: Unrotated width of the frame
        height: Unrotated height of the frame
        rotation_deg: Rotation angle in degrees

    Returns:
        List of corner Vec2 [top_left, top_right, bottom_right, bottom_left],
        in the frame's own (rotated) orientation
    """
    corners = _rotated_corner_array(center, width, height, rotation_deg)
    return [Vec2(float(x), float(y)) for x, y in corners]


def edge_center(corners, edge):
    """Midpoint of the two corners bounding a logical edge

    Raises:
        ValueError: If edge is not one of top/right/bottom/left
    """
    try:
        first, second = EDGE_CORNER_INDICES[edge]
    except KeyError:
        raise ValueError(f"Unknown frame edge: {edge!r}") from None
    p1 = corners[first]
    p2 = corners[second]
    return Vec2((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def axis_aligned_bounding_box(center, width, height, rotation_deg):
    """Tightest axis-aligned box around a rotated frame

    width/height must be the frame's unrotated (local) dimensions.
    """
    corners = _rotated_corner_array(center, width, height, rotation_deg)
    min_x, min_y = corners.min(axis=0)
    max_x, max_y = corners.max(axis=0)
    return BoundingBox(
        float(min_x),
        float(min_y),
        float(max_x - min_x),
        float(max_y - min_y),
    )


def distance_to_singular_angle(rotation_deg):
    """Degrees from rotation_deg to the nearest 45° + k*90°"""
    offset = (rotation_deg - 45.0) % 90.0
    return min(offset, 90.0 - offset)


def recover_unrotated_dimensions(bounding_box, rotation_deg):
    """Recover a frame's true width/height from its bounding box and rotation

    Inverse of axis_aligned_bounding_box(). With c = |cos θ| and s = |sin θ|:

        bw = w*c + h*s
        bh = w*s + h*c

    which solves to w = (bw*c - bh*s) / cos(2θ), h = (bh*c - bw*s) / cos(2θ).
    At 45°, 135°, ... cos(2θ) = 0 and the system is singular; there the
    bounding box is (nearly) square and only w + h is known, so the product
    w*h = bw*bh/2 is assumed and the larger root becomes the width.

    Returns:
        FrameDimensions with the unrotated width and height
    """
    bw = bounding_box.width
    bh = bounding_box.height

    if abs(math.fmod(rotation_deg, 360.0)) < ZERO_ROTATION_EPSILON:
        return FrameDimensions(bw, bh)
    if bw <= 0 or bh <= 0:
        return FrameDimensions(max(bw, 0.0), max(bh, 0.0))

    rad = abs(degrees_to_radians(rotation_deg))
    cos_r = abs(math.cos(rad))
    sin_r = abs(math.sin(rad))
    cos2 = cos_r * cos_r - sin_r * sin_r

    if distance_to_singular_angle(rotation_deg) < SINGULAR_ANGLE_TOLERANCE:
        total = (bw + bh) / math.sqrt(2)
        product = (bw * bh) / 2
        # Equals (bw - bh)**2 / 2, so it only goes negative through round-off
        discriminant = max(total * total - 4 * product, 0.0)
        root = math.sqrt(discriminant)
        return FrameDimensions((total + root) / 2, (total - root) / 2)

    width = abs((bw * cos_r - bh * sin_r) / cos2)
    height = abs((bh * cos_r - bw * sin_r) / cos2)

    check = axis_aligned_bounding_box(Vec2(0.0, 0.0), width, height, rotation_deg)
    if (abs(check.width - bw) > ROUND_TRIP_TOLERANCE
            or abs(check.height - bh) > ROUND_TRIP_TOLERANCE):
        # Area-preserving estimate using the bounding box's own aspect ratio
        area = bw * bh * (cos_r * cos_r + sin_r * sin_r) / (cos_r + sin_r)
        aspect = bw / bh
        return FrameDimensions(math.sqrt(area * aspect), math.sqrt(area / aspect))

    return FrameDimensions(width, height)


def rotation_handle_position(corners, center, offset=ROTATION_HANDLE_OFFSET, corner_index=1):
    """Position of a rotation handle just beyond a frame corner

    The handle sits `offset` units from the corner, on the line from the
    frame center through that corner. Defaults to the top-right corner.
    """
    corner = corners[corner_index]
    dx = corner.x - center.x
    dy = corner.y - center.y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return Vec2(corner.x, corner.y - offset)
    return Vec2(corner.x + dx / distance * offset, corner.y + dy / distance * offset)


def rotation_handle_positions(corners, center, offset=ROTATION_HANDLE_OFFSET):
    """Rotation handle positions for all four corners, in corner order"""
    return [rotation_handle_position(corners, center, offset, index) for index in range(len(corners))]


def calculate_new_frame_center(fixed_edge_center, new_width, new_height, rotation_deg, resize_edge):
    """Center of a resized frame whose opposite edge stays anchored

    Args:
        fixed_edge_center: Midpoint of the edge that must not move (image space)
        new_width: New unrotated frame width
        new_height: New unrotated frame height
        rotation_deg: Frame rotation in degrees
        resize_edge: Edge being dragged; the anchored edge is its opposite

    Returns:
        New frame center Vec2 in image space
    """
    # Vector from the anchored edge to the center, in frame-local axes
    local_offsets = {
        EDGE_TOP: Vec2(0.0, -new_height / 2),
        EDGE_RIGHT: Vec2(new_width / 2, 0.0),
        EDGE_BOTTOM: Vec2(0.0, new_height / 2),
        EDGE_LEFT: Vec2(-new_width / 2, 0.0),
    }
    try:
        local_offset = local_offsets[resize_edge]
    except KeyError:
        raise ValueError(f"Unknown frame edge: {resize_edge!r}") from None

    offset = rotate_point(local_offset, degrees_to_radians(rotation_deg))
    return Vec2(fixed_edge_center.x + offset.x, fixed_edge_center.y + offset.y)
