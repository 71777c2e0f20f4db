"""
Frame Editor - Frame Resize Service

Resizing one edge of a (possibly rotated) frame from a pointer delta.

The spatial edge-fixed resize keeps the edge opposite the dragged one in
place in image space: it works on the frame's true (unrotated) dimensions,
moves the dragged edge along the frame's own axis, and re-derives the
bounding box around the result.

Inputs that cannot describe a frame (non-finite rotation, non-positive
scale factors, empty or non-finite boxes) return the original box. Nothing
here raises for numeric problems; a bad pointer sample just leaves the
frame where it was until the next one.
"""

import logging
import math

from models.transform import BoundingBox, FrameDimensions, Vec2
from utils.transform_math import apply_inverse_scale, transform_delta_to_frame_local
from utils.rotated_rect import (
    rotated_corners, edge_center, axis_aligned_bounding_box,
    recover_unrotated_dimensions, calculate_new_frame_center,
)
from utils.edge_mapping import opposite_edge
from services.boundary_validator import validate_image_boundaries_with_fixed_edge
from constants import (
    EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT, FRAME_EDGES,
    MIN_FRAME_WIDTH, MIN_FRAME_HEIGHT, RESIZE_NOISE_FLOOR,
)

logger = logging.getLogger(__name__)


def _is_finite_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _has_valid_scale(scale_factors):
    return (scale_factors is not None
            and _is_finite_number(scale_factors.scale_x) and scale_factors.scale_x > 0
            and _is_finite_number(scale_factors.scale_y) and scale_factors.scale_y > 0)


def validate_spatial_resize_inputs(bounding_box, frame_rotation, scale_factors):
    """Check that a resize has a real frame, rotation and display scale to work with"""
    if bounding_box is None or not _has_valid_scale(scale_factors):
        return False
    if not all(_is_finite_number(v) for v in (bounding_box.x, bounding_box.y,
                                              bounding_box.width, bounding_box.height)):
        return False
    if bounding_box.width <= 0 or bounding_box.height <= 0:
        return False
    return _is_finite_number(frame_rotation)


def calculate_new_frame_dimensions(original_width, original_height, resize_edge, local_delta,
                                   min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT):
    """Calculate new true frame dimensions for an edge drag

    Args:
        original_width, original_height: Current unrotated frame size
        resize_edge: Edge being dragged
        local_delta: Pointer delta in frame-local image units
        min_width, min_height: Smallest allowed frame size

    Returns:
        FrameDimensions, never below the minimums (a frame cannot flip)
    """
    new_width = original_width
    new_height = original_height

    if resize_edge == EDGE_TOP:
        new_height = original_height - local_delta.y
    elif resize_edge == EDGE_RIGHT:
        new_width = original_width + local_delta.x
    elif resize_edge == EDGE_BOTTOM:
        new_height = original_height + local_delta.y
    elif resize_edge == EDGE_LEFT:
        new_width = original_width - local_delta.x
    else:
        raise ValueError(f"Unknown frame edge: {resize_edge!r}")

    return FrameDimensions(max(min_width, new_width), max(min_height, new_height))


def calculate_spatial_edge_fixed_resize(original_bounding_box, frame_rotation, resize_edge,
                                        pointer_delta, scale_factors,
                                        image_width=math.inf, image_height=math.inf,
                                        min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT):
    """Resize one edge of a rotated frame, keeping the opposite edge fixed

    Args:
        original_bounding_box: Bounding box at the start of the drag
        frame_rotation: Frame rotation in degrees
        resize_edge: Edge being dragged
        pointer_delta: Cumulative pointer movement in display coordinates
        scale_factors: Display units per image unit
        image_width, image_height: Image bounds (inf disables boundary validation)
        min_width, min_height: Smallest allowed true frame size

    Returns:
        New axis-aligned bounding box in image space
    """
    if resize_edge not in FRAME_EDGES:
        raise ValueError(f"Unknown frame edge: {resize_edge!r}")

    if not validate_spatial_resize_inputs(original_bounding_box, frame_rotation, scale_factors):
        logger.warning("Invalid inputs to spatial edge-fixed resize (box=%s, rotation=%s, scale=%s), "
                       "keeping original bounding box",
                       original_bounding_box, frame_rotation, scale_factors)
        return original_bounding_box

    if math.hypot(pointer_delta.x, pointer_delta.y) < RESIZE_NOISE_FLOOR:
        return original_bounding_box

    try:
        image_delta = apply_inverse_scale(pointer_delta, scale_factors)
        local_delta = transform_delta_to_frame_local(image_delta, frame_rotation)

        # The box is larger than the frame once rotated: work on true dimensions
        original_dimensions = recover_unrotated_dimensions(original_bounding_box, frame_rotation)
        new_dimensions = calculate_new_frame_dimensions(
            original_dimensions.width, original_dimensions.height,
            resize_edge, local_delta, min_width, min_height,
        )

        corners = rotated_corners(
            original_bounding_box.center,
            original_dimensions.width, original_dimensions.height,
            frame_rotation,
        )
        fixed_edge_center = edge_center(corners, opposite_edge(resize_edge))

        new_center = calculate_new_frame_center(
            fixed_edge_center, new_dimensions.width, new_dimensions.height,
            frame_rotation, resize_edge,
        )
        new_bounding_box = axis_aligned_bounding_box(
            new_center, new_dimensions.width, new_dimensions.height, frame_rotation,
        )
    except (ArithmeticError, ValueError):
        logger.exception("Spatial edge-fixed resize failed for %s, keeping original bounding box",
                         original_bounding_box)
        return original_bounding_box

    if math.isfinite(image_width) and math.isfinite(image_height):
        return validate_image_boundaries_with_fixed_edge(
            new_bounding_box, fixed_edge_center, new_dimensions,
            frame_rotation, resize_edge, image_width, image_height,
            min_width=min_width, min_height=min_height,
        )
    return new_bounding_box


def calculate_axis_aligned_resize(original_box, edge, pointer_delta, scale_factors,
                                  min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT):
    """Resize an unrotated frame by moving one of its sides

    The opposite side keeps its position, including when the minimum size
    kicks in.
    """
    if not _has_valid_scale(scale_factors):
        logger.warning("Invalid scale factors %s for axis-aligned resize, keeping original bounding box",
                       scale_factors)
        return original_box

    delta = apply_inverse_scale(pointer_delta, scale_factors)
    x, y = original_box.x, original_box.y
    width, height = original_box.width, original_box.height

    if edge == EDGE_TOP:
        y += delta.y
        height -= delta.y
        if height < min_height:
            y = original_box.y + original_box.height - min_height
            height = min_height
    elif edge == EDGE_RIGHT:
        width = max(width + delta.x, min_width)
    elif edge == EDGE_BOTTOM:
        height = max(height + delta.y, min_height)
    elif edge == EDGE_LEFT:
        x += delta.x
        width -= delta.x
        if width < min_width:
            x = original_box.x + original_box.width - min_width
            width = min_width
    else:
        raise ValueError(f"Unknown frame edge: {edge!r}")

    return BoundingBox(x, y, width, height)


def _clamp_span(start, length, limit, minimum):
    """Clip [start, start + length] to [0, limit], keeping at least `minimum`.

    An infinite limit means the axis is unbounded and nothing is clipped.
    """
    if math.isinf(limit):
        return start, max(length, minimum)
    end = min(start + length, limit)
    start = max(start, 0.0)
    if end - start < minimum:
        length = min(minimum, limit)
        start = max(0.0, min(start, limit - length))
        end = start + length
    return start, end - start


def validate_bounding_box(bounding_box, image_width, image_height,
                          min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT):
    """Enforce minimum extents and image boundaries on a bounding box

    Sides outside the image are clipped to it; sides inside keep their
    position. A box that would end up below the minimum is re-expanded
    inside the image. Axes with an infinite bound are only held to the
    minimum.
    """
    x, width = _clamp_span(bounding_box.x, max(bounding_box.width, min_width), image_width, min_width)
    y, height = _clamp_span(bounding_box.y, max(bounding_box.height, min_height), image_height, min_height)
    return BoundingBox(x, y, width, height)


def minimum_bounding_extent(min_width, min_height, frame_rotation):
    """Bounding box size of the smallest allowed frame at a rotation"""
    if not _is_finite_number(frame_rotation):
        return FrameDimensions(min_width, min_height)
    box = axis_aligned_bounding_box(Vec2(0.0, 0.0), min_width, min_height, frame_rotation)
    return FrameDimensions(box.width, box.height)


def calculate_resized_bounding_box(original_box, edge, pointer_delta, scale_factors,
                                   frame_rotation=0.0,
                                   image_width=math.inf, image_height=math.inf,
                                   min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT):
    """Resize a frame's bounding box from an edge drag

    Unrotated frames use the simple axis-aligned algorithm, rotated ones the
    spatial edge-fixed algorithm. Either way the result is validated against
    the minimum frame size and the image.
    """
    if frame_rotation == 0:
        resized = calculate_axis_aligned_resize(
            original_box, edge, pointer_delta, scale_factors, min_width, min_height,
        )
    else:
        resized = calculate_spatial_edge_fixed_resize(
            original_box, frame_rotation, edge, pointer_delta, scale_factors,
            image_width, image_height, min_width, min_height,
        )

    minimum = minimum_bounding_extent(min_width, min_height, frame_rotation)
    return validate_bounding_box(resized, image_width, image_height, minimum.width, minimum.height)
