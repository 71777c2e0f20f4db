"""Keep resized frames inside the image while preserving the anchored edge.

The fixed-edge search shrinks the candidate frame around its anchored edge
until its bounding box fits. If nothing fits after a bounded number of
tries, the candidate box is clamped to the image. That last step does not
keep the anchored edge in place and can leave a box that no rotated
rectangle at the frame's rotation fits exactly; it is an accepted
approximation, not an error.
"""

import logging

from utils.rotated_rect import axis_aligned_bounding_box, calculate_new_frame_center
from models.transform import BoundingBox
from constants import (
    BOUNDARY_SHRINK_FACTOR, BOUNDARY_MAX_ITERATIONS, MIN_FRAME_WIDTH, MIN_FRAME_HEIGHT,
)

logger = logging.getLogger(__name__)


def is_within_image(bounding_box, image_width, image_height):
    return (bounding_box.x >= 0
            and bounding_box.y >= 0
            and bounding_box.x + bounding_box.width <= image_width
            and bounding_box.y + bounding_box.height <= image_height)


def clamp_to_image(bounding_box, image_width, image_height):
    """Intersection of a box with the image rectangle

    Sides already inside the image keep their position.
    """
    left = min(max(bounding_box.x, 0.0), image_width)
    top = min(max(bounding_box.y, 0.0), image_height)
    right = max(min(bounding_box.x + bounding_box.width, image_width), left)
    bottom = max(min(bounding_box.y + bounding_box.height, image_height), top)
    return BoundingBox(left, top, right - left, bottom - top)


def _shrunk_candidates(fixed_edge_center, frame_dimensions, frame_rotation, resize_edge,
                       shrink_factor, max_iterations, min_width, min_height):
    """Yield bounding boxes for progressively smaller frames around the anchor.

    Neither dimension goes below its minimum.
    """
    for iteration in range(max_iterations):
        factor = shrink_factor ** iteration
        width = max(min_width, frame_dimensions.width * factor)
        height = max(min_height, frame_dimensions.height * factor)
        center = calculate_new_frame_center(fixed_edge_center, width, height, frame_rotation, resize_edge)
        yield axis_aligned_bounding_box(center, width, height, frame_rotation)


def validate_image_boundaries_with_fixed_edge(bounding_box, fixed_edge_center, frame_dimensions,
                                              frame_rotation, resize_edge, image_width, image_height,
                                              shrink_factor=BOUNDARY_SHRINK_FACTOR,
                                              max_iterations=BOUNDARY_MAX_ITERATIONS,
                                              min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT):
    """Validate a resized bounding box against the image boundaries

    Args:
        bounding_box: Candidate box produced by the resize
        fixed_edge_center: Midpoint of the anchored (opposite) edge, image space
        frame_dimensions: New true (unrotated) frame dimensions
        frame_rotation: Frame rotation in degrees
        resize_edge: Edge being dragged
        image_width, image_height: Image boundaries
        shrink_factor: Per-iteration size multiplier for the fixed-edge search
        max_iterations: Number of sizes tried before clamping
        min_width, min_height: Smallest true frame size the search may try

    Returns:
        The input box if it already fits, else the largest tried frame that
        fits with the anchor in place, else the clamped input box
    """
    if is_within_image(bounding_box, image_width, image_height):
        return bounding_box

    for candidate in _shrunk_candidates(fixed_edge_center, frame_dimensions, frame_rotation,
                                        resize_edge, shrink_factor, max_iterations,
                                        min_width, min_height):
        if is_within_image(candidate, image_width, image_height):
            return candidate

    logger.debug("No anchored fit within %d iterations for %s, clamping to %sx%s image",
                 max_iterations, bounding_box, image_width, image_height)
    return clamp_to_image(bounding_box, image_width, image_height)
