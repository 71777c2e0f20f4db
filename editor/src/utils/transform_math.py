"""
Frame Editor - Transform Math Utilities

Linear algebra primitives for the frame geometry engine: angle conversion,
2D rotation, scale transforms between image and display space, and
rectangle centers/corners.

These are pure functions with no UI dependencies. Degenerate input (zero
scale factors, zero image sizes) produces inf/nan rather than raising, so
interactive callers must guard against zero-sized images themselves.
"""

import math

from models.transform import Vec2, ScaleFactors


def _divide(numerator, denominator):
    """Float division that follows IEEE semantics instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def degrees_to_radians(degrees):
    return degrees * math.pi / 180


def radians_to_degrees(radians):
    return radians * (180 / math.pi)


def rotate_point(point, angle_rad):
    """Rotate a point around the origin

    Args:
        point: Vec2 to transform
        angle_rad: Rotation angle in radians (clockwise on screen, y-down)

    Returns:
        Rotated Vec2
    """
    cos_r = math.cos(angle_rad)
    sin_r = math.sin(angle_rad)
    return Vec2(
        point.x * cos_r - point.y * sin_r,
        point.x * sin_r + point.y * cos_r,
    )


def inverse_rotate_point(point, angle_rad):
    """Undo rotate_point for the same angle"""
    return rotate_point(point, -angle_rad)


def rectangle_center(x, y, width, height):
    return Vec2(x + width / 2, y + height / 2)


def apply_scale(point, scale_factors):
    """Image space -> display space"""
    return Vec2(point.x * scale_factors.scale_x, point.y * scale_factors.scale_y)


def apply_inverse_scale(point, scale_factors):
    """Display space -> image space

    A zero scale factor yields inf/nan on that axis.
    """
    return Vec2(
        _divide(point.x, scale_factors.scale_x),
        _divide(point.y, scale_factors.scale_y),
    )


def axis_aligned_corners(center, width, height):
    """Calculate the four corners of an unrotated rectangle

    Args:
        center: Vec2 center of the rectangle
        width: Rectangle width
        height: Rectangle height

    Returns:
        List of corner Vec2 [top_left, top_right, bottom_right, bottom_left]
    """
    half_w = width / 2
    half_h = height / 2
    return [
        Vec2(center.x - half_w, center.y - half_h),
        Vec2(center.x + half_w, center.y - half_h),
        Vec2(center.x + half_w, center.y + half_h),
        Vec2(center.x - half_w, center.y + half_h),
    ]


def calculate_scale_factors(image_width, image_height, display_width, display_height):
    """Scale factors from image pixels to displayed pixels

    A zero image dimension yields inf/nan factors, which every geometry call
    treats as degenerate input.
    """
    return ScaleFactors(
        _divide(display_width, image_width),
        _divide(display_height, image_height),
    )


def angle_between_points(center, target):
    """Angle in degrees from center to target (atan2, y-down)"""
    return math.degrees(math.atan2(target.y - center.y, target.x - center.x))


def normalize_angle(angle):
    """Normalize an angle in degrees to the range (-180, 180]"""
    if not math.isfinite(angle):
        return angle
    normalized = math.fmod(angle, 360.0)
    if normalized > 180:
        normalized -= 360
    elif normalized <= -180:
        normalized += 360
    return normalized


def transform_delta_to_frame_local(delta, rotation_deg):
    """Express an image-space delta in the frame's own (unrotated) axes"""
    return inverse_rotate_point(delta, degrees_to_radians(rotation_deg))
