"""
Frame Editor - Frame Preview Service

Cuts a frame's content out of the source image as a small upright preview.
Rotated frames are straightened first so the preview shows the content the
way the frame sees it.
"""

import io
import math
import base64

from PIL import Image

from utils.rotated_rect import recover_unrotated_dimensions
from utils.logger import loggerRaise
from constants import MAX_FRAME_PREVIEW_DIMENSION, STRAIGHTEN_MIN_ROTATION


def _check_frame_region(image, frame):
    box = frame.bounding_box
    values = (box.x, box.y, box.width, box.height, frame.rotation)
    if not all(math.isfinite(v) for v in values):
        raise ValueError(f"Frame {frame.id} has non-finite geometry")
    if box.width < 1 or box.height < 1:
        raise ValueError(f"Frame {frame.id} is too small for a preview ({box.width}x{box.height})")
    if (box.x >= image.width or box.y >= image.height
            or box.x + box.width <= 0 or box.y + box.height <= 0):
        raise ValueError(f"Frame {frame.id} lies outside the {image.width}x{image.height} image")


def _crop_centered(image, center, width, height):
    left = int(round(center.x - width / 2))
    top = int(round(center.y - height / 2))
    return image.crop((left, top, left + int(round(width)), top + int(round(height))))


def generate_frame_preview(image, frame, max_dimension=MAX_FRAME_PREVIEW_DIMENSION):
    """Generate an upright preview of a frame's content

    Args:
        image: Source PIL image
        frame: Frame to preview
        max_dimension: Longest side of the preview in pixels

    Returns:
        RGBA PIL image no larger than max_dimension on either side

    Raises:
        ValueError: If the frame is degenerate or outside the image
    """
    try:
        _check_frame_region(image, frame)
    except ValueError as e:
        loggerRaise(e, "Cannot generate frame preview", "Preview Error")

    source = image.convert('RGBA')
    box = frame.bounding_box

    if abs(frame.rotation) < STRAIGHTEN_MIN_ROTATION:
        preview = source.crop((
            int(round(box.x)), int(round(box.y)),
            int(round(box.x + box.width)), int(round(box.y + box.height)),
        ))
    else:
        center = box.center
        # PIL rotates counter-clockwise, undoing the frame's clockwise rotation
        straightened = source.rotate(
            frame.rotation,
            resample=Image.Resampling.BICUBIC,
            center=(center.x, center.y),
        )
        dimensions = recover_unrotated_dimensions(box, frame.rotation)
        preview = _crop_centered(
            straightened, center,
            max(dimensions.width, 1.0), max(dimensions.height, 1.0),
        )

    preview.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)
    return preview


def preview_to_data_url(preview):
    """Encode a preview image as a PNG data URL"""
    buffer = io.BytesIO()
    preview.save(buffer, format='PNG')
    encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
    return f"data:image/png;base64,{encoded}"
