"""
Frame Editor - Data Models

Value types (Vec2, ScaleFactors, BoundingBox, FrameDimensions) and the
Frame entity with its collection.
"""

from .transform import Vec2, ScaleFactors, BoundingBox, FrameDimensions
from .frame import Frame, FrameCollection, create_detected_frame

__all__ = [
    'Vec2', 'ScaleFactors', 'BoundingBox', 'FrameDimensions',
    'Frame', 'FrameCollection', 'create_detected_frame',
]
