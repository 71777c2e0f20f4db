"""UI components for the Frame Editor

This package contains the interactive pieces that sit between pointer
input and the geometry engine:
- transform_widgets: Rotation and resize drag sessions
- frame_drag_controller: Qt-facing owner of the active drag session
"""

from .frame_drag_controller import FrameDragController

__all__ = [
    'FrameDragController',
]
