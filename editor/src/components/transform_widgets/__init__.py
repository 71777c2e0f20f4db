"""
Frame Editor - Transform Widget Components

This package contains the drag machinery for frame handles:
- drag_context.py: Per-gesture drag state
- drag_sessions.py: Rotation and resize sessions (Idle -> Active -> Idle)
"""

from .drag_context import RotationDragState, ResizeDragState
from .drag_sessions import RotationDragSession, ResizeDragSession

__all__ = [
    'RotationDragState', 'ResizeDragState',
    'RotationDragSession', 'ResizeDragSession',
]
