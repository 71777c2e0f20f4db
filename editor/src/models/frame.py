"""Frame model and frame collection.

A frame is a detected sub-region of the displayed image that the user can
rotate and resize. It is stored as an axis-aligned bounding box plus a
rotation; the frame's true (unrotated) size is always derived from those two.

Usage:
    frames = FrameCollection()
    frame = create_detected_frame(BoundingBox(120, 80, 300, 200))
    frames.add(frame)
    frames.update_rotation(frame.id, 15.0)
"""

import logging
import uuid as uuid_module
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional

from models.transform import BoundingBox
from constants import MIN_DETECTION_AREA, MIN_DETECTION_DIMENSION


@dataclass(frozen=True)
class Frame:
    """Persisted, user-visible frame.

    Attributes:
        id: Unique frame id (uuid4 string for detected frames)
        bounding_box: Tightest axis-aligned box around the rotated frame
        rotation: Degrees, clockwise-positive in y-down space, in (-180, 180]
        area: Pixel area reported at detection time
    """
    id: str
    bounding_box: BoundingBox
    rotation: float = 0.0
    area: float = 0.0

    def with_rotation(self, rotation: float) -> 'Frame':
        return replace(self, rotation=rotation)

    def with_bounding_box(self, bounding_box: BoundingBox) -> 'Frame':
        return replace(self, bounding_box=bounding_box)


def create_detected_frame(bounding_box: BoundingBox,
                          min_area: float = MIN_DETECTION_AREA,
                          min_dimension: float = MIN_DETECTION_DIMENSION,
                          frame_id: Optional[str] = None) -> Optional[Frame]:
    """Build a new unrotated frame from a detected bounding box.

    Returns:
        The new Frame, or None if the box is too small to be a real sub-image
    """
    area = bounding_box.width * bounding_box.height
    if area < min_area or min(bounding_box.width, bounding_box.height) < min_dimension:
        logging.getLogger('Frame').debug(
            "Rejected detection %s (area %.1f, min area %.1f, min dimension %.1f)",
            bounding_box, area, min_area, min_dimension)
        return None

    return Frame(
        id=frame_id or str(uuid_module.uuid4()),
        bounding_box=bounding_box,
        rotation=0.0,
        area=area,
    )


class FrameCollection:
    """Ordered collection of frames keyed by id.

    Frames are immutable; updates replace the stored Frame.
    """

    def __init__(self, frames: Optional[List[Frame]] = None):
        self._logger = logging.getLogger('FrameCollection')
        self._frames: Dict[str, Frame] = {}
        for frame in frames or []:
            self.add(frame)

    def __len__(self):
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(list(self._frames.values()))

    def __contains__(self, frame_id):
        return frame_id in self._frames

    @property
    def ids(self) -> List[str]:
        return list(self._frames.keys())

    def add(self, frame: Frame):
        """Add a frame, replacing any existing frame with the same id"""
        self._frames[frame.id] = frame
        self._logger.debug("Added frame %s", frame.id)

    def get(self, frame_id: str) -> Optional[Frame]:
        return self._frames.get(frame_id)

    def update_rotation(self, frame_id: str, rotation: float) -> Frame:
        """Replace the rotation of a frame

        Raises:
            KeyError: If no frame has this id
        """
        frame = self._frames[frame_id].with_rotation(rotation)
        self._frames[frame_id] = frame
        return frame

    def update_bounding_box(self, frame_id: str, bounding_box: BoundingBox) -> Frame:
        """Replace the bounding box of a frame

        Raises:
            KeyError: If no frame has this id
        """
        frame = self._frames[frame_id].with_bounding_box(bounding_box)
        self._frames[frame_id] = frame
        return frame

    def remove(self, frame_id: str) -> Frame:
        """Remove and return a frame

        Raises:
            KeyError: If no frame has this id
        """
        frame = self._frames.pop(frame_id)
        self._logger.debug("Removed frame %s", frame_id)
        return frame

    def clear(self):
        self._frames.clear()
        self._logger.debug("Cleared all frames")
