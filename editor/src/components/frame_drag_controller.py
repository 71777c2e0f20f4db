"""
Frame Drag Controller - Owns the active rotation/resize gesture for frames

Pointer handlers (mouse press/move/release) call into the controller; the
controller drives at most one drag session, writes each result back into
the frame collection and emits it for the view to redraw.
"""

import logging
import math

from PyQt5.QtCore import QObject, pyqtSignal

from models.frame import FrameCollection
from models.transform import ScaleFactors
from components.transform_widgets import RotationDragSession, ResizeDragSession
from constants import MIN_FRAME_WIDTH, MIN_FRAME_HEIGHT, EDGE_MAPPING_MIN_DRAG

DRAG_ROTATE = 'rotate'
DRAG_RESIZE = 'resize'


class FrameDragController(QObject):
	"""Routes pointer samples to the active drag session"""

	# Signals
	rotationChanged = pyqtSignal(str, float)  # frame_id, rotation (degrees)
	boundingBoxChanged = pyqtSignal(str, object)  # frame_id, BoundingBox
	dragStarted = pyqtSignal(str, str)  # frame_id, 'rotate' or 'resize'
	dragEnded = pyqtSignal(str)  # frame_id

	def __init__(self, frames=None, parent=None,
				 min_width=MIN_FRAME_WIDTH, min_height=MIN_FRAME_HEIGHT,
				 edge_mapping_threshold=EDGE_MAPPING_MIN_DRAG):
		super().__init__(parent)
		self._logger = logging.getLogger('FrameDragController')

		self.frames = frames if frames is not None else FrameCollection()
		self.scale_factors = ScaleFactors(1.0, 1.0)
		self.image_width = math.inf
		self.image_height = math.inf

		self.min_width = min_width
		self.min_height = min_height
		self.edge_mapping_threshold = edge_mapping_threshold

		self._session = None

	@classmethod
	def from_config(cls, config, frames=None, parent=None):
		"""Create a controller using the drag settings of a GeometryConfig"""
		return cls(
			frames, parent,
			min_width=config.min_frame_width,
			min_height=config.min_frame_height,
			edge_mapping_threshold=config.edge_mapping_threshold,
		)

	@property
	def active_session(self):
		return self._session

	@property
	def is_dragging(self):
		return self._session is not None and self._session.is_active

	def set_display_geometry(self, scale_factors, image_width, image_height):
		"""Set display scale and image size used by sessions started afterwards"""
		self.scale_factors = scale_factors
		self.image_width = image_width
		self.image_height = image_height

	def begin_rotation(self, frame_id, pointer_pos, container):
		"""Start rotating a frame, superseding any active drag

		Returns:
			True if a rotation drag is now active

		Raises:
			KeyError: If no frame has this id
		"""
		frame = self._frame_or_raise(frame_id)
		self._supersede_active()

		session = RotationDragSession()
		if not session.start(frame, pointer_pos, container, self.scale_factors):
			return False

		self._session = session
		self._logger.debug("Rotation drag started for %s", frame_id)
		self.dragStarted.emit(frame_id, DRAG_ROTATE)
		return True

	def begin_resize(self, frame_id, edge, pointer_pos, container):
		"""Start resizing a frame from an edge, superseding any active drag

		Returns:
			True if a resize drag is now active

		Raises:
			KeyError: If no frame has this id
			ValueError: If edge is not one of top/right/bottom/left
		"""
		frame = self._frame_or_raise(frame_id)
		session = ResizeDragSession(
			self.image_width, self.image_height,
			self.min_width, self.min_height,
			self.edge_mapping_threshold,
		)
		# Validate the edge before touching the current drag
		started = session.start(frame, edge, pointer_pos, container, self.scale_factors)
		self._supersede_active()
		if not started:
			return False

		self._session = session
		self._logger.debug("Resize drag started for %s on %s edge", frame_id, edge)
		self.dragStarted.emit(frame_id, DRAG_RESIZE)
		return True

	def pointer_moved(self, pointer_pos):
		"""Apply a pointer sample to the active drag

		Returns:
			The new rotation or BoundingBox, or None without an active drag
		"""
		session = self._session
		if session is None or not session.is_active:
			return None

		frame_id = session.frame_id
		if frame_id not in self.frames:
			# Frame went away without going through remove_frame()
			self._discard_session()
			return None

		if isinstance(session, RotationDragSession):
			rotation = session.update(pointer_pos)
			self.frames.update_rotation(frame_id, rotation)
			self.rotationChanged.emit(frame_id, rotation)
			return rotation

		bounding_box = session.update(pointer_pos)
		self.frames.update_bounding_box(frame_id, bounding_box)
		self.boundingBoxChanged.emit(frame_id, bounding_box)
		return bounding_box

	def pointer_released(self):
		"""End the active drag, if any"""
		session = self._session
		if session is None:
			return
		frame_id = session.frame_id
		self._discard_session()
		self._logger.debug("Drag ended for %s", frame_id)
		self.dragEnded.emit(frame_id)

	def remove_frame(self, frame_id):
		"""Remove a frame, dropping its drag without further signals

		Raises:
			KeyError: If no frame has this id
		"""
		if self._session is not None and self._session.frame_id == frame_id:
			self._discard_session()
		return self.frames.remove(frame_id)

	def clear_frames(self):
		"""Remove all frames, dropping any drag without further signals"""
		self._discard_session()
		self.frames.clear()

	def _frame_or_raise(self, frame_id):
		frame = self.frames.get(frame_id)
		if frame is None:
			raise KeyError(frame_id)
		return frame

	def _supersede_active(self):
		"""Close the current drag so a new one can start"""
		if self._session is not None:
			self._logger.debug("Drag for %s superseded", self._session.frame_id)
			self.pointer_released()

	def _discard_session(self):
		if self._session is not None:
			self._session.end()
		self._session = None
