"""Coordinate transformation utilities between the pointer, display and image spaces.

Provides conversion between:
- Raw (global) pointer positions
- Container-local display pixels (Y-down)
- Image pixels (Y-down), via ScaleFactors
"""

from PyQt5.QtCore import QPoint, QPointF
from PyQt5.QtGui import QPolygonF

from models.transform import Vec2
from utils.transform_math import apply_scale
from utils.rotated_rect import rotated_corners, recover_unrotated_dimensions


def pointer_position_relative_to(container, raw_pos):
	"""Map a raw pointer position into a container's local coordinates.

	Args:
		container: Coordinate reference with Qt's mapFromGlobal(QPoint)
			(usually the widget showing the image), or None
		raw_pos: Global pointer position (QPoint, QPointF, Vec2 or (x, y))

	Returns:
		Vec2 in container-local display pixels; (0, 0) without a container
	"""
	if container is None:
		return Vec2(0.0, 0.0)

	if isinstance(raw_pos, QPoint):
		global_point = raw_pos
	elif isinstance(raw_pos, QPointF):
		global_point = raw_pos.toPoint()
	else:
		x, y = raw_pos
		global_point = QPoint(int(round(x)), int(round(y)))

	local = container.mapFromGlobal(global_point)
	return Vec2(float(local.x()), float(local.y()))


def bounding_box_center_in_display(bounding_box, scale_factors):
	"""Center of an image-space bounding box, in display coordinates"""
	return apply_scale(bounding_box.center, scale_factors)


def frame_display_corners(frame, scale_factors):
	"""True corners of a frame in display coordinates.

	Uses the frame's recovered (unrotated) dimensions, not its bounding box
	dimensions, so the outline hugs the rotated frame.

	Returns:
		List of Vec2 [top_left, top_right, bottom_right, bottom_left]
	"""
	dimensions = recover_unrotated_dimensions(frame.bounding_box, frame.rotation)
	corners = rotated_corners(frame.bounding_box.center, dimensions.width, dimensions.height, frame.rotation)
	return [apply_scale(corner, scale_factors) for corner in corners]


def corners_to_polygon(corners):
	"""Closed outline polygon through the given corners (empty for no corners)"""
	return QPolygonF([QPointF(corner.x, corner.y) for corner in corners])
