"""Geometry configuration for the frame editor"""

import os
import json
import math
import logging
from dataclasses import dataclass, asdict, fields

from utils.logger import loggerRaise
from constants import (
	MIN_FRAME_WIDTH, MIN_FRAME_HEIGHT, EDGE_MAPPING_MIN_DRAG, ROTATION_HANDLE_OFFSET,
	MIN_DETECTION_AREA, MIN_DETECTION_DIMENSION, MAX_FRAME_PREVIEW_DIMENSION,
)

logger = logging.getLogger(__name__)


@dataclass
class GeometryConfig:
	"""User-tunable geometry settings, defaulting to the editor constants"""
	min_frame_width: float = MIN_FRAME_WIDTH
	min_frame_height: float = MIN_FRAME_HEIGHT
	edge_mapping_threshold: float = EDGE_MAPPING_MIN_DRAG
	rotation_handle_offset: float = ROTATION_HANDLE_OFFSET
	min_detection_area: float = MIN_DETECTION_AREA
	min_detection_dimension: float = MIN_DETECTION_DIMENSION
	max_preview_dimension: int = MAX_FRAME_PREVIEW_DIMENSION

	def validate(self):
		"""Check every setting is a positive finite number

		Raises:
			ValueError: On the first invalid setting
		"""
		for f in fields(self):
			value = getattr(self, f.name)
			if isinstance(value, bool) or not isinstance(value, (int, float)):
				raise ValueError(f"{f.name} must be a number, got {value!r}")
			if not math.isfinite(value) or value <= 0:
				raise ValueError(f"{f.name} must be positive and finite, got {value!r}")


def load_config(path):
	"""Load geometry settings from a JSON file

	A missing file gives the defaults. Unknown keys are logged and ignored.
	"""
	config = GeometryConfig()
	if not os.path.exists(path):
		logger.debug("No config at %s, using defaults", path)
		return config

	try:
		with open(path, 'r', encoding='utf-8') as f:
			data = json.load(f)
		if not isinstance(data, dict):
			raise ValueError(f"Config root must be an object, got {type(data).__name__}")

		known = {f.name for f in fields(GeometryConfig)}
		for key, value in data.items():
			if key in known:
				setattr(config, key, value)
			else:
				logger.warning("Ignoring unknown config key '%s' in %s", key, path)

		config.validate()
	except (OSError, ValueError) as e:
		loggerRaise(e, f"Error loading config from {path}")
	return config


def save_config(config, path):
	"""Save geometry settings to a JSON file, creating its directory"""
	try:
		config.validate()
		directory = os.path.dirname(path)
		if directory:
			os.makedirs(directory, exist_ok=True)
		with open(path, 'w', encoding='utf-8') as f:
			json.dump(asdict(config), f, indent=2)
	except (OSError, ValueError) as e:
		loggerRaise(e, f"Error saving config to {path}")
