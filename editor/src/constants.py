"""
Frame Editor - Constants and Configuration

This module contains all constant values used by the geometry engine:
- Frame edge identifiers
- Minimum frame sizes and interaction thresholds
- Numerical tolerances for the inverse bounding box problem
- Boundary validation tuning
- Detection and preview defaults

Coordinate conventions: image space is y-down, rotation is in degrees and
positive rotation turns a frame clockwise on screen.
"""

# ======================================================================
# FRAME EDGES
# ======================================================================
# Logical (rotation-relative) edges, in tie-break order for edge mapping

EDGE_TOP = 'top'
EDGE_RIGHT = 'right'
EDGE_BOTTOM = 'bottom'
EDGE_LEFT = 'left'

FRAME_EDGES = (EDGE_TOP, EDGE_RIGHT, EDGE_BOTTOM, EDGE_LEFT)

# ======================================================================
# FRAME SIZE CONSTRAINTS
# ======================================================================

MIN_FRAME_WIDTH = 20   # Image pixels, true (unrotated) width
MIN_FRAME_HEIGHT = 20  # Image pixels, true (unrotated) height

# ======================================================================
# INTERACTION THRESHOLDS
# ======================================================================

# Pointer deltas shorter than this (display pixels) are ignored by resize
RESIZE_NOISE_FLOOR = 0.5

# Drag distance (display pixels) before the effective resize edge is re-resolved
EDGE_MAPPING_MIN_DRAG = 5.0

# Distance of rotation handles beyond the frame corners (display pixels)
ROTATION_HANDLE_OFFSET = 20.0

# ======================================================================
# NUMERICAL TOLERANCES
# ======================================================================

# Rotations closer than this (degrees) to a multiple of 360 count as unrotated
ZERO_ROTATION_EPSILON = 0.01

# Rotations closer than this (degrees) to 45°, 135°, ... make the bounding box
# inverse singular
SINGULAR_ANGLE_TOLERANCE = 0.01

# Max absolute error (image pixels) when re-deriving a bounding box from
# recovered dimensions
ROUND_TRIP_TOLERANCE = 1.0

# ======================================================================
# BOUNDARY VALIDATION
# ======================================================================

BOUNDARY_SHRINK_FACTOR = 0.95
BOUNDARY_MAX_ITERATIONS = 10

# ======================================================================
# DETECTION DEFAULTS
# ======================================================================

MIN_DETECTION_AREA = 2500       # ~50x50 pixels
MIN_DETECTION_DIMENSION = 30    # Smallest side of a detected frame

# ======================================================================
# PREVIEWS
# ======================================================================

MAX_FRAME_PREVIEW_DIMENSION = 200
STRAIGHTEN_MIN_ROTATION = 1.0   # Below this (degrees) previews are plain crops
