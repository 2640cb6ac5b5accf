#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/__init__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 0
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Mat3, subtract, magnitude, rotate
from .shape import Shape
from .factory import make_cube, make_box, box_edges
from .camera import Camera, CameraSnapshot, CameraConfigError
from .projector import Projector
from .surface import DrawingSurface, RecordingSurface
from .scene import Scene, ProjectedShape, RenderStats
from .canvas import Canvas
from .color import parse_hex_color, ColorPairs
from .config import RenderConfig
from .logging_config import setup_logging

__version__ = "0.1.0"
