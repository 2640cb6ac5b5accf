#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

import math
import os
from dataclasses import dataclass
from typing import Tuple

from .camera import Camera
from .color import parse_hex_color


@dataclass
class RenderConfig:
    """Viewport, camera and style settings for a scene."""
    width: float = 1500
    height: float = 800
    point_size: float = 5.0
    fov: float = 120.0
    camera_position: Tuple[float, float, float] = (0.0, 0.0, -50.0)
    camera_direction: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    stroke_colour: str = '#D0DD14'
    fill_colour: str = '#D0DD14'
    bg_colour: str = '#0E0E2C'
    line_width: float = 1.0
    move_step: float = 1.0
    use_color: bool = True
    use_braille: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError for settings the pipeline cannot render."""
        if not (self.width > 0 and self.height > 0):
            raise ValueError(f"Viewport size must be positive, got {self.width}x{self.height}")
        if not self.point_size >= 0:
            raise ValueError(f"Point size must not be negative, got {self.point_size}")
        if not (0 < self.fov < 180):
            raise ValueError(f"Field of view must be between 0 and 180 degrees (exclusive), got {self.fov}")
        if not self.line_width > 0:
            raise ValueError(f"Line width must be positive, got {self.line_width}")
        if not (math.isfinite(self.move_step) and self.move_step > 0):
            raise ValueError(f"Move step must be positive, got {self.move_step}")
        for name in ('camera_position', 'camera_direction'):
            value = tuple(getattr(self, name))
            if len(value) != 3 or not all(math.isfinite(v) for v in value):
                raise ValueError(f"{name} must be three finite numbers, got {value}")
        for name in ('stroke_colour', 'fill_colour', 'bg_colour'):
            if parse_hex_color(getattr(self, name)) is None:
                raise ValueError(f"{name} must be a hex colour like #RRGGBB, got {getattr(self, name)!r}")

    def make_camera(self) -> Camera:
        return Camera(position=self.camera_position,
                      direction=self.camera_direction,
                      fov=self.fov)

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Note: accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        settings = dict(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
        settings.update(overrides)
        return cls(**settings)
