#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/surface.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6
# LOG_REF: 2026-10-19
#

from abc import ABC, abstractmethod


class DrawingSurface(ABC):
    """
    Drawing capability consumed by the Scene.

    Coordinates are viewport units with the origin at the top-left corner
    and y growing downwards.  The scene never reads pixels back.
    """
    __slots__ = ()

    @abstractmethod
    def clear_rect(self, x: float, y: float, w: float, h: float):
        """Erase a rectangular region."""

    @abstractmethod
    def fill_rect(self, x: float, y: float, w: float, h: float):
        """Fill a rectangle with the current fill colour."""

    @abstractmethod
    def stroke_line(self, x1: float, y1: float, x2: float, y2: float):
        """Draw a line with the current stroke colour and width."""

    @abstractmethod
    def set_stroke_style(self, colour: str = '#000', line_width: float = 1):
        ...

    @abstractmethod
    def set_fill_style(self, colour: str = '#000'):
        ...


class RecordingSurface(DrawingSurface):
    """Surface that records every call as a tuple; used for headless runs and tests."""

    def __init__(self):
        self.commands = []

    def clear_rect(self, x, y, w, h):
        self.commands.append(('clear_rect', x, y, w, h))

    def fill_rect(self, x, y, w, h):
        self.commands.append(('fill_rect', x, y, w, h))

    def stroke_line(self, x1, y1, x2, y2):
        self.commands.append(('stroke_line', x1, y1, x2, y2))

    def set_stroke_style(self, colour='#000', line_width=1):
        self.commands.append(('set_stroke_style', colour, line_width))

    def set_fill_style(self, colour='#000'):
        self.commands.append(('set_fill_style', colour))

    def count(self, name: str) -> int:
        return sum(1 for cmd in self.commands if cmd[0] == name)

    def of_kind(self, name: str):
        return [cmd[1:] for cmd in self.commands if cmd[0] == name]

    def reset(self):
        self.commands.clear()
