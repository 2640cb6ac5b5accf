#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/canvas.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 8
# LOG_REF: 2026-10-19
#

import math

from .rasterizer import draw_line_dda, fill_pixels, clear_pixels
from .surface import DrawingSurface


class Canvas(DrawingSurface):
    """
    Terminal pixel grid implementing DrawingSurface.

    Every character cell holds a 2x4 block of pixels (one Braille glyph), so
    a cols x rows terminal area gives a (2*cols) x (4*rows) pixel grid.  The
    logical viewport (width x height) is scaled onto that grid per axis.
    Each cell remembers the colour slot of the last pixel drawn into it;
    slots index into ``colours``.
    """
    __slots__ = ['w', 'h', 'cols', 'rows', 'width', 'height', 'scale_x', 'scale_y',
                 'grid', 'c_grid', 'colours', 'stroke_idx', 'fill_idx', 'line_width']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, cols, rows, width=1500, height=800):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Canvas needs at least one cell, got {cols}x{rows}")
        self.cols, self.rows = cols, rows
        self.w, self.h = cols * 2, rows * 4
        self.width, self.height = width, height
        self.scale_x = self.w / width
        self.scale_y = self.h / height
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * cols for _ in range(rows)]
        # Colour slot per cell
        self.c_grid = [[0] * cols for _ in range(rows)]
        self.colours = []
        self.stroke_idx = self._slot('#000')
        self.fill_idx = self.stroke_idx
        self.line_width = 1

    def _slot(self, colour):
        colour = str(colour).lower()
        if colour not in self.colours:
            self.colours.append(colour)
        return self.colours.index(colour)

    # ── pixel access ────────────────────────────────────────────────────
    def set_pixel(self, x, y, color_idx):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color_idx

    def clear_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x >> 1, y >> 2
        self.grid[cy][cx] &= ~(1 << ((y & 3) + (x & 1) * 4))

    def get_pixel(self, x, y) -> bool:
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))

    def _to_px(self, x, y):
        return x * self.scale_x, y * self.scale_y

    def _box(self, x, y, w, h):
        """Pixel box covering the viewport rectangle, at least one pixel wide and tall."""
        if w < 0: x, w = x + w, -w
        if h < 0: y, h = y + h, -h
        x0, y0 = self._to_px(x, y)
        x1, y1 = self._to_px(x + w, y + h)
        px0, py0 = math.floor(x0), math.floor(y0)
        px1 = max(math.ceil(x1), px0 + 1)
        py1 = max(math.ceil(y1), py0 + 1)
        return px0, py0, px1, py1

    # ── DrawingSurface ──────────────────────────────────────────────────
    def clear_rect(self, x, y, w, h):
        if not all(math.isfinite(v) for v in (x, y, w, h)):
            return
        if x <= 0 and y <= 0 and x + w >= self.width and y + h >= self.height:
            self.grid = [[0] * self.cols for _ in range(self.rows)]
            self.c_grid = [[0] * self.cols for _ in range(self.rows)]
            return
        clear_pixels(self, *self._box(x, y, w, h))

    def fill_rect(self, x, y, w, h):
        if not all(math.isfinite(v) for v in (x, y, w, h)):
            return
        fill_pixels(self, *self._box(x, y, w, h), self.fill_idx)

    def stroke_line(self, x1, y1, x2, y2):
        if not all(math.isfinite(v) for v in (x1, y1, x2, y2)):
            return
        thickness = max(1, int(round(self.line_width * min(self.scale_x, self.scale_y))))
        draw_line_dda(self, self._to_px(x1, y1), self._to_px(x2, y2), self.stroke_idx, thickness)

    def set_stroke_style(self, colour='#000', line_width=1):
        self.stroke_idx = self._slot(colour)
        self.line_width = line_width

    def set_fill_style(self, colour='#000'):
        self.fill_idx = self._slot(colour)

    # ── output ──────────────────────────────────────────────────────────
    def cells(self, use_braille=True):
        """Yields (row, col, char, colour) for every non-empty cell."""
        render = render_cell_braille if use_braille else render_cell_ascii
        for y, row in enumerate(self.grid):
            colours = self.c_grid[y]
            for x, mask in enumerate(row):
                if mask:
                    yield y, x, render(mask), self.colours[colours[x]]

    def to_text(self, use_braille=True):
        """Renders the grid as a list of strings, one per terminal row."""
        render = render_cell_braille if use_braille else render_cell_ascii
        return [''.join(render(mask) for mask in row) for row in self.grid]


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    # Count set bits
    density = bin(mask).count('1')

    # Map density 1-8 to ASCII gradient
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
