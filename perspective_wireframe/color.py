#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/color.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 9
# LOG_REF: 2026-10-19
#

import curses
import logging

logger = logging.getLogger(__name__)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB', 'RRGGBB', '#RGB' or 'RGB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) == 3:
        val = ''.join(ch * 2 for ch in val)
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# --- xterm-256 palette matching ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# Grayscale ramp occupies indices 232-255 (24 shades).
# Values: 8, 18, 28, ..., 238

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color.
    Used on terminals that only support 8 colors."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                        (g - _ANSI8[i][1]) ** 2 +
                                        (b - _ANSI8[i][2]) ** 2)


class ColorPairs:
    """
    Lazily allocates one curses color pair per hex colour.

    Color mode cascade (decided on first use, after curses is initialised):
      1. True color  – can_change_color(): init_color() with exact RGB
      2. xterm-256   – 256+ colors: nearest xterm-256 index
      3. 8-color     – basic ANSI palette approximation
      4. Mono        – pair 0 for everything
    """

    # Custom color slots start here to avoid clobbering ANSI 0-15
    BASE_SLOT = 16

    def __init__(self, use_color=True, bg_colour=None):
        self.use_color = use_color
        self.bg_rgb = parse_hex_color(bg_colour)
        self.mode = None
        self.bg_slot = -1
        self.bg_pair = 0
        self._pairs = {}

    def start(self):
        """Decide the colour mode; safe to call more than once."""
        if self.mode is None:
            self._detect()

    def _detect(self):
        self.mode = 'mono'
        if not self.use_color:
            return
        try:
            if not curses.has_colors():
                return
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            num_colors = getattr(curses, 'COLORS', 8)
            can_redefine = curses.can_change_color()
        except curses.error as e:
            logger.warning("Colour initialisation failed, using monochrome: %s", e)
            return

        if can_redefine and num_colors >= 256:
            self.mode = 'truecolor'
        elif num_colors >= 256:
            self.mode = 'xterm256'
        elif num_colors >= 8:
            self.mode = 'ansi8'
        logger.info("Terminal colour mode: %s (%d colours)", self.mode, num_colors)

        if self.bg_rgb is not None and self.bg_rgb != (0, 0, 0):
            self.bg_slot = self._resolve(self.bg_rgb, self.BASE_SLOT)
            try:
                curses.init_pair(1, 7 if self.bg_slot != 7 else 0, self.bg_slot)
                self.bg_pair = 1
            except curses.error:
                self.bg_slot = -1

    def _resolve(self, rgb, slot):
        r, g, b = rgb
        if self.mode == 'truecolor':
            try:
                curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
                return slot
            except curses.error:
                return rgb_to_nearest_xterm(r, g, b)
        if self.mode == 'xterm256':
            return rgb_to_nearest_xterm(r, g, b)
        return rgb_to_nearest_ansi8(r, g, b)

    def pair_for(self, colour) -> int:
        """curses attribute for drawing in ``colour`` (a hex string)."""
        self.start()
        if self.mode == 'mono':
            return curses.color_pair(0)

        key = str(colour).lower()
        if key not in self._pairs:
            rgb = parse_hex_color(key)
            if rgb is None:
                logger.warning("Unparseable colour %r, using default", colour)
                self._pairs[key] = 0
            else:
                pair_id = len(self._pairs) + 2
                fg = self._resolve(rgb, self.BASE_SLOT + pair_id)
                try:
                    curses.init_pair(pair_id, fg, self.bg_slot)
                    self._pairs[key] = pair_id
                except curses.error:
                    self._pairs[key] = 0
        return curses.color_pair(self._pairs[key])
