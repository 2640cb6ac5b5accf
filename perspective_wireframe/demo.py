#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 12
# LOG_REF: 2026-10-19
#

import curses
import logging

from .canvas import Canvas
from .color import ColorPairs
from .config import RenderConfig
from .scene import Scene

logger = logging.getLogger(__name__)

# (centre, side length) of the cubes in the default scene
DEFAULT_CUBES = [
    ((0, 0, 0), 100),
    ((-150, -100, 0), 20),
    ((0, 125, 0), 50),
    ((150, 50, 0), 100),
    ((-200, 0, 0), 100),
    ((300, -200, 500), 120),
    ((-200, 0, 0), 100),
    ((0, -150, -10), 50),
]

# Unit camera deltas per key
MOVE_KEYS = {
    curses.KEY_LEFT: (-1, 0, 0),
    curses.KEY_RIGHT: (1, 0, 0),
    curses.KEY_UP: (0, 1, 0),
    curses.KEY_DOWN: (0, -1, 0),
    ord('w'): (0, 0, 1),
    ord('s'): (0, 0, -1),
}

FOV_KEYS = {
    ord('['): -5,
    ord(']'): 5,
}

QUIT = 'quit'
REDRAW = 'redraw'
RESIZE = 'resize'


def apply_styles(scene: Scene, config: RenderConfig):
    scene.set_stroke_style(config.stroke_colour, config.line_width)
    scene.set_fill_style(config.fill_colour)


def build_scene(surface, config: RenderConfig, cubes=DEFAULT_CUBES) -> Scene:
    """Scene on ``surface`` with the configured camera and centred cubes."""
    scene = Scene(surface, width=config.width, height=config.height,
                  point_size=config.point_size, camera=config.make_camera())
    apply_styles(scene, config)
    for centre, side in cubes:
        scene.cube(centre, side, centered=True)
    logger.info("Scene built with %d shapes, camera %r", len(scene.shapes), scene.camera)
    return scene


def redraw(scene: Scene):
    """Full clear + render cycle."""
    scene.clear()
    return scene.render()


def dispatch_key(scene: Scene, key: int, step: float = 1.0):
    """
    Apply one key press to the scene.

    Returns QUIT, REDRAW (camera changed, caller should redraw), RESIZE, or
    None for keys without a binding.
    """
    if key == ord('q'):
        return QUIT
    if key in MOVE_KEYS:
        dx, dy, dz = MOVE_KEYS[key]
        scene.move_camera(dx * step, dy * step, dz * step)
        return REDRAW
    if key in FOV_KEYS:
        scene.camera.adjust_fov(FOV_KEYS[key])
        return REDRAW
    if key == curses.KEY_RESIZE:
        return RESIZE
    return None


def render_snapshot(config: RenderConfig, cols: int, rows: int, cubes=DEFAULT_CUBES):
    """Render one frame of the default scene to a list of text rows."""
    canvas = Canvas(cols, rows, config.width, config.height)
    scene = build_scene(canvas, config, cubes)
    redraw(scene)
    return canvas.to_text(config.use_braille)


class DemoApp:
    """
    Interactive curses front end: arrow keys move the camera along x / y,
    w / s along z, [ / ] change the field of view, q quits.  Every handled
    key triggers one full redraw; nothing is drawn between key presses.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)

        self.colors = ColorPairs(config.use_color, config.bg_colour)
        self.canvas = self._make_canvas()
        self.scene = build_scene(self.canvas, config)
        self.stats = None

    def _make_canvas(self) -> Canvas:
        th, tw = self.stdscr.getmaxyx()
        return Canvas(max(1, tw - 1), max(1, th - 2), self.config.width, self.config.height)

    def resize(self):
        self.canvas = self._make_canvas()
        self.scene.surface = self.canvas
        apply_styles(self.scene, self.config)

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        key = self.stdscr.getch()
        action = dispatch_key(self.scene, key, self.config.move_step)
        if action == QUIT:
            self.running = False
        elif action == RESIZE:
            self.resize()
            self.draw()
        elif action == REDRAW:
            self.draw()

    # ────────────────────────────────────────────────────────────────────
    # Output
    # ────────────────────────────────────────────────────────────────────
    def draw(self):
        self.stats = redraw(self.scene)
        stdscr = self.stdscr
        stdscr.erase()

        self.colors.start()
        if self.colors.bg_pair:
            try:
                stdscr.bkgd(' ', curses.color_pair(self.colors.bg_pair))
            except curses.error:
                pass

        for y, x, char, colour in self.canvas.cells(self.config.use_braille):
            try:
                stdscr.addstr(y + 1, x, char, self.colors.pair_for(colour))
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen
                pass

        self._draw_hud()
        stdscr.refresh()

    def _draw_hud(self):
        th, tw = self.stdscr.getmaxyx()
        cam = self.scene.camera
        pos = cam.position
        hdr = (f" OBJ:{len(self.scene.shapes)}"
               f" | CAM:({pos.x:g}, {pos.y:g}, {pos.z:g})"
               f" | FOV:{cam.fov:g}"
               f" | E:{self.stats.edges if self.stats else 0} ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(max(0, tw - 1), '=')[:max(0, tw - 1)],
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        self.draw()
        while self.running:
            self.handle_input()


def main(stdscr, config: RenderConfig):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config)
    app.run()
