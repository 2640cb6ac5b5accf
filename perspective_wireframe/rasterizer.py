#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/rasterizer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 8
# LOG_REF: 2026-10-19
#

import math


def draw_line_dda(canvas, p1, p2, color_idx=0, thickness=1):
    """
    Draws a line between two pixel-space points using the DDA algorithm.
    With thickness > 1 every step stamps a thickness x thickness block.
    """
    x1, y1 = math.floor(p1[0]), math.floor(p1[1])
    x2, y2 = math.floor(p2[0]), math.floor(p2[1])

    dx = x2 - x1
    dy = y2 - y1
    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    if step == 0:
        _stamp(canvas, x1, y1, color_idx, thickness)
        return

    x_inc = dx / step
    y_inc = dy / step
    cx, cy = float(x1), float(y1)

    if thickness <= 1:
        for _ in range(int(step) + 1):
            canvas.set_pixel(int(round(cx)), int(round(cy)), color_idx)
            cx += x_inc; cy += y_inc
    else:
        for _ in range(int(step) + 1):
            _stamp(canvas, int(round(cx)), int(round(cy)), color_idx, thickness)
            cx += x_inc; cy += y_inc


def _stamp(canvas, x, y, color_idx, thickness):
    off = thickness // 2
    fill_pixels(canvas, x - off, y - off, x - off + thickness, y - off + thickness, color_idx)


def fill_pixels(canvas, x0, y0, x1, y1, color_idx=0):
    """Sets every pixel in the half-open box [x0, x1) x [y0, y1), clipped to the canvas."""
    x0, x1 = max(0, x0), min(canvas.w, x1)
    y0, y1 = max(0, y0), min(canvas.h, y1)
    for y in range(y0, y1):
        for x in range(x0, x1):
            canvas.set_pixel(x, y, color_idx)


def clear_pixels(canvas, x0, y0, x1, y1):
    """Clears every pixel in the half-open box [x0, x1) x [y0, y1), clipped to the canvas."""
    x0, x1 = max(0, x0), min(canvas.w, x1)
    y0, y1 = max(0, y0), min(canvas.h, y1)
    for y in range(y0, y1):
        for x in range(x0, x1):
            canvas.clear_pixel(x, y)
