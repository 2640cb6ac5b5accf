import math

import pytest

from perspective_wireframe.config import RenderConfig
from perspective_wireframe.math_utils import Vec3


def test_defaults():
    config = RenderConfig()
    assert (config.width, config.height) == (1500, 800)
    assert config.point_size == 5
    assert config.fov == 120
    assert config.camera_position == (0, 0, -50)


def test_make_camera():
    camera = RenderConfig(fov=90, camera_position=(1, 2, -30)).make_camera()
    assert camera.fov == 90
    assert camera.position == Vec3(1, 2, -30)
    assert camera.direction == Vec3(0, 0, 0)


@pytest.mark.parametrize(
    "overrides",
    [
        dict(width=0),
        dict(height=-5),
        dict(point_size=-1),
        dict(fov=0),
        dict(fov=180),
        dict(line_width=0),
        dict(move_step=0),
        dict(move_step=math.inf),
        dict(camera_position=(0, 0)),
        dict(camera_direction=(0, math.nan, 0)),
        dict(stroke_colour="yellow"),
        dict(bg_colour="#12"),
    ],
)
def test_rejects_invalid_settings(overrides):
    with pytest.raises(ValueError):
        RenderConfig(**overrides)


@pytest.mark.parametrize(
    "term, lang, color, braille",
    [
        ("xterm-256color", "en_US.UTF-8", True, True),
        ("dumb", "C", False, False),
        ("linux", "en_US.UTF-8", True, False),
    ],
)
def test_detect_terminal(monkeypatch, term, lang, color, braille):
    monkeypatch.setenv("TERM", term)
    monkeypatch.setenv("LANG", lang)
    config = RenderConfig.detect_terminal()
    assert config.use_color is color
    assert config.use_braille is braille


def test_detect_terminal_overrides(monkeypatch):
    monkeypatch.setenv("TERM", "dumb")
    config = RenderConfig.detect_terminal(fov=60, use_color=True)
    assert config.fov == 60
    assert config.use_color is True
