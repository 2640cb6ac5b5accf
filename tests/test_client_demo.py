import logging

import pytest

import client_demo
from perspective_wireframe.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    # main() points the console handler at the captured stderr
    yield
    setup_logging(logging.DEBUG, console=False)


def test_snapshot_prints_one_frame(capsys):
    assert client_demo.main(["--snapshot", "--cols", "40", "--rows", "10", "--ascii"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 10
    assert any(line.strip() for line in lines)


def test_parser_defaults():
    args = client_demo.build_parser().parse_args([])
    assert (args.width, args.height) == (1500, 800)
    assert args.fov == 120
    assert tuple(args.camera) == (0, 0, -50)
    assert args.snapshot is False


def test_config_from_args():
    parser = client_demo.build_parser()
    args = parser.parse_args(["--camera", "1", "2", "-30", "--no-color", "--step", "5"])
    config = client_demo.config_from_args(args, parser)
    assert config.camera_position == (1, 2, -30)
    assert config.use_color is False
    assert config.move_step == 5


@pytest.mark.parametrize("argv", [["--fov", "180"], ["--stroke-color", "nope"], ["--cols", "0"]])
def test_invalid_options_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as exc:
        client_demo.main(["--snapshot"] + argv)
    assert exc.value.code == 2
