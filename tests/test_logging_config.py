import logging

from perspective_wireframe.logging_config import PACKAGE_LOGGER, setup_logging


def test_log_file_receives_records(tmp_path):
    log_file = tmp_path / "render.log"
    logger = setup_logging(logging.INFO, str(log_file), console=False)
    file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

    logging.getLogger(PACKAGE_LOGGER + ".scene").info("frame drawn")
    file_handler.flush()
    assert "frame drawn" in log_file.read_text(encoding="utf-8")

    # Reconfiguring closes the old file handler
    setup_logging(logging.DEBUG, console=False)
    assert file_handler.stream is None
    assert file_handler not in logger.handlers


def test_reconfigure_does_not_stack_handlers():
    logger = setup_logging(logging.DEBUG, console=True)
    setup_logging(logging.DEBUG, console=True)
    assert len(logger.handlers) == 1
    setup_logging(logging.DEBUG, console=False)
    assert [type(h) for h in logger.handlers] == [logging.NullHandler]
