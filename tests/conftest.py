import logging

import pytest

from perspective_wireframe.logging_config import setup_logging
from perspective_wireframe.surface import RecordingSurface


@pytest.fixture(scope="session", autouse=True)
def setup_app_logging():
    """
    Configure the package logger once for the whole test session.
    """
    setup_logging(logging.DEBUG, console=False)


@pytest.fixture
def surface():
    return RecordingSurface()
