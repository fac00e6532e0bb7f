import logging

from logging.handlers import RotatingFileHandler

import pytest

from utils.logger import ConsoleHandler


@pytest.fixture(autouse=True)
def _reset_root_handlers():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if isinstance(h, (ConsoleHandler, RotatingFileHandler)):
            root.removeHandler(h)
            h.close()
    root.setLevel(logging.WARNING)


@pytest.fixture
def plain_file(tmp_path):
    p = tmp_path / "plain.txt"
    p.write_bytes(b"hello world")
    return p
