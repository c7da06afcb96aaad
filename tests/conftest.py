import typing as t
from unittest.mock import MagicMock

import pytest

from metalog import core
from metalog.logger import Logger


@pytest.fixture(autouse=True)
def isolated_default_logger(monkeypatch):
    """
    Keeps the process-wide default logger out of every test.
    Tests that need it get a fresh, target-less instance.
    """
    monkeypatch.setattr(core, "_default_logger", Logger())
    yield


@pytest.fixture
def mock_target() -> MagicMock:
    """A stand-in target exposing the log/close capability set."""
    return MagicMock(spec=["log", "close", "set_level", "get_level"])


@pytest.fixture
def logger_with_target(mock_target) -> t.Tuple[Logger, MagicMock]:
    logger = Logger()
    logger.to("trg", mock_target)
    return logger, mock_target
