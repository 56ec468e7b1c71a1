"""Pytest configuration and shared fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from eve_cli.app import Eve  # noqa: E402
from eve_cli.storage import TaskStore  # noqa: E402


@pytest.fixture
def data_file(tmp_path):
    """Path to a task file that does not exist yet."""
    return tmp_path / "data" / "eve.txt"


@pytest.fixture
def store(data_file):
    return TaskStore(data_file)


@pytest.fixture
def eve(store):
    """Eve wired to an empty task file."""
    return Eve(store)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any handlers the CLI installs on the package logger."""
    yield
    logger = logging.getLogger("eve_cli")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
