# tests/conftest.py
import sys, pathlib

import pytest
from loguru import logger

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))  # run from a checkout without installing


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _reset_logger():
    # the CLI re-points loguru at whatever sys.stderr is during the test
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
