"""Shared fixtures for calcpad tests."""
import sys

from loguru import logger
import pytest

from calcpad.engine import Calculator


@pytest.fixture
def calc():
	return Calculator()


@pytest.fixture
def log_messages():
	"""Collect calcpad loguru output as ``"LEVEL message"`` strings."""
	messages = []
	logger.enable("calcpad")
	handler_id = logger.add(lambda m: messages.append(m.rstrip("\n")), level="DEBUG", format="{level} {message}")
	yield messages
	logger.remove(handler_id)
	logger.disable("calcpad")


@pytest.fixture
def restore_logging():
	yield
	logger.remove()
	logger.add(sys.stderr)
	logger.disable("calcpad")
