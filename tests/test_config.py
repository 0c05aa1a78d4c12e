from pydantic import ValidationError
import pytest

from calcpad.config import Settings


def test_defaults(monkeypatch):
	for name in ("CALCPAD_FRONTEND", "CALCPAD_LOG_LEVEL", "CALCPAD_DEBUG", "CALCPAD_BUTTON_SIZE"):
		monkeypatch.delenv(name, raising=False)
	settings = Settings(_env_file=None)
	assert settings.FRONTEND == "tk"
	assert settings.LOG_LEVEL == "INFO"
	assert settings.LOG_DIR is None
	assert settings.BUTTON_SIZE == 84


def test_reads_prefixed_environment(monkeypatch):
	monkeypatch.setenv("CALCPAD_FRONTEND", "console")
	monkeypatch.setenv("CALCPAD_LOG_LEVEL", "warning")
	settings = Settings(_env_file=None)
	assert settings.FRONTEND == "console"
	assert settings.LOG_LEVEL == "WARNING"


def test_rejects_unknown_frontend():
	with pytest.raises(ValidationError):
		Settings(_env_file=None, FRONTEND="curses")


def test_rejects_tiny_buttons():
	with pytest.raises(ValidationError):
		Settings(_env_file=None, BUTTON_SIZE=10)
