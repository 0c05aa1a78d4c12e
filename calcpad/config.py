"""Runtime settings read from CALCPAD_* environment variables or a .env file."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
	model_config = SettingsConfigDict(
		env_prefix="CALCPAD_",
		env_file=str(_PROJECT_ROOT / ".env"),
		env_ignore_empty=True,
		extra="ignore",
	)

	DEBUG: bool = False
	LOG_LEVEL: str = "INFO"
	LOG_DIR: Path | None = None  # file logging only when set

	FRONTEND: Literal["tk", "console"] = "tk"

	# Tk window
	WINDOW_TITLE: str = "Calculator"
	FONT_FAMILY: str = "Segoe UI"
	BUTTON_SIZE: int = 84

	@field_validator("LOG_LEVEL", mode="before")
	@classmethod
	def normalize_log_level(cls, v: str) -> str:
		return v.strip().upper() if isinstance(v, str) else v

	@field_validator("BUTTON_SIZE")
	@classmethod
	def check_button_size(cls, v: int) -> int:
		if v < 32:
			raise ValueError("BUTTON_SIZE must be at least 32")
		return v


settings = Settings()
