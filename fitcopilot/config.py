from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Saved-workouts view
    DURATION_SLIDER_MAX: int = 120
    CUSTOM_PRESETS_FILE: Optional[str] = None
    SAMPLE_WORKOUTS_FILE: str = str(DATA_DIR / "sample_workouts.json")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Allow Streamlit Cloud secrets to override or provide env values
    overrides: dict = {}
    try:
        import streamlit as _st  # type: ignore
        sec = getattr(_st, "secrets", None)
        if sec:
            for k in ["APP_ENV", "LOG_LEVEL", "CUSTOM_PRESETS_FILE", "SAMPLE_WORKOUTS_FILE"]:
                if k in sec and sec[k] is not None and sec[k] != "":
                    overrides[k] = sec[k]
    except Exception:
        # No secrets.toml outside Streamlit Cloud
        pass
    return Settings(**overrides)  # type: ignore[call-arg]


def configure_logging(level: str | None = None) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
