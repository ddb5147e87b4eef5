from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# BASE_DIR points to the project root
BASE_DIR = Path(__file__).resolve().parents[2]

_ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=_ENV_PATH)

DATA_PATH = BASE_DIR / "data" / "workouts.json"

DEFAULT_OPENAI_MODEL = "gpt-3.5-turbo"
DEFAULT_OPENAI_TEMPERATURE = 0.7
DEFAULT_OPENAI_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"

SERVICE_NAME = "workout-calorie-tracker"

SECURITY_HEADERS = {
    "X-DNS-Prefetch-Control": "on",
    "Strict-Transport-Security": "max-age=63072000; includeSubDomains; preload",
}


@dataclass(frozen=True)
class TrackerConfig:
    data_path: Path = DATA_PATH
    openai_api_key: str = ""
    openai_model: str = DEFAULT_OPENAI_MODEL
    openai_temperature: float = DEFAULT_OPENAI_TEMPERATURE
    openai_timeout_seconds: float = DEFAULT_OPENAI_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def load_config() -> TrackerConfig:
    """Build the process configuration from the environment (and `.env`)."""
    data_path = os.getenv("WORKOUTS_DATA_PATH")
    return TrackerConfig(
        data_path=Path(data_path) if data_path else DATA_PATH,
        openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
        openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
        openai_temperature=_env_float("OPENAI_TEMPERATURE", DEFAULT_OPENAI_TEMPERATURE),
        openai_timeout_seconds=_env_float("OPENAI_TIMEOUT_SECONDS", DEFAULT_OPENAI_TIMEOUT_SECONDS),
        log_level=(os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )
