from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULTS_DIR = Path(__file__).parent / "defaults"

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = _get_env(name)
    if raw is None:
        return default
    values = tuple(item.strip() for item in raw.split(",") if item.strip())
    return values or default


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str]
    gemini_model: str
    gemini_base_url: str
    default_resume_path: Path
    default_template_path: Path
    max_upload_bytes: int
    cors_allowed_origins: Tuple[str, ...]


def load_settings() -> Settings:
    return Settings(
        gemini_api_key=_get_env("GEMINI_API_KEY"),
        gemini_model=_get_env("GEMINI_MODEL", "gemini-2.5-pro"),
        gemini_base_url=_get_env("GEMINI_BASE_URL", GEMINI_OPENAI_BASE_URL),
        default_resume_path=Path(
            _get_env("DEFAULT_RESUME_PATH", str(DEFAULTS_DIR / "default-resume.txt"))
        ),
        default_template_path=Path(
            _get_env("DEFAULT_TEMPLATE_PATH", str(DEFAULTS_DIR / "default-cover-letter.tex"))
        ),
        max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            ("http://localhost:3000", "http://127.0.0.1:3000"),
        ),
    )
