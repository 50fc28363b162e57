from __future__ import annotations

import os


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def cors_allow_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
