# rescisao/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    rate_limit_per_minute: int
    cors_origins: tuple[str, ...]
    log_enabled: bool
    api_key: str = ""  # vazio = nenhum cliente ignora o rate limit


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("API_CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_enabled=os.environ.get("API_LOG_ENABLED", "true").lower() == "true",
        api_key=os.environ.get("API_KEY", ""),
    )
