# crm/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    gemini_model: str
    gemini_base_url: str
    resumo_timeout: float
    seed_exemplos: bool
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        gemini_api_key=os.environ.get("GEMINI_API_KEY", ""),
        gemini_model=os.environ.get("GEMINI_MODEL", "gemini-2.5-flash"),
        gemini_base_url=os.environ.get(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta",
        ),
        resumo_timeout=float(os.environ.get("CRM_RESUMO_TIMEOUT", "30")),
        seed_exemplos=os.environ.get("CRM_SEED_EXEMPLOS", "true").lower() == "true",
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
