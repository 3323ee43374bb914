"""
Runtime settings, read from environment variables.

A `.env` file in the working directory is loaded by the app entry point
(`load_dotenv(override=False)`), so real environment variables win.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    start_words_path: str = "data/start.txt"
    lexicon_backend: str = "spellchecker"   # "spellchecker" | "wordfreq" | "llm"
    min_zipf: float = 1.0
    offline_mode: bool = True
    openai_api_key: str = ""
    model_name: str = "gpt-4o-mini"
    log_level: str = "INFO"

    @property
    def llm_enabled(self) -> bool:
        return not self.offline_mode and bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            start_words_path=os.getenv("START_WORDS_PATH", cls.start_words_path),
            lexicon_backend=os.getenv("LEXICON_BACKEND", cls.lexicon_backend).lower(),
            min_zipf=float(os.getenv("MIN_ZIPF", cls.min_zipf)),
            offline_mode=_env_flag("OFFLINE_MODE", "true"),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            model_name=os.getenv("MODEL_NAME", cls.model_name),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


def configure_logging(level: Optional[str] = None) -> None:
    """Install a console handler on the root logger (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level or "INFO")
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
