"""Configuration management."""
import os
from typing import Optional

_TRUE = {"1", "true", "yes", "on"}


def _optional_float(raw: str) -> Optional[float]:
    raw = raw.strip()
    return float(raw) if raw else None


class Config:
    def __init__(self):
        self.LANGUAGE: str = os.environ.get("SCORER_LANGUAGE", "auto").lower()
        self.LEXICON: str = os.environ.get("SCORER_LEXICON", "")
        self.LEXICON_TIMEOUT: float = float(os.environ.get("SCORER_LEXICON_TIMEOUT", "10"))
        self.REVENUE_PER_CONVERSION: float = float(os.environ.get("SCORER_REVENUE_PER_CONVERSION", "50000"))
        self.MAX_MULTIPLIER: Optional[float] = _optional_float(os.environ.get("SCORER_MAX_MULTIPLIER", ""))
        self.STRICT: bool = os.environ.get("SCORER_STRICT", "false").lower() in _TRUE
        self.LOG_LEVEL: str = os.environ.get("SCORER_LOG_LEVEL", "WARNING").upper()

    def validate(self):
        if self.LANGUAGE not in ("auto", "en", "ja"):
            raise ValueError(f"SCORER_LANGUAGE must be auto, en or ja (got {self.LANGUAGE!r})")
        if self.REVENUE_PER_CONVERSION < 0:
            raise ValueError("SCORER_REVENUE_PER_CONVERSION must not be negative")
        if self.MAX_MULTIPLIER is not None and self.MAX_MULTIPLIER <= 0:
            raise ValueError("SCORER_MAX_MULTIPLIER must be positive")
        if self.LEXICON_TIMEOUT <= 0:
            raise ValueError("SCORER_LEXICON_TIMEOUT must be positive")


config = Config()
