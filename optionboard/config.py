"""
Runtime settings for optionboard.

Values come from the environment (a local .env file is loaded first):
    OPTIONBOARD_LOG_LEVEL           stderr log level, default INFO
    OPTIONBOARD_LOG_FILE            rotating log file pattern, unset = no file sink
    OPTIONBOARD_HIGH_CONFIDENCE     lower bound of the "high" confidence label (0.9)
    OPTIONBOARD_MEDIUM_CONFIDENCE   lower bound of the "medium" confidence label (0.7)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    high_confidence: float = 0.9
    medium_confidence: float = 0.7

    def confidence_label(self, confidence: float) -> str:
        if confidence >= self.high_confidence:
            return "high"
        if confidence >= self.medium_confidence:
            return "medium"
        return "low"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from the environment."""
    if dotenv:
        load_dotenv()

    return Settings(
        log_level=os.getenv("OPTIONBOARD_LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("OPTIONBOARD_LOG_FILE") or None,
        high_confidence=_float_env("OPTIONBOARD_HIGH_CONFIDENCE", 0.9),
        medium_confidence=_float_env("OPTIONBOARD_MEDIUM_CONFIDENCE", 0.7),
    )
