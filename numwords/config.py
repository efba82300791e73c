# config.py

from __future__ import annotations

import logging
import os

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

# --------------------------- Config ---------------------------

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_WORDS_SUFFIX = " (words)"


@dataclass(frozen=True)
class Settings:
    log_level: int
    output_dir: str
    words_suffix: str


def parse_log_level(name: Optional[str]) -> int:
    level = logging.getLevelName((name or DEFAULT_LOG_LEVEL).strip().upper())
    # getLevelName returns "Level X" for unknown names
    if not isinstance(level, int):
        return logging.WARNING
    return level


def load_settings(dotenv_path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Read settings from the environment (and a .env file if present, looked up
    from the current working directory upwards).

    Env:
      NUMWORDS_LOG_LEVEL, NUMWORDS_OUTPUT_DIR, NUMWORDS_WORDS_SUFFIX
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    return Settings(
        log_level=parse_log_level(os.getenv("NUMWORDS_LOG_LEVEL")),
        output_dir=(os.getenv("NUMWORDS_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR).strip(),
        words_suffix=os.getenv("NUMWORDS_WORDS_SUFFIX") or DEFAULT_WORDS_SUFFIX,
    )
