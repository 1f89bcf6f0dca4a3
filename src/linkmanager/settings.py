from __future__ import annotations

import logging
import os

ORACLE_PROVIDER = os.getenv("ORACLE_PROVIDER", "mock")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
ORACLE_TIMEOUT_SECONDS = float(os.getenv("ORACLE_TIMEOUT_SECONDS", "20"))

MATCH_THRESHOLD = float(os.getenv("MATCH_THRESHOLD", "0.55"))
DATE_BOOST = float(os.getenv("DATE_BOOST", "0.40"))
EXTENSION_BOOST = float(os.getenv("EXTENSION_BOOST", "0.20"))
SEQUENCE_BOOST = float(os.getenv("SEQUENCE_BOOST", "0.15"))
DECISIVE_SCORE = float(os.getenv("DECISIVE_SCORE", "1.2"))
WINNER_MARGIN = float(os.getenv("WINNER_MARGIN", "0.1"))
MAX_CANDIDATES = int(os.getenv("MAX_CANDIDATES", "5"))

SESSION_DIR = os.getenv("SESSION_DIR", "./sessions")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
