"""
Runtime configuration for the transaction service.

Values come from the environment (optionally a .env file) and are read once
at import time.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(), override=False)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./transactions.db")
DATABASE_ECHO = _as_bool(os.getenv("DATABASE_ECHO", "false"))

ACCOUNT_SERVICE_URL = os.getenv("ACCOUNT_SERVICE_URL", "http://localhost:8085").rstrip("/")
# account service must answer within this many seconds
ACCOUNT_SERVICE_TIMEOUT = float(os.getenv("ACCOUNT_SERVICE_TIMEOUT", "5"))

CORS_ALLOWED_ORIGINS = _as_list(os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:8087"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
