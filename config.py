"""AtomLab Engine API — config

Every setting comes from the environment with a safe default, so a missing
env var never stops the service from booting.
"""

from __future__ import annotations

import os
import logging
from typing import List, Optional

# -----------------------------
# helpers
# -----------------------------
def _env(key: str, default: str = "") -> str:
    v = os.getenv(key)
    return default if v is None else str(v).strip()

def _env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "y", "on"}

def _env_int(key: str, default: int) -> int:
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return default
    try:
        return int(str(v).strip())
    except ValueError:
        return default

def _env_list(key: str, default: Optional[List[str]] = None, sep: str = ",") -> List[str]:
    if default is None:
        default = []
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return list(default)
    return [s.strip() for s in str(v).split(sep) if s.strip()]


# -----------------------------
# logging
# -----------------------------
LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger("atomlab-engine-api")


# -----------------------------
# core app env
# -----------------------------
ENV = _env("ENV", _env("APP_ENV", "production"))
DEBUG = _env_bool("DEBUG", False)

ENGINE_NAME = _env("ENGINE_NAME", "atomlab_engine_v1")

HOST = _env("HOST", "0.0.0.0")
PORT = _env_int("PORT", 10000)
UVICORN_WORKERS = _env_int("UVICORN_WORKERS", 2)


# -----------------------------
# CORS
# -----------------------------
# Production defaults to the lesson site; dev/staging allow "*" unless set.
_origins_env = os.getenv("ALLOWED_ORIGINS")
if _origins_env is None or str(_origins_env).strip() == "":
    if str(ENV).lower().strip() == "production":
        ALLOWED_ORIGINS = [
            "https://atomlab.education",
            "https://www.atomlab.education",
        ]
    else:
        ALLOWED_ORIGINS = ["*"]
else:
    ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS", default=[])
