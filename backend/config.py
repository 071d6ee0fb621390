"""
Service configuration.

Everything is read from the environment (a .env file is loaded by main.py
before this module is imported). Defaults match local development.

  DATA_FILE=/var/lib/kudos/db.json
  ENVIRONMENT=production
  CORS_ORIGINS=https://kudos.example.com,https://kudos-preview.vercel.app
"""

import os
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parent


def _flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3001"))

DATA_FILE = Path(os.environ.get("DATA_FILE", str(BACKEND_ROOT / "db.json")))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Closed sessions refuse new nominations unless this is switched on
ACCEPT_CLOSED_NOMINATIONS = _flag("ACCEPT_CLOSED_NOMINATIONS")

_DEV_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:8081",
    "http://localhost:8082",
    "http://localhost:5173",
]
_PROD_ORIGINS = ["https://kudos-app.vercel.app"]

if os.environ.get("CORS_ORIGINS"):
    CORS_ORIGINS = _origins(os.environ["CORS_ORIGINS"])
elif ENVIRONMENT == "production":
    CORS_ORIGINS = _PROD_ORIGINS
else:
    CORS_ORIGINS = _DEV_ORIGINS

# Preview deployments get a fresh subdomain each time
CORS_ORIGIN_REGEX = r"https://.*\.vercel\.app" if ENVIRONMENT == "production" else None
