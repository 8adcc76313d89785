import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

# Force-load .env (Windows-safe, reload-safe)
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env")

REQUIRED = ("DATABASE_URL", "STRIPE_SECRET_KEY", "JWT_SECRET")


class Settings(BaseModel):
    database_url: str
    stripe_secret_key: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24
    frontend_url: str = "http://localhost:3000"
    port: int = 5000
    currency: str = "gbp"
    stripe_timeout: float = 10
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}")


def load_settings() -> Settings:
    missing = [name for name in REQUIRED if not os.getenv(name)]
    if missing:
        raise RuntimeError(f"{', '.join(missing)} is not set. Check your .env file.")

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    return Settings(
        database_url=os.environ["DATABASE_URL"],
        stripe_secret_key=os.environ["STRIPE_SECRET_KEY"],
        jwt_secret=os.environ["JWT_SECRET"],
        jwt_expire_hours=_int("JWT_EXPIRE_HOURS", 24),
        frontend_url=(os.getenv("FRONTEND_URL") or "http://localhost:3000").rstrip("/"),
        port=_int("PORT", 5000),
        currency=(os.getenv("CURRENCY") or "gbp").lower(),
        stripe_timeout=_float("STRIPE_TIMEOUT", 10),
        cors_origins=origins or ["*"],
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


settings = load_settings()
