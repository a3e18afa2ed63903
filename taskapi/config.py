# taskapi/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# load .env into process env vars
ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env")

UPDATE_POLICIES = ("upsert", "strict")


def _as_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "y", "on")


def _as_int(name: str, default: int) -> int:
    try:
        return int(str(os.getenv(name, default)).strip())
    except Exception:
        return default


def _parse_origins(raw: str) -> List[str]:
    """
    Accepts:  'http://localhost:5173, https://tasks.example.com'
    Returns:  ['http://localhost:5173', 'https://tasks.example.com']
    """
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


@dataclass
class Settings:
    # App
    ENV: str = "dev"
    PORT: int = 5000

    # Storage
    DATABASE_URL: str = "sqlite:///data/task-manager.db"

    # Auth
    ACCESS_TOKEN_SECRET: str = "dev-secret"
    TOKEN_TTL_HOURS: int = 10

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["http://localhost:5173"])

    # Task updates
    TASK_UPDATE_POLICY: str = "upsert"
    TASK_UPDATE_RESETS_CREATED_AT: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    def __post_init__(self):
        self.TASK_UPDATE_POLICY = (self.TASK_UPDATE_POLICY or "").strip().lower()
        if self.TASK_UPDATE_POLICY not in UPDATE_POLICIES:
            raise ValueError(
                f"Bad TASK_UPDATE_POLICY {self.TASK_UPDATE_POLICY!r}; "
                f"expected one of {', '.join(UPDATE_POLICIES)}"
            )

    @property
    def is_production(self) -> bool:
        return self.ENV.strip().lower() == "production"


def load_settings() -> Settings:
    """Build Settings from the process environment (and .env)."""
    return Settings(
        # NODE_ENV kept so existing deploy scripts keep working
        ENV=os.getenv("ENV") or os.getenv("NODE_ENV") or "dev",
        PORT=_as_int("PORT", 5000),
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///data/task-manager.db").strip(),
        ACCESS_TOKEN_SECRET=(os.getenv("ACCESS_TOKEN_SECRET") or "dev-secret").strip(),
        TOKEN_TTL_HOURS=_as_int("TOKEN_TTL_HOURS", 10),
        CORS_ORIGINS=_parse_origins(os.getenv("CORS_ORIGINS", "http://localhost:5173")),
        TASK_UPDATE_POLICY=os.getenv("TASK_UPDATE_POLICY", "upsert"),
        TASK_UPDATE_RESETS_CREATED_AT=_as_bool("TASK_UPDATE_RESETS_CREATED_AT", False),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        LOG_FILE=os.getenv("LOG_FILE", "logs/app.log").strip(),
    )
