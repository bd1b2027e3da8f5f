from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from vehicle_listings.infra.db.config import database_url


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class Settings:
    """Process settings, read once at start-up."""

    database_url: str
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)
    seed_file: Path | None = None  # None means the bundled fixture
    seed_on_startup: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        origins = os.getenv("CORS_ORIGINS", "*")
        seed_file = os.getenv("SEED_FILE")

        return cls(
            database_url=database_url(),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8080")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            seed_file=Path(seed_file) if seed_file else None,
            seed_on_startup=_env_flag("SEED_ON_STARTUP", True),
        )
