# app/config.py
"""Runtime settings for the catalog service.

Everything comes from environment variables so the same image runs locally,
in docker-compose and in tests without code changes.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from rich.logging import RichHandler

ID_POLICIES = ("max", "last")


class ConfigurationError(Exception):
    """Raised when an environment variable holds an unusable value."""
    pass


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    images_dir: Path = field(default_factory=lambda: _project_root() / "public" / "images")
    id_policy: str = "max"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"


def load_settings() -> Settings:
    id_policy = os.getenv("STORE_ID_POLICY", "max").strip().lower()
    if id_policy not in ID_POLICIES:
        raise ConfigurationError(
            f"STORE_ID_POLICY must be one of {', '.join(ID_POLICIES)}, got '{id_policy}'"
        )

    raw_port = os.getenv("STORE_PORT", "3000")
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigurationError(f"STORE_PORT must be an integer, got '{raw_port}'")

    images_dir = os.getenv("STORE_IMAGES_DIR")
    return Settings(
        host=os.getenv("STORE_HOST", "0.0.0.0"),
        port=port,
        images_dir=Path(images_dir) if images_dir else _project_root() / "public" / "images",
        id_policy=id_policy,
        cors_origins=_split_origins(os.getenv("STORE_CORS_ORIGINS", "*")) or ["*"],
        log_level=os.getenv("STORE_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    # Route the app and uvicorn loggers through rich so console output stays uniform.
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True
