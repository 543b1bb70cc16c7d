"""Configuration management."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Service configuration, read from the environment (and `.env`)."""
    onesignal_app_id: Optional[str] = None
    onesignal_rest_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3000
    cache_window_sec: float = 30 * 60
    notify_cooldown_sec: float = 10 * 60
    scheduler_interval_sec: float = 5 * 60
    run_scheduler: bool = True  # only one instance of a deployment should run it
    emergency_override: bool = False
    identity_store_path: str = "notified_articles.json"
    feed_timeout_sec: float = 15.0
    image_timeout_sec: float = 6.0
    push_timeout_sec: float = 10.0
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    def missing_credentials(self) -> List[str]:
        missing = []
        if not self.onesignal_app_id:
            missing.append("ONESIGNAL_APP_ID")
        if not self.onesignal_rest_key:
            missing.append("ONESIGNAL_REST_KEY")
        return missing


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if not value or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", key, value, default)
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if not value or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", key, value, default)
        return default


def _env_list(key: str, default: List[str]) -> List[str]:
    value = os.getenv(key)
    if not value or not value.strip():
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


def load_settings() -> Settings:
    """
    Load settings from environment variables, after loading `.env` if present.

    Missing push credentials are not an error here; see `Settings.missing_credentials`.
    """
    load_dotenv()
    return Settings(
        onesignal_app_id=os.getenv("ONESIGNAL_APP_ID") or None,
        onesignal_rest_key=os.getenv("ONESIGNAL_REST_KEY") or None,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_int("PORT", 3000),
        cache_window_sec=_env_float("CACHE_WINDOW_SECONDS", 30 * 60),
        notify_cooldown_sec=_env_float("NOTIFY_COOLDOWN_SECONDS", 10 * 60),
        scheduler_interval_sec=_env_float("SCHEDULER_INTERVAL_SECONDS", 5 * 60),
        run_scheduler=_env_bool("RUN_SCHEDULER", True),
        emergency_override=_env_bool("EMERGENCY_OVERRIDE", False),
        identity_store_path=os.getenv("IDENTITY_STORE_PATH", "notified_articles.json"),
        feed_timeout_sec=_env_float("FEED_TIMEOUT_SECONDS", 15.0),
        image_timeout_sec=_env_float("IMAGE_TIMEOUT_SECONDS", 6.0),
        push_timeout_sec=_env_float("PUSH_TIMEOUT_SECONDS", 10.0),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("CORS_ORIGINS", ["*"]),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
