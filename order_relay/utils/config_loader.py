"""
Configuration loader for the order relay (Telegram, formatting, server limits).

Non-secret settings live in config/notifier_config.yml. Secrets and the
runtime mode are read from the environment on every request so a missing
credential is reported per request instead of crashing the process.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "notifier_config.yml"


class TelegramConfig(BaseModel):
    api_base_url: str = "https://api.telegram.org"
    parse_mode: str = "Markdown"
    timeout_seconds: float = Field(default=10.0, gt=0, le=120)
    confirmation_timeout_seconds: float = Field(default=10.0, gt=0, le=120)


class FormattingConfig(BaseModel):
    store_name: str = "Capslank"
    locale: Literal["ar-EG", "en-US"] = "ar-EG"
    timezone: str = "Africa/Cairo"


class ServerConfig(BaseModel):
    max_body_bytes: int = Field(default=1024 * 1024, ge=1)
    allowed_origins: List[str] = Field(default_factory=lambda: ["*"])


class NotifierConfig(BaseModel):
    telegram: TelegramConfig = Field(default_factory=TelegramConfig)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


class NotifierSettings(BaseModel):
    """Per-request view of credentials plus the static configuration."""

    bot_token: str = ""
    chat_id: str = ""
    environment: str = "production"
    config: NotifierConfig = Field(default_factory=NotifierConfig)

    @property
    def has_credentials(self) -> bool:
        return bool(self.bot_token) and bool(self.chat_id)

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"


def load_notifier_config(config_path: Optional[Path] = None) -> NotifierConfig:
    """
    Load and validate the notifier configuration from YAML.

    Args:
        config_path: Path to config file. Defaults to config/notifier_config.yml;
            when the default file is absent the model defaults are used.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.exists():
            logger.warning("Notifier config not found at %s; using defaults", config_path)
            return NotifierConfig()

    if not config_path.exists():
        raise FileNotFoundError(f"Notifier config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = NotifierConfig(**data)
        logger.info("Successfully loaded notifier config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Notifier config validation failed: %s", e)
        raise


@lru_cache(maxsize=1)
def _cached_notifier_config() -> NotifierConfig:
    return load_notifier_config()


def get_notifier_settings() -> NotifierSettings:
    """Resolve credentials from the environment for the current request."""
    return NotifierSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", "").strip(),
        chat_id=os.getenv("TELEGRAM_CHAT_ID", "").strip(),
        environment=os.getenv("APP_ENV", "production"),
        config=_cached_notifier_config(),
    )
