from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _csv(name: str, default: str) -> list[str]:
    value = _env(name, default) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


def _log_level(name: str, default: str) -> str:
    value = (_env(name, default) or default).strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        return default
    return value


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str
    stripe_publishable_key: str
    stripe_api_version: str
    stripe_timeout_seconds: float
    checkout_currency: str
    enforce_catalog_pricing: bool
    cors_allow_origins: list[str]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        stripe_secret_key=_env("STRIPE_SECRET_KEY", ""),
        stripe_publishable_key=_env("STRIPE_PUBLISHABLE_KEY", ""),
        stripe_api_version=_env("STRIPE_API_VERSION", "2024-06-20"),
        stripe_timeout_seconds=float(_env("STRIPE_TIMEOUT_SECONDS", "10")),
        checkout_currency=_env("CHECKOUT_CURRENCY", "usd").lower(),
        enforce_catalog_pricing=_bool("ENFORCE_CATALOG_PRICING", True),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
        log_level=_log_level("LOG_LEVEL", "INFO"),
    )
