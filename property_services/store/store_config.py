"""
Store configuration loader.

This module centralizes reading the remote store settings from
`config/store.yml` and the environment. The CLIs, the catalog and the tests
should all go through these helpers so connection handling stays consistent.

Environment overrides (applied after the YAML file):
    STORE_ADAPTER: "firebase" or "memory"
    FIREBASE_DATABASE_URL: Realtime Database URL
    FIREBASE_AUTH_TOKEN: Credential passed to the database
    PORTFOLIO_ENV: "production" turns the development fallback off
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .adapters import FirebaseStore, InMemoryStore
from .base import RemoteStore

logger = logging.getLogger(__name__)

VALID_ADAPTERS = {"firebase", "memory"}


@dataclass
class StoreConfig:
    """Connection settings for the remote store."""

    adapter: str = "firebase"
    database_url: str | None = None
    auth_token: str | None = None
    root: str = "properties"
    timeout_seconds: float = 10.0
    max_retries: int = 3
    use_development_fallback: bool = False


def _project_root() -> Path:
    """Return the project root path based on this file's location."""
    return Path(__file__).resolve().parent.parent.parent


def _parse_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "yes", "1", "on"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "no", "0", "off"}:
        return False
    raise ValueError(f"`{field_name}` must be a boolean, got {value!r}")


def load_store_config(config_path: str | None = None) -> StoreConfig:
    """
    Load store configuration from YAML and environment variables.

    Args:
        config_path: Optional override for the config file path. When omitted,
            the function reads `config/store.yml` relative to the project root
            and falls back to defaults if that file does not exist.

    Returns:
        Populated `StoreConfig`.

    Raises:
        FileNotFoundError: If an explicit `config_path` does not exist.
        ValueError: If the YAML cannot be parsed or has invalid values.
    """
    path = Path(config_path) if config_path else _project_root() / "config" / "store.yml"
    raw_config: Mapping[str, Any] | None = None

    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw_config = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            logger.error("Failed to parse store configuration: %s", exc)
            raise ValueError(f"Invalid YAML in store configuration: {exc}") from exc
    elif config_path:
        logger.error("Store configuration file not found: %s", path)
        raise FileNotFoundError(f"Store configuration file not found: {path}")
    else:
        logger.warning("No store configuration at %s, using defaults", path)

    section: Mapping[str, Any] = {}
    if raw_config:
        section = raw_config.get("store", {})
        if not isinstance(section, Mapping):
            raise ValueError("`store` section is invalid in store configuration")

    config = StoreConfig(
        adapter=str(section.get("adapter", "firebase")),
        database_url=section.get("database_url"),
        auth_token=section.get("auth_token"),
        root=str(section.get("root", "properties")),
        timeout_seconds=float(section.get("timeout_seconds", 10.0)),
        max_retries=int(section.get("max_retries", 3)),
        use_development_fallback=_parse_bool(
            section.get("use_development_fallback", False), "use_development_fallback"
        ),
    )

    # Environment wins over the file.
    config.adapter = os.getenv("STORE_ADAPTER", config.adapter).strip().lower()
    config.database_url = os.getenv("FIREBASE_DATABASE_URL", config.database_url)
    config.auth_token = os.getenv("FIREBASE_AUTH_TOKEN", config.auth_token)
    if os.getenv("PORTFOLIO_ENV", "").strip().lower() == "production":
        config.use_development_fallback = False

    if config.adapter not in VALID_ADAPTERS:
        raise ValueError(
            f"Unknown store adapter '{config.adapter}', expected one of {sorted(VALID_ADAPTERS)}"
        )
    if not config.root.strip("/"):
        raise ValueError("`root` must be a non-empty path")
    if config.max_retries < 0:
        raise ValueError(f"`max_retries` must be zero or more, got {config.max_retries}")

    logger.info(
        "Loaded store configuration",
        extra={
            "adapter": config.adapter,
            "root": config.root,
            "use_development_fallback": config.use_development_fallback,
        },
    )
    return config


def create_store(config: StoreConfig) -> RemoteStore:
    """Build the store backend named by the configuration."""
    if config.adapter == "memory":
        return InMemoryStore()

    return FirebaseStore(
        database_url=config.database_url,
        auth_token=config.auth_token,
        timeout=config.timeout_seconds,
        max_retries=config.max_retries,
    )


__all__ = ["StoreConfig", "load_store_config", "create_store"]
