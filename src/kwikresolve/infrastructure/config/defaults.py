"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

from kwikresolve.infrastructure.kwik.constants import (
    DEFAULT_ORIGIN,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "kwikresolve",
    "environment": "dev",
    "http": {
        "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
        "user_agent": DEFAULT_USER_AGENT,
    },
    "kwik": {
        "origin": DEFAULT_ORIGIN,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
