"""Centralized environment variable helpers."""

from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


def getenv(name: str, default: str | None = None) -> str | None:
    return os.environ.get(name, default)


def getenv_nonempty(name: str) -> str | None:
    value = os.environ.get(name, "")
    return value if value.strip() else None


def getenv_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def env_present(name: str) -> bool:
    return name in os.environ
