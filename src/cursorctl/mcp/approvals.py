"""Approval token derivation for MCP servers.

A token is ``<server-name>-<fingerprint>`` where the fingerprint is the first
16 hex characters of SHA-256 over the compact JSON of
``{"path": APPROVAL_CONTEXT_PATH, "server": <descriptor>}``.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any

from ..core.errors import ConfigValidationError
from ..core.serialize import canonical_json

# Working directory of cursor-agent inside the container. It is part of every
# fingerprint: changing it invalidates all previously generated approvals.
APPROVAL_CONTEXT_PATH = "/workspace"
FINGERPRINT_LENGTH = 16


def approval_record(descriptor: Any) -> dict[str, Any]:
    return {"path": APPROVAL_CONTEXT_PATH, "server": descriptor}


def fingerprint(descriptor: Any) -> str:
    payload = canonical_json(approval_record(descriptor)).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()[:FINGERPRINT_LENGTH]


def approval_token(name: str, descriptor: Any) -> str:
    return f"{name}-{fingerprint(descriptor)}"


def derive_approvals(servers: Mapping[str, Any]) -> list[str]:
    approvals: list[str] = []
    for name, descriptor in servers.items():
        try:
            approvals.append(approval_token(name, descriptor))
        except RecursionError as exc:
            raise ConfigValidationError(f"Invalid mcp.json: server '{name}' is nested too deeply to fingerprint") from exc
    return approvals
