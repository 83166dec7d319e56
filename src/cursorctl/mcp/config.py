from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ..contracts import validate
from ..core.errors import ConfigParseError, ConfigValidationError
from ..core.fs import read_bytes

CONFIG_SCHEMA = "cursorctl.mcp-config.v1"
SERVERS_FIELD = "mcpServers"

ServerDescriptor = Mapping[str, Any]


@dataclass(frozen=True)
class McpConfig:
    """A validated ``mcp.json`` together with the exact text it was parsed from."""

    source: Path
    raw_text: str
    servers: Mapping[str, ServerDescriptor]

    @property
    def server_names(self) -> list[str]:
        return list(self.servers)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"invalid JSON literal {token!r}")


def parse_mcp_text(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ConfigParseError(f"Failed to parse mcp.json: {exc}") from exc


def validate_mcp_payload(payload: Any) -> Mapping[str, ServerDescriptor]:
    try:
        validate(CONFIG_SCHEMA, payload)
    except ConfigValidationError as exc:
        raise ConfigValidationError(f"Invalid mcp.json: missing or invalid '{SERVERS_FIELD}' field") from exc
    return MappingProxyType(payload[SERVERS_FIELD])


def load_mcp_config(path: str | Path) -> McpConfig:
    source = Path(path)
    raw = read_bytes(source)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"Failed to parse mcp.json: {exc}") from exc
    servers = validate_mcp_payload(parse_mcp_text(text))
    return McpConfig(source=source, raw_text=text, servers=servers)
