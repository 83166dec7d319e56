"""MCP configuration loading, approval derivation and artifact materialization."""

from __future__ import annotations

from .approvals import APPROVAL_CONTEXT_PATH, approval_token, derive_approvals
from .config import McpConfig, load_mcp_config
from .layout import APPROVALS_SUBPATH, CONFIG_SUBPATH, OutputLayout
from .materialize import GeneratedArtifacts, generate_mcp_config

__all__ = [
    "APPROVALS_SUBPATH",
    "APPROVAL_CONTEXT_PATH",
    "CONFIG_SUBPATH",
    "GeneratedArtifacts",
    "McpConfig",
    "OutputLayout",
    "approval_token",
    "derive_approvals",
    "generate_mcp_config",
    "load_mcp_config",
]
