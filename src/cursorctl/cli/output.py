"""CLI payload output helpers."""

from __future__ import annotations

from pathlib import Path

from ..core.context import RunContext
from ..core.serialize import dumps_json

DEFAULT_IMAGE = "ghcr.io/circlesac/docker-cursor-agent:latest"
CONTAINER_CURSOR_DIR = "/root/.cursor"


def emit(payload: dict[str, object]) -> None:
    print(dumps_json(payload))


def build_base_payload(ctx: RunContext, status: str = "ok") -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "cursorctl",
        "status": status,
        "run_id": ctx.run_id,
    }


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error", prefix: str = "Error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": "cursorctl.error.v1",
                "schema_version": 1,
                "tool": "cursorctl",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            }
        )
    return f"{prefix}: {message}"


def _mount_source(output_dir: str) -> str:
    cursor_dir = Path(output_dir) / ".cursor"
    if cursor_dir.is_absolute():
        return str(cursor_dir)
    return f"$(pwd)/{cursor_dir.as_posix()}"


def render_generated(output_dir: str, config_path: Path, approvals_path: Path) -> str:
    lines = [
        "✓ Generated MCP configuration files:",
        f"  {config_path}",
        f"  {approvals_path}",
        "",
        "To use with Docker:",
        "  docker run --rm \\",
        "    -e CURSOR_API_KEY=your_key \\",
        f"    -v {_mount_source(output_dir)}:{CONTAINER_CURSOR_DIR} \\",
        f"    {DEFAULT_IMAGE} \\",
        '    --print --output-format stream-json "your prompt"',
    ]
    return "\n".join(lines)
