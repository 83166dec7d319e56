from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

SAMPLE_MCP = {
    "mcpServers": {
        "test-server": {"command": "node", "args": ["server.js"]},
        "another-server": {"command": "python", "args": ["-m", "server"]},
    }
}


def run_module(module: str, *args: str, cwd: Path | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    merged = os.environ.copy()
    merged["PYTHONPATH"] = str(ROOT / "src")
    merged.pop("CI", None)
    merged.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        cwd=(cwd or ROOT),
        env=merged,
        text=True,
        capture_output=True,
        check=False,
    )


def run_cursorctl(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    return run_module("cursorctl", *args, cwd=cwd)


def approvals_path(out_dir: Path) -> Path:
    return out_dir / ".cursor" / "projects" / "workspace" / "mcp-approvals.json"


def config_copy_path(out_dir: Path) -> Path:
    return out_dir / ".cursor" / "mcp.json"
