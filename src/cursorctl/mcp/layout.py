from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CURSOR_DIR = Path(".cursor")
CONFIG_SUBPATH = CURSOR_DIR / "mcp.json"
PROJECT_SUBPATH = CURSOR_DIR / "projects" / "workspace"
APPROVALS_SUBPATH = PROJECT_SUBPATH / "mcp-approvals.json"


@dataclass(frozen=True)
class OutputLayout:
    root: Path

    @property
    def cursor_dir(self) -> Path:
        return self.root / CURSOR_DIR

    @property
    def project_dir(self) -> Path:
        return self.root / PROJECT_SUBPATH

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_SUBPATH

    @property
    def approvals_path(self) -> Path:
        return self.root / APPROVALS_SUBPATH
