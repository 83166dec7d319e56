from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..contracts import validate
from ..core.context import RunContext
from ..core.fs import ensure_dir, write_bytes, write_text
from ..core.logging import log_event
from ..core.serialize import dumps_pretty_array
from .approvals import derive_approvals
from .config import McpConfig, load_mcp_config
from .layout import OutputLayout

APPROVALS_SCHEMA = "cursorctl.mcp-approvals.v1"


@dataclass(frozen=True)
class GeneratedArtifacts:
    config_path: Path
    approvals_path: Path
    approvals: tuple[str, ...]

    def as_payload(self) -> dict[str, object]:
        return {
            "config_path": str(self.config_path),
            "approvals_path": str(self.approvals_path),
            "approvals": list(self.approvals),
        }


def ensure_output_dirs(output_root: str | Path) -> OutputLayout:
    layout = OutputLayout(Path(output_root))
    ensure_dir(layout.project_dir)
    return layout


def write_config_copy(config: McpConfig, output_root: str | Path) -> Path:
    layout = OutputLayout(Path(output_root))
    ensure_dir(layout.cursor_dir)
    return write_bytes(layout.config_path, config.raw_text.encode("utf-8"))


def write_approvals(approvals: list[str], output_root: str | Path) -> Path:
    validate(APPROVALS_SCHEMA, approvals)
    layout = ensure_output_dirs(output_root)
    return write_text(layout.approvals_path, dumps_pretty_array(approvals))


def generate_mcp_config(input_file: str | Path, output_dir: str | Path, ctx: RunContext | None = None) -> GeneratedArtifacts:
    """Copy ``input_file`` under ``output_dir/.cursor`` and write its approvals list.

    Nothing is written when the input fails to load or its approvals cannot be
    derived, and the approvals file is not written when the copy fails.
    """
    config = load_mcp_config(input_file)
    if ctx and ctx.verbose:
        log_event(ctx, "info", "mcp", "loaded", source=str(config.source), servers=len(config.servers))
    approvals = derive_approvals(config.servers)
    ensure_output_dirs(output_dir)
    config_path = write_config_copy(config, output_dir)
    approvals_path = write_approvals(approvals, output_dir)
    if ctx and ctx.verbose:
        log_event(
            ctx,
            "info",
            "mcp",
            "generated",
            config_path=str(config_path),
            approvals_path=str(approvals_path),
            approvals=len(approvals),
        )
    return GeneratedArtifacts(config_path=config_path, approvals_path=approvals_path, approvals=tuple(approvals))
