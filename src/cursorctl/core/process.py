from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .logging import log_event

if TYPE_CHECKING:
    from .context import RunContext

COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    code: int
    stdout: str
    stderr: str
    duration_ms: int

    @property
    def ok(self) -> bool:
        return self.code == 0

    @property
    def combined_output(self) -> str:
        return (self.stdout + self.stderr).strip()


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    input_text: str | None = None,
    capture: bool = True,
    ctx: RunContext | None = None,
) -> CommandResult:
    """Run ``cmd`` to completion and never raise on a non-zero exit.

    With ``capture=False`` the child inherits stdout/stderr and the result
    carries empty output. A missing executable maps to exit code 127.
    """
    started = time.monotonic()
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            input=input_text,
            text=True,
            capture_output=capture,
            check=False,
        )
        result = CommandResult(
            code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    except FileNotFoundError:
        result = CommandResult(
            code=COMMAND_NOT_FOUND,
            stdout="",
            stderr=f"command not found: {cmd[0]}",
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    if ctx and not ctx.quiet:
        log_event(
            ctx,
            "info",
            "process",
            "run-command",
            command=" ".join(cmd),
            cwd=str(cwd) if cwd else "",
            code=result.code,
            duration_ms=result.duration_ms,
        )
    return result
