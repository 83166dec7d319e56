from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .clock import build_run_id
from .env import env_present, getenv, getenv_flag

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    cwd: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool | None = None,
        cwd: str | Path | None = None,
    ) -> "RunContext":
        resolved_run_id = run_id or getenv("CURSORCTL_RUN_ID") or build_run_id()
        if log_json is None:
            log_json = getenv_flag("CURSORCTL_LOG_JSON") or env_present("CI")
        return cls(
            run_id=resolved_run_id,
            cwd=Path(cwd) if cwd is not None else Path.cwd(),
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
        )
