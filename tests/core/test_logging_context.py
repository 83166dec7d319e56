from __future__ import annotations

import json
import re

import pytest
from cursorctl.core.context import RunContext
from cursorctl.core.logging import log_event


def test_log_event_text_line(capsys) -> None:
    ctx = RunContext.from_args(run_id="log-test", log_json=False)
    log_event(ctx, "info", "mcp", "loaded", servers=2, source="mcp.json")
    line = capsys.readouterr().err.strip()
    assert line.startswith("ts=")
    assert "level=info run_id=log-test component=mcp action=loaded" in line
    assert line.endswith("servers=2 source=mcp.json")


def test_log_event_json_line(capsys) -> None:
    ctx = RunContext.from_args(run_id="log-json", log_json=True)
    log_event(ctx, "warn", "deploy", "build", image="ghcr.io/o/r:latest")
    payload = json.loads(capsys.readouterr().err.strip())
    assert payload["level"] == "warn"
    assert payload["run_id"] == "log-json"
    assert payload["image"] == "ghcr.io/o/r:latest"
    assert payload["file"].endswith("test_logging_context.py")


def test_run_context_defaults() -> None:
    ctx = RunContext.from_args()
    assert re.fullmatch(r"cursorctl-\d{8}-\d{6}", ctx.run_id)
    assert ctx.output_format == "text"
    assert not ctx.as_json
    assert ctx.log_json is False


def test_run_context_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CURSORCTL_RUN_ID", "from-env")
    monkeypatch.setenv("CI", "true")
    ctx = RunContext.from_args(output_format="json")
    assert ctx.run_id == "from-env"
    assert ctx.log_json is True
    assert ctx.as_json


def test_run_context_explicit_flags_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CURSORCTL_RUN_ID", "from-env")
    monkeypatch.setenv("CURSORCTL_LOG_JSON", "1")
    ctx = RunContext.from_args(run_id="explicit", log_json=False)
    assert ctx.run_id == "explicit"
    assert ctx.log_json is False


def test_log_event_redacts_credential_fields(capsys) -> None:
    ctx = RunContext.from_args(run_id="log-redact", log_json=True)
    log_event(ctx, "info", "deploy", "login", token="ghp_secret", user="ci-bot")
    payload = json.loads(capsys.readouterr().err.strip())
    assert payload["token"] == "***"
    assert payload["user"] == "ci-bot"
    assert payload["line"] > 0


def test_log_event_text_redacts_password(capsys) -> None:
    ctx = RunContext.from_args(run_id="log-redact", log_json=False)
    log_event(ctx, "info", "deploy", "login", Password="hunter2")
    line = capsys.readouterr().err.strip()
    assert "Password=***" in line
    assert "hunter2" not in line
