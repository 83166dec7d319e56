from __future__ import annotations

from pathlib import Path

from .errors import ArtifactIOError


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise ArtifactIOError(f"failed to read {path}: {_reason(exc)}") from exc


def ensure_dir(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ArtifactIOError(f"failed to create directory {path}: {_reason(exc)}") from exc
    return path


def write_bytes(path: Path, data: bytes) -> Path:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise ArtifactIOError(f"failed to write {path}: {_reason(exc)}") from exc
    return path


def write_text(path: Path, content: str, encoding: str = "utf-8") -> Path:
    return write_bytes(path, content.encode(encoding))
