from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_ARTIFACT, ERR_CONFIG, ERR_DEPLOY, ERR_VALIDATION


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigParseError(ScriptError):
    code: int = ERR_CONFIG
    kind: str = "parse_error"


@dataclass
class ConfigValidationError(ScriptError):
    code: int = ERR_VALIDATION
    kind: str = "validation_error"


@dataclass
class ArtifactIOError(ScriptError):
    code: int = ERR_ARTIFACT
    kind: str = "io_error"


@dataclass
class DeployError(ScriptError):
    code: int = ERR_DEPLOY
    kind: str = "deploy_error"
