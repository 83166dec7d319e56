"""Build and push the container image to the GitHub Container Registry.

Token resolution order:

1. ``GITHUB_TOKEN`` (provided by GitHub Actions)
2. ``GHCR_TOKEN`` (local override)
3. ``gh auth token`` (credential helper fallback)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..core.context import RunContext
from ..core.env import getenv_nonempty
from ..core.errors import DeployError
from ..core.logging import log_event
from ..core.process import run_command

REGISTRY = "ghcr.io"
DEFAULT_TAG = "latest"
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GHCR_TOKEN")
ACTOR_ENV_VAR = "GITHUB_ACTOR"
TAG_ENV_VAR = "GHCR_TAG"

_GITHUB_REMOTE_RE = re.compile(r"github\.com[/:]([^/]+)/([^/]+?)(?:\.git)?$")


@dataclass(frozen=True)
class RepoCoordinate:
    owner: str
    repo: str


@dataclass(frozen=True)
class DeployStage:
    name: str
    command: tuple[str, ...]
    sends_token: bool = False


@dataclass(frozen=True)
class DeployPlan:
    image: str
    username: str
    stages: tuple[DeployStage, ...]

    def as_payload(self) -> dict[str, object]:
        return {
            "image": self.image,
            "username": self.username,
            "stages": [{"name": s.name, "command": list(s.command)} for s in self.stages],
        }


def resolve_token(ctx: RunContext) -> str:
    for name in TOKEN_ENV_VARS:
        value = getenv_nonempty(name)
        if value:
            return value
    result = run_command(["gh", "auth", "token"], cwd=ctx.cwd, ctx=ctx)
    token = result.stdout.strip()
    if result.code != 0 or not token:
        raise DeployError(
            "Failed to get GitHub token. Please set GHCR_TOKEN or run: gh auth login --scopes write:packages"
        )
    return token


def parse_remote_url(remote_url: str) -> RepoCoordinate:
    match = _GITHUB_REMOTE_RE.search(remote_url.strip())
    if not match:
        raise DeployError(f"Could not parse GitHub URL: {remote_url.strip()}")
    return RepoCoordinate(owner=match.group(1), repo=match.group(2))


def read_repo_coordinate(ctx: RunContext) -> RepoCoordinate:
    result = run_command(["git", "remote", "get-url", "origin"], cwd=ctx.cwd, ctx=ctx)
    if result.code != 0:
        raise DeployError("Failed to get repo info from git. Make sure you are in a git repository.")
    return parse_remote_url(result.stdout)


def image_reference(coord: RepoCoordinate, tag: str | None = None) -> str:
    resolved_tag = tag or getenv_nonempty(TAG_ENV_VAR) or DEFAULT_TAG
    return f"{REGISTRY}/{coord.owner.lower()}/{coord.repo.lower()}:{resolved_tag}"


def build_plan(coord: RepoCoordinate, tag: str | None = None, context_dir: str = ".") -> DeployPlan:
    image = image_reference(coord, tag)
    username = getenv_nonempty(ACTOR_ENV_VAR) or coord.owner
    return DeployPlan(
        image=image,
        username=username,
        stages=(
            DeployStage("build", ("docker", "build", "-t", image, context_dir)),
            DeployStage("login", ("docker", "login", REGISTRY, "-u", username, "--password-stdin"), sends_token=True),
            DeployStage("push", ("docker", "push", image)),
        ),
    )


def run_plan(ctx: RunContext, plan: DeployPlan, token: str) -> None:
    for stage in plan.stages:
        if not ctx.quiet:
            log_event(ctx, "info", "deploy", stage.name, image=plan.image)
        result = run_command(
            list(stage.command),
            cwd=ctx.cwd,
            input_text=(token + "\n") if stage.sends_token else None,
            capture=False,
            ctx=ctx,
        )
        if result.code != 0:
            raise DeployError(f"Docker {stage.name} failed")
