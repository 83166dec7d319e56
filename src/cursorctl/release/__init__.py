"""Container image release automation."""

from __future__ import annotations

from .deploy import DeployPlan, RepoCoordinate, build_plan, image_reference, parse_remote_url, resolve_token

__all__ = ["DeployPlan", "RepoCoordinate", "build_plan", "image_reference", "parse_remote_url", "resolve_token"]
