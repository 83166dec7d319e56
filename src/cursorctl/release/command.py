from __future__ import annotations

import argparse
import sys

from ..cli.help_formatter import StrictArgumentParser, UsageHelpFormatter
from ..cli.output import build_base_payload, emit, render_error
from ..core.context import RunContext
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL, OK
from .deploy import build_plan, read_repo_coordinate, resolve_token, run_plan


def build_parser() -> argparse.ArgumentParser:
    p = StrictArgumentParser(
        prog="cursorctl-deploy",
        description="Build the container image and push it to ghcr.io.",
        formatter_class=UsageHelpFormatter,
    )
    p.add_argument("--tag", help="image tag (defaults to $GHCR_TAG, then latest)")
    p.add_argument("--context", default=".", help="docker build context directory")
    p.add_argument("--plan", action="store_true", help="print deploy stages without executing them")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--log-json", action="store_true", default=None, help="emit log events as JSON lines")
    p.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def _say(ctx: RunContext, message: str) -> None:
    if not ctx.quiet and not ctx.as_json:
        print(message)


def run_deploy_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    # The credential is checked before git or docker run; a plan needs none.
    token = None if ns.plan else resolve_token(ctx)
    plan = build_plan(read_repo_coordinate(ctx), ns.tag, ns.context)
    if token is None:
        if ctx.as_json:
            emit({**build_base_payload(ctx), "kind": "deploy-plan", **plan.as_payload()})
        else:
            print(f"image: {plan.image}")
            for stage in plan.stages:
                print(f"- {stage.name}: {' '.join(stage.command)}")
        return OK
    _say(ctx, f"Deploying {plan.image}")
    run_plan(ctx, plan, token)
    if ctx.as_json:
        emit({**build_base_payload(ctx), "kind": "deploy", **plan.as_payload()})
    else:
        _say(ctx, f"Successfully deployed {plan.image}")
    return OK


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    ctx = RunContext.from_args(
        run_id=ns.run_id,
        output_format="json" if ns.json else "text",
        quiet=ns.quiet,
        log_json=ns.log_json,
    )
    try:
        return run_deploy_command(ctx, ns)
    except ScriptError as exc:
        print(
            render_error(as_json=ctx.as_json, message=str(exc), code=exc.code, kind=exc.kind, prefix="Deployment failed"),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(as_json=ctx.as_json, message=str(exc), code=ERR_INTERNAL, kind="internal_error", prefix="Fatal error"),
            file=sys.stderr,
        )
        return ERR_INTERNAL
