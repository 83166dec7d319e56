from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL, OK
from ..core.logging import log_event
from ..mcp.materialize import generate_mcp_config
from .help_formatter import StrictArgumentParser, UsageHelpFormatter
from .output import build_base_payload, emit, render_error, render_generated

PROG = "docker-cursor-agent"

EXAMPLES = f"""\
Examples:
  {PROG} --file ./mcp.json --out ./build
  {PROG} -f ./mcp.json -o ./build
"""


def build_parser() -> argparse.ArgumentParser:
    p = StrictArgumentParser(
        prog=PROG,
        description="Generate .cursor/mcp.json and MCP server approvals for the cursor-agent container.",
        epilog=EXAMPLES,
        formatter_class=UsageHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"cursorctl {__version__}")
    p.add_argument("--file", "-f", required=True, metavar="MCP_JSON", help="path to input mcp.json file")
    p.add_argument(
        "--out",
        "-o",
        required=True,
        metavar="OUTPUT_DIR",
        help="output directory where the .cursor folder will be created",
    )
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--log-json", action="store_true", default=None, help="emit log events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="emit log events on stderr")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    ctx = RunContext.from_args(
        run_id=ns.run_id,
        output_format="json" if ns.json else "text",
        verbose=ns.verbose,
        quiet=ns.quiet,
        log_json=ns.log_json,
    )
    try:
        if ctx.verbose:
            log_event(ctx, "info", "cli", "start", file=ns.file, out=ns.out)
        artifacts = generate_mcp_config(ns.file, ns.out, ctx)
        if ctx.as_json:
            emit({**build_base_payload(ctx), **artifacts.as_payload()})
        elif not ctx.quiet:
            print(render_generated(ns.out, artifacts.config_path, artifacts.approvals_path))
        return OK
    except ScriptError as exc:
        print(render_error(as_json=ctx.as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(as_json=ctx.as_json, message=str(exc), code=ERR_INTERNAL, kind="internal_error", prefix="Fatal error"),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
