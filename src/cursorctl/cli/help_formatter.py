from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from ..core.exit_codes import ERR_USAGE


class UsageHelpFormatter(argparse.RawDescriptionHelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):  # noqa: ANN001, ANN201
        return super().add_usage(usage, actions, groups, prefix if prefix is not None else "Usage: ")


class StrictArgumentParser(argparse.ArgumentParser):
    """Argument parser that rejects flag prefixes, reports usage errors as ``Error: ...`` and exits 1."""

    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)

    def error(self, message: str) -> NoReturn:
        sys.stderr.write(f"Error: {message}\n")
        self.print_usage(sys.stderr)
        raise SystemExit(ERR_USAGE)
