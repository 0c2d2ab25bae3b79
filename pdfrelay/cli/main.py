"""Command line interface for the pdfrelay toolkit."""

from __future__ import annotations

import argparse
from typing import Sequence

from ..core.utils import configure_logging
from ..exceptions import PdfRelayError
from ..tools import load_builtin_plugins
from ..tools.common.interfaces import TransformContext
from ..tools.common.pipeline import run_tool
from .commands import compress, encrypt, images, info, merge, rotate, serve, split, watermark

COMMAND_MODULES = [split, rotate, encrypt, watermark, compress, merge, info, images, serve]


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfrelay", description="pdfrelay CLI")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> object:
    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        handler = getattr(args, "handler", None)
        if handler is not None:
            return handler(args)
        context: TransformContext = args.build_context(args)
        result = run_tool(args.tool_name, context)
        return args.write_result(args, result)
    except (PdfRelayError, OSError) as exc:
        parser.exit(1, f"pdfrelay: error: {exc}\n")


if __name__ == "__main__":  # pragma: no cover
    main()
