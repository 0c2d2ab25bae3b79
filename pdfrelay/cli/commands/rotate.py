"""CLI helpers for the rotate command."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import TransformContext
from ...tools.rotator import VALID_ANGLES
from ..files import read_input, write_output


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("rotate", help="Rotate pages of a PDF")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("output", help="Destination PDF path")
    parser.add_argument("--angle", type=int, choices=VALID_ANGLES, required=True)
    parser.add_argument("--pages", default=None, help="Pages to rotate, e.g. '1-3,5' (default: all)")
    parser.set_defaults(tool_name="rotate", build_context=_build_context, write_result=_write_result)


def _build_context(args) -> TransformContext:
    return TransformContext(
        data=read_input(args.input),
        config={"angle": args.angle, "pages": args.pages},
    )


def _write_result(args, data: bytes):
    return write_output(args.output, data)
