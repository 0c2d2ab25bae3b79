"""CLI helpers for merging PDFs."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path

from ...tools.common.interfaces import TransformContext
from ..files import read_input, write_output


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("merge", help="Merge multiple PDFs into one")
    parser.add_argument("output", help="Output PDF path")
    parser.add_argument("inputs", nargs="+", help="Input PDF files, in order")
    parser.add_argument(
        "--bookmarks",
        action="store_true",
        help="Add an outline entry at the start of each input, titled by file name",
    )
    parser.set_defaults(tool_name="merge", build_context=_build_context, write_result=_write_result)


def _build_context(args) -> TransformContext:
    bookmarks = [Path(path).stem for path in args.inputs] if args.bookmarks else None
    return TransformContext(
        documents=[read_input(path) for path in args.inputs],
        config={"bookmarks": bookmarks},
    )


def _write_result(args, data: bytes):
    return write_output(args.output, data)
