"""CLI helpers for the split command."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path

from ...tools.common.interfaces import TransformContext
from ...tools.splitter import build_part_filename
from ..files import read_input, write_output


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("split", help="Split a PDF into one file per page range")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("output", help="Output directory for split parts")
    parser.add_argument(
        "--ranges",
        dest="ranges",
        action="append",
        required=True,
        help="Page range expression such as '1-3,5'; repeat for several parts",
    )
    parser.set_defaults(tool_name="split", build_context=_build_context, write_result=_write_result)


def _build_context(args) -> TransformContext:
    return TransformContext(data=read_input(args.input), config={"page_ranges": args.ranges})


def _write_result(args, parts: list[bytes]) -> list[Path]:
    output_dir = Path(args.output)
    return [
        write_output(output_dir / build_part_filename(index), data)
        for index, data in enumerate(parts, start=1)
    ]
