"""CLI helpers for the compress command."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import TransformContext
from ...tools.compressor import CompressionResult
from ..files import read_input, write_output


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("compress", help="Optimise the structure of a PDF")
    parser.add_argument("input", help="Input PDF path")
    parser.add_argument("output", help="Destination PDF path")
    parser.set_defaults(tool_name="compress", build_context=_build_context, write_result=_write_result)


def _build_context(args) -> TransformContext:
    return TransformContext(data=read_input(args.input))


def _write_result(args, result: CompressionResult) -> CompressionResult:
    write_output(args.output, result.data)
    print(f"{result.original_size} -> {result.compressed_size} bytes")
    return result
