"""CLI helpers for the info command."""

from __future__ import annotations

import json
from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import TransformContext
from ...tools.inspector import PdfInfo
from ..files import read_input


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("info", help="Print page and metadata information as JSON")
    parser.add_argument("input", help="Input PDF path")
    parser.set_defaults(tool_name="info", build_context=_build_context, write_result=_write_result)


def _build_context(args) -> TransformContext:
    return TransformContext(data=read_input(args.input))


def _write_result(args, info: PdfInfo) -> PdfInfo:
    payload = {key: value for key, value in info.as_dict().items() if value is not None}
    print(json.dumps(payload, indent=2))
    return info
