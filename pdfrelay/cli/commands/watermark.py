"""CLI helpers for the watermark command."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...core.utils import update_dict
from ...tools.common.interfaces import TransformContext
from ...tools.watermark import POSITIONS
from ..files import read_input, write_output


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("watermark", help="Stamp a text watermark on every page")
    parser.add_argument("input", help="Input PDF path")
    parser.add_argument("output", help="Destination PDF path")
    parser.add_argument("--text", required=True, help="Watermark text")
    parser.add_argument("--opacity", type=float, help="Opacity between 0 and 1 (default 0.3)")
    parser.add_argument("--font-size", type=float, help="Font size in points (default 48)")
    parser.add_argument("--rotation", type=float, help="Rotation in degrees (default -45)")
    parser.add_argument("--position", choices=POSITIONS, help="Placement (default center)")
    parser.set_defaults(tool_name="watermark", build_context=_build_context, write_result=_write_result)


def _build_context(args) -> TransformContext:
    options = update_dict(
        {},
        opacity=args.opacity,
        font_size=args.font_size,
        rotation=args.rotation,
        position=args.position,
    )
    return TransformContext(data=read_input(args.input), config={"text": args.text, "options": options})


def _write_result(args, data: bytes):
    return write_output(args.output, data)
