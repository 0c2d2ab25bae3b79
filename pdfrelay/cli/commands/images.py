"""CLI helpers for packing images into a PDF."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...images import pack_images
from ..files import read_input, write_output


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("images", help="Combine images into a PDF, one per page")
    parser.add_argument("output", help="Output PDF path")
    parser.add_argument("images", nargs="+", help="Image files, in page order")
    parser.set_defaults(handler=_handle)


def _handle(args):
    return write_output(args.output, pack_images([read_input(path) for path in args.images]))
