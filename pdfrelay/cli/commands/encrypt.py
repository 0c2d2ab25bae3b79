"""CLI helpers for PDF encryption and decryption."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.interfaces import TransformContext
from ..files import read_input, write_output


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("encrypt", help="Password-protect a PDF")
    parser.add_argument("input", help="Input PDF path")
    parser.add_argument("output", help="Destination PDF path")
    parser.add_argument("--password", required=True, help="User password")
    parser.add_argument("--owner-password", help="Owner password (defaults to the user password)")
    parser.add_argument("--no-print", action="store_true", help="Disallow printing")
    parser.add_argument("--no-copy", action="store_true", help="Disallow copying text and images")
    parser.add_argument("--no-modify", action="store_true", help="Disallow modifying the document")
    parser.set_defaults(tool_name="encrypt", build_context=_build_encrypt_context, write_result=_write_result)

    parser = subparsers.add_parser("decrypt", help="Remove password protection from a PDF")
    parser.add_argument("input", help="Input PDF path")
    parser.add_argument("output", help="Destination PDF path")
    parser.add_argument("--password", required=True, help="Password that opens the document")
    parser.set_defaults(tool_name="decrypt", build_context=_build_decrypt_context, write_result=_write_result)


def _build_encrypt_context(args) -> TransformContext:
    return TransformContext(
        data=read_input(args.input),
        config={
            "user_password": args.password,
            "owner_password": args.owner_password,
            "permissions": {
                "print": not args.no_print,
                "copy": not args.no_copy,
                "modify": not args.no_modify,
            },
        },
    )


def _build_decrypt_context(args) -> TransformContext:
    return TransformContext(data=read_input(args.input), config={"password": args.password})


def _write_result(args, data: bytes):
    return write_output(args.output, data)
