"""CLI helper running the HTTP API under uvicorn."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("serve", help="Run the conversion API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.set_defaults(handler=_handle)


def _handle(args) -> None:
    import uvicorn

    uvicorn.run("apps.backend.app.main:app", host=args.host, port=args.port, reload=args.reload)
