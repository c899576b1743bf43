"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from domain.enums import Region


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="season-analyzer", description="League season match analyzer")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the WebSocket/HTTP server")
    serve.add_argument("--host", default=settings.SERVER_HOST)
    serve.add_argument("--port", type=int, default=settings.PORT)

    analyze = sub.add_parser("analyze", help="analyze one player's season in the terminal")
    analyze.add_argument("--puuid", required=True)
    analyze.add_argument("--region", required=True, type=Region.from_string, help="americas, europe, asia or sea")
    analyze.add_argument("--match-ids", nargs="+", help="skip listing and analyze these ids")
    analyze.add_argument("--json", action="store_true", help="print the summary as JSON")
    return parser


def _serve(host: str, port: int) -> int:
    import uvicorn
    from presentation.api import create_app

    uvicorn.run(create_app(), host=host, port=port, log_config=None)
    return 0


def _analyze(args: argparse.Namespace) -> int:
    from presentation.cli import AnalyzeCommand

    command = AnalyzeCommand(args.puuid, args.region, as_json=args.json)
    return asyncio.run(command.run(args.match_ids))


def main(argv: list[str]) -> int:
    args = _build_parser().parse_args(argv)
    bootstrap_logging(
        service=args.command,
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        console=args.command == "serve",
    )
    try:
        if args.command == "serve":
            return _serve(args.host, args.port)
        return _analyze(args)
    finally:
        shutdown_logging()


def _entrypoint() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(_entrypoint())
