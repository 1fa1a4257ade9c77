"""Command-line entry point: serve the score API or print the leaderboard."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys

from rainbow_snake.config import AppConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rainbow-snake",
        description="Rainbow Snake score service and tools.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    serve_p = sub.add_parser("serve", help="Run the score API.")
    serve_p.add_argument("--host", type=str, default=None)
    serve_p.add_argument("--port", type=int, default=None)

    board_p = sub.add_parser(
        "leaderboard", help="Print the top scores from a running server.",
    )
    board_p.add_argument("--server-url", type=str, default=None)
    board_p.add_argument("--limit", type=int, default=None)

    sub.add_parser("dump-config", help="Print the effective config as JSON.")
    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = AppConfig.load(args.config) if args.config else AppConfig()

    server_overrides = {
        name: getattr(args, name)
        for name in ("host", "port")
        if getattr(args, name, None) is not None
    }
    game_overrides: dict = {}
    if getattr(args, "server_url", None) is not None:
        game_overrides["server_url"] = args.server_url
    if getattr(args, "limit", None) is not None:
        game_overrides["leaderboard_size"] = args.limit

    return AppConfig(
        game=dataclasses.replace(config.game, **game_overrides),
        server=dataclasses.replace(config.server, **server_overrides),
    )


def _run_serve(config: AppConfig) -> int:
    import uvicorn

    from rainbow_snake.server.app import create_app

    uvicorn.run(
        create_app(),
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level,
    )
    return 0


async def _fetch_leaderboard(config: AppConfig) -> int:
    from rainbow_snake.client import ScoreClient
    from rainbow_snake.errors import TransportError

    async with ScoreClient(
        base_url=config.game.server_url, timeout=config.game.request_timeout,
    ) as client:
        try:
            entries = await client.fetch_leaderboard(
                limit=config.game.leaderboard_size,
            )
        except TransportError as exc:
            logger.error("Could not fetch leaderboard: %s", exc)
            return 1

    if not entries:
        print("No scores yet.")
    for rank, entry in enumerate(entries, start=1):
        print(f"{rank}. {entry.nickname}: {entry.score}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    config = _load_config(args)
    if args.command == "serve":
        return _run_serve(config)
    if args.command == "leaderboard":
        return asyncio.run(_fetch_leaderboard(config))
    if args.command == "dump-config":
        print(json.dumps(config.to_dict(), indent=2))
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
