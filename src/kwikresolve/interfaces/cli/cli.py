from __future__ import annotations

import argparse
import asyncio
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from kwikresolve.application.use_cases import ResolveLinkUseCase
from kwikresolve.domain.entities.kwik import ResolveOutcome
from kwikresolve.infrastructure.config import AppConfig, load_config
from kwikresolve.infrastructure.http_client import create_http_client
from kwikresolve.infrastructure.logging.setup import configure_logging
from kwikresolve.interfaces.app import create_app
from kwikresolve.interfaces.composition import build_resolver

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="kwikresolve")

    # Server options
    parser.add_argument(
        "--host",
        default=None,
        help="Bind host (overrides HOST env).",
    )
    parser.add_argument(
        "--port",
        default=None,
        type=int,
        help="Bind port (overrides PORT env).",
    )

    # Config wiring flags
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    # One-shot mode
    parser.add_argument(
        "--resolve",
        default=None,
        metavar="URL",
        help="Resolve a single embed link, print the direct URL and exit.",
    )

    return parser.parse_args(argv)


async def _resolve_once(config: AppConfig, url: str) -> ResolveOutcome:
    http_client = create_http_client(timeout_seconds=config.http_timeout_seconds)
    async with http_client:
        use_case = ResolveLinkUseCase(resolver=build_resolver(config, http_client))
        return await use_case.execute(url)


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Loads config exactly once, then either serves the API or resolves the
    link given via --resolve.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    config_path = Path(args.config) if args.config else None
    dotenv_path = Path(args.dotenv) if args.dotenv else None

    cli_overrides: dict[str, Any] = {}
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format

    config = load_config(
        config_path=config_path,
        dotenv_path=dotenv_path,
        cli_overrides=cli_overrides,
    )

    log_config = configure_logging(config)

    if args.resolve:
        outcome = asyncio.run(_resolve_once(config, args.resolve))
        if outcome.success:
            print(outcome.url)
            return 0
        print(outcome.error, file=sys.stderr)
        return 1

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", "8787"))

    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_config=log_config,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(start())
