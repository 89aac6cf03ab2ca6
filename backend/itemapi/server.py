#!/usr/bin/env python3
import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import uvicorn
from dotenv import load_dotenv

from itemapi.config import (
    DEFAULT_ENV_FILE,
    LOG_FORMAT,
    LOG_LEVELS,
    resolve_host,
    resolve_log_level,
    resolve_port,
)

logger = logging.getLogger("itemapi.server")


@dataclass
class ServerOptions:
    host: str
    port: int
    log_level: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Item API HTTP server")
    parser.add_argument("--host", type=str, default=None, help="Bind address (env ITEMAPI_HOST)")
    parser.add_argument("--port", type=str, default=None, help="Listen port (env PORT, default 8080)")
    parser.add_argument(
        "--env-file",
        type=str,
        default=DEFAULT_ENV_FILE,
        help="Dotenv config file; real environment variables take precedence",
    )
    parser.add_argument("--log-level", type=str, default=None, choices=LOG_LEVELS)
    return parser


def parse_options(args: argparse.Namespace) -> ServerOptions:
    # override=False: the process environment wins over the file.
    load_dotenv(args.env_file, override=False)
    return ServerOptions(
        host=resolve_host(args.host),
        port=resolve_port(args.port),
        log_level=resolve_log_level(args.log_level),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        options = parse_options(args)
    except ValueError as err:
        parser.error(str(err))

    configure_logging(options.log_level)
    logger.info("starting Item API on %s:%s", options.host, options.port)
    uvicorn.run(
        "itemapi.main:app",
        host=options.host,
        port=options.port,
        log_level=options.log_level,
    )


if __name__ == "__main__":
    main()
