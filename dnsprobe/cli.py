"""Command line entry point: query a domain's A records and print the reply."""

from __future__ import annotations

import argparse
import logging
import sys

from dnsprobe.client import Client, QueryError
from dnsprobe.config import default_config
from dnsprobe.types import QType

logger = logging.getLogger("dnsprobe")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dnsprobe",
        description="Send an A query for a domain and print the response.",
    )
    parser.add_argument("domain", nargs="?", help="domain name to query")
    parser.add_argument(
        "-s",
        "--server",
        help="name server as host:port (default: a root server)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    args = _parser().parse_args(argv)

    if not args.domain:
        logger.error("Usage: dnsprobe <domain>")
        return 1

    config = default_config()
    if args.server is not None:
        config.name_server = args.server

    try:
        client = Client(config, logger)
    except ValueError as exc:
        logger.error("Failed to create DNS client: %s", exc)
        return 1

    try:
        result = client.query(args.domain, QType.A)
    except (ValueError, QueryError) as exc:
        logger.error("DNS query failed: %s", exc)
        return 1

    print("DNS Query Result:\n", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())