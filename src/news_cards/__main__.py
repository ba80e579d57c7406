# ABOUTME: CLI entry point for the news cards feed service.
# ABOUTME: Provides subcommands: serve, fetch.

import argparse
import asyncio
import json
import logging
import sys

import structlog

from news_cards.config import get_settings


def configure_logging() -> None:
    """Configure structlog for console or JSON output."""
    settings = get_settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        )
    else:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
                structlog.processors.add_log_level,
                structlog.dev.ConsoleRenderer(colors=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        )


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the JSON API under uvicorn."""
    import uvicorn

    settings = get_settings()
    log = structlog.get_logger()

    host = args.host or settings.host
    port = args.port or settings.port
    log.info("cmd_serve_start", host=host, port=port)

    uvicorn.run("news_cards.web.app:app", host=host, port=port, log_level="warning")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Fetch the feed once and print the items as a JSON array.

    Logs go to stderr so stdout stays valid JSON.
    """
    from news_cards.feeds.fetcher import FeedFetcher, FetchError

    log = structlog.get_logger()
    log.info("cmd_fetch_start", url=args.url)

    async def run() -> list[dict[str, str]]:
        async with FeedFetcher() as fetcher:
            items = await fetcher.fetch_items(args.url)
        return [item.to_json_dict() for item in items]

    try:
        items = asyncio.run(run())
    except FetchError as e:
        log.error("cmd_fetch_failed", error=str(e), status_code=e.status_code)
        return 1

    print(json.dumps(items, indent=args.indent, ensure_ascii=False))
    log.info("cmd_fetch_complete", items=len(items))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="news_cards",
        description="News Cards - RSS feed served as JSON news cards",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the JSON API server",
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        help="Interface to bind. Defaults to the HOST setting.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Port to bind. Defaults to the PORT setting.",
    )

    # fetch command
    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch the feed once and print items as JSON",
    )
    fetch_parser.add_argument(
        "--url",
        type=str,
        help="Feed URL to fetch. Defaults to the FEED_URL setting.",
    )
    fetch_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )

    return parser


def main() -> int:
    """Main entry point."""
    configure_logging()

    parser = create_parser()
    args = parser.parse_args()

    commands = {
        "serve": cmd_serve,
        "fetch": cmd_fetch,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
