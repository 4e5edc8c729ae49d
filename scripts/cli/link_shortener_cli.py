#!/usr/bin/env python3
"""
Command-line interface for link shortener service.

Usage:
    python link_shortener_cli.py shorten <url> [--abbreviation ABBR]
    python link_shortener_cli.py resolve <abbreviation>
    python link_shortener_cli.py list
    python link_shortener_cli.py delete <abbreviation>
    python link_shortener_cli.py health
"""

import argparse
import asyncio
import json
import sys
import os
from typing import List, Optional

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from shortlinks.database import create_link_store
from shortlinks.database.cache import RedisCache
from shortlinks.database.models import Link
from shortlinks.service import LinkShortenerService
from shortlinks.results import Accepted, DeleteResult, RejectedAbbreviationTaken, ToUrl
from shortlinks.common import setup_logging


class LinkShortenerCLI:
    """Command-line interface for link shortener."""

    def __init__(self, db_url: str, redis_url: Optional[str] = None, verbose: bool = False):
        self.db_url = db_url
        self.redis_url = redis_url
        self.verbose = verbose
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.cache = None
        self.service = None

    async def initialize(self):
        """Initialize store and service."""
        store = create_link_store(self.db_url, logger=self.logger)

        if self.redis_url:
            self.cache = RedisCache(redis_url=self.redis_url, logger=self.logger)
            await self.cache.connect()

        self.service = LinkShortenerService(
            store=store,
            cache=self.cache,
            logger=self.logger,
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()

    def _fail(self, error: str, **extra) -> int:
        print(json.dumps({"success": False, "error": error, **extra}, indent=2), file=sys.stderr)
        return 1

    async def shorten(self, url: str, abbreviation: str = "") -> int:
        """Shorten a URL."""
        result = await self.service.register(Link(url=url, abbreviation=abbreviation or ""))

        if isinstance(result, Accepted):
            print(json.dumps({
                "success": True,
                **result.link.to_dict(),
                "message": f"Successfully shortened URL to: {result.link.abbreviation}",
            }, indent=2))
            return 0

        if isinstance(result, RejectedAbbreviationTaken):
            return self._fail(result.message)

        return self._fail("Invalid link", field_errors=result.field_errors)

    async def resolve(self, abbreviation: str) -> int:
        """Print the URL behind an abbreviation."""
        target = await self.service.resolve(abbreviation)

        if isinstance(target, ToUrl):
            print(json.dumps({
                "success": True,
                "abbreviation": abbreviation,
                "url": target.url,
            }, indent=2))
            return 0

        return self._fail(f"Abbreviation '{abbreviation}' not found")

    async def list_links(self) -> int:
        """List all links."""
        links = await self.service.list_links()

        print(json.dumps({
            "success": True,
            "count": len(links),
            "links": [link.to_dict() for link in links],
        }, indent=2))
        return 0

    async def delete(self, abbreviation: str) -> int:
        """Delete a link."""
        result = await self.service.delete(abbreviation)

        if result is DeleteResult.NOT_FOUND:
            return self._fail(f"Abbreviation '{abbreviation}' not found")

        print(json.dumps({"success": True, "deleted": abbreviation}, indent=2))
        return 0

    async def health(self) -> int:
        """Check service health."""
        health_status = await self.service.health_check()

        print(json.dumps({"success": True, "health": health_status}, indent=2))
        return 0 if health_status["overall"] else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Link Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Shorten with a chosen abbreviation
  %(prog)s shorten https://example.com/long/url --abbreviation mylink

  # Look up and delete
  %(prog)s resolve mylink
  %(prog)s delete mylink
        """
    )

    parser.add_argument(
        "--db-url",
        default=os.getenv("DATABASE_URL", "memory://"),
        help="Link store URL (default: from DATABASE_URL env or memory://)"
    )
    parser.add_argument(
        "--redis-url",
        default=os.getenv("REDIS_URL"),
        help="Redis connection URL (optional, default: from REDIS_URL env)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("--abbreviation", default="", help="Abbreviation to use")

    resolve_parser = subparsers.add_parser("resolve", help="Print the URL behind an abbreviation")
    resolve_parser.add_argument("abbreviation")

    subparsers.add_parser("list", help="List all links")

    delete_parser = subparsers.add_parser("delete", help="Delete a link")
    delete_parser.add_argument("abbreviation")

    subparsers.add_parser("health", help="Check service health")

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = LinkShortenerCLI(
        db_url=args.db_url,
        redis_url=args.redis_url,
        verbose=args.verbose,
    )

    try:
        await cli.initialize()

        if args.command == "shorten":
            return await cli.shorten(args.url, args.abbreviation)
        elif args.command == "resolve":
            return await cli.resolve(args.abbreviation)
        elif args.command == "list":
            return await cli.list_links()
        elif args.command == "delete":
            return await cli.delete(args.abbreviation)
        elif args.command == "health":
            return await cli.health()
        else:
            parser.print_help()
            return 1
    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
