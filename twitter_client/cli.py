"""Command-line interface for signed Twitter API calls.

Credentials are read from the environment (see ``TwitterConfig.from_env``):
    twitter-client search "python asyncio" --count 10
    twitter-client tweet "Hello from the command line"
    twitter-client get https://api.twitter.com/1.1/account/verify_credentials.json
    twitter-client post https://api.twitter.com/1.1/favorites/create.json --param id=20
"""

import argparse
import asyncio
import json
import sys

from common.config import TwitterConfig, setup_logging
from twitter_client.client import TwitterClient
from twitter_client.errors import Failure, TwitterResult


def _parse_param(value: str) -> tuple[str, str]:
    """Parse a ``KEY=VALUE`` command-line parameter."""
    name, sep, param_value = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return name, param_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twitter-client",
        description="Send OAuth 1.0a signed requests to the Twitter REST API.",
        epilog=(
            "Reads credentials from environment variables: TWITTER_CONSUMER_KEY, TWITTER_CONSUMER_SECRET, "
            "TWITTER_ACCESS_TOKEN, TWITTER_ACCESS_TOKEN_SECRET"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search recent tweets")
    search.add_argument("query", help="Search query")
    search.add_argument("--count", type=int, help="Number of tweets to return")

    tweet = subparsers.add_parser("tweet", help="Post a status update")
    tweet.add_argument("text", help="Status text")

    for name, help_text in (("get", "Send a signed GET request"), ("post", "Send a signed POST request")):
        raw = subparsers.add_parser(name, help=help_text)
        raw.add_argument("url", help="Absolute API URL")
        raw.add_argument(
            "--param",
            dest="params",
            action="append",
            default=[],
            type=_parse_param,
            metavar="KEY=VALUE",
            help="Request parameter (repeatable)",
        )

    return parser


async def run(args: argparse.Namespace, config: TwitterConfig) -> TwitterResult:
    """Execute the requested command and return its result."""
    async with TwitterClient.from_config(config) as client:
        if args.command == "search":
            extra = {"count": args.count} if args.count is not None else {}
            return await client.search_tweets(args.query, **extra)
        if args.command == "tweet":
            return await client.update_status(args.text)
        if args.command == "get":
            return await client.get(args.url, args.params)
        return await client.post(args.url, args.params)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the twitter-client CLI tool."""
    args = build_parser().parse_args(argv)

    try:
        config = TwitterConfig.from_env()
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    setup_logging("twitter-client", level=config.log_level)
    result = asyncio.run(run(args, config))

    if isinstance(result, Failure):
        print(f"❌ {result.error.kind} error: {result.error}", file=sys.stderr)
        return 1

    print(json.dumps(result.data, indent=2, ensure_ascii=False))
    if not result.ok:
        print(f"❌ Twitter API returned HTTP {result.status_code}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
