# ABOUTME: Command-line entry point printing current or forecast weather as wire JSON.
# ABOUTME: Wires Settings into a live WeatherClient and reports classified failures on stderr.

import argparse
import asyncio
import json
import logging
import sys

import httpx
from pydantic import ValidationError

from weatherapi_kit.config import Settings
from weatherapi_kit.deps import WeatherClient, create_http_client
from weatherapi_kit.errors import WeatherError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weatherapi-kit", description="Query WeatherAPI.com.")
    parser.add_argument("--api-key", help="WeatherAPI.com key (default: $WEATHERAPI_KEY)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log requests to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    current = sub.add_parser("current", help="current conditions")
    current.add_argument("query", help='location, e.g. "London", "48.85,2.35", "iata:DXB", "auto:ip"')

    forecast = sub.add_parser("forecast", help="current conditions plus a multi-day forecast")
    forecast.add_argument("query", help="location query, as for current")
    forecast.add_argument("--days", type=int, default=3, help="number of days, 1-10 (default: 3)")
    return parser


async def log_request(request: httpx.Request) -> None:
    # The query string carries the API key, so only the path is logged.
    logger.debug("GET %s", request.url.path)


async def log_response(response: httpx.Response) -> None:
    logger.debug("GET %s -> %d", response.request.url.path, response.status_code)


async def run(args: argparse.Namespace, settings: Settings, api_key: str) -> dict:
    async with create_http_client(settings.timeout) as http_client:
        http_client.event_hooks = {"request": [log_request], "response": [log_response]}
        client = WeatherClient.live(http_client, base_url=settings.base_url)
        if args.command == "current":
            result = await client.current(args.query, api_key)
        else:
            result = await client.forecast(args.query, api_key, args.days)
    return result.to_wire()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ValidationError as e:
        print(f"Invalid WEATHERAPI_* settings: {e}", file=sys.stderr)
        return 2
    api_key = args.api_key or settings.api_key
    if not api_key:
        print("No API key: pass --api-key or set WEATHERAPI_KEY", file=sys.stderr)
        return 2

    try:
        payload = asyncio.run(run(args, settings, api_key))
    except (WeatherError, httpx.HTTPError) as e:
        logger.debug("Request failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2))
    return 0
