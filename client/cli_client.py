"""Command-line client for manual testing of the CommandPal service."""

from __future__ import annotations

import argparse
import asyncio
import logging
import time
from typing import Any

import httpx

DEFAULT_URL = "http://127.0.0.1:8000"

logger = logging.getLogger("cli_client")


class ClientError(Exception):
    """Raised when the service answers with an error body."""


async def _post(client: httpx.AsyncClient, path: str, payload: dict[str, str]) -> dict[str, Any]:
    response = await client.post(path, json=payload)
    try:
        data = response.json()
    except ValueError as exc:
        raise ClientError(f"{path} returned non-JSON body ({response.status_code})") from exc

    if response.is_error:
        raise ClientError(f"{path} failed ({response.status_code}): {data.get('error')}")
    return data


async def run_client(
    url: str,
    query: str,
    explain: bool,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, str]:
    """Generate a command for ``query`` and, if asked, explain it afterwards."""

    start = time.perf_counter()
    result: dict[str, str] = {}

    async with httpx.AsyncClient(base_url=url, timeout=timeout, transport=transport) as client:
        generated = await _post(client, "/generate-command", {"query": query})
        result["command"] = generated["command"]
        logger.info("Generated command in %.2fs", time.perf_counter() - start)

        # The explainer only ever sees a command the generator produced.
        if explain:
            explained = await _post(client, "/explain-command", {"command": result["command"]})
            result["explanation"] = explained["explanation"]
            logger.info("Explained command in %.2fs", time.perf_counter() - start)

    return result


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test client for the CommandPal service.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Service base URL (default: %(default)s)")
    parser.add_argument("--query", required=True, help="Natural-language instruction.")
    parser.add_argument("--explain", action="store_true", help="Also explain the generated command.")
    parser.add_argument(
        "--timeout", type=float, default=30.0, help="Seconds to wait for each request."
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    try:
        result = asyncio.run(run_client(args.url, args.query, args.explain, args.timeout))
    except (ClientError, httpx.HTTPError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:  # pragma: no cover - manual usage only
        return

    print(result["command"])
    if "explanation" in result:
        print()
        print(result["explanation"])


if __name__ == "__main__":  # pragma: no cover
    main()
