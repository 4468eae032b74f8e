#!/usr/bin/env python3
"""Fetch contract tags for a chain and print them as JSON.

Usage:
    python scripts/fetch_tags.py --chain-id 1 --api-key <key>

    # API key from the environment
    SUBGRAPH_API_KEY=<key> python scripts/fetch_tags.py --chain-id 1 --output tags.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from laakhay.tags import CollectingDiagnostics, TagsError, return_tags, supported_chain_ids


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build contract tags from subgraph pools")
    p.add_argument("--chain-id", default="1", help=f"One of: {', '.join(supported_chain_ids())}")
    p.add_argument("--api-key", default=os.environ.get("SUBGRAPH_API_KEY"))
    p.add_argument("--max-pages", type=int, default=None, help="Abort after this many pages")
    p.add_argument("--output", type=str, help="Write tags to a JSON file instead of stdout")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args()


async def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not args.api_key:
        print("error: pass --api-key or set SUBGRAPH_API_KEY", file=sys.stderr)
        return 2

    diagnostics = CollectingDiagnostics()
    try:
        tags = await return_tags(
            args.chain_id, args.api_key, diagnostics=diagnostics, max_pages=args.max_pages
        )
    except TagsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    payload = json.dumps([tag.to_dict() for tag in tags], indent=2)
    if args.output:
        Path(args.output).write_text(payload)
    else:
        print(payload)

    rejected = diagnostics.of_type("record_rejected")
    for event in rejected:
        print(
            f"rejected {event.fields['token_id']}: symbol {event.fields['symbol']!r}",
            file=sys.stderr,
        )
    print(f"{len(tags)} tags, {len(rejected)} pools rejected", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
