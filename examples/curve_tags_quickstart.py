#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from laakhay.tags import CollectingDiagnostics, HTTPClient, TagsAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the first few Curve contract tags")
    p.add_argument("chain_id", nargs="?", default="1")
    p.add_argument("limit", nargs="?", type=int, default=10)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    api_key = os.environ["SUBGRAPH_API_KEY"]
    diagnostics = CollectingDiagnostics()

    async with HTTPClient(timeout=60.0) as client:
        async with TagsAPI(client=client, diagnostics=diagnostics) as api:
            tags = await api.fetch_tags(args.chain_id, api_key)

    print("=" * 100)
    print(f"Tags     : {len(tags)}")
    print(f"Rejected : {len(diagnostics.of_type('record_rejected'))}")
    print("=" * 100)
    for tag in tags[: args.limit]:
        print(f"{tag.contract_address:60} | {tag.public_name_tag}")
    print("=" * 100)


if __name__ == "__main__":
    asyncio.run(main())
