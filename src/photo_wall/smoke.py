"""Smoke check that polls a running photo wall like a display client."""

import argparse
import asyncio

from photo_wall.adapters.gallery_client import GalleryClient, HttpxGalleryClient
from photo_wall.domain.photos import SelectionResult


async def run_smoke_check(client: GalleryClient, offset: int = 0) -> list[str]:
    """Poll every selection endpoint once and describe the answers."""
    batch = await client.fetch_batch()
    rotation = await client.fetch_rotation(offset)
    shuffle = await client.fetch_shuffle()
    return [
        f"batch: index={batch.batch_index} {_describe(batch)}",
        f"rotation: offset={offset} {_describe(rotation)}",
        f"shuffle: {_describe(shuffle)}",
    ]


def _describe(result: SelectionResult) -> str:
    return f"photos={len(result.photos)} total={result.total}"


async def _main(base_url: str, offset: int) -> list[str]:
    client = HttpxGalleryClient.create(base_url)
    try:
        return await run_smoke_check(client, offset)
    finally:
        await client.close()


def main(argv: list[str] | None = None) -> None:
    """Print one line per endpoint for the photo wall at ``base_url``."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("base_url", nargs="?", default="http://localhost:8000")
    parser.add_argument("--offset", type=int, default=0)
    args = parser.parse_args(argv)
    for line in asyncio.run(_main(args.base_url, args.offset)):
        print(line)


if __name__ == "__main__":
    main()
