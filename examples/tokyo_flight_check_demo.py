#!/usr/bin/env python3
"""
Tokyo Flight Check Demo -- chuk-mcp-airspace

Fetches live airport restriction surfaces around Haneda from the GSI
kokuarea tiles, checks a batch of drone positions, and evaluates a
flight path crossing central Tokyo.

Requires network access to maps.gsi.go.jp (or pass --tile-proxy).

Usage:
    python examples/tokyo_flight_check_demo.py
    python examples/tokyo_flight_check_demo.py --tile-proxy http://localhost:3000/api/kokuarea
"""

import argparse
import asyncio

from tool_runner import ToolRunner

HANEDA_BBOX = [139.65, 35.45, 139.95, 35.65]

DRONES = {
    "haneda-approach": [139.80, 35.52],
    "odaiba": [139.7753, 35.6267],
    "imperial-palace": [139.7528, 35.6852],
    "tama-river": [139.60, 35.60],
}

PATH = [
    [139.7005, 35.6595],  # Shibuya
    [139.7300, 35.6700],
    [139.7528, 35.6852],  # Imperial Palace
    [139.7753, 35.6267],  # Odaiba
    [139.7798, 35.5494],  # Haneda
]


async def main(tile_proxy: str | None) -> None:
    runner = ToolRunner(tile_proxy=tile_proxy)

    print("=" * 60)
    print("chuk-mcp-airspace -- Tokyo Flight Check")
    print("=" * 60)

    tiles = await runner.run("surface_tile_range", bbox=HANEDA_BBOX)
    print(f"\nViewport {HANEDA_BBOX}: {tiles['message']}")
    print(f"  Tiles: {', '.join(tiles['tiles'])}")

    surfaces = await runner.run("surface_fetch", bbox=HANEDA_BBOX)
    print(f"\n{surfaces['message']}")
    for kind, count in sorted(surfaces["kind_counts"].items()):
        print(f"  {kind:18s} {count}")

    stored = await runner.run("surface_fetch", bbox=HANEDA_BBOX, store=True)
    print(f"  Stored as: {stored['artifact_ref']}")

    print("\n" + "-" * 60)
    print("Batch surface check")
    print("-" * 60)
    batch = await runner.run_text(
        "surface_check_points", points=list(DRONES.values()), ids=list(DRONES.keys())
    )
    print(batch)

    print("\n" + "-" * 60)
    print("Flight path check")
    print("-" * 60)
    path = await runner.run_text("airspace_check_path", waypoints=PATH)
    print(path)

    status = await runner.run("airspace_status")
    print(
        f"\nTile cache: {status['cached_tiles']} tiles, "
        f"{status['tile_fetches']} fetches issued"
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Tokyo flight check demo")
    parser.add_argument("--tile-proxy", default=None, help="Tile proxy endpoint")
    args = parser.parse_args()
    asyncio.run(main(args.tile_proxy))
