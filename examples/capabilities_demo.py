#!/usr/bin/env python3
"""
Capabilities Demo -- chuk-mcp-airspace

Quick-start script showing what the server can do without any network
access: capabilities, facility types, surface styles, and no-fly zone
checks against the compiled-in catalog.

Usage:
    python examples/capabilities_demo.py
"""

import asyncio

from tool_runner import ToolRunner


async def main() -> None:
    runner = ToolRunner()

    print("=" * 60)
    print("chuk-mcp-airspace -- Server Capabilities")
    print("=" * 60)

    print(f"\nRegistered tools ({len(runner.tool_names)}):")
    for name in sorted(runner.tool_names):
        print(f"  - {name}")

    caps = await runner.run("airspace_capabilities")
    print("\nCapabilities:")
    print(f"  Facility types: {', '.join(caps['facility_types'])}")
    print(f"  Zone layers: {', '.join(caps['zone_layers'])}")
    print(f"  Surface kinds: {', '.join(caps['surface_kinds'])}")
    print(f"  Surface tiles: z={caps['tile_zoom']}, max {caps['max_tiles_per_request']}")

    categories = await runner.run("airspace_list_categories")
    print(f"\nZone catalog ({categories['total_facilities']} facilities):")
    for c in categories["categories"]:
        print(f"  {c['facility_type']:16s} {c['label']:12s} {c['count']:3d}  {'/'.join(c['zone_colors'])}")

    print("\n" + "-" * 60)
    print("No-fly zone checks")
    print("-" * 60)

    places = [
        ("Imperial Palace", 139.7528, 35.6852),
        ("Shibuya crossing", 139.7005, 35.6595),
        ("Kashiwazaki-Kariwa NPP", 138.5983, 37.4286),
        ("Pacific Ocean", 150.0, 30.0),
    ]
    for label, lon, lat in places:
        check = await runner.run("zone_check_point", lon=lon, lat=lat, include_perimeter=True)
        print(f"  {label:24s} {check['message']}")

    nearby = await runner.run_text("zone_nearby", lon=139.7528, lat=35.6852, max_distance_km=1.5)
    print("\nzone_nearby (output_mode='text'):")
    print(nearby)

    print("\n" + "-" * 60)
    print("Airport zones")
    print("-" * 60)

    for label, lon, lat in [("Haneda", 139.7798, 35.5494), ("Shibuya crossing", 139.7005, 35.6595)]:
        check = await runner.run("airport_check_point", lon=lon, lat=lat)
        print(f"  {label:24s} {check['message']}")

    law = await runner.run_text("airport_list", no_fly_law_only=True)
    print("\nairport_list(no_fly_law_only=True):")
    print(law)

    styles = await runner.run_text("airspace_surface_styles")
    print("\nairspace_surface_styles (output_mode='text'):")
    print(styles)

    print("\n" + "=" * 60)
    print("Everything above uses the compiled-in catalog only.")
    print("Run tokyo_flight_check_demo.py for live restriction surfaces.")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
