#!/usr/bin/env python3
"""
Airspace MCP Server - Entry Point

This module provides the async MCP server for drone airspace restriction
zones, restriction surfaces, and point or path containment checks.
Supports both stdio (for Claude Desktop) and HTTP (for API access) transports.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .constants import EnvVar, SessionProvider, StorageProvider

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)


def _resolve_storage() -> tuple[str, str | None]:
    """
    Pick the artifact storage provider and its bucket from the environment.

    Returns:
        (provider, bucket) where bucket is None for the memory provider.
        Misconfigured filesystem storage falls back to memory; misconfigured
        S3 returns ("", None).
    """
    provider = os.environ.get(EnvVar.ARTIFACTS_PROVIDER, StorageProvider.MEMORY)

    if provider == StorageProvider.S3:
        bucket = os.environ.get(EnvVar.BUCKET_NAME)
        aws_key = os.environ.get(EnvVar.AWS_ACCESS_KEY_ID)
        aws_secret = os.environ.get(EnvVar.AWS_SECRET_ACCESS_KEY)
        if not all([bucket, aws_key, aws_secret]):
            logger.warning(
                "S3 provider configured but missing credentials. "
                f"Set {EnvVar.AWS_ACCESS_KEY_ID}, {EnvVar.AWS_SECRET_ACCESS_KEY}, "
                f"and {EnvVar.BUCKET_NAME}."
            )
            return "", None
        logger.info(f"Using S3 artifact storage (bucket: {bucket})")
        logger.info(f"  Endpoint: {os.environ.get(EnvVar.AWS_ENDPOINT_URL_S3)}")
        return provider, bucket

    if provider == StorageProvider.FILESYSTEM:
        artifacts_path = os.environ.get(EnvVar.ARTIFACTS_PATH)
        if not artifacts_path:
            logger.warning(
                f"Filesystem provider configured but {EnvVar.ARTIFACTS_PATH} not set. "
                "Defaulting to memory provider."
            )
            return StorageProvider.MEMORY, None
        Path(artifacts_path).mkdir(parents=True, exist_ok=True)
        logger.info(f"Using filesystem artifact storage (path: {artifacts_path})")
        return provider, artifacts_path

    return provider, None


def _init_artifact_store() -> bool:
    """
    Initialize the artifact store used for exported GeoJSON.

    Returns:
        True if artifact store was initialized, False otherwise
    """
    provider, bucket = _resolve_storage()
    if not provider:
        return False

    redis_url = os.environ.get(EnvVar.REDIS_URL)
    logger.info(f"  Redis URL: {'configured' if redis_url else 'not configured'}")

    try:
        from chuk_artifacts import ArtifactStore
        from chuk_mcp_server import set_global_artifact_store

        store_kwargs: dict[str, Any] = {
            "storage_provider": provider,
            "session_provider": SessionProvider.REDIS if redis_url else SessionProvider.MEMORY,
        }
        if bucket:
            store_kwargs["bucket"] = bucket

        store = ArtifactStore(**store_kwargs)
        set_global_artifact_store(store)

        logger.info(f"Artifact store initialized successfully (provider: {provider})")
        return True

    except Exception as e:
        logger.error(f"Failed to init artifact store: {e}")
        return False


# Import mcp instance and all registered tools from async server
from .async_server import manager, mcp  # noqa: F401, E402


def _configure_tile_source(tile_url: str | None, proxy: str | None) -> None:
    """Apply command-line overrides to the restriction-surface tile fetcher."""
    fetcher = manager.fetcher
    if tile_url:
        fetcher.url_template = tile_url
    if proxy:
        fetcher.proxy_endpoint = proxy
    source = fetcher.proxy_endpoint or fetcher.url_template
    logger.info(f"Restriction-surface tiles: {source}")


def main() -> None:
    """Main entry point for the MCP server."""
    import argparse

    parser = argparse.ArgumentParser(description="Airspace MCP Server")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["stdio", "http"],
        default=None,
        help="Transport mode (stdio for Claude Desktop, http for API)",
    )
    parser.add_argument(
        "--host", default="localhost", help="Host for HTTP mode (default: localhost)"
    )
    parser.add_argument("--port", type=int, default=8004, help="Port for HTTP mode (default: 8004)")
    parser.add_argument(
        "--tile-url",
        default=None,
        help=f"Restriction-surface tile URL template with {{z}}/{{x}}/{{y}} "
        f"(default: ${EnvVar.TILE_URL} or GSI kokuarea)",
    )
    parser.add_argument(
        "--tile-proxy",
        default=None,
        help="Tile proxy endpoint queried as <endpoint>?z=&x=&y=",
    )

    args = parser.parse_args()

    # Initialize artifact store at startup, not at import time
    _init_artifact_store()
    _configure_tile_source(args.tile_url, args.tile_proxy)

    if args.mode == "stdio":
        print("Airspace MCP Server starting in STDIO mode", file=sys.stderr)
        mcp.run(stdio=True)
    elif args.mode == "http":
        print(
            f"Airspace MCP Server starting in HTTP mode on {args.host}:{args.port}",
            file=sys.stderr,
        )
        mcp.run(host=args.host, port=args.port, stdio=False)
    else:
        if os.environ.get(EnvVar.MCP_STDIO) or (not sys.stdin.isatty()):
            print("Airspace MCP Server starting in STDIO mode (auto-detected)", file=sys.stderr)
            mcp.run(stdio=True)
        else:
            print(
                f"Airspace MCP Server starting in HTTP mode on {args.host}:{args.port}",
                file=sys.stderr,
            )
            mcp.run(host=args.host, port=args.port, stdio=False)


if __name__ == "__main__":
    main()
