"""Zones tools."""

from .api import register_zones_tools

__all__ = ["register_zones_tools"]
