"""Surfaces tools."""

from .api import register_surfaces_tools

__all__ = ["register_surfaces_tools"]
