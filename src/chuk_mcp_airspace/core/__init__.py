"""Core airspace geometry, tile caching and containment."""
