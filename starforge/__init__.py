"""Game objects, delta synchronisation, job threading, scene caching and HUD overlay geometry for a space simulation."""

__version__ = "0.1.0"
__all__ = ["objects", "volume", "players", "world", "threading", "scene_cache", "overlay"]