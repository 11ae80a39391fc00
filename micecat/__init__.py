"""Voxel terrain generation, Perlin noise and player movement helpers."""

__version__ = "0.1.0"

__all__ = ["chunk", "chunk_map", "noise", "noise3d", "player", "world"]