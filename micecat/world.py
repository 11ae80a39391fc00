"""World setup: the starting chunks and where the player appears."""

from __future__ import annotations

from micecat.chunk_map import ChunkMap, generate_initial_chunks

SPAWN_COLUMN = (8, 8)
SPAWN_CLEARANCE = 2.0
FALLBACK_SPAWN = (8.0, 70.0, 8.0)


def generate_chunks() -> ChunkMap:
    """Generate the 3x3 block of chunks around the origin."""
    return generate_initial_chunks(1)


def spawn_position(chunk_map: ChunkMap) -> tuple[float, float, float]:
    """Place the player just above the highest block of the spawn column.

    Falls back to a fixed position when the origin chunk is missing or its
    spawn column is empty.
    """
    chunk = chunk_map.chunks.get((0, 0))
    if chunk is not None:
        x, z = SPAWN_COLUMN
        for y in reversed(range(len(chunk.blocks))):
            if chunk.blocks[y][x][z] is not None:
                return float(x), y + SPAWN_CLEARANCE, float(z)
    return FALLBACK_SPAWN