"""A collection of loaded chunks addressed by chunk position."""

from __future__ import annotations

from dataclasses import dataclass, field

from micecat.chunk import CHUNK_SIZE, Chunk, generate_chunk


@dataclass
class ChunkMap:
    """Loaded chunks keyed by their ``(x, z)`` chunk position."""

    chunks: dict[tuple[int, int], Chunk] = field(default_factory=dict)

    def insert(self, chunk: Chunk) -> None:
        """Add ``chunk``, replacing any chunk already at its position."""
        self.chunks[chunk.position] = chunk

    def is_solid(self, x: int, y: int, z: int) -> bool:
        """Tell whether the world cell ``(x, y, z)`` holds a block."""
        chunk = self.chunks.get((x // CHUNK_SIZE, z // CHUNK_SIZE))
        if chunk is None or not 0 <= y < len(chunk.blocks):
            return False
        return chunk.blocks[y][x % CHUNK_SIZE][z % CHUNK_SIZE] is not None


def generate_initial_chunks(radius: int = 1) -> ChunkMap:
    """Generate every chunk within ``radius`` chunks of the origin."""
    chunk_map = ChunkMap()
    for cx in range(-radius, radius + 1):
        for cz in range(-radius, radius + 1):
            chunk_map.insert(generate_chunk((cx, cz)))
    return chunk_map