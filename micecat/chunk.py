"""Terrain chunks: a 16x16 column of blocks generated from a height map."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from micecat.noise import perlin2d

logger = logging.getLogger(__name__)

CHUNK_SIZE = 16
"""Width and depth of a chunk, in blocks."""

CHUNK_HEIGHT = 32
"""Vertical extent accepted by :meth:`Chunk.is_solid_block`."""

WORLD_HEIGHT = 128
"""Number of block layers a generated chunk holds."""

BASE_HEIGHT = 64
HEIGHT_AMPLITUDE = 20.0
NOISE_FREQUENCY = 0.05
DIRT_DEPTH = 4


class BlockType(Enum):
    """Kinds of block a chunk may hold."""

    AIR = "air"
    GRASS = "grass"
    DIRT = "dirt"
    STONE = "stone"


Layers = list[list[list["BlockType | None"]]]


@dataclass
class Chunk:
    """A chunk at ``position`` (in chunk units) with blocks laid out as [y][x][z]."""

    position: tuple[int, int]
    blocks: Layers

    def block_at(self, x: int, y: int, z: int) -> BlockType | None:
        """Return the block at local coordinates, or None for an empty cell."""
        if not (0 <= x < CHUNK_SIZE and 0 <= z < CHUNK_SIZE and 0 <= y < len(self.blocks)):
            raise IndexError(f"block ({x}, {y}, {z}) lies outside the chunk")
        return self.blocks[y][x][z]

    def is_solid_block(self, x: int, y: int, z: int) -> bool:
        """Tell whether a cell holds a block.

        Coordinates are bounded by CHUNK_SIZE horizontally and CHUNK_HEIGHT
        vertically, and the grid is read as ``blocks[x][y][z]``; a ``y`` of
        CHUNK_SIZE or more inside those bounds raises IndexError.
        """
        logger.debug("Checking solidity at block coords: %d, %d, %d", x, y, z)
        if (
            x < 0
            or y < 0
            or z < 0
            or x >= CHUNK_SIZE
            or y >= CHUNK_HEIGHT
            or z >= CHUNK_SIZE
        ):
            return False
        return self.blocks[x][y][z] is not None

    def solid_blocks(self) -> Iterator[tuple[int, int, int, BlockType]]:
        """Yield ``(x, y, z, block)`` for every visible block, in local coordinates."""
        for x in range(CHUNK_SIZE):
            for z in range(CHUNK_SIZE):
                for y, layer in enumerate(self.blocks):
                    block = layer[x][z]
                    if block is None or block is BlockType.AIR:
                        continue
                    yield x, y, z, block


def _column_height(world_x: int, world_z: int) -> int:
    sample = perlin2d(world_x * NOISE_FREQUENCY, world_z * NOISE_FREQUENCY) * HEIGHT_AMPLITUDE
    return max(0, math.trunc(sample)) + BASE_HEIGHT


def _layer_block(y: int, height: int) -> BlockType:
    if y == height:
        return BlockType.GRASS
    if y > height - DIRT_DEPTH:
        return BlockType.DIRT
    return BlockType.STONE


def generate_chunk(position: tuple[int, int]) -> Chunk:
    """Build the chunk at ``position`` from the terrain height map."""
    chunk_x, chunk_z = position
    blocks: Layers = [
        [[None] * CHUNK_SIZE for _ in range(CHUNK_SIZE)] for _ in range(WORLD_HEIGHT)
    ]

    for x in range(CHUNK_SIZE):
        for z in range(CHUNK_SIZE):
            height = _column_height(chunk_x * CHUNK_SIZE + x, chunk_z * CHUNK_SIZE + z)
            for y in range(min(height, WORLD_HEIGHT - 1) + 1):
                blocks[y][x][z] = _layer_block(y, height)

    return Chunk(position=(chunk_x, chunk_z), blocks=blocks)