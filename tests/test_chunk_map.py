import pytest

from micecat.chunk import BASE_HEIGHT, CHUNK_SIZE, WORLD_HEIGHT, BlockType, Chunk, generate_chunk
from micecat.chunk_map import ChunkMap, generate_initial_chunks


def _empty_blocks():
    return [[[None] * CHUNK_SIZE for _ in range(CHUNK_SIZE)] for _ in range(WORLD_HEIGHT)]


def test_empty_map_has_nothing_solid():
    assert ChunkMap().is_solid(0, 0, 0) is False


def test_insert_keys_by_position():
    chunk_map = ChunkMap()
    chunk = generate_chunk((2, -1))
    chunk_map.insert(chunk)
    assert chunk_map.chunks == {(2, -1): chunk}


def test_insert_replaces():
    chunk_map = ChunkMap()
    chunk_map.insert(generate_chunk((0, 0)))
    replacement = Chunk(position=(0, 0), blocks=_empty_blocks())
    chunk_map.insert(replacement)
    assert chunk_map.chunks[(0, 0)] is replacement
    assert chunk_map.is_solid(0, 0, 0) is False


def test_surface_at_origin():
    chunk_map = ChunkMap()
    chunk_map.insert(generate_chunk((0, 0)))
    assert chunk_map.is_solid(0, BASE_HEIGHT, 0) is True
    assert chunk_map.is_solid(0, BASE_HEIGHT + 1, 0) is False


@pytest.mark.parametrize("y", [-1, WORLD_HEIGHT])
def test_vertical_bounds(y):
    chunk_map = ChunkMap()
    chunk_map.insert(generate_chunk((0, 0)))
    assert chunk_map.is_solid(0, y, 0) is False


def test_negative_coordinates_map_to_far_edge():
    blocks = _empty_blocks()
    blocks[7][CHUNK_SIZE - 1][CHUNK_SIZE - 1] = BlockType.STONE
    chunk_map = ChunkMap()
    chunk_map.insert(Chunk(position=(-1, -1), blocks=blocks))
    assert chunk_map.is_solid(-1, 7, -1) is True
    assert chunk_map.is_solid(-CHUNK_SIZE, 7, -CHUNK_SIZE) is False
    assert chunk_map.is_solid(0, 7, 0) is False


def test_is_solid_agrees_with_chunks():
    chunk_map = generate_initial_chunks(1)
    for (cx, cz), chunk in chunk_map.chunks.items():
        for lx, lz in [(0, 0), (5, 11), (CHUNK_SIZE - 1, CHUNK_SIZE - 1)]:
            for y in (0, BASE_HEIGHT, BASE_HEIGHT + 10):
                expected = chunk.blocks[y][lx][lz] is not None
                assert chunk_map.is_solid(cx * CHUNK_SIZE + lx, y, cz * CHUNK_SIZE + lz) is expected


def test_initial_chunks_cover_radius():
    chunk_map = generate_initial_chunks(1)
    assert set(chunk_map.chunks) == {(x, z) for x in (-1, 0, 1) for z in (-1, 0, 1)}


def test_radius_zero_is_single_chunk():
    assert set(generate_initial_chunks(0).chunks) == {(0, 0)}