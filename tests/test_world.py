from micecat.chunk import CHUNK_SIZE, WORLD_HEIGHT, BlockType, Chunk
from micecat.chunk_map import ChunkMap
from micecat.world import generate_chunks, spawn_position


def _empty_chunk():
    blocks = [[[None] * CHUNK_SIZE for _ in range(CHUNK_SIZE)] for _ in range(WORLD_HEIGHT)]
    return Chunk(position=(0, 0), blocks=blocks)


def test_generate_chunks_is_three_by_three():
    chunk_map = generate_chunks()
    assert set(chunk_map.chunks) == {(x, z) for x in (-1, 0, 1) for z in (-1, 0, 1)}


def test_spawn_above_surface():
    chunk_map = generate_chunks()
    x, y, z = spawn_position(chunk_map)
    assert (x, z) == (8.0, 8.0)
    ground = int(y - 2.0)
    assert ground == y - 2.0
    assert chunk_map.is_solid(8, ground, 8) is True
    assert not any(chunk_map.is_solid(8, h, 8) for h in range(ground + 1, WORLD_HEIGHT))


def test_spawn_on_single_block():
    chunk = _empty_chunk()
    chunk.blocks[5][8][8] = BlockType.STONE
    chunk_map = ChunkMap()
    chunk_map.insert(chunk)
    assert spawn_position(chunk_map) == (8.0, 7.0, 8.0)


def test_fallback_without_origin_chunk():
    assert spawn_position(ChunkMap()) == (8.0, 70.0, 8.0)


def test_fallback_with_empty_column():
    chunk = _empty_chunk()
    chunk.blocks[5][0][0] = BlockType.STONE
    chunk_map = ChunkMap()
    chunk_map.insert(chunk)
    assert spawn_position(chunk_map) == (8.0, 70.0, 8.0)