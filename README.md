# micecat

A small voxel world toolkit: Perlin noise in two and three dimensions, chunked
terrain generation, a chunk map with world-coordinate lookups, and the player
helpers needed to move around in it (mouse look, movement forces and block
collision tests). It has no dependencies beyond the standard library.

## Installation

```
pip install micecat
```

To run the tests, install the `test` extra and run `pytest`.

## Noise

```python
from micecat.noise import perlin, perlin2d, perlin_octaves
from micecat.noise3d import perlin3d, perlin3d_octaves

perlin(1.5, 2.25)              # permutation-table noise, roughly in [0, 1]
perlin2d(0.3, 0.7)             # hashed-gradient noise centred on 0, zero at lattice points
perlin_octaves(10.0, 20.0, 4, 0.5, 32.0)
perlin3d(0.1, 0.2, 0.3)
perlin3d_octaves(1.0, 2.0, 3.0, 3, 0.5, 16.0)
```

The octave functions sum `octaves` layers, doubling the frequency and
multiplying the amplitude by `persistence` each time, and divide by the total
amplitude; with zero octaves they return NaN. `fade`, `lerp`, `grad`, `grad3`
and the 512-entry table `PERM` are available as building blocks.

## Terrain

Chunks are 16 × 16 columns of blocks, 128 blocks tall, stored as
`blocks[y][x][z]`. Each column's surface height is 64 plus twenty times
`perlin2d` sampled at world coordinates × 0.05, with grass on top, three layers
of dirt below and stone underneath.

```python
from micecat.chunk import BlockType, generate_chunk

chunk = generate_chunk((0, 0))
chunk.block_at(8, 64, 8)       # a BlockType, or None for empty space
for x, y, z, block in chunk.solid_blocks():
    ...
```

`block_at` raises `IndexError` for coordinates outside the chunk.

`ChunkMap` holds chunks by their position and answers solidity queries in
world coordinates, including negative ones; cells in chunks that are not
loaded, or outside the chunk's height, are not solid.

```python
from micecat.chunk_map import ChunkMap, generate_initial_chunks
from micecat.world import generate_chunks, spawn_position

world = generate_chunks()      # the 3 × 3 chunks around the origin
world.is_solid(-5, 60, 12)
generate_initial_chunks(2)     # the 5 × 5 chunks around the origin
spawn_position(world)          # two blocks above the highest block at (8, 8)
```

Without a chunk at `(0, 0)`, or with an empty spawn column, `spawn_position`
returns `(8.0, 70.0, 8.0)`.

## Player

```python
from micecat.player import Key, PlayerCamera, is_colliding, movement_force

camera = PlayerCamera()
camera.apply_mouse(12.0, -4.0) # updates yaw and pitch, pitch clamped to ±1.54

is_colliding((8.0, 70.0, 8.0), (0.6, 1.8, 0.6), world)

force = movement_force(
    (0.0, 0.0, 0.0),
    forward=(0.0, 0.0, -1.0),
    right=(1.0, 0.0, 0.0),
    pressed={Key.W},
    just_pressed={Key.SPACE},
)
```

`movement_force` adds a horizontal push of 3 in the direction of the held
W/A/S/D keys, 100 upward when space was just pressed, and scales the force by
0.2 when no direction key is held. `is_on_ground` and `collides_with_world`
test a position against an iterable of collider positions.

## What it does not do

There is no window, renderer, physics engine or game loop, and no command to
run: the package generates and queries the world and computes player inputs,
and leaves drawing and simulation to the caller.