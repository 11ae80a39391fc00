"""Player controls: mouse look, movement forces and block collision tests."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from micecat.chunk_map import ChunkMap

Vec3 = tuple[float, float, float]

MOUSE_SENSITIVITY = 0.001
PITCH_LIMIT = 1.54
MOVE_FORCE = 3.0
JUMP_FORCE = 100.0
IDLE_DAMPING = 0.2


class Key(Enum):
    """Keys that drive player movement."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    SPACE = "space"


def _add(a: Vec3, b: Vec3) -> Vec3:
    return a[0] + b[0], a[1] + b[1], a[2] + b[2]


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return a[0] - b[0], a[1] - b[1], a[2] - b[2]


def _scale(v: Vec3, factor: float) -> Vec3:
    return v[0] * factor, v[1] * factor, v[2] * factor


@dataclass
class PlayerCamera:
    """Look angles in radians: yaw turns the body, pitch tilts the camera."""

    yaw: float = 0.0
    pitch: float = 0.0

    def apply_mouse(self, dx: float, dy: float) -> None:
        """Turn by a mouse motion delta, keeping pitch short of straight up or down."""
        self.yaw -= dx * MOUSE_SENSITIVITY
        self.pitch = min(PITCH_LIMIT, max(-PITCH_LIMIT, self.pitch - dy * MOUSE_SENSITIVITY))


def is_colliding(position: Vec3, size: Vec3, chunk_map: ChunkMap) -> bool:
    """Tell whether a box of ``size`` centred on ``position`` touches a solid cell."""
    low = _sub(position, _scale(size, 0.5))
    high = _add(position, _scale(size, 0.5))
    x_range = range(math.floor(low[0]), math.floor(high[0]) + 1)
    y_range = range(math.floor(low[1]), math.floor(high[1]) + 1)
    z_range = range(math.floor(low[2]), math.floor(high[2]) + 1)
    return any(
        chunk_map.is_solid(x, y, z) for x in x_range for y in y_range for z in z_range
    )


def movement_force(
    force: Vec3,
    forward: Vec3,
    right: Vec3,
    pressed: Iterable[Key],
    just_pressed: Iterable[Key],
) -> Vec3:
    """Return the external force after one step of keyboard input."""
    held = set(pressed)
    direction: Vec3 = (0.0, 0.0, 0.0)
    if Key.W in held:
        direction = _add(direction, forward)
    if Key.S in held:
        direction = _sub(direction, forward)
    if Key.D in held:
        direction = _add(direction, right)
    if Key.A in held:
        direction = _sub(direction, right)
    direction = (direction[0], 0.0, direction[2])

    length_squared = direction[0] ** 2 + direction[2] ** 2
    if length_squared > 0.0:
        direction = _scale(direction, 1.0 / math.sqrt(length_squared))
        force = _add(force, _scale(direction, MOVE_FORCE))

    if Key.SPACE in set(just_pressed):
        force = _add(force, (0.0, JUMP_FORCE, 0.0))

    if length_squared == 0.0:
        force = _scale(force, IDLE_DAMPING)
    return force


def is_on_ground(position: Vec3, colliders: Iterable[Vec3]) -> bool:
    """Tell whether a collider sits right under the player's feet."""
    feet = (position[0], position[1] - 1.0, position[2])
    return any(
        abs(c[0] - feet[0]) < 0.5 and abs(c[1] - feet[1]) < 0.1 and abs(c[2] - feet[2]) < 0.5
        for c in colliders
    )


def collides_with_world(position: Vec3, colliders: Iterable[Vec3]) -> bool:
    """Tell whether any collider overlaps the player's body at ``position``."""
    return any(
        abs(c[0] - position[0]) < 0.5
        and abs(c[1] - position[1]) < 1.0
        and abs(c[2] - position[2]) < 0.5
        for c in colliders
    )