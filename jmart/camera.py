"""Cameras: a key-driven panning camera and a mouse-look camera."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

from jmart.vertex import Position

CAMERA_SPEED = 20.0
PAN_FACTOR = 0.2
PITCH_CEILING = 40.0
PITCH_FLOOR = -30.0
TARGET_WHERE_DEPTH = -30.0


class Key(Enum):
    """Keys the cameras respond to."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    A = "a"
    D = "d"
    W = "w"
    S = "s"


def _vec(value: Iterable[float]) -> Position:
    return Position(*value)


def _add(a: Position, b: Position) -> Position:
    return Position(a.x + b.x, a.y + b.y, a.z + b.z)


def _sub(a: Position, b: Position) -> Position:
    return Position(a.x - b.x, a.y - b.y, a.z - b.z)


def _scale(a: Position, k: float) -> Position:
    return Position(a.x * k, a.y * k, a.z * k)


def _dot(a: Position, b: Position) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Position, b: Position) -> Position:
    return Position(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _normalized(a: Position) -> Position:
    length = math.sqrt(_dot(a, a))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return _scale(a, 1.0 / length)


def _rotate(v: Position, degrees: float, axis: Position) -> Position:
    """Rotate ``v`` counter-clockwise by ``degrees`` about ``axis``."""
    k = _normalized(axis)
    angle = math.radians(degrees)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return _add(
        _add(_scale(v, cos_a), _scale(_cross(k, v), sin_a)),
        _scale(k, _dot(k, v) * (1.0 - cos_a)),
    )


class Camera:
    """A camera that pans its position with the arrow or WASD keys."""

    def __init__(self) -> None:
        self.position = Position(1.0, 0.0, 0.0)
        self.target = Position()
        self.up = Position(0.0, 1.0, 0.0)
        Camera.reset(self)

    def init(self, pos: Iterable[float], target: Iterable[float], up: Iterable[float]) -> None:
        """Place the camera."""
        self.position = _vec(pos)
        self.target = _vec(target)
        self.up = _vec(up)

    def reset(self) -> None:
        """Return to the default placement looking at the origin from +x."""
        self.position = Position(1.0, 0.0, 0.0)
        self.target = Position(0.0, 0.0, 0.0)
        self.up = Position(0.0, 1.0, 0.0)

    def update(self, dt: float, keys: Iterable[Key] = ()) -> None:
        """Move the position in x and y according to the pressed keys."""
        pressed = set(keys)
        step = CAMERA_SPEED * PAN_FACTOR * dt
        dx = dy = 0.0
        if pressed & {Key.LEFT, Key.A}:
            dx -= step
        if pressed & {Key.RIGHT, Key.D}:
            dx += step
        if pressed & {Key.UP, Key.W}:
            dy += step
        if pressed & {Key.DOWN, Key.S}:
            dy -= step
        self.position = Position(self.position.x + dx, self.position.y + dy, self.position.z)


class Camera3(Camera):
    """A camera that turns towards the mouse's offset from a centre point."""

    def __init__(self) -> None:
        super().__init__()
        self.default_position = self.position
        self.default_target = self.target
        self.default_up = self.up
        self.targetwhere = Position()
        self.default_targetwhere = self.targetwhere
        self.yaw_total = 0.0

    def init(self, pos: Iterable[float], target: Iterable[float], up: Iterable[float]) -> None:
        """Place the camera and remember the placement for :meth:`reset`.

        The up vector is straightened to be perpendicular to the view direction.
        """
        self.position = self.default_position = _vec(pos)
        self.target = self.default_target = _vec(target)
        view = _normalized(_sub(self.target, self.position))
        right = _cross(view, _vec(up))
        right = _normalized(Position(right.x, 0.0, right.z))
        self.up = self.default_up = _normalized(_cross(right, view))
        self.targetwhere = self.default_targetwhere = Position(
            0.0, self.target.y, TARGET_WHERE_DEPTH
        )

    def _yaw(self, degrees: float) -> None:
        axis = Position(0.0, 1.0, 0.0)
        self.target = _add(_rotate(_sub(self.target, self.position), degrees, axis), self.position)
        self.targetwhere = _add(
            _rotate(_sub(self.targetwhere, self.position), degrees, axis), self.position
        )
        self.up = _rotate(self.up, degrees, axis)
        self.yaw_total += degrees

    def _pitch(self, degrees: float) -> None:
        view = _normalized(_sub(self.target, self.position))
        right = _cross(view, self.up)
        right = _normalized(Position(right.x, 0.0, right.z))
        self.up = _normalized(_cross(right, view))
        self.target = _add(_rotate(_sub(self.target, self.position), degrees, right), self.position)
        self.targetwhere = _add(
            _rotate(_sub(self.targetwhere, self.position), degrees, right), self.position
        )

    def update(
        self,
        dt: float,
        width: float,
        height: float,
        xpos: float,
        ypos: float,
        keys: Iterable[Key] = (),
    ) -> None:
        """Turn by the cursor's offset from (``width``, ``height``).

        Yaw follows the horizontal offset; pitch follows the vertical offset
        while the target stays between the pitch floor and ceiling.
        """
        pressed = set(keys)
        centre_x, centre_y = width, height

        if Key.LEFT in pressed or xpos < centre_x:
            self._yaw(CAMERA_SPEED * dt * (centre_x - xpos))
        if Key.RIGHT in pressed or xpos > centre_x:
            self._yaw(-CAMERA_SPEED * dt * (xpos - centre_x))
        if (Key.UP in pressed or ypos < centre_y) and self.target.y < PITCH_CEILING:
            self._pitch(CAMERA_SPEED * dt * (centre_y - ypos))
        if (Key.DOWN in pressed or ypos > centre_y) and self.target.y > PITCH_FLOOR:
            self._pitch(-CAMERA_SPEED * dt * (ypos - centre_y))

    def reset(self) -> None:
        """Return to the placement given to :meth:`init`."""
        self.position = self.default_position
        self.target = self.default_target
        self.up = self.default_up
        self.targetwhere = self.default_targetwhere