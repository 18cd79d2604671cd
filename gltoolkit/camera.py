"""A first-person camera with perspective or orthographic projection.

Matrices are 4x4 numpy arrays in mathematical (row-major) form: a point
``p`` is transformed as ``M @ p``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from gltoolkit.keys import Action, Direction, Keys, Mouse, MouseChange
from gltoolkit.window_input import KeyCombInputOne, MouseMoveInput

Vec3 = Sequence[float]

PITCH_LIMIT = 89.0
YAW_LIMIT = 179.0
_MOVE_EPSILON = 0.0001
_ROTATION_DOT_LIMIT = 0.9999


def _vec3(values: Vec3) -> np.ndarray:
    array = np.asarray(values, dtype=float).reshape(-1)
    if array.shape != (3,):
        raise ValueError(f"expected three components, got {array.shape[0]}")
    return array.copy()


def _normalize(v: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


def perspective(fov_radians: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    f = 1.0 / math.tan(fov_radians / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Right-handed orthographic projection mapping depth to [-1, 1]."""
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def look_at(eye: Vec3, target: Vec3, up: Vec3) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = _vec3(eye)
    f = _normalize(_vec3(target) - eye_v)
    s = _normalize(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye_v)
    m[1, 3] = -np.dot(u, eye_v)
    m[2, 3] = np.dot(f, eye_v)
    return m


@dataclass
class _CameraBundle:
    near_z: float = 0.1
    far_z: float = 100.0
    speed: float = 1.0
    turn_speed: float = 1.0
    position: Vec3 = (0.0, 0.0, 0.0)
    start_pyr: Vec3 = (0.0, 0.0, 0.0)
    front: Vec3 = (0.0, 0.0, -1.0)
    world_up: Vec3 = (0.0, 1.0, 0.0)


@dataclass
class CameraBundlePerspective(_CameraBundle):
    """Settings for a perspective camera; ``fov`` is in degrees."""

    fov: float = 45.0
    aspect_ratio: float = 1.0


@dataclass
class CameraBundleOrthographic(_CameraBundle):
    """Settings for an orthographic camera."""

    left: float = -1.0
    right: float = 1.0
    bottom: float = -1.0
    top: float = 1.0


class Camera:
    """Position, orientation (pitch, yaw, roll in degrees) and matrices of a camera."""

    def __init__(self, bundle: Union[CameraBundlePerspective, CameraBundleOrthographic]) -> None:
        if isinstance(bundle, CameraBundlePerspective):
            self.projection = perspective(
                math.radians(bundle.fov), bundle.aspect_ratio, bundle.near_z, bundle.far_z
            )
        elif isinstance(bundle, CameraBundleOrthographic):
            self.projection = ortho(
                bundle.left, bundle.right, bundle.bottom, bundle.top, bundle.near_z, bundle.far_z
            )
        else:
            raise TypeError(f"expected a camera bundle, got {type(bundle).__name__}")

        self.world_up = _normalize(_vec3(bundle.world_up))
        self.position = _vec3(bundle.position)
        self.rotation = _vec3(bundle.start_pyr)
        self.speed = float(bundle.speed)
        self.turn_speed = float(bundle.turn_speed)
        self.front = _vec3(bundle.front)
        self.target = self.position + self.front
        self.up = _vec3(bundle.world_up)
        self.right = np.zeros(3)
        self.prev_position = self.position.copy()
        self.prev_rotation = self.rotation.copy()
        self.view = np.identity(4)

        self.rotate_calc()
        self.view = look_at(self.position, self.target, self.up)

    # --- orientation ------------------------------------------------------

    def rotate_calc(self) -> None:
        """Recompute the direction vectors and view from the rotation."""
        pitch = math.radians(self.rotation[0])
        yaw = math.radians(self.rotation[1])
        front = np.array(
            [math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch)]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))
        self.target = self.position + self.front
        self.view = look_at(self.position, self.target, self.up)

    def _pitch(self, delta_time: float, move: float) -> None:
        self.rotation[0] += self.turn_speed * move * delta_time
        self.rotation[0] = min(max(self.rotation[0], -PITCH_LIMIT), PITCH_LIMIT)

    def _yaw(self, delta_time: float, move: float) -> None:
        self.rotation[1] += self.turn_speed * move * delta_time
        self.rotation[1] = min(max(self.rotation[1], -YAW_LIMIT), YAW_LIMIT)

    def _roll(self, delta_time: float, move: float) -> None:
        self.rotation[2] += self.turn_speed * move * delta_time

    # --- movement ---------------------------------------------------------

    def _move(self, axis: np.ndarray, delta_time: float, positive: bool) -> None:
        step = axis * self.speed * delta_time
        self.position = self.position + step if positive else self.position - step
        self.target = self.position + self.front

    def move_and_turn_dir(self, direction: Direction, delta_time: float) -> None:
        """Move along each axis named in ``direction``; turning flags are ignored."""
        if direction & Direction.FORWARD:
            self._move(self.front, delta_time, True)
        elif direction & Direction.BACKWARD:
            self._move(self.front, delta_time, False)

        if direction & Direction.LEFT:
            self._move(self.right, delta_time, False)
        elif direction & Direction.RIGHT:
            self._move(self.right, delta_time, True)

        if direction & Direction.UP:
            self._move(self.up, delta_time, True)
        elif direction & Direction.DOWN:
            self._move(self.up, delta_time, False)

    def update(self, direction: Direction, delta_time: float) -> None:
        self.move_and_turn_dir(direction, delta_time)
        self.view = look_at(self.position, self.target, self.up)

    def set_position(self, position: Vec3) -> None:
        self.position = _vec3(position)

    def is_moving(self) -> bool:
        """Whether position or rotation changed since the last call."""
        position_changed = float(np.linalg.norm(self.position - self.prev_position)) > _MOVE_EPSILON
        rotation_changed = float(np.dot(self.rotation, self.prev_rotation)) < _ROTATION_DOT_LIMIT
        self.prev_position = self.position.copy()
        self.prev_rotation = self.rotation.copy()
        return position_changed or rotation_changed

    # --- input bindings ---------------------------------------------------

    def event_key(self, direction: Direction, delta_time: float) -> bool:
        self.update(direction, delta_time)
        return True

    def event_mouse(self, delta_time: float, x_move: float, y_move: float) -> bool:
        """Turn by a mouse move: x changes yaw, y changes pitch."""
        if x_move != 0:
            self._yaw(delta_time, x_move)
        if y_move != 0:
            self._pitch(delta_time, y_move)
        self.rotate_calc()
        return True

    def set_commands_to_window(self, window) -> None:
        """Bind W/S/A/D/Q/E and mouse movement on ``window`` to this camera."""
        bindings = (
            (Keys.W, Direction.UP),
            (Keys.S, Direction.DOWN),
            (Keys.A, Direction.LEFT),
            (Keys.D, Direction.RIGHT),
            (Keys.Q, Direction.FORWARD),
            (Keys.E, Direction.BACKWARD),
        )

        window.add_mouse_change(
            MouseMoveInput(MouseChange.MOVE_X | MouseChange.MOVE_Y, Mouse.NONE),
            self.event_mouse,
            0.0,
            0.0,
            0.0,
        )

        for key, direction in bindings:

            def on_key(delta_time: float, direction: Direction = direction) -> bool:
                return self.event_key(direction, delta_time)

            window.add_key_comb(True, KeyCombInputOne(key, Action.PRESS), on_key, 0.0)