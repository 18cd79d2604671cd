"""Keyboard, mouse, action and movement-direction enumerations."""

from __future__ import annotations

from enum import IntEnum, IntFlag

KEY_MAX = 1024
"""Largest number of keys a multi-key combination can hold."""

ACTION_COUNT = 3
"""Number of real actions (release, press, repeat)."""


class Mods(IntFlag):
    """Modifier keys held while a key event happens."""

    NONE = 0
    SHIFT = 0x0001
    CONTROL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008
    CAPS_LOCK = 0x0010
    NUM_LOCK = 0x0020


class Keys(IntEnum):
    """Keyboard keys, numbered as the windowing layer reports them."""

    NONE = -1
    SPACE = 32
    APOST = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    ZERO = 48
    ONE = 49
    TWO = 50
    THREE = 51
    FOUR = 52
    FIVE = 53
    SIX = 54
    SEVEN = 55
    EIGHT = 56
    NINE = 57
    SEMICOL = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LBRACKET = 91
    BACKSL = 92
    RBRACKET = 93
    GRAV_ACC = 96
    ESC = 256
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


class Mouse(IntEnum):
    """Mouse buttons."""

    NONE = -1
    LEFT = 0
    RIGHT = 1


class MouseChange(IntFlag):
    """Axes of mouse movement that an input listens to."""

    NONE = 0
    MOVE_X = 1 << 0
    MOVE_Y = 1 << 1


class Action(IntEnum):
    """What happened to a key or button."""

    NONE = -1
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Direction(IntFlag):
    """Movement and turning directions; members combine with ``|``."""

    NONE = 0
    UP = 1 << 0
    DOWN = 1 << 1
    RIGHT = 1 << 2
    LEFT = 1 << 3
    FORWARD = 1 << 4
    BACKWARD = 1 << 5
    TURN_RIGHT = 1 << 6
    TURN_LEFT = 1 << 7
    TURN_UP = 1 << 8
    TURN_DOWN = 1 << 9


_ARROWS = frozenset({Keys.UP, Keys.DOWN, Keys.LEFT, Keys.RIGHT})


def is_letter(key: int) -> bool:
    """Return True for the keys A to Z."""
    return Keys.A <= key <= Keys.Z


def is_arrow(key: int) -> bool:
    """Return True for the four arrow keys."""
    return key in _ARROWS