"""Input bindings: key combinations, mouse buttons, mouse movement and on-screen buttons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from gltoolkit.keys import KEY_MAX, Action, Keys, Mods, Mouse, MouseChange


@dataclass
class KeyCombInputOne:
    """A binding for one key, an action and an optional modifier."""

    number: Keys
    action: Action
    mod: Mods = Mods.NONE


@dataclass
class KeyCombInputPoly:
    """A binding for several keys held at once."""

    number: Tuple[Keys, ...]
    action: Action
    mod: Mods = Mods.NONE

    def __post_init__(self) -> None:
        self.number = tuple(self.number)
        if len(self.number) > KEY_MAX:
            raise ValueError(f"a key combination holds at most {KEY_MAX} keys")


@dataclass
class MouseButtonInput:
    name: Mouse
    action: Action


@dataclass
class AABButtonInput:
    """An axis-aligned rectangle on screen that reacts to a mouse button."""

    cord_x: float
    cord_y: float
    width: float
    height: float
    action: Action
    button: Mouse
    name: str


@dataclass
class MouseMoveInput:
    change: MouseChange
    button: Mouse = Mouse.NONE


class InputAction:
    """A callback with stored arguments, optionally refreshed by an updater.

    Before each call the updater (if any) runs; it usually feeds fresh
    arguments in through :meth:`change_parameters`.
    """

    def __init__(self, func: Callable[..., Any], *args: Any) -> None:
        self._func = func
        self._args: Tuple[Any, ...] = tuple(args)
        self._updater: Optional[Callable[[], Any]] = None
        self.result = False

    @property
    def args(self) -> Tuple[Any, ...]:
        return self._args

    def set_updater(self, updater: Optional[Callable[[], Any]]) -> None:
        self._updater = updater

    def change_parameters(self, *args: Any) -> None:
        """Replace the stored arguments.

        Raises TypeError when the new arguments do not match the stored ones
        in number or type.
        """
        if len(args) != len(self._args) or any(
            not isinstance(new, type(old)) for new, old in zip(args, self._args)
        ):
            raise TypeError("arguments do not match the parameters of the bound function")
        self._args = tuple(args)

    def execute(self) -> bool:
        if self._updater is not None:
            self._updater()
        self.result = bool(self._func(*self._args))
        return self.result

    def requires_change(self) -> bool:
        """True when the bound function takes arguments."""
        return bool(self._args)


class MouseButton(InputAction):
    def __init__(self, button_input: MouseButtonInput, func: Callable[..., Any], *args: Any) -> None:
        super().__init__(func, *args)
        self.button = button_input.name
        self.action = button_input.action
        self.pressed = False


class MouseMovement(InputAction):
    def __init__(self, mouse_input: MouseMoveInput, func: Callable[..., Any], *args: Any) -> None:
        super().__init__(func, *args)
        self.button = mouse_input.button
        self.change = mouse_input.change

    def is_changed(self, prev_x: float, prev_y: float, new_x: float, new_y: float) -> bool:
        if self.change == MouseChange.NONE:
            return False
        return prev_x != new_x or prev_y != new_y


class AABButton(InputAction):
    def __init__(self, button_input: AABButtonInput, func: Callable[..., Any], *args: Any) -> None:
        super().__init__(func, *args)
        self.x = button_input.cord_x
        self.y = button_input.cord_y
        self.width = button_input.width
        self.height = button_input.height
        self.action = button_input.action
        self.button = button_input.button
        self.name = button_input.name

    def is_clicked(self, x: float, y: float, action: Action, button: Mouse) -> bool:
        if action != self.action or button != self.button:
            return False
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


class KeyComb(InputAction):
    """A callback bound to one key or to several keys held together."""

    def __init__(
        self,
        key_input: Union[KeyCombInputOne, KeyCombInputPoly],
        func: Callable[..., Any],
        *args: Any,
    ) -> None:
        super().__init__(func, *args)
        if isinstance(key_input, KeyCombInputPoly):
            self.keys: Tuple[Keys, ...] = tuple(key_input.number)
        else:
            self.keys = (key_input.number,)
        self.trigger = key_input.action
        self.mode: Optional[Mods] = None if key_input.mod == Mods.NONE else key_input.mod

    @property
    def key(self) -> Keys:
        return self.keys[0] if self.keys else Keys.NONE

    @property
    def is_single(self) -> bool:
        return len(self.keys) < 2 or self.keys[1] == Keys.NONE

    def is_pressed(self, number: Keys, action: Action, mod: Mods) -> bool:
        if self.key != number or action != self.trigger:
            return False
        return self.mode is None or self.mode == mod

    def matches(self, key: int, mod: int) -> bool:
        """Match a raw key event against a single-key binding."""
        if not self.is_single:
            raise TypeError("matches() applies to single-key combinations only")
        if key != int(self.key):
            return False
        if self.mode is None:
            return mod == 0
        return mod == int(self.mode)

    def matches_all(self, key_state: Callable[[int], int], mod: int) -> bool:
        """Check a multi-key binding against ``key_state``, which maps a key to its action."""
        if self.is_single:
            raise TypeError("matches_all() applies to multi-key combinations only")
        held = all(
            key_state(int(key)) == int(self.trigger) for key in self.keys if key != Keys.NONE
        )
        if not held:
            return False
        if self.mode is None:
            return True
        return mod != 0 and mod == int(self.mode)


def poly_keys(keys: Iterable[Keys]) -> Tuple[Keys, ...]:
    """Normalise a collection of keys into the tuple form used as a binding key."""
    return tuple(keys)