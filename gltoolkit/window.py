"""Window state and the dispatch of keyboard and mouse events to bindings."""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional

from gltoolkit.aabb_button_control import KEY_CONST, AABButtonControl
from gltoolkit.key_control import KeyControl
from gltoolkit.key_usage_registry import KeyUsageRegistry
from gltoolkit.keys import ACTION_COUNT, Action, Keys, Mods, Mouse
from gltoolkit.mouse_control import MouseControl
from gltoolkit.timer import Timer
from gltoolkit.window_input import KeyComb, KeyCombInputOne


class Window(KeyControl, AABButtonControl, MouseControl):
    """A window's size, projection bounds, frame timing and input bindings.

    Events are fed in through :meth:`handle_keys`,
    :meth:`handle_mouse_cursor` and :meth:`handle_mouse_buttons`; each runs
    the bindings that match.
    """

    def __init__(
        self,
        width: float = 800.0,
        height: float = 800.0,
        name: str = "Untitled Window",
        *,
        registry: Optional[KeyUsageRegistry] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        KeyControl.__init__(self, registry)
        AABButtonControl.__init__(self)
        MouseControl.__init__(self)
        self.name = name
        self.width = float(width)
        self.height = float(height)
        self.aspect_ratio = self.width / self.height if self.height else 1.0
        self.is_ortho = False
        self._left_ortho: Optional[float] = None
        self._right_ortho: Optional[float] = None
        self._top_ortho: Optional[float] = None
        self._bottom_ortho: Optional[float] = None
        self.timer = Timer(True, clock)
        self.delta_time = 0.0
        self.should_close = False
        self._updated = False
        self._key_states: Dict[int, Action] = {}
        self.mouse_current_x = self.width / 2
        self.mouse_current_y = self.height / 2

    # --- projection bounds ------------------------------------------------

    def set_ortho(self) -> None:
        """Derive orthographic bounds from the window's aspect ratio."""
        self.is_ortho = True
        self.aspect_ratio = self.width / self.height
        if self.aspect_ratio >= 1.0:
            self._left_ortho = -1.0 * self.aspect_ratio
            self._right_ortho = 1.0 * self.aspect_ratio
            self._top_ortho = 1.0
            self._bottom_ortho = -1.0
        else:
            self._left_ortho = -1.0
            self._right_ortho = 1.0
            self._top_ortho = 1.0 / self.aspect_ratio
            self._bottom_ortho = -1.0 / self.aspect_ratio

    def set_ortho_bounds(self, left: float, right: float, top: float, bottom: float) -> None:
        self._left_ortho = left
        self._right_ortho = right
        self._top_ortho = top
        self._bottom_ortho = bottom

    @staticmethod
    def _bound(value: Optional[float], label: str) -> float:
        if value is None:
            raise RuntimeError(f"{label} has no value!")
        return value

    @property
    def left_ortho(self) -> float:
        return self._bound(self._left_ortho, "left_ortho")

    @property
    def right_ortho(self) -> float:
        return self._bound(self._right_ortho, "right_ortho")

    @property
    def top_ortho(self) -> float:
        return self._bound(self._top_ortho, "top_ortho")

    @property
    def bottom_ortho(self) -> float:
        return self._bound(self._bottom_ortho, "bottom_ortho")

    # --- state ------------------------------------------------------------

    def set_escape_button(self, key: Keys, mod: Optional[Mods] = None) -> KeyComb:
        """Bind ``key`` (with ``mod``) on press to closing the window."""

        def close() -> bool:
            self.set_should_close(True)
            return True

        key_input = KeyCombInputOne(key, Action.PRESS, Mods.NONE if mod is None else mod)
        return self.add_key_comb(False, key_input, close)

    def set_should_close(self, value: bool) -> None:
        self.should_close = bool(value)

    def is_updated(self) -> bool:
        """Whether a key press ran a binding since the last call."""
        if self._updated:
            self._updated = False
            return True
        return False

    def reset_delta_time(self) -> float:
        """Measure the milliseconds since the last frame and store them."""
        self.delta_time = self.timer.get_delta_time(False)
        return self.delta_time

    def key_state(self, key: int) -> int:
        """The last reported state of ``key``: press while held, else release."""
        return int(self._key_states.get(int(key), Action.RELEASE))

    # --- event handling ---------------------------------------------------

    def _set_key(self, key: int, value: bool) -> None:
        if 0 <= key < KEY_CONST:
            self.set_key(key, value)

    def handle_keys(self, key: int, code: int, action: int, mode: int) -> None:
        """Run the bindings matching a key event, then the multi-key ones."""
        key = int(key)
        mode = int(mode)
        if action == Action.PRESS:
            self._key_states[key] = Action.PRESS
            for comb in list(self.key_combs[int(Action.PRESS)].values()):
                if comb.matches(key, mode):
                    self._updated = True
                    self._set_key(key, True)
                    comb.execute()
        elif action == Action.RELEASE:
            self._key_states[key] = Action.RELEASE
            self._set_key(key, False)
            for comb in list(self.key_combs[int(Action.RELEASE)].values()):
                if comb.matches(key, mode):
                    comb.execute()
        elif action == Action.REPEAT:
            self._key_states[key] = Action.PRESS
            for comb in list(self.key_combs[int(Action.REPEAT)].values()):
                if comb.matches(key, mode):
                    self._set_key(key, True)
                    comb.execute()

        for comb in list(self.key_combs_poly.values()):
            if comb.matches_all(self.key_state, mode):
                comb.execute()

    def handle_mouse_cursor(self, pos_x: float, pos_y: float) -> None:
        """Record the cursor's move and run the movement binding."""
        self.mouse_change_x = pos_x - self.mouse_current_x
        self.mouse_change_y = self.mouse_current_y - pos_y
        self.mouse_current_x = pos_x
        self.mouse_current_y = pos_y
        if self.mouse_move is not None:
            self.mouse_move.execute()

    def handle_mouse_buttons(self, mouse_button: int, action: int, mods: int) -> None:
        """Run the on-screen buttons hit by a mouse button event."""
        action_index = int(action)
        if not 0 <= action_index < ACTION_COUNT:
            return
        act = Action(action_index)
        mouse = Mouse.LEFT if mouse_button == Mouse.LEFT else Mouse.RIGHT
        for button in list(self.aab_buttons[action_index].values()):
            if button.is_clicked(self.mouse_current_x, self.mouse_current_y, act, mouse):
                button.execute()

    def __repr__(self) -> str:
        return f"Window(name={self.name!r}, width={self.width}, height={self.height})"


def _noop(*_: Any) -> bool:
    return True