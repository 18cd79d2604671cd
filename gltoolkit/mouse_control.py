"""Mouse position tracking and the mouse-movement binding."""

from __future__ import annotations

from typing import Any, Callable, Optional

from gltoolkit.window_input import MouseMoveInput, MouseMovement


class MouseControl:
    """Holds the cursor position, its last change and one movement callback."""

    def __init__(self) -> None:
        self.is_first_click = False
        self.mouse_change_x = 0.0
        self.mouse_change_y = 0.0
        self.mouse_current_x = 0.0
        self.mouse_current_y = 0.0
        self.mouse_first_moved = True
        self.is_mouse_button_pressed = False
        self.mouse_move: Optional[MouseMovement] = None

    def add_mouse_change(
        self, mouse: MouseMoveInput, func: Callable[..., Any], *args: Any
    ) -> MouseMovement:
        """Bind ``func`` to mouse movement, replacing any earlier binding."""
        self.mouse_move = MouseMovement(mouse, func, *args)
        return self.mouse_move

    def set_mouse_change_updater(self, func: Callable[[], Any]) -> None:
        """Give the movement binding an updater; does nothing without a binding."""
        if self.mouse_move is not None:
            self.mouse_move.set_updater(func)