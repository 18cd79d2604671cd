"""Registry of on-screen rectangular buttons, grouped by the action they react to."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from gltoolkit.keys import ACTION_COUNT, Action
from gltoolkit.window_input import AABButton, AABButtonInput

KEY_CONST = 1024


class AABButtonControl:
    """Named buttons per action, plus the pressed state of every key code."""

    def __init__(self) -> None:
        self.keys: List[bool] = [False] * KEY_CONST
        self.aab_buttons: List[Dict[str, AABButton]] = [{} for _ in range(ACTION_COUNT)]

    @staticmethod
    def _table_index(action: Action) -> int:
        index = int(action)
        if not 0 <= index < ACTION_COUNT:
            raise ValueError(f"no button table for action {action!r}")
        return index

    def find_aab_button(self, name: str) -> AABButton:
        for table in self.aab_buttons:
            if name in table:
                return table[name]
        raise KeyError(f"Could not find the AABButton with the name: {name}")

    def del_aab_button(self, name: str) -> None:
        """Delete the button from every action table; each must hold it."""
        for table in self.aab_buttons:
            if name not in table:
                raise KeyError(f"no AABButton named {name!r}")
            del table[name]

    def add_func_param_updater_button(self, name: str, function: Callable[[], Any]) -> None:
        for table in self.aab_buttons:
            if name in table:
                table[name].set_updater(function)
                return
        raise KeyError(f"no AABButton named {name!r}")

    def change_func_param_updater_button(self, name: str, function: Callable[[], Any]) -> None:
        self.add_func_param_updater_button(name, function)

    def add_aab_button(
        self, button_input: AABButtonInput, function: Callable[..., Any], name: str, *args: Any
    ) -> AABButton:
        """Register a button; an existing button with the same name and action is kept."""
        table = self.aab_buttons[self._table_index(button_input.action)]
        return table.setdefault(name, AABButton(button_input, function, *args))

    def set_key(self, key: int, value: bool) -> None:
        self.keys[key] = value