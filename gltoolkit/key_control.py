"""Registry of keyboard bindings: single keys per action and multi-key combinations."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from gltoolkit.key_usage_registry import KeyUsageRegistry
from gltoolkit.keys import ACTION_COUNT, Action, Keys, Mods
from gltoolkit.window_input import KeyComb, KeyCombInputOne, KeyCombInputPoly

SingleKey = Tuple[Keys, Mods]
PolyKey = Tuple[Tuple[Keys, ...], Mods]


def _mod(mod: Optional[Mods]) -> Mods:
    return Mods.NONE if mod is None else Mods(mod)


class KeyControl:
    """Holds key bindings, one table per action, plus multi-key bindings.

    Every binding added is also recorded in a :class:`KeyUsageRegistry`,
    the shared one unless another is given.
    """

    def __init__(self, registry: Optional[KeyUsageRegistry] = None) -> None:
        self.registry = registry if registry is not None else KeyUsageRegistry.get_instance()
        self.key_combs: List[Dict[SingleKey, KeyComb]] = [{} for _ in range(ACTION_COUNT)]
        self.key_combs_poly: Dict[PolyKey, KeyComb] = {}

    @staticmethod
    def _table_index(action: Action) -> int:
        index = int(action)
        if not 0 <= index < ACTION_COUNT:
            raise ValueError(f"no key table for action {action!r}")
        return index

    # --- lookup -----------------------------------------------------------

    def find_key_comb_list(self, key: Keys, mod: Optional[Mods] = None) -> List[KeyComb]:
        """All bindings of ``key`` with ``mod``, one per action table holding it."""
        target = (key, _mod(mod))
        return [table[target] for table in self.key_combs if target in table]

    def find_key_comb_poly_list(
        self, keys: Iterable[Keys], mod: Optional[Mods] = None
    ) -> List[KeyComb]:
        target = (tuple(keys), _mod(mod))
        return [comb for binding, comb in self.key_combs_poly.items() if binding == target]

    def num_of_keys_in_list(self, key: Keys, mod: Optional[Mods] = None) -> int:
        target = (key, _mod(mod))
        return sum(1 for table in self.key_combs if target in table)

    def num_of_keys_in_list_poly(self, keys: Iterable[Keys], mod: Optional[Mods] = None) -> int:
        return len(self.find_key_comb_poly_list(keys, mod))

    def find_key_comb(self, key: Keys, mod: Optional[Mods] = None) -> Optional[KeyComb]:
        """The first binding of ``key`` in action order, or None."""
        target = (key, _mod(mod))
        for table in self.key_combs:
            if target in table:
                return table[target]
        return None

    def find_key_comb_for_action(
        self, action: Action, key: Keys, mod: Optional[Mods] = None
    ) -> Optional[KeyComb]:
        return self.key_combs[self._table_index(action)].get((key, _mod(mod)))

    def find_key_comb_poly(
        self, keys: Iterable[Keys], mod: Optional[Mods] = None
    ) -> Optional[KeyComb]:
        return self.key_combs_poly.get((tuple(keys), _mod(mod)))

    # --- removal ----------------------------------------------------------

    def del_key_comb(self, key: Keys, mod: Optional[Mods] = None) -> None:
        """Delete the binding from the action tables in order; each must hold it."""
        target = (key, _mod(mod))
        for table in self.key_combs:
            if target not in table:
                raise KeyError(f"no key binding for {target!r}")
            del table[target]

    def del_key_comb_poly(self, keys: Iterable[Keys], mod: Optional[Mods] = None) -> None:
        target = (tuple(keys), _mod(mod))
        if target not in self.key_combs_poly:
            raise KeyError(f"no key combination binding for {target!r}")
        del self.key_combs_poly[target]

    # --- updaters ---------------------------------------------------------

    def set_func_param_updater_keys(
        self, key: Keys, func: Callable[[], Any], mod: Optional[Mods] = None
    ) -> None:
        """Give the first binding of ``key`` an updater."""
        comb = self.find_key_comb(key, mod)
        if comb is None:
            raise KeyError("No such item exists!")
        comb.set_updater(func)

    def set_func_param_updater_keys_poly(
        self, keys: Iterable[Keys], func: Callable[[], Any], mod: Optional[Mods] = None
    ) -> None:
        comb = self.find_key_comb_poly(keys, mod)
        if comb is None:
            raise KeyError("No such item exists!")
        comb.set_updater(func)

    # --- movement helpers -------------------------------------------------

    def get_key_move_x(self, key: Keys, value: float) -> float:
        if key in (Keys.A, Keys.LEFT):
            return -1 * value
        if key in (Keys.D, Keys.RIGHT):
            return value
        return 0.0

    def get_key_move_y(self, key: Keys, value: float) -> float:
        if key in (Keys.W, Keys.UP):
            return value
        if key in (Keys.S, Keys.DOWN):
            return -1 * value
        return 0.0

    # --- adding -----------------------------------------------------------

    def add_key_comb(
        self,
        repeat_as_well: bool,
        key_input: KeyCombInputOne,
        function: Callable[..., Any],
        *args: Any,
    ) -> KeyComb:
        """Bind ``function(*args)`` to one key.

        With ``repeat_as_well`` the same binding also reacts to key repeats.
        A binding already present for the key in a table is kept.
        """
        comb = KeyComb(key_input, function, *args)
        target = (key_input.number, _mod(key_input.mod))
        if repeat_as_well:
            self.key_combs[int(Action.REPEAT)].setdefault(target, comb)
        self.key_combs[self._table_index(key_input.action)].setdefault(target, comb)
        self.registry.add_key(key_input.number, key_input.mod)
        return comb

    def add_key_comb_poly(
        self, key_input: KeyCombInputPoly, function: Callable[..., Any], *args: Any
    ) -> KeyComb:
        """Bind ``function(*args)`` to several keys held together."""
        target = (tuple(key_input.number), _mod(key_input.mod))
        comb = self.key_combs_poly.setdefault(target, KeyComb(key_input, function, *args))
        self.registry.add_key_poly(key_input.number, key_input.mod)
        return comb

    # --- state ------------------------------------------------------------

    def is_key_pressed(
        self, key: Union[Keys, int], mod: Optional[Union[Mods, int]] = None
    ) -> bool:
        """Whether the binding of ``key`` with ``mod`` matches that key event."""
        key = Keys(key)
        mod_value = _mod(mod)
        comb = self.find_key_comb(key, mod_value)
        if comb is None:
            raise KeyError(f"no key binding for {(key, mod_value)!r}")
        return comb.matches(int(key), int(mod_value))