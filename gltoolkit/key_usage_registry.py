"""Registry of the keys and key combinations that have bindings."""

from __future__ import annotations

from typing import ClassVar, Iterable, List, Optional, Tuple

from gltoolkit.keys import Keys, Mods, is_arrow, is_letter

KeyBinding = Tuple[Keys, Mods]
PolyBinding = Tuple[Tuple[Keys, ...], Mods]


class KeyUsageRegistry:
    """Records, in order, every single key and multi-key binding in use."""

    _instance: ClassVar[Optional["KeyUsageRegistry"]] = None

    def __init__(self) -> None:
        self._keys: List[KeyBinding] = []
        self._keys_poly: List[PolyBinding] = []

    @classmethod
    def get_instance(cls) -> "KeyUsageRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def keys_in_use(self) -> List[KeyBinding]:
        return list(self._keys)

    def only_keys_in_use(self) -> List[Keys]:
        return [key for key, _ in self._keys]

    def only_mods_in_use(self) -> List[Mods]:
        return [mod for _, mod in self._keys]

    def arrow_keys_in_use(self) -> List[KeyBinding]:
        return [pair for pair in self._keys if is_arrow(pair[0])]

    def num_of_arrow_keys_in_use(self) -> int:
        return sum(1 for key, _ in self._keys if is_arrow(key))

    def a_to_z_keys_in_use(self) -> List[KeyBinding]:
        return [pair for pair in self._keys if is_letter(pair[0])]

    def num_of_a_to_z_keys_in_use(self) -> int:
        return sum(1 for key, _ in self._keys if is_letter(key))

    def keys_in_use_poly(self) -> List[PolyBinding]:
        return list(self._keys_poly)

    def only_keys_in_use_poly(self) -> List[Tuple[Keys, ...]]:
        return [keys for keys, _ in self._keys_poly]

    def only_mods_in_use_poly(self) -> List[Mods]:
        return [mod for _, mod in self._keys_poly]

    def num_of_keys_in_use(self) -> int:
        return len(self._keys)

    def num_of_keys_in_use_poly(self) -> int:
        return len(self._keys_poly)

    def add_key(self, key: Keys, mod: Optional[Mods] = None) -> None:
        self._keys.append((key, Mods.NONE if mod is None else mod))

    def add_key_poly(self, keys: Iterable[Keys], mod: Optional[Mods] = None) -> None:
        self._keys_poly.append((tuple(keys), Mods.NONE if mod is None else mod))

    def remove_key(self, key: Keys, mod: Optional[Mods] = None) -> None:
        """Remove every registration of ``key`` with ``mod``."""
        target = (key, Mods.NONE if mod is None else mod)
        self._keys = [pair for pair in self._keys if pair != target]

    def remove_key_poly(self, keys: Iterable[Keys], mod: Optional[Mods] = None) -> None:
        """Remove every registration of the combination ``keys`` with ``mod``."""
        target = (tuple(keys), Mods.NONE if mod is None else mod)
        self._keys_poly = [pair for pair in self._keys_poly if pair != target]