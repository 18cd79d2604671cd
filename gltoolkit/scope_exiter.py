"""Run a function when a scope is left."""

from __future__ import annotations

import sys
from typing import Callable, Optional


class ScopeExiter:
    """Context manager that calls its exit function once on leaving."""

    def __init__(self, func: Optional[Callable[[], None]] = None) -> None:
        self._func = func
        self._closed = False

    def set_exit_function(self, func: Callable[[], None]) -> None:
        self._func = func

    def close(self) -> None:
        """Call the exit function, once; warn if none was set."""
        if self._closed:
            return
        self._closed = True
        if self._func is not None:
            self._func()
        else:
            print(
                "Warning: ScopeExiter closed without a valid exit function!",
                file=sys.stderr,
            )

    def __enter__(self) -> "ScopeExiter":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False