"""A worker thread around a callback, and a condition signal."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Tuple


class Worker:
    """Runs ``func(*args)`` on its own thread.

    A worker started as independent is detached: it can no longer be joined.
    """

    def __init__(
        self, func: Callable[..., Any], *args: Any, name: str = "", debug: bool = False
    ) -> None:
        self._func = func
        self._args: Tuple[Any, ...] = args
        self.name = name
        self.debug = debug
        self.result: Optional[bool] = None
        self._thread: Optional[threading.Thread] = None
        self._detached = False

    def _run(self) -> None:
        self.result = bool(self._func(*self._args))

    def start(self, independent: bool = False) -> None:
        if self.debug:
            print(f"ThreadT {self.name} is starting!")
        self._detached = False
        self._thread = threading.Thread(target=self._run, name=self.name or None, daemon=independent)
        self._thread.start()
        if independent:
            self.run_independent()

    def run_independent(self) -> None:
        """Detach the running thread."""
        self._detached = True
        if self.debug and self._thread is not None:
            print(
                f"ThreadT: {self.name} with id: {self._thread.ident} is running independently!"
            )

    def is_joinable(self) -> bool:
        return self._thread is not None and not self._detached

    def join(self) -> None:
        if not self.is_joinable():
            raise RuntimeError("ThreadT is not joinable!")
        if self.debug:
            print(f"ThreadT {self.name} is joining!")
        assert self._thread is not None
        self._thread.join()
        self._thread = None


class ConditionSignal:
    """Lets threads wait until another thread notifies them."""

    def __init__(self) -> None:
        self._condition = threading.Condition()

    def wait_for_condition(self, predicate: Optional[Callable[[], bool]] = None) -> bool:
        """Wait for a notification, or until ``predicate`` holds when given."""
        with self._condition:
            if predicate is None:
                return self._condition.wait()
            return bool(self._condition.wait_for(predicate))

    def notify_one(self) -> None:
        with self._condition:
            self._condition.notify()

    def notify_all(self) -> None:
        with self._condition:
            self._condition.notify_all()