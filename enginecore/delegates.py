"""Single-cast and multicast callbacks."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from functools import partial
from typing import Any

_UINT64 = 1 << 64


class UnboundDelegateError(RuntimeError):
    """Raised when a delegate with no bound function is executed."""


class DelegateHandle:
    """Identifies one function added to a multicast delegate."""

    _counter = itertools.count(1)
    _lock = threading.Lock()

    __slots__ = ("handle_id",)

    def __init__(self, handle_id: int = 0) -> None:
        self.handle_id = handle_id

    @classmethod
    def _next_id(cls) -> int:
        with cls._lock:
            value = next(cls._counter) % _UINT64
            if value == 0:
                value = next(cls._counter) % _UINT64
            return value

    @classmethod
    def create(cls) -> DelegateHandle:
        """Return a handle with a new, non-zero identifier."""
        return cls(cls._next_id())

    def is_valid(self) -> bool:
        return self.handle_id != 0

    def invalidate(self) -> None:
        self.handle_id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self.handle_id == other.handle_id

    def __hash__(self) -> int:
        return hash(self.handle_id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self.handle_id})"


class Delegate:
    """Holds at most one function, optionally with leading arguments bound."""

    def __init__(self) -> None:
        self._func: Callable[..., Any] | None = None

    def bind(self, func: Callable[..., Any], *args: Any) -> None:
        """Bind ``func``, with ``args`` placed before the call arguments."""
        self._func = partial(func, *args) if args else func

    def unbind(self) -> None:
        self._func = None

    def is_bound(self) -> bool:
        return self._func is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound function; raise UnboundDelegateError if there is none."""
        if self._func is None:
            raise UnboundDelegateError("delegate has no bound function")
        return self._func(*args)

    def execute_if_bound(self, *args: Any) -> bool:
        """Call the bound function if there is one and tell whether it ran."""
        if self._func is None:
            return False
        self._func(*args)
        return True


class MulticastDelegate:
    """Calls every added function on broadcast."""

    def __init__(self) -> None:
        self._funcs: dict[DelegateHandle, Callable[..., Any]] = {}

    def add(self, func: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Add ``func`` and return the handle that removes it."""
        handle = DelegateHandle.create()
        self._funcs[handle] = partial(func, *args) if args else func
        return handle

    def remove(self, handle: DelegateHandle) -> bool:
        """Remove the function for ``handle``; False if the handle is invalid."""
        if not handle.is_valid():
            return False
        self._funcs.pop(handle, None)
        return True

    def broadcast(self, *args: Any) -> None:
        """Call every function added before the broadcast began."""
        for func in list(self._funcs.values()):
            func(*args)

    def __len__(self) -> int:
        return len(self._funcs)