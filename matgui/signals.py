"""Queued signals that deliver calls when the main loop flushes them."""

from __future__ import annotations

import threading
import types
import weakref
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

__all__ = [
    "Signal",
    "flush_signals",
    "set_main_thread",
    "assert_main_thread",
]

_registry: list[weakref.ReferenceType[Signal]] = []
_registry_lock = threading.Lock()
_main_thread_id: int | None = None

# Code-object flag set when a function accepts *args.
_CO_VARARGS = 0x04


def set_main_thread() -> None:
    """Mark the calling thread as the main (gui) thread."""
    global _main_thread_id
    _main_thread_id = threading.get_ident()


def assert_main_thread() -> None:
    """Raise RuntimeError unless called from the thread set as main thread."""
    if threading.get_ident() != _main_thread_id:
        raise RuntimeError("Assert This function must be called from main thread")


def _live_signals() -> list[Signal]:
    with _registry_lock:
        alive = []
        remaining = []
        for ref in _registry:
            signal = ref()
            if signal is not None:
                alive.append(signal)
                remaining.append(ref)
        _registry[:] = remaining
    return alive


def flush_signals() -> None:
    """Deliver every queued call on every live signal, in creation order."""
    set_main_thread()
    for signal in _live_signals():
        signal.flush()


def _takes_no_arguments(function: Callable[..., Any]) -> bool:
    target = getattr(function, "__func__", function)
    code = getattr(target, "__code__", None)
    if code is None:
        return False
    if code.co_flags & _CO_VARARGS:
        return False
    count = code.co_argcount
    if target is not function and getattr(function, "__self__", None) is not None:
        count -= 1
    return count <= 0


def _default_reference(function: Callable[..., Any]) -> Any:
    owner = getattr(function, "__self__", None)
    if owner is not None and not isinstance(owner, types.ModuleType):
        return owner
    return function


@dataclass(eq=False)
class _Connection:
    function: Callable[..., Any]
    reference: Any
    ignore_args: bool
    active: bool = True

    def __call__(self, args: tuple) -> Any:
        if self.ignore_args:
            return self.function()
        return self.function(*args)


class Signal:
    """A list of callbacks that can be called directly or through a queue.

    ``emit`` queues a call that is delivered on the next ``flush`` (or
    ``flush_signals``); ``direct_call`` calls every connection at once.
    With ``only_save_last`` set, only the latest queued arguments are kept.
    """

    def __init__(self, only_save_last: bool = False) -> None:
        self.only_save_last = only_save_last
        self._connections: list[_Connection] = []
        self._queue: deque[tuple] = deque()
        self._lock = threading.Lock()
        with _registry_lock:
            _registry.append(weakref.ref(self))

    def emit(self, *args: Any) -> None:
        """Queue a call with ``args``; ignored when nothing is connected."""
        if not self._connections:
            return
        with self._lock:
            if self.only_save_last and self._queue:
                self._queue[0] = args
            else:
                self._queue.append(args)

    def __call__(self, *args: Any) -> None:
        self.emit(*args)

    def flush(self) -> None:
        """Deliver all queued calls to the connected callbacks."""
        while True:
            with self._lock:
                if not self._queue:
                    return
                args = self._queue.popleft()
            for connection in list(self._connections):
                if connection.active:
                    connection(args)

    def direct_call(self, *args: Any) -> Any:
        """Call every connection now and return the last return value."""
        result = None
        for connection in list(self._connections):
            if connection.active:
                result = connection(args)
        return result

    def connect(self, function: Callable[..., Any], reference: Any = None) -> None:
        """Connect ``function``; ``reference`` identifies it for ``disconnect``.

        Without a reference, a bound method is identified by its object and
        any other callable by itself. A callable that takes no positional
        arguments is called without the signal's arguments.
        """
        if reference is None:
            reference = _default_reference(function)
        connection = _Connection(function, reference, _takes_no_arguments(function))
        with self._lock:
            self._connections.append(connection)

    def disconnect(self, reference: Any) -> None:
        """Remove every connection identified by ``reference``."""
        with self._lock:
            kept = []
            for connection in self._connections:
                if connection.reference is reference or connection.function is reference:
                    connection.active = False
                else:
                    kept.append(connection)
            self._connections = kept

    def disconnect_all(self) -> None:
        """Remove all connections."""
        with self._lock:
            for connection in self._connections:
                connection.active = False
            self._connections = []

    def clear_queue(self) -> None:
        """Drop every queued call."""
        with self._lock:
            self._queue.clear()

    def __bool__(self) -> bool:
        return bool(self._connections)