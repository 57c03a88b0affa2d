from __future__ import annotations

import types
from typing import Callable, Generic, TypeVar


EventT = TypeVar("EventT")


def _same_callback(registered: Callable[..., object], candidate: Callable[..., object]) -> bool:
    """Identity match; bound methods match on their receiver and function."""

    if registered is candidate:
        return True
    if isinstance(registered, types.MethodType) and isinstance(candidate, types.MethodType):
        return registered.__self__ is candidate.__self__ and registered.__func__ is candidate.__func__
    if isinstance(registered, types.BuiltinMethodType) and isinstance(candidate, types.BuiltinMethodType):
        return registered.__self__ is candidate.__self__ and registered.__name__ == candidate.__name__
    return False


class ChangeNotifier(Generic[EventT]):
    """Synchronous multi-subscriber broadcast.

    Subscribers run in registration order on the calling thread and are told
    apart by identity, never by equality. Each pass iterates over a snapshot,
    so subscribing or unsubscribing from inside a callback only affects later
    passes.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[EventT], None]] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[[EventT], None]) -> None:
        if not callable(callback):
            raise ValueError("subscriber must be callable")
        if any(_same_callback(registered, callback) for registered in self._subscribers):
            return
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[EventT], None]) -> bool:
        for index, registered in enumerate(self._subscribers):
            if _same_callback(registered, callback):
                del self._subscribers[index]
                return True
        return False

    def clear(self) -> None:
        self._subscribers.clear()

    def notify(self, event: EventT) -> None:
        for callback in tuple(self._subscribers):
            callback(event)
