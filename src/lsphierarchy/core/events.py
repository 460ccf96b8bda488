"""Lifecycle events and disposables.

Listeners run synchronously in subscription order. A listener that raises is
logged and skipped so the remaining listeners still see the event.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")

Listener = Callable[[T], None]


class Disposable:
    """Runs a cleanup callback at most once."""

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[], None] | None = None) -> None:
        self._callback = callback

    @property
    def disposed(self) -> bool:
        return self._callback is None

    def dispose(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


class SupportsDispose(Protocol):
    def dispose(self) -> None: ...


class DisposableCollection:
    """Disposes its members in reverse order of insertion."""

    def __init__(self, *items: SupportsDispose) -> None:
        self._items: list[SupportsDispose] = list(items)
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def push(self, item: SupportsDispose) -> SupportsDispose:
        # Late pushes on a disposed collection are released immediately.
        if self._disposed:
            item.dispose()
        else:
            self._items.append(item)
        return item

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        while self._items:
            self._items.pop().dispose()


class Event(Protocol[T]):
    """Subscribe callable handed out by an :class:`Emitter`."""

    def __call__(self, listener: Listener[T]) -> Disposable: ...


@dataclass
class Emitter(Generic[T]):
    """Observer list scoped to the lifetime of its owner.

    With ``once=True`` the emitter delivers a single event; later ``fire``
    calls are ignored.
    """

    name: str = "event"
    once: bool = False

    _listeners: list[Listener[T]] = field(default_factory=list, init=False)
    _fired: bool = field(default=False, init=False)
    _disposed: bool = field(default=False, init=False)

    @property
    def event(self) -> Event[T]:
        return self._subscribe

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _subscribe(self, listener: Listener[T]) -> Disposable:
        if self._disposed:
            return Disposable()
        self._listeners.append(listener)
        return Disposable(lambda: self._remove(listener))

    def _remove(self, listener: Listener[T]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass  # already gone (emitter disposed)

    def fire(self, payload: T) -> bool:
        """Deliver ``payload`` to every listener. Returns whether delivery happened."""
        if self._disposed or (self.once and self._fired):
            return False
        self._fired = True
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("event_listener_failed", event_name=self.name)
        return True

    def dispose(self) -> None:
        self._disposed = True
        self._listeners.clear()
