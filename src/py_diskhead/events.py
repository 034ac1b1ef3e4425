"""Change notification — an explicit subscription channel.

A front end that draws the disk needs to know when the engine changes.
Rather than polling, it subscribes a callback to a channel; the engine
emits the new snapshot on that channel after each mutation.

Handlers run synchronously, in the order they subscribed, before the
mutating call returns.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class EventChannel(Generic[T]):
    """An ordered registry of callbacks that receive a payload of type ``T``."""

    def __init__(self, name: str) -> None:
        """Create an empty channel.

        Args:
            name: Label used in error messages (e.g. "state_changed").

        """
        self._name = name
        self._handlers: list[Callable[[T], None]] = []

    @property
    def name(self) -> str:
        """Return the channel label."""
        return self._name

    def subscribe(self, handler: Callable[[T], None]) -> Callable[[], None]:
        """Register *handler* and return a callable that unregisters it."""
        self._handlers.append(handler)

        def _unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return _unsubscribe

    def unsubscribe(self, handler: Callable[[T], None]) -> None:
        """Remove *handler* from the channel.

        Raises:
            ValueError: If *handler* was never subscribed.

        """
        if handler not in self._handlers:
            msg = f"Handler is not subscribed to {self._name}"
            raise ValueError(msg)
        self._handlers.remove(handler)

    def emit(self, payload: T) -> None:
        """Call every handler with *payload*, in subscription order."""
        # Copy so a handler may unsubscribe itself mid-emit
        for handler in list(self._handlers):
            handler(payload)

    def clear(self) -> None:
        """Drop every handler."""
        self._handlers.clear()

    def __len__(self) -> int:
        """Return the number of subscribed handlers."""
        return len(self._handlers)
