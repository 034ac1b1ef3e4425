"""Tests for the change-notification channel."""

import pytest

from py_diskhead.events import EventChannel


class TestEventChannel:
    """Verify subscription, emission, and removal."""

    def test_emit_in_subscription_order(self) -> None:
        """Handlers run in the order they subscribed."""
        channel: EventChannel[int] = EventChannel("numbers")
        calls: list[str] = []
        channel.subscribe(lambda n: calls.append(f"a{n}"))
        channel.subscribe(lambda n: calls.append(f"b{n}"))
        channel.emit(1)
        assert calls == ["a1", "b1"]

    def test_unsubscribe_callable(self) -> None:
        """The returned callable removes the handler."""
        channel: EventChannel[int] = EventChannel("numbers")
        received: list[int] = []
        unsubscribe = channel.subscribe(received.append)
        unsubscribe()
        unsubscribe()
        channel.emit(1)
        assert received == []
        assert len(channel) == 0

    def test_unsubscribe_unknown_raises(self) -> None:
        """Removing a handler that was never added is an error."""
        channel: EventChannel[int] = EventChannel("numbers")
        with pytest.raises(ValueError, match="not subscribed to numbers"):
            channel.unsubscribe(print)

    def test_handler_may_unsubscribe_itself(self) -> None:
        """Unsubscribing during emit does not skip other handlers."""
        channel: EventChannel[int] = EventChannel("numbers")
        received: list[int] = []

        def once(n: int) -> None:
            channel.unsubscribe(once)
            received.append(n)

        channel.subscribe(once)
        channel.subscribe(received.append)
        channel.emit(7)
        channel.emit(8)
        assert received == [7, 7, 8]

    def test_clear(self) -> None:
        """Clearing drops every handler."""
        channel: EventChannel[int] = EventChannel("numbers")
        channel.subscribe(print)
        channel.clear()
        assert len(channel) == 0
        assert channel.name == "numbers"
