"""
Will-change publisher.

Synchronous, ordered delivery of change notices. Listeners run in
subscription order on the caller's thread; an exception raised by a
listener propagates and aborts the mutation that was about to happen.
"""

from __future__ import annotations

from collections.abc import Callable

from .models import ChangeNotice
from .ports import WillChangeListener


class WillChangePublisher:
    """Publishes a notice before each mutation of its owner."""

    def __init__(self) -> None:
        self._listeners: list[WillChangeListener] = []

    def subscribe(self, listener: WillChangeListener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            A callable that removes the listener. Calling it more than
            once is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def send(self, notice: ChangeNotice) -> None:
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(notice)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
