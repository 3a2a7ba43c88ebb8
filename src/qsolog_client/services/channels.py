"""Observable state holder with replay of the latest value."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

_logger = logging.getLogger(__name__)


@dataclass
class StateChannel(Generic[T]):
    """Publishes state changes to subscribers in subscription order.

    New subscribers immediately receive the current value.
    """

    value: T
    name: str = "state"
    _subscribers: list[Callable[[T], None]] = field(default_factory=list)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback and return a function that unsubscribes it."""
        self._subscribers.append(callback)
        callback(self.value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> None:
        """Store a new value and deliver it to every subscriber."""
        self.value = value
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception:
                _logger.exception("Subscriber to %s failed", self.name)
        _logger.debug("Published %s to %s subscribers", self.name, len(self._subscribers))
