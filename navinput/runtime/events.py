"""In-process event bus used for routed-action and focus notifications."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from navinput.api.events import Subscription

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]


class RuntimeEventBus:
    """Synchronous pub/sub; handlers run inside the publishing tick."""

    def __init__(self) -> None:
        self._next_id = 1
        self._subscriptions: dict[int, tuple[type[object], EventHandler]] = {}

    @property
    def subscription_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for an event type (subclasses included)."""
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = (event_type, handler)
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    def publish(self, event: object) -> int:
        """Publish one event and return number of invoked handlers.

        A handler removed by an earlier handler of the same publish is skipped.
        """
        invoked = 0
        for sub_id, (subscribed_type, handler) in tuple(self._subscriptions.items()):
            if sub_id not in self._subscriptions:
                continue
            if isinstance(event, subscribed_type):
                handler(event)
                invoked += 1
        return invoked


EventBus = RuntimeEventBus
