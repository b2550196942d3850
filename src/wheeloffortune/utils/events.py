import logging
from typing import Any, Callable, Dict, List, Type

logger = logging.getLogger(__name__)

EventCallback = Callable[[Any], None]


class EventBus:
    """Synchronous pub/sub bus keyed by event class.

    A subscriber registered for a base class also receives its subclasses, so
    subscribing to ``GameEvent`` follows everything a session publishes.
    Subscriber errors are logged and never reach the publisher.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[type, List[EventCallback]] = {}

    def subscribe(self, event_type: Type[Any], callback: EventCallback) -> None:
        logger.debug("Subscribing %s to %s", callback, event_type.__name__)
        self._subscribers.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: Type[Any], callback: EventCallback) -> None:
        callbacks = self._subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)
        else:
            logger.debug("%s was not subscribed to %s", callback, event_type.__name__)

    def publish(self, event: Any) -> None:
        callbacks = [cb for cls in type(event).__mro__ for cb in self._subscribers.get(cls, [])]
        logger.debug("Publishing %r to %d subscribers", event, len(callbacks))
        for cb in callbacks:
            try:
                cb(event)
            except Exception:
                logger.exception("Error in subscriber %s for %s", cb, type(event).__name__)
