"""EventBus - synchronous dispatch between the host adapter and modules

Rules:
- Modules never call each other directly; they talk through the bus
- Host events carry plain snapshots (ItemDrop, PlayerDeath), never host objects
- Propagation depth is capped at MAX_DEPTH
- A failing handler is logged and does not stop the remaining handlers
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from soulbound.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # max nested emits within one host dispatch


@dataclass
class GameEvent:
    """Event data container

    Args:
        event_type: event type (e.g. "item_dropped", "player_died")
        data: event payload
        source: name of the emitting module/service/host adapter
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    # internal tracking, not set by callers
    _depth: int = field(default=0, repr=False)


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """Synchronous event bus

    Usage:
        bus = EventBus()
        bus.subscribe("item_dropped", module.handle_item_dropped)
        bus.emit(GameEvent(event_type="item_dropped", data={"drop": drop}, source="host"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._current_depth: int = 0

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug(f"EventBus subscribe: {event_type} -> {handler.__qualname__}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(
                    f"EventBus unsubscribe: {event_type} -> {handler.__qualname__}"
                )
            except ValueError:
                logger.warning(
                    f"Handler not registered: {event_type} -> {handler.__qualname__}"
                )

    def emit(self, event: GameEvent) -> None:
        """Emit an event. Registered handlers are called synchronously, in
        subscription order.

        Events emitted deeper than MAX_DEPTH are dropped with a warning.
        """
        if self._current_depth >= MAX_DEPTH:
            logger.warning(
                f"EventBus depth exceeded ({MAX_DEPTH}): "
                f"{event.source}:{event.event_type} ignored"
            )
            return

        event._depth = self._current_depth

        # copy so handlers may unsubscribe while being dispatched
        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug(f"EventBus: no subscribers for {event.event_type}")
            return

        logger.debug(
            f"EventBus dispatch: {event.event_type} (source={event.source}, "
            f"depth={self._current_depth}, handlers={len(handlers)})"
        )

        self._current_depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        f"EventBus handler error: {handler.__qualname__} "
                        f"(event={event.event_type})"
                    )
        finally:
            self._current_depth -= 1

    def clear(self) -> None:
        """Drop every subscription (tests)"""
        self._handlers.clear()
        self._current_depth = 0

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())
