"""Change notifications emitted by boards and cells.

Listeners subscribe to one EventKind and receive the matching payload object.
Delivery is synchronous, in registration order, inside the mutating call.
A listener that mutates the emitter while being notified gets undefined
results; nothing guards against it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Dict, List, Mapping, Tuple

Location = Tuple[int, int]
Size = Tuple[int, int]


class EventKind(Enum):
    HEAD_MOVED = "head_moved"
    SIZE_CHANGED = "size_changed"
    STONES_CHANGED = "stones_changed"


@dataclass(frozen=True)
class HeadMoved:
    kind: ClassVar[EventKind] = EventKind.HEAD_MOVED

    location: Location
    previous_location: Location


@dataclass(frozen=True)
class SizeChanged:
    kind: ClassVar[EventKind] = EventKind.SIZE_CHANGED

    size: Size
    head: Location
    from_origin_corner: bool
    previous_size: Size
    previous_head: Location


@dataclass(frozen=True)
class StonesChanged:
    kind: ClassVar[EventKind] = EventKind.STONES_CHANGED

    location: Location
    stones: Mapping  # Color -> int, after the change
    previous_stones: Mapping  # Color -> int, before the change


Handler = Callable[[object], None]


class Subscription:
    """Token returned by EventEmitter.subscribe; cancel() detaches the handler."""

    def __init__(self, emitter: "EventEmitter", kind: EventKind, handler: Handler):
        self.emitter = emitter
        self.kind = kind
        self.handler = handler
        self.active = True

    def cancel(self) -> None:
        self.emitter.unsubscribe(self)


class EventEmitter:
    def __init__(self) -> None:
        self._subscriptions: Dict[EventKind, List[Subscription]] = {kind: [] for kind in EventKind}

    def subscribe(self, kind: EventKind, handler: Handler) -> Subscription:
        if not isinstance(kind, EventKind):
            raise ValueError(f"Unknown event kind: {kind!r}")
        subscription = Subscription(self, kind, handler)
        self._subscriptions[kind].append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if not subscription.active:
            return
        subscription.active = False
        self._subscriptions[subscription.kind].remove(subscription)

    def listener_count(self, kind: EventKind) -> int:
        return len(self._subscriptions[kind])

    def emit(self, event) -> None:
        # Iterate a snapshot; handlers may (un)subscribe.
        for subscription in list(self._subscriptions[event.kind]):
            subscription.handler(event)
