"""
Round events
The engine reports round progress through an EventBus; narration, logging
and test harnesses subscribe to it. The engine itself never prints.

Handlers run in descending priority; handlers of equal priority run in
subscription order, and catch-all handlers run before type-specific ones.
"""

from __future__ import annotations

import itertools
import logging
from bisect import insort
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Deque, Dict, List, NamedTuple, Optional

if TYPE_CHECKING:
    from .card import Card, SideEffect
    from .player import Player

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Round event types"""
    # game lifecycle
    GAME_START = auto()
    GAME_END = auto()

    # rounds
    ROUND_START = auto()
    ROUND_END = auto()
    ROUND_WON = auto()
    ROUND_DRAWN = auto()

    # cards and powers
    CARD_PLAYED = auto()
    POWER_APPLIED = auto()
    SIDE_EFFECT_TRIGGERED = auto()
    SIDE_EFFECT_EXPIRED = auto()


@dataclass
class GameEvent:
    """
    One thing that happened during a game

    ``data`` holds the keyword arguments given to ``EventBus.emit``; the
    properties below read the keys the engine uses.
    """
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    cancelled: bool = False

    @property
    def player(self) -> Optional['Player']:
        """Player who played, won the round or won the game"""
        return self.data.get('player')

    @property
    def card(self) -> Optional['Card']:
        return self.data.get('card')

    @property
    def side_effect(self) -> Optional['SideEffect']:
        return self.data.get('side_effect')

    @property
    def round_number(self) -> int:
        return self.data.get('round_number', 0)

    @property
    def message(self) -> str:
        return self.data.get('message', '')

    def cancel(self) -> None:
        """Hide this event from the handlers that have not run yet"""
        self.cancelled = True


EventHandler = Callable[[GameEvent], None]


class _Subscription(NamedTuple):
    # sorts by (-priority, seq): highest priority first, then oldest first
    sort_key: tuple[int, int]
    handler: EventHandler


class EventBus:
    """
    Synchronous publish/subscribe hub for round events

    Args:
        max_history: number of recent events kept; 0 disables history
    """

    def __init__(self, max_history: int = 100):
        self._subscriptions: Dict[EventType, List[_Subscription]] = {}
        self._catch_all: List[_Subscription] = []
        self._history: Deque[GameEvent] = deque(maxlen=max(max_history, 0))
        self._seq = itertools.count()

    def _add(self, bucket: List[_Subscription], handler: EventHandler, priority: int) -> None:
        insort(bucket, _Subscription((-priority, next(self._seq)), handler),
               key=lambda sub: sub.sort_key)

    def subscribe(self, event_type: EventType, handler: EventHandler,
                  priority: int = 0) -> None:
        """
        Call ``handler`` for every event of ``event_type``

        Args:
            event_type: event type
            handler: callback taking the event
            priority: larger runs first
        """
        self._add(self._subscriptions.setdefault(event_type, []), handler, priority)

    def subscribe_all(self, handler: EventHandler, priority: int = 0) -> None:
        """Call ``handler`` for every event"""
        self._add(self._catch_all, handler, priority)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        bucket = self._subscriptions.get(event_type)
        if bucket:
            bucket[:] = [sub for sub in bucket if sub.handler != handler]

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """Remove ``handler`` from the catch-all list and from every event type"""
        self._catch_all[:] = [sub for sub in self._catch_all if sub.handler != handler]
        for event_type in list(self._subscriptions):
            self.unsubscribe(event_type, handler)

    def publish(self, event: GameEvent) -> GameEvent:
        """
        Deliver an event to its handlers

        A handler that raises is logged and skipped. Delivery stops once a
        handler cancels the event.

        Returns:
            The event, after every handler that saw it
        """
        if self._history.maxlen:
            self._history.append(event)

        targets = [*self._catch_all, *self._subscriptions.get(event.event_type, ())]
        for sub in targets:
            if event.cancelled:
                break
            try:
                sub.handler(event)
            except Exception:
                logger.exception("Event handler failed for %s", event.event_type.name)
        return event

    def emit(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build a GameEvent from keyword data and publish it"""
        return self.publish(GameEvent(event_type=event_type, data=data))

    def clear(self) -> None:
        """Remove all subscriptions (history is kept)"""
        self._subscriptions.clear()
        self._catch_all.clear()

    def get_history(self, count: int = 10) -> List[GameEvent]:
        """The ``count`` most recent events, oldest first"""
        if count <= 0:
            return []
        return list(self._history)[-count:]

    def events_of(self, event_type: EventType) -> List[GameEvent]:
        """Every event of one type still held in the history"""
        return [event for event in self._history if event.event_type is event_type]
