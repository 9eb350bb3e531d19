"""EventBus: async broadcast of generation job progress to WebSocket clients."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Coroutine

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    # Job lifecycle
    JOB_STARTED = "job_started"
    STAGE_CHANGED = "stage_changed"
    JOB_COMPLETED = "job_completed"
    JOB_FAILED = "job_failed"

    # Pipeline results
    PROMPT_BUILT = "prompt_built"
    LOGO_GENERATED = "logo_generated"
    FALLBACK_USED = "fallback_used"


@dataclass
class Event:
    type: EventType
    job_id: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "job_id": self.job_id,
            "data": self.data,
            "timestamp": self.timestamp,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


Subscriber = Callable[[Event], Coroutine[Any, Any, None]]


class EventBus:
    """Pub/sub bus for one event loop. Subscribers receive every event.

    The subscriber list is replaced, never mutated, so ``emit`` can iterate
    it while callbacks subscribe or unsubscribe.
    """

    def __init__(self) -> None:
        self._subscribers: tuple[Subscriber, ...] = ()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def subscribe(self, callback: Subscriber) -> None:
        self._subscribers = (*self._subscribers, callback)

    async def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers = tuple(s for s in self._subscribers if s is not callback)

    async def emit(self, event: Event) -> None:
        for sub in self._subscribers:
            try:
                await sub(event)
            except Exception:
                logger.exception("EventBus subscriber error on %s", event.type.value)


# Singleton
event_bus = EventBus()


async def publish(event_type: EventType, job_id: str, **data: Any) -> None:
    """Emit an event on the shared bus."""
    await event_bus.emit(Event(type=event_type, job_id=job_id, data=data))
