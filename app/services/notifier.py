"""Reminder notifier: an in-memory min-heap of upcoming events polled on a fixed interval.

The queue is filled once by ``load()`` from a snapshot of the event store;
reminders created, edited or deleted afterwards are picked up on the next
process start. Delivery is at-most-once: an event leaves the queue before it
is dispatched and is not retried when dispatch fails.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from datetime import datetime
from typing import Awaitable, Callable, List, Optional, Tuple

from app.domain.aggregates.scheduled_event import ScheduledEvent
from app.domain.interfaces.infrastructure_interfaces import (
    IEventSource,
    INotificationDispatcher,
)
from app.services.notification_service import render_reminder
from app.utils.logger import get_logger
from app.utils.time_utils import utcnow

logger = get_logger("notifier")

DEFAULT_POLL_INTERVAL_SECONDS = 60.0
DEFAULT_DISPATCH_TIMEOUT_SECONDS = 30.0
DEFAULT_SUBJECT = "Event Notification"


class NotificationScheduler:
    """Fires reminder emails once their start time has passed."""

    def __init__(
        self,
        event_source: IEventSource,
        dispatcher: INotificationDispatcher,
        *,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        dispatch_timeout_seconds: Optional[float] = DEFAULT_DISPATCH_TIMEOUT_SECONDS,
        subject: str = DEFAULT_SUBJECT,
        clock: Callable[[], datetime] = utcnow,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be positive")
        self.event_source = event_source
        self.dispatcher = dispatcher
        self.poll_interval_seconds = poll_interval_seconds
        self.dispatch_timeout_seconds = dispatch_timeout_seconds
        self.subject = subject
        self._clock = clock
        self._sleep = sleep
        # (start_time, insertion seq, event); seq keeps equal start times in insertion order
        self._queue: List[Tuple[datetime, int, ScheduledEvent]] = []
        self._seq = itertools.count()
        self.dispatched_count = 0
        self.failed_count = 0

    # ---- queue --------------------------------------------------------
    def __len__(self) -> int:
        return len(self._queue)

    def push(self, event: ScheduledEvent) -> None:
        if event.start_time is None:
            raise ValueError(f"event {event.event_id} has no start time")
        heapq.heappush(self._queue, (event.start_time, next(self._seq), event))

    def peek(self) -> Optional[ScheduledEvent]:
        return self._queue[0][2] if self._queue else None

    def pending(self) -> List[ScheduledEvent]:
        """Queued events in dispatch order."""
        return [item[2] for item in sorted(self._queue)]

    # ---- operations ---------------------------------------------------
    async def load(self) -> int:
        """Queue every stored event whose start time is still in the future.

        Errors from the event source propagate.
        """
        events = await asyncio.to_thread(self.event_source.fetch_events)
        now = self._clock()
        queued = 0
        for event in events:
            if event.start_time is None or event.start_time <= now:
                continue
            self.push(event)
            queued += 1
        logger.info(f"Loaded {queued} upcoming event(s) out of {len(events)}")
        return queued

    async def tick(self) -> List[ScheduledEvent]:
        """Dispatch every queued event that is due; return the ones handled."""
        handled: List[ScheduledEvent] = []
        while self._queue:
            start_time, _, event = self._queue[0]
            if start_time > self._clock():
                break
            heapq.heappop(self._queue)
            await self._dispatch(event)
            handled.append(event)
        return handled

    async def run(self) -> None:
        """``load()`` once, then ``tick()`` every poll interval until cancelled."""
        await self.load()
        await self.poll_forever()

    async def poll_forever(self) -> None:
        while True:
            logger.debug("Checking queue...")
            try:
                await self.tick()
            except Exception:
                logger.exception("check queue error")
            await self._sleep(self.poll_interval_seconds)

    # ---- helpers ------------------------------------------------------
    async def _dispatch(self, event: ScheduledEvent) -> bool:
        subject, body = render_reminder(event, self.subject)
        try:
            await asyncio.wait_for(
                self.dispatcher.send(event.recipient_email, subject, body),
                timeout=self.dispatch_timeout_seconds,
            )
        except asyncio.TimeoutError:
            self.failed_count += 1
            logger.error(
                f"Dispatch of event {event.event_id} to {event.recipient_email} "
                f"timed out after {self.dispatch_timeout_seconds}s"
            )
            return False
        except Exception:
            self.failed_count += 1
            logger.exception(f"Dispatch of event {event.event_id} to {event.recipient_email} failed")
            return False

        self.dispatched_count += 1
        logger.info(f"Notified {event.recipient_email} about event {event.event_id}")
        return True
