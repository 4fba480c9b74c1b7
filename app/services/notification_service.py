"""Collaborators of the reminder notifier: where events come from and how they are delivered."""

import asyncio
import smtplib
from typing import Callable, List, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.aggregates.scheduled_event import ScheduledEvent
from app.domain.exceptions import DispatchFailed, EventSourceUnavailable
from app.domain.interfaces.infrastructure_interfaces import (
    IEventSource,
    INotificationDispatcher,
)
from app.domain.repositories.event_repository import EventRepository
from app.utils.email import EmailSender
from app.utils.logger import get_logger

logger = get_logger("notification_service")


def render_reminder(event: ScheduledEvent, subject: str) -> Tuple[str, str]:
    """Subject and plain-text body of the email sent for a due reminder."""
    when = event.start_time.strftime("%Y-%m-%d %H:%M %Z") if event.start_time else "an unknown time"
    kind = event.event_type.replace("_", " ") if event.event_type else "scheduled"
    lines = [
        "Hello,",
        "",
        f"You have a {kind} event for {event.pet_name or 'your pet'} at {when}:",
        event.description or "(no description)",
    ]
    if event.detail:
        lines.append(event.detail)
    if event.end_time:
        lines.append(f"It is scheduled to end at {event.end_time.strftime('%Y-%m-%d %H:%M %Z')}.")
    lines += ["", "Best regards,", "PetPals"]
    return subject, "\n".join(lines)


class DatabaseEventSource(IEventSource):
    """Reads reminders through a short-lived SQLAlchemy session."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def fetch_events(self) -> Sequence[ScheduledEvent]:
        try:
            with self.session_factory() as session:
                events = EventRepository(session).all_with_owner()
                return [ScheduledEvent.from_model(e) for e in events]
        except SQLAlchemyError as exc:
            logger.error(f"Unable to get all events: {exc}")
            raise EventSourceUnavailable(str(exc)) from exc


class EmailNotificationDispatcher(INotificationDispatcher):
    """Sends reminders with ``EmailSender`` on a worker thread."""

    def __init__(self, smtp_timeout: Optional[float] = None):
        self.smtp_timeout = smtp_timeout

    async def send(self, recipient_email: str, subject: str, body: str) -> None:
        if not recipient_email:
            raise DispatchFailed("<missing>", "event owner has no email address")

        logger.info(f"Sending email to: {recipient_email}")
        try:
            await asyncio.to_thread(
                EmailSender.send_email, recipient_email, subject, body, self.smtp_timeout
            )
        except (smtplib.SMTPException, OSError) as exc:
            raise DispatchFailed(recipient_email, str(exc)) from exc


class RecordingDispatcher(INotificationDispatcher):
    """Keeps messages in memory instead of sending them; used when SMTP is not configured."""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, recipient_email: str, subject: str, body: str) -> None:
        logger.info(f"[dry-run] reminder for {recipient_email}: {subject}")
        self.sent.append((recipient_email, subject, body))
