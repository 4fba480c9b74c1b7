"""Starts and stops the reminder notifier alongside the FastAPI application."""

import asyncio
from typing import Optional

from fastapi import FastAPI

from app.core.config import NotifierSettings, settings
from app.db.session import db_manager
from app.services.notification_service import (
    DatabaseEventSource,
    EmailNotificationDispatcher,
    RecordingDispatcher,
)
from app.services.notifier import NotificationScheduler
from app.utils.logger import get_logger

logger = get_logger("notification_tasks")

_SCHEDULER_STATE_KEY = "notifier"
_TASK_STATE_KEY = "notifier_task"


def build_notifier(config: Optional[NotifierSettings] = None) -> NotificationScheduler:
    config = config or settings.notifier
    if config.dry_run:
        dispatcher = RecordingDispatcher()
    else:
        dispatcher = EmailNotificationDispatcher(smtp_timeout=config.dispatch_timeout_seconds)
    return NotificationScheduler(
        DatabaseEventSource(db_manager.SessionLocal),
        dispatcher,
        poll_interval_seconds=config.poll_interval_seconds,
        dispatch_timeout_seconds=config.dispatch_timeout_seconds,
        subject=config.subject,
    )


async def start_notifier(
    app: FastAPI, scheduler: Optional[NotificationScheduler] = None
) -> Optional[asyncio.Task]:
    """Load upcoming reminders and start the polling task.

    A failed load leaves the API running without a notifier.
    """
    if scheduler is None:
        scheduler = build_notifier()
    try:
        await scheduler.load()
    except Exception:
        logger.exception("Unable to start notifier")
        return None

    task = asyncio.create_task(scheduler.poll_forever(), name="reminder-notifier")
    setattr(app.state, _SCHEDULER_STATE_KEY, scheduler)
    setattr(app.state, _TASK_STATE_KEY, task)
    logger.info(f"Notifier started, polling every {scheduler.poll_interval_seconds}s")
    return task


async def stop_notifier(app: FastAPI) -> None:
    task: Optional[asyncio.Task] = getattr(app.state, _TASK_STATE_KEY, None)
    if task is None:
        return

    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass
    finally:
        setattr(app.state, _TASK_STATE_KEY, None)
        setattr(app.state, _SCHEDULER_STATE_KEY, None)
        logger.info("Notifier stopped")
