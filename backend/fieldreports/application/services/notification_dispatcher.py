"""Notification Dispatcher — in-process queue that delivers fault code alerts."""

import asyncio
import logging

from fieldreports.application.interfaces import FaultCodeNotifier
from fieldreports.domain.entities import FaultCodeEvent

logger = logging.getLogger(__name__)

# Events beyond this backlog are dropped with a warning
MAX_PENDING_EVENTS = 100


class NotificationDispatcher:
    """Asyncio consumer that hands FaultCodeEvents to a notifier.

    Runs as an asyncio.Task inside FastAPI's lifespan. ``publish`` never
    blocks and never raises, so saving a report is independent of whether
    the alert is delivered. Delivery failures are logged and dropped.
    """

    def __init__(
        self,
        notifier: FaultCodeNotifier | None,
        max_pending: int = MAX_PENDING_EVENTS,
    ) -> None:
        self._notifier = notifier
        self._queue: asyncio.Queue[FaultCodeEvent | None] = asyncio.Queue(maxsize=max_pending)
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def pending_count(self) -> int:
        return self._queue.qsize()

    async def start(self) -> None:
        """Start the delivery loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())
        logger.info("NotificationDispatcher started")

    async def stop(self) -> None:
        """Stop the delivery loop; undelivered events are discarded."""
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("NotificationDispatcher stopped")

    def publish(self, event: FaultCodeEvent) -> bool:
        """Queue an event for delivery. Returns False if it had to be dropped."""
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            logger.warning(
                "Notification queue full — dropping fault code alert for report %s",
                event.report_id,
            )
            return False
        logger.debug("Queued fault code alert for report %s", event.report_id)
        return True

    async def drain(self) -> None:
        """Wait until every queued event has been processed."""
        await self._queue.join()

    async def deliver(self, event: FaultCodeEvent) -> None:
        """Deliver one event, logging instead of raising on failure."""
        if self._notifier is None:
            logger.debug("No notifier configured — skipping alert for report %s", event.report_id)
            return
        try:
            await self._notifier.notify(event)
        except Exception:
            logger.exception(
                "Failed to deliver fault code alert for report %s via %s",
                event.report_id,
                self._notifier.channel_name,
            )
        else:
            logger.info(
                "Delivered fault code alert for report %s via %s",
                event.report_id,
                self._notifier.channel_name,
            )

    async def _loop(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                if event is not None:
                    await self.deliver(event)
            finally:
                self._queue.task_done()
