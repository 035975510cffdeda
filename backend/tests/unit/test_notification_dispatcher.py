"""Unit tests for the NotificationDispatcher."""

import logging
from datetime import date

import pytest

from fieldreports.application.interfaces import FaultCodeNotifier
from fieldreports.application.services import NotificationDispatcher
from fieldreports.domain.entities import FaultCodeEvent
from fieldreports.domain.exceptions import NotificationError


class FakeNotifier(FaultCodeNotifier):
    """Records delivered events; optionally fails every call."""

    def __init__(self, fail: bool = False):
        self.delivered: list[FaultCodeEvent] = []
        self._fail = fail

    @property
    def channel_name(self) -> str:
        return "fake"

    async def notify(self, event: FaultCodeEvent) -> None:
        if self._fail:
            raise NotificationError("fake", "boom", status_code=500)
        self.delivered.append(event)


def _event(report_id: int = 1) -> FaultCodeEvent:
    return FaultCodeEvent(
        report_id=report_id,
        work_date=date(2024, 4, 1),
        worker_name="山田太郎",
        customer_name="株式会社ABC",
        serial_number="TM-001234",
        fault_code_content="E-101",
        is_new=True,
    )


@pytest.mark.asyncio
async def test_published_events_are_delivered_in_order():
    notifier = FakeNotifier()
    dispatcher = NotificationDispatcher(notifier)
    await dispatcher.start()
    try:
        dispatcher.publish(_event(1))
        dispatcher.publish(_event(2))
        await dispatcher.drain()
    finally:
        await dispatcher.stop()

    assert [e.report_id for e in notifier.delivered] == [1, 2]
    assert dispatcher.running is False


@pytest.mark.asyncio
async def test_delivery_failure_is_logged_and_swallowed(caplog):
    dispatcher = NotificationDispatcher(FakeNotifier(fail=True))
    with caplog.at_level(logging.ERROR):
        await dispatcher.deliver(_event(7))
    assert "report 7" in caplog.text


@pytest.mark.asyncio
async def test_loop_survives_failed_delivery():
    dispatcher = NotificationDispatcher(FakeNotifier(fail=True))
    await dispatcher.start()
    try:
        dispatcher.publish(_event(1))
        dispatcher.publish(_event(2))
        await dispatcher.drain()
        assert dispatcher.running is True
    finally:
        await dispatcher.stop()


@pytest.mark.asyncio
async def test_publish_drops_events_when_queue_is_full():
    dispatcher = NotificationDispatcher(FakeNotifier(), max_pending=1)
    assert dispatcher.publish(_event(1)) is True
    assert dispatcher.publish(_event(2)) is False
    assert dispatcher.pending_count == 1


@pytest.mark.asyncio
async def test_missing_notifier_is_a_no_op():
    dispatcher = NotificationDispatcher(None)
    await dispatcher.deliver(_event())
