"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fieldreports.config import get_settings
from fieldreports.application.services import (
    MasterDataService,
    NotificationDispatcher,
    ReportService,
)
from fieldreports.infrastructure.database.session import get_db_session
from fieldreports.infrastructure.database.repositories import (
    SQLAlchemyMasterDataRepository,
    SQLAlchemyReportRepository,
)
from fieldreports.infrastructure.notifications import SlackFaultCodeNotifier


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """Process-wide dispatcher; started and stopped by the app lifespan."""
    settings = get_settings()
    notifier = SlackFaultCodeNotifier(
        webhook_url=settings.slack_webhook_url,
        public_base_url=settings.public_base_url,
        timeout=settings.notification_timeout,
    )
    return NotificationDispatcher(notifier)


async def get_report_service(
    session: AsyncSession = Depends(get_db_session),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> AsyncGenerator[ReportService, None]:
    """Provides a ReportService with its repository and alert dispatcher wired up."""
    repository = SQLAlchemyReportRepository(session)
    yield ReportService(repository, dispatcher)


async def get_master_data_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MasterDataService, None]:
    """Provides a MasterDataService instance with its repository wired up."""
    repository = SQLAlchemyMasterDataRepository(session)
    yield MasterDataService(repository)
