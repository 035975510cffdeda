"""SQLAlchemy ORM model for the Report entity."""

from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fieldreports.infrastructure.database.base import Base


class ReportModel(Base):
    """ORM model — maps to the 'reports' table."""

    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    work_date: Mapped[date] = mapped_column(Date, nullable=False)
    worker_name: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    site_address: Mapped[str] = mapped_column(String(500), nullable=False)
    serial_number: Mapped[str] = mapped_column(String(9), nullable=False)
    work_type: Mapped[str] = mapped_column(String(20), nullable=False)
    work_type_other: Mapped[str | None] = mapped_column(String(500), nullable=True)
    has_fault_code: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    fault_code_content: Mapped[str | None] = mapped_column(Text, nullable=True)
    part_number: Mapped[str | None] = mapped_column(String(11), nullable=True)
    part_quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    break_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_reports_work_date", "work_date"),
        Index("ix_reports_customer_name", "customer_name"),
        Index("ix_reports_serial_number", "serial_number"),
        Index("ix_reports_part_number", "part_number"),
    )

    def __repr__(self) -> str:
        return (
            f"<ReportModel(id={self.id}, date={self.work_date}, "
            f"serial='{self.serial_number}')>"
        )
