"""SQLAlchemy ORM models for serial/part number master data."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fieldreports.infrastructure.database.base import Base


class SerialNumberMasterModel(Base):
    """ORM model — maps to the 'serial_number_masters' table."""

    __tablename__ = "serial_number_masters"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    serial_number: Mapped[str] = mapped_column(String(9), nullable=False, unique=True)
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<SerialNumberMasterModel(serial='{self.serial_number}')>"


class PartNumberMasterModel(Base):
    """ORM model — maps to the 'part_number_masters' table."""

    __tablename__ = "part_number_masters"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    part_number: Mapped[str] = mapped_column(String(11), nullable=False, unique=True)
    part_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<PartNumberMasterModel(part='{self.part_number}')>"
