"""Master data entities — reference lists used to suggest identifiers."""

from dataclasses import dataclass


@dataclass
class SerialNumberMaster:
    """A known machine serial number and the customer it is installed at."""

    serial_number: str
    customer_name: str
    description: str | None = None
    id: int | None = None


@dataclass
class PartNumberMaster:
    """A known replacement part."""

    part_number: str
    part_name: str
    description: str | None = None
    id: int | None = None
