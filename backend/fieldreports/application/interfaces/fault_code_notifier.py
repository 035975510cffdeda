"""Abstract interface for fault code alert channels."""

from abc import ABC, abstractmethod

from fieldreports.domain.entities import FaultCodeEvent


class FaultCodeNotifier(ABC):
    """Port for delivering fault code alerts (Slack, e-mail, ...).

    Implementations may raise ``NotificationError``; callers decide whether
    that matters.
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Human-readable channel identifier used in logs."""
        ...

    @abstractmethod
    async def notify(self, event: FaultCodeEvent) -> None:
        """Deliver a single alert."""
        ...
