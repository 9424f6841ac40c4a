"""Email channel port: the contract every mail transport adapter fulfils."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of handing one message to the mail transport."""

    delivered: bool
    message_id: str | None = None
    error: str | None = None


class EmailPort(ABC):
    """Abstract interface for email dispatch adapters."""

    @abstractmethod
    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> DeliveryResult:
        """Hand a message to the transport.

        Adapters report transport problems in the result instead of raising,
        and must return within a bounded time.
        """
        ...
