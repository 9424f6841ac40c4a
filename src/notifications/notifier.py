"""Notifier port and its email implementation.

The order lifecycle talks to a ``Notifier``; ``EmailNotifier`` renders the
Printz templates and hands them to an email channel. Use get_notifier() /
set_notifier() to swap implementations.
"""

from abc import ABC, abstractmethod

import structlog

from notifications.channel import get_email_channel
from notifications.channel.email_port import EmailPort
from notifications.templates import get_template
from printing.exceptions import DependencyFailure

logger = structlog.get_logger(__name__)


class Notifier(ABC):
    """Outbound notifications about print orders."""

    @abstractmethod
    def notify_order_created(self, email, payment_id, total, username, shop_name) -> None: ...

    @abstractmethod
    def notify_status_changed(self, email, payment_id, shop_name, status, total, link, username) -> None: ...


class EmailNotifier(Notifier):
    """Sends order notifications as email.

    Raises:
        DependencyFailure: the channel did not accept a message.
    """

    def __init__(self, email_port: EmailPort):
        self.email_port = email_port

    def notify_order_created(self, email, payment_id, total, username, shop_name) -> None:
        self._send(
            "order_confirmation",
            email,
            {
                "payment_id": payment_id,
                "total": total,
                "username": username,
                "shop_name": shop_name,
            },
        )

    def notify_status_changed(self, email, payment_id, shop_name, status, total, link, username) -> None:
        self._send(
            "order_status_update",
            email,
            {
                "payment_id": payment_id,
                "shop_name": shop_name,
                "status": status,
                "total": total,
                "link": link,
                "username": username,
            },
        )

    def _send(self, message_type: str, email: str, context: dict) -> None:
        content = get_template(message_type).render(context)
        result = self.email_port.send(
            to=email,
            subject=content["subject"],
            body=content["body"],
            html_body=content.get("html_body"),
        )
        if not result.delivered:
            raise DependencyFailure({"email": [result.error or "Email delivery failed"]})

        logger.info(
            "Email sent",
            message_type=message_type,
            message_id=result.message_id,
            payment_id=context.get("payment_id"),
        )


_current_notifier: Notifier | None = None


def get_notifier() -> Notifier:
    """Return the current notifier. Defaults to email over the configured channel."""
    global _current_notifier
    if _current_notifier is None:
        _current_notifier = EmailNotifier(get_email_channel())
    return _current_notifier


def set_notifier(notifier: Notifier) -> None:
    """Override the active notifier (useful for tests)."""
    global _current_notifier
    _current_notifier = notifier


def reset_notifier() -> None:
    """Reset to the default notifier."""
    global _current_notifier
    _current_notifier = None
