"""Order lifecycle service: runs the order commands and notifies requesters.

Handlers only persist. Notifications go out here, after the command has
committed, so a mail outage never rolls back or fails an order write.
"""

import os

import structlog
from protean.exceptions import ExpectedVersionError
from protean.utils.globals import current_domain

from notifications.notifier import Notifier, get_notifier
from printing.exceptions import DependencyFailure, InvalidStateError
from printing.order.order import PrintOrder
from printing.order.placement import PlaceOrder
from printing.order.status import UpdateOrderStatus
from printing.student.registration import find_email

logger = structlog.get_logger(__name__)

DEFAULT_FRONTEND_URL = "http://localhost:3000"


class OrderLifecycle:
    def __init__(self, notifier: Notifier | None = None, frontend_url: str | None = None):
        self._notifier = notifier
        self.frontend_url = (frontend_url or os.getenv("PRINTZ_FRONTEND_URL") or DEFAULT_FRONTEND_URL).rstrip("/")

    @property
    def notifier(self) -> Notifier:
        return self._notifier or get_notifier()

    def order_link(self, payment_id: str) -> str:
        return f"{self.frontend_url}/orders/{payment_id}"

    def place_order(self, command: PlaceOrder) -> int:
        """Persist a new order and send the confirmation. Returns the order number."""
        current_domain.process(command, asynchronous=False)
        order = current_domain.repository_for(PrintOrder).find_by_payment_id(command.payment_id)

        email = find_email(order.student_username)
        if email is None:
            logger.warning(
                "Skipping order confirmation, requester has no email",
                order_number=order.number,
                student_username=order.student_username,
            )
            return order.number

        try:
            self.notifier.notify_order_created(
                email=email,
                payment_id=order.payment_id,
                total=order.total,
                username=order.student_username,
                shop_name=order.shop_username,
            )
        except DependencyFailure as exc:
            logger.error(
                "Order confirmation could not be sent",
                order_number=order.number,
                payment_id=order.payment_id,
                error=str(exc.messages),
            )
        return order.number

    def update_status(self, command: UpdateOrderStatus) -> PrintOrder:
        """Move an order to a terminal status and tell the requester.

        Raises:
            ValidationError: the requested status is not terminal.
            ObjectNotFoundError: no such order (at that shop).
            InvalidStateError: the order is already terminal, or another
                writer changed it first.
            IntegrityError: the requester's address cannot be resolved.
        """
        try:
            current_domain.process(command, asynchronous=False)
        except ExpectedVersionError as exc:
            logger.warning("Concurrent order status update rejected", payment_id=command.payment_id)
            raise InvalidStateError(
                {"status": [f"Order {command.payment_id} was changed by another request"]}
            ) from exc

        order = current_domain.repository_for(PrintOrder).find_by_payment_id(command.payment_id)

        # The handler checked the requester before committing; an account removed
        # since then only costs the notification.
        email = find_email(order.student_username)
        if email is None:
            logger.warning(
                "Skipping status notification, requester has no email",
                order_number=order.number,
                student_username=order.student_username,
            )
            return order

        try:
            self.notifier.notify_status_changed(
                email=email,
                payment_id=order.payment_id,
                shop_name=order.shop_username,
                status=order.status,
                total=order.total,
                link=self.order_link(order.payment_id),
                username=order.student_username,
            )
        except DependencyFailure as exc:
            logger.error(
                "Status notification could not be sent",
                order_number=order.number,
                payment_id=order.payment_id,
                status=order.status,
                error=str(exc.messages),
            )
        return order
