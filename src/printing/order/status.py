"""Order status update: command and handler.

Shopkeepers move a Processing order to Completed or Failed. The requester
must be resolvable before anything is written: a terminal status nobody can
be told about is refused instead of being recorded silently.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import String
from protean.utils.globals import current_domain

from printing.domain import printing
from printing.exceptions import IntegrityError
from printing.order.order import PrintOrder, parse_terminal_status
from printing.student.registration import find_email

logger = structlog.get_logger(__name__)


@printing.command(part_of="PrintOrder")
class UpdateOrderStatus:
    payment_id = String(required=True, max_length=255)
    status = String(required=True, max_length=20)
    shop_username = String(max_length=50)  # Optional: restrict to one shop's orders


@printing.command_handler(part_of=PrintOrder)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        target_status = parse_terminal_status(command.status)

        repo = current_domain.repository_for(PrintOrder)
        order = repo.find_by_payment_id(command.payment_id)
        if command.shop_username and order.shop_username != command.shop_username:
            raise ObjectNotFoundError(
                {"payment_id": [f"No order found for payment id '{command.payment_id}' at shop '{command.shop_username}'"]}
            )

        order.transition_to(target_status)

        if find_email(order.student_username) is None:
            logger.error(
                "Requester of order cannot be resolved",
                order_number=order.number,
                payment_id=order.payment_id,
                student_username=order.student_username,
            )
            raise IntegrityError({"student_username": [f"No account found for requester '{order.student_username}'"]})

        # The aggregate version is checked on save: a concurrent update of the
        # same order makes this write fail instead of overwriting it.
        repo.add(order)
        logger.info(
            "Order status changed",
            order_number=order.number,
            payment_id=order.payment_id,
            status=order.status,
        )
        return order
