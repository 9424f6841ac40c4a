"""Order placement: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from printing.domain import printing
from printing.order.order import PrintOrder
from printing.shared.options import ColorMode, Orientation, PaperSize

logger = structlog.get_logger(__name__)


@printing.command(part_of="PrintOrder")
class PlaceOrder:
    student_username = String(required=True, max_length=50)
    shop_username = String(required=True, max_length=50)
    copies = Integer(required=True, min_value=1)
    page_size = String(required=True, choices=PaperSize)
    total_pages = Integer(required=True, min_value=1)
    specific_pages = String(max_length=255)
    orientation = String(choices=Orientation, default=Orientation.PORTRAIT.value)
    binding = Boolean(default=False)
    documents = Text(required=True)  # JSON: list of document references
    comments = Text()
    color_mode = String(required=True, choices=ColorMode)
    front_page_special = Boolean(default=False)
    front_and_back = Boolean(default=False)
    total = Float(required=True, min_value=0.0)
    payment_id = String(required=True, max_length=255)


@printing.command_handler(part_of=PrintOrder)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        repo = current_domain.repository_for(PrintOrder)
        if repo.payment_id_taken(command.payment_id):
            raise ValidationError({"payment_id": [f"Payment id '{command.payment_id}' is already attached to an order"]})

        order = PrintOrder.place(
            student_username=command.student_username,
            shop_username=command.shop_username,
            copies=command.copies,
            page_size=command.page_size,
            total_pages=command.total_pages,
            documents=command.documents,
            color_mode=command.color_mode,
            total=command.total,
            payment_id=command.payment_id,
            number=repo.next_number(),
            specific_pages=command.specific_pages,
            orientation=command.orientation,
            binding=command.binding,
            comments=command.comments,
            front_page_special=command.front_page_special,
            front_and_back=command.front_and_back,
        )
        repo.add(order)
        logger.info(
            "Order placed",
            order_number=order.number,
            payment_id=order.payment_id,
            shop_username=order.shop_username,
            total=order.total,
        )
        return order.number
