"""PrintOrder aggregate: a print job a student placed with a shop.

The request snapshot is fixed when the order is placed; only ``status``
moves afterwards, and it moves exactly once.

State Machine:
    PROCESSING → COMPLETED
    PROCESSING → FAILED
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Auto, Boolean, DateTime, Float, Integer, String, Text

from printing.domain import printing
from printing.exceptions import InvalidStateError
from printing.order.events import OrderPlaced, OrderStatusChanged
from printing.shared.options import ColorMode, Orientation, PaperSize


class OrderStatus(Enum):
    PROCESSING = "Processing"
    COMPLETED = "Completed"
    FAILED = "Failed"


_VALID_TRANSITIONS = {
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED, OrderStatus.FAILED},
    OrderStatus.COMPLETED: set(),  # Terminal
    OrderStatus.FAILED: set(),  # Terminal
}

TERMINAL_STATUSES = frozenset(status for status, targets in _VALID_TRANSITIONS.items() if not targets)


def parse_terminal_status(value) -> OrderStatus:
    """Map a requested status string onto a terminal OrderStatus."""
    try:
        status = OrderStatus(value)
    except ValueError:
        status = None
    if status not in TERMINAL_STATUSES:
        allowed = ", ".join(sorted(s.value for s in TERMINAL_STATUSES))
        raise ValidationError({"status": [f"Status must be one of: {allowed}"]})
    return status


def parse_documents(value) -> list[str]:
    """Decode the document references of an order request."""
    try:
        documents = json.loads(value) if isinstance(value, str) else value
    except json.JSONDecodeError:
        raise ValidationError({"documents": ["Documents must be a JSON list"]}) from None
    if not isinstance(documents, list) or not documents:
        raise ValidationError({"documents": ["At least one document is required"]})
    if not all(isinstance(doc, str) and doc.strip() for doc in documents):
        raise ValidationError({"documents": ["Document references must be non-empty strings"]})
    return documents


@printing.aggregate
class PrintOrder:
    id = Auto(identifier=True)
    number = Integer(unique=True, min_value=1)  # Sequential order number shown to users
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
    payment_id = String(required=True, max_length=255, unique=True)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PROCESSING.value,
    )
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        student_username,
        shop_username,
        copies,
        page_size,
        total_pages,
        documents,
        color_mode,
        total,
        payment_id,
        number=None,
        specific_pages=None,
        orientation=None,
        binding=False,
        comments=None,
        front_page_special=False,
        front_and_back=False,
    ):
        """Snapshot a print request as a new order in Processing state."""
        if not payment_id or not str(payment_id).strip():
            raise ValidationError({"payment_id": ["Payment id is required"]})

        now = datetime.now(UTC)
        order = cls(
            number=number,
            student_username=student_username,
            shop_username=shop_username,
            copies=copies,
            page_size=page_size,
            total_pages=total_pages,
            specific_pages=specific_pages or None,
            orientation=orientation or Orientation.PORTRAIT.value,
            binding=bool(binding),
            documents=json.dumps(parse_documents(documents)),
            comments=comments,
            color_mode=color_mode,
            front_page_special=bool(front_page_special),
            front_and_back=bool(front_and_back),
            total=total,
            payment_id=payment_id,
            status=OrderStatus.PROCESSING.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_number=number,
                payment_id=payment_id,
                student_username=student_username,
                shop_username=shop_username,
                total=total,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    @property
    def is_terminal(self) -> bool:
        return OrderStatus(self.status) in TERMINAL_STATUSES

    def transition_to(self, target_status: OrderStatus):
        """Move the order to ``target_status``.

        A terminal order never changes again, even to the status it already has.
        """
        current = OrderStatus(self.status)
        if current in TERMINAL_STATUSES:
            raise InvalidStateError(
                {"status": [f"Order {self.payment_id} is already {current.value} and cannot become {target_status.value}"]}
            )
        if target_status not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

        now = datetime.now(UTC)
        self.status = target_status.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_number=self.number,
                payment_id=self.payment_id,
                shop_username=self.shop_username,
                previous_status=current.value,
                status=target_status.value,
                changed_at=now,
            )
        )

    def complete(self):
        """The shop printed and handed over the job."""
        self.transition_to(OrderStatus.COMPLETED)

    def fail(self):
        """The shop could not fulfil the job."""
        self.transition_to(OrderStatus.FAILED)

    def document_list(self) -> list[str]:
        return json.loads(self.documents) if self.documents else []
