"""Domain events for the PrintOrder aggregate."""

from protean.fields import DateTime, Float, Integer, String

from printing.domain import printing


@printing.event(part_of="PrintOrder")
class OrderPlaced:
    """A student submitted a paid print order to a shop."""

    __version__ = 1

    order_number = Integer()
    payment_id = String(required=True)
    student_username = String(required=True)
    shop_username = String(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)


@printing.event(part_of="PrintOrder")
class OrderStatusChanged:
    """A processing order reached a terminal status."""

    __version__ = 1

    order_number = Integer()
    payment_id = String(required=True)
    shop_username = String(required=True)
    previous_status = String(required=True)
    status = String(required=True)
    changed_at = DateTime(required=True)
