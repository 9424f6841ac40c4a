"""Repository for the PrintOrder aggregate."""

from protean.exceptions import ObjectNotFoundError

from printing.domain import printing
from printing.order.order import PrintOrder
from printing.shared.clock import as_utc
from printing.utils.queries import fetch_all


@printing.repository(part_of=PrintOrder)
class PrintOrderRepository:
    """Lookups by payment id, order number, requester and shop on top of the standard CRUD."""

    def find_by_payment_id(self, payment_id: str) -> PrintOrder:
        orders = self._dao.query.filter(payment_id=payment_id).all().items
        if not orders:
            raise ObjectNotFoundError({"payment_id": [f"No order found for payment id '{payment_id}'"]})
        return orders[0]

    def find_by_number(self, number: int) -> PrintOrder:
        orders = self._dao.query.filter(number=number).all().items
        if not orders:
            raise ObjectNotFoundError({"number": [f"No order numbered {number}"]})
        return orders[0]

    def payment_id_taken(self, payment_id: str) -> bool:
        return bool(self._dao.query.filter(payment_id=payment_id).all().items)

    def next_number(self) -> int:
        """One past the highest order number in the store.

        Two writers racing for the same number are stopped by the unique
        constraint on ``number``.
        """
        latest = self._dao.query.order_by("-number").limit(1).all().items
        if not latest or latest[0].number is None:
            return 1
        return latest[0].number + 1

    def for_student(self, username: str) -> list[PrintOrder]:
        """Orders placed by ``username``, most recent first."""
        orders = fetch_all(self._dao.query.filter(student_username=username), order_by="number")
        return sorted(orders, key=lambda order: (as_utc(order.created_at), order.number), reverse=True)

    def for_shop(self, shop_username: str) -> list[PrintOrder]:
        """Orders addressed to ``shop_username``, oldest first."""
        orders = fetch_all(self._dao.query.filter(shop_username=shop_username), order_by="number")
        return sorted(orders, key=lambda order: (as_utc(order.created_at), order.number))
