"""Order listings for students and for the shop work queue."""

from protean.utils.globals import current_domain

from printing.order.order import PrintOrder
from printing.student.registration import privileged_usernames


def get_order(payment_id: str) -> PrintOrder:
    return current_domain.repository_for(PrintOrder).find_by_payment_id(payment_id)


def list_orders_for_student(username: str) -> list[PrintOrder]:
    """The student's orders, most recent first."""
    return current_domain.repository_for(PrintOrder).for_student(username)


def list_orders_for_shop(shop_username: str) -> list[PrintOrder]:
    """The shop's work queue.

    Orders from privileged requesters come first; within each class orders
    keep their arrival order. Requesters without an account count as
    unprivileged.
    """
    orders = current_domain.repository_for(PrintOrder).for_shop(shop_username)
    privileged = privileged_usernames(order.student_username for order in orders)
    # sorted() is stable, so arrival order survives inside each class
    return sorted(orders, key=lambda order: 0 if order.student_username in privileged else 1)
