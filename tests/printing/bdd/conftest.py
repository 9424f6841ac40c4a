"""Shared BDD fixtures and step definitions for the printing domain."""

import pytest
from printing.order.order import PrintOrder
from printing.order.placement import PlaceOrder
from printing.shop.registration import RegisterShop
from printing.student.registration import RegisterStudent
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a registered student "{username}"'))
def registered_student(username):
    current_domain.process(
        RegisterStudent(username=username, email=f"{username}@college.example"),
        asynchronous=False,
    )


@given(parsers.cfparse('a registered shop "{username}"'))
def registered_shop(username):
    current_domain.process(
        RegisterShop(username=username, email=f"{username}@shops.example"),
        asynchronous=False,
    )


@given(parsers.cfparse('"{username}" has placed an order with payment id "{payment_id}"'))
def placed_order(lifecycle, order_request, username, payment_id):
    lifecycle.place_order(PlaceOrder(**order_request(student_username=username, payment_id=payment_id)))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order "{payment_id}" is "{status}"'))
def order_has_status(payment_id, status):
    order = current_domain.repository_for(PrintOrder).find_by_payment_id(payment_id)
    assert order.status == status
