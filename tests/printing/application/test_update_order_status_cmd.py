"""Application tests for UpdateOrderStatus through the lifecycle service."""

import pytest
from printing.exceptions import DependencyFailure, IntegrityError, InvalidStateError
from printing.order.order import OrderStatus, PrintOrder
from printing.order.placement import PlaceOrder
from printing.order.status import UpdateOrderStatus
from printing.student.registration import RegisterStudent
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


@pytest.fixture()
def placed_order(lifecycle, order_request):
    current_domain.process(
        RegisterStudent(username="asha", email="asha@college.example"),
        asynchronous=False,
    )
    lifecycle.place_order(PlaceOrder(**order_request()))
    return current_domain.repository_for(PrintOrder).find_by_payment_id("pay_123")


def _stored(payment_id="pay_123"):
    return current_domain.repository_for(PrintOrder).find_by_payment_id(payment_id)


class TestOrderScenario:
    def test_complete_then_fail_is_rejected(self, lifecycle, notifier, placed_order):
        assert placed_order.status == OrderStatus.PROCESSING.value

        updated = lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status="Completed"))
        assert updated.status == OrderStatus.COMPLETED.value
        assert len(notifier.status_changes) == 1

        with pytest.raises(InvalidStateError):
            lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status="Failed"))

        assert _stored().status == OrderStatus.COMPLETED.value
        assert len(notifier.status_changes) == 1

    def test_same_terminal_status_twice_is_rejected(self, lifecycle, placed_order):
        lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status="Failed"))
        with pytest.raises(InvalidStateError):
            lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status="Failed"))


class TestStatusNotification:
    def test_notification_carries_link_and_details(self, lifecycle, notifier, placed_order):
        lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status="Completed"))

        assert notifier.status_changes == [
            {
                "email": "asha@college.example",
                "payment_id": "pay_123",
                "shop_name": "campus-prints",
                "status": "Completed",
                "total": 50.0,
                "link": "https://printz.test/orders/pay_123",
                "username": "asha",
            }
        ]

    def test_notifier_failure_keeps_committed_status(self, lifecycle, notifier, placed_order):
        notifier.fail_with = DependencyFailure({"email": ["SMTP relay unreachable"]})

        updated = lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status="Completed"))

        assert updated.status == OrderStatus.COMPLETED.value
        assert _stored().status == OrderStatus.COMPLETED.value

    def test_requester_removed_after_commit_skips_notification(self, lifecycle, notifier, placed_order, monkeypatch):
        monkeypatch.setattr("printing.order.lifecycle.find_email", lambda username: None)

        updated = lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status="Failed"))

        assert updated.status == OrderStatus.FAILED.value
        assert _stored().status == OrderStatus.FAILED.value
        assert notifier.status_changes == []


class TestStatusUpdateErrors:
    @pytest.mark.parametrize("status", ["Processing", "Done", "completed"])
    def test_non_terminal_status_rejected(self, lifecycle, placed_order, status):
        with pytest.raises(ValidationError):
            lifecycle.update_status(UpdateOrderStatus(payment_id="pay_123", status=status))
        assert _stored().status == OrderStatus.PROCESSING.value

    def test_unknown_payment_id(self, lifecycle, placed_order):
        with pytest.raises(ObjectNotFoundError):
            lifecycle.update_status(UpdateOrderStatus(payment_id="pay_missing", status="Completed"))

    def test_order_of_another_shop_is_not_found(self, lifecycle, placed_order):
        with pytest.raises(ObjectNotFoundError):
            lifecycle.update_status(
                UpdateOrderStatus(payment_id="pay_123", status="Completed", shop_username="other-shop")
            )
        assert _stored().status == OrderStatus.PROCESSING.value

    def test_unresolvable_requester_leaves_order_untouched(self, lifecycle, notifier, order_request):
        lifecycle.place_order(PlaceOrder(**order_request(student_username="ghost", payment_id="pay_ghost")))

        with pytest.raises(IntegrityError):
            lifecycle.update_status(UpdateOrderStatus(payment_id="pay_ghost", status="Completed"))

        assert _stored("pay_ghost").status == OrderStatus.PROCESSING.value
        assert notifier.status_changes == []
