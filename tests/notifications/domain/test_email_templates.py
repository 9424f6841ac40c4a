"""Tests for the Printz email templates."""

import pytest
from notifications.templates import TEMPLATE_REGISTRY, get_template
from notifications.templates.order_confirmation import OrderConfirmationTemplate
from notifications.templates.order_status_update import OrderStatusUpdateTemplate


class TestRegistry:
    def test_both_templates_registered(self):
        assert set(TEMPLATE_REGISTRY) == {"order_confirmation", "order_status_update"}
        assert get_template("order_confirmation") is OrderConfirmationTemplate

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            get_template("password_reset")


class TestOrderConfirmation:
    def test_renders_payment_and_total_in_rupees(self):
        content = OrderConfirmationTemplate.render(
            {"payment_id": "pay_123", "total": 50.0, "username": "asha", "shop_name": "campus-prints"}
        )
        assert content["subject"] == "Order Confirmation"
        assert "pay_123" in content["body"]
        assert "50.0 Rs" in content["body"]
        assert "The Printz Team" in content["body"]
        assert "<strong>pay_123</strong>" in content["html_body"]

    def test_html_escapes_user_text(self):
        content = OrderConfirmationTemplate.render({"payment_id": "p1", "total": 1, "username": "<b>x</b>"})
        assert "<b>x</b>" not in content["html_body"]
        assert "&lt;b&gt;x&lt;/b&gt;" in content["html_body"]


class TestOrderStatusUpdate:
    def test_completed_order(self):
        content = OrderStatusUpdateTemplate.render(
            {
                "payment_id": "pay_123",
                "status": "Completed",
                "total": 50.0,
                "username": "asha",
                "shop_name": "campus-prints",
                "link": "https://printz.test/orders/pay_123",
            }
        )
        assert content["subject"] == "Order pay_123 Completed"
        assert "ready" in content["body"]
        assert "https://printz.test/orders/pay_123" in content["body"]
        assert 'href="https://printz.test/orders/pay_123"' in content["html_body"]

    def test_failed_order_without_link(self):
        content = OrderStatusUpdateTemplate.render({"payment_id": "pay_9", "status": "Failed"})
        assert "could not complete" in content["body"]
        assert "View your order" not in content["body"]
