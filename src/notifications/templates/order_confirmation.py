"""Order confirmation template: sent once a print order has been placed."""

from html import escape


class OrderConfirmationTemplate:
    message_type = "order_confirmation"

    @staticmethod
    def render(context: dict) -> dict:
        payment_id = context.get("payment_id", "N/A")
        total = context.get("total", 0)
        username = context.get("username") or "Valued Customer"
        shop_name = context.get("shop_name", "your print shop")
        return {
            "subject": "Order Confirmation",
            "body": (
                f"Dear {username},\n\n"
                f"Thank you for your order with {shop_name}! "
                "Your payment has been successfully processed.\n\n"
                f"Payment ID: {payment_id}\n"
                f"Total Amount: {total} Rs\n\n"
                "Your order will be processed shortly, and you will receive further updates via email.\n\n"
                "Best Regards,\nThe Printz Team"
            ),
            "html_body": (
                '<div style="font-family: Arial, sans-serif; line-height: 1.6;">'
                '<h2 style="color: #4CAF50;">Order Confirmation</h2>'
                f"<p>Dear {escape(str(username))},</p>"
                f"<p>Thank you for your order with {escape(str(shop_name))}! "
                "Your payment has been successfully processed.</p>"
                "<table>"
                f"<tr><td>Payment ID:</td><td><strong>{escape(str(payment_id))}</strong></td></tr>"
                f"<tr><td>Total Amount:</td><td><strong>{escape(str(total))} Rs</strong></td></tr>"
                "</table>"
                "<p>Your order will be processed shortly, and you will receive further updates via email.</p>"
                "<p>Best Regards,<br>The Printz Team</p>"
                "</div>"
            ),
        }
