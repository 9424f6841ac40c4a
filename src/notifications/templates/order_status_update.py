"""Order status update template: sent when a shop completes or fails an order."""

from html import escape

_STATUS_LINES = {
    "Completed": "Your print order is ready. Please collect it from the shop.",
    "Failed": "Unfortunately the shop could not complete your print order.",
}


class OrderStatusUpdateTemplate:
    message_type = "order_status_update"

    @staticmethod
    def render(context: dict) -> dict:
        payment_id = context.get("payment_id", "N/A")
        status = context.get("status", "Updated")
        total = context.get("total", 0)
        username = context.get("username") or "Valued Customer"
        shop_name = context.get("shop_name", "your print shop")
        link = context.get("link")
        status_line = _STATUS_LINES.get(status, f"Your print order is now {status}.")

        body = (
            f"Dear {username},\n\n"
            f"{status_line}\n\n"
            f"Shop: {shop_name}\n"
            f"Payment ID: {payment_id}\n"
            f"Status: {status}\n"
            f"Total Amount: {total} Rs\n"
        )
        html_link = ""
        if link:
            body += f"\nView your order: {link}\n"
            html_link = f'<p><a href="{escape(link)}">View your order</a></p>'
        body += "\nBest Regards,\nThe Printz Team"

        return {
            "subject": f"Order {payment_id} {status}",
            "body": body,
            "html_body": (
                '<div style="font-family: Arial, sans-serif; line-height: 1.6;">'
                f'<h2 style="color: #4CAF50;">Order {escape(str(status))}</h2>'
                f"<p>Dear {escape(str(username))},</p>"
                f"<p>{escape(status_line)}</p>"
                "<table>"
                f"<tr><td>Shop:</td><td>{escape(str(shop_name))}</td></tr>"
                f"<tr><td>Payment ID:</td><td><strong>{escape(str(payment_id))}</strong></td></tr>"
                f"<tr><td>Total Amount:</td><td><strong>{escape(str(total))} Rs</strong></td></tr>"
                "</table>"
                f"{html_link}"
                "<p>Best Regards,<br>The Printz Team</p>"
                "</div>"
            ),
        }
