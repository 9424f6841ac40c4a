"""Template registry: maps message types to template classes.

Each template renders a subject, a plain-text body and an HTML body from a
context dict.
"""

from notifications.templates.order_confirmation import OrderConfirmationTemplate
from notifications.templates.order_status_update import OrderStatusUpdateTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    OrderConfirmationTemplate.message_type: OrderConfirmationTemplate,
    OrderStatusUpdateTemplate.message_type: OrderStatusUpdateTemplate,
}


def get_template(message_type: str):
    """Look up a template class by message type string."""
    template_cls = TEMPLATE_REGISTRY.get(message_type)
    if template_cls is None:
        raise ValueError(f"No template registered for message type: {message_type}")
    return template_cls
