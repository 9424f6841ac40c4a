"""Printing domain API package."""

from printing.api.errors import register_error_handlers
from printing.api.routes import get_lifecycle, order_router, shop_router, student_router

__all__ = ["order_router", "shop_router", "student_router", "get_lifecycle", "register_error_handlers"]
