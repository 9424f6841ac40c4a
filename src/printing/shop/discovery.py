"""Student-facing shop listing."""

from protean.utils.globals import current_domain

from printing.shop.shop import Shop
from printing.utils.queries import fetch_all


def list_active_shops() -> list[Shop]:
    """Shops currently accepting orders, ordered by username."""
    query = current_domain.repository_for(Shop)._dao.query.filter(active=True)
    return fetch_all(query, order_by="username")
