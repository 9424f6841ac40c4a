"""Shop price catalog: publish command, handler and the price lookup."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, String
from protean.utils.globals import current_domain

from printing.domain import printing
from printing.shop.shop import PriceCatalog, Shop

logger = structlog.get_logger(__name__)


@printing.command(part_of="Shop")
class SetShopPrices:
    """Replace a shop's whole price catalog. Every price is mandatory."""

    shop_username = String(required=True, max_length=50)
    a1_grayscale = Float(required=True, min_value=0.0)
    a1_color = Float(required=True, min_value=0.0)
    a2_grayscale = Float(required=True, min_value=0.0)
    a2_color = Float(required=True, min_value=0.0)
    a3_grayscale = Float(required=True, min_value=0.0)
    a3_color = Float(required=True, min_value=0.0)
    a4_grayscale = Float(required=True, min_value=0.0)
    a4_color = Float(required=True, min_value=0.0)
    a5_grayscale = Float(required=True, min_value=0.0)
    a5_color = Float(required=True, min_value=0.0)
    a6_grayscale = Float(required=True, min_value=0.0)
    a6_color = Float(required=True, min_value=0.0)
    binding_cost = Float(required=True, min_value=0.0)


@printing.command_handler(part_of=Shop)
class SetShopPricesHandler:
    @handle(SetShopPrices)
    def set_shop_prices(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_username)

        catalog = PriceCatalog(
            a1_grayscale=command.a1_grayscale,
            a1_color=command.a1_color,
            a2_grayscale=command.a2_grayscale,
            a2_color=command.a2_color,
            a3_grayscale=command.a3_grayscale,
            a3_color=command.a3_color,
            a4_grayscale=command.a4_grayscale,
            a4_color=command.a4_color,
            a5_grayscale=command.a5_grayscale,
            a5_color=command.a5_color,
            a6_grayscale=command.a6_grayscale,
            a6_color=command.a6_color,
            binding_cost=command.binding_cost,
        )
        # One aggregate save inside the handler's unit of work: readers never
        # see a half-replaced catalog.
        shop.publish_prices(catalog)
        repo.add(shop)
        logger.info("Shop prices published", shop_username=shop.username)


def get_prices(shop_username: str) -> dict[str, float]:
    """Return the 13-field price sheet of an active shop.

    Raises:
        ObjectNotFoundError: the shop does not exist or is inactive.
    """
    shop = current_domain.repository_for(Shop).get(shop_username)
    if not shop.active:
        raise ObjectNotFoundError({"shop": [f"Shop '{shop_username}' is not available"]})
    return shop.price_sheet()
