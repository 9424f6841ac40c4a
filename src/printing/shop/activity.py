"""Shop activity flag: command, handler and lookup."""

import structlog
from protean import handle
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from printing.domain import printing
from printing.shop.shop import Shop

logger = structlog.get_logger(__name__)


@printing.command(part_of="Shop")
class SetShopActivity:
    shop_username = String(required=True, max_length=50)
    active = Boolean(required=True)


@printing.command_handler(part_of=Shop)
class SetShopActivityHandler:
    @handle(SetShopActivity)
    def set_shop_activity(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.get(command.shop_username)
        shop.set_activity(command.active)
        repo.add(shop)
        logger.info("Shop activity changed", shop_username=shop.username, active=shop.active)
        return shop.active


def get_activity(shop_username: str) -> bool:
    return bool(current_domain.repository_for(Shop).get(shop_username).active)
