"""Shop registration: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from printing.domain import printing
from printing.shop.shop import Shop

logger = structlog.get_logger(__name__)


@printing.command(part_of="Shop")
class RegisterShop:
    """Open a shop for a shopkeeper account created elsewhere."""

    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    phone = String(max_length=20)
    description = Text()
    details = Text()


@printing.command_handler(part_of=Shop)
class RegisterShopHandler:
    @handle(RegisterShop)
    def register_shop(self, command):
        repo = current_domain.repository_for(Shop)
        try:
            repo.get(command.username)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError({"username": ["Shop username is already taken"]})

        shop = Shop.register(
            username=command.username,
            email=command.email,
            phone=command.phone,
            description=command.description,
            details=command.details,
        )
        repo.add(shop)
        logger.info("Shop registered", shop_username=shop.username)
        return shop.username
