"""Domain events for the Shop aggregate."""

from protean.fields import Boolean, DateTime, Float, String

from printing.domain import printing


@printing.event(part_of="Shop")
class ShopRegistered:
    """A shopkeeper opened a shop."""

    __version__ = 1

    shop_username = String(required=True)
    email = String(required=True)
    registered_at = DateTime(required=True)


@printing.event(part_of="Shop")
class ShopPricesUpdated:
    """The shop replaced its full price catalog."""

    __version__ = 1

    shop_username = String(required=True)
    binding_cost = Float()
    updated_at = DateTime(required=True)


@printing.event(part_of="Shop")
class ShopActivityChanged:
    """The shop was opened to or hidden from students."""

    __version__ = 1

    shop_username = String(required=True)
    active = Boolean()
    changed_at = DateTime(required=True)
