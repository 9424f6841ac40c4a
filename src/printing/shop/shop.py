"""Shop aggregate root with its PriceCatalog value object.

A shop is owned by one shopkeeper and identified by the shopkeeper's
username. Students only ever see shops whose ``active`` flag is set.
"""

import math
from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Float, String, Text, ValueObject

from printing.domain import printing
from printing.shared.options import PRICE_SHEET_FIELDS
from printing.shop.events import ShopActivityChanged, ShopPricesUpdated, ShopRegistered


def _price_or_zero(value) -> float:
    """Read a stored price. Missing, non-numeric and negative values read as 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or number < 0:
        return 0.0
    return number


@printing.value_object(part_of="Shop")
class PriceCatalog:
    """Unit prices per paper size and color mode, plus the flat binding surcharge.

    Every field is required: a catalog is published whole or not at all.
    """

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


@printing.aggregate
class Shop:
    username = String(identifier=True, max_length=50)
    email = String(required=True, max_length=254)
    phone = String(max_length=20)
    description = Text()
    details = Text()
    active = Boolean(default=True)
    catalog = ValueObject(PriceCatalog)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, username, email, phone=None, description=None, details=None):
        now = datetime.now(UTC)
        shop = cls(
            username=username,
            email=email,
            phone=phone,
            description=description,
            details=details,
            active=True,
            created_at=now,
            updated_at=now,
        )
        shop.raise_(
            ShopRegistered(
                shop_username=username,
                email=email,
                registered_at=now,
            )
        )
        return shop

    def publish_prices(self, catalog: PriceCatalog):
        """Replace the whole catalog."""
        self.catalog = catalog
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ShopPricesUpdated(
                shop_username=self.username,
                binding_cost=catalog.binding_cost,
                updated_at=self.updated_at,
            )
        )

    def set_activity(self, active: bool):
        self.active = active
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ShopActivityChanged(
                shop_username=self.username,
                active=active,
                changed_at=self.updated_at,
            )
        )

    def price_sheet(self) -> dict[str, float]:
        """All 13 catalog values as floats.

        A shop that never published a catalog, or a stored value that is not a
        non-negative number, reads as 0.0. Callers cannot tell "free" from
        "not configured" through this sheet.
        """
        return {field: _price_or_zero(getattr(self.catalog, field, None)) for field in PRICE_SHEET_FIELDS}
