"""Print options shared by shop price catalogs and print orders."""

from enum import Enum


class PaperSize(Enum):
    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    A6 = "A6"


class ColorMode(Enum):
    GRAYSCALE = "Grayscale"
    COLOR = "Color"


class Orientation(Enum):
    PORTRAIT = "Portrait"
    LANDSCAPE = "Landscape"


def price_field(size: PaperSize, mode: ColorMode) -> str:
    """Name of the catalog field holding the unit price for ``size`` in ``mode``."""
    return f"{size.value.lower()}_{mode.value.lower()}"


# a1_grayscale, a1_color, ... a6_color
UNIT_PRICE_FIELDS = tuple(price_field(size, mode) for size in PaperSize for mode in ColorMode)

PRICE_SHEET_FIELDS = UNIT_PRICE_FIELDS + ("binding_cost",)
