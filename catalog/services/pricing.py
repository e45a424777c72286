from __future__ import annotations

"""Price and build-time rules applied to every catalog record."""

import math
from typing import Optional, Union

from catalog.schemas import CatalogConfig, ProductType, TypeConfig
from catalog.settings import DEFAULT_TEMPLATE_ONLY_PRICE, PIECES_PER_BUILD_HOUR

Number = Union[int, float]


def _as_number(value: Number) -> Number:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def compute_build_hours(pieces: int) -> int:
    """Hours needed to assemble ``pieces``, halves rounded up (450 -> 2)."""

    return math.floor(pieces / PIECES_PER_BUILD_HOUR + 0.5)


def compute_base_price(type_config: TypeConfig, pieces: int, custom_price: Optional[int]) -> Number:
    if custom_price is not None:
        return custom_price
    return _as_number(type_config.unit_price * pieces)


def round_up_to_end_in_90(price: Number) -> int:
    """Round a price up so its last two digits are 90.

    Examples: 1718 -> 1790, 1700 -> 1790, 1750 -> 1790, 85 -> 90, 1790 -> 1790.
    """
    if price < 90:
        return 90

    if price % 10 == 0 and (price // 10) % 10 == 9:
        return int(price)

    next_ten = math.ceil(price / 10) * 10
    if next_ten % 100 == 0:
        return next_ten + 90
    return (next_ten // 100) * 100 + 90


def compute_price(
    product_type: ProductType,
    type_config: TypeConfig,
    pieces: int,
    custom_price: Optional[int] = None,
) -> Number:
    price = compute_base_price(type_config, pieces, custom_price)
    if product_type.rounds_to_90:
        return round_up_to_end_in_90(price)
    return price


def template_only_price(config: CatalogConfig) -> int:
    """Price of the "digital template only" add-on offered next to type 1 kits."""

    base = config.type_config(ProductType.KIT).template_only_price or DEFAULT_TEMPLATE_ONLY_PRICE
    return round_up_to_end_in_90(base)
