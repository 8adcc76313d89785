import math
from typing import Any, Dict, List, Sequence

from storefront.schemas import CartItem

CURRENCY_SYMBOL = "£"


def to_minor_units(price: float) -> int:
    # round half up, 9.995 -> 1000
    return int(math.floor(price * 100 + 0.5))


def build_line_items(items: Sequence[CartItem], currency: str) -> List[Dict[str, Any]]:
    """One Stripe line item per cart entry; duplicates are not merged."""
    return [
        {
            "price_data": {
                "currency": currency,
                "product_data": {"name": item.name},
                "unit_amount": to_minor_units(item.price),
            },
            "quantity": 1,
        }
        for item in items
    ]


def format_total(amount_minor: int) -> str:
    units, pence = divmod(amount_minor, 100)
    return f"{CURRENCY_SYMBOL}{units}.{pence:02d}"


def order_total(line_items: Sequence[Dict[str, Any]]) -> str:
    return format_total(
        sum(li["price_data"]["unit_amount"] * li["quantity"] for li in line_items)
    )
