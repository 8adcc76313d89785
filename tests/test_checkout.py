from storefront.checkout import build_line_items, format_total, order_total, to_minor_units
from storefront.schemas import CartItem


def test_to_minor_units_rounds_half_up():
    assert to_minor_units(9.99) == 999
    assert to_minor_units(0.1) == 10
    assert to_minor_units(0.125) == 13
    assert to_minor_units(0) == 0


def test_format_total():
    assert format_total(999) == "£9.99"
    assert format_total(5) == "£0.05"
    assert format_total(120000) == "£1200.00"


def test_line_items_are_not_merged():
    items = [CartItem(name="Mug", price=4.5), CartItem(name="Mug", price=4.5)]

    line_items = build_line_items(items, "gbp")

    assert len(line_items) == 2
    assert line_items[0] == {
        "price_data": {"currency": "gbp", "product_data": {"name": "Mug"}, "unit_amount": 450},
        "quantity": 1,
    }
    assert order_total(line_items) == "£9.00"


def test_total_matches_sum_of_prices():
    prices = [19.99, 0.01, 5.5, 3.333]
    items = [CartItem(name=f"item-{i}", price=p) for i, p in enumerate(prices)]

    assert order_total(build_line_items(items, "gbp")) == "£28.83"
