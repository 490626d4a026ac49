from __future__ import annotations

from decimal import Decimal

from order_entry.data import CATEGORIES, ITEMS_BY_CATEGORY, MENU, categories_for, group_by_category
from order_entry.models import MenuItem


def _item(name: str, category: str, price: str = "1.00") -> MenuItem:
    return MenuItem(name=name, category=category, price=Decimal(price))


def test_default_menu_is_built_from_rows() -> None:
    assert MENU == (
        MenuItem("Beer", "Beer", Decimal("2.00")),
        MenuItem("Cola", "Refreshments", Decimal("1.75")),
    )
    assert CATEGORIES == ["Beer", "Refreshments"]
    assert ITEMS_BY_CATEGORY == {"Beer": [MENU[0]], "Refreshments": [MENU[1]]}


def test_categories_are_distinct_and_ordinal_sorted() -> None:
    catalog = [_item("Tea", "drinks"), _item("Soup", "Starters"), _item("Wine", "Drinks"), _item("Coffee", "drinks")]

    assert categories_for(catalog) == ["Drinks", "Starters", "drinks"]


def test_grouping_keeps_catalog_order_within_category() -> None:
    catalog = [_item("Tea", "Drinks"), _item("Soup", "Starters"), _item("Coffee", "Drinks")]

    grouped = group_by_category(catalog)

    assert list(grouped) == ["Drinks", "Starters"]
    assert [item.name for item in grouped["Drinks"]] == ["Tea", "Coffee"]
    assert group_by_category(catalog) == grouped


def test_same_name_in_two_categories_stays_distinct() -> None:
    catalog = [_item("Beer", "Beer", "2.00"), _item("Beer", "Specials", "1.50")]

    grouped = group_by_category(catalog)

    assert grouped["Beer"] == [catalog[0]]
    assert grouped["Specials"] == [catalog[1]]
