from decimal import Decimal

from apps.catalog.commands import (
    ProductCreateCommand,
    ProductSearchCommand,
    ProductUpdateCommand,
)


def test_search_command_defaults():
    cmd = ProductSearchCommand.from_raw({})
    assert cmd.page == 1
    assert cmd.page_size == 10
    assert cmd.ordering == ["-created_at", "-id"]
    assert cmd.window.offset == 0


def test_search_command_parses_filters_and_sort():
    cmd = ProductSearchCommand.from_raw(
        {
            "search": "  Lamp ",
            "category": "Furniture",
            "min_price": "5",
            "max_price": 20,
            "sort_by": "price",
            "sort_order": "asc",
            "page": 2,
            "limit": 5,
        }
    )
    assert cmd.search == "Lamp"
    assert cmd.min_price == Decimal("5")
    assert cmd.max_price == Decimal("20")
    assert cmd.ordering == ["price", "id"]
    assert cmd.window.offset == 5


def test_cache_token_distinguishes_filters_but_not_case():
    a = ProductSearchCommand.from_raw({"search": "Lamp"})
    b = ProductSearchCommand.from_raw({"search": "lamp"})
    c = ProductSearchCommand.from_raw({"search": "lamp", "page": 2})
    assert a.cache_token() == b.cache_token()
    assert a.cache_token() != c.cache_token()


def test_create_command_strips_and_drops_blank_tags():
    cmd = ProductCreateCommand.from_raw(
        {
            "title": " Chair ",
            "description": "Oak",
            "category": "Furniture",
            "price": Decimal("12.50"),
            "condition": "Good",
            "tags": ["wood", " ", "oak "],
        }
    )
    assert cmd.title == "Chair"
    assert cmd.tags == ["wood", "oak"]
    assert cmd.images == []
    assert cmd.location == {}


def test_update_command_only_sets_provided_fields():
    cmd = ProductUpdateCommand.from_raw(
        7, {"price": Decimal("3"), "is_available": False, "title": ""}
    )
    changes = cmd.changes()
    assert changes["price"] == Decimal("3")
    assert changes["is_available"] is False
    assert changes["title"] is None
    assert changes["tags"] is None


def test_update_command_keeps_empty_collections_to_clear_them():
    cmd = ProductUpdateCommand.from_raw(7, {"tags": [], "images": [], "location": {}})
    changes = cmd.changes()
    assert changes["tags"] == []
    assert changes["images"] == []
    assert changes["location"] == {}
