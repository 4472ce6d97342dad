"""Tests for menu validation and upsert-by-name."""

import threading

import pytest

from app.core.exceptions import ValidationError
from app.models import MenuCategory
from app.services import MenuStore, validate_menu_item


class TestValidation:
    """Rules are checked in order and the first failure is reported."""

    @pytest.mark.parametrize("name", [None, "", 42, ["Pizza"]])
    def test_rejects_bad_name(self, name):
        with pytest.raises(ValidationError, match="Name is required and must be a string."):
            validate_menu_item(name, 10, "Starter")

    @pytest.mark.parametrize("price", [None, 0, -1, -0.5, "10", True, float("nan"), float("inf")])
    def test_rejects_bad_price(self, price):
        with pytest.raises(ValidationError, match="Price must be a positive number."):
            validate_menu_item("Pizza", price, "Starter")

    @pytest.mark.parametrize("category", [None, "", "MainCourse", "starter", "Snack", 1])
    def test_rejects_bad_category(self, category):
        with pytest.raises(ValidationError) as exc_info:
            validate_menu_item("Pizza", 10, category)
        assert exc_info.value.message == (
            "Category must be one of Starter, Main Course, Dessert, or Beverage."
        )

    def test_name_is_checked_before_price(self):
        with pytest.raises(ValidationError, match="Name"):
            validate_menu_item("", -1, "Nope")

    def test_price_is_checked_before_category(self):
        with pytest.raises(ValidationError, match="Price"):
            validate_menu_item("Pizza", 0, "Nope")

    def test_returns_parsed_category(self):
        assert validate_menu_item("Pizza", 0.01, "Main Course") is MenuCategory.MAIN_COURSE


class TestUpsert:
    """Upsert creates by new name and updates in place by existing name."""

    def test_first_item_gets_id_one(self, menu_store: MenuStore):
        item, created = menu_store.upsert("Pizza", 10, "Main Course")
        assert created is True
        assert item.id == 1
        assert item.price == 10
        assert item.category is MenuCategory.MAIN_COURSE

    def test_existing_name_updates_in_place(self, menu_store: MenuStore):
        menu_store.upsert("Pizza", 10, "Main Course")
        item, created = menu_store.upsert("Pizza", 12, "Starter")

        assert created is False
        assert item.id == 1
        assert item.price == 12
        assert item.category is MenuCategory.STARTER
        assert len(menu_store) == 1

    def test_new_names_get_increasing_ids(self, menu_store: MenuStore):
        ids = [menu_store.upsert(name, 3, "Dessert")[0].id for name in ("A", "B", "C")]
        assert ids == [1, 2, 3]

    def test_name_match_is_case_sensitive(self, menu_store: MenuStore):
        menu_store.upsert("Pizza", 10, "Main Course")
        item, created = menu_store.upsert("pizza", 11, "Main Course")
        assert created is True
        assert item.id == 2

    def test_update_does_not_consume_an_id(self, menu_store: MenuStore):
        menu_store.upsert("Pizza", 10, "Main Course")
        menu_store.upsert("Pizza", 11, "Main Course")
        item, _ = menu_store.upsert("Soup", 4, "Starter")
        assert item.id == 2

    def test_failed_validation_leaves_menu_unchanged(self, seeded_menu: MenuStore):
        before = seeded_menu.list_items()

        with pytest.raises(ValidationError):
            seeded_menu.upsert("Pizza", -3, "Main Course")
        with pytest.raises(ValidationError):
            seeded_menu.upsert("Salad", 4, "Side")

        assert seeded_menu.list_items() == before

    def test_returned_item_is_a_snapshot(self, menu_store: MenuStore):
        item, _ = menu_store.upsert("Pizza", 10, "Main Course")
        menu_store.upsert("Pizza", 15, "Main Course")
        assert item.price == 10
        assert menu_store.find_by_id(1).price == 15


class TestLookup:
    """Listing and id lookups."""

    def test_list_is_in_insertion_order(self, seeded_menu: MenuStore):
        names = [item.name for item in seeded_menu.list_items()]
        assert names == ["Garlic Bread", "Pizza", "Tiramisu", "Coke"]

    def test_find_by_id(self, seeded_menu: MenuStore):
        assert seeded_menu.find_by_id(3).name == "Tiramisu"
        assert seeded_menu.find_by_id(99) is None

    @pytest.mark.parametrize("item_id, expected", [
        (1, True),
        (1.0, True),
        (4, True),
        (5, False),
        (0, False),
        ("1", False),
        (True, False),
        (None, False),
    ])
    def test_exists_by_id(self, seeded_menu: MenuStore, item_id, expected):
        assert seeded_menu.exists_by_id(item_id) is expected


class TestConcurrency:
    """Concurrent upserts never hand out the same id twice."""

    def test_parallel_upserts_get_unique_sequential_ids(self, menu_store: MenuStore):
        def worker(offset: int):
            for n in range(25):
                menu_store.upsert(f"Dish {offset}-{n}", 1 + n, "Starter")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [item.id for item in menu_store.list_items()]
        assert ids == list(range(1, 201))
