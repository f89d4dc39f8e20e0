import pytest
from models.category import ALL_CATEGORIES, Category
from utils.callback_data import CallbackData

class TestDeleteDish:
    def test_round_trip(self):
        data = CallbackData.create_delete_dish("1700000000000000000")
        assert data == "delete_dish_1700000000000000000"
        assert CallbackData.parse_delete_dish(data) == "1700000000000000000"

    def test_confirm_is_not_plain_delete(self):
        data = CallbackData.create_delete_dish_confirm("42")
        assert CallbackData.parse_delete_dish(data) is None
        assert CallbackData.parse_delete_dish_confirm(data) == "42"

    def test_malformed(self):
        assert CallbackData.parse_delete_dish("delete_dish_") is None
        assert CallbackData.parse_delete_dish("menu_list") is None
        assert CallbackData.parse_delete_dish_confirm("delete_dish_42") is None

    def test_fits_telegram_limit(self):
        data = CallbackData.create_delete_dish_confirm("9" * 20)
        assert len(data.encode()) <= 64

class TestSelectCategory:
    def test_parse(self):
        data = CallbackData.create_select_category(Category.DESSERT)
        assert CallbackData.parse_select_category(data) is Category.DESSERT

    def test_unknown(self):
        assert CallbackData.parse_select_category("select_category_Soups") is None
        assert CallbackData.parse_select_category("filter_Mains") is None

class TestFilter:
    def test_category(self):
        data = CallbackData.create_filter(Category.MAINS)
        assert data == "filter_Mains"
        assert CallbackData.parse_filter(data) == (Category.MAINS, 0)

    def test_all(self):
        data = CallbackData.create_filter(ALL_CATEGORIES)
        assert data == "filter_All"
        assert CallbackData.parse_filter(data) == (ALL_CATEGORIES, 0)

    def test_unknown(self):
        assert CallbackData.parse_filter("filter_Soups") is None
        assert CallbackData.parse_filter("menu_list") is None

    def test_with_page(self):
        data = CallbackData.create_filter(Category.DRINKS, 3)
        assert data == "filter_Drinks_3"
        assert CallbackData.parse_filter(data) == (Category.DRINKS, 3)

    def test_bad_page(self):
        assert CallbackData.parse_filter("filter_Mains_x") is None

class TestMenuPage:
    def test_menu_list_is_first_page(self):
        assert CallbackData.parse_menu_page("menu_list") == 0

    def test_round_trip(self):
        data = CallbackData.create_menu_page(4)
        assert data == "menu_page_4"
        assert CallbackData.parse_menu_page(data) == 4

    def test_malformed(self):
        assert CallbackData.parse_menu_page("menu_page_") is None
        assert CallbackData.parse_menu_page("filter_All") is None
