from typing import Optional, Tuple

from models.category import Category, CategorySelector
from services.filter_service import parse_selector
from utils.exceptions import ValidationError


class CallbackData:
    @staticmethod
    def create_menu_page(page: int) -> str:
        return f"menu_page_{page}"

    @staticmethod
    def parse_menu_page(callback_data: str) -> Optional[int]:
        if callback_data == "menu_list":
            return 0
        if not callback_data.startswith("menu_page_"):
            return None
        try:
            return int(callback_data.replace("menu_page_", "", 1))
        except ValueError:
            return None

    @staticmethod
    def create_delete_dish(dish_id: str) -> str:
        return f"delete_dish_{dish_id}"

    @staticmethod
    def parse_delete_dish(callback_data: str) -> Optional[str]:
        if not callback_data.startswith("delete_dish_") or callback_data.startswith("delete_dish_confirm_"):
            return None
        dish_id = callback_data.replace("delete_dish_", "", 1)
        return dish_id or None

    @staticmethod
    def create_delete_dish_confirm(dish_id: str) -> str:
        return f"delete_dish_confirm_{dish_id}"

    @staticmethod
    def parse_delete_dish_confirm(callback_data: str) -> Optional[str]:
        if not callback_data.startswith("delete_dish_confirm_"):
            return None
        dish_id = callback_data.replace("delete_dish_confirm_", "", 1)
        return dish_id or None

    @staticmethod
    def create_select_category(category: Category) -> str:
        return f"select_category_{category.value}"

    @staticmethod
    def parse_select_category(callback_data: str) -> Optional[Category]:
        if not callback_data.startswith("select_category_"):
            return None
        try:
            return Category(callback_data.replace("select_category_", "", 1))
        except ValueError:
            return None

    @staticmethod
    def create_filter(selector: CategorySelector, page: int = 0) -> str:
        value = selector.value if isinstance(selector, Category) else selector
        if page:
            return f"filter_{value}_{page}"
        return f"filter_{value}"

    @staticmethod
    def parse_filter(callback_data: str) -> Optional[Tuple[CategorySelector, int]]:
        """filter_<selector> or filter_<selector>_<page>"""
        if not callback_data.startswith("filter_"):
            return None
        value = callback_data.replace("filter_", "", 1)
        page = 0
        if "_" in value:
            value, page_str = value.rsplit("_", 1)
            try:
                page = int(page_str)
            except ValueError:
                return None
        try:
            return parse_selector(value), page
        except ValidationError:
            return None
