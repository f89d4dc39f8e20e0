from .category import Category, CategorySelector, ALL_CATEGORIES
from .dish import Dish

__all__ = [
    "Category", "CategorySelector", "ALL_CATEGORIES",
    "Dish",
]
