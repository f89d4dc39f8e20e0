from typing import Dict, Iterable, List

from models.category import ALL_CATEGORIES, Category, CategorySelector
from models.dish import Dish
from utils.exceptions import ValidationError, ValidationErrorCode


def parse_selector(value: str) -> CategorySelector:
    if value == ALL_CATEGORIES:
        return ALL_CATEGORIES
    try:
        return Category(value)
    except ValueError:
        raise ValidationError(
            ValidationErrorCode.INVALID_CATEGORY,
            f"Unknown filter: {value!r}"
        ) from None


def filter_by_category(dishes: Iterable[Dish], selector: CategorySelector) -> List[Dish]:
    """Dishes matching the selector, in their original order. "All" keeps everything."""
    if selector == ALL_CATEGORIES:
        return list(dishes)
    return [dish for dish in dishes if dish.category == selector]


def count_by_category(dishes: Iterable[Dish]) -> Dict[Category, int]:
    counts = {category: 0 for category in Category}
    for dish in dishes:
        counts[dish.category] += 1
    return counts
