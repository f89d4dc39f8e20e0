import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

from models.category import Category

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 300


def parse_price(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return None
        try:
            value = Decimal(text)
        except InvalidOperation:
            return None
    if not isinstance(value, (Decimal, int, float)):
        return None
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def validate_name(name: Any, max_length: int = MAX_NAME_LENGTH) -> Tuple[bool, str]:
    if name is not None and not isinstance(name, str):
        return False, "Dish name must be text"
    if name is None or not name.strip():
        return False, "Dish name cannot be empty"
    if len(name.strip()) > max_length:
        return False, f"Dish name is too long (max {max_length} characters)"
    return True, ""


def validate_description(description: Any, max_length: int = MAX_DESCRIPTION_LENGTH) -> Tuple[bool, str]:
    if description is None:
        return True, ""
    if not isinstance(description, str):
        return False, "Description must be text"
    if len(description.strip()) > max_length:
        return False, f"Description is too long (max {max_length} characters)"
    return True, ""


def validate_price(value: Any) -> Tuple[bool, str]:
    price = parse_price(value)
    if price is None or not math.isfinite(price):
        return False, "Price must be a number, e.g. 185.00"
    if price <= 0:
        return False, "Price must be greater than 0"
    return True, ""


def validate_category(value: Any) -> Tuple[bool, str]:
    if isinstance(value, Category):
        return True, ""
    if isinstance(value, str) and value in {c.value for c in Category}:
        return True, ""
    allowed = ", ".join(c.value for c in Category)
    return False, f"Category must be one of: {allowed}"
