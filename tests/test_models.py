import pytest
from dataclasses import FrozenInstanceError
from datetime import timezone
from models import Category, Dish, ALL_CATEGORIES
from utils.exceptions import ValidationError, ValidationErrorCode

class TestCategory:
    def test_members_in_display_order(self):
        assert [c.value for c in Category] == ["Starters", "Mains", "Dessert", "Drinks"]

    def test_label(self):
        assert Category.DESSERT.label == "Dessert"

    def test_parse_value(self):
        assert Category.parse("Drinks") is Category.DRINKS
        assert Category.parse(Category.STARTERS) is Category.STARTERS

    def test_parse_unknown(self):
        with pytest.raises(ValidationError) as exc_info:
            Category.parse("Soups")
        assert exc_info.value.code == ValidationErrorCode.INVALID_CATEGORY

    def test_all_sentinel_not_a_member(self):
        with pytest.raises(ValidationError):
            Category.parse(ALL_CATEGORIES)

class TestDishModel:
    def test_dish_creation(self):
        dish = Dish(
            id="1",
            name="Grilled Salmon",
            description="With lemon butter",
            category=Category.MAINS,
            price=185.0
        )
        assert dish.name == "Grilled Salmon"
        assert dish.price == 185.0
        assert dish.created_at.tzinfo == timezone.utc

    def test_dish_is_immutable(self):
        dish = Dish(id="1", name="Soup", description="", category=Category.STARTERS, price=50.0)
        with pytest.raises(FrozenInstanceError):
            dish.price = 10.0

class TestValidationError:
    def test_reason(self):
        error = ValidationError(ValidationErrorCode.INVALID_PRICE, "bad price")
        assert error.reason == "invalid_price"
        assert str(error) == "bad price"

    def test_default_message(self):
        error = ValidationError(ValidationErrorCode.EMPTY_NAME)
        assert error.message == "empty_name"
