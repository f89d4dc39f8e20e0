import enum
from typing import Literal, Union

from utils.exceptions import ValidationError, ValidationErrorCode

ALL_CATEGORIES = "All"


class Category(str, enum.Enum):
    STARTERS = "Starters"
    MAINS = "Mains"
    DESSERT = "Dessert"
    DRINKS = "Drinks"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                ValidationErrorCode.INVALID_CATEGORY,
                f"Unknown category: {value!r}"
            ) from None


CategorySelector = Union[Category, Literal["All"]]
