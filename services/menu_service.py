import time
from dataclasses import replace
from typing import Any, Iterator, List, Optional, Tuple, Union

from loguru import logger

from models.category import Category
from models.dish import Dish
from utils.exceptions import ValidationError, ValidationErrorCode
from utils.validators import parse_price, validate_description, validate_name, validate_price

UPDATABLE_FIELDS = ("name", "description", "category", "price")


def _validated_fields(
    name: Optional[str],
    description: Optional[str],
    category: Union[Category, str],
    price: Any
) -> Tuple[str, str, Category, float]:
    is_valid, error_msg = validate_name(name)
    if not is_valid:
        blank = name is None or (isinstance(name, str) and not name.strip())
        code = ValidationErrorCode.EMPTY_NAME if blank else ValidationErrorCode.INVALID_NAME
        raise ValidationError(code, error_msg)

    is_valid, error_msg = validate_description(description)
    if not is_valid:
        raise ValidationError(ValidationErrorCode.INVALID_DESCRIPTION, error_msg)

    is_valid, error_msg = validate_price(price)
    if not is_valid:
        raise ValidationError(ValidationErrorCode.INVALID_PRICE, error_msg)

    return name.strip(), (description or "").strip(), Category.parse(category), parse_price(price)


class MenuCollection:
    """
    In-memory list of dishes, newest first.

    The only place where dishes are created or removed. One instance lives
    for the whole process and is handed to handlers through the dispatcher.
    """

    def __init__(self) -> None:
        self._dishes: List[Dish] = []
        self._last_id = 0

    def _next_id(self) -> str:
        # timestamp-based, bumped so ids stay strictly increasing
        self._last_id = max(time.time_ns(), self._last_id + 1)
        return str(self._last_id)

    def add(
        self,
        name: Optional[str],
        description: Optional[str],
        category: Union[Category, str],
        price: Any
    ) -> Dish:
        try:
            name, description, category, price = _validated_fields(name, description, category, price)
        except ValidationError as e:
            logger.debug(f"Dish rejected ({e.reason}): {e.message}")
            raise

        dish = Dish(
            id=self._next_id(),
            name=name,
            description=description,
            category=category,
            price=price
        )
        self._dishes.insert(0, dish)
        logger.info(f"Dish added: {dish.name} [{dish.category.value}] id={dish.id}")
        return dish

    def remove(self, dish_id: str) -> None:
        for index, dish in enumerate(self._dishes):
            if dish.id == dish_id:
                del self._dishes[index]
                logger.info(f"Dish removed: {dish.name} id={dish_id}")
                return
        logger.debug(f"Remove ignored, no dish with id={dish_id}")

    def get(self, dish_id: str) -> Optional[Dish]:
        for dish in self._dishes:
            if dish.id == dish_id:
                return dish
        return None

    def update(self, dish_id: str, **kwargs: Any) -> Optional[Dish]:
        unknown = set(kwargs) - set(UPDATABLE_FIELDS)
        if unknown:
            raise TypeError(f"Cannot update dish fields: {', '.join(sorted(unknown))}")

        for index, dish in enumerate(self._dishes):
            if dish.id != dish_id:
                continue

            merged = {key: kwargs.get(key, getattr(dish, key)) for key in UPDATABLE_FIELDS}
            try:
                name, description, category, price = _validated_fields(**merged)
            except ValidationError as e:
                logger.debug(f"Dish update rejected ({e.reason}): {e.message}")
                raise

            updated = replace(dish, name=name, description=description, category=category, price=price)
            self._dishes[index] = updated
            logger.info(f"Dish updated: {updated.name} id={dish_id}")
            return updated
        return None

    def list(self) -> Tuple[Dish, ...]:
        return tuple(self._dishes)

    def count(self) -> int:
        return len(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)

    def __iter__(self) -> Iterator[Dish]:
        return iter(self.list())

    def __contains__(self, dish_id: object) -> bool:
        return any(dish.id == dish_id for dish in self._dishes)
