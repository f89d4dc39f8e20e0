import math
import pytest
from models.category import Category
from services.menu_service import MenuCollection
from utils.exceptions import ValidationError, ValidationErrorCode

@pytest.fixture
def menu():
    return MenuCollection()

def test_add_dish(menu):
    dish = menu.add("  Grilled Salmon ", " With lemon butter ", "Mains", 185.0)

    assert dish.name == "Grilled Salmon"
    assert dish.description == "With lemon butter"
    assert dish.category is Category.MAINS
    assert dish.price == 185.0
    assert menu.count() == 1
    assert menu.list() == (dish,)

def test_add_accepts_text_price_and_none_description(menu):
    dish = menu.add("Lemonade", None, Category.DRINKS, "25,50")
    assert dish.price == 25.5
    assert dish.description == ""

def test_add_prepends(menu):
    first = menu.add("Dish 1", "", "Starters", 10)
    second = menu.add("Dish 2", "", "Mains", 20)
    third = menu.add("Dish 3", "", "Dessert", 30)

    assert [d.id for d in menu.list()] == [third.id, second.id, first.id]

def test_ids_unique_and_increasing(menu):
    dishes = [menu.add(f"Dish {i}", "", "Drinks", 1) for i in range(200)]
    ids = [int(d.id) for d in dishes]
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)

def test_ids_not_reused_after_remove(menu):
    dish = menu.add("Dish", "", "Mains", 1)
    menu.remove(dish.id)
    again = menu.add("Dish", "", "Mains", 1)
    assert again.id != dish.id

@pytest.mark.parametrize("name,price,category,code", [
    ("", 10, "Mains", ValidationErrorCode.EMPTY_NAME),
    ("   ", 10, "Mains", ValidationErrorCode.EMPTY_NAME),
    (None, 10, "Mains", ValidationErrorCode.EMPTY_NAME),
    (123, 10, "Mains", ValidationErrorCode.INVALID_NAME),
    ("x" * 101, 10, "Mains", ValidationErrorCode.INVALID_NAME),
    ("Dish", 0, "Mains", ValidationErrorCode.INVALID_PRICE),
    ("Dish", -5, "Mains", ValidationErrorCode.INVALID_PRICE),
    ("Dish", "abc", "Mains", ValidationErrorCode.INVALID_PRICE),
    ("Dish", math.nan, "Mains", ValidationErrorCode.INVALID_PRICE),
    ("Dish", math.inf, "Mains", ValidationErrorCode.INVALID_PRICE),
    ("Dish", 10, "Soups", ValidationErrorCode.INVALID_CATEGORY),
    ("Dish", 10, "All", ValidationErrorCode.INVALID_CATEGORY),
])
def test_add_invalid_leaves_collection_unchanged(menu, name, price, category, code):
    existing = menu.add("Existing", "", "Starters", 50)

    with pytest.raises(ValidationError) as exc_info:
        menu.add(name, "", category, price)

    assert exc_info.value.code == code
    assert menu.count() == 1
    assert menu.list() == (existing,)

@pytest.mark.parametrize("description", [5, ["soup"], "x" * 301])
def test_add_invalid_description(menu, description):
    with pytest.raises(ValidationError) as exc_info:
        menu.add("Dish", description, "Mains", 10)
    assert exc_info.value.code == ValidationErrorCode.INVALID_DESCRIPTION
    assert menu.count() == 0

def test_description_at_limit_is_accepted(menu):
    dish = menu.add("Dish", "x" * 300, "Mains", 10)
    assert len(dish.description) == 300

def test_name_checked_before_price(menu):
    with pytest.raises(ValidationError) as exc_info:
        menu.add("", "", "Soups", -1)
    assert exc_info.value.reason == "empty_name"

def test_remove_existing(menu):
    keep = menu.add("Keep", "", "Mains", 100)
    drop = menu.add("Drop", "", "Mains", 100)

    menu.remove(drop.id)

    assert menu.count() == 1
    assert menu.list() == (keep,)
    assert drop.id not in menu

def test_remove_unknown_is_noop(menu):
    dish = menu.add("Dish", "", "Mains", 100)
    before = menu.list()

    menu.remove("does-not-exist")
    assert menu.list() == before
    assert menu.count() == 1

    menu.remove(dish.id)
    menu.remove(dish.id)
    assert menu.count() == 0

def test_add_then_remove_restores_state(menu):
    menu.add("A", "", "Starters", 10)
    menu.add("B", "", "Mains", 20)
    before = menu.list()

    dish = menu.add("C", "", "Drinks", 30)
    menu.remove(dish.id)

    assert menu.list() == before
    assert menu.count() == 2

def test_list_is_snapshot(menu):
    snapshot = menu.list()
    menu.add("Dish", "", "Mains", 100)
    assert snapshot == ()
    assert isinstance(menu.list(), tuple)

def test_count_matches_len(menu):
    for i in range(3):
        menu.add(f"Dish {i}", "", "Mains", 10)
    assert menu.count() == len(menu) == len(menu.list()) == 3
    assert list(menu) == list(menu.list())

def test_get(menu):
    dish = menu.add("Dish", "", "Mains", 100)
    assert menu.get(dish.id) is dish
    assert menu.get("missing") is None

def test_update_dish(menu):
    older = menu.add("Older", "", "Starters", 10)
    dish = menu.add("Original Name", "Original Desc", "Mains", 100)

    updated = menu.update(dish.id, name="Updated Name", price="150")

    assert updated is not None
    assert updated.id == dish.id
    assert updated.created_at == dish.created_at
    assert updated.name == "Updated Name"
    assert updated.price == 150.0
    assert updated.description == "Original Desc"
    assert menu.list() == (updated, older)

def test_update_missing_returns_none(menu):
    assert menu.update("missing", name="X") is None

def test_update_invalid_keeps_dish(menu):
    dish = menu.add("Dish", "", "Mains", 100)

    with pytest.raises(ValidationError) as exc_info:
        menu.update(dish.id, price=-1)

    assert exc_info.value.code == ValidationErrorCode.INVALID_PRICE
    assert menu.get(dish.id) is dish

def test_update_unknown_field(menu):
    dish = menu.add("Dish", "", "Mains", 100)
    with pytest.raises(TypeError):
        menu.update(dish.id, id="other")
