"""
Keyboard builders for the menu, add-dish and filter screens
"""
from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from typing import Callable, Dict, List, Optional

from models.category import ALL_CATEGORIES, Category, CategorySelector
from models.dish import Dish
from utils.callback_data import CallbackData
from utils.formatters import format_price, shorten
from utils.pagination import Page


def get_back_keyboard(back_callback: str = "start", text: str = "🏠 Main menu") -> InlineKeyboardMarkup:
    """
    Keyboard with a single back button

    Args:
        back_callback: callback_data of the back button
        text: button text

    Returns:
        InlineKeyboardMarkup with the back button
    """
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text=text, callback_data=back_callback)]
    ])


def add_back_button(
    keyboard_buttons: List[List[InlineKeyboardButton]],
    back_callback: str = "start",
    text: str = "🏠 Main menu"
) -> List[List[InlineKeyboardButton]]:
    """
    Appends a back button to a copy of the given rows

    Args:
        keyboard_buttons: rows of buttons
        back_callback: callback_data of the back button
        text: button text

    Returns:
        New list of rows ending with the back button
    """
    result = keyboard_buttons.copy()
    result.append([InlineKeyboardButton(text=text, callback_data=back_callback)])
    return result


def get_main_menu_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="📋 Menu", callback_data="menu_list")],
        [InlineKeyboardButton(text="➕ Add dish", callback_data="add_dish")],
        [InlineKeyboardButton(text="🔍 Filter", callback_data=CallbackData.create_filter(ALL_CATEGORIES))],
        [InlineKeyboardButton(text="❓ Help", callback_data="help")]
    ])


def get_cancel_keyboard(cancel_callback: str = "cancel_dish_add") -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="❌ Cancel", callback_data=cancel_callback)],
        [InlineKeyboardButton(text="🏠 Main menu", callback_data="start")]
    ])


def get_category_keyboard(selected: Optional[Category] = None) -> InlineKeyboardMarkup:
    keyboard_buttons = []
    for category in Category:
        mark = "✅ " if category == selected else ""
        keyboard_buttons.append([InlineKeyboardButton(
            text=f"{mark}{category.label}",
            callback_data=CallbackData.create_select_category(category)
        )])
    keyboard_buttons.append([InlineKeyboardButton(text="❌ Cancel", callback_data="cancel_dish_add")])
    return InlineKeyboardMarkup(inline_keyboard=keyboard_buttons)


def get_page_nav_row(page: Page, make_callback: Callable[[int], str]) -> List[InlineKeyboardButton]:
    row = []
    if page.has_prev:
        row.append(InlineKeyboardButton(text="◀️ Prev", callback_data=make_callback(page.number - 1)))
    if page.has_next:
        row.append(InlineKeyboardButton(text="Next ▶️", callback_data=make_callback(page.number + 1)))
    return row


def get_menu_list_keyboard(page: Page[Dish]) -> InlineKeyboardMarkup:
    keyboard_buttons = []
    for dish in page.items:
        keyboard_buttons.append([InlineKeyboardButton(
            text=f"🗑️ {shorten(dish.name)} - {format_price(dish.price)}",
            callback_data=CallbackData.create_delete_dish(dish.id)
        )])
    nav_row = get_page_nav_row(page, CallbackData.create_menu_page)
    if nav_row:
        keyboard_buttons.append(nav_row)
    keyboard_buttons.append([InlineKeyboardButton(text="➕ Add dish", callback_data="add_dish")])
    return InlineKeyboardMarkup(inline_keyboard=add_back_button(keyboard_buttons))


def get_delete_confirm_keyboard(dish_id: str) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="🗑️ Delete", callback_data=CallbackData.create_delete_dish_confirm(dish_id))],
        [InlineKeyboardButton(text="❌ Cancel", callback_data="menu_list")]
    ])


def get_filter_keyboard(
    selected: CategorySelector,
    counts: Dict[Category, int],
    page: Optional[Page] = None
) -> InlineKeyboardMarkup:
    options: List[CategorySelector] = [ALL_CATEGORIES, *Category]
    total = sum(counts.values())

    row = []
    keyboard_buttons = []
    for option in options:
        label = option.label if isinstance(option, Category) else option
        count = counts.get(option, 0) if isinstance(option, Category) else total
        mark = "● " if option == selected else ""
        row.append(InlineKeyboardButton(
            text=f"{mark}{label} ({count})",
            callback_data=CallbackData.create_filter(option)
        ))
        if len(row) == 2:
            keyboard_buttons.append(row)
            row = []
    if row:
        keyboard_buttons.append(row)

    if page is not None:
        nav_row = get_page_nav_row(page, lambda number: CallbackData.create_filter(selected, number))
        if nav_row:
            keyboard_buttons.append(nav_row)

    return InlineKeyboardMarkup(inline_keyboard=add_back_button(keyboard_buttons))


def get_dish_added_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="➕ Add another", callback_data="add_dish")],
        [InlineKeyboardButton(text="📋 Menu", callback_data="menu_list")],
        [InlineKeyboardButton(text="🏠 Main menu", callback_data="start")]
    ])
