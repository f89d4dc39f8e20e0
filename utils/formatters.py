from html import escape
from typing import Sequence

from config.settings import settings
from models.dish import Dish
from utils.pagination import Page


def format_price(price: float) -> str:
    return f"{settings.CURRENCY_SYMBOL} {price:.2f}"


def shorten(text: str, width: int = 32) -> str:
    if len(text) <= width:
        return text
    return text[:width - 1].rstrip() + "…"


def format_dish(dish: Dish) -> str:
    """Dish card: name, category, price and description"""
    lines = [
        f"🍽️ <b>{escape(dish.name)}</b>",
        f"📁 {dish.category.value}",
        f"💰 {format_price(dish.price)}",
    ]
    if dish.description:
        lines.append(f"📝 <i>{escape(dish.description)}</i>")
    return "\n".join(lines)


def format_dish_list(dishes: Sequence[Dish], empty_text: str) -> str:
    if not dishes:
        return empty_text
    return "\n\n".join(format_dish(dish) for dish in dishes)


def format_page_footer(page: Page) -> str:
    if page.total_pages <= 1:
        return ""
    return f"\n\n📄 Page {page.number + 1}/{page.total_pages}"


def format_menu_screen(page: Page[Dish]) -> str:
    return (
        "🍷 <b>Tonight's Dining Selection</b>\n"
        f"Total menu items: {page.total_items}\n\n"
        + format_dish_list(page.items, "No dishes added yet.")
        + format_page_footer(page)
    )
