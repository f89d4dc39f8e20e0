from aiogram import Router
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command

from config.settings import settings
from models.category import ALL_CATEGORIES, Category, CategorySelector
from models.dish import Dish
from services.filter_service import count_by_category, filter_by_category
from services.menu_service import MenuCollection
from utils.callback_data import CallbackData
from utils.formatters import format_dish_list, format_page_footer
from utils.keyboards import get_filter_keyboard
from utils.pagination import Page, paginate

router = Router()

def build_filter_text(selector: CategorySelector, page: Page[Dish]) -> str:
    label = selector.label if isinstance(selector, Category) else selector
    return (
        "🔍 <b>Filter by Category</b>\n"
        f"Selected: <b>{label}</b>\n\n"
        + format_dish_list(page.items, "No dishes found for this category.")
        + format_page_footer(page)
    )

def render_filter(menu: MenuCollection, selector: CategorySelector, page_number: int = 0):
    dishes = menu.list()
    page = paginate(filter_by_category(dishes, selector), page_number, settings.MENU_PAGE_SIZE)
    return build_filter_text(selector, page), get_filter_keyboard(selector, count_by_category(dishes), page)

@router.message(Command("filter"))
async def cmd_filter(message: Message, menu: MenuCollection):
    text, keyboard = render_filter(menu, ALL_CATEGORIES)
    await message.answer(text, reply_markup=keyboard, parse_mode="HTML")

@router.callback_query(lambda c: c.data.startswith("filter_"))
async def callback_filter(callback: CallbackQuery, menu: MenuCollection):
    parsed = CallbackData.parse_filter(callback.data)
    if parsed is None:
        await callback.answer("Unknown category", show_alert=True)
        return

    selector, page_number = parsed
    text, keyboard = render_filter(menu, selector, page_number)
    await callback.message.edit_text(text, reply_markup=keyboard, parse_mode="HTML")
    await callback.answer()
