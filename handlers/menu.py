from aiogram import Router
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from html import escape

from config.settings import settings
from models.dish import Dish
from services.menu_service import MenuCollection
from utils.callback_data import CallbackData
from utils.formatters import format_menu_screen, shorten
from utils.keyboards import get_delete_confirm_keyboard, get_menu_list_keyboard
from utils.messages import format_success_message, format_warning_message
from utils.pagination import Page, paginate

router = Router()

def menu_page(menu: MenuCollection, page: int = 0) -> Page[Dish]:
    return paginate(menu.list(), page, settings.MENU_PAGE_SIZE)

@router.message(Command("menu"))
async def cmd_menu(message: Message, menu: MenuCollection):
    page = menu_page(menu)
    await message.answer(
        format_menu_screen(page),
        reply_markup=get_menu_list_keyboard(page),
        parse_mode="HTML"
    )

@router.callback_query(lambda c: CallbackData.parse_menu_page(c.data) is not None)
async def callback_menu_list(callback: CallbackQuery, menu: MenuCollection):
    page = menu_page(menu, CallbackData.parse_menu_page(callback.data))
    await callback.message.edit_text(
        format_menu_screen(page),
        reply_markup=get_menu_list_keyboard(page),
        parse_mode="HTML"
    )
    await callback.answer()

@router.callback_query(lambda c: CallbackData.parse_delete_dish(c.data) is not None)
async def callback_delete_dish(callback: CallbackQuery, menu: MenuCollection):
    dish_id = CallbackData.parse_delete_dish(callback.data)
    dish = menu.get(dish_id)

    if not dish:
        await callback.answer("Dish not found", show_alert=True)
        return

    await callback.message.edit_text(
        format_warning_message(
            "Remove Dish",
            f"Are you sure you want to delete \"{escape(dish.name)}\"?"
        ),
        reply_markup=get_delete_confirm_keyboard(dish.id),
        parse_mode="HTML"
    )
    await callback.answer()

@router.callback_query(lambda c: CallbackData.parse_delete_dish_confirm(c.data) is not None)
async def callback_delete_dish_confirm(callback: CallbackQuery, menu: MenuCollection):
    dish_id = CallbackData.parse_delete_dish_confirm(callback.data)
    dish = menu.get(dish_id)
    menu.remove(dish_id)

    page = menu_page(menu)
    text = format_menu_screen(page)
    if dish:
        text = format_success_message("Dish removed", escape(shorten(dish.name, 64))) + "\n\n" + text

    await callback.message.edit_text(
        text,
        reply_markup=get_menu_list_keyboard(page),
        parse_mode="HTML"
    )
    await callback.answer("Dish removed" if dish else "Dish was already removed")
