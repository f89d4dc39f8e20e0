from aiogram import Router
from aiogram.types import CallbackQuery, Message
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from handlers.start import build_welcome_text
from services.menu_service import MenuCollection
from utils.keyboards import get_main_menu_keyboard

router = Router()

@router.callback_query(lambda c: c.data == "start")
async def callback_start(callback: CallbackQuery, state: FSMContext, menu: MenuCollection):
    await state.clear()
    await callback.message.edit_text(
        build_welcome_text(callback.from_user.first_name or "there", menu.count()),
        reply_markup=get_main_menu_keyboard(),
        parse_mode="HTML"
    )
    await callback.answer()

@router.callback_query(lambda c: c.data == "cancel")
async def callback_cancel(callback: CallbackQuery, state: FSMContext):
    await state.clear()
    await callback.message.edit_text(
        "❌ <b>Operation cancelled</b>\n\n"
        "💡 Pick an action from the main menu:",
        reply_markup=get_main_menu_keyboard(),
        parse_mode="HTML"
    )
    await callback.answer()

@router.message(Command("cancel"))
async def cmd_cancel(message: Message, state: FSMContext):
    current_state = await state.get_state()
    await state.clear()

    if current_state:
        text = "❌ <b>Operation cancelled</b>\n\n💡 Pick an action from the main menu:"
    else:
        text = "❌ <b>Nothing to cancel</b>\n\n💡 Pick an action from the main menu:"

    await message.answer(text, reply_markup=get_main_menu_keyboard(), parse_mode="HTML")
