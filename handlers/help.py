from aiogram import Router
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from config.settings import settings
from models.category import Category
from utils.keyboards import get_back_keyboard

router = Router()

def build_help_text() -> str:
    categories = ", ".join(c.label for c in Category)
    return f"""
📖 <b>Help</b>

🎯 <b>Main features:</b>

📋 <b>Menu</b>
   Every dish, newest first. Tap a dish to remove it

➕ <b>Add dish</b>
   Name, category, price and an optional description

🔍 <b>Filter</b>
   Show a single category: {categories}

💰 Prices are shown in <b>{settings.CURRENCY_SYMBOL}</b> with two decimals

⌨️ <b>Commands:</b>

/start - Main menu
/menu - Show the menu
/add - Add a dish
/filter - Filter by category
/help - This help
/cancel - Cancel the current operation

💡 <b>Tip:</b> use the buttons to move around
    """

@router.message(Command("help"))
async def cmd_help(message: Message):
    await message.answer(build_help_text(), reply_markup=get_back_keyboard(), parse_mode="HTML")

@router.callback_query(lambda c: c.data == "help")
async def callback_help(callback: CallbackQuery):
    await callback.message.edit_text(build_help_text(), reply_markup=get_back_keyboard(), parse_mode="HTML")
    await callback.answer()
