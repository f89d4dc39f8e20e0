from aiogram import Router
from aiogram.types import Message
from aiogram.filters import Command
from html import escape
from loguru import logger

from services.menu_service import MenuCollection
from utils.keyboards import get_main_menu_keyboard

router = Router()

def build_welcome_text(first_name: str, dish_count: int) -> str:
    return f"""👋 <b>Welcome!</b>

Hi, <b>{escape(first_name)}</b>! 👨‍🍳

I keep tonight's dining selection in order.

📋 <b>What I can do:</b>

🍽️ Show every dish on the menu
➕ Add new dishes
🗑️ Remove dishes
🔍 Filter dishes by category

Dishes on the menu right now: <b>{dish_count}</b>

💡 Pick an action below 👇"""

@router.message(Command("start"))
async def cmd_start(message: Message, menu: MenuCollection):
    user_id = message.from_user.id
    first_name = message.from_user.first_name or "there"

    logger.info(f"/start from user {user_id} (@{message.from_user.username})")

    await message.answer(
        build_welcome_text(first_name, menu.count()),
        reply_markup=get_main_menu_keyboard(),
        parse_mode="HTML"
    )
