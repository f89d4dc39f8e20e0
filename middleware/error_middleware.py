from aiogram import BaseMiddleware
from aiogram.exceptions import TelegramAPIError, TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import TelegramObject, Message, CallbackQuery
from loguru import logger
from typing import Callable, Dict, Any, Awaitable, Optional

from utils.keyboards import get_back_keyboard

ERROR_TEXT = (
    "❌ <b>Something went wrong</b>\n\n"
    "Any dish form in progress was reset. Open the main menu to continue."
)
ERROR_ALERT = "Something went wrong. Please try again."

def is_not_modified(error: Exception) -> bool:
    # editing a message to identical text and keyboard
    return isinstance(error, TelegramBadRequest) and "message is not modified" in error.message.lower()

class ErrorMiddleware(BaseMiddleware):
    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any]
    ) -> Any:
        try:
            return await handler(event, data)
        except Exception as e:
            if isinstance(event, CallbackQuery) and is_not_modified(e):
                logger.debug("Callback left the message unchanged")
                await event.answer()
                return None

            user_id = event.from_user.id if isinstance(event, (Message, CallbackQuery)) and event.from_user else None
            logger.opt(exception=e).error(f"Error in handler for user {user_id}: {e}")

            state: Optional[FSMContext] = data.get("state")
            if state is not None:
                await state.clear()

            try:
                if isinstance(event, Message):
                    await event.answer(ERROR_TEXT, reply_markup=get_back_keyboard(), parse_mode="HTML")
                elif isinstance(event, CallbackQuery):
                    await event.answer(ERROR_ALERT, show_alert=True)
            except TelegramAPIError as inner_e:
                logger.opt(exception=inner_e).error(f"Could not report error to user {user_id}: {inner_e}")
            return None
