from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, CallbackQuery, Message
from loguru import logger
from typing import Callable, Dict, Any, Awaitable

class LoggingMiddleware(BaseMiddleware):
    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any]
    ) -> Any:
        user = getattr(event, "from_user", None)
        if user:
            if isinstance(event, CallbackQuery):
                action = f"callback {event.data}"
            elif isinstance(event, Message):
                action = f"message {(event.text or '')[:50]!r}"
            else:
                action = type(event).__name__
            logger.info(f"User {user.id} (@{user.username}) - {action}")
        return await handler(event, data)
