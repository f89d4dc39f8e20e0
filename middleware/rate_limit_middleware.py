import math
import time
from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, Message, CallbackQuery
from typing import Callable, Dict, Any, Awaitable, List, Optional
from loguru import logger

class RateLimitMiddleware(BaseMiddleware):
    """
    Sliding-window limit of `max_requests` per user per `time_window` seconds.

    Users whose window has emptied are dropped from `user_requests`, and a
    full sweep runs at most once per window, so idle users don't pile up.
    """

    def __init__(self, max_requests: int = 10, time_window: int = 60, clock: Callable[[], float] = time.monotonic):
        self.max_requests = max_requests
        self.time_window = time_window
        self.clock = clock
        self.user_requests: Dict[int, List[float]] = {}
        self._last_sweep = clock()

    def _prune(self, user_id: int, now: float) -> Optional[List[float]]:
        stamps = self.user_requests.get(user_id)
        if stamps is None:
            return None
        stamps[:] = [t for t in stamps if now - t < self.time_window]
        if not stamps:
            del self.user_requests[user_id]
            return None
        return stamps

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self.time_window:
            return
        self._last_sweep = now
        for user_id in list(self.user_requests):
            self._prune(user_id, now)

    def retry_after(self, user_id: int) -> int:
        stamps = self.user_requests.get(user_id)
        if not stamps:
            return 0
        return max(1, math.ceil(stamps[0] + self.time_window - self.clock()))

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any]
    ) -> Any:
        user_id = None
        if isinstance(event, (Message, CallbackQuery)) and event.from_user:
            user_id = event.from_user.id

        if user_id is None:
            return await handler(event, data)

        now = self.clock()
        self._sweep(now)
        stamps = self._prune(user_id, now)

        if stamps is not None and len(stamps) >= self.max_requests:
            wait = self.retry_after(user_id)
            logger.warning(f"Rate limit exceeded for user {user_id}, retry in {wait}s")
            if isinstance(event, Message):
                await event.answer(
                    "⚠️ <b>Too many requests</b>\n\n"
                    f"The menu will respond again in {wait} s.",
                    parse_mode="HTML"
                )
            else:
                await event.answer(f"Too many requests. Try again in {wait} s.", show_alert=True)
            return None

        self.user_requests.setdefault(user_id, []).append(now)
        return await handler(event, data)
