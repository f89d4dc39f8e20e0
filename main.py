import asyncio
import sys
from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage
from loguru import logger
from config.settings import settings
from handlers import start, help, callbacks, menu, add_dish, category_filter
from middleware.logging_middleware import LoggingMiddleware
from middleware.error_middleware import ErrorMiddleware
from middleware.rate_limit_middleware import RateLimitMiddleware
from services.menu_service import MenuCollection
from pathlib import Path

def setup_logging() -> None:
    logger.remove()
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=settings.LOG_LEVEL
    )
    logger.add(
        str(Path(settings.LOG_DIR) / "bot_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="30 days",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        level="DEBUG"
    )

def create_dispatcher(menu_collection: MenuCollection) -> Dispatcher:
    dp = Dispatcher(storage=MemoryStorage())
    # one collection per process, injected into handlers as `menu`
    dp["menu"] = menu_collection

    dp.message.middleware(LoggingMiddleware())
    dp.callback_query.middleware(LoggingMiddleware())
    dp.message.middleware(RateLimitMiddleware(
        max_requests=settings.RATE_LIMIT_MESSAGES,
        time_window=settings.RATE_LIMIT_WINDOW
    ))
    dp.callback_query.middleware(RateLimitMiddleware(
        max_requests=settings.RATE_LIMIT_CALLBACKS,
        time_window=settings.RATE_LIMIT_WINDOW
    ))
    dp.message.middleware(ErrorMiddleware())
    dp.callback_query.middleware(ErrorMiddleware())

    dp.include_router(start.router)
    dp.include_router(help.router)
    dp.include_router(callbacks.router)
    dp.include_router(menu.router)
    dp.include_router(category_filter.router)
    # last: its state handlers accept any text, commands must match first
    dp.include_router(add_dish.router)
    logger.info("✅ Routers registered")
    return dp

async def main():
    Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)
    setup_logging()

    if not settings.BOT_TOKEN:
        logger.error("BOT_TOKEN is not set in .env!")
        return

    bot = Bot(token=settings.BOT_TOKEN)
    dp = create_dispatcher(MenuCollection())

    logger.info("🚀 Bot started")
    await dp.start_polling(bot)

if __name__ == '__main__':
    asyncio.run(main())
