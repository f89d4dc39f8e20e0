import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "R")
    RATE_LIMIT_MESSAGES: int = int(os.getenv("RATE_LIMIT_MESSAGES", "20"))
    RATE_LIMIT_CALLBACKS: int = int(os.getenv("RATE_LIMIT_CALLBACKS", "30"))
    RATE_LIMIT_WINDOW: int = int(os.getenv("RATE_LIMIT_WINDOW", "60"))
    MENU_PAGE_SIZE: int = int(os.getenv("MENU_PAGE_SIZE", "8"))

settings = Settings()
