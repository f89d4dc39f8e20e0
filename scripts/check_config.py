"""
Checks the environment before starting the bot
Verifies the .env file, required variables and installed dependencies
"""
import importlib.util
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

REQUIRED_PACKAGES = ["aiogram", "loguru", "dotenv"]
LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

def check_env_file():
    env_path = Path(".env")
    if not env_path.exists():
        print("❌ .env file not found!")
        print("   Create it from env.example:")
        print("   cp env.example .env")
        return False
    print("✅ .env file found")
    return True

def check_bot_token():
    token = os.getenv("BOT_TOKEN", "")
    if not token or token == "your_bot_token_here":
        print("❌ BOT_TOKEN is missing or still has the placeholder value")
        print("   Set the bot token in .env")
        return False
    if len(token) < 40:
        print("⚠️  BOT_TOKEN looks wrong (too short)")
        return False
    print("✅ BOT_TOKEN is set")
    return True

def check_log_settings():
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        print(f"❌ LOG_LEVEL has an unknown value: {level}")
        return False
    log_dir = Path(os.getenv("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    print(f"✅ LOG_LEVEL: {level}, LOG_DIR: {log_dir}")
    return True

def check_rate_limits():
    names = ["RATE_LIMIT_MESSAGES", "RATE_LIMIT_CALLBACKS", "RATE_LIMIT_WINDOW"]
    defaults = {"RATE_LIMIT_MESSAGES": "20", "RATE_LIMIT_CALLBACKS": "30", "RATE_LIMIT_WINDOW": "60"}

    try:
        values = {name: int(os.getenv(name, defaults[name])) for name in names}
    except ValueError:
        print("❌ Rate limit settings must be integers")
        return False

    if any(value <= 0 for value in values.values()):
        print("❌ Rate limit settings must be greater than 0")
        return False
    print(
        f"✅ Rate limits: {values['RATE_LIMIT_MESSAGES']} messages / "
        f"{values['RATE_LIMIT_CALLBACKS']} callbacks per {values['RATE_LIMIT_WINDOW']}s"
    )
    return True

def check_dependencies():
    missing = [name for name in REQUIRED_PACKAGES if importlib.util.find_spec(name) is None]
    if missing:
        print(f"❌ Missing packages: {', '.join(missing)}")
        print("   pip install -e .")
        return False
    print("✅ All dependencies are installed")
    return True

def main():
    print("Checking project configuration...\n")

    load_dotenv()

    checks = [
        (".env file", check_env_file),
        ("BOT_TOKEN", check_bot_token),
        ("Logging", check_log_settings),
        ("Rate limits", check_rate_limits),
        ("Dependencies", check_dependencies),
    ]

    results = []
    for name, check_func in checks:
        try:
            result = check_func()
            results.append((name, result))
        except Exception as e:
            print(f"❌ Error while checking {name}: {e}")
            results.append((name, False))
        print()

    print("=" * 50)
    print("📊 Results:")
    print("=" * 50)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✅" if result else "❌"
        print(f"{status} {name}")

    print("=" * 50)
    print(f"Passed: {passed}/{total}")

    if passed == total:
        print("\n✅ All checks passed! Ready to start.")
        return 0
    else:
        print("\n⚠️  Some checks failed. Fix them before starting.")
        return 1

if __name__ == "__main__":
    sys.exit(main())
