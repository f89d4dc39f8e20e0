from aiogram import Router
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.fsm.state import State, StatesGroup
from html import escape
from loguru import logger

from models.category import Category
from services.menu_service import MenuCollection
from utils.callback_data import CallbackData
from utils.exceptions import ValidationError
from utils.formatters import format_dish, format_price
from utils.keyboards import get_cancel_keyboard, get_category_keyboard, get_dish_added_keyboard, get_main_menu_keyboard
from utils.messages import format_error_message, format_success_message, format_validation_error
from utils.validators import parse_price, validate_category, validate_description, validate_name, validate_price

router = Router()

class AddDishStates(StatesGroup):
    waiting_for_name = State()
    waiting_for_category = State()
    waiting_for_price = State()
    waiting_for_description = State()

NAME_PROMPT = (
    "➕ <b>Add New Dish</b>\n\n"
    "📝 <b>Dish name:</b>\n"
    "💡 <i>e.g. Grilled Salmon</i>"
)

async def start_add_dish(state: FSMContext) -> None:
    await state.clear()
    await state.set_state(AddDishStates.waiting_for_name)

@router.message(Command("add"))
async def cmd_add(message: Message, state: FSMContext):
    await start_add_dish(state)
    await message.answer(NAME_PROMPT, reply_markup=get_cancel_keyboard(), parse_mode="HTML")

@router.callback_query(lambda c: c.data == "add_dish")
async def callback_add_dish(callback: CallbackQuery, state: FSMContext):
    await start_add_dish(state)
    await callback.message.edit_text(NAME_PROMPT, reply_markup=get_cancel_keyboard(), parse_mode="HTML")
    await callback.answer()

@router.callback_query(lambda c: c.data == "cancel_dish_add")
async def callback_cancel_dish_add(callback: CallbackQuery, state: FSMContext):
    await state.clear()
    await callback.message.edit_text(
        "❌ <b>Operation cancelled</b>\n\n"
        "💡 Pick an action from the main menu:",
        reply_markup=get_main_menu_keyboard(),
        parse_mode="HTML"
    )
    await callback.answer()

@router.message(AddDishStates.waiting_for_name)
async def process_dish_name(message: Message, state: FSMContext):
    if message.text and message.text.startswith("/"):
        await message.answer(
            format_error_message("Error!", "Commands cannot be used as a dish name.", "Enter the dish name or /cancel:"),
            reply_markup=get_cancel_keyboard(),
            parse_mode="HTML"
        )
        return

    is_valid, error_msg = validate_name(message.text)
    if not is_valid:
        await message.answer(
            format_error_message("Error!", error_msg, "Enter the dish name:"),
            reply_markup=get_cancel_keyboard(),
            parse_mode="HTML"
        )
        return

    name = message.text.strip()
    await state.update_data(name=name)
    await state.set_state(AddDishStates.waiting_for_category)
    await message.answer(
        "✅ <b>Name accepted</b>\n\n"
        f"📝 <b>Name:</b> {escape(name)}\n\n"
        "📁 <b>Select category:</b>",
        reply_markup=get_category_keyboard(),
        parse_mode="HTML"
    )

async def accept_category(message: Message, state: FSMContext, category: Category) -> None:
    await state.update_data(category=category.value)
    await state.set_state(AddDishStates.waiting_for_price)
    await message.answer(
        "✅ <b>Category accepted</b>\n\n"
        f"📁 <b>Category:</b> {category.label}\n\n"
        "💰 <b>Price:</b>\n"
        "💡 <i>Numbers only, e.g. 185.00</i>",
        reply_markup=get_cancel_keyboard(),
        parse_mode="HTML"
    )

@router.callback_query(AddDishStates.waiting_for_category, lambda c: c.data.startswith("select_category_"))
async def callback_select_category(callback: CallbackQuery, state: FSMContext):
    category = CallbackData.parse_select_category(callback.data)
    if category is None:
        await callback.answer("Unknown category", show_alert=True)
        return

    await accept_category(callback.message, state, category)
    await callback.answer()

@router.message(AddDishStates.waiting_for_category)
async def process_dish_category(message: Message, state: FSMContext):
    text = (message.text or "").strip()
    is_valid, error_msg = validate_category(text)
    if not is_valid:
        await message.answer(
            format_error_message("Error!", error_msg, "Pick a category with the buttons:"),
            reply_markup=get_category_keyboard(),
            parse_mode="HTML"
        )
        return

    await accept_category(message, state, Category(text))

@router.message(AddDishStates.waiting_for_price)
async def process_dish_price(message: Message, state: FSMContext):
    is_valid, error_msg = validate_price(message.text)
    if not is_valid:
        await message.answer(
            format_error_message("Invalid price!", error_msg, "Enter the price again:"),
            reply_markup=get_cancel_keyboard(),
            parse_mode="HTML"
        )
        return

    price = parse_price(message.text)
    await state.update_data(price=price)
    await state.set_state(AddDishStates.waiting_for_description)
    await message.answer(
        "✅ <b>Price accepted</b>\n\n"
        f"💰 <b>Price:</b> {format_price(price)}\n\n"
        "📄 <b>Description:</b>\n"
        "💡 <i>(or send '-' to skip)</i>",
        reply_markup=get_cancel_keyboard(),
        parse_mode="HTML"
    )

@router.message(AddDishStates.waiting_for_description)
async def process_dish_description(message: Message, state: FSMContext, menu: MenuCollection):
    text = (message.text or "").strip()
    description = "" if text == "-" else text

    is_valid, error_msg = validate_description(description)
    if not is_valid:
        await message.answer(
            format_error_message("Error!", error_msg, "Enter a shorter description or '-' to skip:"),
            reply_markup=get_cancel_keyboard(),
            parse_mode="HTML"
        )
        return

    data = await state.get_data()
    await state.clear()

    try:
        dish = menu.add(
            data.get("name"),
            description,
            data.get("category"),
            data.get("price")
        )
    except ValidationError as e:
        logger.warning(f"User {message.from_user.id}: dish rejected ({e.reason})")
        await message.answer(
            format_validation_error(e),
            reply_markup=get_dish_added_keyboard(),
            parse_mode="HTML"
        )
        return

    await message.answer(
        format_success_message("Dish added successfully!") + "\n\n" + format_dish(dish),
        reply_markup=get_dish_added_keyboard(),
        parse_mode="HTML"
    )
