import logging
from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command, StateFilter
from aiogram.fsm.context import FSMContext

from hair_bot.core.states import AccessCodeStates
from hair_bot.database.crud import AccessCodeStore
from hair_bot.keyboards.keyboards import main_menu_keyboard, access_code_keyboard, selection_keyboard
from hair_bot.utils.formatters import safe_send_message, handle_telegram_errors, selection_text
from hair_integration.generation import SessionRegistry

logger = logging.getLogger(__name__)
router = Router()

ACCESS_CODE_PROMPT = (
    "🔑 <b>Access code</b>\n\n"
    "Send me the access code you received from the salon."
)


async def ask_for_access_code(message: Message, state: FSMContext, current_code: str | None = None):
    """Switch to code entry and prompt the user."""
    await state.set_state(AccessCodeStates.waiting_for_code)
    text = ACCESS_CODE_PROMPT
    if current_code:
        text += f"\n\nCurrent code: <code>{current_code}</code>"
    await safe_send_message(
        message,
        text,
        parse_mode="HTML",
        reply_markup=access_code_keyboard()
    )


@router.message(Command("start"))
@handle_telegram_errors
async def start_command(message: Message, state: FSMContext, access_store: AccessCodeStore):
    """
    Handles /start. Asks for an access code when none is stored yet.
    """
    await state.clear()
    text = (
        f"Hello, {message.from_user.first_name}!\n\n"
        "Pick a hairstyle, send me your photo and I will show you how it looks on you."
    )
    await safe_send_message(
        message,
        text,
        user_id=message.from_user.id,
        reply_markup=main_menu_keyboard(),
    )

    if not await access_store.get():
        logger.info(f"🔑 User {message.from_user.id} has no access code yet")
        await ask_for_access_code(message, state)


@router.message(Command("code"))
@handle_telegram_errors
async def code_command(message: Message, state: FSMContext, access_store: AccessCodeStore):
    """Open access code entry."""
    await ask_for_access_code(message, state, await access_store.get())


@router.callback_query(F.data == "enter_access_code")
@handle_telegram_errors
async def callback_enter_access_code(callback: CallbackQuery, state: FSMContext, access_store: AccessCodeStore):
    await ask_for_access_code(callback.message, state, await access_store.get())
    await callback.answer()


@router.message(StateFilter(AccessCodeStates.waiting_for_code), F.text)
@handle_telegram_errors
async def process_access_code(
    message: Message,
    state: FSMContext,
    access_store: AccessCodeStore,
    sessions: SessionRegistry,
):
    """Save the access code sent by the user."""
    code = message.text.strip()
    if not code:
        await safe_send_message(message, "The access code cannot be empty. Please try again.")
        return

    await access_store.set(code)
    await state.clear()
    logger.info(f"🔑 Access code saved for user {message.from_user.id}")

    selection = sessions.get(message.from_user.id).selection
    await safe_send_message(
        message,
        "✅ Access code saved.\n\n" + selection_text(selection),
        user_id=message.from_user.id,
        parse_mode="HTML",
        reply_markup=selection_keyboard(selection),
    )


@router.message(StateFilter(AccessCodeStates.waiting_for_code))
@handle_telegram_errors
async def process_access_code_error(message: Message):
    await safe_send_message(
        message,
        "Please send the access code as text.",
        reply_markup=access_code_keyboard()
    )


@router.callback_query(F.data == "cancel_access_code")
@handle_telegram_errors
async def callback_cancel_access_code(callback: CallbackQuery, state: FSMContext):
    await state.clear()
    await callback.message.edit_text(
        "Okay, cancelled.",
        reply_markup=main_menu_keyboard()
    )
    await callback.answer()
