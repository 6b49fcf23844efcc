"""
Hairstyle Handler - style selection, photo upload and generation.

Buttons:
- 💇 Choose a hairstyle (main menu)
- style grid, ✨ Generate, 🔁 Try another style
"""

import logging
from aiogram import Bot, Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext
import httpx

from hair_bot.database.crud import AccessCodeStore
from hair_bot.handlers.commands import ask_for_access_code
from hair_bot.keyboards.keyboards import selection_keyboard
from hair_bot.utils.downloads import download_telegram_photo, telegram_file_url
from hair_bot.utils.formatters import safe_send_message, handle_telegram_errors, selection_text
from hair_bot.utils.presenter import TelegramPresenter
from hair_integration.generation import (
    AssetLoadError,
    HairstyleGenerator,
    MissingCredential,
    SessionRegistry,
)
from hair_integration.styles import get_style

logger = logging.getLogger(__name__)

router = Router()


# ============================================================================
# Style grid
# ============================================================================

@router.callback_query(F.data.in_({"show_styles", "retry"}))
@handle_telegram_errors
async def callback_show_styles(callback: CallbackQuery, sessions: SessionRegistry):
    """Show the style grid. 'retry' keeps the uploaded photo."""
    selection = sessions.get(callback.from_user.id).selection
    await safe_send_message(
        callback.message,
        selection_text(selection),
        user_id=callback.from_user.id,
        parse_mode="HTML",
        reply_markup=selection_keyboard(selection),
    )
    await callback.answer()


@router.callback_query(F.data.startswith("style:"))
@handle_telegram_errors
async def callback_select_style(callback: CallbackQuery, sessions: SessionRegistry):
    try:
        style_id = int(callback.data.split(":", 1)[1])
    except ValueError:
        logger.warning(f"Could not parse style id from {callback.data!r}")
        await callback.answer()
        return

    style = get_style(style_id)
    if style is None:
        await callback.answer("This style is no longer available.", show_alert=True)
        return

    selection = sessions.get(callback.from_user.id).selection
    selection.select_style(style)
    logger.info(f"💇 User {callback.from_user.id} selected {style.name}")

    await callback.message.edit_text(
        selection_text(selection),
        parse_mode="HTML",
        reply_markup=selection_keyboard(selection),
    )
    await callback.answer()


# ============================================================================
# Photo upload
# ============================================================================

async def _store_photo(message: Message, bot: Bot, sessions: SessionRegistry, file_id: str):
    telegram_id = message.from_user.id
    selection = sessions.get(telegram_id).selection

    try:
        file = await bot.get_file(file_id)
        image_bytes = await download_telegram_photo(telegram_file_url(bot.token, file.file_path))
        selection.select_photo(image_bytes)
    except httpx.HTTPError as e:
        logger.error(f"❌ Could not download photo from user {telegram_id}: {e}")
        await safe_send_message(message, "Could not download your photo. Please send it again.", user_id=telegram_id)
        return
    except AssetLoadError as e:
        logger.info(f"🚫 Rejected upload from user {telegram_id}: {e.message}")
        await safe_send_message(message, "This does not look like an image. Please send a photo.", user_id=telegram_id)
        return

    logger.info(f"📸 Photo received from user {telegram_id}")
    await safe_send_message(
        message,
        selection_text(selection),
        user_id=telegram_id,
        parse_mode="HTML",
        reply_markup=selection_keyboard(selection),
    )


@router.message(StateFilter(None), F.photo)
@handle_telegram_errors
async def process_photo(message: Message, bot: Bot, sessions: SessionRegistry):
    await _store_photo(message, bot, sessions, message.photo[-1].file_id)


@router.message(StateFilter(None), F.document)
@handle_telegram_errors
async def process_photo_document(message: Message, bot: Bot, sessions: SessionRegistry):
    """Photos sent as files keep their full resolution."""
    document = message.document
    if not (document.mime_type or "").startswith("image/"):
        await safe_send_message(message, "Please send an image file.", user_id=message.from_user.id)
        return
    await _store_photo(message, bot, sessions, document.file_id)


# ============================================================================
# Generation
# ============================================================================

@router.callback_query(F.data == "generate")
@handle_telegram_errors
async def callback_generate(
    callback: CallbackQuery,
    state: FSMContext,
    sessions: SessionRegistry,
    generator: HairstyleGenerator,
    access_store: AccessCodeStore,
):
    telegram_id = callback.from_user.id
    session = sessions.get(telegram_id)

    if not session.selection.can_generate:
        await callback.answer("Choose a hairstyle and send a photo first.", show_alert=True)
        return

    # Attempts while a generation is running are ignored
    await callback.answer()
    if session.guard.is_generating:
        return

    access_code = await access_store.get()
    result = await generator.generate(session, access_code, TelegramPresenter(callback.message))

    if result is not None and isinstance(result.error, MissingCredential):
        await ask_for_access_code(callback.message, state)
