import functools
import logging
from typing import Any, Awaitable, Callable, Optional

from aiogram.exceptions import TelegramAPIError
from aiogram.types import CallbackQuery, Message

from hair_integration.generation import SelectionState

logger = logging.getLogger(__name__)


async def safe_send_message(
    message: Message,
    text: str,
    user_id: Optional[int] = None,
    **kwargs: Any,
) -> Optional[Message]:
    """Send a message to the chat of ``message``; log and return None on Telegram errors."""
    try:
        return await message.answer(text, **kwargs)
    except TelegramAPIError as e:
        logger.error(f"❌ Failed to send message to user {user_id}: {e}")
        return None


def handle_telegram_errors(handler: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
    """
    Log Telegram API errors raised by a handler instead of crashing the update.
    Other exceptions are logged and re-raised.
    """
    @functools.wraps(handler)
    async def wrapper(event: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return await handler(event, *args, **kwargs)
        except TelegramAPIError as e:
            user = getattr(event, "from_user", None)
            logger.error(f"❌ Telegram API error in {handler.__name__} for user {getattr(user, 'id', None)}: {e}")
            if isinstance(event, CallbackQuery):
                try:
                    await event.answer()
                except TelegramAPIError:
                    logger.debug("Callback already answered")
            return None
        except Exception:
            logger.error(f"❌ Unexpected error in {handler.__name__}", exc_info=True)
            raise

    return wrapper


def selection_text(selection: SelectionState) -> str:
    """Status text for the style grid."""
    style = selection.selected_style
    style_line = f"✅ Style: <b>{style.name}</b> - {style.description}" if style else "▫️ Style: not selected"
    photo_line = "✅ Photo: uploaded" if selection.customer_photo_encoded else "▫️ Photo: send me a portrait photo"
    text = f"💇 <b>Hairstyle simulator</b>\n\n{style_line}\n{photo_line}"
    if selection.can_generate:
        text += "\n\nPress <b>Generate</b> when you are ready."
    return text
