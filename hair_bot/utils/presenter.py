import logging
import time
from typing import Optional

from aiogram.exceptions import TelegramAPIError
from aiogram.types import BufferedInputFile, Message

from hair_bot.keyboards.keyboards import result_keyboard
from hair_integration.generation import GeneratedImage

logger = logging.getLogger(__name__)

LOADING_TEXT = (
    "💇 <b>Styling in progress...</b>\n\n"
    "This usually takes less than a minute."
)


class TelegramPresenter:
    """Shows generation progress and results in a Telegram chat."""

    def __init__(self, message: Message):
        self.message = message
        self._loading_message: Optional[Message] = None

    async def show_loading(self, show: bool) -> None:
        if show:
            self._loading_message = await self.message.answer(LOADING_TEXT, parse_mode="HTML")
            return

        if self._loading_message is None:
            return
        try:
            await self._loading_message.delete()
        except TelegramAPIError as e:
            logger.warning(f"Could not delete loading message: {e}")
        finally:
            self._loading_message = None

    async def show_result(self, image: GeneratedImage) -> None:
        image_bytes = image.to_bytes()
        await self.message.answer_photo(
            photo=BufferedInputFile(image_bytes, filename=f"hairstyle.{image.extension}"),
            caption="Done! Here is your new look.",
            reply_markup=result_keyboard(),
        )
        # Full resolution copy; Telegram recompresses photos
        await self.message.answer_document(
            document=BufferedInputFile(
                image_bytes,
                filename=f"hairstyle_{int(time.time() * 1000)}.{image.extension}",
            ),
        )

    async def show_error(self, message: str) -> None:
        await self.message.answer(f"Error: {message}")
