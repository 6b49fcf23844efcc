from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from aiogram.types import BufferedInputFile

from hair_bot.utils.presenter import TelegramPresenter
from hair_integration.generation import GeneratedImage


@pytest.mark.asyncio
async def test_loading_message_is_sent_and_deleted() -> None:
    message = AsyncMock()
    loading = AsyncMock()
    message.answer.return_value = loading
    presenter = TelegramPresenter(message)

    await presenter.show_loading(True)
    await presenter.show_loading(False)

    message.answer.assert_awaited_once()
    loading.delete.assert_awaited_once()


@pytest.mark.asyncio
async def test_clearing_without_loading_is_a_noop() -> None:
    message = AsyncMock()
    presenter = TelegramPresenter(message)

    await presenter.show_loading(False)

    message.answer.assert_not_awaited()


@pytest.mark.asyncio
async def test_result_is_sent_as_photo_and_document() -> None:
    message = AsyncMock()
    presenter = TelegramPresenter(message)

    await presenter.show_result(GeneratedImage(mime_type="image/png", data="QUJD"))

    photo = message.answer_photo.await_args.kwargs["photo"]
    assert isinstance(photo, BufferedInputFile)
    assert photo.data == b"ABC"
    document = message.answer_document.await_args.kwargs["document"]
    assert document.filename.startswith("hairstyle_")
    assert document.filename.endswith(".png")


@pytest.mark.asyncio
async def test_error_is_sent_once() -> None:
    message = AsyncMock()
    presenter = TelegramPresenter(message)

    await presenter.show_error("bad code")

    message.answer.assert_awaited_once_with("Error: bad code")
