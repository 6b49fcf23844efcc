from __future__ import annotations

from aiogram.types import InlineKeyboardMarkup

from hair_bot.keyboards.keyboards import selection_keyboard, style_keyboard
from hair_bot.utils.formatters import selection_text
from hair_integration.generation import SelectionState
from hair_integration.styles import get_style


def _callbacks(markup: InlineKeyboardMarkup) -> list[str]:
    return [button.callback_data for row in markup.inline_keyboard for button in row]


def _texts(markup: InlineKeyboardMarkup) -> list[str]:
    return [button.text for row in markup.inline_keyboard for button in row]


def test_style_grid_lists_every_style() -> None:
    callbacks = _callbacks(style_keyboard())

    assert callbacks == [f"style:{i}" for i in range(1, 7)]


def test_generate_button_hidden_until_ready(png_bytes: bytes) -> None:
    selection = SelectionState()
    assert "generate" not in _callbacks(selection_keyboard(selection))

    selection.select_style(get_style(2))
    assert "generate" not in _callbacks(selection_keyboard(selection))

    selection.select_photo(png_bytes)
    assert _callbacks(selection_keyboard(selection))[-1] == "generate"


def test_selected_style_is_marked() -> None:
    texts = _texts(style_keyboard(selected_id=5))

    assert "✓ Hair NO5" in texts
    assert "Hair NO1" in texts


def test_selection_text_reflects_state(png_bytes: bytes) -> None:
    selection = SelectionState()
    assert "not selected" in selection_text(selection)

    selection.select_style(get_style(6))
    selection.select_photo(png_bytes)
    text = selection_text(selection)

    assert "Hair NO6" in text
    assert "Generate" in text
