from typing import Optional

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from aiogram.utils.keyboard import InlineKeyboardBuilder

from hair_integration.generation import SelectionState
from hair_integration.styles import STYLE_OPTIONS


def main_menu_keyboard() -> InlineKeyboardMarkup:
    """
    The main menu keyboard.
    """
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="💇 Choose a hairstyle", callback_data="show_styles")],
        [InlineKeyboardButton(text="🔑 Access code", callback_data="enter_access_code")]
    ])


def style_keyboard(selected_id: Optional[int] = None, can_generate: bool = False) -> InlineKeyboardMarkup:
    """
    The style grid. The selected style is marked and the generate button
    is only shown once a style and a photo are both present.
    """
    builder = InlineKeyboardBuilder()
    for style in STYLE_OPTIONS:
        mark = "✓ " if style.id == selected_id else ""
        builder.button(text=f"{mark}{style.name}", callback_data=f"style:{style.id}")
    builder.adjust(2)

    if can_generate:
        builder.row(InlineKeyboardButton(text="✨ Generate", callback_data="generate"))
    return builder.as_markup()


def result_keyboard() -> InlineKeyboardMarkup:
    """The keyboard shown under a generated image."""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="🔁 Try another style", callback_data="retry")]
    ])


def access_code_keyboard() -> InlineKeyboardMarkup:
    """The keyboard shown while waiting for an access code."""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="🔙 Cancel", callback_data="cancel_access_code")]
    ])


def selection_keyboard(selection: SelectionState) -> InlineKeyboardMarkup:
    """The style grid for the user's current selection."""
    style = selection.selected_style
    return style_keyboard(style.id if style else None, selection.can_generate)
