from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
from PIL import Image

from hair_integration.generation import (
    AssetEncoder,
    GeneratedImage,
    HairstyleClient,
    HairstyleGenerator,
    SessionState,
)
from hair_integration.styles import STYLE_OPTIONS, get_style

PROXY_URL = "http://proxy.test"

IMAGE_RESPONSE = {
    "candidates": [
        {"content": {"parts": [{"inlineData": {"mimeType": "image/png", "data": "ABC="}}]}}
    ]
}


def make_image_bytes(fmt: str = "PNG", color: str = "red") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color).save(buffer, format=fmt)
    return buffer.getvalue()


class RecordingPresenter:
    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    async def show_loading(self, show: bool) -> None:
        self.events.append(("loading", show))

    async def show_result(self, image: GeneratedImage) -> None:
        self.events.append(("result", image))

    async def show_error(self, message: str) -> None:
        self.events.append(("error", message))

    @property
    def loading_cleared(self) -> bool:
        loading = [value for kind, value in self.events if kind == "loading"]
        return not loading or loading[-1] is False


def make_client(handler: Callable[[httpx.Request], Any]) -> HairstyleClient:
    http_client = httpx.AsyncClient(base_url=PROXY_URL, transport=httpx.MockTransport(handler))
    return HairstyleClient(base_url=PROXY_URL, http_client=http_client)


@pytest.fixture()
def png_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture()
def assets_dir(tmp_path: Path) -> Path:
    root = tmp_path / "images"
    root.mkdir()
    for style in STYLE_OPTIONS:
        (root / style.image).write_bytes(make_image_bytes(color="blue"))
    return root


@pytest.fixture()
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture()
def ready_session(png_bytes: bytes) -> SessionState:
    session = SessionState()
    session.selection.select_style(get_style(1))
    session.selection.select_photo(png_bytes)
    return session


@pytest.fixture()
def make_generator(assets_dir: Path) -> Callable[[Callable[[httpx.Request], Any]], HairstyleGenerator]:
    def factory(handler: Callable[[httpx.Request], Any]) -> HairstyleGenerator:
        return HairstyleGenerator(make_client(handler), AssetEncoder(assets_dir))

    return factory
