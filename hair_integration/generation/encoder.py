import asyncio
import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import httpx
from PIL import Image, UnidentifiedImageError

from .errors import AssetLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedImage:
    """Image bytes as a raw base64 string (no data-URI prefix)."""

    mime_type: str
    data: str


def _detect_mime_type(image_bytes: bytes) -> str:
    """Return the mime type Pillow detects; raises if the bytes are not an image."""
    with Image.open(io.BytesIO(image_bytes)) as img:
        img.verify()
        return Image.MIME.get(img.format, "image/png")


class AssetEncoder:
    """
    Turns bundled style images, URLs and uploaded files into base64 payloads.

    Relative references are resolved against ``assets_dir``; ``http://`` and
    ``https://`` references are fetched with the given httpx client.
    """

    def __init__(
        self,
        assets_dir: Union[str, Path] = "images",
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.assets_dir = Path(assets_dir)
        self.http_client = http_client

    @staticmethod
    def encode_bytes(image_bytes: bytes, source: str = "upload") -> EncodedImage:
        """Validate and encode raw image bytes."""
        if not image_bytes:
            raise AssetLoadError(f"Image {source} is empty")
        try:
            mime_type = _detect_mime_type(image_bytes)
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise AssetLoadError(f"File {source} is not a readable image") from e

        logger.debug("Encoded %s: mime=%s, size=%d bytes", source, mime_type, len(image_bytes))
        return EncodedImage(
            mime_type=mime_type,
            data=base64.b64encode(image_bytes).decode("utf-8"),
        )

    async def _fetch(self, url: str) -> bytes:
        if self.http_client is None:
            async with httpx.AsyncClient(timeout=30.0) as client:
                resp = await client.get(url)
        else:
            resp = await self.http_client.get(url)
        resp.raise_for_status()
        return resp.content

    async def _read(self, reference: str) -> bytes:
        path = Path(reference)
        if not path.is_absolute():
            path = self.assets_dir / path
        return await asyncio.to_thread(path.read_bytes)

    async def encode(self, reference: str) -> EncodedImage:
        """Load a style reference image and return it base64-encoded."""
        logger.debug("Loading asset: %s", reference)
        try:
            if reference.startswith(("http://", "https://")):
                image_bytes = await self._fetch(reference)
            else:
                image_bytes = await self._read(reference)
        except httpx.HTTPError as e:
            raise AssetLoadError(f"Failed to download reference image {reference}") from e
        except OSError as e:
            raise AssetLoadError(f"Failed to read reference image {reference}") from e

        return self.encode_bytes(image_bytes, source=reference)
