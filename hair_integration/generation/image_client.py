import logging
import time
from typing import Any, Dict, Optional

import httpx

from .errors import (
    GENERIC_CALL_FAILURE,
    ContentRefused,
    MalformedResponse,
    RemoteCallError,
    UnexpectedError,
)
from .response import GeneratedImage, ResponseKind, parse_error_message, parse_generation_response

logger = logging.getLogger(__name__)


class HairstyleClient:
    """
    Client for the image generation proxy.

    The proxy forwards a Gemini ``generateContent`` body and answers with the
    model response unchanged. The access code travels inside the body.
    """

    def __init__(
        self,
        base_url: str,
        endpoint: str = "/api/generate",
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self.endpoint = endpoint
        self.timeout = timeout

        self.client = http_client or httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    async def close(self):
        """Explicit client shutdown."""
        await self.client.aclose()

    async def submit(self, body: Dict[str, Any]) -> GeneratedImage:
        """
        Send one generation request and return the image.

        Raises RemoteCallError, ContentRefused, MalformedResponse or
        UnexpectedError.
        """
        start = time.monotonic()

        try:
            resp = await self.client.post(self.endpoint, json=body)
        except httpx.TimeoutException as e:
            raise UnexpectedError("The generation request timed out") from e
        except httpx.HTTPError as e:
            raise UnexpectedError(f"Network error: {e}") from e

        if not resp.is_success:
            try:
                message = parse_error_message(resp.json())
            except ValueError:
                message = None
            logger.error("Proxy error %s: %s", resp.status_code, resp.text[:500])
            raise RemoteCallError(
                message or f"{GENERIC_CALL_FAILURE} (HTTP {resp.status_code})",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Proxy returned a non-JSON body")
            raise MalformedResponse() from e

        parsed = parse_generation_response(data)
        elapsed = time.monotonic() - start
        logger.info("Generation call finished in %.2fs, kind=%s", elapsed, parsed.kind.value)

        if parsed.kind is ResponseKind.IMAGE:
            return parsed.image
        if parsed.kind is ResponseKind.TEXT:
            raise ContentRefused(parsed.text)
        raise MalformedResponse()
