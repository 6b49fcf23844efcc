import logging

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_random_exponential

logger = logging.getLogger(__name__)

TELEGRAM_FILE_URL = "https://api.telegram.org/file/bot{token}/{file_path}"


def telegram_file_url(bot_token: str, file_path: str) -> str:
    """Public URL of a file on Telegram servers."""
    return TELEGRAM_FILE_URL.format(token=bot_token, file_path=file_path)


@retry(
    retry=retry_if_exception_type(httpx.TransportError),
    wait=wait_random_exponential(multiplier=1, max=10),
    stop=stop_after_attempt(3),
    reraise=True,
)
async def download_telegram_photo(file_url: str) -> bytes:
    """
    Download file from Telegram's public file URL.
    """
    async with httpx.AsyncClient(timeout=30.0) as client:
        resp = await client.get(file_url)
        resp.raise_for_status()
        logger.debug("Downloaded %d bytes from Telegram", len(resp.content))
        return resp.content
