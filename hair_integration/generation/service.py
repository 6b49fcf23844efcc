"""
Hairstyle generation orchestrator.

Main flow:
- access gating and selection validation
- style reference loading
- request composition and the proxy call
- reporting exactly one outcome to the presentation layer
"""

import logging
from datetime import datetime
from typing import Optional, Protocol

from .encoder import AssetEncoder
from .errors import (
    AssetLoadError,
    HairGenerationError,
    MissingCredential,
    UnexpectedError,
)
from .image_client import HairstyleClient
from .prompts import build_generation_request
from .response import GeneratedImage
from .session import GenerationResult, SessionState

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    async def show_loading(self, show: bool) -> None: ...

    async def show_result(self, image: GeneratedImage) -> None: ...

    async def show_error(self, message: str) -> None: ...


class HairstyleGenerator:
    """Runs generation attempts against the proxy, one per session at a time."""

    def __init__(self, client: HairstyleClient, encoder: AssetEncoder):
        self.client = client
        self.encoder = encoder

    async def generate(
        self,
        session: SessionState,
        access_code: Optional[str],
        presenter: Presenter,
    ) -> Optional[GenerationResult]:
        """
        Run one generation attempt.

        Args:
            session: selection and in-flight guard of the requesting user
            access_code: stored access code, if any
            presenter: receives loading/result/error signals

        Returns:
            None when another attempt is already in flight for this session,
            otherwise a GenerationResult. A MissingCredential result means the
            caller should ask for the access code; nothing is presented then.
        """
        if session.guard.is_generating:
            logger.info("⏳ Generation already in progress, ignoring trigger")
            return None

        if not access_code:
            logger.info("🔑 No access code stored, generation not attempted")
            return GenerationResult(error=MissingCredential())

        selection = session.selection
        if not selection.can_generate:
            logger.warning("Generate called without a complete selection")
            return GenerationResult(
                error=AssetLoadError("Select a hairstyle and upload a photo first")
            )

        if not session.guard.try_acquire():
            return None

        start_time = datetime.now()
        style = selection.selected_style
        result = None
        try:
            await presenter.show_loading(True)
            logger.info(f"🎨 Generating hairstyle '{style.name}' (id={style.id})")

            style_image = await self.encoder.encode(style.image)
            body = build_generation_request(
                access_code=access_code,
                customer_photo_b64=selection.customer_photo_encoded,
                style_image_b64=style_image.data,
            )
            image = await self.client.submit(body)
            result = GenerationResult(image=image)

            processing_time = (datetime.now() - start_time).total_seconds()
            logger.info(f"✅ Hairstyle generated in {processing_time:.2f}s")

        except HairGenerationError as e:
            logger.error(f"❌ Generation failed ({e.error_type}): {e.message}")
            result = GenerationResult(error=e)

        except Exception as e:
            logger.exception("❌ Unexpected generation error")
            result = GenerationResult(error=UnexpectedError(str(e) or e.__class__.__name__))

        finally:
            session.guard.release()
            try:
                await presenter.show_loading(False)
            except Exception:
                logger.exception("Failed to clear loading indicator")

        return await self._present(result, presenter)

    async def _present(self, result: GenerationResult, presenter: Presenter) -> GenerationResult:
        """Report the outcome; a failing presenter turns into an UnexpectedError."""
        try:
            if result.ok:
                await presenter.show_result(result.image)
            else:
                await presenter.show_error(result.message)
            return result
        except Exception as e:
            logger.exception("❌ Failed to present generation outcome")
            if not result.ok:
                return result
            result = GenerationResult(
                error=UnexpectedError(f"Could not display the generated image: {e}")
            )

        try:
            await presenter.show_error(result.message)
        except Exception:
            logger.exception("Failed to show generation error")
        return result
