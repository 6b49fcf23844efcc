"""
Error taxonomy for the hairstyle generation lifecycle.

Every failure the orchestrator can report to the user is one of these
classes. ``message`` is always the user-facing text.
"""

from typing import Optional

GENERIC_CALL_FAILURE = "API call failed"
GENERIC_GENERATION_FAILURE = "Image generation failed. Please try again."


class HairGenerationError(Exception):
    """Base class for hairstyle generation errors."""

    error_type = "generation_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingCredential(HairGenerationError):
    """No access code is stored; the user has to enter one first."""

    error_type = "missing_credential"

    def __init__(self, message: str = "Access code is required"):
        super().__init__(message)


class AssetLoadError(HairGenerationError):
    """A style reference or uploaded photo could not be read or encoded."""

    error_type = "asset_load_error"


class RemoteCallError(HairGenerationError):
    """The proxy answered with a non-success status."""

    error_type = "remote_call_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ContentRefused(HairGenerationError):
    """The model answered with text instead of an image."""

    error_type = "content_refused"


class MalformedResponse(HairGenerationError):
    """The response carried neither an image nor a text explanation."""

    error_type = "malformed_response"

    def __init__(self, message: str = GENERIC_GENERATION_FAILURE):
        super().__init__(message)


class UnexpectedError(HairGenerationError):
    """Anything not classified above, e.g. network-layer failures."""

    error_type = "unexpected_error"
