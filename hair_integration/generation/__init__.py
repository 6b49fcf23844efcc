"""
Hairstyle generation - the request lifecycle for one simulation attempt.

The module provides:
- the generation orchestrator and its presentation protocol
- the proxy client, request builder and response parser
- session state with the in-flight guard
"""

from .encoder import AssetEncoder, EncodedImage
from .errors import (
    AssetLoadError,
    ContentRefused,
    HairGenerationError,
    MalformedResponse,
    MissingCredential,
    RemoteCallError,
    UnexpectedError,
)
from .image_client import HairstyleClient
from .response import GeneratedImage, ParsedResponse, ResponseKind, parse_generation_response
from .service import HairstyleGenerator, Presenter
from .session import GenerationResult, InFlightGuard, SelectionState, SessionRegistry, SessionState

__all__ = [
    # Orchestrator
    "HairstyleGenerator",
    "Presenter",
    # Clients
    "HairstyleClient",
    "AssetEncoder",
    "EncodedImage",
    # Responses
    "GeneratedImage",
    "ParsedResponse",
    "ResponseKind",
    "parse_generation_response",
    # State
    "GenerationResult",
    "InFlightGuard",
    "SelectionState",
    "SessionRegistry",
    "SessionState",
    # Errors
    "HairGenerationError",
    "MissingCredential",
    "AssetLoadError",
    "RemoteCallError",
    "ContentRefused",
    "MalformedResponse",
    "UnexpectedError",
]
