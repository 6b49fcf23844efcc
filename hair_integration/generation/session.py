"""
Per-session state: the user's selection and the in-flight guard.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..styles import StyleOption
from .encoder import AssetEncoder
from .errors import HairGenerationError
from .response import GeneratedImage

logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Chosen style and uploaded photo. New selections overwrite old ones."""

    selected_style: Optional[StyleOption] = None
    customer_photo_bytes: Optional[bytes] = None
    customer_photo_encoded: Optional[str] = None

    def select_style(self, style: StyleOption) -> None:
        self.selected_style = style

    def select_photo(self, image_bytes: bytes) -> None:
        """Validate and store an uploaded photo. Raises AssetLoadError."""
        encoded = AssetEncoder.encode_bytes(image_bytes)
        self.customer_photo_bytes = image_bytes
        self.customer_photo_encoded = encoded.data

    @property
    def can_generate(self) -> bool:
        return self.selected_style is not None and bool(self.customer_photo_encoded)


class InFlightGuard:
    """Allows at most one generation at a time. Attempts while held are ignored."""

    def __init__(self):
        self.is_generating = False

    def try_acquire(self) -> bool:
        if self.is_generating:
            return False
        self.is_generating = True
        return True

    def release(self) -> None:
        self.is_generating = False


@dataclass
class SessionState:
    selection: SelectionState = field(default_factory=SelectionState)
    guard: InFlightGuard = field(default_factory=InFlightGuard)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation attempt: an image or an error."""

    image: Optional[GeneratedImage] = None
    error: Optional[HairGenerationError] = None

    @property
    def ok(self) -> bool:
        return self.image is not None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


class SessionRegistry:
    """In-memory sessions keyed by chat or user id. Lost on restart."""

    def __init__(self):
        self._sessions: Dict[int, SessionState] = {}

    def get(self, owner_id: int) -> SessionState:
        session = self._sessions.get(owner_id)
        if session is None:
            logger.debug("Creating session for %s", owner_id)
            session = self._sessions[owner_id] = SessionState()
        return session

    def __len__(self) -> int:
        return len(self._sessions)
