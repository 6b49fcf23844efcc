"""
Parsing of generateContent-style responses returned by the proxy.

The remote model answers with ``candidates[0].content.parts[]``; each part
carries either an inline image or a text explanation. The parser collapses
this loosely-typed shape into a tagged ``ParsedResponse``.
"""

import base64
import binascii
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class ResponseKind(str, Enum):
    IMAGE = "image"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True)
class GeneratedImage:
    """Image payload produced by the remote model."""

    mime_type: str
    data: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    @property
    def extension(self) -> str:
        return self.mime_type.split("/")[-1].replace("jpeg", "jpg")

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


@dataclass(frozen=True)
class ParsedResponse:
    kind: ResponseKind
    image: Optional[GeneratedImage] = None
    text: Optional[str] = None


def _first_candidate_parts(data: Any) -> List[dict]:
    if not isinstance(data, dict):
        return []
    candidates = data.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return []

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        return []
    content = candidate.get("content") or {}
    if not isinstance(content, dict):
        return []
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        return []
    return [part for part in parts if isinstance(part, dict)]


def _is_base64(data: Any) -> bool:
    if not isinstance(data, str) or not data:
        return False
    try:
        base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def parse_generation_response(data: Any) -> ParsedResponse:
    """
    Classify a decoded JSON response.

    Image parts win over text parts regardless of their order. Both camelCase
    and snake_case keys are accepted.
    """
    parts = _first_candidate_parts(data)

    for part in parts:
        inline = part.get("inlineData") or part.get("inline_data")
        if isinstance(inline, dict) and _is_base64(inline.get("data")):
            mime_type = inline.get("mimeType") or inline.get("mime_type") or "image/png"
            return ParsedResponse(
                kind=ResponseKind.IMAGE,
                image=GeneratedImage(mime_type=mime_type, data=inline["data"]),
            )

    for part in parts:
        text = part.get("text")
        if isinstance(text, str) and text:
            return ParsedResponse(kind=ResponseKind.TEXT, text=text)

    return ParsedResponse(kind=ResponseKind.EMPTY)


def parse_error_message(data: Any) -> Optional[str]:
    """Extract ``error.message`` from a failure body, if there is one."""
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message
    elif isinstance(error, str) and error.strip():
        return error
    return None
