from __future__ import annotations

import pytest

from hair_integration.generation.response import (
    GeneratedImage,
    ResponseKind,
    parse_error_message,
    parse_generation_response,
)


def _response(*parts: dict) -> dict:
    return {"candidates": [{"content": {"parts": list(parts)}}]}


def test_image_part_is_returned() -> None:
    parsed = parse_generation_response(
        _response({"inlineData": {"mimeType": "image/png", "data": "ABC="}})
    )

    assert parsed.kind is ResponseKind.IMAGE
    assert parsed.image == GeneratedImage(mime_type="image/png", data="ABC=")


def test_image_wins_over_text_in_any_order() -> None:
    parsed = parse_generation_response(
        _response(
            {"text": "here you go"},
            {"inlineData": {"mimeType": "image/jpeg", "data": "XYZ="}},
        )
    )

    assert parsed.kind is ResponseKind.IMAGE
    assert parsed.image.data == "XYZ="


def test_snake_case_inline_data_is_accepted() -> None:
    parsed = parse_generation_response(
        _response({"inline_data": {"mime_type": "image/webp", "data": "QQ=="}})
    )

    assert parsed.image == GeneratedImage(mime_type="image/webp", data="QQ==")


def test_missing_mime_type_defaults_to_png() -> None:
    parsed = parse_generation_response(_response({"inlineData": {"data": "QQ=="}}))

    assert parsed.image.mime_type == "image/png"


def test_text_only_response_is_text() -> None:
    parsed = parse_generation_response(_response({"text": "cannot edit this image"}))

    assert parsed.kind is ResponseKind.TEXT
    assert parsed.text == "cannot edit this image"
    assert parsed.image is None


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"other": 1}]}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {"mimeType": "image/png", "data": "A"}}]}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {"mimeType": "image/png", "data": "not base64!"}}]}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {"mimeType": "image/png"}}]}}]},
        {"candidates": "nope"},
        [],
        None,
    ],
)
def test_shapes_without_image_or_text_are_empty(body: object) -> None:
    assert parse_generation_response(body).kind is ResponseKind.EMPTY


def test_generated_image_helpers() -> None:
    image = GeneratedImage(mime_type="image/jpeg", data="QUJD")

    assert image.data_uri == "data:image/jpeg;base64,QUJD"
    assert image.extension == "jpg"
    assert image.to_bytes() == b"ABC"


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ({"error": {"message": "bad code"}}, "bad code"),
        ({"error": "quota exceeded"}, "quota exceeded"),
        ({"error": {"message": ""}}, None),
        ({"error": {}}, None),
        ({"detail": "x"}, None),
        ("plain", None),
    ],
)
def test_parse_error_message(body: object, expected: str | None) -> None:
    assert parse_error_message(body) == expected


def test_whitespace_text_still_counts_as_refusal() -> None:
    parsed = parse_generation_response(_response({"text": "  "}))

    assert parsed.kind is ResponseKind.TEXT
    assert parsed.text == "  "


def test_invalid_image_falls_back_to_text() -> None:
    parsed = parse_generation_response(
        _response(
            {"inlineData": {"mimeType": "image/png", "data": "A"}},
            {"text": "partial output"},
        )
    )

    assert parsed.kind is ResponseKind.TEXT
    assert parsed.text == "partial output"
