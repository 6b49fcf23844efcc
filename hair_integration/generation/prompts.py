from typing import Any, Dict

REQUEST_MIME_TYPE = "image/jpeg"
ASPECT_RATIO = "2:3"
IMAGE_SIZE = "2K"

HAIRSTYLE_INSTRUCTION = """You are a world-class hair stylist and image editing expert.
Using Image 1 (a portrait of a person) and Image 2 (a sample hairstyle), generate a simulation image of the highest quality.

[MOST IMPORTANT: facial identity]
- Fully preserve the facial features of the person in Image 1 (eyes, nose, mouth, face outline) and guarantee it is the same person.

[Hairstyle reproduction and blending]
- Apply the hairstyle, length, color and texture of Image 2 to the person in Image 1.
- Make the hairline, face line and the area around the ears connect naturally, blending without any sense of incongruity.

[Output]
- A clean, bright beauty salon mirror shot or portrait.
- A realistic image detailed enough to show the texture of every single strand of hair."""


def _inline_part(data: str) -> Dict[str, Any]:
    return {
        "inlineData": {
            "mimeType": REQUEST_MIME_TYPE,
            "data": data,
        }
    }


def build_generation_request(
    access_code: str,
    customer_photo_b64: str,
    style_image_b64: str,
) -> Dict[str, Any]:
    """Build the JSON body sent to the generation proxy."""
    return {
        "accessCode": access_code,
        "contents": [
            {
                "parts": [
                    {"text": HAIRSTYLE_INSTRUCTION},
                    _inline_part(customer_photo_b64),
                    _inline_part(style_image_b64),
                ]
            }
        ],
        "generationConfig": {
            "responseModalities": ["IMAGE"],
            "imageConfig": {
                "aspectRatio": ASPECT_RATIO,
                "imageSize": IMAGE_SIZE,
            },
        },
    }
