"""Convert uploaded image bytes into data URLs."""

import base64

ALLOWED_IMAGE_TYPES = ("image/png", "image/jpeg", "image/gif", "image/webp")


def to_data_url(data: bytes, mime_type: str) -> str:
    """
    Encode bytes as a base64 data URL.

    Example: (b"...", "image/png") -> "data:image/png;base64,..."
    """
    if mime_type not in ALLOWED_IMAGE_TYPES:
        raise ValueError(f"Unsupported image type: {mime_type}")
    if not data:
        raise ValueError("Image is empty")
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def guess_image_type(filename: str) -> str:
    """Guess an image mime type from a filename extension."""
    suffix = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if suffix == "jpg":
        suffix = "jpeg"
    mime_type = f"image/{suffix}"
    if mime_type not in ALLOWED_IMAGE_TYPES:
        raise ValueError(f"Unsupported image file: {filename}")
    return mime_type
