"""Image persistence interface."""

from typing import Protocol


class ImageStore(Protocol):
    """Stores raw image bytes and hands back an opaque reference."""

    def save(self, image_bytes: bytes) -> str | None:
        """Persist the image and return its reference, or None on I/O failure."""


def detect_extension(image_bytes: bytes) -> str:
    """Infer a file extension from common image signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "jpg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "webp"
    return "png"
