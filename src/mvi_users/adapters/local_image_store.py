"""Filesystem-backed image store."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from mvi_users.services.images import ImageStore, detect_extension

_logger = logging.getLogger(__name__)


@dataclass
class LocalImageStore(ImageStore):
    """Writes images into a cache directory and returns file URIs."""

    directory: Path

    def save(self, image_bytes: bytes) -> str | None:
        """Write the image and return its file URI, or None if writing fails."""
        extension = detect_extension(image_bytes)
        path = self.directory / f"user_image_{time.time_ns()}.{extension}"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(image_bytes)
        except OSError:
            _logger.exception("Failed to save image: path=%s", path)
            return None
        return path.resolve().as_uri()
