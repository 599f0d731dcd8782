from __future__ import annotations

"""
Proxy Pattern: Lazy Image Viewer.

The proxy stands in for an expensive image and defers loading until the
first display request. Later requests reuse the loaded image.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from structural_patterns.patterns.output import Emitter, console_emitter

logger = logging.getLogger(__name__)


class Image(ABC):
    """Common interface of the real image and its proxy."""

    @abstractmethod
    def display(self) -> None:
        """Render the image."""


class RealImage(Image):
    """
    Image loaded eagerly at construction time.

    The class keeps a count of how many real images have been loaded.
    """

    loaded_images_count: int = 0

    def __init__(self, filename: str, emit: Emitter = console_emitter) -> None:
        self._filename = filename
        self._emit = emit
        self._load_from_disk()
        RealImage.loaded_images_count += 1

    @classmethod
    def reset_loaded_count(cls) -> None:
        """Restart the load counter at zero."""
        cls.loaded_images_count = 0

    @property
    def filename(self) -> str:
        return self._filename

    def _load_from_disk(self) -> None:
        logger.debug(f"Loading real image '{self._filename}'.")
        self._emit(f"Loading image: {self._filename}")

    def display(self) -> None:
        self._emit(f"Displaying image: {self._filename}")


class ImageProxy(Image):
    """
    Placeholder that creates the RealImage on the first display call.
    """

    def __init__(self, filename: str, emit: Emitter = console_emitter) -> None:
        self._filename = filename
        self._emit = emit
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            self._real_image = RealImage(self._filename, emit=self._emit)
        self._real_image.display()
