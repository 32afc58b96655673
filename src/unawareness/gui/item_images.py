"""
Item thumbnails for the slot detail view.

Item image text is a path relative to the game's data directory. Item
sprites are strips of frames laid out left to right; the thumbnail is the
leftmost square frame.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from PIL import Image
from PySide6.QtGui import QPixmap

from ..necro_data.models import Item

THUMBNAIL_SIZE = 24


def load_item_frame(image_path: Path) -> Image.Image:
    """Open an item sprite and cut out its first frame.

    Raises:
        OSError: if the file is missing or not an image
    """
    with Image.open(image_path) as sprite:
        sprite.load()
        side = min(sprite.width, sprite.height)
        frame = sprite.crop((0, 0, side, side))
    if frame.mode not in ("RGBA", "RGB", "LA", "L"):
        frame = frame.convert("RGBA")
    return frame


class ItemImageCache:
    """Resolves item images under a data directory and caches pixmaps."""

    def __init__(self, data_path: Optional[Path], size: int = THUMBNAIL_SIZE):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.data_path = data_path
        self.size = size
        self._pixmap_cache: Dict[str, Optional[QPixmap]] = {}

    def resolve(self, item: Item) -> Optional[Path]:
        """Return the sprite path of an item if it exists on disk."""
        relative = item.image.strip()
        if not relative or self.data_path is None:
            return None
        image_path = self.data_path / relative
        return image_path if image_path.is_file() else None

    def pixmap_for(self, item: Item) -> Optional[QPixmap]:
        """Return a scaled thumbnail for an item, or None if unavailable."""
        if item.id in self._pixmap_cache:
            return self._pixmap_cache[item.id]

        pixmap: Optional[QPixmap] = None
        image_path = self.resolve(item)
        if image_path is not None:
            try:
                pixmap = self._to_pixmap(load_item_frame(image_path))
            except OSError as e:
                self.logger.warning(f"Cannot load image for {item.id}: {e}")

        self._pixmap_cache[item.id] = pixmap
        return pixmap

    def _to_pixmap(self, frame: Image.Image) -> QPixmap:
        from PIL.ImageQt import ImageQt

        # NEAREST keeps pixel art crisp
        frame = frame.resize((self.size, self.size), Image.Resampling.NEAREST)
        return QPixmap.fromImage(ImageQt(frame))

    def clear(self) -> None:
        """Drop cached pixmaps (after the data directory changes)."""
        self._pixmap_cache.clear()
