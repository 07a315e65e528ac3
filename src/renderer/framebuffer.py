# renderer/framebuffer.py
import logging
import threading
from typing import Tuple
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

class Framebuffer:
    """
    8-bit RGB image shared by render workers. Row 0 is the top of the image.

    Writes are serialised by a lock; each worker computes its pixels
    outside the lock and only takes it to store the result.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self._lock = threading.Lock()

    def put_pixel(self, x: int, y: int, rgb: Tuple[int, int, int]):
        with self._lock:
            self.pixels[y, x] = rgb

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def to_image(self) -> Image.Image:
        with self._lock:
            return Image.fromarray(self.pixels.copy())

    def save(self, path) -> bool:
        """
        Encode the buffer to `path`, format chosen from the extension.
        Failures are logged and reported as False.
        """
        try:
            self.to_image().save(path)
        except (OSError, ValueError, KeyError) as e:
            # KeyError: Pillow knows the extension but has no writer for it.
            logger.error("error saving image to %s: %s", path, e)
            return False
        logger.info("saved image as %s", path)
        return True
