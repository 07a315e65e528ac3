# renderer/raytracer.py
import logging
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
from camera.camera import Camera
from core.vector import Vector3
from geometry.hittable import Hittable
from .config import RenderConfig
from .framebuffer import Framebuffer
from .integrator import ray_color
from .tone_mapping import to_color

logger = logging.getLogger(__name__)

class Renderer:
    """
    Monte-Carlo renderer: columns of the image are shared out over a pool
    of worker threads, each pixel averages `samples_per_pixel` jittered
    paths, and the tone-mapped result lands in a shared Framebuffer.

    The world and camera are only read during a render.

    Workers are threads, so tracing is concurrent but the GIL keeps the
    pure-Python per-pixel work from running on several cores at once.
    """
    def __init__(self, config: RenderConfig):
        self.config = config
        self._completed = 0
        self._progress_lock = threading.Lock()

    def _column_rng(self, column: int):
        if self.config.seed is None:
            return random.Random()
        # Independent, reproducible stream per column.
        return random.Random(self.config.seed * 1_000_003 + column)

    def sample_pixel(self, world: Hittable, camera: Camera, i: int, j: int, rng) -> Vector3:
        """
        Average radiance of pixel (i, j), j counted from the top row.
        """
        config = self.config
        color = Vector3.zero()
        for _ in range(config.samples_per_pixel):
            u = (i + rng.random()) / (config.width - 1)
            # Rows run top to bottom, viewport v runs bottom to top.
            v = (config.height - j + rng.random()) / (config.height - 1)
            ray = camera.get_ray(u, v)
            color = color + ray_color(ray, world, config.max_depth, rng, config.background)
        return color / config.samples_per_pixel

    def render_column(self, world: Hittable, camera: Camera, framebuffer: Framebuffer, i: int):
        rng = self._column_rng(i)
        for j in range(self.config.height):
            pixel = to_color(self.sample_pixel(world, camera, i, j, rng))
            framebuffer.put_pixel(i, j, pixel)
        with self._progress_lock:
            self._completed += 1
            completed = self._completed
        logger.debug("column %d done (%d/%d)", i, completed, self.config.width)

    def render(self, world: Hittable, camera: Camera, output_path: Optional[str] = None) -> Framebuffer:
        """
        Render the whole image and, if `output_path` is given, save it.
        A failed save is logged; the rendered framebuffer is returned either way.
        """
        config = self.config
        if (camera.width, camera.height) != (config.width, config.height):
            raise ValueError(f"Camera is {camera.width}x{camera.height} but the render "
                             f"config is {config.width}x{config.height}")

        framebuffer = Framebuffer(config.width, config.height)
        self._completed = 0
        logger.info("Rendering %dx%d, %d spp, depth %d on %d workers",
                    config.width, config.height, config.samples_per_pixel,
                    config.max_depth, config.workers)
        start = time.perf_counter()

        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            futures = [pool.submit(self.render_column, world, camera, framebuffer, i)
                       for i in range(config.width)]
            for future in futures:
                # Re-raises any exception from the worker.
                future.result()

        logger.info("Render finished in %.2fs", time.perf_counter() - start)

        if output_path is not None:
            framebuffer.save(output_path)
        return framebuffer

def render(world: Hittable, camera: Camera, samples_per_pixel: int, output_path: Optional[str],
           config: Optional[RenderConfig] = None) -> Framebuffer:
    """
    Render `world` through `camera` and write the image to `output_path`.

    Without an explicit config, one is built from the camera size and the
    RAYTRACER_* environment variables.
    """
    if config is None:
        config = RenderConfig.from_env(camera.width, camera.height, samples_per_pixel)
    elif config.samples_per_pixel != samples_per_pixel:
        raise ValueError(f"samples_per_pixel={samples_per_pixel} disagrees with "
                         f"config.samples_per_pixel={config.samples_per_pixel}")
    return Renderer(config).render(world, camera, output_path)
