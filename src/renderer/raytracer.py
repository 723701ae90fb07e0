# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Tuple as Pair

import numpy as np

from core.errors import RenderError
from renderer.canvas import Canvas
from renderer.config import RenderSettings

logger = logging.getLogger(__name__)

# Scene shipped to each worker process once, by the pool initializer.
_worker_state = {}


def _init_worker(camera, world, settings):
    _worker_state["camera"] = camera
    _worker_state["world"] = world
    _worker_state["settings"] = settings


def _render_band(y0: int, y1: int) -> np.ndarray:
    return render_rows(_worker_state["camera"], _worker_state["world"],
                       _worker_state["settings"], y0, y1)


def render_pixel(camera, world, px: int, py: int, antialias: int = 1, max_depth: int = 5):
    """
    Color of one pixel as an (r, g, b) tuple. With antialias n > 1 the pixel
    is split into an n x n grid and the sub-pixel centres are averaged.
    """
    if antialias == 1:
        return world.color_at(camera.ray_for_pixel(px, py), max_depth).as_tuple()
    r = g = b = 0.0
    for j in range(antialias):
        dy = (j + 0.5) / antialias
        for i in range(antialias):
            dx = (i + 0.5) / antialias
            color = world.color_at(camera.ray_for_pixel(px, py, dx, dy), max_depth)
            r += color.red
            g += color.green
            b += color.blue
    n = antialias * antialias
    return r / n, g / n, b / n


def render_rows(camera, world, settings: RenderSettings, y0: int, y1: int) -> np.ndarray:
    """Renders rows y0..y1-1 into a (rows, width, 3) array."""
    block = np.zeros((y1 - y0, camera.hsize, 3), dtype=np.float64)
    for y in range(y0, y1):
        for x in range(camera.hsize):
            block[y - y0, x] = render_pixel(camera, world, x, y,
                                            settings.antialias, settings.max_depth)
    return block


def partition_rows(height: int, rows_per_task: int) -> List[Pair[int, int]]:
    """Half-open (start, end) row bands covering the image top to bottom."""
    return [(y, min(y + rows_per_task, height)) for y in range(0, height, rows_per_task)]


class Renderer:
    """
    Renders a world through a camera into a Canvas, one band of rows per
    task. Bands are independent, so the image is the same for any number of
    workers.
    """
    def __init__(self, settings: RenderSettings = None):
        self.settings = settings if settings is not None else RenderSettings()

    def prepare_world(self, world):
        """
        Builds cached bounds and applies the light sampling overrides. The
        returned world shares objects with `world` but never its light list.
        """
        settings = self.settings
        world.prepare(settings.divide_threshold)
        if settings.shadow_samples is None and settings.jitter is None:
            return world
        lights = []
        for light in world.lights:
            if hasattr(light, "with_sampling"):
                light = light.with_sampling(usteps=settings.shadow_samples,
                                            vsteps=settings.shadow_samples,
                                            jitter=settings.jitter)
            lights.append(light)
        return world.with_lights(lights)

    def render(self, camera, world) -> Canvas:
        settings = self.settings
        world = self.prepare_world(world)
        canvas = Canvas(camera.hsize, camera.vsize)
        bands = partition_rows(camera.vsize, settings.rows_per_task)
        workers = min(settings.workers, len(bands))
        logger.info("Rendering %dx%d with %d worker(s) in %d band(s)",
                    camera.hsize, camera.vsize, workers, len(bands))

        start = time.perf_counter()
        if workers == 1:
            failed = self._render_serial(camera, world, bands, canvas)
        else:
            failed = self._render_parallel(camera, world, bands, canvas, workers)
        canvas.freeze()
        logger.info("Render finished in %.2f s", time.perf_counter() - start)

        if failed:
            raise RenderError(sorted(failed), canvas)
        return canvas

    def _render_serial(self, camera, world, bands, canvas):
        failed = []
        _init_worker(camera, world, self.settings)
        try:
            for y0, y1 in bands:
                try:
                    block = _render_band(y0, y1)
                except Exception:
                    logger.exception("Rows %d-%d failed", y0, y1 - 1)
                    failed.append((y0, y1))
                    continue
                canvas.write_rows(y0, block)
                logger.debug("Rows %d-%d done", y0, y1 - 1)
        finally:
            _worker_state.clear()
        return failed

    def _render_parallel(self, camera, world, bands, canvas, workers):
        failed = []
        with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                 initargs=(camera, world, self.settings)) as pool:
            futures = {pool.submit(_render_band, y0, y1): (y0, y1) for y0, y1 in bands}
            for future in as_completed(futures):
                y0, y1 = futures[future]
                try:
                    block = future.result()
                except Exception:
                    logger.exception("Rows %d-%d failed", y0, y1 - 1)
                    failed.append((y0, y1))
                    continue
                canvas.write_rows(y0, block)
                logger.debug("Rows %d-%d done", y0, y1 - 1)
        return failed
