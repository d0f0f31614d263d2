# renderer/image.py
import logging
import time
import numpy as np
from PIL import Image
from camera.camera import Projection
from geometry.world import Scene
from .raytracer import RayTracer, MAX_DIST, MAX_DEPTH

logger = logging.getLogger(__name__)


class Renderer:
    """
    Drives the tracer over every pixel of a projection.

    Each pixel averages ``samples`` rays; with more than one sample the
    rays are jittered within the pixel using a seeded numpy generator, so a
    given seed always produces the same image.
    """
    def __init__(self, projection: Projection, samples: int = 1, seed=None,
                 max_dist: float = MAX_DIST, max_depth: int = MAX_DEPTH):
        if samples < 1:
            raise ValueError(f"samples must be at least 1, got {samples}")
        self.projection = projection
        self.samples = samples
        self.rng = np.random.default_rng(seed)
        self.max_dist = max_dist
        self.max_depth = max_depth

    def render_pixel(self, tracer: RayTracer, x: int, y: int) -> np.ndarray:
        """Average intensity of pixel (x, y), clamped to [0, 1]."""
        rng = self.rng if self.samples > 1 else None
        total = np.zeros(3, dtype=np.float64)
        for _ in range(self.samples):
            ray = self.projection.get_ray(x, y, rng)
            total += tracer.trace(ray).to_tuple()
        return np.clip(total / self.samples, 0.0, 1.0)

    def render(self, scene: Scene) -> np.ndarray:
        """
        Render the scene into a (height, width, 3) float array in [0, 1].
        Row 0 is the top of the image, i.e. the largest world y.
        """
        width, height = self.projection.width, self.projection.height
        tracer = RayTracer(scene, self.max_dist, self.max_depth)
        image = np.zeros((height, width, 3), dtype=np.float64)

        start = time.time()
        for row in range(height):
            y = height - 1 - row
            for x in range(width):
                image[row, x] = self.render_pixel(tracer, x, y)
            logger.debug("rendered row %d/%d", row + 1, height)

        logger.info("Rendered %dx%d image, %d sample(s) per pixel, in %.2fs",
                    width, height, self.samples, time.time() - start)
        return image


def to_rgb8(image: np.ndarray) -> np.ndarray:
    """Clamp to [0, 1] and quantize to 8 bits per channel (truncating)."""
    return (np.clip(image, 0.0, 1.0) * 255).astype(np.uint8)


def write_ppm(image: np.ndarray, stream) -> None:
    """Write a float image in [0, 1] to a binary stream as a P6 PPM."""
    Image.fromarray(to_rgb8(image)).save(stream, format="PPM")
