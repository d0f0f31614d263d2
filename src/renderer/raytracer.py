# renderer/raytracer.py
import logging
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import reflect
from geometry.hittable import Surface
from geometry.world import Scene
from .illumination import diffuse_illumination

logger = logging.getLogger(__name__)

# A ray that has travelled further than this contributes nothing.
MAX_DIST = 20.0
# Hard ceiling on reflection bounces, independent of distance.
MAX_DEPTH = 64


class RayTracer:
    """
    Recursive Whitted-style tracer: ambient plus diffuse lighting divided by
    the total distance travelled, plus mirror reflection weighted by the
    surface's specular reflectivity.
    """
    def __init__(self, scene: Scene, max_dist: float = MAX_DIST, max_depth: int = MAX_DEPTH):
        self.scene = scene
        self.max_dist = max_dist
        self.max_depth = max_depth

    def trace(self, ray: Ray, total_dist: float = 0.0,
              last_hit: Optional[Surface] = None, depth: int = 0) -> Vector3:
        """
        Returns the unclamped intensity arriving along ray.

        Parameters:
            ray: The ray to follow; its direction must be a unit vector.
            total_dist: Distance already travelled by earlier segments.
            last_hit: The surface that reflected this ray, excluded from
                the intersection query.
            depth: Number of reflections so far.
        """
        if total_dist > self.max_dist:
            return Vector3.zero()
        if depth > self.max_depth:
            logger.debug("depth ceiling %d reached at distance %.3f", self.max_depth, total_dist)
            return Vector3.zero()

        rec = self.scene.find_closest(ray, exclude=last_hit)
        if rec is None:
            return Vector3.zero()

        total_dist += rec.t
        surface = rec.surface

        intensity = surface.ambient(rec) + diffuse_illumination(self.scene, rec)
        intensity = intensity / total_dist

        specref = surface.specular(rec)
        if specref.dot(specref) > 0:
            refdir = reflect(ray.direction, rec.normal.normalize())
            specint = self.trace(Ray(rec.p, refdir), total_dist, surface, depth + 1)
            intensity = intensity + specint * specref

        return intensity


def ray_trace(scene: Scene, ray: Ray, max_dist: float = MAX_DIST,
              max_depth: int = MAX_DEPTH) -> Vector3:
    """Trace a single primary ray through scene."""
    return RayTracer(scene, max_dist, max_depth).trace(ray)
