# renderer/illumination.py
import logging
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import HitRecord
from geometry.world import Scene
from materials.light import Light

logger = logging.getLogger(__name__)


def process_light(scene: Scene, rec: HitRecord, light: Light) -> Vector3:
    """
    Diffuse contribution of one light at a hit point.

    Zero when the surface faces away from the light or another surface
    lies strictly between the hit point and the light. Otherwise
    diffuse * emissivity * cos / distance, per channel.
    """
    to_light = light.center - rec.p
    light_dist = to_light.length()
    if light_dist == 0:
        return Vector3.zero()
    direction = to_light / light_dist

    cos = rec.normal.dot(direction)
    if cos < 0:
        return Vector3.zero()

    occluder = scene.find_closest(Ray(rec.p, direction), exclude=rec.surface)
    if occluder is not None and occluder.t < light_dist:
        logger.debug("surface %d occluded from light %d by surface %d at %.3f",
                     rec.surface.objid, light.objid, occluder.surface.objid, occluder.t)
        return Vector3.zero()

    diffuse = rec.surface.diffuse(rec)
    return diffuse * light.emissive() * (cos / light_dist)


def diffuse_illumination(scene: Scene, rec: HitRecord) -> Vector3:
    """
    Sum the diffuse contributions of every light in the scene, in scene
    order. The result is not clamped.
    """
    total = Vector3.zero()
    for light in scene.lights:
        total = total + process_light(scene, rec, light)
    return total
