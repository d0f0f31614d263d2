# geometry/sphere.py
import math
from typing import List, Optional, Sequence
from core.vector import Vector3
from core.ray import Ray
from core.utils import format_vec3, format_scalar
from geometry.hittable import Surface, HitRecord
from materials.material import Material

class Sphere(Surface):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    type_name = "Sphere"
    tag = 13

    def __init__(self, center: Vector3, radius: float, material: Material, objid: int = 0):
        super().__init__(material, objid)
        self.center = center
        self.radius = radius

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant <= 0:
            return None

        # Only the near root counts; an origin inside the sphere is a miss.
        root = (-b - math.sqrt(discriminant)) / (2 * a)
        if root <= 0:
            return None

        p = ray.at(root)
        return HitRecord(root, p, (p - self.center).normalize(), self)

    def record_fields(self) -> List[Sequence[float]]:
        return super().record_fields() + [self.center, (self.radius,)]

    def dump(self) -> str:
        return (super().dump()
                + "\nSphere data\n"
                + format_vec3("center - ", self.center)
                + format_scalar("radius - ", self.radius))
