# geometry/procedural.py
from typing import List, Sequence
from core.vector import Vector3
from core.utils import format_scalar
from geometry.hittable import HitRecord
from geometry.plane import Plane
from geometry.sphere import Sphere
from materials.material import Material
from materials.procedural import PLANE_SHADERS, SPHERE_SHADERS


def check_shader_index(index: int, shaders: list) -> int:
    if not 0 <= index < len(shaders):
        raise IndexError(f"shader index {index} out of bounds (have {len(shaders)})")
    return index


class ProceduralPlane(Plane):
    """Infinite plane whose ambient colour comes from a procedural shader."""
    type_name = "PPlane"
    tag = 20

    def __init__(self, normal: Vector3, point: Vector3, material: Material,
                 shader_index: int, objid: int = 0):
        super().__init__(normal, point, material, objid)
        self.shader_index = check_shader_index(shader_index, PLANE_SHADERS)
        self.shader = PLANE_SHADERS[shader_index]

    def ambient(self, rec: HitRecord) -> Vector3:
        return self.shader.shade(rec.p, self.point, self.material.ambient)

    def record_fields(self) -> List[Sequence[float]]:
        return super().record_fields() + [(self.shader_index,)]

    def dump(self) -> str:
        return super().dump() + format_scalar(f"shader ({self.shader.name}) - ", self.shader_index)


class ProceduralSphere(Sphere):
    """Sphere whose ambient colour comes from a procedural shader."""
    type_name = "PSphere"
    tag = 19

    def __init__(self, center: Vector3, radius: float, material: Material,
                 shader_index: int, objid: int = 0):
        super().__init__(center, radius, material, objid)
        self.shader_index = check_shader_index(shader_index, SPHERE_SHADERS)
        self.shader = SPHERE_SHADERS[shader_index]

    def ambient(self, rec: HitRecord) -> Vector3:
        return self.shader.shade(rec.p, self.center, self.material.ambient)

    def record_fields(self) -> List[Sequence[float]]:
        return super().record_fields() + [(self.shader_index,)]

    def dump(self) -> str:
        return super().dump() + format_scalar(f"shader ({self.shader.name}) - ", self.shader_index)
