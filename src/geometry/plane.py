# geometry/plane.py
from typing import List, Optional, Sequence, Tuple
from core.vector import Vector3
from core.matrix import Matrix3
from core.ray import Ray
from core.utils import project_onto_plane, format_vec3, format_vec2, format_mat3
from geometry.hittable import Surface, HitRecord
from materials.material import Material

# Hits above this world z coordinate are discarded by every plane variant.
PLANE_Z_CUTOFF = 0.01


def plane_basis(normal: Vector3, xdir: Vector3) -> Matrix3:
    """
    Build the rotation taking world offsets into a plane's local frame.

    Row 0 is xdir projected onto the plane, row 2 is the unit normal and
    row 1 completes the right-handed frame, so that for an offset d from
    the plane's reference point (R @ d).x and .y are in-plane coordinates.
    """
    n = normal.normalize()
    x = project_onto_plane(n, xdir.normalize()).normalize()
    return Matrix3.from_rows(x, n.cross(x), n)


class Plane(Surface):
    """
    An infinite plane through a reference point with the given normal.
    """
    type_name = "Plane"
    tag = 14

    def __init__(self, normal: Vector3, point: Vector3, material: Material, objid: int = 0):
        super().__init__(material, objid)
        self.normal = normal
        self.point = point

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if denom == 0:
            # Ray is parallel to the plane
            return None

        t = (self.normal.dot(self.point) - self.normal.dot(ray.origin)) / denom
        if t < 0:
            return None

        p = ray.at(t)
        if p.z > PLANE_Z_CUTOFF:
            return None

        return HitRecord(t, p, self.normal, self)

    def record_fields(self) -> List[Sequence[float]]:
        return super().record_fields() + [self.normal, self.point]

    def dump(self) -> str:
        return (super().dump()
                + "\nPlane data\n"
                + format_vec3("normal - ", self.normal)
                + format_vec3("point  - ", self.point))


class FinitePlane(Plane):
    """
    A rectangle lying in a plane. The rectangle spans [0, size[0]] along
    xdir and [0, size[1]] along normal x xdir, starting at the plane point.
    """
    type_name = "FPlane"
    tag = 15

    def __init__(self, normal: Vector3, point: Vector3, xdir: Vector3,
                 size: Tuple[float, float], material: Material, objid: int = 0):
        unit_normal = normal.normalize()
        super().__init__(unit_normal, point, material, objid)
        self.xdir = project_onto_plane(unit_normal, xdir.normalize())
        self.size = (size[0], size[1])
        self.rotation = plane_basis(unit_normal, self.xdir)

    def local_coordinates(self, p: Vector3) -> Vector3:
        return self.rotation @ (p - self.point)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        rec = super().hit(ray)
        if rec is None:
            return None

        local = self.local_coordinates(rec.p)
        if not (0.0 <= local.x <= self.size[0]) or not (0.0 <= local.y <= self.size[1]):
            return None
        return rec

    def record_fields(self) -> List[Sequence[float]]:
        return super().record_fields() + [self.xdir, self.size]

    def dump(self) -> str:
        return (super().dump()
                + "\nFPlane data\n"
                + format_vec3("xdir - ", self.xdir)
                + format_vec2("size - ", self.size)
                + format_mat3("rotation matrix - ", self.rotation))
