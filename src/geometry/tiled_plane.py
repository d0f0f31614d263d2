# geometry/tiled_plane.py
import math
from typing import List, Sequence, Tuple
from core.vector import Vector3
from core.utils import format_vec3, format_vec2, format_mat3
from geometry.hittable import HitRecord
from geometry.plane import Plane, plane_basis
from materials.material import Material

class TiledPlane(Plane):
    """
    An infinite plane tiled like a checkerboard.

    Tiles are size[0] by size[1] in the plane's local frame. Alternate
    tiles use the plane's own material and the background material for all
    three shading queries; intersection is the plain infinite-plane test.
    """
    type_name = "TPlane"
    tag = 16

    def __init__(self, normal: Vector3, point: Vector3, xdir: Vector3,
                 size: Tuple[float, float], material: Material,
                 background: Material, objid: int = 0):
        super().__init__(normal, point, material, objid)
        self.xdir = xdir
        self.size = (size[0], size[1])
        self.background = background
        self.rotation = plane_basis(normal, xdir)

    def tile_index(self, p: Vector3) -> int:
        local = self.rotation @ (p - self.point)
        return math.floor(local.x / self.size[0]) + math.floor(local.y / self.size[1])

    def select(self, rec: HitRecord) -> Material:
        """Return the material of the tile containing the hit point."""
        if self.tile_index(rec.p) % 2 == 1:
            return self.material
        return self.background

    def ambient(self, rec: HitRecord) -> Vector3:
        return self.select(rec).ambient

    def diffuse(self, rec: HitRecord) -> Vector3:
        return self.select(rec).diffuse

    def specular(self, rec: HitRecord) -> Vector3:
        return self.select(rec).specular

    def record_fields(self) -> List[Sequence[float]]:
        bg = self.background
        return super().record_fields() + [self.xdir, self.size,
                                          bg.ambient, bg.diffuse, bg.specular]

    def dump(self) -> str:
        return (super().dump()
                + "\nTPlane data\n"
                + format_vec3("xdir - ", self.xdir)
                + format_vec2("size - ", self.size)
                + format_mat3("rotation matrix - ", self.rotation)
                + self.background.dump())
