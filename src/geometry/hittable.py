# geometry/hittable.py
from typing import List, Optional, Sequence
from core.vector import Vector3
from core.ray import Ray
from materials.material import Material

class HitRecord:
    """
    Records details of a ray-surface intersection.

    A record is created by the surface's hit() and then passed along to the
    shading and illumination code, so the surfaces themselves never hold
    per-ray state.
    """
    __slots__ = ("t", "p", "normal", "surface")

    def __init__(self, t: float, p: Vector3, normal: Vector3, surface: "Surface"):
        self.t = t                # Distance along the ray
        self.p = p                # Intersection point
        self.normal = normal      # Outward surface normal at intersection
        self.surface = surface    # The surface that was hit

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p}, normal={self.normal}, surface={self.surface!r})"

class Surface:
    """
    Abstract class for intersectable scene objects.

    Subclasses implement hit(). The shading queries default to the stored
    material and may be overridden by variants whose colour depends on the
    hit point.
    """
    type_name = "Surface"
    tag: Optional[int] = None

    def __init__(self, material: Material, objid: int = 0):
        self.material = material
        self.objid = objid

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def ambient(self, rec: HitRecord) -> Vector3:
        return self.material.ambient

    def diffuse(self, rec: HitRecord) -> Vector3:
        return self.material.diffuse

    def specular(self, rec: HitRecord) -> Vector3:
        return self.material.specular

    def record_fields(self) -> List[Sequence[float]]:
        """
        The numeric field groups of this object's scene-file record, in file
        order, excluding the type tag. Each group is written on its own line.
        """
        m = self.material
        return [m.ambient, m.diffuse, m.specular]

    def dump(self) -> str:
        return f"Dumping object of type {self.type_name}\n" + self.material.dump()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.objid})"
