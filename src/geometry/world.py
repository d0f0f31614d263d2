# src/geometry/world.py
from typing import List, Optional
from core.ray import Ray
from geometry.hittable import Surface, HitRecord
from materials.light import Light

class Scene:
    """
    The world model: surfaces that rays can hit and the lights that
    illuminate them. Both lists keep insertion order, which decides ties
    between equally distant hits.
    """
    def __init__(self):
        self.surfaces: List[Surface] = []
        self.lights: List[Light] = []

    def add(self, obj):
        if isinstance(obj, Light):
            self.lights.append(obj)
        else:
            self.surfaces.append(obj)

    def find_closest(self, ray: Ray, exclude: Optional[Surface] = None) -> Optional[HitRecord]:
        """
        Return the nearest hit with a strictly positive distance, or None.

        The first surface in scene order wins a tie. ``exclude`` is skipped,
        which keeps a reflected or shadow ray from hitting the surface it
        leaves.
        """
        closest = None
        for obj in self.surfaces:
            if obj is exclude:
                continue
            rec = obj.hit(ray)
            if rec is not None and rec.t > 0.0 and (closest is None or rec.t < closest.t):
                closest = rec
        return closest

    def __len__(self) -> int:
        return len(self.surfaces) + len(self.lights)

    def __repr__(self) -> str:
        return f"Scene({len(self.surfaces)} surfaces, {len(self.lights)} lights)"
