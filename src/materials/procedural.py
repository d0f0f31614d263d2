# materials/procedural.py
import math
from typing import Callable, List
from core.vector import Vector3


class ProceduralShader:
    """Base class for procedural ambient colour functions."""
    name = "procedural"

    def shade(self, point: Vector3, reference: Vector3, ambient: Vector3) -> Vector3:
        """
        Compute the ambient colour at a hit point.

        Args:
            point: The hit point in world coordinates.
            reference: The reference point of the shape (plane point or
                sphere centre).
            ambient: The surface's own ambient reflectivity.
        """
        raise NotImplementedError("shade() must be implemented by shader subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BandShader(ProceduralShader):
    """Alternating bands: zaps the red or the blue channel of the ambient colour."""
    name = "bands"

    def shade(self, point: Vector3, reference: Vector3, ambient: Vector3) -> Vector3:
        d = point - reference
        band = 1000 + d.x * d.y * d.y / 100 + d.x * d.y / 100
        if int(band) & 1:
            return Vector3(0.0, ambient.y, ambient.z)
        return Vector3(ambient.x, ambient.y, 0.0)


class RingShader(ProceduralShader):
    """Concentric rings around the z axis, alternating between two colours."""
    name = "rings"

    def __init__(self, even: Vector3, odd: Vector3):
        self.even = even
        self.odd = odd

    def shade(self, point: Vector3, reference: Vector3, ambient: Vector3) -> Vector3:
        radius = math.sqrt(point.x * point.x + point.y * point.y)
        return self.even if int(radius) % 2 == 0 else self.odd


class AsymptoteShader(ProceduralShader):
    """
    Thresholds sin(pattern(point)) at 0.5, producing the asymptotic line
    pattern of the pattern function's level sets.
    """
    name = "asymptote"

    def __init__(self, pattern: Callable[[Vector3], float], low: Vector3, high: Vector3):
        self.pattern = pattern
        self.low = low
        self.high = high

    def shade(self, point: Vector3, reference: Vector3, ambient: Vector3) -> Vector3:
        if math.sin(self.pattern(point)) < .5:
            return self.low
        return self.high


PLANE_SHADERS: List[ProceduralShader] = [
    BandShader(),
    RingShader(Vector3(1, 0, 0), Vector3(2, 2, 2)),
    AsymptoteShader(lambda p: p.x * p.y * p.z * (p.x + 2),
                    low=Vector3(0, 0, 4), high=Vector3(8, 8, 0)),
]

SPHERE_SHADERS: List[ProceduralShader] = [
    BandShader(),
    RingShader(Vector3(1, 0, 0), Vector3(1, 1, 1)),
    AsymptoteShader(lambda p: p.x * p.y * p.z * p.z,
                    low=Vector3(0, 4, 1), high=Vector3(8, 8, 0)),
]
