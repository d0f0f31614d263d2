# materials/light.py
from core.vector import Vector3
from core.utils import format_vec3


class Light:
    """
    Point light source with an emissive RGB intensity.

    Lights are not part of the intersectable scene: rays never hit them,
    they only contribute diffuse illumination to visible surfaces.
    """
    def __init__(self, center: Vector3, emissivity: Vector3, objid: int = 0):
        self.center = center
        self.emissivity = emissivity
        self.objid = objid

    def emissive(self) -> Vector3:
        """
        Return the emitted intensity of the light.
        """
        return self.emissivity

    def dump(self) -> str:
        return ("Dumping object of type Light\n\nLight data\n"
                + format_vec3("emissivity - ", self.emissivity)
                + format_vec3("center     - ", self.center))

    def __repr__(self) -> str:
        return f"Light(id={self.objid}, center={self.center}, emissivity={self.emissivity})"
