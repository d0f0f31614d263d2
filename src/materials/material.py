# materials/material.py
from core.vector import Vector3
from core.utils import format_vec3


class Material:
    """
    Reflectivity of a surface: ambient, diffuse and specular RGB triples.
    Components are conventionally in [0, 1] but are not clamped.
    """
    def __init__(self, ambient: Vector3, diffuse: Vector3, specular: Vector3):
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular

    def dump(self) -> str:
        return ("Material data - \n"
                + format_vec3("ambient  - ", self.ambient)
                + format_vec3("diffuse  - ", self.diffuse)
                + format_vec3("specular - ", self.specular))

    def __repr__(self) -> str:
        return f"Material(ambient={self.ambient}, diffuse={self.diffuse}, specular={self.specular})"
