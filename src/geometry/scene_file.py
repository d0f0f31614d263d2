# geometry/scene_file.py
"""
Reading and writing the text scene format.

A scene file starts with the world size of the view window (2 numbers) and
the viewpoint (3 numbers), followed by object records until end of file.
Every record begins with an integer type tag; materials are three lines of
ambient, diffuse and specular reflectivity. After each group of numbers the
rest of its line is ignored, so lines may carry trailing comments.
"""
import io
import logging
from typing import List, Optional, Sequence, Tuple
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.plane import Plane, FinitePlane
from geometry.tiled_plane import TiledPlane
from geometry.procedural import ProceduralPlane, ProceduralSphere, check_shader_index
from geometry.world import Scene
from materials.light import Light
from materials.material import Material
from materials.procedural import PLANE_SHADERS, SPHERE_SHADERS

logger = logging.getLogger(__name__)

FIRST_TYPE = 10
LAST_TYPE = 24

LIGHT = 10
SPHERE = 13
PLANE = 14
FINITE_PLANE = 15
TILED_PLANE = 16
P_SPHERE = 19
P_PLANE = 20

# Recognised type tags this renderer has no implementation for.
UNSUPPORTED_TYPES = {
    11: "spotlight",
    12: "projector",
    17: "textured plane",
    18: "reflective sphere",
    21: "paraboloid",
    22: "cylinder",
    23: "cone",
    24: "hyperboloid",
}


class SceneFormatError(ValueError):
    """Raised when a scene file cannot be loaded."""


class SceneDescription:
    """Everything read from a scene file: view window, viewpoint and scene."""
    def __init__(self, world_size: Tuple[float, float], view_point: Vector3, scene: Scene):
        self.world_size = world_size
        self.view_point = view_point
        self.scene = scene

    def __repr__(self) -> str:
        return f"SceneDescription(world_size={self.world_size}, view_point={self.view_point}, scene={self.scene})"


class FieldReader:
    """Whitespace tokenizer that reads numbers in groups, one group per line."""
    def __init__(self, text: str):
        self.lines = text.splitlines()
        self.line_no = 0
        self.tokens: List[str] = []

    def _next_token(self) -> Optional[str]:
        while not self.tokens:
            if self.line_no >= len(self.lines):
                return None
            self.tokens = self.lines[self.line_no].split()
            self.line_no += 1
        return self.tokens.pop(0)

    def consume_line(self):
        self.tokens = []

    def read_floats(self, count: int, what: str) -> List[float]:
        values = []
        while len(values) < count:
            token = self._next_token()
            if token is None:
                break
            try:
                values.append(float(token))
            except ValueError:
                break
        if len(values) != count:
            raise SceneFormatError(
                f"{what}: invalid read count {len(values)}, expected {count} (line {self.line_no})")
        self.consume_line()
        return values

    def read_vec3(self, what: str) -> Vector3:
        return Vector3(*self.read_floats(3, what))

    def read_tag(self) -> Optional[int]:
        """Next record's type tag, or None at end of file."""
        token = self._next_token()
        if token is None:
            return None
        try:
            tag = int(float(token))
        except ValueError:
            raise SceneFormatError(f"invalid object type {token!r} (line {self.line_no})") from None
        self.consume_line()
        return tag


class SceneLoader:
    """
    Builds a Scene from a scene file. The loader owns the object id
    counter, so ids are unique per load and start from zero.
    """
    def __init__(self):
        self.next_id = 0
        self.loaders = {
            LIGHT: self.load_light,
            SPHERE: self.load_sphere,
            PLANE: self.load_plane,
            FINITE_PLANE: self.load_finite_plane,
            TILED_PLANE: self.load_tiled_plane,
            P_SPHERE: self.load_procedural_sphere,
            P_PLANE: self.load_procedural_plane,
        }

    def new_id(self) -> int:
        objid = self.next_id
        self.next_id += 1
        return objid

    def load(self, stream) -> SceneDescription:
        text = stream.read() if hasattr(stream, "read") else stream
        reader = FieldReader(text)

        world_size = tuple(reader.read_floats(2, "projection world size"))
        view_point = reader.read_vec3("projection view point")

        scene = Scene()
        while True:
            tag = reader.read_tag()
            if tag is None:
                break
            if tag < FIRST_TYPE or tag > LAST_TYPE:
                logger.debug("ignoring record with unknown type %d", tag)
                continue
            if tag in UNSUPPORTED_TYPES:
                raise SceneFormatError(
                    f"object type {tag} ({UNSUPPORTED_TYPES[tag]}) is not supported")
            obj = self.loaders[tag](reader)
            logger.debug("loaded %r", obj)
            scene.add(obj)

        logger.info("Loaded scene with %d surfaces and %d lights",
                    len(scene.surfaces), len(scene.lights))
        return SceneDescription(world_size, view_point, scene)

    def load_material(self, reader: FieldReader, what: str) -> Material:
        return Material(reader.read_vec3(f"{what}: ambient"),
                        reader.read_vec3(f"{what}: diffuse"),
                        reader.read_vec3(f"{what}: specular"))

    def load_light(self, reader: FieldReader) -> Light:
        objid = self.new_id()
        emissivity = reader.read_vec3("light: emissivity")
        center = reader.read_vec3("light: center")
        return Light(center, emissivity, objid)

    def _sphere_fields(self, reader: FieldReader, what: str):
        material = self.load_material(reader, what)
        center = reader.read_vec3(f"{what}: center")
        radius = reader.read_floats(1, f"{what}: radius")[0]
        return material, center, radius

    def _plane_fields(self, reader: FieldReader, what: str):
        material = self.load_material(reader, what)
        normal = reader.read_vec3(f"{what}: normal")
        point = reader.read_vec3(f"{what}: point")
        return material, normal, point

    def _shader_index(self, reader: FieldReader, shaders: list, what: str) -> int:
        index = int(reader.read_floats(1, f"{what}: shader index")[0])
        try:
            return check_shader_index(index, shaders)
        except IndexError as e:
            raise SceneFormatError(f"{what}: {e}") from None

    def _plane_size(self, reader: FieldReader, what: str) -> List[float]:
        size = reader.read_floats(2, f"{what}: size")
        if size[0] <= 0 or size[1] <= 0:
            raise SceneFormatError(f"{what}: size must be positive, got {size[0]:g} x {size[1]:g}")
        return size

    def load_sphere(self, reader: FieldReader) -> Sphere:
        objid = self.new_id()
        material, center, radius = self._sphere_fields(reader, "sphere")
        return Sphere(center, radius, material, objid)

    def load_plane(self, reader: FieldReader) -> Plane:
        objid = self.new_id()
        material, normal, point = self._plane_fields(reader, "plane")
        return Plane(normal, point, material, objid)

    def load_finite_plane(self, reader: FieldReader) -> FinitePlane:
        objid = self.new_id()
        material, normal, point = self._plane_fields(reader, "fplane")
        xdir = reader.read_vec3("fplane: xdir")
        size = self._plane_size(reader, "fplane")
        return FinitePlane(normal, point, xdir, size, material, objid)

    def load_tiled_plane(self, reader: FieldReader) -> TiledPlane:
        objid = self.new_id()
        material, normal, point = self._plane_fields(reader, "tplane")
        xdir = reader.read_vec3("tplane: xdir")
        size = self._plane_size(reader, "tplane")
        background = self.load_material(reader, "tplane background")
        return TiledPlane(normal, point, xdir, size, material, background, objid)

    def load_procedural_sphere(self, reader: FieldReader) -> ProceduralSphere:
        objid = self.new_id()
        material, center, radius = self._sphere_fields(reader, "psphere")
        index = self._shader_index(reader, SPHERE_SHADERS, "psphere")
        return ProceduralSphere(center, radius, material, index, objid)

    def load_procedural_plane(self, reader: FieldReader) -> ProceduralPlane:
        objid = self.new_id()
        material, normal, point = self._plane_fields(reader, "pplane")
        index = self._shader_index(reader, PLANE_SHADERS, "pplane")
        return ProceduralPlane(normal, point, material, index, objid)


def load_scene(stream) -> SceneDescription:
    """Load a scene from a text stream or string."""
    return SceneLoader().load(stream)


def _format_group(values: Sequence[float]) -> str:
    return " ".join(repr(float(v)) for v in values)


def write_scene(scene: Scene, world_size: Tuple[float, float], view_point: Vector3) -> str:
    """
    Serialize a scene back into the scene file format. Lights are written
    first, then surfaces, each group in scene order.
    """
    out = io.StringIO()
    out.write(f"{_format_group(world_size)}    # world size\n")
    out.write(f"{_format_group(view_point)}    # view point\n")
    for light in scene.lights:
        out.write(f"\n{LIGHT}    # Light {light.objid}\n")
        out.write(_format_group(light.emissivity) + "\n")
        out.write(_format_group(light.center) + "\n")
    for surface in scene.surfaces:
        out.write(f"\n{surface.tag}    # {surface.type_name} {surface.objid}\n")
        for group in surface.record_fields():
            out.write(_format_group(group) + "\n")
    return out.getvalue()


def dump_scene(scene: Scene, out) -> None:
    """Write a labelled, human readable dump of every surface then every light."""
    for obj in list(scene.surfaces) + list(scene.lights):
        out.write(obj.dump())
        out.write("\n")
