# camera/camera.py
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.utils import format_vec2, format_vec3

class Projection:
    """
    Maps pixels onto a view window on the z = 0 plane and builds the rays
    from the viewpoint through it.

    The window is ``world_size`` units wide and high, centred on the origin.
    Pixel (0, 0) maps to the window's lower-left corner and
    (width - 1, height - 1) to the upper-right corner.
    """
    def __init__(self, width: int, height: int,
                 world_size: Tuple[float, float], view_point: Vector3):
        if width < 2 or height < 2:
            raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")
        self.width = width
        self.height = height
        self.world_size = (world_size[0], world_size[1])
        self.view_point = view_point

    def map_pixel(self, x: float, y: float) -> Vector3:
        """Map a (possibly fractional) pixel coordinate to world coordinates."""
        wx = x / (self.width - 1) * self.world_size[0] - self.world_size[0] / 2.0
        wy = y / (self.height - 1) * self.world_size[1] - self.world_size[1] / 2.0
        return Vector3(wx, wy, 0.0)

    def get_ray(self, x: int, y: int, rng=None) -> Ray:
        """
        Generates the ray through pixel (x, y). With an rng the sample
        position is jittered uniformly within half a pixel for anti-aliasing.
        """
        if rng is not None:
            jx, jy = rng.uniform(-0.5, 0.5, size=2)
            world = self.map_pixel(x + jx, y + jy)
        else:
            world = self.map_pixel(x, y)
        direction = (world - self.view_point).normalize()
        return Ray(self.view_point, direction)

    def dump(self) -> str:
        return ("Projection data - \n"
                + f"screen size - \n{self.width:6d} x {self.height:6d}\n"
                + format_vec2("world size - ", self.world_size)
                + format_vec3("view point - ", self.view_point))

    def __repr__(self) -> str:
        return (f"Projection({self.width}x{self.height}, world={self.world_size}, "
                f"view_point={self.view_point})")
