"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source tree to the path
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.vector import Vector3
from materials.material import Material
from materials.light import Light
from geometry.sphere import Sphere
from geometry.world import Scene


@pytest.fixture
def white_matte():
    """Pure diffuse white material."""
    return Material(Vector3(0, 0, 0), Vector3(1, 1, 1), Vector3(0, 0, 0))


@pytest.fixture
def grey_ambient():
    """Ambient-only material, no diffuse or mirror component."""
    return Material(Vector3(0.5, 0.5, 0.5), Vector3(0, 0, 0), Vector3(0, 0, 0))


@pytest.fixture
def lit_sphere_scene(white_matte):
    """One white sphere at (0, 0, -5) lit from (0, 0, 5)."""
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, -5), 1.0, white_matte, objid=0))
    scene.add(Light(Vector3(0, 0, 5), Vector3(1, 1, 1), objid=1))
    return scene


@pytest.fixture
def sample_scene_text():
    """A scene file exercising every implemented record type."""
    return """\
8 6                 world x and y dims
0 0 5               viewpoint (x, y, z)

10                  light
1 1 1               emissivity
-3 4 5              center

13                  sphere
0.1 0.2 0.3         ambient
0.7 0.7 0.7         diffuse
0 0 0               specular
0 0 -5              center
1.5                 radius

14                  plane
0.2 0.2 0.2
0.5 0.5 0.5
0.4 0.4 0.4
0 1 0               normal
0 -2 0              point

15                  finite plane
1 1 1
0 0 0
0 0 0
0 0 1               normal
-1 -1 -8            point
1 0 0               xdir
2 3                 size

16                  tiled plane
1 0 0
1 1 1
0 0 0
0 1 0               normal
0 -3 0              point
1 0 0               xdir
2 2                 tile size
0 0 1               background ambient
0 1 0               background diffuse
0 0 0               background specular

19                  procedural sphere
1 1 1
0 0 0
0 0 0
2 0 -6
0.5
1                   shader index

20                  procedural plane
1 1 1
0 0 0
0 0 0
0 0 1
0 0 -10
2.0                 shader index
"""
