"""
End-to-end rendering tests: projection, pixel loop and image output.
"""

import io
import numpy as np
import pytest
from PIL import Image

from core.vector import Vector3
from camera.camera import Projection
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.light import Light
from renderer.image import Renderer, to_rgb8, write_ppm

SIZE = 41


@pytest.fixture
def sphere_scene(white_matte):
    """A unit sphere at the origin lit from the viewpoint."""
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, 0), 1.0, white_matte, objid=0))
    scene.add(Light(Vector3(0, 0, 5), Vector3(1, 1, 1), objid=1))
    return scene


@pytest.fixture
def projection():
    return Projection(SIZE, SIZE, (4.0, 4.0), Vector3(0, 0, 5))


class TestProjection:

    def test_corners(self, projection):
        assert projection.map_pixel(0, 0) == Vector3(-2, -2, 0)
        assert projection.map_pixel(SIZE - 1, SIZE - 1) == Vector3(2, 2, 0)
        assert projection.map_pixel(20, 20) == Vector3(0, 0, 0)

    def test_ray_direction_is_unit(self, projection):
        ray = projection.get_ray(3, 37)
        assert ray.origin == Vector3(0, 0, 5)
        assert ray.direction.length() == pytest.approx(1.0)

    def test_jitter_stays_within_pixel(self, projection):
        rng = np.random.default_rng(3)
        centre = projection.get_ray(10, 10).direction
        for _ in range(20):
            jittered = projection.get_ray(10, 10, rng).direction
            assert jittered != centre
            assert (jittered - centre).length() < 0.05

    def test_too_small_image(self):
        with pytest.raises(ValueError):
            Projection(1, 10, (4.0, 4.0), Vector3(0, 0, 5))

    def test_dump(self, projection):
        text = projection.dump()
        assert "    41 x     41" in text
        assert "   4.000 x    4.000" in text


class TestRenderer:

    def test_lit_sphere(self, projection, sphere_scene):
        image = Renderer(projection).render(sphere_scene)
        assert image.shape == (SIZE, SIZE, 3)

        # eye and light both 4 units above the nearest point
        assert image[20, 20] == pytest.approx([0.0625] * 3)

        rows, cols = np.indices((SIZE, SIZE))
        radius = np.hypot(rows - 20, cols - 20)
        lit = image[..., 0] > 0
        assert lit[radius <= 9].all()
        assert not lit[radius >= 11].any()
        assert 280 <= lit.sum() <= 370

    def test_image_rows_run_top_down(self, projection, white_matte):
        scene = Scene()
        scene.add(Sphere(Vector3(0, 1, 0), 0.5, white_matte))
        scene.add(Light(Vector3(0, 0, 5), Vector3(1, 1, 1)))
        image = Renderer(projection).render(scene)
        # world y = 1 is pixel y = 30, i.e. row 10 from the top
        assert image[10, 20, 0] > 0
        assert image[30, 20, 0] == 0

    def test_values_are_clamped(self, projection):
        from materials.material import Material
        scene = Scene()
        scene.add(Sphere(Vector3(0, 0, 0), 1.0,
                         Material(Vector3(50, 50, 50), Vector3(0, 0, 0), Vector3(0, 0, 0))))
        image = Renderer(projection).render(scene)
        assert image.max() == 1.0
        assert image.min() == 0.0

    def test_same_seed_same_image(self, projection, sphere_scene):
        first = Renderer(projection, samples=4, seed=11).render(sphere_scene)
        second = Renderer(projection, samples=4, seed=11).render(sphere_scene)
        np.testing.assert_array_equal(first, second)

    def test_single_sample_ignores_seed(self, projection, sphere_scene):
        first = Renderer(projection, samples=1, seed=1).render(sphere_scene)
        second = Renderer(projection, samples=1, seed=2).render(sphere_scene)
        np.testing.assert_array_equal(first, second)

    def test_invalid_sample_count(self, projection):
        with pytest.raises(ValueError):
            Renderer(projection, samples=0)


class TestImageOutput:

    def test_to_rgb8(self):
        pixels = to_rgb8(np.array([[[-0.5, 0.5, 2.0]]]))
        assert pixels.dtype == np.uint8
        assert pixels[0, 0].tolist() == [0, 127, 255]

    def test_write_ppm(self):
        image = np.zeros((2, 3, 3))
        image[0, 0] = [1.0, 0.0, 0.0]
        image[1, 2] = [0.0, 0.0, 1.0]

        buf = io.BytesIO()
        write_ppm(image, buf)
        data = buf.getvalue()
        assert data.startswith(b"P6")

        decoded = Image.open(io.BytesIO(data))
        assert decoded.size == (3, 2)
        assert decoded.getpixel((0, 0)) == (255, 0, 0)
        assert decoded.getpixel((2, 1)) == (0, 0, 255)
        assert decoded.getpixel((1, 0)) == (0, 0, 0)


def test_sample_scene_renders():
    from pathlib import Path
    from geometry.scene_file import load_scene

    path = Path(__file__).parent.parent / "scenes" / "mirror_room.txt"
    with open(path) as f:
        desc = load_scene(f)
    assert len(desc.scene.lights) == 2
    assert len(desc.scene.surfaces) == 5

    image = Renderer(Projection(16, 12, desc.world_size, desc.view_point)).render(desc.scene)
    assert image.shape == (12, 16, 3)
    assert image.max() > 0
