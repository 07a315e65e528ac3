"""End-to-end tests for the parallel render loop."""

import random

import numpy as np
import pytest

from camera.camera import Camera
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import World
from materials.lambertian import Lambertian
from materials.material import Material
from materials.metal import Metal
from materials.textures import CheckerColor
from renderer.config import RenderConfig
from renderer.integrator import SKY, Background
from renderer.raytracer import Renderer, render

WIDTH, HEIGHT = 8, 6


@pytest.fixture
def camera():
    return Camera(WIDTH, HEIGHT)


def make_config(**kwargs):
    settings = dict(width=WIDTH, height=HEIGHT, samples_per_pixel=1, workers=3)
    settings.update(kwargs)
    return RenderConfig(**settings)


def test_enclosing_light_renders_white(camera, white_light):
    world = World([Sphere(Vector3(0, 0, 0), 100.0, white_light)])
    fb = Renderer(make_config(max_depth=1)).render(world, camera)
    assert np.all(fb.pixels == 255)


def test_empty_world_independent_of_sample_count(camera):
    flat = Background(Vector3(0.25, 0.25, 0.25), Vector3(0.25, 0.25, 0.25))
    one = Renderer(make_config(background=flat)).render(World(), camera)
    many = Renderer(make_config(samples_per_pixel=7, background=flat)).render(World(), camera)
    assert np.all(one.pixels == 127)
    assert np.array_equal(one.pixels, many.pixels)


def test_rows_run_top_to_bottom(camera):
    # SKY is white below the horizon and blue above: the top row must be
    # less red than the bottom row.
    fb = Renderer(make_config(samples_per_pixel=4, background=SKY)).render(World(), camera)
    top = fb.pixels[0, :, 0].astype(int)
    bottom = fb.pixels[-1, :, 0].astype(int)
    assert np.all(top < bottom)


def test_seeded_render_is_reproducible(camera):
    checker = CheckerColor(Vector3(0.9, 0.9, 0.9), Vector3(0.2, 0.3, 0.2), 0.5)
    world = World([
        Sphere(Vector3(0, -100.5, -1), 100.0, Lambertian(checker)),
        Sphere(Vector3(0, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)),
    ])
    config = make_config(samples_per_pixel=3, seed=7, background=SKY)
    first = Renderer(config).render(world, camera)
    second = Renderer(config).render(world, camera)
    assert np.array_equal(first.pixels, second.pixels)
    assert first.pixels.any()


def test_camera_and_config_must_agree():
    with pytest.raises(ValueError):
        Renderer(make_config()).render(World(), Camera(WIDTH + 1, HEIGHT))


def test_worker_errors_propagate(camera):
    class Broken(Material):
        def scatter(self, ray_in, rec, rng=random):
            raise RuntimeError("boom")

    world = World([Sphere(Vector3(0, 0, 0), 100.0, Broken(Vector3(1, 1, 1)))])
    with pytest.raises(RuntimeError, match="boom"):
        Renderer(make_config()).render(world, camera)


def test_render_writes_file(tmp_path, camera, white_light):
    world = World([Sphere(Vector3(0, 0, 0), 100.0, white_light)])
    path = tmp_path / "white.png"
    fb = render(world, camera, 2, str(path), config=make_config(samples_per_pixel=2))
    assert path.exists()
    assert np.all(fb.pixels == 255)


def test_render_survives_failed_save(tmp_path, camera, white_light, monkeypatch):
    monkeypatch.setenv("RAYTRACER_WORKERS", "2")
    world = World([Sphere(Vector3(0, 0, 0), 100.0, white_light)])
    fb = render(world, camera, 1, str(tmp_path / "missing" / "white.png"))
    assert np.all(fb.pixels == 255)


def test_render_rejects_conflicting_sample_count(camera):
    with pytest.raises(ValueError):
        render(World(), camera, 5, None, config=make_config(samples_per_pixel=1))


def test_read_only_format_does_not_abort_render(tmp_path, camera, white_light):
    world = World([Sphere(Vector3(0, 0, 0), 100.0, white_light)])
    path = tmp_path / "white.psd"
    fb = render(world, camera, 1, str(path), config=make_config(workers=2))
    assert np.all(fb.pixels == 255)


def test_seeded_render_independent_of_worker_count(camera):
    world = World([
        Sphere(Vector3(0, -100.5, -1), 100.0, Lambertian(Vector3(0.5, 0.5, 0.5))),
        Sphere(Vector3(0, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)),
    ])
    serial = Renderer(make_config(samples_per_pixel=3, seed=11, workers=1, background=SKY)).render(world, camera)
    pooled = Renderer(make_config(samples_per_pixel=3, seed=11, workers=4, background=SKY)).render(world, camera)
    assert np.array_equal(serial.pixels, pooled.pixels)
