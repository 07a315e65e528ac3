"""Tests for the camera."""

import pytest

from camera.camera import Camera
from core.vector import Vector3


def test_viewport_geometry():
    camera = Camera(400, 200, view_height=2.0, focal_length=1.0)
    assert camera.aspect == pytest.approx(2.0)
    assert camera.view_width == pytest.approx(4.0)
    assert camera.lower_left_corner.isclose(Vector3(-2, -1, -1))


def test_center_ray_looks_down_negative_z():
    camera = Camera(400, 200, origin=Vector3(0, 1, 0))
    ray = camera.get_ray(0.5, 0.5)
    assert ray.origin.isclose(Vector3(0, 1, 0))
    assert ray.direction.isclose(Vector3(0, 0, -1))


def test_corners():
    camera = Camera(100, 100)
    assert camera.get_ray(0, 0).direction.isclose(Vector3(-1, -1, -1))
    assert camera.get_ray(1, 1).direction.isclose(Vector3(1, 1, -1))


def test_out_of_range_coordinates_are_allowed():
    camera = Camera(100, 100)
    assert camera.get_ray(2, -1).direction.isclose(Vector3(3, -3, -1))


def test_rejects_empty_image():
    with pytest.raises(ValueError):
        Camera(0, 10)
