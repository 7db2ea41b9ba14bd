"""Tests for Camera class."""

import pytest
import math
from spherecast.vec3 import Vec3, Point3
from spherecast.camera import Camera, ViewPlane, DEFAULT_DEPTH


class TestCameraCreation:
    """Test Camera construction."""

    def test_stores_position(self):
        cam = Camera(position=Point3(1, 2, 3), look_at=Point3(1, 2, 4))
        assert cam.position == Point3(1, 2, 3)

    def test_camera_basis_vectors(self):
        cam = Camera(
            position=Point3(0, 0, 0),
            look_at=Point3(0, 0, -1),
            up=Vec3(0, 1, 0)
        )
        # w should point backward (opposite of look direction)
        assert cam.w == Vec3(0, 0, 1)
        # u should point right
        assert cam.u == Vec3(1, 0, 0)
        # v should point up
        assert cam.v == Vec3(0, 1, 0)

    def test_basis_is_orthonormal(self):
        cam = Camera(
            position=Point3(0, 0, 0),
            look_at=Point3(0, 5, 25),
            up=Vec3(0, 1, 0)
        )
        for a in (cam.u, cam.v, cam.w):
            assert math.isclose(a.length(), 1.0)
        assert abs(cam.u.dot(cam.v)) < 1e-9
        assert abs(cam.u.dot(cam.w)) < 1e-9
        assert abs(cam.v.dot(cam.w)) < 1e-9


class TestViewPlane:
    """Test the derived view plane."""

    def test_default_view_plane(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, 1))
        assert cam.view_plane.bottom_left == Point3(-1, -1, 1)
        assert cam.view_plane.top_right == Point3(1, 1, 1)

    def test_half_unit_view_plane(self):
        cam = Camera(
            position=Point3(0, 0, 0),
            look_at=Point3(0, 0, 1),
            vfov=math.degrees(2 * math.atan(0.5))
        )
        assert cam.view_plane.bottom_left == Point3(-.5, -.5, 1)
        assert cam.view_plane.top_right == Point3(.5, .5, 1)

    def test_aspect_ratio_widens_plane(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, 1), aspect_ratio=2.0)
        assert math.isclose(cam.view_plane.width, 4.0)
        assert math.isclose(cam.view_plane.height, 2.0)

    def test_follows_camera_position(self):
        cam = Camera(position=Point3(1, 2, 3), look_at=Point3(1, 2, 4))
        assert cam.view_plane.bottom_left == Point3(0, 1, 4)
        assert cam.view_plane.top_right == Point3(2, 3, 4)

    def test_view_plane_is_frozen(self):
        plane = ViewPlane(Point3(-1, -1, 1), Point3(1, 1, 1))
        with pytest.raises(AttributeError):
            plane.bottom_left = Point3(0, 0, 0)


class TestRayFromPixel:
    """Test Camera.ray_from_pixel()."""

    def test_origin_is_camera_position(self):
        cam = Camera(position=Point3(1, 2, 3), look_at=Point3(1, 2, 4))
        ray = cam.ray_from_pixel(0, 0, 10, 10)
        assert ray.origin == Point3(1, 2, 3)

    def test_pixel_center_sampling(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, 1))
        ray = cam.ray_from_pixel(0, 0, 2, 2)
        assert ray.direction == Vec3(-0.5, -0.5, DEFAULT_DEPTH)

    def test_center_pixel(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, 1))
        ray = cam.ray_from_pixel(1, 1, 3, 3)
        assert ray.direction == Vec3(0, 0, DEFAULT_DEPTH)

    def test_row_maps_to_x_and_col_to_y(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, 1))
        ray = cam.ray_from_pixel(3, 0, 4, 2)
        assert math.isclose(ray.direction.x, -1 + 2 * 3.5 / 4)
        assert math.isclose(ray.direction.y, -1 + 2 * 0.5 / 2)

    def test_custom_depth(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, 1))
        ray = cam.ray_from_pixel(1, 1, 3, 3, depth=2.0)
        assert ray.direction.z == 2.0

    def test_direction_independent_of_position(self):
        a = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, 1))
        b = Camera(position=Point3(5, -3, 2), look_at=Point3(5, -3, 3))
        assert a.ray_from_pixel(7, 2, 10, 10).direction == b.ray_from_pixel(7, 2, 10, 10).direction


class TestToWorld:
    """Test the camera-space to world-space mapping."""

    def test_forward_maps_to_look_direction(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, -1))
        assert cam.to_world(Vec3(0, 0, 1)) == Vec3(0, 0, -1)

    def test_right_and_up(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 0, -1))
        assert cam.to_world(Vec3(1, 0, 0)) == Vec3(1, 0, 0)
        assert cam.to_world(Vec3(0, 1, 0)) == Vec3(0, 1, 0)

    def test_tilted_camera(self):
        cam = Camera(position=Point3(0, 0, 0), look_at=Point3(0, 5, 25))
        forward = cam.to_world(Vec3(0, 0, 1))
        assert forward == Vec3(0, 5, 25).normalize()
