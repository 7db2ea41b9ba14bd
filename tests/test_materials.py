"""Tests for Phong materials and the point light."""

import pytest
import dataclasses

from spherecast.vec3 import Vec3, Point3, Color
from spherecast.materials import Material, diffuse_red, specular_blue, ambient_purple, white_light
from spherecast.lights import PointLight, make_white_light


class TestMaterial:
    """Test Material construction."""

    def test_defaults(self):
        mat = Material()
        assert mat.diffuse == Color(0, 0, 0)
        assert mat.specular == Color(0, 0, 0)
        assert mat.ambient == Color(0, 0, 0)
        assert mat.alpha == 1.0

    def test_immutable(self):
        mat = diffuse_red()
        with pytest.raises(dataclasses.FrozenInstanceError):
            mat.alpha = 3.0

    def test_presets(self):
        assert diffuse_red().alpha == 10.0
        assert specular_blue().specular == Color(0, 0, 0.8)
        assert ambient_purple().ambient == Color(.4, 0, .4)

    def test_presets_are_independent(self):
        assert diffuse_red() == diffuse_red()
        assert diffuse_red() is not diffuse_red()


class TestPointLight:
    """Test PointLight."""

    def test_white_light_defaults(self):
        light = make_white_light()
        assert light.position == Point3(-10, 15, 0)
        assert light.material == white_light()

    def test_custom_position(self):
        assert make_white_light(Point3(0, 5, 10)).position == Point3(0, 5, 10)

    def test_direction_from(self):
        light = PointLight(Point3(0, 10, 0))
        assert light.direction_from(Point3(0, 0, 0)) == Vec3(0, 1, 0)
