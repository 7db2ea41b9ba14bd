"""
Camera module for generating primary rays.

The camera derives, once at construction:
- An orthonormal basis (u, v, w) from position, look-at target and up vector
- A rectangular view plane at unit distance in front of the camera

Primary rays are cast through pixel centers of the view plane with a fixed
forward offset (the depth) on their z component.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from .vec3 import Vec3, Point3
from .ray import Ray

DEFAULT_DEPTH = 16.0


@dataclass(frozen=True)
class ViewPlane:
    """World-space rectangle the primary rays pass through."""
    bottom_left: Point3
    top_right: Point3

    @property
    def width(self) -> float:
        return self.top_right.x - self.bottom_left.x

    @property
    def height(self) -> float:
        return self.top_right.y - self.bottom_left.y


class Camera:
    """A pinhole camera with a fixed view plane."""

    def __init__(
        self,
        position: Point3,
        look_at: Point3,
        up: Vec3 = Vec3(0, 1, 0),
        vfov: float = 90.0,
        aspect_ratio: float = 1.0
    ):
        """Create a camera.

        Args:
            position: Camera position in world space
            look_at: Point the camera is looking at
            up: World up vector (usually (0, 1, 0)), not parallel to the
                viewing direction
            vfov: Vertical field of view of the view plane in degrees
            aspect_ratio: Width / Height ratio of the view plane
        """
        self.position = position
        self.look_at = look_at
        self.up = up
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio

        # Compute orthonormal camera basis
        self.w = (position - look_at).normalize()  # Points backward from camera
        self.u = up.cross(self.w).normalize()       # Points right
        self.v = self.w.cross(self.u)               # Points up

        half_height = math.tan(math.radians(vfov) / 2)
        half_width = aspect_ratio * half_height
        self.view_plane = ViewPlane(
            bottom_left=position + Vec3(-half_width, -half_height, 1.0),
            top_right=position + Vec3(half_width, half_height, 1.0)
        )

    def ray_from_pixel(
        self,
        row: int,
        col: int,
        width: int,
        height: int,
        depth: float = DEFAULT_DEPTH
    ) -> Ray:
        """Generate the primary ray through the center of a pixel.

        Args:
            row: Horizontal pixel index in [0, width)
            col: Vertical pixel index in [0, height), 0 at the bottom
            width: Horizontal resolution
            height: Vertical resolution
            depth: Forward offset used as the direction's z component

        Returns:
            A ray from the camera position. The direction is in camera
            space and is not normalized.
        """
        plane = self.view_plane
        corner = plane.bottom_left - self.position

        direction = Vec3(
            corner.x + plane.width * (row + 0.5) / width,
            corner.y + plane.height * (col + 0.5) / height,
            depth
        )
        return Ray(self.position, direction)

    def to_world(self, direction: Vec3) -> Vec3:
        """Map a camera-space direction (+z forward) into world space."""
        return self.u * direction.x + self.v * direction.y - self.w * direction.z

    def __repr__(self) -> str:
        return f"Camera(position={self.position}, look_at={self.look_at})"
