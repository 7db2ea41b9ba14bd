"""
Renderer module - the frame driver.

For every pixel: generate the primary ray, find the closest sphere,
shade the hit (Phong + hard shadow) or fall back to the background
color. Rendering is single-threaded and deterministic.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Optional, Callable
import numpy as np

from .vec3 import Color
from .ray import Ray
from .camera import DEFAULT_DEPTH
from .shapes import T_MAX
from .scene import Scene
from .shading import shade

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 600
    height: int = 600
    depth: float = DEFAULT_DEPTH
    t_max: float = T_MAX
    background_color: Color = None
    scale_color: bool = False
    use_camera_basis: bool = False
    shadows: bool = True

    def __post_init__(self):
        if self.background_color is None:
            self.background_color = Color(0.0, 0.0, 0.0)


class Renderer:
    """Ray casting renderer: one primary ray per pixel, no recursion."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Called after each scanline with progress in (0.0, 1.0]
        """
        self._progress_callback = callback

    def render(self, scene: Scene) -> np.ndarray:
        """Render the scene and return the frame buffer.

        Args:
            scene: The populated scene; not modified

        Returns:
            Linear colors as a numpy array of shape (height, width, 3),
            indexed [col, row] with col 0 at the bottom of the view plane
        """
        width = self.settings.width
        height = self.settings.height

        logger.info("Rendering %dx%d, %d sphere(s)", width, height, len(scene.spheres))
        start_time = time.time()

        image = np.zeros((height, width, 3), dtype=np.float64)

        for col in range(height):
            for row in range(width):
                image[col, row] = self.render_pixel(scene, row, col).to_array()

            if self._progress_callback:
                self._progress_callback((col + 1) / height)

        logger.info("Render finished in %.2fs", time.time() - start_time)
        return image

    def render_pixel(self, scene: Scene, row: int, col: int) -> Color:
        """Compute the color of a single pixel.

        Args:
            scene: The scene to render
            row: Horizontal pixel index in [0, width)
            col: Vertical pixel index in [0, height)

        Returns:
            The shaded color, or the background color on a miss
        """
        ray = self.primary_ray(scene, row, col)

        hit = scene.spheres.closest_hit(ray, 0.0, self.settings.t_max)
        if hit is None:
            return self.settings.background_color

        position = ray.at(hit.t)
        view_direction = (scene.camera.position - position).normalize()
        return shade(
            scene.spheres, hit.index, scene.light, position, view_direction,
            shadows=self.settings.shadows
        )

    def primary_ray(self, scene: Scene, row: int, col: int) -> Ray:
        """Ray through the center of pixel (row, col)."""
        camera = scene.camera
        ray = camera.ray_from_pixel(
            row, col, self.settings.width, self.settings.height, self.settings.depth
        )
        if self.settings.use_camera_basis:
            ray = Ray(ray.origin, camera.to_world(ray.direction))
        return ray
