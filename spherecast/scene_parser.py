"""
Scene description parser.

Reads YAML or JSON scene files describing the camera, the single point
light, named Phong materials, spheres and render settings.

Example scene file:
```yaml
camera:
  position: [0, 0, 0]
  look_at: [0, 5, 25]
  up: [0, 1, 0]

light:
  position: [0, 5, 10]
  diffuse: [1, 1, 1]
  specular: [1, 1, 1]
  ambient: [1, 1, 1]

materials:
  red:
    diffuse: [0.8, 0, 0]
    specular: [0, 0.2, 0]
    ambient: [0, 0, 0.1]
    alpha: 10

spheres:
  - center: [0.5, 0, 25]
    radius: 0.6
    material: red

render:
  width: 600
  height: 600
  background: "#000000"
```
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Any, Tuple

import yaml

from .vec3 import Vec3, Color
from .camera import Camera, DEFAULT_DEPTH
from .lights import PointLight
from .materials import Material
from .scene import Scene
from .renderer import RenderSettings

logger = logging.getLogger(__name__)


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.materials: Dict[str, Material] = {}

    def parse_file(self, filepath: str) -> Tuple[Scene, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text(encoding='utf-8')

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (ValueError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot parse scene file {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file must contain a mapping: {filepath}")

        logger.info("Loaded scene file %s", path)
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[Scene, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, settings)
        """
        # Parse materials first (spheres reference them)
        if 'materials' in data:
            self._parse_materials(data['materials'])

        camera = self._parse_camera(self._section(data, 'camera'))
        light = self._parse_light(self._section(data, 'light'))
        scene = Scene(camera, light)

        spheres_data = data.get('spheres') or []
        if not isinstance(spheres_data, list):
            raise SceneParseError(f"'spheres' must be a list, got {type(spheres_data).__name__}")
        for sphere_data in spheres_data:
            if not isinstance(sphere_data, dict):
                raise SceneParseError(f"Sphere entry must be a mapping, got: {sphere_data}")
            self._parse_sphere(scene, sphere_data)

        settings = self._parse_settings(self._section(data, 'render'))

        logger.debug("Parsed scene with %d sphere(s) and %d material(s)", len(scene), len(self.materials))
        return scene, settings

    @staticmethod
    def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Return a top-level mapping section; missing or null gives {}."""
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise SceneParseError(f"'{name}' must be a mapping, got {type(section).__name__}")
        return section

    @staticmethod
    def _number(value: Any, what: str, kind=float):
        """Convert a scalar, reporting bad values as SceneParseError."""
        if isinstance(value, bool):
            raise SceneParseError(f"{what} must be a number, got {value!r}")
        try:
            return kind(value)
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"{what} must be a number, got {value!r}") from e

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from a list or an {x, y, z} mapping."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
            return Vec3(*(self._number(c, "Vec3 component") for c in data))
        elif isinstance(data, dict):
            return Vec3(
                self._number(data.get('x', 0), "Vec3 component"),
                self._number(data.get('y', 0), "Vec3 component"),
                self._number(data.get('z', 0), "Vec3 component")
            )
        else:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_color(self, data: Any) -> Color:
        """Parse a Color from a list, an {r, g, b} mapping or a hex string."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Color must have 3 components, got {len(data)}")
            return Color(*(self._number(c, "Color channel") for c in data))
        elif isinstance(data, dict):
            return Color(
                self._number(data.get('r', 0), "Color channel"),
                self._number(data.get('g', 0), "Color channel"),
                self._number(data.get('b', 0), "Color channel")
            )
        elif isinstance(data, str):
            if data.startswith('#') and len(data) == 7:
                try:
                    r = int(data[1:3], 16) / 255.0
                    g = int(data[3:5], 16) / 255.0
                    b = int(data[5:7], 16) / 255.0
                except ValueError:
                    raise SceneParseError(f"Cannot parse color from string: {data}")
                return Color(r, g, b)
            raise SceneParseError(f"Cannot parse color from string: {data}")
        else:
            raise SceneParseError(f"Cannot parse Color from: {data}")

    def _parse_material(self, mat_data: Any) -> Material:
        if not isinstance(mat_data, dict):
            raise SceneParseError(f"Material must be a mapping, got: {mat_data}")
        alpha = self._number(mat_data.get('alpha', 1.0), "Material alpha")
        if alpha < 1.0:
            raise SceneParseError(f"Material alpha must be >= 1, got {alpha}")
        return Material(
            diffuse=self._parse_color(mat_data.get('diffuse', [0, 0, 0])),
            specular=self._parse_color(mat_data.get('specular', [0, 0, 0])),
            ambient=self._parse_color(mat_data.get('ambient', [0, 0, 0])),
            alpha=alpha
        )

    def _parse_materials(self, materials_data: Dict[str, Any]) -> None:
        """Parse materials section."""
        if not isinstance(materials_data, dict):
            raise SceneParseError(f"'materials' must be a mapping, got {type(materials_data).__name__}")
        for name, mat_data in materials_data.items():
            self.materials[name] = self._parse_material(mat_data)

    def _get_material(self, mat_ref: Any) -> Material:
        """Get a material by name or inline definition."""
        if mat_ref is None:
            return Material()
        if isinstance(mat_ref, str):
            if mat_ref not in self.materials:
                raise SceneParseError(f"Unknown material: {mat_ref}")
            return self.materials[mat_ref]
        elif isinstance(mat_ref, dict):
            return self._parse_material(mat_ref)
        else:
            raise SceneParseError(f"Invalid material reference: {mat_ref}")

    def _parse_sphere(self, scene: Scene, sphere_data: Dict[str, Any]) -> None:
        center = self._parse_vec3(sphere_data.get('center', [0, 0, 0]))
        radius = self._number(sphere_data.get('radius', 1.0), "Sphere radius")
        if radius <= 0:
            raise SceneParseError(f"Sphere radius must be positive, got {radius}")
        material = self._get_material(sphere_data.get('material'))
        scene.add_sphere(center, radius, material)

    def _parse_light(self, light_data: Dict[str, Any]) -> PointLight:
        """Parse the light section; a missing section gives the white light."""
        position = self._parse_vec3(light_data.get('position', [-10, 15, 0]))
        material = Material(
            diffuse=self._parse_color(light_data.get('diffuse', [1, 1, 1])),
            specular=self._parse_color(light_data.get('specular', [1, 1, 1])),
            ambient=self._parse_color(light_data.get('ambient', [1, 1, 1]))
        )
        return PointLight(position, material)

    def _parse_camera(self, camera_data: Dict[str, Any]) -> Camera:
        """Parse camera section."""
        return Camera(
            position=self._parse_vec3(camera_data.get('position', [0, 0, 0])),
            look_at=self._parse_vec3(camera_data.get('look_at', [0, 0, 1])),
            up=self._parse_vec3(camera_data.get('up', [0, 1, 0])),
            vfov=self._number(camera_data.get('vfov', 90), "Camera vfov"),
            aspect_ratio=self._number(camera_data.get('aspect_ratio', 1.0), "Camera aspect_ratio")
        )

    def _parse_settings(self, settings_data: Dict[str, Any]) -> RenderSettings:
        """Parse render settings section."""
        settings = RenderSettings(
            width=self._number(settings_data.get('width', 600), "Render width", int),
            height=self._number(settings_data.get('height', 600), "Render height", int),
            depth=self._number(settings_data.get('depth', DEFAULT_DEPTH), "Render depth"),
            background_color=self._parse_color(settings_data.get('background', [0, 0, 0])),
            scale_color=bool(settings_data.get('scale_color', False)),
            use_camera_basis=bool(settings_data.get('use_camera_basis', False)),
            shadows=bool(settings_data.get('shadows', True))
        )
        if settings.width <= 0 or settings.height <= 0:
            raise SceneParseError(f"Resolution must be positive, got {settings.width}x{settings.height}")
        return settings


def load_scene(filepath: str) -> Tuple[Scene, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[Scene, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (scene, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
