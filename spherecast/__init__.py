"""
spherecast - A small ray casting renderer

Renders spheres lit by a single point light:
- One primary ray per pixel through a fixed view plane
- Closest-hit ray/sphere intersection
- Phong shading (ambient, diffuse, specular) with hard shadows
- Targa (or any Pillow format) output
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .materials import Material, diffuse_red, specular_blue, ambient_purple, white_light
from .lights import PointLight, make_white_light
from .camera import Camera, ViewPlane, DEFAULT_DEPTH
from .shapes import Sphere, SphereList, HitRecord, intersect_sphere, T_MAX
from .shading import shade, phong, reflect_about
from .scene import Scene, create_demo_scene, create_original_scene
from .renderer import Renderer, RenderSettings
from .image import Image, save_image
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
