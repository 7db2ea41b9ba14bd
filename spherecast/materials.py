"""
Phong materials.

A material carries three color coefficients (diffuse, specular, ambient)
and a shininess exponent. Spheres use them as reflectances; the point
light uses the same structure as its per-term intensity.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .vec3 import Color


@dataclass(frozen=True)
class Material:
    """Phong reflectance coefficients.

    Attributes:
        diffuse: Per-channel diffuse coefficient
        specular: Per-channel specular coefficient
        ambient: Per-channel ambient coefficient
        alpha: Shininess exponent for the specular lobe (>= 1)
    """
    diffuse: Color = field(default_factory=lambda: Color(0, 0, 0))
    specular: Color = field(default_factory=lambda: Color(0, 0, 0))
    ambient: Color = field(default_factory=lambda: Color(0, 0, 0))
    alpha: float = 1.0

    def __repr__(self) -> str:
        return (
            f"Material(diffuse={self.diffuse}, specular={self.specular}, "
            f"ambient={self.ambient}, alpha={self.alpha})"
        )


def diffuse_red() -> Material:
    """Mostly diffuse red with a faint green highlight."""
    return Material(
        diffuse=Color(.8, 0, 0),
        specular=Color(0, .2, 0),
        ambient=Color(0, 0, .1),
        alpha=10.0
    )


def specular_blue() -> Material:
    """Red body with a strong, tight blue highlight."""
    return Material(
        diffuse=Color(.7, 0, 0),
        specular=Color(0, 0, 0.8),
        ambient=Color(0, .1, 0),
        alpha=20.0
    )


def ambient_purple() -> Material:
    """Strong purple ambient term with a broad highlight."""
    return Material(
        diffuse=Color(.8, 0, 0),
        specular=Color(0, 0, 0.2),
        ambient=Color(.4, 0, .4),
        alpha=1.0
    )


def white_light() -> Material:
    """Unit intensity for all three terms."""
    return Material(
        diffuse=Color(1, 1, 1),
        specular=Color(1, 1, 1),
        ambient=Color(1, 1, 1),
        alpha=1.0
    )
