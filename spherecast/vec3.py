"""
3D vectors for points, directions and linear RGB colors.

Values are immutable in practice: every operation returns a new Vec3.
Colors are indexed by channel (0 = red, 1 = green, 2 = blue).
"""

from __future__ import annotations
from typing import Union
import numpy as np


class Vec3:
    """Three float64 components stored in a numpy array."""

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Wrap a length-3 array without copying."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        # Tolerant comparison, so vectors are not hashable
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    __hash__ = None

    def __getitem__(self, channel: int) -> float:
        return float(self._data[channel])

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data + other._data)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3.from_array(self._data - other._data)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3.from_array(self._data * other._data)
        return Vec3.from_array(self._data * other)

    def __rmul__(self, scale: float) -> Vec3:
        return Vec3.from_array(scale * self._data)

    def __truediv__(self, scale: float) -> Vec3:
        return Vec3.from_array(self._data / scale)

    def dot(self, other: Vec3) -> float:
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        return Vec3.from_array(np.cross(self._data, other._data))

    def length(self) -> float:
        return float(np.linalg.norm(self._data))

    def length_squared(self) -> float:
        return self.dot(self)

    def normalize(self) -> Vec3:
        """Return the unit vector in the same direction.

        Undefined for the zero vector; the zero vector is returned so
        that nothing divides by zero, but no caller relies on it.
        """
        length = self.length()
        if length == 0:
            return Vec3(0, 0, 0)
        return self / length

    def max_component(self) -> float:
        """Largest component (brightest channel of a color)."""
        return float(self._data.max())

    def to_array(self) -> np.ndarray:
        """Return a copy of the components."""
        return self._data.copy()


Point3 = Vec3
Color = Vec3
