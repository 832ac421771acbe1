"""Quaternions, rotation matrices and the projection of a map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Quaternion",
    "matrix_x",
    "matrix_y",
    "matrix_z",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "Grid",
]

# Default isometric view.
_ISO_X = 54.74
_ISO_Y = 0.0
_ISO_Z = 45.0
_Z_SCALE = 0.1


def _half_angle(angle):
    return math.radians(angle) / 2


@dataclass(frozen=True)
class Quaternion:
    """A quaternion w + xi + yj + zk."""

    w: float
    x: float
    y: float
    z: float

    @classmethod
    def about_x(cls, angle):
        """Rotation by ``angle`` degrees about the x axis."""
        half = _half_angle(angle)
        return cls(math.cos(half), math.sin(half), 0.0, 0.0)

    @classmethod
    def about_y(cls, angle):
        """Rotation by ``angle`` degrees about the y axis."""
        half = _half_angle(angle)
        return cls(math.cos(half), 0.0, math.sin(half), 0.0)

    @classmethod
    def about_z(cls, angle):
        """Rotation by ``angle`` degrees about the z axis."""
        half = _half_angle(angle)
        return cls(math.cos(half), 0.0, 0.0, math.sin(half))

    def multiply(self, other):
        """Return the Hamilton product ``self * other``."""
        a, b = self, other
        return Quaternion(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def __mul__(self, other):
        return self.multiply(other)

    def conjugate(self):
        """Return the conjugate, with the vector part negated."""
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def normalized(self):
        """Return this quaternion scaled to unit length."""
        length = math.sqrt(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2)
        if length == 0:
            raise ZeroDivisionError("cannot normalise a zero quaternion")
        return Quaternion(self.w / length, self.x / length, self.y / length, self.z / length)

    def rotate(self, x, y, z):
        """Rotate the vector (x, y, z) by this quaternion; return the new vector."""
        result = self.multiply(Quaternion(0.0, x, y, z).multiply(self.conjugate()))
        return result.x, result.y, result.z


def matrix_x(angle):
    """3x3 rotation matrix about the x axis, ``angle`` in degrees."""
    c, s = math.cos(math.radians(angle)), math.sin(math.radians(angle))
    return ((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c))


def matrix_y(angle):
    """3x3 rotation matrix about the y axis, ``angle`` in degrees."""
    c, s = math.cos(math.radians(angle)), math.sin(math.radians(angle))
    return ((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c))


def matrix_z(angle):
    """3x3 rotation matrix about the z axis, ``angle`` in degrees."""
    c, s = math.cos(math.radians(angle)), math.sin(math.radians(angle))
    return ((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0))


def rotate_x(point, angle, z_scale):
    """Scale the projected height, then turn about x by ``angle`` radians.

    The new y is used when computing the new z.
    """
    point.pz *= z_scale
    point.py = point.py * math.cos(angle) + point.pz * -math.sin(angle)
    point.pz = point.py * math.sin(angle) + point.pz * math.cos(angle)


def rotate_y(point, angle):
    """Turn the projection about y by ``angle`` radians; the new x feeds z."""
    point.px = point.px * math.cos(angle) + point.pz * math.sin(angle)
    point.pz = point.px * -math.sin(angle) + point.pz * math.cos(angle)


def rotate_z(point, angle):
    """Start the projection from the map position, turned about z by ``angle`` radians."""
    point.px = point.x * math.cos(angle) + point.y * -math.sin(angle)
    point.py = point.x * math.sin(angle) + point.y * math.cos(angle)
    point.pz = float(point.z)


class Grid:
    """Rows of map points with the view settings used to project them."""

    def __init__(self, points, width, height):
        rows = [list(row) for row in points]
        if not rows or not rows[0]:
            raise ValueError("grid needs at least one point")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all grid rows must have the same length")
        if width <= 0 or height <= 0:
            raise ValueError(f"view size must be positive, got {width}x{height}")
        self.points = rows
        self.lines = len(rows)
        self.rows = len(rows[0])
        self.width = width
        self.height = height
        self.reset()

    def __iter__(self):
        for row in self.points:
            yield from row

    def fit_scale(self):
        """Compute and store the scale that fits the grid, gaps included, in the view."""
        ewidth = self.rows + (self.rows - 1) * 2
        eheight = self.lines + (self.lines - 1) * 2
        self.scaling = min(self.width / ewidth, self.height / eheight)
        return self.scaling

    def _view(self, x_iso, y_iso, z_iso):
        self.x_offset = 0.0
        self.y_offset = 0.0
        self.fit_scale()
        self.x_iso = x_iso
        self.y_iso = y_iso
        self.z_iso = z_iso
        self.z = _Z_SCALE

    def reset(self):
        """Return to the isometric view."""
        self._view(_ISO_X, _ISO_Y, _ISO_Z)

    def flatten(self):
        """Switch to the view from straight above."""
        self._view(0.0, 0.0, 0.0)

    def center(self):
        """Move the projection to the middle of the view, plus the offsets."""
        first = self.points[0][0]
        last = self.points[-1][-1]
        center_x = int((self.width - (last.px - first.px)) / 2)
        center_y = int((self.height - (last.py - first.py)) / 2)
        for point in self:
            point.px += self.x_offset + center_x
            point.py += self.y_offset + center_y

    def project(self):
        """Recompute every point's screen position from the view settings."""
        angle_x = math.radians(math.fmod(self.x_iso, 360))
        angle_y = math.radians(math.fmod(self.y_iso, 360))
        angle_z = math.radians(math.fmod(self.z_iso, 360))
        for point in self:
            rotate_z(point, angle_z)
            rotate_x(point, angle_x, self.z)
            rotate_y(point, angle_y)
            point.px *= self.scaling
            point.py *= self.scaling
        self.center()