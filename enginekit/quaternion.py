"""Quaternions for representing rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .matrix import PI, Matrix
from .vector import Vector


@dataclass
class Quaternion:
    """A quaternion w + xi + yj + zk."""

    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def from_vector(point, w=0.0):
        """A quaternion with vector part taken from ``point``, as used for r p r*."""
        return Quaternion(w, point[0], point[1], point[2])

    @staticmethod
    def identity():
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            w, x, y, z = self.w, self.x, self.y, self.z
            return Quaternion(
                w * other.w - x * other.x - y * other.y - z * other.z,
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y - x * other.z + y * other.w + z * other.x,
                w * other.z + x * other.y - y * other.x + z * other.w,
            )
        if isinstance(other, Real):
            return Quaternion(self.w * other, self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __truediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return Quaternion(self.w / other, self.x / other, self.y / other, self.z / other)

    def __imul__(self, other):
        result = self * other
        if result is NotImplemented:
            return NotImplemented
        self.w, self.x, self.y, self.z = result.w, result.x, result.y, result.z
        return self

    def __itruediv__(self, other):
        result = self / other
        if result is NotImplemented:
            return NotImplemented
        self.w, self.x, self.y, self.z = result.w, result.x, result.y, result.z
        return self

    def _sqr_norm(self):
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z

    def conjugate(self):
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def normalized(self):
        """A copy divided by the squared norm; unit quaternions come back unchanged."""
        return self / self._sqr_norm()

    def normalize(self):
        """Divide in place by the squared norm and return self."""
        self /= self._sqr_norm()
        return self

    def xyz(self):
        """The vector part."""
        return Vector(self.x, self.y, self.z)

    @staticmethod
    def look_at(position, target, up):
        """The orientation looking from ``position`` towards ``target``."""
        f = (target - position).normalized()
        r = f.cross(up).normalized()
        u = r.cross(f)

        trace = r.x + u.y + f.z
        if trace > 0.0:
            s = 0.5 / math.sqrt(trace + 1.0)
            return Quaternion(0.25 / s, (u.z - f.y) * s, (f.x - r.z) * s, (r.y - u.x) * s)
        if r.x > u.y and r.x > f.z:
            s = 2.0 * math.sqrt(1.0 + r.x - u.y - f.z)
            return Quaternion((u.z - f.y) / s, 0.25 * s, (u.x + r.y) / s, (f.x + r.z) / s)
        if u.y > f.z:
            s = 2.0 * math.sqrt(1.0 + u.y - r.x - f.z)
            return Quaternion((f.x - r.z) / s, (u.x + r.y) / s, 0.25 * s, (f.y + u.z) / s)
        s = 2.0 * math.sqrt(1.0 + f.z - r.x - u.y)
        return Quaternion((r.y - u.x) / s, (f.x + r.z) / s, (f.y + u.z) / s, 0.25 * s)

    def euler_angles(self):
        """Angles as a vector: rotation about z, then y, then x."""
        w, x, y, z = self.w, self.x, self.y, self.z
        pitch_term = 2 * (w * y - x * z)
        return Vector(
            math.atan2(2 * (w * z + x * y), 1 - 2 * (y * y + z * z)),
            -PI / 2
            + 2 * math.atan2(math.sqrt(max(0.0, 1 + pitch_term)), math.sqrt(max(0.0, 1 - pitch_term))),
            math.atan2(2 * (w * x + y * z), 1 - 2 * (x * x + y * y)),
        )

    @staticmethod
    def from_euler_angles(euler_angles):
        """The inverse of ``euler_angles``."""
        sin_a, cos_a = math.sin(euler_angles[0] / 2), math.cos(euler_angles[0] / 2)
        sin_b, cos_b = math.sin(euler_angles[1] / 2), math.cos(euler_angles[1] / 2)
        sin_g, cos_g = math.sin(euler_angles[2] / 2), math.cos(euler_angles[2] / 2)
        return Quaternion(
            cos_g * cos_b * cos_a + sin_g * sin_b * sin_a,
            sin_g * cos_b * cos_a - cos_g * sin_b * sin_a,
            cos_g * sin_b * cos_a + sin_g * cos_b * sin_a,
            cos_g * cos_b * sin_a - sin_g * sin_b * cos_a,
        )

    def rotation_matrix(self):
        """The 3 x 3 rotation matrix of this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return Matrix(
            3,
            3,
            [
                w * w + x * x - y * y - z * z, 2 * (x * y + w * z), 2 * (x * z - w * y),
                2 * (x * y - w * z), w * w - x * x + y * y - z * z, 2 * (w * x + y * z),
                2 * (w * y + x * z), 2 * (y * z - w * x), w * w - x * x - y * y + z * z,
            ],
        )

    def to_json(self):
        return {"w": self.w, "x": self.x, "y": self.y, "z": self.z}

    @staticmethod
    def from_json(obj):
        """Build from an object holding the keys w, x, y and z."""
        try:
            return Quaternion(obj["w"], obj["x"], obj["y"], obj["z"])
        except (KeyError, TypeError) as exc:
            raise ValueError("quaternion JSON needs keys w, x, y and z") from exc