"""Transformation matrices and quaternion rotations."""

from __future__ import annotations

import math

from .matrix import PI, Matrix
from .quaternion import Quaternion
from .vector import X, Y, Z, Vector


def look_at(eye, target, up):
    """The 4 x 4 view matrix looking from ``eye`` towards ``target``."""
    f = (target - eye).normalized()
    r = f.cross(up).normalized()
    u = r.cross(f).normalized()
    return Matrix(
        4,
        4,
        [
            r[X], r[Y], r[Z], -(r * eye),
            u[X], u[Y], u[Z], -(u * eye),
            -f[X], -f[Y], -f[Z], f * eye,
            0.0, 0.0, 0.0, 1.0,
        ],
    )


def rodrigues_rotation(axis, theta):
    """The 3 x 3 matrix rotating by ``theta`` radians about ``axis``.

    The layout matches ``Quaternion.rotation_matrix`` for the same rotation.
    """
    sin_t = math.sin(theta)
    cos_t = math.cos(theta)
    a = axis.normalized()
    k = 1.0 - cos_t
    return Matrix(
        3,
        3,
        [
            cos_t + a[X] * a[X] * k,
            a[Z] * sin_t + a[X] * a[Y] * k,
            -a[Y] * sin_t + a[X] * a[Z] * k,
            -a[Z] * sin_t + a[Y] * a[X] * k,
            cos_t + a[Y] * a[Y] * k,
            a[X] * sin_t + a[Y] * a[Z] * k,
            a[Y] * sin_t + a[Z] * a[X] * k,
            -a[X] * sin_t + a[Z] * a[Y] * k,
            cos_t + a[Z] * a[Z] * k,
        ],
    )


def rotate(axis, theta, center=None):
    """A 4 x 4 rotation about ``axis``, around the origin or around ``center``.

    With a centre, its offset ``center - R * center`` fills the bottom row.
    """
    r = rodrigues_rotation(axis, theta)
    rows = [r.row(i) for i in range(3)]
    if center is None:
        last = (0.0, 0.0, 0.0, 1.0)
    else:
        offset = center - r * center
        last = (offset[0], offset[1], offset[2], 1.0)
    values = [*rows[0], 0.0, *rows[1], 0.0, *rows[2], 0.0, *last]
    return Matrix(4, 4, values)


def perspective(near, far, fov, aspect_ratio):
    """A perspective projection; ``fov`` is the field of view in degrees."""
    s = 1.0 / math.tan(PI * fov / 360.0)
    depth = far - near
    return Matrix(
        4,
        4,
        [
            s / aspect_ratio, 0.0, 0.0, 0.0,
            0.0, -s, 0.0, 0.0,
            0.0, 0.0, -(far + near) / depth, -2.0 * far * near / depth,
            0.0, 0.0, -1.0, 0.0,
        ],
    )


def rotate_around_axis(axis, theta):
    """The unit quaternion rotating by ``theta`` radians about ``axis``."""
    cos_t = math.cos(theta / 2)
    sin_t = math.sin(theta / 2)
    a = axis.normalized()
    return Quaternion(cos_t, sin_t * a[X], sin_t * a[Y], sin_t * a[Z])


def rotate_by_quaternion(point, rotation):
    """Rotate ``point`` by the unit quaternion ``rotation``."""
    v = rotation.xyz()
    t = 2 * v.cross(point)
    return point + rotation.w * t + v.cross(t)


__all__ = [
    "look_at",
    "rodrigues_rotation",
    "rotate",
    "perspective",
    "rotate_around_axis",
    "rotate_by_quaternion",
    "Vector",
]