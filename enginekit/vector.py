"""Column vectors built on the matrix type, plus integer dimensions."""

from __future__ import annotations

import math
from numbers import Real

from .matrix import Matrix

X, Y, Z, W = 0, 1, 2, 3
WIDTH, HEIGHT, DEPTH = 0, 1, 2

_UINT32_MAX = 0xFFFFFFFF


def _component(index, name):
    def fget(self):
        self._require(index + 1, name)
        return self._data[index]

    def fset(self, value):
        self._require(index + 1, name)
        self._data[index] = value

    return property(fget, fset, doc=f"Component {name} of the vector.")


def _swizzle(indices, name):
    def fget(self):
        self._require(max(indices) + 1, name)
        return Vector(*(self._data[i] for i in indices))

    def fset(self, values):
        self._require(max(indices) + 1, name)
        values = list(values)
        if len(values) != len(indices):
            raise ValueError(f"{name} needs {len(indices)} values, got {len(values)}")
        for i, value in zip(indices, values):
            self._data[i] = value

    return property(fget, fset, doc=f"Components {name} as a new vector; assignable.")


class Vector(Matrix):
    """An n x 1 matrix with vector operations.

    ``Vector(1, 2, 3)`` and ``Vector([1, 2, 3])`` build the same vector.
    Multiplying two vectors gives their dot product.
    """

    def __init__(self, *args):
        if len(args) == 1 and not isinstance(args[0], Real):
            values = list(args[0])
        else:
            values = list(args)
        if not values:
            raise ValueError("a vector needs at least one component")
        super().__init__(len(values), 1, values)

    def __repr__(self):
        return f"Vector({', '.join(repr(v) for v in self._data)})"

    def _require(self, size, name):
        if len(self._data) < size:
            raise AttributeError(f"{name} needs at least {size} components, vector has {len(self._data)}")

    def __len__(self):
        return self._rows

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, tuple):
            return super().__getitem__(index)
        return self._data[index]

    def __setitem__(self, index, value):
        if isinstance(index, tuple):
            super().__setitem__(index, value)
        else:
            self._data[index] = value

    def __mul__(self, other):
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError(f"cannot take dot product of sizes {len(self)} and {len(other)}")
            return sum(a * b for a, b in zip(self._data, other._data))
        return super().__mul__(other)

    def __format__(self, spec):
        def one(value):
            if spec:
                return format(value, spec)
            if isinstance(value, int):
                return str(value)
            return format(value, "g")

        return "{" + ", ".join(one(v) for v in self._data) + "}"

    def __str__(self):
        return format(self, "")

    def sqr_magnitude(self):
        """The dot product of the vector with itself."""
        return self * self

    def length(self):
        return math.sqrt(self.sqr_magnitude())

    def normalized(self):
        """A new vector of unit length in the same direction."""
        return self / self.length()

    def normalize(self):
        """Scale to unit length in place and return self."""
        self /= self.length()
        return self

    def cross(self, other):
        """The cross product of two three-component vectors."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("the cross product needs two three-component vectors")
        a, b = self._data, other._data
        return Vector(
            a[Y] * b[Z] - a[Z] * b[Y],
            a[Z] * b[X] - a[X] * b[Z],
            a[X] * b[Y] - a[Y] * b[X],
        )

    def volume(self):
        """The product of all components."""
        return math.prod(self._data[1:], start=self._data[0])

    x = _component(X, "x")
    y = _component(Y, "y")
    z = _component(Z, "z")
    w = _component(W, "w")
    xy = _swizzle((X, Y), "xy")
    xz = _swizzle((X, Z), "xz")
    yz = _swizzle((Y, Z), "yz")
    xyz = _swizzle((X, Y, Z), "xyz")
    xyzw = _swizzle((X, Y, Z, W), "xyzw")


def dimension(*args):
    """A vector of unsigned 32-bit integer extents, such as width and height."""
    if len(args) == 1 and not isinstance(args[0], int):
        values = list(args[0])
    else:
        values = list(args)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"dimension entries must be integers, got {value!r}")
        if not 0 <= value <= _UINT32_MAX:
            raise ValueError(f"dimension entry {value} outside unsigned 32-bit range")
    return Vector(*values)