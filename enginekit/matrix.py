"""Dense matrices of any shape, stored column by column."""

from __future__ import annotations

import operator
from numbers import Real

EPS = 0.0000001
PI = 3.14159265359


def _close(a, b):
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    return abs(a - b) <= EPS


class Matrix:
    """A rows x cols matrix.

    Values are given row by row; equality of non-integer entries is within EPS.
    """

    def __init__(self, rows, cols, values=None):
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        if values is None:
            data = [0.0] * (rows * cols)
        else:
            flat = list(values)
            if len(flat) != rows * cols:
                raise ValueError(
                    f"expected {rows * cols} values for a {rows}x{cols} matrix, got {len(flat)}"
                )
            data = [flat[r * cols + c] for c in range(cols) for r in range(rows)]
        self._rows = rows
        self._cols = cols
        self._data = data

    @classmethod
    def _from_columns(cls, rows, cols, data):
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = list(data)
        return obj

    def _derive(self, data):
        return type(self)._from_columns(self._rows, self._cols, data)

    def _idx(self, row, col):
        return col * self._rows + row

    def _check_position(self, row, col):
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"position ({row}, {col}) outside {self._rows}x{self._cols} matrix")

    def _check_shape(self, other):
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {other.shape}")

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    @property
    def shape(self):
        return (self._rows, self._cols)

    # Constructors

    @staticmethod
    def identity(n):
        """The n x n identity matrix."""
        return Matrix(n, n, [1.0 if r == c else 0.0 for r in range(n) for c in range(n)])

    @staticmethod
    def zero(rows, cols):
        """A matrix filled with zeros."""
        return Matrix(rows, cols)

    @staticmethod
    def one(rows, cols):
        """A matrix filled with ones."""
        return Matrix.zero(rows, cols) + 1

    @staticmethod
    def from_json(rows, cols, obj):
        """Build a matrix from ``{"data": [...]}`` holding column-major entries."""
        try:
            data = list(obj["data"])
        except (KeyError, TypeError) as exc:
            raise ValueError("matrix JSON needs a 'data' list") from exc
        if len(data) != rows * cols:
            raise ValueError(f"expected {rows * cols} entries, got {len(data)}")
        return Matrix._from_columns(rows, cols, data)

    def to_json(self):
        """Serialise as ``{"data": [...]}`` with entries in column-major order."""
        return {"data": list(self._data)}

    # Comparison and hashing

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(_close(a, b) for a, b in zip(self._data, other._data))

    def __hash__(self):
        return hash((self._rows, self._cols, tuple(self._data)))

    def __repr__(self):
        values = [self._data[self._idx(r, c)] for r in range(self._rows) for c in range(self._cols)]
        return f"{type(self).__name__}({self._rows}, {self._cols}, {values!r})"

    # Element access

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, col = index
            self._check_position(row, col)
            return self._data[self._idx(row, col)]
        if self._cols == 1:
            return self._data[index]
        return self.row(index)

    def __setitem__(self, index, value):
        if isinstance(index, tuple):
            row, col = index
            self._check_position(row, col)
            self._data[self._idx(row, col)] = value
        elif self._cols == 1:
            self._data[index] = value
        else:
            values = list(value)
            if len(values) != self._cols:
                raise ValueError(f"a row needs {self._cols} values, got {len(values)}")
            if not 0 <= index < self._rows:
                raise IndexError(f"row {index} outside {self._rows}-row matrix")
            for col, entry in enumerate(values):
                self._data[self._idx(index, col)] = entry

    def row(self, index):
        """The entries of one row as a tuple."""
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} outside {self._rows}-row matrix")
        return tuple(self._data[self._idx(index, c)] for c in range(self._cols))

    def max_entry(self):
        return max(self._data)

    def min_entry(self):
        return min(self._data)

    # Arithmetic

    def _combine(self, other, op):
        if isinstance(other, Matrix):
            self._check_shape(other)
            return [op(a, b) for a, b in zip(self._data, other._data)]
        if isinstance(other, Real):
            return [op(a, other) for a in self._data]
        return None

    def _apply(self, other, op):
        data = self._combine(other, op)
        if data is None:
            return NotImplemented
        return self._derive(data)

    def _apply_in_place(self, other, op):
        data = self._combine(other, op)
        if data is None:
            return NotImplemented
        self._data = data
        return self

    def __add__(self, other):
        return self._apply(other, operator.add)

    def __radd__(self, other):
        if isinstance(other, Real):
            return self + other
        return NotImplemented

    def __sub__(self, other):
        return self._apply(other, operator.sub)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self._product(other)
        if isinstance(other, Real):
            return self._derive([a * other for a in self._data])
        return NotImplemented

    def _product(self, other):
        if self._cols != other._rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        n, m, l = self._rows, self._cols, other._cols
        data = [
            sum(self._data[i * n + r] * other._data[c * m + i] for i in range(m))
            for c in range(l)
            for r in range(n)
        ]
        if (n, l) == other.shape:
            return type(other)._from_columns(n, l, data)
        if (n, l) == self.shape:
            return type(self)._from_columns(n, l, data)
        return Matrix._from_columns(n, l, data)

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Real):
            return self._derive([a / other for a in self._data])
        return NotImplemented

    def __iadd__(self, other):
        return self._apply_in_place(other, operator.add)

    def __isub__(self, other):
        return self._apply_in_place(other, operator.sub)

    def __imul__(self, other):
        """Multiply in place: entry by entry for a matrix, by a scalar otherwise."""
        return self._apply_in_place(other, operator.mul)

    def __itruediv__(self, other):
        if isinstance(other, Real):
            return self._apply_in_place(other, operator.truediv)
        return NotImplemented

    # Transposition and inversion

    def transposed(self):
        data = [self._data[self._idx(r, c)] for r in range(self._rows) for c in range(self._cols)]
        return Matrix._from_columns(self._cols, self._rows, data)

    def inverse(self):
        """A new matrix holding the inverse; the original is unchanged."""
        return self._derive(self._data).invert()

    def invert(self):
        """Invert in place by Gaussian elimination on columns and return self."""
        if self._rows != self._cols:
            raise ValueError("only square matrices can be inverted")
        n = self._rows
        data = list(self._data)
        ident = [1.0 if c == r else 0.0 for c in range(n) for r in range(n)]

        def at(row, col):
            return col * n + row

        def col_swap(values, c1, c2):
            for row in range(n):
                values[at(row, c1)], values[at(row, c2)] = values[at(row, c2)], values[at(row, c1)]

        def col_op(values, src, dst, factor):
            for row in range(n):
                values[at(row, dst)] += factor * values[at(row, src)]

        for diag in range(n):
            for col in range(diag, n):
                if data[at(diag, col)]:
                    col_swap(data, diag, col)
                    col_swap(ident, diag, col)
                    break
            if data[at(diag, diag)] == 0:
                raise ValueError("Inverse of irregular matrix requested.")
            for col in range(diag + 1, n):
                factor = -data[at(diag, col)] / data[at(diag, diag)]
                col_op(data, diag, col, factor)
                col_op(ident, diag, col, factor)

        for diag in reversed(range(n)):
            for col in range(diag):
                factor = -data[at(diag, col)] / data[at(diag, diag)]
                col_op(data, diag, col, factor)
                col_op(ident, diag, col, factor)

        for col in range(n):
            factor = data[at(col, col)]
            for row in range(n):
                data[at(row, col)] = ident[at(row, col)] / factor

        self._data = data
        return self