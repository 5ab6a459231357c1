"""Square matrices of floats with operator-based arithmetic."""

from __future__ import annotations

from typing import Iterator, List, Sequence

_Scalar = (int, float)


def _format_number(value: float) -> str:
    """Format a value the way a default-precision stream would."""
    return f"{value:g}"


def _determinant(rows: Sequence[Sequence[float]]) -> float:
    """Laplace expansion along the first row."""
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for k, pivot in enumerate(rows[0]):
        minor = [row[:k] + row[k + 1:] for row in rows[1:]]
        sign = 1 if k % 2 == 0 else -1
        total += sign * pivot * _determinant(minor)
    return total


class _Row:
    """A live view of one matrix row, allowing ``mat[i][j]`` access."""

    __slots__ = ("_mat", "_i")

    def __init__(self, mat: "SquareMat", i: int) -> None:
        self._mat = mat
        self._i = i

    def __getitem__(self, j: int) -> float:
        return self._mat[self._i, j]

    def __setitem__(self, j: int, value: float) -> None:
        self._mat[self._i, j] = value

    def __len__(self) -> int:
        return self._mat.n

    def __iter__(self) -> Iterator[float]:
        return (self._mat[self._i, j] for j in range(self._mat.n))

    def __repr__(self) -> str:
        return f"_Row({list(self)!r})"


class SquareMat:
    """An n×n matrix of floats stored row by row."""

    __slots__ = ("_n", "_data")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, n: int, init_val: float = 0.0) -> None:
        if n <= 0:
            raise ValueError("n must be positive")
        self._n = n
        self._data: List[float] = [float(init_val)] * (n * n)

    @classmethod
    def _from_data(cls, n: int, data: List[float]) -> "SquareMat":
        mat = cls.__new__(cls)
        mat._n = n
        mat._data = data
        return mat

    @property
    def n(self) -> int:
        """The matrix dimension."""
        return self._n

    def copy(self) -> "SquareMat":
        """Return an independent copy."""
        return self._from_data(self._n, list(self._data))

    # ----- element access -------------------------------------------------

    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError("index out of range")
        return i * self._n + j

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._data[self._offset(i, j)]
        if isinstance(key, int):
            if not 0 <= key < self._n:
                raise IndexError("row index out of range")
            return _Row(self, key)
        raise TypeError("index with m[i, j] or m[i]")

    def __setitem__(self, key, value) -> None:
        if not isinstance(key, tuple):
            raise TypeError("assign elements with m[i, j] or m[i][j]")
        i, j = key
        self._data[self._offset(i, j)] = float(value)

    def _rows(self) -> List[List[float]]:
        n = self._n
        return [self._data[i * n:(i + 1) * n] for i in range(n)]

    def sum(self) -> float:
        """Sum of all elements; used by the comparison operators."""
        return sum(self._data, 0.0)

    # ----- arithmetic -----------------------------------------------------

    def _check_same(self, other: "SquareMat") -> None:
        if self._n != other._n:
            raise ValueError("dimension mismatch")

    def __add__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._check_same(other)
        return self._from_data(self._n, [a + b for a, b in zip(self._data, other._data)])

    def __iadd__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._check_same(other)
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __sub__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._check_same(other)
        return self._from_data(self._n, [a - b for a, b in zip(self._data, other._data)])

    def __neg__(self) -> "SquareMat":
        return self._from_data(self._n, [-a for a in self._data])

    def _matmul(self, other: "SquareMat") -> List[float]:
        self._check_same(other)
        columns = list(zip(*other._rows()))
        result: List[float] = []
        for row in self._rows():
            result.extend(sum((a * b for a, b in zip(row, col)), 0.0) for col in columns)
        return result

    def __mul__(self, other):
        if isinstance(other, SquareMat):
            return self._from_data(self._n, self._matmul(other))
        if isinstance(other, _Scalar):
            return self._from_data(self._n, [a * other for a in self._data])
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _Scalar):
            return self * other
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, SquareMat):
            self._data = self._matmul(other)
            return self
        if isinstance(other, _Scalar):
            self._data = [a * other for a in self._data]
            return self
        return NotImplemented

    def __truediv__(self, other):
        if not isinstance(other, _Scalar):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("division by zero")
        return self._from_data(self._n, [a / other for a in self._data])

    def __itruediv__(self, other):
        if not isinstance(other, _Scalar):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("division by zero")
        self._data = [a / other for a in self._data]
        return self

    def __mod__(self, other):
        """Element-wise (Hadamard) product."""
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._check_same(other)
        return self._from_data(self._n, [a * b for a, b in zip(self._data, other._data)])

    # ----- comparison by element sum --------------------------------------

    def __eq__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() == other.sum()

    def __ne__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self == other

    def __lt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() < other.sum()

    def __le__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() <= other.sum()

    def __gt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() > other.sum()

    def __ge__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() >= other.sum()

    # ----- transpose, step, power, determinant ----------------------------

    def __invert__(self) -> "SquareMat":
        """Return the transpose."""
        data = [value for column in zip(*self._rows()) for value in column]
        return self._from_data(self._n, data)

    def increment(self) -> "SquareMat":
        """Add one to every element in place and return this matrix."""
        self._data = [a + 1 for a in self._data]
        return self

    def decrement(self) -> "SquareMat":
        """Subtract one from every element in place and return this matrix."""
        self._data = [a - 1 for a in self._data]
        return self

    def post_increment(self) -> "SquareMat":
        """Add one to every element in place and return the previous value."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "SquareMat":
        """Subtract one from every element in place and return the previous value."""
        previous = self.copy()
        self.decrement()
        return previous

    def __pow__(self, exponent):
        """Raise to a non-negative integer power by repeated squaring."""
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError("negative exponent")
        n = self._n
        result = SquareMat(n, 0.0)
        for i in range(n):
            result[i, i] = 1
        base = self.copy()
        while exponent:
            if exponent & 1:
                result *= base
            base *= base
            exponent >>= 1
        return result

    def determinant(self) -> float:
        """Determinant by Laplace expansion (O(n!), meant for small n)."""
        return _determinant(self._rows())

    # ----- text -----------------------------------------------------------

    def __str__(self) -> str:
        return "".join(
            "[ " + " ".join(_format_number(v) for v in row) + " ]\n" for row in self._rows()
        )

    def __repr__(self) -> str:
        return f"SquareMat.from_rows({self._rows()!r})"