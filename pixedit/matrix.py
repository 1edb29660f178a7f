"""Dense float matrices and RGB matrix packs used to hold image data."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import product


@dataclass(frozen=True)
class Triplet:
    """An RGB colour with channels normally in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float


@dataclass
class Matrix:
    """A row-major matrix of floats indexed as ``m[i, j]``."""

    rows: int
    cols: int
    data: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        if not self.data:
            self.data = [0.0] * (self.rows * self.cols)
        elif len(self.data) != self.rows * self.cols:
            raise ValueError("data length does not match matrix dimensions")

    @classmethod
    def zero(cls, rows: int, cols: int) -> Matrix:
        """Return a matrix of the given size filled with zeroes."""
        return cls(rows, cols)

    def _offset(self, key: tuple[int, int]) -> int:
        i, j = key
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"coordinates ({i}, {j}) out of bounds")
        return i * self.cols + j

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.data[self._offset(key)] = float(value)

    def fill(self, value: float) -> None:
        """Set every element to ``value``."""
        self.data = [float(value)] * (self.rows * self.cols)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError("could not multiply: dimensions do not match")
        result = Matrix.zero(self.rows, other.cols)
        for i, j in product(range(self.rows), range(other.cols)):
            result[i, j] = sum(
                self[i, k] * other[k, j] for k in range(self.cols)
            )
        return result

    def format(self) -> str:
        """Render the matrix as text, one line per row."""
        return "".join(
            "".join(f"{self[i, j]:f} " for j in range(self.cols)) + "\n"
            for i in range(self.rows)
        )


@dataclass
class MatrixPack:
    """Three matrices holding the red, green and blue planes of an image."""

    r: Matrix
    g: Matrix
    b: Matrix

    @classmethod
    def zero(cls, rows: int, cols: int) -> MatrixPack:
        """Return a black pack of the given size."""
        return cls(Matrix.zero(rows, cols), Matrix.zero(rows, cols),
                   Matrix.zero(rows, cols))

    @property
    def rows(self) -> int:
        return self.r.rows

    @property
    def cols(self) -> int:
        return self.r.cols

    def __getitem__(self, key: tuple[int, int]) -> Triplet:
        return Triplet(self.r[key], self.g[key], self.b[key])

    def __setitem__(self, key: tuple[int, int], value: Triplet) -> None:
        self.r[key] = value.r
        self.g[key] = value.g
        self.b[key] = value.b

    def fill(self, value: float) -> None:
        """Set every channel of every pixel to ``value``."""
        self.r.fill(value)
        self.g.fill(value)
        self.b.fill(value)