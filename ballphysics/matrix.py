"""A small 2x2 matrix type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ballphysics.vector import Vec2


@dataclass(frozen=True)
class Matrix2D:
    """An immutable 2x2 matrix given row by row."""

    a11: float
    a12: float
    a21: float
    a22: float

    @classmethod
    def from_rows(cls, v1: Vec2, v2: Vec2) -> Matrix2D:
        """Build a matrix whose rows are the two given vectors."""
        return cls(v1.x, v1.y, v2.x, v2.y)

    def rows(self) -> list[list[float]]:
        """Return the entries as a list of rows."""
        return [[self.a11, self.a12], [self.a21, self.a22]]

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.rows()[i][j]

    def __add__(self, other: Matrix2D) -> Matrix2D:
        if not isinstance(other, Matrix2D):
            return NotImplemented
        return Matrix2D(
            self.a11 + other.a11,
            self.a12 + other.a12,
            self.a21 + other.a21,
            self.a22 + other.a22,
        )

    def __sub__(self, other: Matrix2D) -> Matrix2D:
        if not isinstance(other, Matrix2D):
            return NotImplemented
        return Matrix2D(
            self.a11 - other.a11,
            self.a12 - other.a12,
            self.a21 - other.a21,
            self.a22 - other.a22,
        )

    def __mul__(
        self, other: Union[int, float, Vec2, Matrix2D]
    ) -> Union[Matrix2D, Vec2]:
        """Scale by a number, apply to a vector, or combine with a matrix.

        Combining two matrices multiplies the entries pairwise as
        a11*b11, a12*b21, a21*b12, a22*b22.
        """
        if isinstance(other, Vec2):
            return Vec2(
                self.a11 * other.x + self.a12 * other.y,
                self.a21 * other.x + self.a22 * other.y,
            )
        if isinstance(other, Matrix2D):
            return Matrix2D(
                self.a11 * other.a11,
                self.a12 * other.a21,
                self.a21 * other.a12,
                self.a22 * other.a22,
            )
        if isinstance(other, (int, float)):
            return Matrix2D(
                other * self.a11,
                other * self.a12,
                other * self.a21,
                other * self.a22,
            )
        return NotImplemented