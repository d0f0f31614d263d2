# core/matrix.py
from typing import Sequence
from core.vector import Vector3


class Matrix3:
    """
    A 3x3 row-major matrix. Rows are stored as Vector3 so that a
    matrix-vector product is three dot products.
    """
    def __init__(self, rows: Sequence[Vector3]):
        if len(rows) != 3:
            raise ValueError(f"Matrix3 needs 3 rows, got {len(rows)}")
        self.rows = tuple(rows)

    @staticmethod
    def identity() -> "Matrix3":
        return Matrix3([Vector3(1.0, 0.0, 0.0),
                        Vector3(0.0, 1.0, 0.0),
                        Vector3(0.0, 0.0, 1.0)])

    @staticmethod
    def from_rows(r0: Vector3, r1: Vector3, r2: Vector3) -> "Matrix3":
        return Matrix3([r0, r1, r2])

    def __getitem__(self, i: int) -> Vector3:
        return self.rows[i]

    def transpose(self) -> "Matrix3":
        r0, r1, r2 = self.rows
        return Matrix3([Vector3(r0.x, r1.x, r2.x),
                        Vector3(r0.y, r1.y, r2.y),
                        Vector3(r0.z, r1.z, r2.z)])

    def transform(self, v: Vector3) -> Vector3:
        """Multiplies the matrix by the column vector v."""
        r0, r1, r2 = self.rows
        return Vector3(r0.dot(v), r1.dot(v), r2.dot(v))

    def __matmul__(self, other):
        if isinstance(other, Vector3):
            return self.transform(other)
        cols = other.transpose().rows
        return Matrix3([Vector3(row.dot(cols[0]), row.dot(cols[1]), row.dot(cols[2]))
                        for row in self.rows])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Matrix3({list(self.rows)})"
