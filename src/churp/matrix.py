"""
The matrix module provides the VerificationMatrix, the public Feldman-style
commitment to a bivariate secret sharing polynomial.

For B(x, y) = sum b_i_j x^i y^j the verification matrix holds M_i_j = b_i_j * G.
Anyone holding the matrix can check that a share (a point value, a full share
B(x_k, y) or a reduced share B(x, y_k)) is consistent with the dealing without
learning the coefficients. Matrices add element-wise, which mirrors adding the
committed polynomials, so a proactivization update can be folded into the
current commitments.

Usage:
A VerificationMatrix is normally built with `from_bivariate`, or decoded from
bytes received from a dealer with `from_bytes`.
"""

from __future__ import annotations
from typing import Iterable, Tuple
from .constants import POINT_SIZE, Q
from .errors import VerificationMatrixDimensionMismatch
from .point import Point, G
from .polynomial import BivariatePolynomial, Polynomial


class VerificationMatrix:
    """Class representing commitments to the coefficients of B(x, y)."""

    def __init__(self, matrix: Iterable[Iterable[Point]]):
        """
        Initialize a verification matrix.

        Parameters:
        matrix (Iterable[Iterable[Point]]): Rows indexed by the power of x,
        each holding commitments for increasing powers of y.

        Raises:
        ValueError: If the matrix is empty, ragged or holds non-points.
        """
        rows = tuple(tuple(row) for row in matrix)
        if not rows or not rows[0]:
            raise ValueError("Verification matrix must not be empty.")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Verification matrix rows must have equal length.")
        if not all(isinstance(m, Point) for row in rows for m in row):
            raise ValueError("Verification matrix entries must be points.")
        self.matrix: Tuple[Tuple[Point, ...], ...] = rows

    @classmethod
    def from_bivariate(cls, bp: BivariatePolynomial) -> VerificationMatrix:
        """
        Commit to every coefficient of a bivariate polynomial.

        Parameters:
        bp (BivariatePolynomial): The polynomial to commit to.

        Returns:
        VerificationMatrix: The matrix M_i_j = b_i_j * G.
        """
        return cls(tuple(b * G for b in row) for row in bp.coefficients)

    def dimensions(self) -> Tuple[int, int]:
        """Return (rows, cols), i.e. (deg_x + 1, deg_y + 1)."""
        return len(self.matrix), len(self.matrix[0])

    def is_zero_hole(self) -> bool:
        """Check whether the matrix commits to a zero constant term."""
        return self.matrix[0][0].is_identity()

    def element(self, i: int, j: int) -> Point:
        return self.matrix[i][j]

    def verify(self, x: int, y: int, v: int) -> bool:
        """
        Check that v = B(x, y) for the committed polynomial.

        Returns:
        bool: True if v * G equals sum M_i_j x^i y^j, False otherwise.
        """
        rows, cols = self.dimensions()
        x_powers = tuple(pow(x, i, Q) for i in range(rows))
        y_powers = tuple(pow(y, j, Q) for j in range(cols))

        expected = Point()
        for xi, row in zip(x_powers, self.matrix):
            for yj, m in zip(y_powers, row):
                expected += (xi * yj) * m
        return v * G == expected

    def verify_x(self, x: int, p: Polynomial) -> bool:
        """
        Check that the polynomial p(y) equals B(x, y), i.e. that p is the
        full share of the shareholder whose encoded identifier is x.

        Returns:
        bool: True if every coefficient of p matches its commitment.
        """
        rows, cols = self.dimensions()
        if len(p.coefficients) != cols:
            return False

        x_powers = tuple(pow(x, i, Q) for i in range(rows))
        for j, a in enumerate(p.coefficients):
            # g^a_j ≟ ∏ M_i_j^(x^i)
            expected = Point()
            for i, xi in enumerate(x_powers):
                expected += xi * self.matrix[i][j]
            if a * G != expected:
                return False
        return True

    def verify_y(self, y: int, p: Polynomial) -> bool:
        """
        Check that the polynomial p(x) equals B(x, y), i.e. that p is the
        reduced share of the shareholder whose encoded identifier is y.

        Returns:
        bool: True if every coefficient of p matches its commitment.
        """
        rows, cols = self.dimensions()
        if len(p.coefficients) != rows:
            return False

        y_powers = tuple(pow(y, j, Q) for j in range(cols))
        for a, row in zip(p.coefficients, self.matrix):
            # g^a_i ≟ ∏ M_i_j^(y^j)
            expected = Point()
            for yj, m in zip(y_powers, row):
                expected += yj * m
            if a * G != expected:
                return False
        return True

    def _check_dimensions(self, other: VerificationMatrix) -> None:
        if self.dimensions() != other.dimensions():
            raise VerificationMatrixDimensionMismatch()

    def __add__(self, other: VerificationMatrix) -> VerificationMatrix:
        if not isinstance(other, VerificationMatrix):
            return NotImplemented
        self._check_dimensions(other)
        return VerificationMatrix(
            tuple(a + b for a, b in zip(r, s)) for r, s in zip(self.matrix, other.matrix)
        )

    def __sub__(self, other: VerificationMatrix) -> VerificationMatrix:
        if not isinstance(other, VerificationMatrix):
            return NotImplemented
        self._check_dimensions(other)
        return VerificationMatrix(
            tuple(a - b for a, b in zip(r, s)) for r, s in zip(self.matrix, other.matrix)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VerificationMatrix):
            return NotImplemented
        return self.matrix == other.matrix

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        rows, cols = self.dimensions()
        return f"{self.__class__.__name__}(rows={rows}, cols={cols})"

    def to_bytes(self) -> bytes:
        """
        Serialize the matrix: one byte for the row count, one byte for the
        column count, then every point encoding in row-major order.

        Raises:
        ValueError: If a dimension does not fit in a single byte.
        """
        rows, cols = self.dimensions()
        if rows > 255 or cols > 255:
            raise ValueError("Verification matrix is too large to encode.")

        header = bytes((rows, cols))
        return header + b"".join(m.encode() for row in self.matrix for m in row)

    @classmethod
    def from_bytes(cls, data: bytes) -> VerificationMatrix:
        """
        Deserialize a matrix produced by `to_bytes`.

        Raises:
        ValueError: If the encoding is truncated, has trailing bytes or holds
        an invalid point.
        """
        if len(data) < 2:
            raise ValueError("Verification matrix encoding is truncated.")

        rows, cols = data[0], data[1]
        if len(data) != 2 + rows * cols * POINT_SIZE:
            raise ValueError("Verification matrix encoding has an invalid length.")

        points = [
            Point.decode(data[offset : offset + POINT_SIZE])
            for offset in range(2, len(data), POINT_SIZE)
        ]
        return cls(tuple(points[i * cols : (i + 1) * cols]) for i in range(rows))
