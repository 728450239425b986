"""
Polynomials over the secp256k1 scalar field.

A shareholder's secret share is a univariate Polynomial. In CHURP shares are
cut out of a BivariatePolynomial B(x, y): fixing x at a shareholder's encoded
identifier gives a "full" share in y, fixing y gives a "reduced" share in x.
Both types are immutable; arithmetic returns new values.
"""

from __future__ import annotations
import secrets
from typing import Iterable, Optional, Tuple
from .constants import Q, SCALAR_SIZE


class Polynomial:
    """Class representing a univariate polynomial with coefficients in Z_q."""

    def __init__(self, coefficients: Iterable[int] = ()):
        """
        Initialize a polynomial from its coefficients, lowest degree first.

        Parameters:
        coefficients (Iterable[int]): The coefficients a_0, a_1, ..., a_d.
        Each is reduced modulo Q.

        Raises:
        ValueError: If any coefficient is not an integer.
        """
        coefficients = tuple(coefficients)
        if not all(isinstance(a, int) for a in coefficients):
            raise ValueError("Polynomial coefficients must be integers.")
        self.coefficients: Tuple[int, ...] = tuple(a % Q for a in coefficients)

    @classmethod
    def zero(cls, degree: int) -> Polynomial:
        """Return the zero polynomial of the given degree."""
        return cls((0,) * (degree + 1))

    @classmethod
    def random(cls, degree: int) -> Polynomial:
        """Return a polynomial of the given degree with uniformly random coefficients."""
        if degree < 0:
            raise ValueError("Polynomial degree must not be negative.")
        return cls(secrets.randbelow(Q) for _ in range(degree + 1))

    def degree(self) -> int:
        """
        Return the degree of the polynomial, i.e. the number of coefficients
        minus one. Leading zero coefficients are counted, so two shares dealt
        with the same threshold always report the same degree.
        """
        return max(len(self.coefficients) - 1, 0)

    def coefficient(self, index: int) -> Optional[int]:
        """Return the coefficient at the given index, or None if it is absent."""
        if 0 <= index < len(self.coefficients):
            return self.coefficients[index]
        return None

    def eval(self, x: int) -> int:
        """
        Evaluate the polynomial at a given point x using Horner's method.

        Parameters:
        x (int): The point at which the polynomial is evaluated.

        Returns:
        int: The value of the polynomial at x, reduced modulo Q.

        Raises:
        ValueError: If x is not an integer.
        """
        if not isinstance(x, int):
            raise ValueError("The value of x must be an integer.")

        y = 0
        for coefficient in reversed(self.coefficients):
            y = (y * x + coefficient) % Q
        return y

    def _zip(self, other: Polynomial) -> Iterable[Tuple[int, int]]:
        n = max(len(self.coefficients), len(other.coefficients))
        a = self.coefficients + (0,) * (n - len(self.coefficients))
        b = other.coefficients + (0,) * (n - len(other.coefficients))
        return zip(a, b)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(a + b for a, b in self._zip(other))

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(a - b for a, b in self._zip(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(degree={self.degree()})"

    def to_bytes(self) -> bytes:
        """Serialize the coefficients as concatenated 32-byte big-endian scalars."""
        return b"".join(a.to_bytes(SCALAR_SIZE, "big") for a in self.coefficients)

    @classmethod
    def from_bytes(cls, data: bytes) -> Polynomial:
        """
        Deserialize a polynomial produced by `to_bytes`.

        Raises:
        ValueError: If the length is not a multiple of the scalar size or a
        coefficient is not a canonical scalar.
        """
        if len(data) % SCALAR_SIZE != 0:
            raise ValueError("Polynomial encoding has an invalid length.")

        coefficients = []
        for offset in range(0, len(data), SCALAR_SIZE):
            a = int.from_bytes(data[offset : offset + SCALAR_SIZE], "big")
            if a >= Q:
                raise ValueError("Polynomial coefficient is not a canonical scalar.")
            coefficients.append(a)
        return cls(coefficients)


class BivariatePolynomial:
    """
    Class representing B(x, y) = sum b_i_j x^i y^j with coefficients in Z_q,
    where 0 <= i <= deg_x and 0 <= j <= deg_y.
    """

    def __init__(self, coefficients: Iterable[Iterable[int]]):
        """
        Initialize a bivariate polynomial.

        Parameters:
        coefficients (Iterable[Iterable[int]]): Rows indexed by the power of x,
        each holding the coefficients for increasing powers of y.

        Raises:
        ValueError: If there are no coefficients or the rows are ragged.
        """
        rows = tuple(tuple(a % Q for a in row) for row in coefficients)
        if not rows or not rows[0]:
            raise ValueError("Bivariate polynomial must have coefficients.")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Bivariate polynomial rows must have equal length.")
        self.coefficients: Tuple[Tuple[int, ...], ...] = rows

    @classmethod
    def zero(cls, deg_x: int, deg_y: int) -> BivariatePolynomial:
        return cls(((0,) * (deg_y + 1) for _ in range(deg_x + 1)))

    @classmethod
    def random(cls, deg_x: int, deg_y: int) -> BivariatePolynomial:
        """Return a bivariate polynomial with uniformly random coefficients."""
        if deg_x < 0 or deg_y < 0:
            raise ValueError("Polynomial degrees must not be negative.")
        return cls(
            tuple(secrets.randbelow(Q) for _ in range(deg_y + 1))
            for _ in range(deg_x + 1)
        )

    def degrees(self) -> Tuple[int, int]:
        """Return (deg_x, deg_y)."""
        return len(self.coefficients) - 1, len(self.coefficients[0]) - 1

    def coefficient(self, i: int, j: int) -> int:
        return self.coefficients[i][j]

    def is_zero_hole(self) -> bool:
        """Check whether the constant term B(0, 0) is zero."""
        return self.coefficients[0][0] == 0

    def to_zero_hole(self) -> BivariatePolynomial:
        """Return a copy whose constant term is set to zero."""
        first = (0,) + self.coefficients[0][1:]
        return BivariatePolynomial((first,) + self.coefficients[1:])

    def eval_x(self, x: int) -> Polynomial:
        """Return the polynomial B(x, y) in y, with x fixed."""
        powers = _powers(x, len(self.coefficients))
        return Polynomial(
            sum(p * row[j] for p, row in zip(powers, self.coefficients)) % Q
            for j in range(len(self.coefficients[0]))
        )

    def eval_y(self, y: int) -> Polynomial:
        """Return the polynomial B(x, y) in x, with y fixed."""
        powers = _powers(y, len(self.coefficients[0]))
        return Polynomial(
            sum(p * b for p, b in zip(powers, row)) % Q for row in self.coefficients
        )

    def eval(self, x: int, y: int) -> int:
        return self.eval_x(x).eval(y)

    def __add__(self, other: BivariatePolynomial) -> BivariatePolynomial:
        if not isinstance(other, BivariatePolynomial):
            return NotImplemented
        if self.degrees() != other.degrees():
            raise ValueError("Bivariate polynomials must have the same degrees.")
        return BivariatePolynomial(
            tuple(a + b for a, b in zip(r, s))
            for r, s in zip(self.coefficients, other.coefficients)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BivariatePolynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __repr__(self) -> str:
        deg_x, deg_y = self.degrees()
        return f"{self.__class__.__name__}(deg_x={deg_x}, deg_y={deg_y})"


def _powers(x: int, n: int) -> Tuple[int, ...]:
    """Return (1, x, x^2, ..., x^(n - 1)) modulo Q."""
    return tuple(pow(x, i, Q) for i in range(n))
