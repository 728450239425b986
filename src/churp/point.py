"""
This module defines the Point class, the prime-order group used to commit to
secret sharing polynomials. Points live on secp256k1 and are kept in affine
coordinates; the point at infinity is the group identity.

Besides the group law (addition, negation, scalar multiplication), the module
provides the canonical byte encoding of points: SEC 1 compressed form, with
the identity encoded as a run of zero bytes so that every group element,
including the identity of a zero-hole verification matrix, can be serialized.
"""

from __future__ import annotations
from typing import Optional
from .constants import P, Q, G_x, G_y, POINT_SIZE


class Point:
    """Class representing an element of the secp256k1 group."""

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None):
        """
        Initialize a group element.

        Parameters:
        x (Optional[int], optional): The x-coordinate of the point.
        y (Optional[int], optional): The y-coordinate of the point.

        Leaving both coordinates unset yields the point at infinity, which is
        the identity element of the group.
        """
        self.x = x
        self.y = y

    @classmethod
    def identity(cls) -> Point:
        """Return the identity element (point at infinity)."""
        return cls()

    @classmethod
    def generator(cls) -> Point:
        """Return the fixed generator of the group."""
        return cls(G_x, G_y)

    @staticmethod
    def is_on_curve(x: int, y: int) -> bool:
        """Check that (x, y) satisfies y^2 = x^3 + 7 over the coordinate field."""
        return 0 <= x < P and 0 <= y < P and (y * y - x * x * x - 7) % P == 0

    def is_identity(self) -> bool:
        """
        Check if the point is the identity element of the group.

        Returns:
        bool: True if the point is at infinity, False otherwise.
        """
        return self.x is None or self.y is None

    def encode(self) -> bytes:
        """
        Serialize the point to its canonical 33-byte encoding.

        Finite points use the SEC 1 compressed format: a 0x02 or 0x03 prefix
        selecting the parity of y, followed by the big-endian x-coordinate.
        The identity is encoded as 33 zero bytes.

        Returns:
        bytes: The canonical encoding of the point.
        """
        if self.is_identity():
            return bytes(POINT_SIZE)

        prefix = b"\x02" if self.y % 2 == 0 else b"\x03"
        return prefix + self.x.to_bytes(POINT_SIZE - 1, "big")

    @classmethod
    def decode(cls, data: bytes) -> Point:
        """
        Deserialize a point from its canonical 33-byte encoding.

        Parameters:
        data (bytes): Output of `encode`.

        Returns:
        Point: The decoded group element.

        Raises:
        ValueError: If the input has the wrong length, an unknown prefix, or
        does not describe a point on the curve.
        """
        if len(data) != POINT_SIZE:
            raise ValueError(f"Point encoding must be exactly {POINT_SIZE} bytes.")
        if data == bytes(POINT_SIZE):
            return cls()

        prefix = data[0]
        if prefix not in (2, 3):
            raise ValueError("Invalid point encoding prefix.")

        x = int.from_bytes(data[1:], "big")
        if x >= P:
            raise ValueError("Point x-coordinate is not a field element.")

        # secp256k1 has P = 3 mod 4, so a square root is a single exponentiation
        y_squared = (pow(x, 3, P) + 7) % P
        y = pow(y_squared, (P + 1) // 4, P)
        if (y * y) % P != y_squared:
            raise ValueError("Point x-coordinate is not on the curve.")

        if y % 2 != prefix % 2:
            y = P - y

        return cls(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.is_identity() or other.is_identity():
            return self.is_identity() and other.is_identity()
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash(self.encode())

    def __neg__(self) -> Point:
        if self.is_identity():
            return self
        return self.__class__(self.x, (P - self.y) % P)

    def _double(self) -> Point:
        """
        Double the point. Points of order two (y = 0) and the identity double
        to the identity.
        """
        if self.is_identity() or self.y == 0:
            return self.__class__()

        slope = (3 * self.x * self.x * pow(2 * self.y, P - 2, P)) % P
        x = (slope * slope - 2 * self.x) % P
        y = (slope * (self.x - x) - self.y) % P
        return self.__class__(x, y)

    def __add__(self, other: Point) -> Point:
        """
        Add two group elements.

        Raises:
        ValueError: If other is not a Point.
        """
        if not isinstance(other, Point):
            raise ValueError("The other object must be an instance of Point")

        if self.is_identity():
            return other
        if other.is_identity():
            return self
        if self.x == other.x:
            if self.y == other.y:
                return self._double()
            return self.__class__()

        slope = ((other.y - self.y) * pow(other.x - self.x, P - 2, P)) % P
        x = (slope * slope - self.x - other.x) % P
        y = (slope * (self.x - x) - self.y) % P
        return self.__class__(x, y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            raise ValueError("The other object must be an instance of Point")
        return self + -other

    def __rmul__(self, scalar: int) -> Point:
        """
        Multiply this point by a scalar using double-and-add. The scalar is
        reduced modulo the group order first.

        Raises:
        ValueError: If the scalar is not an integer.
        """
        if not isinstance(scalar, int):
            raise ValueError("The scalar must be an integer")

        scalar %= Q
        result = self.__class__()
        addend = self
        while scalar:
            if scalar & 1:
                result = result + addend
            addend = addend._double()
            scalar >>= 1
        return result

    def __mul__(self, scalar: int) -> Point:
        return self.__rmul__(scalar)

    def __str__(self) -> str:
        if self.is_identity():
            return "0"
        return f"X: 0x{self.x:x}\nY: 0x{self.y:x}"

    def __repr__(self) -> str:
        if self.is_identity():
            return f"{self.__class__.__name__}(x=None, y=None)"
        return f"{self.__class__.__name__}(x={self.x}, y={self.y})"


# The generator point G
G: Point = Point.generator()
