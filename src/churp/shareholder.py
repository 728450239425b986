"""
This module defines the CHURP shareholder: the participant holding one share
of a distributed secret together with the public verification matrix of the
dealing that produced it.

A Shareholder is created once per epoch and never mutated. During a handoff
it hands out switch points so the committee can move its shares to the other
sharing dimension, it derives key shares against hashes supplied by a key
derivation layer, and at the end of a proactivization round it folds a
zero-hole update into its share, yielding the Shareholder of the next epoch.
"""

from __future__ import annotations
import logging
import secrets
from dataclasses import dataclass
from typing import Any
from .constants import SHAREHOLDER_ENC_DST, SHAREHOLDER_ID_SIZE
from .errors import (
    PolynomialDegreeMismatch,
    ShareholderEncodingFailed,
    VerificationMatrixDimensionMismatch,
    VerificationMatrixZeroHoleMismatch,
    ZeroValueShareholder,
)
from .matrix import VerificationMatrix
from .point import Point
from .polynomial import Polynomial
from .suites import Secp256k1Sha256

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShareholderId:
    """Opaque 32-byte shareholder identifier."""

    data: bytes

    def __post_init__(self):
        if not isinstance(self.data, bytes) or len(self.data) != SHAREHOLDER_ID_SIZE:
            raise ValueError(
                f"Shareholder identifier must be exactly {SHAREHOLDER_ID_SIZE} bytes."
            )

    @classmethod
    def random(cls) -> ShareholderId:
        return cls(secrets.token_bytes(SHAREHOLDER_ID_SIZE))

    @classmethod
    def from_hex(cls, hex_id: str) -> ShareholderId:
        return cls(bytes.fromhex(hex_id))

    def hex(self) -> str:
        return self.data.hex()

    def encode(self, suite: Any = Secp256k1Sha256) -> int:
        """
        Encode the identifier to a non-zero element of the scalar field.

        The identifier is hashed to the field under a dedicated domain
        separation tag. Zero is the evaluation point of the shared secret
        itself, so an identifier hashing to zero is rejected outright.

        Parameters:
        suite (Any): Hash-to-field suite providing `hash_to_field(msg, dst)`.
        Defaults to Secp256k1Sha256.

        Returns:
        int: The encoded identifier, a non-zero scalar.

        Raises:
        ShareholderEncodingFailed: If the suite cannot hash the identifier.
        ZeroValueShareholder: If the identifier encodes to zero.
        """
        try:
            s = suite.hash_to_field(self.data, SHAREHOLDER_ENC_DST)
        except ValueError as e:
            logger.debug("failed to encode shareholder %s: %s", self.hex(), e)
            raise ShareholderEncodingFailed() from e

        if s == 0:
            logger.debug("shareholder %s encodes to zero", self.hex())
            raise ZeroValueShareholder()

        return s

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.hex()})"


@dataclass(frozen=True)
class SecretShare:
    """Secret (full or reduced) share of the shared secret."""

    # Secret polynomial.
    p: Polynomial
    # Verification matrix.
    vm: VerificationMatrix

    def polynomial(self) -> Polynomial:
        return self.p

    def verification_matrix(self) -> VerificationMatrix:
        return self.vm

    def verify_x(self, x: int) -> bool:
        """Check that the polynomial is the full share B(x, y) of the matrix."""
        return self.vm.verify_x(x, self.p)

    def verify_y(self, y: int) -> bool:
        """Check that the polynomial is the reduced share B(x, y) of the matrix."""
        return self.vm.verify_y(y, self.p)


class Shareholder:
    """
    Class representing a CHURP shareholder, responsible for deriving key
    shares and generating switch points during handoffs when the committee
    is trying to switch to the other dimension.
    """

    def __init__(self, p: Polynomial, vm: VerificationMatrix):
        """
        Initialize a shareholder from its secret polynomial and the
        verification matrix of the dealing.

        No consistency check between the two is performed; callers that
        received them from a dealer should check them with the secret share's
        verify_x or verify_y first.
        """
        self._share = SecretShare(p, vm)

    @classmethod
    def from_secret_share(cls, share: SecretShare) -> Shareholder:
        return cls(share.p, share.vm)

    def secret_share(self) -> SecretShare:
        return self._share

    def polynomial(self) -> Polynomial:
        return self._share.p

    def verification_matrix(self) -> VerificationMatrix:
        return self._share.vm

    def switch_point(self, x: int) -> int:
        """
        Compute the switch point for the shareholder with encoded identifier x.

        The point is not validated here: it must come from
        ShareholderId.encode, which already rejects zero.

        Parameters:
        x (int): The encoded identifier of the receiving shareholder.

        Returns:
        int: The secret polynomial evaluated at x.
        """
        return self._share.p.eval(x)

    def key_share(self, hash: Point) -> Point:
        """
        Compute this shareholder's contribution to a threshold key derivation.

        Parameters:
        hash (Point): A group element obtained by hashing the derivation
        context to the curve.

        Returns:
        Point: hash scaled by the constant term of the secret polynomial, or
        the identity if the polynomial has no coefficients.
        """
        s = self._share.p.coefficient(0)
        if s is None:
            logger.debug("secret polynomial is empty, returning the identity")
            return hash.identity()
        return s * hash

    def proactivize(self, p: Polynomial, vm: VerificationMatrix) -> Shareholder:
        """
        Create a new shareholder with a proactivized secret polynomial.

        The update (p, vm) must be a sharing of zero with the same shape as
        the current share. It is added to the current polynomial and matrix,
        randomizing the share while leaving the shared secret unchanged. This
        shareholder is left untouched.

        Parameters:
        p (Polynomial): The update polynomial.
        vm (VerificationMatrix): The verification matrix of the update.

        Returns:
        Shareholder: The shareholder for the next epoch.

        Raises:
        PolynomialDegreeMismatch: If the degrees of the polynomials differ.
        VerificationMatrixZeroHoleMismatch: If vm does not commit to zero.
        VerificationMatrixDimensionMismatch: If the matrix dimensions differ.
        """
        if p.degree() != self._share.p.degree():
            logger.debug(
                "rejecting update: degree %d, expected %d",
                p.degree(),
                self._share.p.degree(),
            )
            raise PolynomialDegreeMismatch()
        if not vm.is_zero_hole():
            logger.debug("rejecting update: verification matrix has no zero hole")
            raise VerificationMatrixZeroHoleMismatch()
        if vm.dimensions() != self._share.vm.dimensions():
            logger.debug(
                "rejecting update: dimensions %s, expected %s",
                vm.dimensions(),
                self._share.vm.dimensions(),
            )
            raise VerificationMatrixDimensionMismatch()

        return Shareholder(p + self._share.p, vm + self._share.vm)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(degree={self._share.p.degree()})"
