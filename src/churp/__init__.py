"""
Copyright (c) 2021-2024 Jesse Posner

Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

This code is currently a work in progress. It's not secure nor stable.  IT IS
EXTREMELY DANGEROUS AND RECKLESS TO USE THIS MODULE IN PRODUCTION!

This package provides the shareholder side of CHURP (CHUrn-Robust Proactive
secret sharing) over secp256k1.

Modules:
- point: Defines the Point class for handling elements of the secp256k1 group.
- suites: Hash-to-field (RFC 9380) for the secp256k1 scalar field.
- polynomial: Univariate and bivariate polynomials over the scalar field.
- matrix: The VerificationMatrix committing to a bivariate polynomial.
- shareholder: ShareholderId, SecretShare and Shareholder, which derives
  switch points and key shares and proactivizes its share.
- errors: The exceptions raised when a protocol invariant is violated.
- constants: Curve parameters, encoding sizes and domain separation tags.
"""

import logging

from .constants import Q, SHAREHOLDER_ENC_DST
from .point import Point, G
from .suites import Secp256k1Sha256, expand_message_xmd
from .polynomial import Polynomial, BivariatePolynomial
from .matrix import VerificationMatrix
from .shareholder import ShareholderId, SecretShare, Shareholder
from .errors import (
    ChurpError,
    ShareholderEncodingFailed,
    ZeroValueShareholder,
    PolynomialDegreeMismatch,
    VerificationMatrixZeroHoleMismatch,
    VerificationMatrixDimensionMismatch,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
