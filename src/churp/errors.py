"""
Errors raised by the CHURP shareholder primitives.

Every error signals a violated protocol invariant rather than a transient
failure: the caller must discard the offending input (identifier or update)
and obtain a different one before trying again.
"""


class ChurpError(ValueError):
    """Base class for all CHURP errors."""


class ShareholderEncodingFailed(ChurpError):
    """The shareholder identifier could not be hashed to a field element."""

    def __init__(self, message: str = "shareholder encoding failed"):
        super().__init__(message)


class ZeroValueShareholder(ChurpError):
    """The shareholder identifier encodes to zero, which is reserved for the secret."""

    def __init__(self, message: str = "zero value shareholder"):
        super().__init__(message)


class PolynomialDegreeMismatch(ChurpError):
    """The update polynomial does not have the degree of the current share."""

    def __init__(self, message: str = "polynomial degree mismatch"):
        super().__init__(message)


class VerificationMatrixZeroHoleMismatch(ChurpError):
    """The update verification matrix does not commit to a zero constant term."""

    def __init__(self, message: str = "verification matrix zero-hole mismatch"):
        super().__init__(message)


class VerificationMatrixDimensionMismatch(ChurpError):
    """Two verification matrices do not have the same dimensions."""

    def __init__(self, message: str = "verification matrix dimension mismatch"):
        super().__init__(message)
