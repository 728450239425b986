"""
Hash-to-field for the secp256k1 scalar field.

The Secp256k1Sha256 suite maps arbitrary byte strings to scalars following
RFC 9380: the message is expanded with expand_message_xmd over SHA-256 to
L = ceil((ceil(log2(Q)) + k) / 8) bytes, where k is the security level, and
the result is reduced modulo the group order. The extra k bits make the bias
of the reduction negligible.

Any object exposing a compatible `hash_to_field(msg, dst)` method can stand in
for the suite wherever one is accepted.
"""

from hashlib import sha256
from typing import Type
from .constants import Q, SECURITY_LEVEL
from .point import Point

# Output size of SHA-256 (b_in_bytes) and its block size (s_in_bytes)
_B_IN_BYTES = 32
_S_IN_BYTES = 64


def _strxor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def expand_message_xmd(msg: bytes, dst: bytes, len_in_bytes: int) -> bytes:
    """
    Expand a message into a uniformly random byte string (RFC 9380, 5.3.1).

    Parameters:
    msg (bytes): The message to expand.
    dst (bytes): The domain separation tag, at most 255 bytes.
    len_in_bytes (int): The requested output length.

    Returns:
    bytes: A pseudo-random byte string of length len_in_bytes.

    Raises:
    ValueError: If the domain separation tag is too long or the requested
    length is out of range.
    """
    if len(dst) > 255:
        raise ValueError("Domain separation tag must be at most 255 bytes.")
    if len_in_bytes <= 0 or len_in_bytes > 65535:
        raise ValueError("Requested output length is out of range.")

    ell = -(-len_in_bytes // _B_IN_BYTES)
    if ell > 255:
        raise ValueError("Requested output length is out of range.")

    dst_prime = dst + len(dst).to_bytes(1, "big")
    z_pad = bytes(_S_IN_BYTES)
    l_i_b_str = len_in_bytes.to_bytes(2, "big")

    # b_0 = H(Z_pad || msg || l_i_b_str || I2OSP(0, 1) || DST_prime)
    b_0 = sha256(z_pad + msg + l_i_b_str + b"\x00" + dst_prime).digest()
    # b_1 = H(b_0 || I2OSP(1, 1) || DST_prime)
    b_i = sha256(b_0 + b"\x01" + dst_prime).digest()

    uniform_bytes = b_i
    for i in range(2, ell + 1):
        # b_i = H(strxor(b_0, b_(i - 1)) || I2OSP(i, 1) || DST_prime)
        b_i = sha256(_strxor(b_0, b_i) + i.to_bytes(1, "big") + dst_prime).digest()
        uniform_bytes += b_i

    return uniform_bytes[:len_in_bytes]


class Secp256k1Sha256:
    """Hash-to-field suite for the secp256k1 scalar field using SHA-256."""

    group: Type[Point] = Point
    order: int = Q

    # L = ceil((ceil(log2(Q)) + k) / 8)
    field_element_size: int = (Q.bit_length() + SECURITY_LEVEL + 7) // 8

    @classmethod
    def hash_to_field(cls, msg: bytes, dst: bytes) -> int:
        """
        Hash a message to a scalar under the given domain separation tag.

        Parameters:
        msg (bytes): The message to hash.
        dst (bytes): The domain separation tag.

        Returns:
        int: A scalar in [0, Q).

        Raises:
        ValueError: If the message cannot be expanded under the given tag.
        """
        uniform_bytes = expand_message_xmd(msg, dst, cls.field_element_size)
        return int.from_bytes(uniform_bytes, "big") % cls.order
