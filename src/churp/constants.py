"""
These constants define the elliptic curve secp256k1, the prime-order group
over which shares are committed, together with the encoding sizes and domain
separation tags used by the CHURP shareholder primitives. Scalars live in the
field of order Q; curve coordinates live in the field of order P.
"""

# secp256k1 constants for elliptic curve cryptography

# The prime modulus of the coordinate field
P: int = 2**256 - 2**32 - 977

# The order of the curve, i.e. the modulus of the scalar field
Q: int = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# X-coordinate of the generator point G
G_x: int = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798

# Y-coordinate of the generator point G
G_y: int = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

# Size in bytes of a canonically encoded scalar
SCALAR_SIZE: int = 32

# Size in bytes of a compressed (SEC 1) point encoding
POINT_SIZE: int = 33

# Size in bytes of a shareholder identifier
SHAREHOLDER_ID_SIZE: int = 32

# Target security level in bits, used to size hash-to-field output
SECURITY_LEVEL: int = 128

# Domain separation tag for encoding shareholder identifiers
SHAREHOLDER_ENC_DST: bytes = b"shareholder"
