"""Universal hashes over binary fields: the VOLE hash and the ZK hash."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Union

from volehash.fields import BF64, BF128, BF192, BF256, BinaryField, FieldElement
from volehash.utils import xor_bytes

__all__ = [
    "UNIVERSAL_HASH_B",
    "UNIVERSAL_HASH_B_BITS",
    "vole_hash_128",
    "vole_hash_192",
    "vole_hash_256",
    "vole_hash",
    "zk_hash_128",
    "zk_hash_192",
    "zk_hash_256",
]

UNIVERSAL_HASH_B = 2
UNIVERSAL_HASH_B_BITS = UNIVERSAL_HASH_B * 8

Element = Union[FieldElement, bytes]


def _horner(field: BinaryField, chunks: Iterable[FieldElement], point: FieldElement) -> FieldElement:
    """Evaluate sum c_j * point^(n-1-j) over the chunks c_0 .. c_{n-1}."""
    acc = field.zero()
    for chunk in chunks:
        acc = acc * point + chunk
    return acc


def _padded_message(x: bytes, lambda_bits: int, ell: int) -> bytes:
    """The hashed part of ``x``, with its last block zero-padded to a full block."""
    block = lambda_bits // 8
    total_bits = ell + lambda_bits
    blocks = -(-total_bits // lambda_bits)
    remainder = total_bits % lambda_bits
    tail = block if remainder == 0 else remainder // 8
    start = (blocks - 1) * block
    return x[:start] + x[start : start + tail].ljust(block, b"\0")


def _vole_hash(field: BinaryField, sd: bytes, x: bytes, ell: int) -> bytes:
    if ell < 0:
        raise ValueError("ell must not be negative")
    lambda_bits = field.bits
    block = field.byte_length
    if len(sd) < 5 * block + 8:
        raise ValueError(f"seed too short: need {5 * block + 8} bytes, got {len(sd)}")
    mask_offset = (ell + lambda_bits) // 8
    out_length = block + UNIVERSAL_HASH_B
    if len(x) < mask_offset + out_length:
        raise ValueError(
            f"input too short: need {mask_offset + out_length} bytes, got {len(x)}"
        )

    r0, r1, r2, r3, s = (
        field.from_bytes(sd[i * block : (i + 1) * block]) for i in range(5)
    )
    t = BF64.from_bytes(sd[5 * block : 5 * block + 8])

    padded = _padded_message(x, lambda_bits, ell)
    h0 = _horner(
        field,
        (field.from_bytes(padded[i : i + block]) for i in range(0, len(padded), block)),
        s,
    )
    h1 = _horner(
        BF64,
        (BF64.from_bytes(padded[i : i + 8]) for i in range(0, len(padded), 8)),
        t,
    ).lift(field)

    h2 = r0 * h0 + r1 * h1
    h3 = r2 * h0 + r3 * h1
    digest = h2.to_bytes() + h3.to_bytes()[:UNIVERSAL_HASH_B]
    return xor_bytes(digest, x[mask_offset : mask_offset + out_length])


def vole_hash_128(sd: bytes, x: bytes, ell: int) -> bytes:
    """VOLE hash over GF(2^128); returns 16 + UNIVERSAL_HASH_B bytes."""
    return _vole_hash(BF128, sd, x, ell)


def vole_hash_192(sd: bytes, x: bytes, ell: int) -> bytes:
    """VOLE hash over GF(2^192); returns 24 + UNIVERSAL_HASH_B bytes."""
    return _vole_hash(BF192, sd, x, ell)


def vole_hash_256(sd: bytes, x: bytes, ell: int) -> bytes:
    """VOLE hash over GF(2^256); returns 32 + UNIVERSAL_HASH_B bytes."""
    return _vole_hash(BF256, sd, x, ell)


def vole_hash(sd: bytes, x: bytes, ell: int, lambda_: int) -> bytes:
    """VOLE hash for security level ``lambda_``; any level other than 192 or 256 uses 128."""
    if lambda_ == 256:
        return vole_hash_256(sd, x, ell)
    if lambda_ == 192:
        return vole_hash_192(sd, x, ell)
    return vole_hash_128(sd, x, ell)


def _as_element(field: BinaryField, value: Element) -> FieldElement:
    if isinstance(value, FieldElement):
        if value.field != field:
            raise TypeError(f"element is not in GF(2^{field.bits})")
        return value
    if isinstance(value, (bytes, bytearray)):
        return field.from_bytes(bytes(value))
    raise TypeError(f"cannot use {type(value).__name__} as a field element")


def _zk_hash(field: BinaryField, sd: bytes, x: Sequence[Element], ell: int) -> bytes:
    if ell < 0:
        raise ValueError("ell must not be negative")
    block = field.byte_length
    if len(sd) < 3 * block + 8:
        raise ValueError(f"seed too short: need {3 * block + 8} bytes, got {len(sd)}")
    if len(x) < ell + 1:
        raise ValueError(f"need {ell + 1} elements, got {len(x)}")

    r0, r1, s = (field.from_bytes(sd[i * block : (i + 1) * block]) for i in range(3))
    t = BF64.from_bytes(sd[3 * block : 3 * block + 8]).lift(field)

    elements = [_as_element(field, value) for value in x[: ell + 1]]
    body, mask = elements[:ell], elements[ell]
    h0 = _horner(field, body, s)
    h1 = _horner(field, body, t)
    return (r0 * h0 + r1 * h1 + mask).to_bytes()


def zk_hash_128(sd: bytes, x: Sequence[Element], ell: int) -> bytes:
    """ZK hash of ``ell`` GF(2^128) elements masked by element ``x[ell]``."""
    return _zk_hash(BF128, sd, x, ell)


def zk_hash_192(sd: bytes, x: Sequence[Element], ell: int) -> bytes:
    """ZK hash of ``ell`` GF(2^192) elements masked by element ``x[ell]``."""
    return _zk_hash(BF192, sd, x, ell)


def zk_hash_256(sd: bytes, x: Sequence[Element], ell: int) -> bytes:
    """ZK hash of ``ell`` GF(2^256) elements masked by element ``x[ell]``."""
    return _zk_hash(BF256, sd, x, ell)