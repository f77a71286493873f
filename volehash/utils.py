"""Byte and bit helpers."""

from __future__ import annotations

__all__ = [
    "xor_bytes",
    "masked_xor_bytes",
    "get_bit",
    "set_bit",
    "get_bit_at",
    "set_bit_at",
]


def _check_lengths(a: bytes, b: bytes) -> None:
    if len(a) != len(b):
        raise ValueError(f"length mismatch: {len(a)} != {len(b)}")


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """Byte-wise XOR of two equally long byte strings."""
    _check_lengths(a, b)
    return bytes(x ^ y for x, y in zip(a, b))


def masked_xor_bytes(a: bytes, b: bytes, mask_bit: int) -> bytes:
    """``a`` XOR ``b`` when the low bit of ``mask_bit`` is set, else a copy of ``a``."""
    _check_lengths(a, b)
    mask = 0xFF if mask_bit & 1 else 0x00
    return bytes(x ^ (y & mask) for x, y in zip(a, b))


def get_bit(value: int, index: int) -> int:
    """Bit ``index`` of a byte."""
    return (value >> index) & 1


def set_bit(value: int, index: int) -> int:
    """Shift ``value`` to bit position ``index``, truncated to a byte."""
    return (value << index) & 0xFF


def get_bit_at(data: bytes, index: int) -> int:
    """Bit ``index`` of a little-endian bit string."""
    return (data[index // 8] >> (index % 8)) & 1


def set_bit_at(dst: bytearray, bit: int, index: int) -> None:
    """OR ``bit`` into position ``index`` of a little-endian bit string, in place."""
    dst[index // 8] |= (bit << (index % 8)) & 0xFF