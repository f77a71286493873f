"""Binary extension fields GF(2^n) used by the universal hashes."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Union

__all__ = [
    "BinaryField",
    "FieldElement",
    "field_for",
    "BF8",
    "BF64",
    "BF128",
    "BF192",
    "BF256",
]


def _clmul(a: int, b: int) -> int:
    """Carry-less product of two polynomials over GF(2)."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        b >>= 1
    return result


def _poly_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient and remainder of polynomial division over GF(2)."""
    quotient = 0
    degree_b = b.bit_length()
    while (length := a.bit_length()) >= degree_b:
        shift = length - degree_b
        quotient |= 1 << shift
        a ^= b << shift
    return quotient, a


@dataclass(frozen=True)
class BinaryField:
    """GF(2^bits) defined by a full reduction polynomial (including x^bits)."""

    bits: int
    polynomial: int

    @property
    def byte_length(self) -> int:
        return self.bits // 8

    def _reduce(self, value: int) -> int:
        while (length := value.bit_length()) > self.bits:
            value ^= self.polynomial << (length - 1 - self.bits)
        return value

    def element(self, value: int) -> FieldElement:
        """Element whose polynomial bits are those of ``value``."""
        if not 0 <= value < (1 << self.bits):
            raise ValueError(f"value does not fit in GF(2^{self.bits})")
        return FieldElement(self, value)

    def from_bytes(self, data: bytes) -> FieldElement:
        """Load an element from its little-endian byte encoding."""
        if len(data) != self.byte_length:
            raise ValueError(
                f"expected {self.byte_length} bytes for GF(2^{self.bits}), got {len(data)}"
            )
        return FieldElement(self, int.from_bytes(data, "little"))

    def zero(self) -> FieldElement:
        return FieldElement(self, 0)

    def one(self) -> FieldElement:
        return FieldElement(self, 1)

    def random(self) -> FieldElement:
        return FieldElement(self, secrets.randbits(self.bits))


Operand = Union["FieldElement", int]


@dataclass(frozen=True)
class FieldElement:
    """An element of a :class:`BinaryField`."""

    field: BinaryField
    value: int

    def _coerce(self, other: Operand) -> FieldElement:
        if isinstance(other, FieldElement):
            if other.field != self.field:
                raise TypeError("operands belong to different fields")
            return other
        if isinstance(other, int):
            return self.field.element(other)
        return NotImplemented

    def __add__(self, other: Operand) -> FieldElement:
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return FieldElement(self.field, self.value ^ rhs.value)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> FieldElement:
        return self.__add__(other)

    __rsub__ = __sub__

    def __mul__(self, other: Operand) -> FieldElement:
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        product = _clmul(self.value, rhs.value)
        return FieldElement(self.field, self.field._reduce(product))

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> FieldElement:
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self * rhs.inverse()

    def __rtruediv__(self, other: int) -> FieldElement:
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs * self.inverse()

    def __bool__(self) -> bool:
        return self.value != 0

    def inverse(self) -> FieldElement:
        """Multiplicative inverse; zero has none."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no inverse in a field")
        r0, r1 = self.field.polynomial, self.value
        s0, s1 = 0, 1
        while r1:
            quotient, remainder = _poly_divmod(r0, r1)
            r0, r1 = r1, remainder
            s0, s1 = s1, s0 ^ _clmul(quotient, s1)
        return FieldElement(self.field, self.field._reduce(s0))

    def to_bytes(self) -> bytes:
        """Little-endian byte encoding."""
        return self.value.to_bytes(self.field.byte_length, "little")

    def lift(self, field: BinaryField) -> FieldElement:
        """Embed this element into a field at least as wide."""
        if field.bits < self.field.bits:
            raise ValueError("cannot lift into a smaller field")
        return FieldElement(field, self.value)

    def __repr__(self) -> str:
        width = self.field.byte_length * 2
        return f"GF(2^{self.field.bits})(0x{self.value:0{width}x})"


BF8 = BinaryField(8, (1 << 8) | (1 << 4) | (1 << 3) | (1 << 1) | 1)
BF64 = BinaryField(64, (1 << 64) | (1 << 4) | (1 << 3) | (1 << 1) | 1)
BF128 = BinaryField(128, (1 << 128) | (1 << 7) | (1 << 2) | (1 << 1) | 1)
BF192 = BinaryField(192, (1 << 192) | (1 << 7) | (1 << 2) | (1 << 1) | 1)
BF256 = BinaryField(256, (1 << 256) | (1 << 10) | (1 << 5) | (1 << 2) | 1)

_FIELDS = {field.bits: field for field in (BF8, BF64, BF128, BF192, BF256)}


def field_for(bits: int) -> BinaryField:
    """The field of the given bit width (8, 64, 128, 192 or 256)."""
    try:
        return _FIELDS[bits]
    except KeyError:
        raise ValueError(f"unsupported field size: {bits}") from None