# volehash

Arithmetic in the binary extension fields GF(2^8), GF(2^64), GF(2^128),
GF(2^192) and GF(2^256), and the two universal hash functions built on them
that VOLE-based zero-knowledge signature schemes use: the VOLE hash and the
ZK hash. Pure Python, no dependencies.

## Installation

```
pip install volehash
```

## Field arithmetic (`volehash.fields`)

`field_for(bits)` returns the `BinaryField` for 8, 64, 128, 192 or 256 bits
and raises `ValueError` for any other width. The fields are also available
as `BF8`, `BF64`, `BF128`, `BF192` and `BF256`. The reduction polynomials are

| field     | polynomial                      |
|-----------|---------------------------------|
| GF(2^8)   | x^8 + x^4 + x^3 + x + 1         |
| GF(2^64)  | x^64 + x^4 + x^3 + x + 1        |
| GF(2^128) | x^128 + x^7 + x^2 + x + 1       |
| GF(2^192) | x^192 + x^7 + x^2 + x + 1       |
| GF(2^256) | x^256 + x^10 + x^5 + x^2 + 1    |

A `BinaryField` makes elements with `element(value)` (an integer whose bits
are the polynomial's coefficients), `from_bytes(data)` (little-endian,
exactly `bits // 8` bytes), `zero()`, `one()` and `random()` (drawn from
`secrets`).

A `FieldElement` supports `+`, `-` (the same as `+`), `*` and `/`, with other
elements of the same field or with plain integers; mixing fields raises
`TypeError`. `inverse()` raises `ZeroDivisionError` for zero.
`to_bytes()` gives the little-endian encoding, and `lift(field)` embeds the
element into a field at least as wide.

```python
from volehash.fields import field_for

gf128 = field_for(128)
a = gf128.from_bytes(bytes.fromhex("0123456789abcdef0123456789abcdef"))
b = gf128.random()
if b:
    assert (a * b) / b == a
assert a + a == gf128.zero()
print(a.to_bytes().hex())

gf64 = field_for(64)
c = gf64.element(0xFF).lift(gf128)  # a GF(2^64) element inside GF(2^128)
```

## Hashing (`volehash.universal_hashing`)

### VOLE hash

`vole_hash(sd, x, ell, lambda_)` hashes the first `ell + lambda_` bits of the
byte string `x` for security level `lambda_` (256 and 192 select those fields;
any other value uses 128). `vole_hash_128`, `vole_hash_192` and
`vole_hash_256` call a level directly.

- `sd` holds five `lambda_`-bit field elements (r0, r1, r2, r3, s) followed
  by one 8-byte GF(2^64) element t: at least `5 * lambda_ / 8 + 8` bytes.
- The result is `lambda_ / 8 + UNIVERSAL_HASH_B` bytes (`UNIVERSAL_HASH_B`
  is 2), XORed with the bytes of `x` that follow the hashed part, so `x`
  must hold at least `(ell + lambda_) // 8 + lambda_ / 8 + 2` bytes.

A short seed or input, or a negative `ell`, raises `ValueError`.

```python
from volehash.universal_hashing import vole_hash

sd = bytes(range(5 * 16 + 8))          # 88-byte key for lambda = 128
ell = 128
x = bytes(range((ell + 128) // 8 + 18))
digest = vole_hash(sd, x, ell, 128)
assert len(digest) == 18
```

### ZK hash

`zk_hash_128(sd, x, ell)`, `zk_hash_192` and `zk_hash_256` hash the first
`ell` elements of the sequence `x` and add `x[ell]` as a mask. Elements may be
`FieldElement`s of the matching field or their little-endian bytes. `sd` holds
three field elements (r0, r1, s) followed by an 8-byte GF(2^64) element t.
The result is one field element as bytes.

```python
from volehash.fields import BF128
from volehash.universal_hashing import zk_hash_128

sd_zk = bytes(range(3 * 16 + 8))       # 56-byte key
elements = [BF128.element(i) for i in range(5)]
tag = zk_hash_128(sd_zk, elements, 4)  # hashes elements[0:4], masks with elements[4]
assert len(tag) == 16
```

## Byte helpers (`volehash.utils`)

- `xor_bytes(a, b)` — byte-wise XOR of equally long strings.
- `masked_xor_bytes(a, b, mask_bit)` — `a ^ b` if the low bit of `mask_bit`
  is set, otherwise a copy of `a`.
- `get_bit(value, index)` / `set_bit(value, index)` — read a bit of a byte;
  shift a value into position, truncated to a byte.
- `get_bit_at(data, index)` / `set_bit_at(dst, bit, index)` — read a bit from,
  or OR a bit into a `bytearray` of, a little-endian bit string.

Length mismatches in the XOR helpers raise `ValueError`.

## Scope

This package provides the field arithmetic and the two hash functions only.
It does not generate keys, build VOLE commitments, or produce or verify
signatures, and it has no command-line interface.

## Tests

```
pip install -e ".[test]"
pytest
```