"""The wyhash 64-bit hash, the wyrand generator and their helpers.

Multi-byte reads are little-endian, so results are the same on every platform.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

__all__ = [
    "WYP",
    "WyRand",
    "wymum",
    "wymix",
    "wyhash",
    "wyhash64",
    "wy2u01",
    "wy2gau",
    "wy2u0k",
    "mul_mod",
    "pow_mod",
    "sprp",
    "is_prime",
    "make_secret",
]

_MASK64 = (1 << 64) - 1

WYP: tuple[int, int, int, int] = (
    0x2D358DCCAA6C78A5,
    0x8BB84B93962EACC9,
    0x4B33A62ED433D4A3,
    0x4D5A2DA51DE1AA47,
)

_SECRET_BYTES = (
    15, 23, 27, 29, 30, 39, 43, 45, 46, 51, 53, 54, 57, 58, 60, 71, 75, 77, 78, 83,
    85, 86, 89, 90, 92, 99, 101, 102, 105, 106, 108, 113, 114, 116, 120, 135, 139,
    141, 142, 147, 149, 150, 153, 154, 156, 163, 165, 166, 169, 170, 172, 177, 178,
    180, 184, 195, 197, 198, 201, 202, 204, 209, 210, 212, 216, 225, 226, 228, 232,
    240,
)


def wymum(a: int, b: int) -> tuple[int, int]:
    """Full 128-bit product of two 64-bit values as ``(low, high)``."""
    product = (a & _MASK64) * (b & _MASK64)
    return product & _MASK64, product >> 64


def wymix(a: int, b: int) -> int:
    """Multiply two 64-bit values and fold the halves of the product with xor."""
    lo, hi = wymum(a, b)
    return lo ^ hi


def _r8(data: bytes, pos: int) -> int:
    return int.from_bytes(data[pos:pos + 8], "little")


def _r4(data: bytes, pos: int) -> int:
    return int.from_bytes(data[pos:pos + 4], "little")


def _r3(data: bytes, pos: int, k: int) -> int:
    return (data[pos] << 16) | (data[pos + (k >> 1)] << 8) | data[pos + k - 1]


def wyhash(data: bytes, seed: int = 0, secret: Sequence[int] = WYP) -> int:
    """64-bit hash of ``data`` under ``seed`` and a four-word ``secret``."""
    if len(secret) != 4:
        raise ValueError(f"secret must hold 4 words, got {len(secret)}")
    data = bytes(data)
    length = len(data)
    s0, s1, s2, s3 = (w & _MASK64 for w in secret)
    seed &= _MASK64
    seed ^= wymix(seed ^ s0, s1)

    if length <= 16:
        if length >= 4:
            shift = (length >> 3) << 2
            a = (_r4(data, 0) << 32) | _r4(data, shift)
            b = (_r4(data, length - 4) << 32) | _r4(data, length - 4 - shift)
        elif length > 0:
            a, b = _r3(data, 0, length), 0
        else:
            a = b = 0
    else:
        pos, remaining = 0, length
        if remaining >= 48:
            see1 = see2 = seed
            while remaining >= 48:
                seed = wymix(_r8(data, pos) ^ s1, _r8(data, pos + 8) ^ seed)
                see1 = wymix(_r8(data, pos + 16) ^ s2, _r8(data, pos + 24) ^ see1)
                see2 = wymix(_r8(data, pos + 32) ^ s3, _r8(data, pos + 40) ^ see2)
                pos += 48
                remaining -= 48
            seed ^= see1 ^ see2
        while remaining > 16:
            seed = wymix(_r8(data, pos) ^ s1, _r8(data, pos + 8) ^ seed)
            pos += 16
            remaining -= 16
        a = _r8(data, pos + remaining - 16)
        b = _r8(data, pos + remaining - 8)

    a, b = wymum(a ^ s1, b ^ seed)
    return wymix(a ^ s0 ^ (length & _MASK64), b ^ s1)


def wyhash64(a: int, b: int) -> int:
    """Mix two 64-bit values into one pseudo-random 64-bit value."""
    a, b = wymum((a ^ WYP[0]) & _MASK64, (b ^ WYP[1]) & _MASK64)
    return wymix(a ^ WYP[0], b ^ WYP[1])


@dataclass
class WyRand:
    """The wyrand pseudo-random generator; ``seed`` is its whole state."""

    seed: int = 0

    def __post_init__(self) -> None:
        self.seed &= _MASK64

    def next(self) -> int:
        """Advance the state and return the next 64-bit value."""
        self.seed = (self.seed + WYP[0]) & _MASK64
        return wymix(self.seed, self.seed ^ WYP[1])

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()


def wy2u01(r: int) -> float:
    """Map a 64-bit random value to a float uniform in ``[0, 1)``."""
    return ((r & _MASK64) >> 12) * (1.0 / (1 << 52))


def wy2gau(r: int) -> float:
    """Map a 64-bit random value to an approximately Gaussian float."""
    r &= _MASK64
    total = (r & 0x1FFFFF) + ((r >> 21) & 0x1FFFFF) + ((r >> 42) & 0x1FFFFF)
    return total * (1.0 / (1 << 20)) - 3.0


def wy2u0k(r: int, k: int) -> int:
    """Map a 64-bit random value to an integer in ``[0, k)``."""
    return wymum(r, k)[1]


def mul_mod(a: int, b: int, m: int) -> int:
    """``a * b mod m`` by shift-and-add with 64-bit wrap-around semantics."""
    r = 0
    while b:
        if b & 1:
            r2 = (r + a) & _MASK64
            if r2 < r:
                r2 = (r2 - m) & _MASK64
            r = r2 % m
        b >>= 1
        if b:
            a2 = (a + a) & _MASK64
            if a2 < a:
                a2 = (a2 - m) & _MASK64
            a = a2 % m
    return r


def pow_mod(a: int, b: int, m: int) -> int:
    """``a ** b mod m`` by square-and-multiply over :func:`mul_mod`."""
    r = 1
    while b:
        if b & 1:
            r = mul_mod(r, a, m)
        b >>= 1
        if b:
            a = mul_mod(a, a, m)
    return r


def sprp(n: int, a: int) -> bool:
    """True if ``n`` is a strong probable prime to base ``a``."""
    if n < 2:
        raise ValueError(f"sprp needs n >= 2, got {n}")
    d = n - 1
    s = 0
    while not d & 0xFF:
        d >>= 8
        s += 8
    if not d & 0xF:
        d >>= 4
        s += 4
    if not d & 0x3:
        d >>= 2
        s += 2
    if not d & 0x1:
        d >>= 1
        s += 1
    b = pow_mod(a, d, n)
    if b == 1 or b == n - 1:
        return True
    for _ in range(1, s):
        b = mul_mod(b, b, n)
        if b <= 1:
            return False
        if b == n - 1:
            return True
    return False


_PRIME_BASES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin primality test for 64-bit integers."""
    if n < 2 or not n & 1:
        return False
    if n < 4:
        return True
    if not sprp(n, 2):
        return False
    if n < 2047:
        return True
    return all(sprp(n, base) for base in _PRIME_BASES)


def make_secret(seed: int) -> tuple[int, int, int, int]:
    """Derive a four-word secret for :func:`wyhash` from ``seed``.

    Each word is an odd prime built from bytes with four bits set, and every
    pair of words differs in exactly 32 bits.
    """
    rng = WyRand(seed)
    secret: list[int] = []
    while len(secret) < 4:
        word = 0
        for shift in range(0, 64, 8):
            word |= _SECRET_BYTES[rng.next() % len(_SECRET_BYTES)] << shift
        if word % 2 == 0:
            continue
        if any((prev ^ word).bit_count() != 32 for prev in secret):
            continue
        if not is_prime(word):
            continue
        secret.append(word)
    return tuple(secret)