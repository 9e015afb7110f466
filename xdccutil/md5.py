"""MD5 message digest (RFC 1321) on top of the generic padding driver."""

from __future__ import annotations

import hmac
import struct
from typing import List, Sequence

from xdccutil.merkle import PaddedHash

DIGEST_SIZE = 16
BLOCK_SIZE = 64

_MASK32 = 0xFFFFFFFF

_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)


def _f(b: int, c: int, d: int) -> int:
    return ((c ^ d) & b) ^ d


def _g(b: int, c: int, d: int) -> int:
    return ((c ^ b) & d) ^ c


def _h(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _i(b: int, c: int, d: int) -> int:
    return (c ^ (b | (~d & _MASK32))) & _MASK32


_ROUNDS = (
    (_f, lambda step: step),
    (_g, lambda step: (1 + 5 * step) % 16),
    (_h, lambda step: (5 + 3 * step) % 16),
    (_i, lambda step: (7 * step) % 16),
)


def _rotl(value: int, count: int) -> int:
    value &= _MASK32
    return ((value << count) | (value >> (32 - count))) & _MASK32


def compress(message_words: Sequence[int], state: Sequence[int]) -> List[int]:
    """Apply the MD5 compression function to 16 message words and a 4-word state.

    Returns the new state; the arguments are left untouched.
    """
    if len(message_words) != 16:
        raise ValueError(f"MD5 needs 16 message words, got {len(message_words)}")
    if len(state) != 4:
        raise ValueError(f"MD5 state has 4 words, got {len(state)}")
    a, b, c, d = (word & _MASK32 for word in state)
    for round_number, (func, index) in enumerate(_ROUNDS):
        shifts = _SHIFTS[round_number]
        for step in range(16):
            constant = _K[round_number * 16 + step]
            word = message_words[index(step)] & _MASK32
            mixed = _rotl(a + func(b, c, d) + word + constant, shifts[step % 4])
            a, b, c, d = d, (b + mixed) & _MASK32, b, c
    return [
        (state[0] + a) & _MASK32,
        (state[1] + b) & _MASK32,
        (state[2] + c) & _MASK32,
        (state[3] + d) & _MASK32,
    ]


def _round(block: bytes, state: List[int]) -> List[int]:
    return compress(struct.unpack("<16I", block), state)


class MD5:
    """Incremental MD5 computation.

    As with the underlying context, producing a digest finalises the input and
    resets the object, so it can be reused for a new message straight away.
    """

    name = "md5"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._engine = PaddedHash(_round, _IV, big_endian=False, block_length=BLOCK_SIZE)
        if data:
            self.update(data)

    def reset(self) -> None:
        """Forget all input."""
        self._engine.reset()

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        self._engine.update(data)

    def copy(self) -> "MD5":
        """Return an independent clone of the running computation."""
        clone = MD5.__new__(MD5)
        clone._engine = self._engine.copy()
        return clone

    def digest(self) -> bytes:
        """Return the 16-byte digest and reset the computation."""
        return self.addbits_and_digest(0, 0)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex and reset the computation."""
        return to_hex(self.digest())

    def addbits_and_digest(self, ub: int, n: int) -> bytes:
        """Append the top ``n`` bits (0 to 7) of ``ub``, then finish like :meth:`digest`."""
        try:
            return self._engine.addbits_and_close(ub, n, 4)
        finally:
            self._engine.reset()


def md5_digest(data: bytes) -> bytes:
    """Return the MD5 digest of ``data``."""
    return MD5(data).digest()


def _check_digest(value: bytes, label: str) -> bytes:
    raw = bytes(value)
    if len(raw) < DIGEST_SIZE:
        raise ValueError(f"{label} digest has {len(raw)} bytes, need {DIGEST_SIZE}")
    return raw[:DIGEST_SIZE]


def digests_equal(first: bytes, second: bytes) -> bool:
    """Compare the first 16 bytes of two digests."""
    return hmac.compare_digest(_check_digest(first, "first"), _check_digest(second, "second"))


def to_hex(digest: bytes) -> str:
    """Render the 16-byte digest as 32 lower-case hex characters."""
    return _check_digest(digest, "given").hex()


def from_hex(text: str) -> bytes:
    """Parse a 32-character hex string into a 16-byte digest."""
    cleaned = text.strip()
    if len(cleaned) != 2 * DIGEST_SIZE:
        raise ValueError(
            f"MD5 hex string must have {2 * DIGEST_SIZE} characters, got {len(cleaned)}"
        )
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ValueError(f"invalid MD5 hex string: {text!r}") from exc