"""Block buffering and padding for Merkle-Damgard hashes built on 32-bit words."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

RoundFunction = Callable[[bytes, List[int]], Optional[List[int]]]

_WORD_BYTES = 4
_LENGTH_BYTES = 2 * _WORD_BYTES
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


class PaddedHash:
    """Drive a compression function over full blocks and apply MD-style padding.

    ``round_function`` is called with one block of ``block_length`` bytes and the
    current state (a list of 32-bit words). It may update the list in place or
    return a new list of words. ``big_endian`` selects the SHA-1 convention
    (big-endian length and output words) instead of the MD4/MD5 one.
    """

    def __init__(
        self,
        round_function: RoundFunction,
        initial_state: Sequence[int],
        big_endian: bool = False,
        block_length: int = 64,
    ) -> None:
        if block_length <= _LENGTH_BYTES or block_length & (block_length - 1):
            raise ValueError(
                f"block length must be a power of two above {_LENGTH_BYTES}, got {block_length}"
            )
        self._round = round_function
        self._initial = [word & _MASK32 for word in initial_state]
        self.big_endian = big_endian
        self.block_length = block_length
        self._max_pad = block_length - _LENGTH_BYTES
        self.reset()

    def reset(self) -> None:
        """Forget all input and return to the initial state."""
        self.state: List[int] = list(self._initial)
        self._buffer = bytearray()
        self.count = 0

    def _compress(self, block: bytes) -> None:
        result = self._round(bytes(block), self.state)
        if result is not None:
            self.state = [word & _MASK32 for word in result]

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        view = memoryview(bytes(data))
        self.count = (self.count + len(view)) & _MASK64
        if self._buffer:
            need = self.block_length - len(self._buffer)
            self._buffer += view[:need]
            view = view[need:]
            if len(self._buffer) < self.block_length:
                return
            self._compress(self._buffer)
            self._buffer = bytearray()
        full = len(view) - len(view) % self.block_length
        for offset in range(0, full, self.block_length):
            self._compress(view[offset:offset + self.block_length])
        self._buffer += view[full:]

    def copy(self) -> "PaddedHash":
        """Return an independent clone of the running computation."""
        clone = PaddedHash.__new__(PaddedHash)
        clone._round = self._round
        clone._initial = list(self._initial)
        clone.big_endian = self.big_endian
        clone.block_length = self.block_length
        clone._max_pad = self._max_pad
        clone.state = list(self.state)
        clone._buffer = bytearray(self._buffer)
        clone.count = self.count
        return clone

    def close(self, out_words: int) -> bytes:
        """Pad, run the final block(s) and return ``out_words`` encoded words.

        The computation is not reset afterwards; call :meth:`reset` to reuse it.
        """
        return self.addbits_and_close(0, 0, out_words)

    def addbits_and_close(self, ub: int, n: int, out_words: int) -> bytes:
        """Like :meth:`close`, first appending the top ``n`` bits (0 to 7) of ``ub``."""
        if not 0 <= n <= 7:
            raise ValueError(f"extra bit count must be between 0 and 7, got {n}")
        if not 0 <= out_words <= len(self.state):
            raise ValueError(
                f"cannot output {out_words} words from a state of {len(self.state)}"
            )
        z = 0x80 >> n
        buf = bytearray(self._buffer)
        buf.append(((ub & -z) | z) & 0xFF)
        if len(buf) > self._max_pad:
            buf.extend(bytes(self.block_length - len(buf)))
            self._compress(buf)
            buf = bytearray()
        buf.extend(bytes(self._max_pad - len(buf)))

        order = "big" if self.big_endian else "little"
        bit_length = (((self.count << 3) & _MASK64) + n) & _MASK64
        buf += bit_length.to_bytes(_LENGTH_BYTES, order)
        self._compress(buf)
        self._buffer = bytearray()

        return b"".join(word.to_bytes(_WORD_BYTES, order) for word in self.state[:out_words])