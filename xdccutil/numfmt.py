"""Integer-to-decimal conversion and a small printf-like formatter."""

from __future__ import annotations

from typing import Any, Iterator, List, Tuple

_INT32 = (-(1 << 31), (1 << 31) - 1)
_INT64 = (-(1 << 63), (1 << 63) - 1)
_UINT32 = (0, (1 << 32) - 1)
_UINT64 = (0, (1 << 64) - 1)

_INTEGER_SPECS = {
    "i": ("signed int", _INT32),
    "I": ("64-bit signed integer", _INT64),
    "u": ("unsigned int", _UINT32),
    "U": ("64-bit unsigned integer", _UINT64),
}


def _check_range(value: Any, bounds: Tuple[int, int], label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} expected, got {type(value).__name__}")
    low, high = bounds
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in a {label} ({low}..{high})")
    return value


def ll_to_str(value: int) -> str:
    """Return the decimal form of a signed 64-bit integer."""
    return str(_check_range(value, _INT64, "64-bit signed integer"))


def ull_to_str(value: int) -> str:
    """Return the decimal form of an unsigned 64-bit integer."""
    return str(_check_range(value, _UINT64, "64-bit unsigned integer"))


def from_long_long(value: int) -> str:
    """Build a new string holding the decimal form of a signed 64-bit integer."""
    return ll_to_str(value)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    raise TypeError(f"string expected, got {type(value).__name__}")


def format_fmt(fmt: str, *args: Any) -> str:
    """Format ``args`` into ``fmt`` using a restricted set of specifiers.

    ``%s`` and ``%S`` take a string, ``%i`` a 32-bit signed integer, ``%I`` a
    64-bit signed integer, ``%u`` a 32-bit unsigned integer and ``%U`` a 64-bit
    unsigned integer. ``%`` followed by any other character yields that
    character, so ``%%`` gives a single percent sign. Extra arguments are
    ignored.
    """
    values: Iterator[Any] = iter(args)
    parts: List[str] = []
    chars = iter(fmt)

    def next_value(spec: str) -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for format specifier %{spec}") from None

    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec in ("s", "S"):
            parts.append(_as_text(next_value(spec)))
        elif spec in _INTEGER_SPECS:
            label, bounds = _INTEGER_SPECS[spec]
            parts.append(str(_check_range(next_value(spec), bounds, label)))
        else:
            parts.append(spec)
    return "".join(parts)