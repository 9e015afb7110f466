"""Splitting of REPL-style argument lines and the matching quoted representation."""

from __future__ import annotations

from typing import List, Union, overload

_BLANKS = " \t\n\v\f\r"
_TOKEN_END = " \n\r\t"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "b": "\b", "a": "\a"}
_REPR_ESCAPES = {
    ord("\\"): "\\\\",
    ord('"'): '\\"',
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord("\a"): "\\a",
    ord("\b"): "\\b",
}


class SplitArgsError(ValueError):
    """Raised for unbalanced quotes or a closing quote followed by a non-blank."""


def _split(line: str) -> List[str]:
    end_of_text = line.find("\0")
    if end_of_text >= 0:
        line = line[:end_of_text]
    size = len(line)

    def at(index: int) -> str:
        return line[index] if index < size else ""

    tokens: List[str] = []
    pos = 0
    while True:
        while pos < size and line[pos] in _BLANKS:
            pos += 1
        if pos >= size:
            return tokens

        current: List[str] = []
        in_double = in_single = done = False
        while not done:
            char, following = at(pos), at(pos + 1)
            if in_double:
                if (
                    char == "\\"
                    and following == "x"
                    and at(pos + 2) != ""
                    and at(pos + 2) in _HEX_DIGITS
                    and at(pos + 3) != ""
                    and at(pos + 3) in _HEX_DIGITS
                ):
                    current.append(chr(int(line[pos + 2:pos + 4], 16)))
                    pos += 3
                elif char == "\\" and following:
                    pos += 1
                    current.append(_ESCAPES.get(following, following))
                elif char == '"':
                    if following and following not in _BLANKS:
                        raise SplitArgsError(
                            f"closing quote must be followed by a space at offset {pos}"
                        )
                    done = True
                elif not char:
                    raise SplitArgsError("unterminated double quotes")
                else:
                    current.append(char)
            elif in_single:
                if char == "\\" and following == "'":
                    pos += 1
                    current.append("'")
                elif char == "'":
                    if following and following not in _BLANKS:
                        raise SplitArgsError(
                            f"closing quote must be followed by a space at offset {pos}"
                        )
                    done = True
                elif not char:
                    raise SplitArgsError("unterminated single quotes")
                else:
                    current.append(char)
            else:
                if not char or char in _TOKEN_END:
                    done = True
                elif char == '"':
                    in_double = True
                elif char == "'":
                    in_single = True
                else:
                    current.append(char)
            if pos < size:
                pos += 1
        tokens.append("".join(current))


@overload
def split_args(line: str) -> List[str]: ...


@overload
def split_args(line: bytes) -> List[bytes]: ...


def split_args(line: Union[str, bytes]) -> Union[List[str], List[bytes]]:
    """Split a line into arguments, honouring double and single quotes.

    Inside double quotes the escapes ``\\n \\r \\t \\b \\a \\xHH`` are decoded and
    any other backslashed character stands for itself; inside single quotes only
    ``\\'`` is an escape. Text after a NUL character is ignored. Bytes in give
    bytes out, text in gives text out.
    """
    if isinstance(line, (bytes, bytearray)):
        return [token.encode("latin-1") for token in _split(bytes(line).decode("latin-1"))]
    return _split(line)


def quote_repr(data: Union[str, bytes]) -> str:
    """Return ``data`` in double quotes with non-printable bytes escaped.

    The result is in the form :func:`split_args` reads back. Text is encoded
    as UTF-8 first.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    parts = ['"']
    for byte in raw:
        escaped = _REPR_ESCAPES.get(byte)
        if escaped is not None:
            parts.append(escaped)
        elif 0x20 <= byte <= 0x7E:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:02x}")
    parts.append('"')
    return "".join(parts)