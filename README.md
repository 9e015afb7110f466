# xdccutil

Support routines for an IRC/XDCC download client, written in plain Python
with no third-party dependencies.

## What is inside

- `xdccutil.md5`: a pure-Python MD5.
  - `MD5` is an incremental hash with `update`, `copy`, `reset`, `digest`
    and `hexdigest`. Producing a digest also resets the object, so it can
    be reused straight away.
  - `MD5.addbits_and_digest(ub, n)` hashes a message whose length is not a
    whole number of bytes. It appends the top `n` bits (0 to 7) of `ub`
    before finishing.
  - The module-level functions are `md5_digest`, `to_hex`, `from_hex`,
    `digests_equal` (compares the first 16 bytes of two digests) and
    `compress` (the raw compression function on 16 message words and a
    4-word state).
- `xdccutil.merkle`: `PaddedHash` is the Merkle–Damgård engine that `MD5`
  is built on.
  - It buffers input into blocks and calls a compression function you
    supply.
  - It applies MD-style padding with a 64-bit length, little- or big-endian.
  - `close` and `addbits_and_close` return the output words. They do not
    reset the state.
- `xdccutil.args`: `split_args` splits a REPL-style line into arguments.
  - Double and single quotes are honoured.
  - Inside double quotes the escapes `\n \r \t \b \a \xHH` are decoded.
  - Bytes in gives bytes out, and text in gives text out.
  - Unbalanced quotes raise `SplitArgsError`, as does a closing quote
    followed by a non-blank.
  - `quote_repr` produces the quoted, escaped form that `split_args` reads
    back.
- `xdccutil.numfmt`: decimal conversion of 64-bit integers.
  - `ll_to_str`, `ull_to_str` and `from_long_long` raise `OverflowError`
    when a value is out of range.
  - `format_fmt` is a small formatter for `%s %S %i %I %u %U`. A `%`
    followed by any other character yields that character, so `%%` gives
    `%`.
- `xdccutil.ircutil`: CRLF line framing and CTCP replies.
  - `find_crlf` and `split_lines` handle the CRLF framing.
  - `ctcp_reply` gives the automatic reply to the `PING`, `VERSION`,
    `FINGER` and `TIME` CTCP requests. It returns `None` for any other
    request.

## Installation

```
pip install .
```

## Examples

```python
from xdccutil.md5 import MD5, md5_digest, to_hex

to_hex(md5_digest(b"abc"))
# '900150983cd24fb0d6963f7d28e17f72'

h = MD5()
h.update(b"a")
h.update(b"bc")
h.hexdigest()
# '900150983cd24fb0d6963f7d28e17f72'
```

Checking a downloaded file against an expected MD5:

```python
from xdccutil.md5 import MD5, digests_equal, from_hex

h = MD5()
with open("download.bin", "rb") as fh:
    for chunk in iter(lambda: fh.read(65536), b""):
        h.update(chunk)
ok = digests_equal(h.digest(), from_hex("900150983cd24fb0d6963f7d28e17f72"))
```

```python
from xdccutil.args import split_args, quote_repr

split_args('xdcc send "#12" now')
# ['xdcc', 'send', '#12', 'now']

quote_repr(b"\a\n\x00foo\r")
# '"\\a\\n\\x00foo\\r"'
```

```python
from xdccutil.numfmt import format_fmt
from xdccutil.ircutil import split_lines, ctcp_reply

format_fmt("%s got %I bytes (100%%)", "file", 10)
# 'file got 10 bytes (100%)'

split_lines(b"PING :x\r\nPART")
# ([b'PING :x'], b'PART')

ctcp_reply("VERSION")
# 'VERSION  mIRC v6.16'
```

## What this package does not do

This is a library of building blocks, not a client. It does not do any of
the following:

- It has no command to run.
- It does not open IRC or DCC connections.
- It sets up no TLS.
- It installs no signal or timer handlers.
- It has no file-checksum helper of its own. Hashing a file is done with
  `MD5` as shown above.

## Running the tests

```
pip install .[test]
pytest
```