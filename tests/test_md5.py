import hashlib
import struct

import pytest

from xdccutil.md5 import (
    MD5,
    compress,
    digests_equal,
    from_hex,
    md5_digest,
    to_hex,
)


def test_rfc_examples():
    assert MD5().hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"
    assert MD5(b"abc").hexdigest() == "900150983cd24fb0d6963f7d28e17f72"


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 1000])
def test_matches_reference(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert md5_digest(data) == hashlib.md5(data).digest()


def test_chunked_updates_match_one_shot():
    data = bytes(range(256)) * 5
    hasher = MD5()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == md5_digest(data)


def test_digest_resets_computation():
    hasher = MD5(b"some input")
    first = hasher.digest()
    assert first == hashlib.md5(b"some input").digest()
    assert hasher.digest() == md5_digest(b"")


def test_reset_forgets_input():
    hasher = MD5(b"discard me")
    hasher.reset()
    hasher.update(b"keep")
    assert hasher.digest() == hashlib.md5(b"keep").digest()


def test_copy_is_independent():
    hasher = MD5(b"prefix-")
    clone = hasher.copy()
    hasher.update(b"one")
    clone.update(b"two")
    assert hasher.digest() == hashlib.md5(b"prefix-one").digest()
    assert clone.digest() == hashlib.md5(b"prefix-two").digest()


def test_hexdigest_matches_to_hex():
    data = b"xdcc transfer"
    assert MD5(data).hexdigest() == to_hex(md5_digest(data))
    assert MD5(data).hexdigest() == hashlib.md5(data).hexdigest()


def test_addbits_with_no_bits_equals_digest():
    data = b"bits"
    assert MD5(data).addbits_and_digest(0xFF, 0) == md5_digest(data)
    assert MD5(data).addbits_and_digest(0, 0) == md5_digest(data)


def test_addbits_changes_digest_with_extra_bits():
    data = b"bits"
    assert MD5(data).addbits_and_digest(0x80, 1) != md5_digest(data)
    assert MD5(data).addbits_and_digest(0x80, 1) == MD5(data).addbits_and_digest(0xBF, 1)


def test_addbits_rejects_bad_count():
    with pytest.raises(ValueError):
        MD5(b"x").addbits_and_digest(0, 8)


def test_compress_on_padded_empty_block():
    block = b"\x80" + bytes(63)
    words = struct.unpack("<16I", block)
    iv = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]
    state = compress(words, iv)
    assert struct.pack("<4I", *state) == hashlib.md5(b"").digest()
    assert iv == [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]


def test_compress_rejects_wrong_sizes():
    with pytest.raises(ValueError):
        compress([0] * 15, [0, 0, 0, 0])
    with pytest.raises(ValueError):
        compress([0] * 16, [0, 0, 0])


def test_hex_round_trip():
    digest = md5_digest(b"round trip")
    assert from_hex(to_hex(digest)) == digest
    assert from_hex(to_hex(digest).upper()) == digest


def test_to_hex_is_lower_case_pairs():
    assert to_hex(bytes(range(16))) == "000102030405060708090a0b0c0d0e0f"


@pytest.mark.parametrize("text", ["abc", "zz" * 16, "0" * 31, "0" * 34])
def test_from_hex_rejects_invalid(text):
    with pytest.raises(ValueError):
        from_hex(text)


def test_digests_equal():
    a = md5_digest(b"a")
    b = md5_digest(b"b")
    assert digests_equal(a, md5_digest(b"a")) is True
    assert digests_equal(a, b) is False


def test_digests_equal_rejects_short_input():
    with pytest.raises(ValueError):
        digests_equal(b"short", md5_digest(b"a"))