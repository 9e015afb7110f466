import pytest

from xdccutil.merkle import PaddedHash


def _recorder(blocks):
    def round_function(block, state):
        blocks.append(block)
        return [(word + 1) & 0xFFFFFFFF for word in state]

    return round_function


def test_empty_message_little_endian_padding():
    blocks = []
    h = PaddedHash(_recorder(blocks), [0, 0, 0, 0], big_endian=False)
    h.close(4)
    assert blocks == [b"\x80" + bytes(63)]


def test_short_message_length_little_endian():
    blocks = []
    h = PaddedHash(_recorder(blocks), [0, 0, 0, 0])
    h.update(b"abc")
    h.close(4)
    assert len(blocks) == 1
    block = blocks[0]
    assert block[:4] == b"abc\x80"
    assert block[4:56] == bytes(52)
    assert block[56:] == (3 * 8).to_bytes(8, "little")


def test_short_message_length_big_endian():
    blocks = []
    h = PaddedHash(_recorder(blocks), [0, 0, 0, 0], big_endian=True)
    h.update(b"abc")
    h.close(4)
    assert blocks[0][56:] == (3 * 8).to_bytes(8, "big")


def test_padding_overflows_into_second_block():
    blocks = []
    h = PaddedHash(_recorder(blocks), [0])
    message = b"x" * 56
    h.update(message)
    h.close(1)
    assert len(blocks) == 2
    assert blocks[0] == message + b"\x80" + bytes(7)
    assert blocks[1][:56] == bytes(56)
    assert blocks[1][56:] == (56 * 8).to_bytes(8, "little")


def test_chunked_updates_match_single_update():
    message = bytes(range(256)) * 3
    whole_blocks, chunk_blocks = [], []
    whole = PaddedHash(_recorder(whole_blocks), [1, 2, 3, 4])
    whole.update(message)
    chunked = PaddedHash(_recorder(chunk_blocks), [1, 2, 3, 4])
    for size in (1, 7, 63, 64, 65, 200):
        chunked.update(message[:size])
        message = message[size:]
    chunked.update(message)
    assert chunked.close(4) == whole.close(4)
    assert chunk_blocks == whole_blocks


def test_full_blocks_compressed_during_update():
    blocks = []
    h = PaddedHash(_recorder(blocks), [0])
    h.update(b"a" * 130)
    assert blocks == [b"a" * 64, b"a" * 64]
    assert h.count == 130


def test_output_word_encoding():
    def keep(block, state):
        return None

    little = PaddedHash(keep, [0x01020304, 0x0A0B0C0D])
    big = PaddedHash(keep, [0x01020304, 0x0A0B0C0D], big_endian=True)
    assert little.close(2) == b"\x04\x03\x02\x01\x0d\x0c\x0b\x0a"
    assert big.close(1) == b"\x01\x02\x03\x04"


def test_addbits_sets_pad_byte_and_bit_length():
    blocks = []
    h = PaddedHash(_recorder(blocks), [0])
    h.update(b"ab")
    h.addbits_and_close(0xC0, 3, 1)
    block = blocks[0]
    assert block[2] == 0xC0 | (0x80 >> 3)
    assert block[56:] == (2 * 8 + 3).to_bytes(8, "little")


def test_addbits_zero_bits_equals_close():
    first, second = [], []
    a = PaddedHash(_recorder(first), [5])
    b = PaddedHash(_recorder(second), [5])
    a.update(b"hello")
    b.update(b"hello")
    assert a.addbits_and_close(0xFF, 0, 1) == b.close(1)
    assert first == second


def test_reset_restores_initial_state():
    h = PaddedHash(_recorder([]), [7, 8])
    h.update(b"z" * 100)
    h.reset()
    assert h.state == [7, 8]
    assert h.count == 0


def test_invalid_extra_bit_count():
    h = PaddedHash(_recorder([]), [0])
    with pytest.raises(ValueError):
        h.addbits_and_close(0, 8, 1)


def test_too_many_output_words():
    h = PaddedHash(_recorder([]), [0])
    with pytest.raises(ValueError):
        h.close(2)


def test_invalid_block_length():
    with pytest.raises(ValueError):
        PaddedHash(_recorder([]), [0], block_length=48)