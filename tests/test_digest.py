"""Streaming SHA-1 digest tests."""

import hashlib
import pytest
from streamsha.core.digest import Sha1Digest, sha1, rotl

EMPTY = 'da39a3ee5e6b4b0d3255bfef95601890afd80709'
ABC = 'a9993e364706816aba3e25717850c26c9cd0d89d'
MSG_448 = b'abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq'
MSG_448_DIGEST = '84983e441c3bd26ebaae4aa1f95129e5e54670f1'


def reference(data):
    """Independent digest from the standard library."""
    return hashlib.sha1(data).digest()


def test_empty_message():
    """Test digest of the empty string."""
    assert Sha1Digest().digest().hex() == EMPTY


def test_abc():
    """Test the one-block FIPS vector."""
    digest = Sha1Digest()
    digest.update(b'abc')
    assert digest.digest().hex() == ABC


def test_448_bit_message():
    """Test the two-block FIPS vector."""
    digest = Sha1Digest()
    digest.update(MSG_448)
    assert digest.hexdigest() == MSG_448_DIGEST


def test_digest_is_20_bytes():
    """Test output size."""
    result = Sha1Digest(b'hello').digest()
    assert isinstance(result, bytes)
    assert len(result) == 20


def test_deterministic_across_instances():
    """Test same bytes give the same digest on fresh instances."""
    data = b'The quick brown fox jumps over the lazy dog'
    assert Sha1Digest(data).digest() == Sha1Digest(data).digest()


@pytest.mark.parametrize('length', [1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_padding_boundaries(length):
    """Test lengths that straddle the padding edge cases."""
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    assert Sha1Digest(data).digest() == reference(data)


def test_chunking_invariance():
    """Test byte-at-a-time and odd chunking match a single update."""
    data = bytes(range(256)) * 3
    expected = Sha1Digest(data).digest()
    
    bytewise = Sha1Digest()
    for i in range(len(data)):
        bytewise.update(data, i, 1)
    assert bytewise.digest() == expected
    
    chunked = Sha1Digest()
    pos = 0
    for size in [0, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233]:
        chunked.update(data, pos, size)
        pos += size
    chunked.update(data, pos)
    assert chunked.digest() == expected


def test_update_offset_and_length():
    """Test only the requested slice is absorbed."""
    digest = Sha1Digest()
    digest.update(b'xxabcxx', 2, 3)
    assert digest.hexdigest() == ABC


def test_update_length_defaults_to_rest():
    """Test omitted length absorbs to the end of the buffer."""
    digest = Sha1Digest()
    digest.update(b'--abc', 2)
    assert digest.hexdigest() == ABC


def test_zero_length_update():
    """Test empty updates change nothing."""
    digest = Sha1Digest()
    digest.update(b'abc', 1, 0)
    digest.update(b'')
    assert digest.hexdigest() == EMPTY


def test_accepts_bytearray_and_memoryview():
    """Test other bytes-like inputs."""
    digest = Sha1Digest()
    digest.update(bytearray(b'a'))
    digest.update(memoryview(b'bc'))
    assert digest.hexdigest() == ABC


@pytest.mark.parametrize('offset,length', [(-1, 1), (0, 4), (2, 2), (4, 0), (0, -1)])
def test_update_out_of_bounds(offset, length):
    """Test ranges outside the buffer raise IndexError."""
    digest = Sha1Digest()
    with pytest.raises(IndexError):
        digest.update(b'abc', offset, length)


def test_out_of_bounds_absorbs_nothing():
    """Test a rejected update leaves state untouched."""
    digest = Sha1Digest()
    with pytest.raises(IndexError):
        digest.update(b'abc', 1, 10)
    assert digest.bit_count == 0
    assert digest.hexdigest() == EMPTY


def test_reusable_after_digest():
    """Test an instance behaves like new after digest()."""
    digest = Sha1Digest()
    digest.update(b'first message, longer than one block' * 3)
    digest.digest()
    
    digest.update(b'abc')
    assert digest.hexdigest() == ABC
    assert digest.hexdigest() == EMPTY


def test_reset_discards_input():
    """Test reset() mid-message forgets earlier bytes."""
    digest = Sha1Digest()
    digest.update(b'garbage' * 20)
    digest.reset()
    digest.update(b'abc')
    assert digest.hexdigest() == ABC


def test_bit_count_tracks_bytes():
    """Test the bit counter is 8 times the bytes absorbed."""
    digest = Sha1Digest()
    digest.update(b'a' * 70)
    assert digest.bit_count == 560
    digest.digest()
    assert digest.bit_count == 0


def test_set_bit_count_changes_length_field():
    """Test the overridden count is what gets encoded."""
    spliced = Sha1Digest()
    spliced.update(b'abc')
    spliced.set_bit_count(24 + 8 * 64)
    
    plain = Sha1Digest(b'abc')
    assert spliced.digest() != plain.digest()
    
    restored = Sha1Digest()
    restored.update(b'abc')
    restored.set_bit_count(24)
    assert restored.hexdigest() == ABC


def test_copy_is_independent():
    """Test copy() snapshots state without sharing it."""
    digest = Sha1Digest(b'ab')
    snapshot = digest.copy()
    digest.update(b'c')
    
    assert snapshot.hexdigest() == reference(b'ab').hex()
    assert digest.hexdigest() == ABC


def test_sha1_helper():
    """Test the hashlib-style constructor."""
    assert sha1(b'abc').hexdigest() == ABC
    assert sha1().hexdigest() == EMPTY


def test_hashlib_attributes():
    """Test name and sizes match hashlib."""
    digest = Sha1Digest()
    ref = hashlib.sha1()
    assert digest.name == ref.name
    assert digest.digest_size == ref.digest_size
    assert digest.block_size == ref.block_size


def test_rotl():
    """Test 32-bit left rotation."""
    assert rotl(1 << 31, 1) == 1
    assert rotl((1 << 31) + 1, 2) == 6
    assert rotl(0x12345678, 0) == 0x12345678


def test_set_bit_count_leaves_block_state():
    """Test only the counter changes; H, W and the block fill stay put."""
    digest = Sha1Digest(b'x' * 70)
    before = digest.copy()
    
    digest.set_bit_count(12345)
    
    assert digest.bit_count == 12345
    assert digest._h == before._h
    assert digest._w == before._w
    assert digest._len_w == before._len_w == 6
