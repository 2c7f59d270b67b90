"""Streaming SHA-1 digest.

A pure-Python SHA-1 (FIPS 180-1) that absorbs data incrementally. Bytes are
packed straight into the message schedule as they arrive, so the digest never
buffers more than the current 64-byte block.
"""

from typing import Optional

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF

INITIAL_H = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_PAD_0X80 = b'\x80'
_PAD_0X00 = b'\x00'


def rotl(x: int, n: int) -> int:
    """Rotate a 32-bit word left by n bits."""
    return ((x << n) | (x >> (32 - n))) & MASK_32


class Sha1Digest:
    """
    Incremental SHA-1 hash.

    Feed data with update() as many times as needed, then call digest()
    to get the 20-byte result. digest() resets the instance, so the same
    object can immediately hash a new message.

    Instances are not thread-safe; use one per message being hashed.
    """

    name = 'sha1'
    digest_size = 20
    block_size = 64

    def __init__(self, data: Optional[bytes] = None):
        """
        Create a digest, optionally absorbing initial data.

        Args:
            data: Bytes to hash right away
        """
        self._h = list(INITIAL_H)
        self._w = [0] * 80
        self._len_w = 0
        self._bit_count = 0
        if data:
            self.update(data)

    @property
    def bit_count(self) -> int:
        """Number of bits absorbed since the last reset."""
        return self._bit_count

    def reset(self) -> None:
        """Discard any absorbed data and return to the initial state."""
        self._bit_count = 0
        self._len_w = 0
        self._h = list(INITIAL_H)
        self._w = [0] * 80

    def update(self, data: bytes, offset: int = 0, length: Optional[int] = None) -> None:
        """
        Absorb data[offset:offset + length] into the hash.

        Args:
            data: Bytes-like object to read from
            offset: Index of the first byte to absorb
            length: Number of bytes to absorb; defaults to the rest of data

        Raises:
            IndexError: If the range falls outside data
        """
        if length is None:
            length = len(data) - offset
        if offset < 0 or length < 0 or offset + length > len(data):
            raise IndexError(
                f"range [{offset}, {offset + length}) out of bounds for "
                f"buffer of length {len(data)}"
            )

        w = self._w
        for byte in bytes(data[offset:offset + length]):
            i = self._len_w >> 2
            w[i] = ((w[i] << 8) | byte) & MASK_32
            self._len_w += 1
            if self._len_w == 64:
                self._hash_block()
                self._len_w = 0
            self._bit_count = (self._bit_count + 8) & MASK_64

    def digest(self) -> bytes:
        """
        Finish the message and return its 20-byte digest.

        The instance is reset afterwards.

        Returns:
            bytes: SHA-1 digest, H0..H4 big-endian
        """
        # Length is taken before padding touches the bit count
        padlen = (self._bit_count & MASK_64).to_bytes(8, 'big')

        self.update(_PAD_0X80, 0, 1)
        while self._len_w != 56:
            self.update(_PAD_0X00, 0, 1)
        self.update(padlen, 0, 8)

        out = b''.join(h.to_bytes(4, 'big') for h in self._h)
        self.reset()
        return out

    def hexdigest(self) -> str:
        """Like digest(), but as a 40-character lowercase hex string."""
        return self.digest().hex()

    def copy(self) -> 'Sha1Digest':
        """
        Return an independent copy of the current state.

        Useful for taking an intermediate digest without finishing the
        running one.
        """
        clone = Sha1Digest()
        clone._h = list(self._h)
        clone._w = list(self._w)
        clone._len_w = self._len_w
        clone._bit_count = self._bit_count
        return clone

    def set_bit_count(self, value: int) -> None:
        """
        Overwrite the absorbed-bit counter.

        This is an escape hatch for protocols that resume a hash whose
        total length is tracked elsewhere. Nothing is validated, and a
        value that disagrees with the data actually absorbed produces a
        digest no one else will reproduce. Normal callers never need it.

        Args:
            value: New bit count
        """
        self._bit_count = value

    def _hash_block(self) -> None:
        w = self._w
        for t in range(16, 80):
            w[t] = rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1)

        a, b, c, d, e = self._h

        # Round 1
        for t in range(0, 20):
            temp = (rotl(a, 5) + (((c ^ d) & b) ^ d) + e + w[t] + 0x5A827999) & MASK_32
            e, d, c, b, a = d, c, rotl(b, 30), a, temp

        # Round 2
        for t in range(20, 40):
            temp = (rotl(a, 5) + (b ^ c ^ d) + e + w[t] + 0x6ED9EBA1) & MASK_32
            e, d, c, b, a = d, c, rotl(b, 30), a, temp

        # Round 3
        for t in range(40, 60):
            temp = (rotl(a, 5) + ((b & c) | (d & (b | c))) + e + w[t] + 0x8F1BBCDC) & MASK_32
            e, d, c, b, a = d, c, rotl(b, 30), a, temp

        # Round 4
        for t in range(60, 80):
            temp = (rotl(a, 5) + (b ^ c ^ d) + e + w[t] + 0xCA62C1D6) & MASK_32
            e, d, c, b, a = d, c, rotl(b, 30), a, temp

        h = self._h
        h[0] = (h[0] + a) & MASK_32
        h[1] = (h[1] + b) & MASK_32
        h[2] = (h[2] + c) & MASK_32
        h[3] = (h[3] + d) & MASK_32
        h[4] = (h[4] + e) & MASK_32


def sha1(data: bytes = b'') -> Sha1Digest:
    """
    Create a new Sha1Digest, hashlib style.

    Args:
        data: Initial bytes to absorb

    Returns:
        Sha1Digest instance
    """
    return Sha1Digest(data)
