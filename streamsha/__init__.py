"""streamsha - A streaming, pure-Python SHA-1 digest with a checksum CLI."""

__version__ = '0.1.0'

from streamsha.core.digest import Sha1Digest, sha1
from streamsha.core.hash import hash_object, hash_file, hash_stream

__all__ = [
    'Sha1Digest',
    'sha1',
    'hash_object',
    'hash_file',
    'hash_stream',
]
