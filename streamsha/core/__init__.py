"""Core functionality for streamsha.

This module contains:
- The streaming SHA-1 digest
- Hashing helpers for bytes, streams and files
- Checksum line parsing
- Configuration management
"""

from streamsha.core.digest import Sha1Digest, sha1
from streamsha.core.hash import (hash_object, hash_stream, hash_file,
                                 parse_checksum_line, format_checksum_line)
from streamsha.core.errors import StreamShaError, ChecksumFormatError
from streamsha.core.config import Config, get_config

__all__ = [
    'Sha1Digest',
    'sha1',
    'hash_object',
    'hash_stream',
    'hash_file',
    'parse_checksum_line',
    'format_checksum_line',
    'StreamShaError',
    'ChecksumFormatError',
    'Config',
    'get_config',
]
