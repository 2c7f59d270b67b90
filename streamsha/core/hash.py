"""Hash utilities for streamsha."""

import re
from typing import BinaryIO, Optional, Tuple

from .digest import Sha1Digest
from .errors import ChecksumFormatError

DEFAULT_CHUNK_SIZE = 65536

# <40 hex digits><space><space or '*' for binary mode><path>
_CHECKSUM_LINE = re.compile(r'^([0-9a-fA-F]{40}) [ *](.+)$')


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return Sha1Digest(data).hexdigest()


def hash_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Compute SHA-1 hash of everything left in a binary stream.
    
    Args:
        stream: File-like object opened in binary mode
        chunk_size: Bytes to read per call
        
    Returns:
        40-character hex string
    """
    digest = Sha1Digest()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        digest.update(chunk)
    return digest.hexdigest()


def hash_file(filepath: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Compute SHA-1 hash of file.
    
    Args:
        filepath: Path to file
        chunk_size: Bytes to read per call
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return hash_stream(f, chunk_size)


def parse_checksum_line(line: str, line_number: Optional[int] = None) -> Tuple[str, str]:
    """
    Parse one line of a sha1sum-style checksum file.
    
    Args:
        line: Line text, trailing newline allowed
        line_number: Reported in the error if parsing fails
        
    Returns:
        Tuple of (lowercase hex digest, path)
        
    Raises:
        ChecksumFormatError: If the line is not '<digest>  <path>'
    """
    match = _CHECKSUM_LINE.match(line.rstrip('\r\n'))
    if not match:
        raise ChecksumFormatError(f"improperly formatted checksum line: {line.strip()!r}",
                                  line_number)
    return match.group(1).lower(), match.group(2)


def format_checksum_line(digest: str, path: str) -> str:
    """Format a digest and path the way sha1sum does."""
    return f"{digest}  {path}"
