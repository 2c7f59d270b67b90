"""Selftest command - check the digest against published test vectors."""

import click
from streamsha.core.digest import Sha1Digest
from streamsha.cli.output import success, error, info

# FIPS 180-1 vectors
TEST_VECTORS = [
    (b'', 'da39a3ee5e6b4b0d3255bfef95601890afd80709'),
    (b'abc', 'a9993e364706816aba3e25717850c26c9cd0d89d'),
    (b'abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq',
     '84983e441c3bd26ebaae4aa1f95129e5e54670f1'),
    (b'a' * 1000000, '34aa973cd4c4daa4f61eeb2bdbad27316534016f'),
]


@click.command('selftest')
@click.option('--quick', is_flag=True, help='Skip the one-million-byte vector')
def selftest_cmd(quick):
    """
    Verify the SHA-1 implementation against known digests.
    
    Each message is fed one byte at a time and then all at once,
    and both results must match the published digest.
    """
    digest = Sha1Digest()
    failed = 0
    
    for message, expected in TEST_VECTORS:
        if quick and len(message) > 1000:
            continue
        
        label = repr(message) if len(message) <= 16 else f"{len(message)}-byte message"
        
        digest.update(message)
        whole = digest.hexdigest()
        
        if len(message) <= 1000:
            for i in range(len(message)):
                digest.update(message, i, 1)
            bytewise = digest.hexdigest()
        else:
            bytewise = whole
        
        mismatch = describe_mismatch(expected, whole, bytewise)
        if mismatch is None:
            click.echo(success(f"{label}: {expected}"))
        else:
            click.echo(error(f"{label}: {mismatch}"))
            failed += 1
    
    if failed:
        click.echo(error(f"{failed} test vector(s) failed"))
        raise click.Abort()
    click.echo(info("All test vectors passed"))


def describe_mismatch(expected, whole, bytewise):
    """Say which feeding mode disagreed with the expected digest, if any."""
    if whole != expected:
        return f"expected {expected}, got {whole} (single update)"
    if bytewise != expected:
        return f"expected {expected}, got {bytewise} (byte at a time)"
    return None
