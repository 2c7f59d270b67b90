"""Check command - verify files against a checksum list."""

import os
import click
from streamsha.core.config import get_config
from streamsha.core.errors import ChecksumFormatError
from streamsha.core.hash import hash_file, parse_checksum_line
from streamsha.cli.output import success, warning, error


@click.command('check')
@click.argument('checksum_file', type=click.Path(exists=True, dir_okay=False))
@click.option('-q', '--quiet', is_flag=True, help="Don't print OK for each verified file")
def check_cmd(checksum_file, quiet):
    """
    Verify SHA-1 checksums listed in CHECKSUM_FILE.
    
    Each line must look like the output of 'streamsha hash':
    40 hex digits, two spaces, then the path.
    
    Examples:
        streamsha check SUMS
        streamsha check -q SUMS
    """
    try:
        chunk_size = get_config().get_chunk_size()
    except ValueError as e:
        click.echo(error(f"Invalid configuration: {e}"), err=True)
        raise click.Abort()
    
    # Paths are raw filesystem bytes; fsdecode round-trips undecodable ones
    with open(checksum_file, 'rb') as f:
        lines = [os.fsdecode(raw) for raw in f.readlines()]
    
    failures = 0
    missing = 0
    malformed = 0
    checked = 0
    
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            expected, path = parse_checksum_line(line, number)
        except ChecksumFormatError as e:
            click.echo(error(str(e)), err=True)
            malformed += 1
            continue
        
        checked += 1
        try:
            actual = hash_file(path, chunk_size)
        except OSError:
            click.echo(error(f"{printable(path)}: MISSING"))
            missing += 1
            continue
        
        if actual == expected:
            if not quiet:
                click.echo(success(f"{printable(path)}: OK"))
        else:
            click.echo(error(f"{printable(path)}: FAILED"))
            failures += 1
    
    if malformed:
        click.echo(warning(f"{malformed} line(s) are improperly formatted"))
    if missing:
        click.echo(warning(f"{missing} listed file(s) could not be read"))
    if failures:
        click.echo(warning(f"{failures} computed checksum(s) did NOT match"))
    
    if failures or missing or malformed or not checked:
        if not checked and not malformed:
            click.echo(error("No checksum lines found"), err=True)
        raise click.Abort()


def printable(path):
    """Render a path with undecodable bytes shown as escapes."""
    return os.fsencode(path).decode('utf-8', 'backslashreplace')
