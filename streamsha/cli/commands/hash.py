"""Hash command - print SHA-1 digests of files, strings or stdin."""

import click
from streamsha.core.config import get_config
from streamsha.core.hash import hash_object, hash_file, hash_stream, format_checksum_line
from streamsha.cli.output import error, format_digest


@click.command('hash')
@click.option('-s', '--string', 'strings', multiple=True, help='Hash a UTF-8 string instead of a file')
@click.option('--stdin', 'use_stdin', is_flag=True, help='Also hash standard input')
@click.argument('files', nargs=-1, type=click.Path(dir_okay=False))
def hash_cmd(strings, use_stdin, files):
    """
    Print SHA-1 checksums.
    
    With --stdin, with no FILES and no --string, or when FILE is -,
    read standard input.
    
    Examples:
        streamsha hash README.md          # Hash one file
        streamsha hash *.tar.gz > SUMS    # Write a checksum file
        streamsha hash -s abc             # Hash a string
        cat file | streamsha hash         # Hash stdin
    """
    config = get_config()
    try:
        chunk_size = config.get_chunk_size()
        uppercase = config.get_uppercase()
    except ValueError as e:
        click.echo(error(f"Invalid configuration: {e}"), err=True)
        raise click.Abort()
    
    for text in strings:
        digest = hash_object(text.encode('utf-8'))
        click.echo(format_checksum_line(format_digest(digest, uppercase), f'"{text}"'))
    
    if use_stdin and '-' not in files:
        files = files + ('-',)
    elif not files and not strings:
        files = ('-',)
    
    failed = False
    for path in files:
        try:
            if path == '-':
                digest = hash_stream(click.get_binary_stream('stdin'), chunk_size)
            else:
                digest = hash_file(path, chunk_size)
        except OSError as e:
            click.echo(error(f"{path}: {e.strerror or e}"), err=True)
            failed = True
            continue
        click.echo(format_checksum_line(format_digest(digest, uppercase), path))
    
    if failed:
        raise click.Abort()
