"""Config command - manage streamsha configuration."""

import click
from streamsha.core.config import get_config
from streamsha.cli.output import success, error, info


def _split_key(key):
    section, option = key.split('.', 1) if '.' in key else ('hash', key)
    return section, option


@click.group('config')
def config_cmd():
    """Get and set local or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.
    
    Examples:
        streamsha config set hash.chunk_size 1048576
        streamsha config set --global output.uppercase true
    """
    section, option = _split_key(key)
    get_config().set(section, option, value, global_config=is_global)
    
    scope = "global" if is_global else "local"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value.
    
    Examples:
        streamsha config get hash.chunk_size
    """
    section, option = _split_key(key)
    value = get_config().get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.
    
    Examples:
        streamsha config unset output.uppercase
    """
    section, option = _split_key(key)
    if not get_config().unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
@click.option('--local', 'is_local', is_flag=True, help='List local config only')
def config_list(is_global, is_local):
    """
    List all config values.
    
    Examples:
        streamsha config list
        streamsha config list --global
    """
    values = get_config().list_all(global_only=is_global, local_only=is_local)
    if not values:
        click.echo(info("No configuration set"))
        return
    
    for section, entries in values.items():
        for key, value in entries.items():
            click.echo(f"{section}.{key}={value}")
