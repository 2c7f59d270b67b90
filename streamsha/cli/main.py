"""Main CLI entry point for streamsha."""

import click
from colorama import init

from streamsha import __version__
from streamsha.cli.output import BANNER
from streamsha.cli.commands import hash_cmd, check_cmd, selftest_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class StreamShaGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=StreamShaGroup)
@click.version_option(version=__version__)
def cli():
    pass


cli.add_command(hash_cmd)
cli.add_command(check_cmd)
cli.add_command(selftest_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
