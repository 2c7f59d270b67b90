"""CLI commands for streamsha."""

from streamsha.cli.commands.hash import hash_cmd
from streamsha.cli.commands.check import check_cmd
from streamsha.cli.commands.selftest import selftest_cmd
from streamsha.cli.commands.config import config_cmd

__all__ = ['hash_cmd', 'check_cmd', 'selftest_cmd', 'config_cmd']
