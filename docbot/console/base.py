"""
ConsoleCommand — Shared foundation for terminal subcommands

Subcommands receive the DocbotCLI instance and reach its resources
through properties instead of building their own.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..cli import DocbotCLI


class ConsoleCommand:
    """Base class for subcommands with access to shared resources."""

    def __init__(self, cli: 'DocbotCLI'):
        self._cli = cli

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def config_manager(self):
        return self._cli.config_manager

    @property
    def index(self):
        """Documentation index (opened on first use)."""
        return self._cli.index

    @property
    def bot(self):
        """Chat bot wired to the index."""
        return self._cli.bot

    @property
    def out(self):
        """Output stream."""
        return self._cli.out
