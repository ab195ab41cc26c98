"""
CLI — Command interface for docbot

    docbot chat                     talk to the bot on stdin/stdout
    docbot query "List#add"         one-shot lookup
    docbot classes java.util        list indexed classes
    docbot config --set chat.trigger=!

Archives are read from javadoc.archive_dir (relative to the project
directory) unless --archives is given.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from . import __version__
from .bot import Bot, create_bot
from .config import ConfigManager, configure_logging
from .console.chat_cmd import ChatCommand
from .console.classes_cmd import ClassesCommand
from .console.config_cmd import ConfigCommand
from .console.query_cmd import QueryCommand
from .core.archive import ArchiveIndex
from .core.index import DocumentationIndex
from .errors import DocbotError


class DocbotCLI:
    """Holds the resources shared by the subcommands."""

    def __init__(self, project_dir: Path, archive_dir: Optional[Path] = None,
                 out: Optional[TextIO] = None, index: Optional[DocumentationIndex] = None):
        self.project_dir = Path(project_dir)
        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()
        self.out = out or sys.stdout

        self._archive_dir = archive_dir
        self._index = index
        self._bot: Optional[Bot] = None

        self.chat_cmd = ChatCommand(self)
        self.query_cmd = QueryCommand(self)
        self.classes_cmd = ClassesCommand(self)
        self.config_cmd = ConfigCommand(self)

    @property
    def archive_dir(self) -> Path:
        if self._archive_dir is not None:
            return Path(self._archive_dir)
        path = Path(self.config.javadoc.archive_dir)
        return path if path.is_absolute() else self.project_dir / path

    @property
    def index(self) -> DocumentationIndex:
        """Documentation index, opened on first access."""
        if self._index is None:
            self._index = ArchiveIndex.from_directory(self.archive_dir)
        return self._index

    @property
    def bot(self) -> Bot:
        if self._bot is None:
            self._bot = create_bot(self.index, self.config)
        return self._bot


def main(argv=None):
    """
    Main entry point for the docbot CLI.

    Parser definitions and dispatch live in the docbot.console modules.
    """
    parser = argparse.ArgumentParser(
        description="docbot -- Javadoc lookups for chat rooms",
    )

    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("DOCBOT_PROJECT_PATH", "."),
        help='Project directory (default: DOCBOT_PROJECT_PATH or current)'
    )
    parser.add_argument(
        '--archives', '-a',
        help='Directory of javadoc archives (overrides javadoc.archive_dir)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug output to stderr'
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'docbot {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    from .console import register_all, dispatch
    register_all(subparsers)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cli = DocbotCLI(Path(args.project), archive_dir=Path(args.archives) if args.archives else None)
    configure_logging("DEBUG" if args.verbose else cli.config.logging.level)

    try:
        dispatch(args.command, cli, args)
    except DocbotError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
