"""
ChatCommand — Talk to the bot from a terminal

Every line typed is a chat message: "=javadoc List#add", then "2" to
pick from the choice list. End with Ctrl-D.
"""

import sys

from ..chat.connection import ConsoleConnection
from .base import ConsoleCommand


CONSOLE_ROOM = 1


class ChatCommand(ConsoleCommand):
    """Runs the bot against stdin/stdout."""

    def chat(self, admin: bool = False):
        connection = ConsoleConnection(stdin=sys.stdin, stdout=self.out)
        connection.login("", "")
        self.bot.run(connection, CONSOLE_ROOM, is_admin=lambda message: admin)


def register_parser(subparsers):
    p = subparsers.add_parser('chat', help='Chat with the bot on stdin/stdout')
    p.add_argument('--admin', action='store_true', help='Treat the console user as a bot admin')
    return p


def handle(cli, args):
    cli.chat_cmd.chat(admin=args.admin)
