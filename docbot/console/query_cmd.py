"""
QueryCommand — One-shot javadoc lookup

    docbot query "String#indexOf(int)"
    docbot query "List 2"
"""

from ..chat.message import ChatMessage
from .base import ConsoleCommand


class QueryCommand(ConsoleCommand):
    """Prints the bot's answer to a single javadoc query."""

    def query(self, text: str):
        trigger = self.config.chat.trigger
        posts = self.bot.handle(ChatMessage(content=f"{trigger}javadoc {text}"))
        for post in posts:
            print(post, file=self.out)


def register_parser(subparsers):
    p = subparsers.add_parser('query', help='Look up a class or method')
    p.add_argument('text', nargs='+', help='Query, e.g. String#indexOf(int)')
    return p


def handle(cli, args):
    cli.query_cmd.query(" ".join(args.text))
