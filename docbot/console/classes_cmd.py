"""
ClassesCommand — Lists the classes the index knows about
"""

from typing import Optional

from .base import ConsoleCommand


DEFAULT_LIMIT = 50


class ClassesCommand(ConsoleCommand):
    """Enumerates indexed classes, optionally filtered by prefix."""

    def classes(self, prefix: Optional[str] = None, limit: int = DEFAULT_LIMIT):
        names = sorted(self.index.enumerate_known_classes())
        if prefix:
            prefix_lower = prefix.lower()
            names = [n for n in names if n.lower().startswith(prefix_lower)]

        if not names:
            print("No classes found.", file=self.out)
            return

        shown = names if limit <= 0 else names[:limit]
        for name in shown:
            print(name, file=self.out)

        if len(shown) < len(names):
            print(f"Showing {len(shown)} of {len(names)} (use --limit 0 for all)", file=self.out)


def register_parser(subparsers):
    p = subparsers.add_parser('classes', help='List indexed classes')
    p.add_argument('prefix', nargs='?', help='Only names starting with this (case-insensitive)')
    p.add_argument('--limit', '-l', type=int, default=DEFAULT_LIMIT, metavar='N',
                   help=f'Maximum names to show, 0 for all (default: {DEFAULT_LIMIT})')
    return p


def handle(cli, args):
    cli.classes_cmd.classes(prefix=args.prefix, limit=args.limit)
