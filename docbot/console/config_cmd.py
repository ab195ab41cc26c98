"""
ConfigCommand — Display and change configuration
"""

from .base import ConsoleCommand


class ConfigCommand(ConsoleCommand):
    """Shows settings or updates one of them."""

    def show_config(self):
        print(self.config_manager.display(), file=self.out)

    def set_config(self, key: str, value: str, scope: str = "project"):
        error = self.config_manager.set(key, value, scope)
        if error:
            print(f"Error: {error}", file=self.out)
            return

        if scope == "project":
            path = self.config_manager.project_config_path
        else:
            path = self.config_manager.user_config_path
        print(f"Set {key} = {value} (saved to {path})", file=self.out)


def register_parser(subparsers):
    p = subparsers.add_parser('config', help='View or set configuration')
    p.add_argument('--set', metavar='KEY=VALUE',
                   help='Set config value (e.g., javadoc.choice_timeout=60)')
    p.add_argument('--user', action='store_true',
                   help='Apply to user config instead of project')
    return p


def handle(cli, args):
    if args.set:
        if '=' not in args.set:
            print("Error: Use format KEY=VALUE (e.g., chat.trigger=!)", file=cli.out)
            return
        key, value = args.set.split('=', 1)
        cli.config_cmd.set_config(key, value, "user" if args.user else "project")
    else:
        cli.config_cmd.show_config()
