"""
HelpCommand — Lists commands or shows one command's help
"""

from typing import Optional, Callable, List

from ..chat.message import ChatMessage, ChatResponse, SplitStrategy
from ..presentation.markup import ChatBuilder
from .base import Command


class HelpCommand(Command):
    """
    "=help" lists every command, "=help javadoc" explains one.

    Commands are fetched through a callable so the list always reflects
    what the bot currently has registered.
    """

    def __init__(self, commands: Callable[[], List[Command]], trigger: str = "="):
        self._commands = commands
        self.trigger = trigger

    @property
    def name(self) -> str:
        return "help"

    @property
    def description(self) -> str:
        return "Displays this help message."

    def on_message(self, message: ChatMessage, is_admin: bool) -> Optional[ChatResponse]:
        wanted = message.content.strip().lower()
        commands = self._commands()

        if wanted:
            for command in commands:
                if wanted == command.name or wanted in command.aliases:
                    text = command.help_text(self.trigger)
                    return ChatResponse.of(ChatBuilder().reply(message).append(text), SplitStrategy.WORD)
            return ChatResponse.of(
                ChatBuilder().reply(message).append(f"No command or listener named \"{wanted}\" exists.")
            )

        cb = ChatBuilder().reply(message).append("Commands:")
        for command in sorted(commands, key=lambda c: c.name):
            cb.nl().append(f"{self.trigger}{command.name} - {command.description}")
        return ChatResponse.of(cb, SplitStrategy.NEWLINE)
