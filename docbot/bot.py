"""
Bot — Routes chat messages to commands and listeners

    "=javadoc List#add"   -> JavadocCommand
    "=help"               -> HelpCommand
    "2"                   -> ChoiceListener (numbered reply)

Each message is one turn. A turn that fails because the documentation
cannot be read is answered with an apology and logged; the bot keeps
serving later messages.
"""

import logging
import time
from typing import Optional, List, Dict, Callable

from .chat.connection import ChatConnection
from .chat.message import ChatMessage, ChatResponse
from .chat.splitting import split_message, DEFAULT_MAX_LENGTH
from .commands.base import Command, Listener
from .commands.choice import ChoiceListener
from .commands.help import HelpCommand
from .commands.javadoc import JavadocCommand
from .config import Config
from .core.index import DocumentationIndex
from .errors import DocbotError
from .presentation.composer import ResponseComposer, TURN_FAILED
from .tracking.choices import ChoiceTracker


logger = logging.getLogger(__name__)


class Bot:
    """Dispatches messages and splits responses into posts."""

    def __init__(
        self,
        trigger: str = "=",
        max_message_length: int = DEFAULT_MAX_LENGTH,
        composer: Optional[ResponseComposer] = None
    ):
        self.trigger = trigger
        self.max_message_length = max_message_length
        self.composer = composer or ResponseComposer()
        self._commands: Dict[str, Command] = {}
        self._listeners: List[Listener] = []

    def add_command(self, command: Command):
        for name in [command.name] + list(command.aliases):
            self._commands[name.lower()] = command

    def add_listener(self, listener: Listener):
        self._listeners.append(listener)

    @property
    def commands(self) -> List[Command]:
        """Registered commands, each once."""
        unique = []
        for command in self._commands.values():
            if command not in unique:
                unique.append(command)
        return unique

    def respond(self, message: ChatMessage, is_admin: bool = False) -> Optional[ChatResponse]:
        """
        Produce the response to one message.

        Returns:
            ChatResponse, or None when the bot has nothing to say
        """
        try:
            return self._dispatch(message, is_admin)
        except DocbotError:
            logger.exception("Turn failed for message %s", message.message_id)
            return self.composer.plain(TURN_FAILED, message)

    def _dispatch(self, message: ChatMessage, is_admin: bool) -> Optional[ChatResponse]:
        content = message.content.strip()

        if content.startswith(self.trigger):
            parts = content[len(self.trigger):].split(None, 1)
            if not parts:
                return None
            command = self._commands.get(parts[0].lower())
            if command is None:
                return None
            arguments = parts[1] if len(parts) > 1 else ""
            return command.on_message(message.with_content(arguments), is_admin)

        for listener in self._listeners:
            response = listener.on_message(message, is_admin)
            if response is not None:
                return response
        return None

    def handle(self, message: ChatMessage, is_admin: bool = False) -> List[str]:
        """Respond to a message and split the response into posts."""
        response = self.respond(message, is_admin)
        if response is None:
            return []
        return split_message(response.text, self.max_message_length, response.split_strategy)

    def run(
        self,
        connection: ChatConnection,
        room: int,
        poll_interval: float = 0.0,
        is_admin: Callable[[ChatMessage], bool] = lambda message: False
    ):
        """
        Serve a room until the connection closes.

        Args:
            connection: Logged-in chat connection
            room: Room to serve
            poll_interval: Seconds to wait after an empty poll
            is_admin: Decides whether a message author is an admin
        """
        while not connection.closed:
            messages = connection.get_new_messages(room)
            if not messages and poll_interval > 0:
                time.sleep(poll_interval)
            for message in messages:
                for post in self.handle(message, is_admin(message)):
                    connection.send_message(room, post)


def create_bot(
    index: DocumentationIndex,
    config: Optional[Config] = None,
    clock: Callable[[], float] = time.monotonic
) -> Bot:
    """
    Wire up a bot with the javadoc command, choice listener and help.

    Args:
        index: Documentation to serve
        config: Settings (defaults if None)
        clock: Time source for the choice timeout
    """
    config = config or Config()

    bot = Bot(trigger=config.chat.trigger, max_message_length=config.chat.max_message_length)
    tracker = ChoiceTracker(timeout=config.javadoc.choice_timeout, clock=clock)
    javadoc = JavadocCommand(
        index,
        tracker=tracker,
        composer=bot.composer,
        max_suggestions=config.javadoc.suggestions,
    )

    bot.add_command(javadoc)
    bot.add_command(HelpCommand(lambda: bot.commands, trigger=config.chat.trigger))
    bot.add_listener(ChoiceListener(javadoc))
    return bot
