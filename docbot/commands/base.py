"""
Command — Shared contract for chat commands

A chat command is invoked as "<trigger><name> <content>", e.g.
"=javadoc String#indexOf". The bot strips the trigger and the name and
hands the command a message carrying only the content.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..chat.message import ChatMessage, ChatResponse


class Command(ABC):
    """Base class for chat commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Primary name."""

    @property
    def aliases(self) -> List[str]:
        """Alternative names."""
        return []

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description for the command list."""

    def help_text(self, trigger: str) -> str:
        """Full help. Defaults to the description."""
        return self.description

    @abstractmethod
    def on_message(self, message: ChatMessage, is_admin: bool) -> Optional[ChatResponse]:
        """
        Respond to an invocation.

        Args:
            message: The message, content reduced to the command arguments
            is_admin: Whether the author is a bot admin

        Returns:
            ChatResponse, or None to stay quiet
        """


class Listener(ABC):
    """Sees every message that is not a command invocation."""

    @abstractmethod
    def on_message(self, message: ChatMessage, is_admin: bool) -> Optional[ChatResponse]:
        """Return a response, or None to ignore the message."""
