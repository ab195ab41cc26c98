"""
Connection — Chat room transport contract

A deployment plugs a real chat service in behind this interface. The
console connection ships with docbot so the bot can be driven from a
terminal (see `docbot chat`).
"""

import sys
from abc import ABC, abstractmethod
from typing import List, TextIO, Optional

from .message import ChatMessage


class ChatConnection(ABC):
    """A connection to one or more chat rooms."""

    # Set once the connection can deliver no more messages
    closed = False

    @abstractmethod
    def login(self, email: str, password: str):
        """
        Log in. Must be called before anything else.

        Raises:
            ValueError: if the credentials are rejected
            OSError: if the service cannot be reached
        """

    @abstractmethod
    def send_message(self, room: int, message: str):
        """Post a message to a room."""

    @abstractmethod
    def get_messages(self, room: int, count: int) -> List[ChatMessage]:
        """The most recent messages of a room."""

    @abstractmethod
    def get_new_messages(self, room: int) -> List[ChatMessage]:
        """Messages posted since the previous call."""


class ConsoleConnection(ChatConnection):
    """
    A single "room" backed by a pair of text streams.

    Every input line is one message; message ids count up from 1.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 user_name: str = "console"):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.user_name = user_name
        self._history: List[ChatMessage] = []
        self._next_id = 1

    def login(self, email: str, password: str):
        pass  # nothing to authenticate against

    def send_message(self, room: int, message: str):
        print(message, file=self.stdout, flush=True)

    def get_messages(self, room: int, count: int) -> List[ChatMessage]:
        return self._history[-count:] if count > 0 else []

    def get_new_messages(self, room: int) -> List[ChatMessage]:
        line = self.stdin.readline()
        if not line:
            self.closed = True
            return []

        message = ChatMessage(
            content=line.rstrip("\r\n"),
            message_id=self._next_id,
            room_id=room,
            user_name=self.user_name,
        )
        self._next_id += 1
        self._history.append(message)
        return [message]
