"""
ChoiceListener — Picks up numeric replies to a choice list

A message consisting only of digits is treated as a choice number and
handed to the javadoc command. Anything else is ignored.
"""

import re
from typing import Optional

from ..chat.message import ChatMessage, ChatResponse
from .base import Listener
from .javadoc import JavadocCommand


CHOICE_PATTERN = re.compile(r'[0-9]+')


class ChoiceListener(Listener):
    """Routes bare numbers to JavadocCommand.show_choice()."""

    def __init__(self, command: JavadocCommand):
        self.command = command

    def on_message(self, message: ChatMessage, is_admin: bool) -> Optional[ChatResponse]:
        content = message.content.strip()
        if not CHOICE_PATTERN.fullmatch(content):
            return None
        return self.command.show_choice(message, int(content))
