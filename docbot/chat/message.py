"""
Message — Chat messages in, chat responses out
"""

from dataclasses import dataclass
from enum import Enum


class SplitStrategy(Enum):
    """
    How a transport may break a response that is too long for one post.

    WORD keeps words whole (prose); NEWLINE keeps lines whole (lists).
    """
    WORD = "word"
    NEWLINE = "newline"
    NONE = "none"


@dataclass
class ChatMessage:
    """A message posted to a chat room."""
    content: str
    message_id: int = 0
    room_id: int = 0
    user_name: str = ""
    user_id: int = 0

    def with_content(self, content: str) -> "ChatMessage":
        """Copy of this message carrying different content."""
        return ChatMessage(
            content=content,
            message_id=self.message_id,
            room_id=self.room_id,
            user_name=self.user_name,
            user_id=self.user_id,
        )


@dataclass
class ChatResponse:
    """Text to post back, plus a hint on how to split it."""
    text: str
    split_strategy: SplitStrategy = SplitStrategy.NONE

    @classmethod
    def of(cls, builder, split_strategy: SplitStrategy = SplitStrategy.NONE) -> "ChatResponse":
        """Build from anything with a string form (e.g. a ChatBuilder)."""
        return cls(str(builder), split_strategy)
