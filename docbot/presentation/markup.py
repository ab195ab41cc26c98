"""
Markup — Builder for chat markdown

The chat dialect:
    **bold**  *italic*  `code`  ---strike---  [tag:name]  [text](url)

Replies start with ":<message id> " so the chat service links them to
the message being answered.
"""

from typing import Any


class ChatBuilder:
    """
    Accumulates a chat message.

    Formatting methods emit the delimiter only, so each one is called
    twice (open, close) around the formatted part:

        ChatBuilder().bold().code("List").bold()   ->  **`List`**
    """

    def __init__(self, text: str = ""):
        self._parts = [text] if text else []

    def append(self, value: Any) -> "ChatBuilder":
        self._parts.append(str(value))
        return self

    def bold(self, text: str = "") -> "ChatBuilder":
        return self._wrap("**", text)

    def italic(self, text: str = "") -> "ChatBuilder":
        return self._wrap("*", text)

    def code(self, text: str = "") -> "ChatBuilder":
        return self._wrap("`", text)

    def strike(self, text: str = "") -> "ChatBuilder":
        return self._wrap("---", text)

    def _wrap(self, delimiter: str, text: str) -> "ChatBuilder":
        self._parts.append(delimiter)
        if text:
            self._parts.append(text)
            self._parts.append(delimiter)
        return self

    def tag(self, name: str) -> "ChatBuilder":
        return self.append(f"[tag:{name}]")

    def link(self, display: str, url: str) -> "ChatBuilder":
        return self.append(f"[{display}]({url})")

    def reply(self, message) -> "ChatBuilder":
        """Address the author of a message (no-op without a message id)."""
        if message is not None and message.message_id:
            self.append(f":{message.message_id} ")
        return self

    def nl(self) -> "ChatBuilder":
        return self.append("\n")

    def __str__(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return len(str(self))
