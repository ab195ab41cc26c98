"""
Splitting — Breaks long responses into postable chunks

Chat services cap the length of a single post. Responses carry a
SplitStrategy hint so they can be cut where it does the least damage:
- WORD: at the last space that fits
- NEWLINE: at the last line break that fits, else as WORD
- NONE: never split

A chunk with no usable break point is cut at the limit.
"""

from typing import List

from .message import SplitStrategy


DEFAULT_MAX_LENGTH = 500


def split_message(
    text: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    strategy: SplitStrategy = SplitStrategy.WORD
) -> List[str]:
    """
    Split a response into posts.

    Args:
        text: Full response text
        max_length: Maximum characters per post
        strategy: Where breaks are allowed

    Returns:
        Posts in order (a single post when no split is needed)
    """
    if strategy == SplitStrategy.NONE or len(text) <= max_length or max_length <= 0:
        return [text]

    posts = []
    remaining = text
    while len(remaining) > max_length:
        cut = -1
        if strategy == SplitStrategy.NEWLINE:
            cut = remaining.rfind('\n', 0, max_length + 1)
        if cut <= 0:
            cut = remaining.rfind(' ', 0, max_length + 1)
        if cut <= 0:
            cut = max_length

        posts.append(remaining[:cut].rstrip())
        remaining = remaining[cut:].lstrip()

    if remaining:
        posts.append(remaining)
    return posts
