"""
Chat — Chat surface for docbot

Contains:
- Message: incoming messages, outgoing responses, split strategies
- Splitting: breaking long responses into posts
- Connection: transport contract and a console implementation
"""

from .message import ChatMessage, ChatResponse, SplitStrategy
from .splitting import split_message, DEFAULT_MAX_LENGTH
from .connection import ChatConnection, ConsoleConnection

__all__ = [
    'ChatMessage', 'ChatResponse', 'SplitStrategy',
    'split_message', 'DEFAULT_MAX_LENGTH',
    'ChatConnection', 'ConsoleConnection',
]
