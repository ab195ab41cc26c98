"""
Commands — Chat commands and listeners

Contains:
- Command / Listener: contracts
- JavadocCommand: documentation lookup with numbered disambiguation
- ChoiceListener: numeric replies to the last choice list
- HelpCommand: command list and per-command help
"""

from .base import Command, Listener
from .javadoc import JavadocCommand
from .choice import ChoiceListener
from .help import HelpCommand

__all__ = ['Command', 'Listener', 'JavadocCommand', 'ChoiceListener', 'HelpCommand']
