"""
Tracking — Conversational state for docbot

Contains:
- Choices: the numbered disambiguation list and its time-to-live
"""

from .choices import (
    ChoiceTracker, ChoiceStatus, ChoiceOutcome, PendingChoices, DEFAULT_CHOICE_TIMEOUT
)

__all__ = [
    "ChoiceTracker", "ChoiceStatus", "ChoiceOutcome", "PendingChoices", "DEFAULT_CHOICE_TIMEOUT",
]
