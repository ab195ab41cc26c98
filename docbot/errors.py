"""
Errors — Exception hierarchy for docbot

Only failures live here. Routine outcomes (class not found, ambiguous
names, expired choices) are modelled as result values, not exceptions.
"""

from typing import List


class DocbotError(Exception):
    """Base class for all docbot errors."""


class DocumentationError(DocbotError):
    """
    The documentation index could not be read.

    Fatal to the current chat turn, never to the process.
    """


class MultipleClassesFoundError(DocbotError):
    """Raised by the convenience lookup API when a class name is ambiguous."""

    def __init__(self, classes: List[str]):
        self.classes = list(classes)
        super().__init__(f"Multiple classes found: {', '.join(self.classes)}")


class ArchiveFormatError(DocumentationError):
    """A documentation archive contains a malformed entry."""
