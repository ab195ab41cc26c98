"""
Paragraphs — Page-by-paragraph access to long descriptions

Descriptions are split on blank lines. Paragraph numbers are 1-based;
numbers past the end clamp to the last paragraph. A "(i/N)" marker is
appended when there is more than one paragraph, so the reader knows
there is more to ask for ("=javadoc String 2").
"""

from typing import List


PARAGRAPH_SEPARATOR = "\n\n"


class Paragraphs:
    """A description split into paragraphs."""

    def __init__(self, text: str):
        paragraphs = (text or "").split(PARAGRAPH_SEPARATOR)
        # trailing blank lines do not start a paragraph
        while len(paragraphs) > 1 and not paragraphs[-1]:
            paragraphs.pop()
        self._paragraphs: List[str] = paragraphs

    @property
    def count(self) -> int:
        return len(self._paragraphs)

    def clamp(self, number: int) -> int:
        """Clamp a requested paragraph number into 1..count."""
        return min(max(1, number), self.count)

    def get(self, number: int) -> str:
        """Paragraph text (1-based, clamped)."""
        return self._paragraphs[self.clamp(number) - 1]

    def render(self, number: int) -> str:
        """Paragraph text with its "(i/N)" position when paginated."""
        number = self.clamp(number)
        text = self.get(number)
        if self.count > 1:
            text += f" ({number}/{self.count})"
        return text


def render_paragraph(description: str, paragraph: int) -> str:
    """Render one paragraph of a description."""
    return Paragraphs(description).render(paragraph)
