"""
Presentation — Chat rendering for docbot

Contains:
- Markup: chat markdown builder
- Paragraphs: paragraph pagination of descriptions
- Composer: responses for entries, choice lists and errors
"""

from .markup import ChatBuilder
from .paragraphs import Paragraphs, render_paragraph
from .composer import ResponseComposer

__all__ = ['ChatBuilder', 'Paragraphs', 'render_paragraph', 'ResponseComposer']
