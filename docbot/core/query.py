"""
Query — Parses free-text javadoc queries into class references

Accepted forms (queries are case-insensitive downstream):
    String
    java.lang.String
    String#indexOf
    String#indexOf(int)
    String#indexOf(String, int) 2      <- paragraph 2 of the description
    String(char[])                     <- constructor, method name "String"
    String#indexOf(*)                  <- any parameters (same as no list)
    Object#hashCode()                  <- zero-arg overloads only

Parsing never fails. Anything unrecognised falls back to the permissive
default (no method, no parameter filter, paragraph 1).
"""

import re
from dataclasses import dataclass
from typing import Optional, List


PARAM_SEPARATOR = re.compile(r'\s*,\s*')
PARAGRAPH_PATTERN = re.compile(r'[+-]?[0-9]+')

# Parameter list meaning "do not filter by parameters"
ANY_PARAMETERS = "*"


@dataclass(frozen=True)
class ClassReference:
    """
    A parsed query.

    parameters is None when the query does not constrain the parameter
    list, and [] when it asks for zero-arg overloads only.
    """
    class_name: str
    method_name: Optional[str] = None
    parameters: Optional[List[str]] = None
    paragraph: int = 1


class _Scanner:
    """Cursor over the query text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self):
        self.pos += 1

    def take_name(self) -> str:
        """Consume up to the next '(', '#' or whitespace."""
        start = self.pos
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch in '(#' or ch.isspace():
                break
            self.pos += 1
        return self.text[start:self.pos]

    def take_word(self) -> str:
        """Consume up to the next whitespace."""
        start = self.pos
        while self.pos < len(self.text) and not self.text[self.pos].isspace():
            self.pos += 1
        return self.text[start:self.pos]

    def take_group(self) -> Optional[str]:
        """
        Consume a parenthesized list at the cursor.

        Returns:
            The text between the parentheses, or None (cursor unchanged)
            when there is no closing parenthesis.
        """
        close = self.text.find(')', self.pos)
        if close < 0:
            return None
        inner = self.text[self.pos + 1:close]
        self.pos = close + 1
        return inner

    def rest(self) -> str:
        return self.text[self.pos:]


def parse_query(text: str) -> ClassReference:
    """
    Parse a javadoc query.

    Args:
        text: Raw query (the command content, without the trigger)

    Returns:
        ClassReference (never raises)
    """
    scanner = _Scanner(text.strip())

    class_name = scanner.take_name()
    method_name = None
    parameters_text = None

    if scanner.peek() == '(':
        group = scanner.take_group()
        if group is None:
            # unbalanced, so the parenthesis belongs to the name
            class_name += scanner.take_word()
        else:
            # constructor reference, e.g. java.lang.String(char[])
            method_name = _simple_name(class_name)
            parameters_text = group

    if scanner.peek() == '#':
        scanner.advance()
        name = scanner.take_name()
        if method_name is None:
            method_name = name
        if scanner.peek() == '(':
            group = scanner.take_group()
            if group is None:
                scanner.take_word()
            else:
                parameters_text = group

    paragraph = 1
    rest = scanner.rest()
    if rest[:1].isspace():
        paragraph = _parse_paragraph(rest.strip())

    return ClassReference(
        class_name=class_name,
        method_name=method_name or None,
        parameters=_parse_parameters(parameters_text),
        paragraph=paragraph,
    )


def _simple_name(class_name: str) -> str:
    dot = class_name.rfind('.')
    return class_name[dot + 1:] if dot >= 0 else class_name


def _parse_parameters(text: Optional[str]) -> Optional[List[str]]:
    if text is None:
        return None

    text = text.strip()
    if text == ANY_PARAMETERS:
        return None
    if not text:
        return []

    parameters = PARAM_SEPARATOR.split(text)
    while parameters and not parameters[-1]:
        parameters.pop()
    return parameters


def _parse_paragraph(token: str) -> int:
    if not PARAGRAPH_PATTERN.fullmatch(token):
        return 1
    return max(1, int(token))
