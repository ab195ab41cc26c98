"""
JavadocCommand — Class and method documentation lookup

    =javadoc String                  class description
    =javadoc String 2                second paragraph of it
    =javadoc String#indexOf          method (choices if overloaded)
    =javadoc String#indexOf(int)     a specific overload

When the query is ambiguous the bot lists numbered choices and remembers
them; typing a number shortly after picks one (see ChoiceListener).
"""

import logging
from typing import Optional, List

from ..chat.message import ChatMessage, ChatResponse
from ..core.index import DocumentationIndex
from ..core.query import parse_query
from ..core.resolver import AmbiguityResolver, Resolution, ResolutionKind
from ..errors import DocumentationError
from ..presentation.composer import (
    ResponseComposer, NOT_FOUND_METHOD, INVALID_CHOICE, USAGE_HINT
)
from ..presentation.markup import ChatBuilder
from ..tracking.choices import ChoiceTracker, ChoiceStatus
from .base import Command


logger = logging.getLogger(__name__)


class JavadocCommand(Command):
    """
    Looks up Javadoc entries and handles their disambiguation.

    The choice tracker is shared by everyone talking to the bot: a new
    choice list replaces the previous one, whoever asked for it.
    """

    def __init__(
        self,
        index: DocumentationIndex,
        tracker: Optional[ChoiceTracker] = None,
        composer: Optional[ResponseComposer] = None,
        max_suggestions: int = 3
    ):
        self.index = index
        self.tracker = tracker or ChoiceTracker()
        self.composer = composer or ResponseComposer()
        self.resolver = AmbiguityResolver(index, max_suggestions=max_suggestions)

    @property
    def name(self) -> str:
        return "javadoc"

    @property
    def aliases(self) -> List[str]:
        return ["javadocs"]

    @property
    def description(self) -> str:
        return "Displays class documentation from the Javadocs."

    def help_text(self, trigger: str) -> str:
        return str(
            ChatBuilder()
            .append("Displays class documentation from the Javadocs.  ")
            .append("If more than one class or method matches the query, then a list of choices is displayed.  "
                    "Queries are case-insensitive.").nl()
            .append("Usage: ").append(trigger).append(self.name).append(" CLASS_NAME[#METHOD_NAME]").nl()
            .append("Examples:").nl()
            .append(trigger).append(self.name).append(" String").nl()
            .append(trigger).append(self.name).append(" java.lang.String#indexOf").nl()
        )

    def on_message(self, message: ChatMessage, is_admin: bool) -> Optional[ChatResponse]:
        content = message.content.strip()
        if not content:
            return self.composer.plain(USAGE_HINT, message)

        reference = parse_query(content)
        try:
            resolution = self.resolver.resolve(reference)
        except OSError as e:
            raise DocumentationError("Problem getting Javadoc info.") from e

        logger.debug("%r resolved to %s", content, resolution.kind.value)
        return self._respond(resolution, message)

    def _respond(self, resolution: Resolution, message: ChatMessage) -> ChatResponse:
        reference = resolution.reference
        kind = resolution.kind

        if kind == ResolutionKind.CLASS:
            return self.composer.class_response(resolution.class_info, reference.paragraph, message)

        if kind == ResolutionKind.METHOD:
            return self.composer.method_response(
                resolution.method, resolution.class_info, reference.paragraph, message
            )

        if kind == ResolutionKind.CLASS_CHOICES:
            self.tracker.offer(resolution.choices)
            return self.composer.class_choices_response(resolution.choices, message)

        if kind == ResolutionKind.METHOD_CHOICES:
            self.tracker.offer(resolution.choices)
            return self.composer.method_choices_response(resolution.choices, reference.parameters, message)

        if kind == ResolutionKind.METHOD_NOT_FOUND:
            return self.composer.plain(NOT_FOUND_METHOD, message)

        return self.composer.class_not_found(resolution.suggestions, message)

    def show_choice(self, message: ChatMessage, number: int) -> Optional[ChatResponse]:
        """
        Answer a numeric reply to the last choice list.

        Args:
            message: The message carrying the number
            number: 1-based choice number

        Returns:
            The chosen entry, an "invalid choice" notice, or None when
            there is no live choice list
        """
        outcome = self.tracker.select(number)

        if outcome.ignored:
            logger.debug("Ignoring choice %d (%s)", number, outcome.status.value)
            return None

        if outcome.status == ChoiceStatus.INVALID:
            return self.composer.plain(INVALID_CHOICE, message)

        # replayed as a fresh query; admin rights are not carried over
        return self.on_message(message.with_content(outcome.text), False)
