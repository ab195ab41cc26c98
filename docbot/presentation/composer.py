"""
Composer — Chat responses for lookup results

Entry headers (library tag, modifiers, linked signature) are printed with
paragraph 1 only; later paragraphs of the same entry are printed bare.
Deprecated entries are struck through.

Choice lists are numbered from 1 and use the NEWLINE split strategy so a
long list is never broken mid-line.
"""

from typing import Optional, List, Iterable

from ..chat.message import ChatMessage, ChatResponse, SplitStrategy
from ..core.models import ClassInfo, MethodInfo, LibraryInfo
from .markup import ChatBuilder
from .paragraphs import Paragraphs


# Printed in this order when present
CLASS_MODIFIERS = ("abstract", "final")

# A class should carry exactly one of these
CLASS_TYPES = ("annotation", "class", "enum", "exception", "interface")

METHOD_MODIFIERS_TO_IGNORE = frozenset(("private", "protected", "public"))

# Canonical Java modifier order for display
MODIFIER_ORDER = (
    "public", "protected", "private", "abstract", "default", "static", "final",
    "transient", "volatile", "synchronized", "native", "strictfp",
)

# The JDK itself is not tagged
UNTAGGED_LIBRARY = "java"

NOT_FOUND_CLASS = "Sorry, I never heard of that class. :("
NOT_FOUND_METHOD = "Sorry, I can't find that method. :("
INVALID_CHOICE = "That's not a valid choice."
USAGE_HINT = 'Type the name of a Java class (e.g. "java.lang.String") or a method (e.g. "Integer#parseInt").'
TURN_FAILED = "Sorry, I couldn't read the documentation. :("


def ordered_modifiers(modifiers: Iterable[str]) -> List[str]:
    """Modifiers in canonical order, unknown ones last (alphabetical)."""
    rank = {m: i for i, m in enumerate(MODIFIER_ORDER)}
    return sorted(modifiers, key=lambda m: (rank.get(m, len(rank)), m))


class ResponseComposer:
    """Renders lookup results as chat responses."""

    # -------------------------------------------------------------------------
    # Documentation entries
    # -------------------------------------------------------------------------

    def class_response(self, info: ClassInfo, paragraph: int, message: Optional[ChatMessage] = None) -> ChatResponse:
        cb = ChatBuilder().reply(message)

        if paragraph == 1:
            self._library_tag(cb, info.library)

            deprecated = info.deprecated
            for modifier in CLASS_MODIFIERS:
                if modifier not in info.modifiers:
                    continue
                cb.italic()
                self._struck_tag(cb, modifier, deprecated)
                cb.italic()
                cb.append(' ')

            for class_type in CLASS_TYPES:
                if class_type in info.modifiers:
                    self._struck_tag(cb, class_type, deprecated)
                    cb.append(' ')

            self._signature(cb, info.name.fully_qualified, info.frame_url, deprecated)
            cb.append(": ")

        cb.append(Paragraphs(info.description).render(paragraph))
        return ChatResponse.of(cb, SplitStrategy.WORD)

    def method_response(
        self,
        method: MethodInfo,
        info: ClassInfo,
        paragraph: int,
        message: Optional[ChatMessage] = None
    ) -> ChatResponse:
        cb = ChatBuilder().reply(message)

        if paragraph == 1:
            self._library_tag(cb, info.library)

            deprecated = method.deprecated
            for modifier in ordered_modifiers(method.modifiers - METHOD_MODIFIERS_TO_IGNORE):
                self._struck_tag(cb, modifier, deprecated)
                cb.append(' ')

            url = info.url
            if url is not None:
                url = f"{url}#{method.url_anchor}"
            self._signature(cb, method.signature_string, url, deprecated)
            cb.append(": ")

        cb.append(Paragraphs(method.description).render(paragraph))
        return ChatResponse.of(cb, SplitStrategy.WORD)

    def _library_tag(self, cb: ChatBuilder, library: Optional[LibraryInfo]):
        if library is None or library.name is None:
            return
        if library.name.lower() == UNTAGGED_LIBRARY:
            return
        cb.bold().tag(library.name.replace(' ', '-')).bold().append(' ')

    def _struck_tag(self, cb: ChatBuilder, name: str, deprecated: bool):
        if deprecated:
            cb.strike()
        cb.tag(name)
        if deprecated:
            cb.strike()

    def _signature(self, cb: ChatBuilder, text: str, url: Optional[str], deprecated: bool):
        if deprecated:
            cb.strike()
        if url is None:
            cb.bold().code(text).bold()
        else:
            cb.link(str(ChatBuilder().bold().code(text).bold()), url)
        if deprecated:
            cb.strike()

    # -------------------------------------------------------------------------
    # Choice lists
    # -------------------------------------------------------------------------

    def method_choices_response(
        self,
        choices: List[str],
        parameters: Optional[List[str]],
        message: Optional[ChatMessage] = None
    ) -> ChatResponse:
        cb = ChatBuilder().reply(message)
        single = len(choices) == 1

        if parameters is None:
            cb.append("Did you mean this one? (type the number)" if single
                      else "Which one do you mean? (type the number)")
        else:
            if not parameters:
                cb.append("I couldn't find a zero-arg signature for that method.")
            else:
                cb.append("I couldn't find a signature with ")
                cb.append("that parameter." if len(parameters) == 1 else "those parameters.")
            cb.append(" Did you mean this one? (type the number)" if single
                      else " Did you mean one of these? (type the number)")

        self._numbered(cb, choices)
        return ChatResponse.of(cb, SplitStrategy.NEWLINE)

    def class_choices_response(self, choices: List[str], message: Optional[ChatMessage] = None) -> ChatResponse:
        cb = ChatBuilder().reply(message)
        cb.append("Which one do you mean? (type the number)")
        self._numbered(cb, choices)
        return ChatResponse.of(cb, SplitStrategy.NEWLINE)

    def _numbered(self, cb: ChatBuilder, choices: List[str]):
        for number, choice in enumerate(choices, 1):
            cb.nl().append(f"{number}. {choice}")

    # -------------------------------------------------------------------------
    # Plain messages
    # -------------------------------------------------------------------------

    def class_not_found(self, suggestions: List[str], message: Optional[ChatMessage] = None) -> ChatResponse:
        cb = ChatBuilder().reply(message).append(NOT_FOUND_CLASS)
        if suggestions:
            cb.append(" Did you mean: ")
            for i, name in enumerate(suggestions):
                if i > 0:
                    cb.append(", ")
                cb.code(name)
            cb.append("?")
        return ChatResponse.of(cb, SplitStrategy.WORD)

    def plain(self, text: str, message: Optional[ChatMessage] = None) -> ChatResponse:
        return ChatResponse.of(ChatBuilder().reply(message).append(text))
