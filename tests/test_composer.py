"""
Tests for ResponseComposer — chat rendering of lookup results

These tests validate:
- Class and method headers (library tag, modifiers, linked signature)
- Deprecated entries are struck through
- Headers only on paragraph 1
- Choice list prompts and numbering
- Reply prefixes and split strategies
"""

from docbot.chat.message import ChatMessage, SplitStrategy
from docbot.core.models import ClassInfo, LibraryInfo
from docbot.presentation.composer import (
    ResponseComposer, ordered_modifiers, NOT_FOUND_CLASS,
)
from docbot.presentation.markup import ChatBuilder
from tests.factories import OBJECT, UTIL_LIST, STRING, JDK_LIBRARY, class_doc, method


JAVA = LibraryInfo(name="Java", base_url="https://docs.oracle.com/javase/8/docs/api/")
GUAVA = LibraryInfo(name="Google Guava", base_url="https://guava.dev/releases/33.0/api/docs/")


def info_of(doc, library=None):
    return ClassInfo.from_dict(doc, library=library)


def method_of(info, signature):
    return [m for m in info.methods if m.signature_string == signature][0]


class TestChatBuilder:
    """Markup builder."""

    def test_delimiters(self):
        """Each format call emits its delimiter."""
        cb = ChatBuilder().bold().append("b").bold().italic("i").code("c").strike("s")
        assert str(cb) == "**b***i*`c`---s---"

    def test_tag_and_link(self):
        """Tags and links use the chat dialect."""
        cb = ChatBuilder().tag("java").append(" ").link("docs", "http://x")
        assert str(cb) == "[tag:java] [docs](http://x)"

    def test_reply_prefix(self):
        """Replies start with :<message id>."""
        assert str(ChatBuilder().reply(ChatMessage("hi", message_id=42)).append("ok")) == ":42 ok"

    def test_reply_without_id(self):
        """No prefix when the message has no id."""
        assert str(ChatBuilder().reply(ChatMessage("hi")).append("ok")) == "ok"

    def test_len(self):
        """len() is the rendered length."""
        assert len(ChatBuilder().bold("x")) == 5


class TestClassResponse:
    """Class entries."""

    def test_without_library(self):
        """Unlinked, untagged class header."""
        response = ResponseComposer().class_response(info_of(OBJECT), 1)
        assert response.text == (
            "[tag:class] **`java.lang.Object`**: Class Object is the root of the class hierarchy."
        )
        assert response.split_strategy == SplitStrategy.WORD

    def test_java_library_untagged_and_linked(self):
        """The JDK is not tagged; the name links to the frame page."""
        response = ResponseComposer().class_response(info_of(OBJECT, JAVA), 1)
        assert response.text.startswith(
            "[tag:class] [**`java.lang.Object`**]"
            "(https://docs.oracle.com/javase/8/docs/api/index.html?java/lang/Object.html): "
        )

    def test_other_library_tagged(self):
        """Other libraries are tagged, spaces replaced with dashes."""
        doc = class_doc("com.google.common.base.Joiner")
        response = ResponseComposer().class_response(info_of(doc, GUAVA), 1)
        assert response.text.startswith("**[tag:Google-Guava]** [tag:class] ")

    def test_modifiers(self):
        """final and abstract are italic tags before the type."""
        response = ResponseComposer().class_response(info_of(STRING), 1)
        assert response.text.startswith("*[tag:final]* [tag:class] **`java.lang.String`**: ")

    def test_interface(self):
        """Interfaces show abstract and interface."""
        response = ResponseComposer().class_response(info_of(UTIL_LIST), 1)
        assert response.text.startswith("*[tag:abstract]* [tag:interface] **`java.util.List`**: ")

    def test_deprecated(self):
        """Deprecated classes are struck through."""
        doc = class_doc("old.Thing", deprecated=True)
        response = ResponseComposer().class_response(info_of(doc), 1)
        assert response.text.startswith("---[tag:class]--- ---**`old.Thing`**---: ")

    def test_first_paragraph_paginated(self):
        """A multi-paragraph description shows its position."""
        response = ResponseComposer().class_response(info_of(UTIL_LIST), 1)
        assert response.text.endswith("An ordered collection (also known as a sequence). (1/3)")

    def test_later_paragraph_has_no_header(self):
        """Paragraph 2 is printed bare."""
        response = ResponseComposer().class_response(info_of(UTIL_LIST), 2)
        assert response.text == "Lists typically allow duplicate elements. (2/3)"

    def test_reply(self):
        """Responses reply to the asking message."""
        message = ChatMessage("=javadoc Object", message_id=7)
        response = ResponseComposer().class_response(info_of(OBJECT), 1, message)
        assert response.text.startswith(":7 [tag:class]")


class TestMethodResponse:
    """Method entries."""

    def test_method_header(self):
        """Access modifiers are dropped, others tagged."""
        info = info_of(UTIL_LIST)
        response = ResponseComposer().method_response(method_of(info, "add(int, Object)"), info, 1)
        assert response.text == (
            "[tag:abstract] **`add(int, Object)`**: "
            "Inserts the specified element at the specified position in this list."
        )
        assert response.split_strategy == SplitStrategy.WORD

    def test_public_only(self):
        """A plain public method has no tags."""
        info = info_of(OBJECT)
        response = ResponseComposer().method_response(method_of(info, "hashCode()"), info, 1)
        assert response.text.startswith("**`hashCode()`**: ")

    def test_static(self):
        """static is tagged."""
        info = info_of(STRING)
        response = ResponseComposer().method_response(method_of(info, "valueOf(char[])"), info, 1)
        assert response.text.startswith("[tag:static] **`valueOf(char[])`**: ")

    def test_link_to_anchor(self):
        """The signature links to the class page plus the method anchor."""
        info = info_of(UTIL_LIST, JAVA)
        response = ResponseComposer().method_response(method_of(info, "add(Object)"), info, 1)
        assert (
            "[**`add(Object)`**](https://docs.oracle.com/javase/8/docs/api/java/util/List.html"
            "#add-java.lang.Object-)"
        ) in response.text

    def test_deprecated(self):
        """Deprecated methods are struck through."""
        info = info_of(STRING)
        response = ResponseComposer().method_response(
            method_of(info, "getBytes(int, int, byte[], int)"), info, 1
        )
        assert response.text.startswith("---**`getBytes(int, int, byte[], int)`**---: ")

    def test_later_paragraph(self):
        """Paragraph 2 drops the header."""
        doc = class_doc("p.C", methods=[method("go", description="One.\n\nTwo.")])
        info = info_of(doc)
        response = ResponseComposer().method_response(info.methods[0], info, 2)
        assert response.text == "Two. (2/2)"

    def test_library_tag(self):
        """Non-JDK libraries tag method entries too."""
        doc = class_doc("com.google.common.base.Joiner", methods=[method("on", "char")])
        info = info_of(doc, GUAVA)
        response = ResponseComposer().method_response(info.methods[0], info, 1)
        assert response.text.startswith("**[tag:Google-Guava]** ")


class TestChoiceResponses:
    """Numbered choice lists."""

    CHOICES = ["java.util.List#add(Object)", "java.util.List#add(int, Object)"]

    def test_method_choices_no_parameters(self):
        """Plain prompt when no parameters were given."""
        response = ResponseComposer().method_choices_response(self.CHOICES, None)
        assert response.text == (
            "Which one do you mean? (type the number)\n"
            "1. java.util.List#add(Object)\n"
            "2. java.util.List#add(int, Object)"
        )
        assert response.split_strategy == SplitStrategy.NEWLINE

    def test_single_choice(self):
        """A one-entry list asks 'this one'."""
        response = ResponseComposer().method_choices_response(self.CHOICES[:1], None)
        assert response.text.startswith("Did you mean this one? (type the number)\n1. ")

    def test_zero_arg_prompt(self):
        """Zero-arg queries get their own explanation."""
        response = ResponseComposer().method_choices_response(self.CHOICES, [])
        assert response.text.startswith(
            "I couldn't find a zero-arg signature for that method. "
            "Did you mean one of these? (type the number)"
        )

    def test_one_parameter_prompt(self):
        """Singular wording for one parameter."""
        response = ResponseComposer().method_choices_response(self.CHOICES[:1], ["long"])
        assert response.text.startswith(
            "I couldn't find a signature with that parameter. Did you mean this one? (type the number)"
        )

    def test_several_parameters_prompt(self):
        """Plural wording for several parameters."""
        response = ResponseComposer().method_choices_response(self.CHOICES, ["long", "long"])
        assert response.text.startswith("I couldn't find a signature with those parameters. ")

    def test_class_choices(self):
        """Class lists are numbered from 1."""
        response = ResponseComposer().class_choices_response(["java.awt.List", "java.util.List"])
        assert response.text == (
            "Which one do you mean? (type the number)\n1. java.awt.List\n2. java.util.List"
        )
        assert response.split_strategy == SplitStrategy.NEWLINE


class TestPlainResponses:
    """Not-found and plain text."""

    def test_class_not_found(self):
        """Apology without suggestions."""
        assert ResponseComposer().class_not_found([]).text == NOT_FOUND_CLASS

    def test_class_not_found_with_suggestions(self):
        """Suggestions are appended as code."""
        text = ResponseComposer().class_not_found(["java.lang.String", "java.lang.StringBuilder"]).text
        assert text == (
            "Sorry, I never heard of that class. :( "
            "Did you mean: `java.lang.String`, `java.lang.StringBuilder`?"
        )

    def test_plain_never_split(self):
        """Plain messages are not split."""
        response = ResponseComposer().plain("hello", ChatMessage("x", message_id=3))
        assert response.text == ":3 hello"
        assert response.split_strategy == SplitStrategy.NONE


class TestModifierOrder:
    """Canonical modifier order."""

    def test_known_order(self):
        """static comes before final."""
        assert ordered_modifiers({"final", "static"}) == ["static", "final"]

    def test_unknown_last(self):
        """Unknown modifiers go last."""
        assert ordered_modifiers({"sealed", "abstract"}) == ["abstract", "sealed"]


def test_jdk_library_fixture_is_untagged():
    """The sample JDK library name is 'Java', which is never tagged."""
    info = info_of(OBJECT, LibraryInfo(name=JDK_LIBRARY["name"], base_url=JDK_LIBRARY["base_url"]))
    assert "[tag:Java]" not in ResponseComposer().class_response(info, 1).text
