"""
Tests for AmbiguityResolver — queries to resolutions

These tests validate:
- Single class: class entry, method entry, method choices, method not found
- Ambiguous class: class choices, cross-class method resolution
- Unknown class: not found with fuzzy suggestions
- Choice labels are valid queries
"""

from docbot.core.index import MemoryIndex
from docbot.core.query import parse_query
from docbot.core.resolver import AmbiguityResolver, ResolutionKind, method_choice_label
from tests.factories import class_doc, method, records


def resolve(index, text):
    return AmbiguityResolver(index).resolve(parse_query(text))


class TestSingleClass:
    """The class name resolves to exactly one class."""

    def test_class_entry(self, jdk):
        """No method means the class itself."""
        resolution = resolve(jdk, "java.lang.String")
        assert resolution.kind == ResolutionKind.CLASS
        assert resolution.class_info.name.fully_qualified == "java.lang.String"
        assert not resolution.is_choice_list

    def test_class_case_insensitive(self, jdk):
        """Class names are matched case-insensitively."""
        assert resolve(jdk, "JAVA.LANG.string").kind == ResolutionKind.CLASS

    def test_qualified_name_beats_simple_names(self, jdk):
        """java.util.List is not ambiguous even though List is."""
        resolution = resolve(jdk, "java.util.List")
        assert resolution.kind == ResolutionKind.CLASS
        assert resolution.class_info.name.fully_qualified == "java.util.List"

    def test_exact_method(self, util_only):
        """List#add(Object) is a single entry."""
        resolution = resolve(util_only, "List#add(Object)")
        assert resolution.kind == ResolutionKind.METHOD
        assert resolution.method.signature_string == "add(Object)"
        assert resolution.class_info.name.fully_qualified == "java.util.List"

    def test_overloads_offer_choices(self, util_only):
        """List#add lists both overloads."""
        resolution = resolve(util_only, "List#add")
        assert resolution.kind == ResolutionKind.METHOD_CHOICES
        assert resolution.choices == [
            "java.util.List#add(Object)",
            "java.util.List#add(int, Object)",
        ]
        assert resolution.is_choice_list

    def test_single_name_match(self, jdk):
        """One method by that name is printed directly."""
        resolution = resolve(jdk, "ArrayList#ensureCapacity")
        assert resolution.kind == ResolutionKind.METHOD
        assert resolution.method.name == "ensureCapacity"

    def test_inherited_method_keeps_queried_class(self, jdk):
        """ArrayList#hashCode reports ArrayList as the class."""
        resolution = resolve(jdk, "ArrayList#hashCode")
        assert resolution.kind == ResolutionKind.METHOD
        assert resolution.class_info.name.fully_qualified == "java.util.ArrayList"

    def test_single_name_match_wrong_parameters(self, jdk):
        """With a parameter list that does not fit, even one match is offered as a choice."""
        resolution = resolve(jdk, "ArrayList#ensureCapacity(long)")
        assert resolution.kind == ResolutionKind.METHOD_CHOICES
        assert resolution.choices == ["java.util.ArrayList#ensureCapacity(int)"]

    def test_zero_arg_not_found_offers_overloads(self, jdk):
        """indexOf() has no zero-arg overload, so all overloads are offered."""
        resolution = resolve(jdk, "String#indexOf()")
        assert resolution.kind == ResolutionKind.METHOD_CHOICES
        assert len(resolution.choices) == 3
        assert resolution.reference.parameters == []

    def test_constructor(self, jdk):
        """String(char[]) resolves to the constructor."""
        resolution = resolve(jdk, "String(char[])")
        assert resolution.kind == ResolutionKind.METHOD
        assert resolution.method.signature_string == "String(char[])"

    def test_method_not_found(self, jdk):
        """Unknown method on a known class."""
        resolution = resolve(jdk, "String#frobnicate")
        assert resolution.kind == ResolutionKind.METHOD_NOT_FOUND
        assert resolution.class_info.name.fully_qualified == "java.lang.String"


class TestAmbiguousClass:
    """The class name matches several classes."""

    def test_class_choices_sorted(self, jdk):
        """List lists java.awt.List before java.util.List."""
        resolution = resolve(jdk, "List")
        assert resolution.kind == ResolutionKind.CLASS_CHOICES
        assert resolution.choices == ["java.awt.List", "java.util.List"]

    def test_single_exact_match_across_classes(self, jdk):
        """Only java.util.List has add(Object)."""
        resolution = resolve(jdk, "List#add(Object)")
        assert resolution.kind == ResolutionKind.METHOD
        assert resolution.class_info.name.fully_qualified == "java.util.List"
        assert resolution.method.signature_string == "add(Object)"

    def test_name_matches_across_classes(self, jdk):
        """List#add lists every add, class by class in sorted order."""
        resolution = resolve(jdk, "List#add")
        assert resolution.kind == ResolutionKind.METHOD_CHOICES
        assert resolution.choices == [
            "java.awt.List#add(String)",
            "java.awt.List#add(String, int)",
            "java.util.List#add(Object)",
            "java.util.List#add(int, Object)",
        ]

    def test_method_on_one_class_only(self, jdk):
        """getItem exists only on java.awt.List; a one-item list is still offered."""
        resolution = resolve(jdk, "List#getItem")
        assert resolution.kind == ResolutionKind.METHOD_CHOICES
        assert resolution.choices == ["java.awt.List#getItem(int)"]

    def test_several_exact_matches(self):
        """Exact matches in more than one class are offered as choices."""
        index = MemoryIndex(records(
            class_doc("a.Node", methods=[method("add", "int"), method("add", "long")]),
            class_doc("b.Node", methods=[method("add", "int")]),
        ))
        resolution = resolve(index, "Node#add(int)")
        assert resolution.kind == ResolutionKind.METHOD_CHOICES
        assert resolution.choices == ["a.Node#add(int)", "b.Node#add(int)"]

    def test_no_method_anywhere(self, jdk):
        """No candidate has the method."""
        resolution = resolve(jdk, "List#frobnicate")
        assert resolution.kind == ResolutionKind.METHOD_NOT_FOUND
        assert resolution.class_info is None


class TestNotFound:
    """Unknown classes."""

    def test_class_not_found(self, jdk):
        """Unknown name resolves to CLASS_NOT_FOUND."""
        resolution = resolve(jdk, "Frobnicator")
        assert resolution.kind == ResolutionKind.CLASS_NOT_FOUND
        assert resolution.suggestions == []

    def test_suggestion_for_typo(self, jdk):
        """A close simple name is suggested."""
        resolution = resolve(jdk, "Strng")
        assert resolution.suggestions == ["java.lang.String"]

    def test_suggestion_for_qualified_typo(self, jdk):
        """Qualified queries are compared against qualified names."""
        resolution = resolve(jdk, "java.util.ArayList")
        assert resolution.suggestions[0] == "java.util.ArrayList"
        assert "java.lang.String" not in resolution.suggestions

    def test_suggestions_disabled(self, jdk):
        """max_suggestions=0 turns suggestions off."""
        resolver = AmbiguityResolver(jdk, max_suggestions=0)
        assert resolver.resolve(parse_query("Strng")).suggestions == []

    def test_suggestions_capped(self):
        """No more than max_suggestions names are returned."""
        index = MemoryIndex(records(*[class_doc(f"p{i}.Widget") for i in range(5)]))
        assert len(AmbiguityResolver(index, max_suggestions=2).suggest("Widgit")) == 2


class TestChoiceLabels:
    """Labels in choice lists."""

    def test_label_format(self, jdk):
        """Label is the qualified class, '#', and simple parameter types."""
        info = jdk.lookup("java.lang.String").info
        getbytes = [m for m in info.methods if m.name == "getBytes"][0]
        assert method_choice_label(info, getbytes) == "java.lang.String#getBytes(int, int, byte[], int)"

    def test_label_resolves_back(self, jdk):
        """A label fed back as a query resolves to that exact method."""
        for label in resolve(jdk, "List#add").choices:
            resolution = resolve(jdk, label)
            assert resolution.kind == ResolutionKind.METHOD
            assert label.endswith(resolution.method.signature_string)
