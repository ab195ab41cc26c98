"""
Resolver — Turns a parsed query into something the bot can answer

Resolution outcomes:
- CLASS / METHOD: a single documentation entry to print
- CLASS_CHOICES / METHOD_CHOICES: a numbered list for the user to pick from
- CLASS_NOT_FOUND / METHOD_NOT_FOUND: nothing matched

Ambiguity comes from two places. A class name can be defined by several
libraries or packages (java.util.List vs java.awt.List), and a method
name can be overloaded or inherited. When the class is ambiguous and a
method was asked for, every candidate class is searched and exact
signature matches win over name-only matches.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Tuple

from rapidfuzz import fuzz

from .index import DocumentationIndex, LookupStatus
from .methods import MethodResolver
from .models import ClassInfo, MethodInfo
from .query import ClassReference


logger = logging.getLogger(__name__)

# Minimum rapidfuzz ratio for a "did you mean" suggestion
SUGGESTION_CUTOFF = 80.0


class ResolutionKind(Enum):
    """What the bot should print."""
    CLASS = "class"
    METHOD = "method"
    CLASS_CHOICES = "class_choices"
    METHOD_CHOICES = "method_choices"
    CLASS_NOT_FOUND = "class_not_found"
    METHOD_NOT_FOUND = "method_not_found"


@dataclass
class Resolution:
    """Result of resolving a query."""
    kind: ResolutionKind
    reference: ClassReference
    class_info: Optional[ClassInfo] = None
    method: Optional[MethodInfo] = None
    choices: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    @property
    def is_choice_list(self) -> bool:
        return self.kind in (ResolutionKind.CLASS_CHOICES, ResolutionKind.METHOD_CHOICES)


def method_choice_label(info: ClassInfo, method: MethodInfo) -> str:
    """
    Label of a method in a choice list.

    The label is itself a valid query, so picking it re-runs the lookup.

    Example:
        java.util.List#add(int, Object)
    """
    return f"{info.name.fully_qualified}#{method.name}({', '.join(method.parameter_labels)})"


class AmbiguityResolver:
    """
    Resolves class references against a documentation index.

    Usage:
        resolver = AmbiguityResolver(index)
        resolution = resolver.resolve(parse_query("List#add"))
        if resolution.is_choice_list:
            tracker.offer(resolution.choices)
    """

    def __init__(self, index: DocumentationIndex, max_suggestions: int = 3):
        self.index = index
        self.methods = MethodResolver(index)
        self.max_suggestions = max_suggestions

    def resolve(self, reference: ClassReference) -> Resolution:
        """
        Resolve a reference.

        Raises:
            DocumentationError: if the index cannot be read
        """
        result = self.index.lookup(reference.class_name)

        if result.status == LookupStatus.FOUND:
            return self._resolve_single(reference, result.info)

        if result.status == LookupStatus.AMBIGUOUS:
            logger.debug("%r is ambiguous: %s", reference.class_name, result.candidates)
            return self._resolve_multiple(reference, result.candidates)

        return Resolution(
            kind=ResolutionKind.CLASS_NOT_FOUND,
            reference=reference,
            suggestions=self.suggest(reference.class_name),
        )

    def _resolve_single(self, reference: ClassReference, info: ClassInfo) -> Resolution:
        if reference.method_name is None:
            return Resolution(kind=ResolutionKind.CLASS, reference=reference, class_info=info)

        matches = self.methods.match(info, reference.method_name, reference.parameters)

        if matches.is_empty():
            return Resolution(kind=ResolutionKind.METHOD_NOT_FOUND, reference=reference, class_info=info)

        if matches.exact_signature is not None:
            return Resolution(
                kind=ResolutionKind.METHOD,
                reference=reference,
                class_info=info,
                method=matches.exact_signature,
            )

        if len(matches.matching_name) == 1 and reference.parameters is None:
            return Resolution(
                kind=ResolutionKind.METHOD,
                reference=reference,
                class_info=info,
                method=matches.matching_name[0],
            )

        return self._method_choices(reference, [(info, m) for m in matches.matching_name])

    def _resolve_multiple(self, reference: ClassReference, candidates: List[str]) -> Resolution:
        if reference.method_name is None:
            return Resolution(
                kind=ResolutionKind.CLASS_CHOICES,
                reference=reference,
                choices=sorted(candidates),
            )

        exact: List[Tuple[ClassInfo, MethodInfo]] = []
        by_name: List[Tuple[ClassInfo, MethodInfo]] = []
        for class_name in sorted(candidates):
            lookup = self.index.lookup(class_name)
            if lookup.status != LookupStatus.FOUND:
                continue
            info = lookup.info

            matches = self.methods.match(info, reference.method_name, reference.parameters)
            if matches.exact_signature is not None:
                exact.append((info, matches.exact_signature))
            by_name.extend((info, m) for m in matches.matching_name)

        if not exact and not by_name:
            return Resolution(kind=ResolutionKind.METHOD_NOT_FOUND, reference=reference)

        if len(exact) == 1:
            info, method = exact[0]
            return Resolution(
                kind=ResolutionKind.METHOD,
                reference=reference,
                class_info=info,
                method=method,
            )

        return self._method_choices(reference, exact if exact else by_name)

    def _method_choices(
        self,
        reference: ClassReference,
        entries: List[Tuple[ClassInfo, MethodInfo]]
    ) -> Resolution:
        return Resolution(
            kind=ResolutionKind.METHOD_CHOICES,
            reference=reference,
            choices=[method_choice_label(info, method) for info, method in entries],
        )

    def suggest(self, name: str) -> List[str]:
        """
        Known classes whose names are close to an unknown one.

        Simple names are compared unless the query is qualified.
        """
        if not name or self.max_suggestions <= 0:
            return []

        qualified = '.' in name
        name_lower = name.lower()
        scored = []
        for fully_qualified in self.index.enumerate_known_classes():
            target = fully_qualified if qualified else fully_qualified.rsplit('.', 1)[-1]
            score = fuzz.ratio(name_lower, target.lower())
            if score >= SUGGESTION_CUTOFF:
                scored.append((-score, fully_qualified))

        scored.sort()
        return [fully_qualified for _, fully_qualified in scored[:self.max_suggestions]]
